"""Transaction router for income and expense records."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..core.storage import EntityStore, get_store
from ..models import TransactionType
from ..schemas.common import MessageResponse
from ..schemas.transaction import (
    CreateTransactionRequest,
    Transaction,
    TransactionCategories,
    UpdateTransactionRequest,
)
from ..services.transaction_service import TransactionService

router = APIRouter(prefix="/api/transactions", tags=["transactions"])

STORE_DEPENDENCY = Depends(get_store)


@router.get("", response_model=list[Transaction])
async def list_transactions(store: EntityStore = STORE_DEPENDENCY) -> JSONResponse:
    """List all transactions in the order they were recorded."""
    transactions = TransactionService(store).list_all()
    return JSONResponse(
        status_code=200,
        content=[Transaction.model_validate(transaction).to_payload() for transaction in transactions]
    )


@router.get("/categories", response_model=TransactionCategories)
async def get_transaction_categories() -> JSONResponse:
    """Suggested categories per transaction type; any other category is accepted too."""
    suggestions = TransactionService.suggested_categories()
    response_data = TransactionCategories(
        income=list(suggestions[TransactionType.INCOME]),
        expense=list(suggestions[TransactionType.EXPENSE]),
    )
    return JSONResponse(status_code=200, content=response_data.to_payload())


@router.get("/{transaction_id}", response_model=Transaction)
async def get_transaction(transaction_id: str, store: EntityStore = STORE_DEPENDENCY) -> JSONResponse:
    transaction = TransactionService(store).get_by_id_or_raise(transaction_id)
    return JSONResponse(status_code=200, content=Transaction.model_validate(transaction).to_payload())


@router.post("", response_model=Transaction, status_code=201)
async def create_transaction(
    request: CreateTransactionRequest,
    store: EntityStore = STORE_DEPENDENCY
) -> JSONResponse:
    """Record a transaction."""
    transaction = TransactionService(store).create(request)
    return JSONResponse(status_code=201, content=Transaction.model_validate(transaction).to_payload())


@router.put("/{transaction_id}", response_model=Transaction)
async def update_transaction(
    transaction_id: str,
    request: UpdateTransactionRequest,
    store: EntityStore = STORE_DEPENDENCY
) -> JSONResponse:
    transaction = TransactionService(store).update_or_raise(transaction_id, request)
    return JSONResponse(status_code=200, content=Transaction.model_validate(transaction).to_payload())


@router.delete("/{transaction_id}", response_model=MessageResponse)
async def delete_transaction(transaction_id: str, store: EntityStore = STORE_DEPENDENCY) -> JSONResponse:
    TransactionService(store).delete_or_raise(transaction_id)
    return JSONResponse(
        status_code=200,
        content=MessageResponse(message="Transaction deleted successfully").model_dump()
    )
