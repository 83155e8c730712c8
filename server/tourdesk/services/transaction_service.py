"""Transaction service for income and expense records."""

from ..core.storage import Repository
from ..models import EXPENSE_CATEGORIES, INCOME_CATEGORIES, Transaction, TransactionType
from .base import EntityService


class TransactionService(EntityService[Transaction]):
    """Service for transaction-related operations."""

    resource_type = "transaction"

    @property
    def repository(self) -> Repository[Transaction]:
        return self.store.transactions

    @staticmethod
    def suggested_categories() -> dict[TransactionType, tuple[str, ...]]:
        """Categories the front end offers per transaction type."""
        return {
            TransactionType.INCOME: INCOME_CATEGORIES,
            TransactionType.EXPENSE: EXPENSE_CATEGORIES,
        }
