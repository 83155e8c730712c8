"""File router for uploads and uploaded file metadata."""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import JSONResponse

from ..core.storage import EntityStore, get_store
from ..schemas.common import MessageResponse
from ..schemas.file import StoredFile, UpdateFileRequest
from ..services.file_service import FileService

router = APIRouter(prefix="/api/files", tags=["files"])

STORE_DEPENDENCY = Depends(get_store)
FILE_PART = File(None, description="File to upload")
CATEGORY_PART = Form(None, description="documents, images, reports, contracts or other")


@router.get("", response_model=list[StoredFile])
async def list_files(store: EntityStore = STORE_DEPENDENCY) -> JSONResponse:
    """List metadata for all uploaded files."""
    files = FileService(store).list_all()
    return JSONResponse(
        status_code=200,
        content=[StoredFile.model_validate(stored).to_payload() for stored in files]
    )


@router.get("/{file_id}", response_model=StoredFile)
async def get_file(file_id: str, store: EntityStore = STORE_DEPENDENCY) -> JSONResponse:
    stored = FileService(store).get_by_id_or_raise(file_id)
    return JSONResponse(status_code=200, content=StoredFile.model_validate(stored).to_payload())


@router.post("/upload", response_model=StoredFile, status_code=201)
async def upload_file(
    file: Optional[UploadFile] = FILE_PART,
    category: Optional[str] = CATEGORY_PART,
    store: EntityStore = STORE_DEPENDENCY
) -> JSONResponse:
    """
    Upload a file as multipart form data.

    The blob is stored under a generated name; the original name, MIME type and
    size are recorded alongside it.
    """
    stored = await FileService(store).register_upload(file, category)
    return JSONResponse(status_code=201, content=StoredFile.model_validate(stored).to_payload())


@router.put("/{file_id}", response_model=StoredFile)
async def update_file(
    file_id: str,
    request: UpdateFileRequest,
    store: EntityStore = STORE_DEPENDENCY
) -> JSONResponse:
    """Rename or re-categorize an uploaded file."""
    stored = FileService(store).update_or_raise(file_id, request)
    return JSONResponse(status_code=200, content=StoredFile.model_validate(stored).to_payload())


@router.delete("/{file_id}", response_model=MessageResponse)
async def delete_file(file_id: str, store: EntityStore = STORE_DEPENDENCY) -> JSONResponse:
    await FileService(store).delete_with_blob(file_id)
    return JSONResponse(
        status_code=200,
        content=MessageResponse(message="File deleted successfully").model_dump()
    )
