import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from app.schemas.common import SuccessResponse
from app.schemas.document import UploadDelete, UploadResponse
from app.services.upload_service import FileStorage, get_file_storage

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("", response_model=UploadResponse)
async def upload_file(
    file: Optional[UploadFile] = File(None),
    storage: FileStorage = Depends(get_file_storage),
):
    """Upload a file"""
    if file is None or not file.filename:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file provided")
    content = await file.read()
    return storage.save(file.filename, content, file.content_type or "")


@router.delete("", response_model=SuccessResponse)
def delete_file(
    body: UploadDelete,
    storage: FileStorage = Depends(get_file_storage),
):
    """Delete an uploaded file"""
    if not body.file_name:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No fileName provided")
    storage.delete(body.file_name)
    return SuccessResponse()
