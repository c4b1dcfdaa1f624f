from typing import Optional

from app.schemas.common import CamelModel, RecordResponse


class DocumentBase(CamelModel):
    name: Optional[str] = None
    category: Optional[str] = None
    file_type: Optional[str] = None
    file_size: Optional[int] = None
    file_url: Optional[str] = None
    file_name: Optional[str] = None
    upload_date: Optional[str] = None


class DocumentCreate(DocumentBase):
    id: Optional[str] = None


class DocumentUpdate(DocumentBase):
    pass


class DocumentResponse(DocumentBase, RecordResponse):
    pass


class UploadResponse(CamelModel):
    success: bool = True
    file_name: str
    original_name: str
    file_url: str
    file_type: str
    file_size: int


class UploadDelete(CamelModel):
    file_name: Optional[str] = None
