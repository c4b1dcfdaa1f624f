from typing import List

from fastapi import APIRouter, Depends, status

from app.database import JsonStore, get_store
from app.dependencies import require_role
from app.models import UserRole
from app.schemas.common import SuccessResponse
from app.schemas.document import DocumentCreate, DocumentResponse, DocumentUpdate
from app.services.document_service import DocumentService

router = APIRouter()


def get_document_service(store: JsonStore = Depends(get_store)) -> DocumentService:
    return DocumentService(store)


@router.get("", response_model=List[DocumentResponse], response_model_exclude_unset=True)
def list_documents(service: DocumentService = Depends(get_document_service)):
    """Get all documents"""
    return service.list()


@router.post(
    "",
    response_model=DocumentResponse,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
def create_document(
    document_in: DocumentCreate,
    service: DocumentService = Depends(get_document_service),
):
    """Create a new document"""
    return service.create(document_in.to_record())


@router.get("/{document_id}", response_model=DocumentResponse, response_model_exclude_unset=True)
def get_document(document_id: str, service: DocumentService = Depends(get_document_service)):
    """Get a specific document"""
    return service.get(document_id)


@router.put("/{document_id}", response_model=DocumentResponse, response_model_exclude_unset=True)
def update_document(
    document_id: str,
    document_update: DocumentUpdate,
    service: DocumentService = Depends(get_document_service),
):
    """Update a document"""
    return service.update(document_id, document_update.to_record())


@router.delete("/{document_id}", response_model=SuccessResponse)
def delete_document(
    document_id: str,
    service: DocumentService = Depends(get_document_service),
    current_user: dict = Depends(require_role(UserRole.MANAGER)),
):
    """Delete a document"""
    service.delete(document_id)
    return SuccessResponse()
