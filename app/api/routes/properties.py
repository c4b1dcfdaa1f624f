from typing import List

from fastapi import APIRouter, Depends, status

from app.database import JsonStore, get_store
from app.dependencies import require_role
from app.models import UserRole
from app.schemas.common import SuccessResponse
from app.schemas.property import PropertyCreate, PropertyResponse, PropertyUpdate
from app.services.property_service import PropertyService

router = APIRouter()


def get_property_service(store: JsonStore = Depends(get_store)) -> PropertyService:
    return PropertyService(store)


@router.get("", response_model=List[PropertyResponse], response_model_exclude_unset=True)
def list_properties(service: PropertyService = Depends(get_property_service)):
    """Get all properties"""
    return service.list()


@router.post(
    "",
    response_model=PropertyResponse,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
def create_property(
    property_in: PropertyCreate,
    service: PropertyService = Depends(get_property_service),
):
    """Create a new property"""
    return service.create(property_in.to_record())


@router.get("/{property_id}", response_model=PropertyResponse, response_model_exclude_unset=True)
def get_property(property_id: str, service: PropertyService = Depends(get_property_service)):
    """Get a specific property"""
    return service.get(property_id)


@router.put("/{property_id}", response_model=PropertyResponse, response_model_exclude_unset=True)
def update_property(
    property_id: str,
    property_update: PropertyUpdate,
    service: PropertyService = Depends(get_property_service),
):
    """Update a property"""
    return service.update(property_id, property_update.to_record())


@router.delete("/{property_id}", response_model=SuccessResponse)
def delete_property(
    property_id: str,
    service: PropertyService = Depends(get_property_service),
    current_user: dict = Depends(require_role(UserRole.MANAGER)),
):
    """Delete a property"""
    service.delete(property_id)
    return SuccessResponse()
