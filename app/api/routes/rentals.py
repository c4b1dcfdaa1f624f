from typing import List

from fastapi import APIRouter, Depends, status

from app.database import JsonStore, get_store
from app.dependencies import require_role
from app.models import UserRole
from app.schemas.common import SuccessResponse
from app.schemas.rental import RentalCreate, RentalResponse, RentalUpdate
from app.services.rental_service import RentalService

router = APIRouter()


def get_rental_service(store: JsonStore = Depends(get_store)) -> RentalService:
    return RentalService(store)


@router.get("", response_model=List[RentalResponse], response_model_exclude_unset=True)
def list_rentals(service: RentalService = Depends(get_rental_service)):
    """Get all rentals"""
    return service.list()


@router.post(
    "",
    response_model=RentalResponse,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
def create_rental(
    rental_in: RentalCreate,
    service: RentalService = Depends(get_rental_service),
):
    """Create a new rental"""
    return service.create(rental_in.to_record())


@router.get("/{rental_id}", response_model=RentalResponse, response_model_exclude_unset=True)
def get_rental(rental_id: str, service: RentalService = Depends(get_rental_service)):
    """Get a specific rental"""
    return service.get(rental_id)


@router.put("/{rental_id}", response_model=RentalResponse, response_model_exclude_unset=True)
def update_rental(
    rental_id: str,
    rental_update: RentalUpdate,
    service: RentalService = Depends(get_rental_service),
):
    """Update a rental"""
    return service.update(rental_id, rental_update.to_record())


@router.delete("/{rental_id}", response_model=SuccessResponse)
def delete_rental(
    rental_id: str,
    service: RentalService = Depends(get_rental_service),
    current_user: dict = Depends(require_role(UserRole.MANAGER)),
):
    """Delete a rental"""
    service.delete(rental_id)
    return SuccessResponse()
