from typing import List

from fastapi import APIRouter, Depends, status

from app.database import JsonStore, get_store
from app.dependencies import require_role
from app.models import UserRole
from app.schemas.common import SuccessResponse
from app.schemas.rental_contract import (
    RentalContractCreate, RentalContractResponse, RentalContractUpdate,
)
from app.services.rental_contract_service import RentalContractService

router = APIRouter()


def get_contract_service(store: JsonStore = Depends(get_store)) -> RentalContractService:
    return RentalContractService(store)


@router.get("", response_model=List[RentalContractResponse], response_model_exclude_unset=True)
def list_contracts(service: RentalContractService = Depends(get_contract_service)):
    """Get all rental contracts"""
    return service.list()


@router.post(
    "",
    response_model=RentalContractResponse,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
def create_contract(
    contract_in: RentalContractCreate,
    service: RentalContractService = Depends(get_contract_service),
):
    """Create a rental contract; the contract number is generated when omitted"""
    return service.create(contract_in.to_record())


@router.get("/{contract_id}", response_model=RentalContractResponse, response_model_exclude_unset=True)
def get_contract(contract_id: str, service: RentalContractService = Depends(get_contract_service)):
    return service.get(contract_id)


@router.put("/{contract_id}", response_model=RentalContractResponse, response_model_exclude_unset=True)
def update_contract(
    contract_id: str,
    contract_update: RentalContractUpdate,
    service: RentalContractService = Depends(get_contract_service),
):
    return service.update(contract_id, contract_update.to_record())


@router.delete("/{contract_id}", response_model=SuccessResponse)
def delete_contract(
    contract_id: str,
    service: RentalContractService = Depends(get_contract_service),
    current_user: dict = Depends(require_role(UserRole.MANAGER)),
):
    service.delete(contract_id)
    return SuccessResponse()
