from typing import List

from fastapi import APIRouter, Depends, status

from app.database import JsonStore, get_store
from app.dependencies import require_role
from app.models import UserRole
from app.schemas.common import SuccessResponse
from app.schemas.customer import CustomerCreate, CustomerResponse, CustomerUpdate
from app.services.customer_service import CustomerService

router = APIRouter()


def get_customer_service(store: JsonStore = Depends(get_store)) -> CustomerService:
    return CustomerService(store)


@router.get("", response_model=List[CustomerResponse], response_model_exclude_unset=True)
def list_customers(service: CustomerService = Depends(get_customer_service)):
    """Get all customers"""
    return service.list()


@router.post(
    "",
    response_model=CustomerResponse,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
def create_customer(
    customer_in: CustomerCreate,
    service: CustomerService = Depends(get_customer_service),
):
    """Create a new customer"""
    return service.create(customer_in.to_record())


@router.get("/{customer_id}", response_model=CustomerResponse, response_model_exclude_unset=True)
def get_customer(customer_id: str, service: CustomerService = Depends(get_customer_service)):
    """Get a specific customer"""
    return service.get(customer_id)


@router.put("/{customer_id}", response_model=CustomerResponse, response_model_exclude_unset=True)
def update_customer(
    customer_id: str,
    customer_update: CustomerUpdate,
    service: CustomerService = Depends(get_customer_service),
):
    """Update a customer"""
    return service.update(customer_id, customer_update.to_record())


@router.delete("/{customer_id}", response_model=SuccessResponse)
def delete_customer(
    customer_id: str,
    service: CustomerService = Depends(get_customer_service),
    current_user: dict = Depends(require_role(UserRole.MANAGER)),
):
    """Delete a customer"""
    service.delete(customer_id)
    return SuccessResponse()
