from typing import Optional, Union

from app.schemas.common import CamelModel, RecordResponse


class RentalContractBase(CamelModel):
    landlord_name: Optional[str] = None
    tenant_name: Optional[str] = None
    tenant_id_passport: Optional[str] = None
    tenant_phone: Optional[str] = None
    property_id: Optional[str] = None
    valid_from: Optional[str] = None
    valid_to: Optional[str] = None
    monthly_rent: Optional[Union[float, str]] = None
    status: Optional[str] = None
    type: Optional[str] = None


class RentalContractCreate(RentalContractBase):
    id: Optional[str] = None
    contract_number: Optional[str] = None


class RentalContractUpdate(RentalContractBase):
    pass


class RentalContractResponse(RentalContractBase, RecordResponse):
    contract_number: Optional[str] = None
