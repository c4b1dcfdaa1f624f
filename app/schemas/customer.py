from typing import List, Optional

from app.schemas.common import CamelModel, RecordResponse


class CustomerBase(CamelModel):
    name: Optional[str] = None
    type: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    id_number: Optional[str] = None
    address: Optional[str] = None
    notes: Optional[str] = None
    assigned_property_ids: Optional[List[str]] = None


class CustomerCreate(CustomerBase):
    id: Optional[str] = None


class CustomerUpdate(CustomerBase):
    pass


class CustomerResponse(CustomerBase, RecordResponse):
    pass
