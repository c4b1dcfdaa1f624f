from typing import List, Optional, Union

from app.schemas.common import CamelModel, RecordResponse


class PropertyBase(CamelModel):
    name: Optional[str] = None
    type: Optional[str] = None
    location: Optional[str] = None
    # numeric strings are accepted; the service reports bad values
    price: Optional[Union[float, str]] = None
    area: Optional[Union[float, str]] = None
    status: Optional[str] = None
    description: Optional[str] = None
    images: Optional[List[str]] = None
    features: Optional[List[str]] = None


class PropertyCreate(PropertyBase):
    id: Optional[str] = None


class PropertyUpdate(PropertyBase):
    pass


class PropertyResponse(PropertyBase, RecordResponse):
    pass
