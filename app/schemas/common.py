"""
Shared schema base
Records travel as camelCase JSON; unknown fields are kept as they are.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_record(self) -> dict:
        """Fields the client actually sent, keyed as stored."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class RecordResponse(CamelModel):
    id: str
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class SuccessResponse(BaseModel):
    success: bool = True


class ErrorResponse(BaseModel):
    success: bool = False
    detail: str
    errors: List[str] = []
