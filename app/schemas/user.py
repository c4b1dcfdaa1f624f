from typing import Optional

from pydantic import BaseModel, EmailStr

from app.schemas.common import CamelModel


class UserLogin(BaseModel):
    email: EmailStr
    password: str


class UserResponse(CamelModel):
    id: str
    email: str
    name: Optional[str] = None
    role: str
    created_at: Optional[str] = None


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user_id: str
    name: str
    email: str
    role: str
