"""
Authentication Endpoints
Login and profile of the current user
"""
from fastapi import APIRouter, Depends, HTTPException, status

from app.database import JsonStore, get_store
from app.dependencies import get_current_user
from app.core.security import create_access_token
from app.schemas.user import Token, UserLogin, UserResponse
from app.services.auth_service import UserService, authenticate_user

router = APIRouter()


@router.post("/login", response_model=Token)
def login(user_credentials: UserLogin, store: JsonStore = Depends(get_store)):
    """Login and get access token with user info"""
    user = authenticate_user(UserService(store), user_credentials.email, user_credentials.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token = create_access_token(data={"sub": user["email"]})
    return Token(
        access_token=access_token,
        user_id=user["id"],
        name=user.get("name") or "",
        email=user["email"],
        role=user.get("role") or "user",
    )


@router.get("/me", response_model=UserResponse, response_model_exclude_unset=True)
def get_current_user_info(current_user: dict = Depends(get_current_user)):
    """Get current user information"""
    return current_user
