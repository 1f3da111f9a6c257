"""Authentication routes."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from contactbook.api.deps import CurrentUser
from contactbook.core.auth import create_access_token
from contactbook.core.password import verify_password
from contactbook.persistence.database import get_db
from contactbook.persistence.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

router = APIRouter()


class LoginRequest(BaseModel):
    """Login request."""

    email: str
    password: str


class LoginResponse(BaseModel):
    """Login response."""

    access_token: str
    token_type: str = "bearer"
    role: str
    email: str


class UserInfoResponse(BaseModel):
    """Current user info response."""

    id: int
    email: str
    role: str


@router.post("/login", response_model=LoginResponse)
async def login(
    login_data: LoginRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> LoginResponse:
    """Exchange email and password for a bearer token."""
    user = await UserRepository(db).get_by_email(login_data.email)

    if user is None or not verify_password(login_data.password, user.hashed_password):
        logger.info("Login failed")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )

    # sub must be a string for JWT compatibility
    access_token = create_access_token(data={"sub": str(user.id)})

    return LoginResponse(
        access_token=access_token,
        role=user.role,
        email=user.email,
    )


@router.get("/me", response_model=UserInfoResponse)
async def get_current_user_info(current_user: CurrentUser) -> UserInfoResponse:
    """Get current authenticated user information."""
    return UserInfoResponse(
        id=current_user.id,
        email=current_user.email,
        role=current_user.role,
    )
