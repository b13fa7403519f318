"""User API endpoints: registration, login and profile management."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from orchard.api.dependencies import get_current_user, get_token_service
from orchard.database import get_db
from orchard.models.user import User
from orchard.schemas.auth import (
    AuthResponse,
    MessageResponse,
    UserLogin,
    UserRegister,
    UserResponse,
    UserUpdate,
)
from orchard.services.auth import (
    EmailAlreadyRegisteredError,
    authenticate_user,
    create_user,
    delete_user,
    update_user,
)
from orchard.services.tokens import TokenService

router = APIRouter(prefix="/api/users", tags=["users"])


def ensure_self(user_id: int, current_user: User) -> None:
    """Users may only change their own account."""
    if user_id != current_user.id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You can only modify your own account",
        )


@router.post("", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserRegister,
    db: Annotated[Session, Depends(get_db)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
):
    """Register a new user."""
    try:
        user = create_user(db, user_data.email, user_data.password, user_data.name)
    except EmailAlreadyRegisteredError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    return AuthResponse(
        access_token=tokens.create_access_token(user.id, user.email),
        user=UserResponse.model_validate(user),
    )


@router.post("/login", response_model=AuthResponse)
def login(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
):
    """Login with email and password."""
    user = authenticate_user(db, credentials.email, credentials.password)

    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return AuthResponse(
        access_token=tokens.create_access_token(user.id, user.email),
        user=UserResponse.model_validate(user),
    )


@router.get("/profile", response_model=UserResponse)
def get_profile(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get current user information."""
    return current_user


@router.put("/{user_id}", response_model=UserResponse)
def update_profile(
    user_id: int,
    user_data: UserUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Update the current user's email, name or password."""
    ensure_self(user_id, current_user)

    try:
        return update_user(db, current_user, user_data.model_dump(exclude_unset=True))
    except EmailAlreadyRegisteredError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e


@router.delete("/{user_id}", response_model=MessageResponse)
def delete_account(
    user_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Delete the current user's account and everything they own."""
    ensure_self(user_id, current_user)
    delete_user(db, current_user)
    return MessageResponse(message="User deleted")
