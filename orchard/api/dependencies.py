"""FastAPI dependencies for authentication and database.

Authentication accepts the token from a ``token`` query parameter (used by
the server-rendered pages, which have no cookie store and carry the token in
every link) or from an ``Authorization: Bearer`` header (used by API
clients). The query parameter wins when both are present.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Annotated

from fastapi import Depends, HTTPException, Query, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from orchard.config import Settings, get_settings
from orchard.database import get_db
from orchard.models.user import User
from orchard.services.auth import get_user
from orchard.services.tokens import TokenService

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


class AuthFailure(str, Enum):
    """Why a request was rejected. Logged only; clients always see 401."""

    MISSING_TOKEN = "missing_token"
    INVALID_TOKEN = "invalid_token"
    UNKNOWN_USER = "unknown_user"


class NotAuthorizedError(HTTPException):
    """Uniform 401 for every authentication failure."""

    def __init__(self, reason: AuthFailure):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authorized",
            headers={"WWW-Authenticate": "Bearer"},
        )
        self.reason = reason


@dataclass
class AuthContext:
    """Authenticated caller plus the raw token they presented."""

    user: User
    token: str


def get_token_service(settings: Annotated[Settings, Depends(get_settings)]) -> TokenService:
    """Build the token service from explicit configuration."""
    return TokenService(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expiration_minutes=settings.jwt_expiration_minutes,
    )


def extract_token(
    token: Annotated[str | None, Query(description="Session token for browser views")] = None,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)] = None,
) -> str | None:
    """Pick the token from the query string first, then the Authorization header."""
    if token:
        return token
    if credentials is not None and credentials.credentials:
        return credentials.credentials
    return None


def get_auth_context(
    token: Annotated[str | None, Depends(extract_token)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
    db: Annotated[Session, Depends(get_db)],
) -> AuthContext:
    """Resolve the caller from their token or reject the request."""
    if not token:
        raise _reject(AuthFailure.MISSING_TOKEN)

    user_id = tokens.user_id_from_token(token)
    if user_id is None:
        raise _reject(AuthFailure.INVALID_TOKEN)

    user = get_user(db, user_id)
    if user is None:
        raise _reject(AuthFailure.UNKNOWN_USER)

    return AuthContext(user=user, token=token)


def get_current_user(auth: Annotated[AuthContext, Depends(get_auth_context)]) -> User:
    """Get the current authenticated user."""
    return auth.user


def _reject(reason: AuthFailure) -> NotAuthorizedError:
    logger.info(f"Authentication failed: {reason.value}")
    return NotAuthorizedError(reason)
