"""Signed session tokens."""

import logging
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt

logger = logging.getLogger(__name__)


class TokenService:
    """Issue and verify JWT bearer tokens.

    Tokens carry the user id in ``sub``. They only expire when
    ``expiration_minutes`` is set; otherwise a token stays valid for as long
    as the signing secret is unchanged and the user exists.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expiration_minutes: int | None = None):
        if not secret:
            raise ValueError("A signing secret is required")
        self.secret = secret
        self.algorithm = algorithm
        self.expiration_minutes = expiration_minutes

    def create_access_token(self, user_id: int, email: str) -> str:
        """Create a JWT access token."""
        to_encode: dict = {"sub": str(user_id), "email": email}
        if self.expiration_minutes is not None:
            to_encode["exp"] = datetime.now(UTC) + timedelta(minutes=self.expiration_minutes)
        return jwt.encode(to_encode, self.secret, algorithm=self.algorithm)

    def decode_access_token(self, token: str) -> dict | None:
        """Decode and validate a JWT token."""
        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except JWTError as e:
            logger.debug(f"Rejected token: {e}")
            return None

    def user_id_from_token(self, token: str) -> int | None:
        """Return the user id a valid token was issued for."""
        payload = self.decode_access_token(token)
        if payload is None:
            return None
        try:
            return int(payload["sub"])
        except (KeyError, TypeError, ValueError):
            return None
