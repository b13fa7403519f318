"""Authentication service for password handling and the user directory."""

import logging

from passlib.context import CryptContext
from sqlalchemy.orm import Session

from orchard.models.fruit import Fruit
from orchard.models.item import Item
from orchard.models.post import Post
from orchard.models.user import User

logger = logging.getLogger(__name__)

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

OWNED_MODELS = (Fruit, Item, Post)


class EmailAlreadyRegisteredError(ValueError):
    """Raised when an email is already taken by another user."""


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def normalize_email(email: str) -> str:
    """Emails are compared case-insensitively."""
    return email.strip().lower()


def authenticate_user(db: Session, email: str, password: str) -> User | None:
    """Authenticate a user by email and password."""
    user = get_user_by_email(db, email)
    if not user:
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email."""
    return db.query(User).filter(User.email == normalize_email(email)).first()


def get_user(db: Session, user_id: int) -> User | None:
    """Get a user by id."""
    return db.query(User).filter(User.id == user_id).first()


def create_user(db: Session, email: str, password: str, name: str | None = None) -> User:
    """Create a new user."""
    if get_user_by_email(db, email):
        raise EmailAlreadyRegisteredError("Email already registered")

    hashed_password = get_password_hash(password)
    user = User(email=normalize_email(email), password_hash=hashed_password, name=name)
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info(f"Registered user {user.id}")
    return user


def update_user(db: Session, user: User, changes: dict) -> User:
    """Apply a partial profile update.

    Only ``email``, ``name`` and ``password`` are writable. A new password is
    hashed before it is stored.
    """
    if changes.get("email") is not None:
        email = normalize_email(changes["email"])
        existing = get_user_by_email(db, email)
        if existing and existing.id != user.id:
            raise EmailAlreadyRegisteredError("Email already registered")
        user.email = email
    if "name" in changes:
        user.name = changes["name"]
    if changes.get("password") is not None:
        user.password_hash = get_password_hash(changes["password"])

    db.commit()
    db.refresh(user)
    return user


def delete_user(db: Session, user: User) -> None:
    """Delete a user along with every resource they own."""
    user_id = user.id
    user.fruits.clear()
    user.items.clear()
    user.posts.clear()
    for model in OWNED_MODELS:
        for resource in db.query(model).filter(model.owner_id == user_id).all():
            db.delete(resource)
    db.delete(user)
    db.commit()
    logger.info(f"Deleted user {user_id}")
