"""Server-rendered sign-up and sign-in pages."""

from typing import Annotated

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import RedirectResponse
from pydantic import ValidationError
from sqlalchemy.orm import Session

from orchard.api.dependencies import get_token_service
from orchard.database import get_db
from orchard.schemas.auth import UserRegister
from orchard.services.auth import EmailAlreadyRegisteredError, authenticate_user, create_user
from orchard.services.tokens import TokenService
from orchard.views.templating import templates, with_token

router = APIRouter(prefix="/users", tags=["views"], include_in_schema=False)

HOME_PATH = "/fruits"


@router.get("/signup")
def sign_up(request: Request):
    """Display the sign-up form."""
    return templates.TemplateResponse(request, "users/signup.html", {})


@router.get("/signin")
def sign_in(request: Request):
    """Display the sign-in form."""
    return templates.TemplateResponse(request, "users/signin.html", {})


@router.post("")
def register(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
    email: Annotated[str, Form()],
    password: Annotated[str, Form()],
    name: Annotated[str | None, Form()] = None,
):
    """Create an account and land on the fruit index with a fresh token."""
    try:
        data = UserRegister(email=email, password=password, name=name or None)
        user = create_user(db, data.email, data.password, data.name)
    except ValidationError as e:
        return templates.TemplateResponse(
            request,
            "users/signup.html",
            {"error": "; ".join(err["msg"] for err in e.errors())},
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    except EmailAlreadyRegisteredError as e:
        return templates.TemplateResponse(
            request,
            "users/signup.html",
            {"error": str(e)},
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    token = tokens.create_access_token(user.id, user.email)
    return RedirectResponse(with_token(HOME_PATH, token), status_code=status.HTTP_303_SEE_OTHER)


@router.post("/login")
def login(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
    email: Annotated[str, Form()],
    password: Annotated[str, Form()],
):
    """Sign in and land on the fruit index with a fresh token."""
    user = authenticate_user(db, email, password)
    if not user:
        return templates.TemplateResponse(
            request,
            "users/signin.html",
            {"error": "Incorrect email or password"},
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    token = tokens.create_access_token(user.id, user.email)
    return RedirectResponse(with_token(HOME_PATH, token), status_code=status.HTTP_303_SEE_OTHER)
