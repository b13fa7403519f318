"""Server-rendered fruit pages.

Browsers have no cookie session here, so every page receives the caller's
token and re-embeds it in each link and form action.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Form, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import RedirectResponse
from pydantic import ValidationError
from sqlalchemy.orm import Session

from orchard.api.dependencies import AuthContext, get_auth_context
from orchard.config import Settings, get_settings
from orchard.database import get_db
from orchard.resources import FRUITS
from orchard.schemas.fruit import FruitCreate, FruitUpdate
from orchard.services.resources import ResourceNotFoundError, ResourceService
from orchard.views.templating import templates, with_token

router = APIRouter(prefix="/fruits", tags=["views"], include_in_schema=False)

RESOURCE_PATH = "/fruits"


def get_fruit_service(
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> ResourceService:
    """Get the fruit service."""
    return ResourceService(db, FRUITS, settings.enforce_resource_ownership)


def find_fruit(service: ResourceService, fruit_id: int, auth: AuthContext):
    try:
        return service.show(fruit_id, auth.user)
    except ResourceNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


def validate_form(schema, **fields):
    """Run form fields through a schema; a missing checkbox means unchecked."""
    try:
        return schema(**fields)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=jsonable_encoder(e.errors())
        ) from e


def redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url, status_code=status.HTTP_303_SEE_OTHER)


@router.get("")
def index(
    request: Request,
    auth: Annotated[AuthContext, Depends(get_auth_context)],
    service: Annotated[ResourceService, Depends(get_fruit_service)],
):
    """Display the caller's fruits."""
    fruits = service.index(auth.user)
    return templates.TemplateResponse(
        request, "fruits/index.html", {"fruits": fruits, "token": auth.token}
    )


@router.get("/new")
def new(
    request: Request,
    auth: Annotated[AuthContext, Depends(get_auth_context)],
):
    """Display the new fruit form."""
    return templates.TemplateResponse(request, "fruits/new.html", {"token": auth.token})


@router.post("")
def create(
    auth: Annotated[AuthContext, Depends(get_auth_context)],
    service: Annotated[ResourceService, Depends(get_fruit_service)],
    name: Annotated[str, Form()],
    color: Annotated[str, Form()],
    ready_to_eat: Annotated[str | None, Form()] = None,
):
    """Create a fruit from the form and go back to the index."""
    data = validate_form(FruitCreate, name=name, color=color, ready_to_eat=ready_to_eat)
    service.create(auth.user, data.model_dump())
    return redirect(with_token(RESOURCE_PATH, auth.token))


@router.get("/{fruit_id}/edit")
def edit(
    fruit_id: int,
    request: Request,
    auth: Annotated[AuthContext, Depends(get_auth_context)],
    service: Annotated[ResourceService, Depends(get_fruit_service)],
):
    """Display the edit form."""
    fruit = find_fruit(service, fruit_id, auth)
    return templates.TemplateResponse(
        request, "fruits/edit.html", {"fruit": fruit, "token": auth.token}
    )


@router.get("/{fruit_id}")
def show(
    fruit_id: int,
    request: Request,
    auth: Annotated[AuthContext, Depends(get_auth_context)],
    service: Annotated[ResourceService, Depends(get_fruit_service)],
):
    """Display one fruit."""
    fruit = find_fruit(service, fruit_id, auth)
    return templates.TemplateResponse(
        request, "fruits/show.html", {"fruit": fruit, "token": auth.token}
    )


@router.put("/{fruit_id}")
def update(
    fruit_id: int,
    auth: Annotated[AuthContext, Depends(get_auth_context)],
    service: Annotated[ResourceService, Depends(get_fruit_service)],
    name: Annotated[str, Form()],
    color: Annotated[str, Form()],
    ready_to_eat: Annotated[str | None, Form()] = None,
):
    """Update a fruit from the edit form and show it."""
    data = validate_form(FruitUpdate, name=name, color=color, ready_to_eat=ready_to_eat)
    try:
        service.update(fruit_id, data.model_dump(exclude_unset=True), auth.user)
    except ResourceNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return redirect(with_token(f"{RESOURCE_PATH}/{fruit_id}", auth.token))


@router.delete("/{fruit_id}")
def destroy(
    fruit_id: int,
    auth: Annotated[AuthContext, Depends(get_auth_context)],
    service: Annotated[ResourceService, Depends(get_fruit_service)],
):
    """Delete a fruit and go back to the index."""
    try:
        service.destroy(fruit_id, auth.user)
    except ResourceNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return redirect(with_token(RESOURCE_PATH, auth.token))
