"""JSON API endpoints for owned resources.

Every resource type gets the same five routes under ``/api/<plural>``, all
behind authentication. The routers are built from a ``ResourceDefinition``.
"""

from collections.abc import Callable
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from orchard.api.dependencies import get_current_user
from orchard.config import Settings, get_settings
from orchard.database import get_db
from orchard.models.user import User
from orchard.resources import FRUITS, ITEMS, POSTS, ListScope, ResourceDefinition
from orchard.schemas.auth import MessageResponse
from orchard.services.resources import ResourceNotFoundError, ResourceService


def resource_service_dependency(
    definition: ResourceDefinition,
) -> Callable[..., ResourceService]:
    """Build a dependency that yields a ResourceService for one resource type."""

    def get_resource_service(
        db: Annotated[Session, Depends(get_db)],
        settings: Annotated[Settings, Depends(get_settings)],
    ) -> ResourceService:
        return ResourceService(db, definition, settings.enforce_resource_ownership)

    return get_resource_service


def not_found(e: ResourceNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


def build_resource_router(definition: ResourceDefinition) -> APIRouter:
    """Create the CRUD router for a resource type."""
    router = APIRouter(prefix=f"/api/{definition.plural}", tags=[definition.plural])

    create_schema = definition.create_schema
    update_schema = definition.update_schema
    response_schema = definition.response_schema
    Service = Annotated[ResourceService, Depends(resource_service_dependency(definition))]
    CurrentUser = Annotated[User, Depends(get_current_user)]

    @router.get("", response_model=list[response_schema])
    def list_resources(
        current_user: CurrentUser,
        service: Service,
        category: str | None = Query(default=None, description="Exact category match"),
        search: str | None = Query(default=None, description="Case-insensitive text search"),
    ):
        """List resources visible to the current user, newest first."""
        return service.index(current_user, category=category, search=search)

    if definition.scope == ListScope.GLOBAL:

        @router.get("/mine", response_model=list[response_schema])
        def list_own_resources(
            current_user: CurrentUser,
            service: Service,
            search: str | None = Query(default=None, description="Case-insensitive text search"),
        ):
            """List the current user's own resources, including unavailable ones."""
            return service.index(current_user, search=search, scope=ListScope.OWNED)

    @router.post("", response_model=response_schema, status_code=status.HTTP_201_CREATED)
    def create_resource(
        data: create_schema,
        current_user: CurrentUser,
        service: Service,
    ):
        """Create a resource owned by the current user."""
        return service.create(current_user, data.model_dump())

    @router.get("/{resource_id}", response_model=response_schema)
    def get_resource(
        resource_id: int,
        current_user: CurrentUser,
        service: Service,
    ):
        """Get a specific resource."""
        try:
            return service.show(resource_id, current_user)
        except ResourceNotFoundError as e:
            raise not_found(e) from e

    @router.put("/{resource_id}", response_model=response_schema)
    def update_resource(
        resource_id: int,
        data: update_schema,
        current_user: CurrentUser,
        service: Service,
    ):
        """Update the fields sent in the request body."""
        try:
            return service.update(
                resource_id, data.model_dump(exclude_unset=True, exclude_none=True), current_user
            )
        except ResourceNotFoundError as e:
            raise not_found(e) from e

    @router.delete("/{resource_id}", response_model=MessageResponse)
    def delete_resource(
        resource_id: int,
        current_user: CurrentUser,
        service: Service,
    ):
        """Delete a resource."""
        try:
            service.destroy(resource_id, current_user)
        except ResourceNotFoundError as e:
            raise not_found(e) from e
        return MessageResponse(message=f"{definition.label} successfully deleted")

    return router


fruits_router = build_resource_router(FRUITS)
items_router = build_resource_router(ITEMS)
posts_router = build_resource_router(POSTS)
