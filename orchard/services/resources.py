"""Generic CRUD over owned resources."""

import logging
from typing import Any

from sqlalchemy import or_, update
from sqlalchemy.orm import Session

from orchard.models.user import User
from orchard.resources import ListScope, ResourceDefinition

logger = logging.getLogger(__name__)

# Primary keys are 32-bit INTEGER columns.
MAX_RESOURCE_ID = 2**31 - 1


class ResourceNotFoundError(Exception):
    """Raised when a resource id does not resolve."""

    def __init__(self, definition: ResourceDefinition, resource_id: int):
        super().__init__(f"{definition.label} not found")
        self.definition = definition
        self.resource_id = resource_id


class ResourceService:
    """Service for create/read/update/delete of one resource type.

    show/update/destroy do not check that the caller owns the resource
    unless ``enforce_ownership`` is set, in which case anything outside the
    caller's owned-set is reported as not found.
    """

    def __init__(self, db: Session, definition: ResourceDefinition, enforce_ownership: bool = False):
        self.db = db
        self.definition = definition
        self.model = definition.model
        self.enforce_ownership = enforce_ownership

    def index(
        self,
        user: User,
        category: str | None = None,
        search: str | None = None,
        scope: ListScope | None = None,
    ) -> list[Any]:
        """List resources, newest first.

        Owned-scope types return the caller's owned-set; global-scope types
        return every available row. ``scope`` overrides the type's default.
        """
        model = self.model
        scope = scope or self.definition.scope
        query = self.db.query(model)

        if scope == ListScope.OWNED:
            query = query.filter(model.holders.any(User.id == user.id))
        elif self.definition.available_field:
            query = query.filter(getattr(model, self.definition.available_field).is_(True))

        if category and self.definition.category_field:
            query = query.filter(getattr(model, self.definition.category_field) == category)

        if search and self.definition.search_fields:
            query = query.filter(
                or_(
                    *(
                        getattr(model, field).icontains(search, autoescape=True)
                        for field in self.definition.search_fields
                    )
                )
            )

        return query.order_by(model.created_at.desc(), model.id.desc()).all()

    def create(self, user: User, fields: dict[str, Any]) -> Any:
        """Create a resource owned by ``user`` and add it to their owned-set."""
        values = self._writable(fields)
        resource = self.model(**values, owner_id=user.id)
        self.db.add(resource)
        self.add_to_owned_set(user, resource)
        self.db.commit()
        self.db.refresh(resource)
        logger.info(f"User {user.id} created {self.definition.name} {resource.id}")
        return resource

    def add_to_owned_set(self, user: User, resource: Any) -> None:
        """Set-union: adding a resource that is already owned is a no-op."""
        getattr(user, self.definition.owned_attr).add(resource)

    def show(self, resource_id: int, user: User | None = None) -> Any:
        """Get a resource, bumping its view counter where the type has one."""
        resource = self._get(resource_id, user)

        if self.definition.counts_views:
            model = self.model
            self.db.execute(
                update(model)
                .where(model.id == resource.id)
                .values(views=model.views + 1, updated_at=model.updated_at)
            )
            self.db.commit()
            self.db.refresh(resource)

        return resource

    def update(self, resource_id: int, fields: dict[str, Any], user: User | None = None) -> Any:
        """Apply a partial update. Keys not in the input are left untouched."""
        resource = self._get(resource_id, user)

        for field, value in self._writable(fields).items():
            setattr(resource, field, value)

        self.db.commit()
        self.db.refresh(resource)
        logger.info(f"Updated {self.definition.name} {resource_id}")
        return resource

    def destroy(self, resource_id: int, user: User | None = None) -> None:
        """Delete a resource and drop it from every owned-set."""
        resource = self._get(resource_id, user)
        self.db.delete(resource)
        self.db.commit()
        logger.info(f"Deleted {self.definition.name} {resource_id}")

    def _get(self, resource_id: int, user: User | None) -> Any:
        if not 1 <= resource_id <= MAX_RESOURCE_ID:
            raise ResourceNotFoundError(self.definition, resource_id)

        resource = self.db.query(self.model).filter(self.model.id == resource_id).first()
        if resource is None:
            raise ResourceNotFoundError(self.definition, resource_id)

        if self.enforce_ownership and user is not None:
            if resource not in getattr(user, self.definition.owned_attr):
                raise ResourceNotFoundError(self.definition, resource_id)

        return resource

    def _writable(self, fields: dict[str, Any]) -> dict[str, Any]:
        """Keep only the allow-listed fields."""
        ignored = set(fields) - self.definition.mutable_fields
        if ignored:
            logger.debug(f"Ignoring protected {self.definition.name} fields: {sorted(ignored)}")
        return {k: v for k, v in fields.items() if k in self.definition.mutable_fields}
