"""
Generic CRUD endpoints.

``build_crud_router`` turns a ``Resource`` into an ``APIRouter`` with
the routes below (``events`` shown):

* ``GET /events`` - all records, ascending by id.
* ``GET /events/{id}`` - one record, 404 if missing.
* ``POST /events`` - create with the next sequential id, 201.
* ``PATCH /events/{id}`` - merge the submitted fields.
* ``PUT /events/{id}`` - replace every field; only for resources with
  ``allow_replace`` set.
* ``DELETE /events/{id}`` - delete, answering with a confirmation message.

The ``{id}`` segment is accepted as text and converted here: anything
that is not an integer cannot match a record, so it gets the same 404
as a missing id.
"""

import re
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, status

from event_api.app.api.deps import get_db
from event_api.app.core.db import SQLITE_INT_MAX, SQLITE_INT_MIN, Database
from event_api.app.core.errors import NotFoundError
from event_api.app.schemas.message import Message
from event_api.app.services.resource_service import Resource, ResourceService

ID_PATTERN = re.compile(r"^\s*[-+]?\d+\s*$", re.ASCII)


def parse_item_id(raw: str) -> Optional[int]:
    """Convert a path segment to an integer id, or ``None`` if it is not one.

    Only plain ASCII decimal integers qualify (no ``1_000``, no non-ASCII
    digits), and only within the range SQLite can store.
    """
    if not ID_PATTERN.match(raw):
        return None
    value = int(raw)
    if not SQLITE_INT_MIN <= value <= SQLITE_INT_MAX:
        return None
    return value


def build_crud_router(resource: Resource) -> APIRouter:
    """Create the CRUD router for ``resource``."""
    router = APIRouter(prefix=f"/{resource.path}")
    create_model = resource.create_model
    update_model = resource.update_model
    read_model = resource.read_model
    # A missing body counts as `{}` wherever that is a valid body.
    body_optional = not any(
        field.is_required() for field in create_model.model_fields.values()
    )
    create_body = Optional[create_model] if body_optional else create_model
    create_default = Body(None) if body_optional else Body(...)

    def service(db: Database = Depends(get_db)) -> ResourceService:
        return ResourceService(db, resource)

    def path_id(item_id: str) -> int:
        parsed = parse_item_id(item_id)
        if parsed is None:
            raise NotFoundError(resource.label)
        return parsed

    @router.get(
        "",
        response_model=List[read_model],
        response_model_exclude_none=True,
        name=f"list_{resource.path}",
    )
    async def list_items(svc: ResourceService = Depends(service)):
        return await svc.list_all()

    @router.get(
        "/{item_id}",
        response_model=read_model,
        response_model_exclude_none=True,
        responses={404: {"model": Message}},
        name=f"get_{resource.path}",
    )
    async def get_item(
        svc: ResourceService = Depends(service),
        pk: int = Depends(path_id),
    ):
        return await svc.get(pk)

    @router.post(
        "",
        response_model=read_model,
        response_model_exclude_none=True,
        status_code=status.HTTP_201_CREATED,
        name=f"create_{resource.path}",
    )
    async def create_item(
        payload: create_body = create_default,
        svc: ResourceService = Depends(service),
    ):
        return await svc.create(payload if payload is not None else create_model())

    @router.patch(
        "/{item_id}",
        response_model=read_model,
        response_model_exclude_none=True,
        responses={404: {"model": Message}},
        name=f"update_{resource.path}",
    )
    async def update_item(
        payload: Optional[update_model] = Body(None),
        svc: ResourceService = Depends(service),
        pk: int = Depends(path_id),
    ):
        return await svc.update(pk, payload if payload is not None else update_model())

    if resource.allow_replace:

        @router.put(
            "/{item_id}",
            response_model=read_model,
            response_model_exclude_none=True,
            responses={404: {"model": Message}},
            name=f"replace_{resource.path}",
        )
        async def replace_item(
            payload: create_body = create_default,
            svc: ResourceService = Depends(service),
            pk: int = Depends(path_id),
        ):
            return await svc.replace(pk, payload if payload is not None else create_model())

    @router.delete(
        "/{item_id}",
        response_model=Message,
        responses={404: {"model": Message}},
        name=f"delete_{resource.path}",
    )
    async def delete_item(
        svc: ResourceService = Depends(service),
        pk: int = Depends(path_id),
    ) -> Message:
        await svc.delete(pk)
        return Message(message=resource.delete_message)

    return router
