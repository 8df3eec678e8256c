"""
Generic CRUD operations over one resource table.

Events, attendees and organizers are stored the same way: a table with
an integer ``id`` primary key and a handful of nullable columns.  A
``Resource`` describes one of them (table, columns, models, messages)
and ``ResourceService`` runs the queries for it.  Columns holding
``NULL`` are treated as absent and left out of responses.

All statements are parameterized.  Table and column names interpolated
into SQL come only from the ``Resource`` definitions in
``services/resources.py``, never from request data.
"""

import logging
import sqlite3
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple, Type

from pydantic import BaseModel

from event_api.app.core.db import Database
from event_api.app.core.errors import NotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resource:
    """Everything the generic router and service need to know about a resource.

    ``path`` is the URL segment under ``/api``; ``label`` is the
    singular name used in messages (``"Event not found"``).  ``columns``
    lists the writable columns, which are also the pydantic field names
    of the models.
    """

    path: str
    table: str
    label: str
    columns: Tuple[str, ...]
    create_model: Type[BaseModel]
    update_model: Type[BaseModel]
    read_model: Type[BaseModel]
    delete_message: str
    allow_replace: bool = False


class ResourceService:
    """Run CRUD queries for a single ``Resource`` on an open ``Database``."""

    def __init__(self, db: Database, resource: Resource) -> None:
        self.db = db
        self.resource = resource

    @property
    def _select(self) -> str:
        columns = ", ".join(("id",) + self.resource.columns)
        return f"SELECT {columns} FROM {self.resource.table}"

    def _to_read(self, row: sqlite3.Row) -> BaseModel:
        return self.resource.read_model.model_validate(dict(row))

    def _writable(self, data: BaseModel, **dump_kwargs: Any) -> Dict[str, Any]:
        return data.model_dump(include=set(self.resource.columns), **dump_kwargs)

    async def list_all(self) -> List[BaseModel]:
        """Return every record ordered by ascending id."""
        with self.db.cursor() as cursor:
            rows = cursor.execute(f"{self._select} ORDER BY id ASC").fetchall()
        return [self._to_read(row) for row in rows]

    async def get(self, item_id: int) -> BaseModel:
        """Return the record with ``item_id`` or raise ``NotFoundError``."""
        with self.db.cursor() as cursor:
            row = cursor.execute(f"{self._select} WHERE id = ?", (item_id,)).fetchone()
        if row is None:
            logger.debug("%s %s not found", self.resource.label, item_id)
            raise NotFoundError(self.resource.label)
        return self._to_read(row)

    async def create(self, data: BaseModel) -> BaseModel:
        """Insert a record and return it with its assigned id.

        The id is allocated by SQLite (see ``core/db.py``); the response
        is built from the submitted values rather than re-read.
        """
        values = self._writable(data)
        columns = list(values)
        placeholders = ", ".join("?" for _ in columns)
        with self.db.cursor() as cursor:
            cursor.execute(
                f"INSERT INTO {self.resource.table} ({', '.join(columns)}) VALUES ({placeholders})",
                tuple(values[column] for column in columns),
            )
            new_id = cursor.lastrowid
        logger.info("Created %s %s", self.resource.label.lower(), new_id)
        return self.resource.read_model.model_validate({"id": new_id, **values})

    async def update(self, item_id: int, data: BaseModel) -> BaseModel:
        """Merge the fields present in ``data`` into an existing record."""
        updates = self._writable(data, exclude_unset=True)
        if not updates:
            return await self.get(item_id)
        assignments = ", ".join(f"{column} = ?" for column in updates)
        with self.db.cursor() as cursor:
            cursor.execute(
                f"UPDATE {self.resource.table} SET {assignments} WHERE id = ?",
                tuple(updates.values()) + (item_id,),
            )
            matched = cursor.rowcount
        if not matched:
            raise NotFoundError(self.resource.label)
        logger.info("Updated %s %s: %s", self.resource.label.lower(), item_id, sorted(updates))
        return await self.get(item_id)

    async def replace(self, item_id: int, data: BaseModel) -> BaseModel:
        """Overwrite every column except ``id``; omitted fields are cleared."""
        values = self._writable(data)
        assignments = ", ".join(f"{column} = ?" for column in values)
        with self.db.cursor() as cursor:
            cursor.execute(
                f"UPDATE {self.resource.table} SET {assignments} WHERE id = ?",
                tuple(values.values()) + (item_id,),
            )
            matched = cursor.rowcount
        if not matched:
            raise NotFoundError(self.resource.label)
        logger.info("Replaced %s %s", self.resource.label.lower(), item_id)
        return await self.get(item_id)

    async def delete(self, item_id: int) -> None:
        """Delete the record with ``item_id``; related records are left alone."""
        with self.db.cursor() as cursor:
            cursor.execute(f"DELETE FROM {self.resource.table} WHERE id = ?", (item_id,))
            deleted = cursor.rowcount
        if not deleted:
            raise NotFoundError(self.resource.label)
        logger.info("Deleted %s %s", self.resource.label.lower(), item_id)
