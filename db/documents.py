"""PostgreSQL-backed document store"""

from __future__ import annotations

import json
import re
from datetime import date, datetime, time
from typing import Any, Optional
from uuid import uuid4

import asyncio

import asyncpg

from core.exceptions import DatabaseError, DocumentNotFound
from core.interfaces import DocumentStore, OrderBy
from config import settings
from .connection import DatabaseManager

# Errors a single statement can raise besides server-side ones
_STORE_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, asyncio.TimeoutError, OSError)

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def _json_default(value: Any) -> str:
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _encode(doc: dict[str, Any]) -> str:
    return json.dumps(doc, default=_json_default, ensure_ascii=False)


class PostgresDocumentStore(DocumentStore):
    """
    All collections share one JSONB table keyed by (collection, id).

    Filters compare top-level keys with JSON equality; ordering compares the
    text form of the key, which is chronological for ISO-8601 timestamps.
    """

    def __init__(self, db_manager: DatabaseManager, table_name: Optional[str] = None):
        self.db = db_manager
        self.table_name = table_name or settings.DOCUMENTS_TABLE

        if not _IDENTIFIER.match(self.table_name):
            raise DatabaseError(f"Invalid table name: {self.table_name}")

    async def init_schema(self) -> None:
        """Create the documents table and its collection index"""
        sql = f"""
            CREATE TABLE IF NOT EXISTS {self.table_name} (
                collection TEXT NOT NULL,
                id TEXT NOT NULL,
                body JSONB NOT NULL,
                PRIMARY KEY (collection, id)
            );
            CREATE INDEX IF NOT EXISTS idx_{self.table_name}_collection
                ON {self.table_name} (collection);
        """
        try:
            await self.db.execute_write(sql)
        except asyncpg.PostgresError as e:
            raise DatabaseError(f"Failed to create table {self.table_name}: {e}") from e

    async def list(
        self,
        collection: str,
        filters: Optional[dict[str, Any]] = None,
        order_by: Optional[OrderBy] = None,
    ) -> list[dict[str, Any]]:
        clauses = ["collection = $1"]
        args: list[Any] = [collection]

        for key, value in (filters or {}).items():
            args.append(key)
            args.append(_encode(value))
            clauses.append(f"body -> ${len(args) - 1}::text = ${len(args)}::jsonb")

        query = f"SELECT id, body FROM {self.table_name} WHERE {' AND '.join(clauses)}"

        if order_by:
            args.append(order_by.field)
            key = f"${len(args)}::text"
            direction = "DESC" if order_by.descending else "ASC"
            query += f" AND body ? {key} ORDER BY body ->> {key} {direction}"

        try:
            rows = await self.db.execute(query, *args)
        except _STORE_ERRORS as e:
            raise DatabaseError(f"Failed to list {collection}: {e}") from e

        return [{"id": row["id"], **json.loads(row["body"])} for row in rows]

    async def create(self, collection: str, doc: dict[str, Any]) -> str:
        doc_id = uuid4().hex
        body = {key: value for key, value in doc.items() if key != "id"}
        query = f"INSERT INTO {self.table_name} (collection, id, body) VALUES ($1, $2, $3::jsonb)"

        try:
            await self.db.execute_write(query, collection, doc_id, _encode(body))
        except _STORE_ERRORS as e:
            raise DatabaseError(f"Failed to create document in {collection}: {e}") from e

        return doc_id

    async def update(self, collection: str, doc_id: str, partial_doc: dict[str, Any]) -> None:
        query = (
            f"UPDATE {self.table_name} SET body = body || $3::jsonb "
            f"WHERE collection = $1 AND id = $2"
        )

        try:
            status = await self.db.execute_write(query, collection, doc_id, _encode(partial_doc))
        except _STORE_ERRORS as e:
            raise DatabaseError(f"Failed to update {collection}/{doc_id}: {e}") from e

        if status.endswith(" 0"):
            raise DocumentNotFound(collection, doc_id)

    async def delete(self, collection: str, doc_id: str) -> None:
        query = f"DELETE FROM {self.table_name} WHERE collection = $1 AND id = $2"

        try:
            await self.db.execute_write(query, collection, doc_id)
        except _STORE_ERRORS as e:
            raise DatabaseError(f"Failed to delete {collection}/{doc_id}: {e}") from e
