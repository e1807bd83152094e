"""In-process document store"""

from __future__ import annotations

import copy
from typing import Any, Optional
from uuid import uuid4

from core.exceptions import DocumentNotFound
from core.interfaces import DocumentStore, OrderBy


class InMemoryDocumentStore(DocumentStore):
    """Dictionary-backed store, used by tests and one-off scripts"""

    def __init__(self):
        self.collections: dict[str, dict[str, dict[str, Any]]] = {}

    def _collection(self, name: str) -> dict[str, dict[str, Any]]:
        return self.collections.setdefault(name, {})

    async def list(
        self,
        collection: str,
        filters: Optional[dict[str, Any]] = None,
        order_by: Optional[OrderBy] = None,
    ) -> list[dict[str, Any]]:
        docs = [
            {"id": doc_id, **copy.deepcopy(body)}
            for doc_id, body in self._collection(collection).items()
            if all(body.get(key) == value for key, value in (filters or {}).items())
        ]

        if order_by:
            # Documents without the sort key are left out of ordered queries
            docs = [doc for doc in docs if doc.get(order_by.field) is not None]
            docs.sort(key=lambda doc: doc[order_by.field], reverse=order_by.descending)

        return docs

    async def create(self, collection: str, doc: dict[str, Any]) -> str:
        doc_id = uuid4().hex
        body = copy.deepcopy(doc)
        body.pop("id", None)
        self._collection(collection)[doc_id] = body
        return doc_id

    async def update(self, collection: str, doc_id: str, partial_doc: dict[str, Any]) -> None:
        docs = self._collection(collection)
        if doc_id not in docs:
            raise DocumentNotFound(collection, doc_id)
        docs[doc_id].update(copy.deepcopy(partial_doc))

    async def delete(self, collection: str, doc_id: str) -> None:
        self._collection(collection).pop(doc_id, None)
