import asyncio
import json

import asyncpg
import pytest

from core.exceptions import DatabaseError, DocumentNotFound
from core.interfaces import OrderBy
from db.documents import PostgresDocumentStore
from db.repository import SubmissionRepository
from stages.s2_import import BulkImporter


class FakeDatabase:
    """Records statements instead of talking to PostgreSQL"""

    def __init__(self, rows=None, status="UPDATE 1"):
        self.rows = rows or []
        self.status = status
        self.calls = []

    async def execute(self, query, *args):
        self.calls.append((query, args))
        return self.rows

    async def execute_write(self, query, *args):
        self.calls.append((query, args))
        return self.status


@pytest.mark.asyncio
async def test_list_builds_filters_and_order():
    db = FakeDatabase(rows=[{"id": "abc", "body": json.dumps({"formId": "f1", "data": {"x": 1}})}])
    store = PostgresDocumentStore(db, table_name="documents")

    docs = await store.list(
        "submissions",
        filters={"formId": "f1"},
        order_by=OrderBy("submittedAt", descending=True)
    )

    assert docs == [{"id": "abc", "formId": "f1", "data": {"x": 1}}]
    query, args = db.calls[0]
    assert "body -> $2::text = $3::jsonb" in query
    assert query.endswith("AND body ? $4::text ORDER BY body ->> $4::text DESC")
    assert args == ("submissions", "formId", '"f1"', "submittedAt")


@pytest.mark.asyncio
async def test_create_strips_id_and_returns_new_one():
    db = FakeDatabase()
    store = PostgresDocumentStore(db)

    doc_id = await store.create("forms", {"id": "ignored", "name": "Inspection"})

    _, args = db.calls[0]
    assert args[0] == "forms"
    assert args[1] == doc_id != "ignored"
    assert json.loads(args[2]) == {"name": "Inspection"}


@pytest.mark.asyncio
async def test_update_of_missing_document():
    store = PostgresDocumentStore(FakeDatabase(status="UPDATE 0"))

    with pytest.raises(DocumentNotFound):
        await store.update("submissions", "nope", {"data": {}})


def test_table_name_must_be_identifier():
    with pytest.raises(DatabaseError):
        PostgresDocumentStore(FakeDatabase(), table_name="documents; DROP TABLE x")


class BusyConnectionDatabase(FakeDatabase):
    """Every third write fails at the driver level"""

    def __init__(self):
        super().__init__()
        self.writes = 0

    async def execute_write(self, query, *args):
        self.writes += 1
        if self.writes % 3 == 0:
            raise asyncpg.InterfaceError("cannot perform operation: another operation is in progress")
        return await super().execute_write(query, *args)


@pytest.mark.asyncio
async def test_driver_errors_are_database_errors():
    db = BusyConnectionDatabase()
    db.writes = 2
    store = PostgresDocumentStore(db)

    with pytest.raises(DatabaseError):
        await store.create("forms", {"name": "Inspection"})


@pytest.mark.asyncio
async def test_timeouts_are_database_errors():
    class SlowDatabase(FakeDatabase):
        async def execute_write(self, query, *args):
            raise asyncio.TimeoutError()

    with pytest.raises(DatabaseError):
        await PostgresDocumentStore(SlowDatabase()).delete("forms", "abc")


@pytest.mark.asyncio
async def test_import_survives_driver_errors(inspection_form):
    store = PostgresDocumentStore(BusyConnectionDatabase())
    importer = BulkImporter(SubmissionRepository(store), batch_size=4)
    rows = [{"Line": "A", "Date": "2024-01-01", "Defects": i} for i in range(10)]

    report = await importer.import_batch(inspection_form, rows)

    assert report.success_count + report.error_count == 10
    assert report.error_count == 3
    assert report.batch_count == 3
