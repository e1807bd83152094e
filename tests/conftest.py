"""Shared fixtures"""

import asyncio

import pytest

from core.enums import FieldType
from core.exceptions import DatabaseError
from core.models import Form, FormField, Submission
from db.memory import InMemoryDocumentStore
from ui.progress import ProgressTracker


class RecordingProgress(ProgressTracker):
    """Keeps every progress event in order"""

    def __init__(self):
        self.events = []

    def start_batch(self, batch_num, size):
        self.events.append(("start", batch_num, size))

    def complete_batch(self, batch_num, succeeded, failed):
        self.events.append(("complete", batch_num, succeeded, failed))

    def fail(self, message):
        self.events.append(("fail", message))

    def complete(self, report):
        self.events.append(("done", report.success_count, report.error_count))


class SlowStore(InMemoryDocumentStore):
    """Yields on every write and records how many writes overlap"""

    def __init__(self, fail_when=None):
        super().__init__()
        self.in_flight = 0
        self.max_in_flight = 0
        self.fail_when = fail_when

    async def create(self, collection, doc):
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(0)
            if self.fail_when and self.fail_when(doc):
                raise DatabaseError("write rejected")
            return await super().create(collection, doc)
        finally:
            self.in_flight -= 1


@pytest.fixture
def store():
    return InMemoryDocumentStore()


@pytest.fixture
def recording_progress():
    return RecordingProgress()


@pytest.fixture
def inspection_form():
    return Form(
        id="form-1",
        name="Inspection",
        fields=[
            FormField(id="f1", name="Line", type=FieldType.DROPDOWN, required=True, options=["A", "B"]),
            FormField(id="f2", name="Date", type=FieldType.DATE, required=True),
            FormField(id="f3", name="Time", type=FieldType.TIME),
            FormField(id="f4", name="Defects", type=FieldType.NUMBER, required=True),
            FormField(id="f5", name="Notes", type=FieldType.TEXT),
        ],
    )


def make_submissions(rows, form_id="form-1"):
    return [
        Submission(id=f"s{i}", form_id=form_id, form_name="Test", data=row)
        for i, row in enumerate(rows)
    ]
