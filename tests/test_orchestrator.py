from datetime import datetime

import pytest
import pytest_asyncio
from openpyxl import Workbook

from core.enums import ChartType, FieldType
from core.exceptions import (
    EmptyImport, EntrySubmissionError, MissingRequiredField, PipelineError
)
from core.models import ChartConfig, Form
from db.repository import new_field
from orchestrator import Orchestrator
from tests.conftest import SlowStore


@pytest.fixture
def orchestrator(store, recording_progress):
    return Orchestrator(store, progress=recording_progress)


@pytest_asyncio.fixture
async def saved_form(orchestrator):
    return await orchestrator.save_form(Form(name="Output", fields=[
        new_field("Day", FieldType.DATE, required=True),
        new_field("Shift", FieldType.DROPDOWN, options=["Morning", "Night"]),
        new_field("Units", FieldType.NUMBER, required=True),
    ]), user_id="admin")


def _upload(path, rows):
    workbook = Workbook()
    sheet = workbook.active
    sheet.append(["Day", "Shift", "Units"])
    for row in rows:
        sheet.append(row)
    workbook.save(path)
    return str(path)


@pytest.mark.asyncio
async def test_import_spreadsheet_end_to_end(orchestrator, saved_form, recording_progress, tmp_path):
    path = _upload(tmp_path / "output.xlsx", [
        [datetime(2024, 5, 1), "Morning", 120],
        [datetime(2024, 5, 2), "Night", None],
        [datetime(2024, 5, 3), None, 80],
    ])

    report = await orchestrator.run_import(saved_form.id, path, user_id="u1")

    assert (report.success_count, report.error_count, report.batch_count) == (2, 1, 1)
    assert recording_progress.events[-1] == ("done", 2, 1)

    stored = await orchestrator.list_submissions(saved_form.id)
    assert sorted(s.data["Day"] for s in stored) == ["2024-05-01", "2024-05-03"]
    assert all(s.submitted_by == "u1" for s in stored)
    assert all(s.form_name == "Output" for s in stored)


@pytest.mark.asyncio
async def test_import_of_empty_sheet(orchestrator, saved_form, recording_progress, tmp_path):
    path = _upload(tmp_path / "empty.xlsx", [])

    with pytest.raises(EmptyImport):
        await orchestrator.run_import(saved_form.id, path)

    assert recording_progress.events == [("fail", "The uploaded file is empty.")]
    assert await orchestrator.list_submissions(saved_form.id) == []


@pytest.mark.asyncio
async def test_import_of_unsupported_file(orchestrator, saved_form, recording_progress, tmp_path):
    path = tmp_path / "output.pdf"
    path.write_bytes(b"%PDF-1.4")

    with pytest.raises(PipelineError) as exc_info:
        await orchestrator.run_import(saved_form.id, str(path))

    assert exc_info.value.stage == 0
    assert recording_progress.events[0][0] == "fail"


@pytest.mark.asyncio
async def test_import_rows_uses_batches(store, saved_form):
    orchestrator = Orchestrator(store, batch_size=2)
    rows = [{"Day": f"2024-05-0{i}", "Units": i} for i in range(1, 6)]

    report = await orchestrator.import_rows(saved_form, rows)

    assert report.batch_count == 3
    assert report.success_count == 5


@pytest.mark.asyncio
async def test_manual_entry_create_and_edit(orchestrator, saved_form):
    entry_id = await orchestrator.submit_entry(
        saved_form, {"Day": "2024-05-01", "Units": "12"}, user_id="u1"
    )

    edited_id = await orchestrator.submit_entry(
        saved_form, {"Day": "2024-05-02", "Units": "15"}, user_id="u2", editing_id=entry_id
    )

    assert edited_id == entry_id
    [stored] = await orchestrator.list_submissions(saved_form.id)
    assert stored.data == {"Day": "2024-05-02", "Units": "15"}
    assert stored.updated_by == "u2"


@pytest.mark.asyncio
async def test_manual_entry_requires_fields(orchestrator, saved_form):
    with pytest.raises(MissingRequiredField) as exc_info:
        await orchestrator.submit_entry(saved_form, {"Day": "2024-05-01", "Units": ""})

    assert exc_info.value.field_name == "Units"
    assert await orchestrator.list_submissions(saved_form.id) == []


@pytest.mark.asyncio
async def test_manual_entry_store_failure(inspection_form):
    orchestrator = Orchestrator(SlowStore(fail_when=lambda doc: True))

    with pytest.raises(EntrySubmissionError, match="Failed to save data"):
        await orchestrator.submit_entry(
            inspection_form, {"Line": "A", "Date": "2024-05-01", "Defects": 0}
        )


@pytest.mark.asyncio
async def test_delete_entry(orchestrator, saved_form):
    entry_id = await orchestrator.submit_entry(saved_form, {"Day": "2024-05-01", "Units": 3})

    await orchestrator.delete_entry(entry_id)

    assert await orchestrator.list_submissions(saved_form.id) == []


@pytest.mark.asyncio
async def test_chart_fills_default_axes(orchestrator, saved_form):
    await orchestrator.submit_entry(saved_form, {"Day": "2024-05-01", "Units": "7"})

    config, points = await orchestrator.chart(saved_form.id, ChartConfig(type=ChartType.LINE))

    assert (config.x_axis, config.y_axis) == ("Day", "Units")
    assert points == [{"Day": "2024-05-01", "Units": 7, "index": 1, "target": None}]


@pytest.mark.asyncio
async def test_export_template(orchestrator, saved_form, tmp_path):
    path = await orchestrator.export_template(saved_form.id, tmp_path)

    assert path.name == "Output_template.xlsx"
    assert path.exists()
