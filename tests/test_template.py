from openpyxl import load_workbook

from core.enums import FieldType
from core.models import Form
from db.repository import new_field
from stages.s2_import import build_template, template_file_name, write_template


def test_template_lists_field_names_in_order(inspection_form):
    assert build_template(inspection_form) == ["Line", "Date", "Time", "Defects", "Notes"]


def test_template_of_form_without_fields_is_empty():
    assert build_template(Form(name="Empty")) == []


def test_template_file_name():
    form = Form(name="Daily Output", fields=[new_field("Units", FieldType.NUMBER)])

    assert template_file_name(form) == "Daily Output_template.xlsx"


def test_written_template_holds_only_the_header(inspection_form, tmp_path):
    path = write_template(inspection_form, tmp_path)

    assert path == tmp_path / "Inspection_template.xlsx"
    workbook = load_workbook(path)
    sheet = workbook.active
    assert sheet.title == "Template"
    rows = list(sheet.iter_rows(values_only=True))
    assert rows == [("Line", "Date", "Time", "Defects", "Notes")]


def test_written_template_to_explicit_file(inspection_form, tmp_path):
    target = tmp_path / "custom.xlsx"

    assert write_template(inspection_form, target) == target
    assert target.exists()
