"""Import templates"""

from pathlib import Path
from typing import Optional, Union

from openpyxl import Workbook

from core.models import Form
from config import settings

TEMPLATE_SHEET = "Template"


def build_template(form: Form) -> list[str]:
    """Header row for offline data entry, in field order"""
    return [form_field.name for form_field in form.fields]


def template_file_name(form: Form) -> str:
    return f"{form.name}_template.xlsx"


def write_template(form: Form, path: Optional[Union[str, Path]] = None) -> Path:
    """
    Write a one-sheet workbook holding only the header row

    Args:
        form: Form to build the template for
        path: Target file or directory; defaults to the templates output dir

    Returns:
        Path of the written workbook
    """
    if path is None:
        target = settings.get_output_path("templates") / template_file_name(form)
    else:
        target = Path(path)
        if target.is_dir():
            target = target / template_file_name(form)

    workbook = Workbook()
    sheet = workbook.active
    sheet.title = TEMPLATE_SHEET
    sheet.append(build_template(form))
    workbook.save(target)
    return target
