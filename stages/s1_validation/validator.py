"""Row validation and normalization against a form"""

from typing import Any, Optional

from core.enums import FieldType
from core.exceptions import MissingRequiredField
from core.models import Form, NormalizedRow
from core.values import is_blank, to_field_value
from utils.dates import format_date, format_time, is_temporal
from config import settings


class RowValidator:
    """
    Checks required fields and canonicalizes date/time cells.

    Two entry points keep the two input paths apart:

    - ``validate_and_normalize`` serves spreadsheet rows. Date/time objects
      are encoded first and the required check runs on the encoded row.
    - ``validate_entry`` serves manual entry. Values already come in input
      formats, so only the required check runs.
    """

    def __init__(self, date_shift_hours: Optional[int] = None):
        self.date_shift_hours = (
            settings.DATE_SHIFT_HOURS if date_shift_hours is None else date_shift_hours
        )

    def validate_and_normalize(
        self,
        form: Form,
        raw_row: dict[str, Any],
        row_number: Optional[int] = None,
    ) -> NormalizedRow:
        """
        Normalize a parsed spreadsheet row, then check required fields

        Args:
            form: Target form
            raw_row: Header-keyed cell values
            row_number: Position in the upload, for error reporting

        Returns:
            NormalizedRow with canonical date/time strings

        Raises:
            MissingRequiredField: If a required field is absent, None or ""
        """
        data = self.normalize(form, raw_row)
        self._check_required(form, data, row_number)
        return self._build(form, data)

    def validate_entry(self, form: Form, raw_row: dict[str, Any]) -> NormalizedRow:
        """Check a manually entered row; values are stored as given"""
        self._check_required(form, raw_row)
        return self._build(form, dict(raw_row))

    def normalize(self, form: Form, raw_row: dict[str, Any]) -> dict[str, Any]:
        """Encode date/time objects of date/time fields; everything else passes through"""
        data = dict(raw_row)
        for form_field in form.fields:
            original = raw_row.get(form_field.name)
            if not is_temporal(original):
                continue

            if form_field.type == FieldType.DATE:
                data[form_field.name] = format_date(original, self.date_shift_hours)
            elif form_field.type == FieldType.TIME:
                data[form_field.name] = format_time(original)
        return data

    def missing_required(self, form: Form, data: dict[str, Any]) -> Optional[str]:
        """Name of the first required field without a value"""
        for form_field in form.fields:
            if form_field.required and is_blank(data.get(form_field.name)):
                return form_field.name
        return None

    def _check_required(
        self,
        form: Form,
        data: dict[str, Any],
        row_number: Optional[int] = None,
    ) -> None:
        missing = self.missing_required(form, data)
        if missing is not None:
            raise MissingRequiredField(missing, row=row_number)

    def _build(self, form: Form, data: dict[str, Any]) -> NormalizedRow:
        values = {
            form_field.name: to_field_value(form_field.type, data.get(form_field.name))
            for form_field in form.fields
        }
        return NormalizedRow(data=data, values=values)


def validate_and_normalize(form: Form, raw_row: dict[str, Any]) -> NormalizedRow:
    return RowValidator().validate_and_normalize(form, raw_row)


def validate_entry(form: Form, raw_row: dict[str, Any]) -> NormalizedRow:
    return RowValidator().validate_entry(form, raw_row)
