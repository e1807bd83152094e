from datetime import date, datetime, time

import pytest

from core.exceptions import MissingRequiredField
from core.values import DateValue, NumberValue, TimeValue, ChoiceValue
from stages.s1_validation import RowValidator, validate_and_normalize, validate_entry


def test_date_cell_is_shifted_before_formatting(inspection_form):
    row = {"Line": "A", "Date": datetime(2024, 3, 5, 0, 0), "Defects": 3}

    normalized = validate_and_normalize(inspection_form, row)

    assert normalized.data["Date"] == "2024-03-05"


def test_date_cell_late_in_evening_rolls_forward(inspection_form):
    # 12h shift moves anything from noon on into the next day
    row = {"Line": "A", "Date": datetime(2024, 12, 31, 13, 0), "Defects": 3}

    normalized = validate_and_normalize(inspection_form, row)

    assert normalized.data["Date"] == "2025-01-01"


def test_time_cell_reads_unshifted_value(inspection_form):
    row = {
        "Line": "B",
        "Date": "2024-03-05",
        "Time": datetime(1899, 12, 30, 7, 5),
        "Defects": 0,
    }

    normalized = validate_and_normalize(inspection_form, row)

    assert normalized.data["Time"] == "07:05"


def test_plain_time_object_is_formatted(inspection_form):
    row = {"Line": "B", "Date": date(2024, 1, 9), "Time": time(18, 30), "Defects": 1}

    normalized = validate_and_normalize(inspection_form, row)

    assert normalized.data["Date"] == "2024-01-09"
    assert normalized.data["Time"] == "18:30"


def test_input_row_is_not_mutated(inspection_form):
    original = datetime(2024, 3, 5)
    row = {"Line": "A", "Date": original, "Defects": 3}

    validate_and_normalize(inspection_form, row)

    assert row["Date"] is original


def test_datetime_in_text_field_passes_through(inspection_form):
    stamp = datetime(2024, 3, 5, 9, 0)
    row = {"Line": "A", "Date": "2024-03-05", "Defects": 2, "Notes": stamp}

    normalized = validate_and_normalize(inspection_form, row)

    assert normalized.data["Notes"] is stamp


def test_numbers_are_not_coerced(inspection_form):
    row = {"Line": "A", "Date": "2024-03-05", "Defects": "12"}

    normalized = validate_and_normalize(inspection_form, row)

    assert normalized.data["Defects"] == "12"
    assert normalized.values["Defects"] == NumberValue(value=12.0)


@pytest.mark.parametrize("missing", [None, ""])
def test_blank_required_field_is_rejected(inspection_form, missing):
    row = {"Line": "A", "Date": "2024-03-05", "Defects": missing}

    with pytest.raises(MissingRequiredField) as exc:
        validate_and_normalize(inspection_form, row)

    assert exc.value.field_name == "Defects"


def test_absent_required_field_is_rejected(inspection_form):
    with pytest.raises(MissingRequiredField) as exc:
        RowValidator().validate_and_normalize(inspection_form, {"Line": "A", "Defects": 1}, row_number=7)

    assert exc.value.field_name == "Date"
    assert exc.value.row == 7


def test_zero_counts_as_present(inspection_form):
    normalized = validate_entry(inspection_form, {"Line": "A", "Date": "2024-03-05", "Defects": 0})

    assert normalized.data["Defects"] == 0


def test_manual_entry_skips_date_coercion(inspection_form):
    stamp = datetime(2024, 3, 5)
    row = {"Line": "A", "Date": stamp, "Defects": "1"}

    normalized = validate_entry(inspection_form, row)

    assert normalized.data["Date"] is stamp


def test_manual_entry_checks_required_first(inspection_form):
    with pytest.raises(MissingRequiredField):
        validate_entry(inspection_form, {"Line": "", "Date": "2024-03-05", "Defects": "1"})


def test_typed_values_follow_declared_type(inspection_form):
    row = {"Line": " B ", "Date": "2024-03-05", "Time": "08:15", "Defects": "abc"}

    values = validate_entry(inspection_form, row).values

    assert values["Line"] == ChoiceValue(value="B")
    assert values["Date"] == DateValue(value="2024-03-05")
    assert values["Time"] == TimeValue(value="08:15")
    assert values["Defects"] == NumberValue(value=0.0)
    assert values["Notes"].kind == "text"
    assert values["Notes"].value is None


def test_custom_shift_hours(inspection_form):
    row = {"Line": "A", "Date": datetime(2024, 3, 5, 0, 0), "Defects": 1}

    normalized = RowValidator(date_shift_hours=0).validate_and_normalize(inspection_form, row)

    assert normalized.data["Date"] == "2024-03-05"


@pytest.mark.parametrize("cell,expected", [
    (time(8, 30), "1899-12-30"),
    (time(13, 0), "1899-12-31"),
])
def test_time_only_cell_in_date_field_reads_epoch_day(inspection_form, cell, expected):
    row = {"Line": "A", "Date": cell, "Defects": 1}

    normalized = validate_and_normalize(inspection_form, row)

    assert normalized.data["Date"] == expected
