"""Typed field values

A stored row keeps raw cell values; code that needs to reason about a value
reads it through the field's declared type instead of inspecting the value.
"""

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, Field

from .enums import FieldType
from utils.dates import format_date, format_time, is_temporal
from utils.numbers import to_number


class TextValue(BaseModel):
    kind: Literal["text"] = "text"
    value: Optional[str] = None


class NumberValue(BaseModel):
    kind: Literal["number"] = "number"
    value: Optional[float] = None


class DateValue(BaseModel):
    kind: Literal["date"] = "date"
    value: Optional[str] = None


class TimeValue(BaseModel):
    kind: Literal["time"] = "time"
    value: Optional[str] = None


class ChoiceValue(BaseModel):
    kind: Literal["choice"] = "choice"
    value: Optional[str] = None


FieldValue = Annotated[
    Union[TextValue, NumberValue, DateValue, TimeValue, ChoiceValue],
    Field(discriminator="kind"),
]


def is_blank(raw: Any) -> bool:
    """Absent, null and empty-string values all count as missing"""
    return raw is None or raw == ""


def _text(raw: Any) -> Optional[str]:
    return None if is_blank(raw) else str(raw)


def _number(raw: Any) -> NumberValue:
    return NumberValue(value=None if is_blank(raw) else float(to_number(raw)))


def _date(raw: Any) -> DateValue:
    if is_temporal(raw):
        raw = format_date(raw)
    return DateValue(value=_text(raw))


def _time(raw: Any) -> TimeValue:
    if is_temporal(raw):
        raw = format_time(raw)
    return TimeValue(value=_text(raw))


def _choice(raw: Any) -> ChoiceValue:
    text = _text(raw)
    return ChoiceValue(value=text.strip() if text is not None else None)


_BUILDERS = {
    FieldType.TEXT: lambda raw: TextValue(value=_text(raw)),
    FieldType.NUMBER: _number,
    FieldType.DECIMAL: _number,
    FieldType.DATE: _date,
    FieldType.TIME: _time,
    FieldType.DROPDOWN: _choice,
}


def to_field_value(field_type: FieldType, raw: Any) -> FieldValue:
    """Build the typed value for ``raw`` according to the declared field type"""
    return _BUILDERS[FieldType(field_type)](raw)
