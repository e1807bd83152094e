"""Axis selection helpers"""

from typing import Any, Sequence

from core.enums import CATEGORY_FIELD_TYPES, NUMERIC_FIELD_TYPES, TEMPORAL_FIELD_TYPES
from core.models import ChartConfig, Form, FormField
from utils.numbers import to_number


def value_axis_fields(form: Form) -> list[FormField]:
    """Fields that can be plotted on the value axis"""
    return [f for f in form.fields if f.type in NUMERIC_FIELD_TYPES]


def default_axes(form: Form, config: ChartConfig) -> ChartConfig:
    """
    Fill unset axes from the form

    X prefers the first date/time field, then the first text/dropdown field;
    Y takes the first numeric field. Axes already chosen are kept.
    """
    temporal = [f.name for f in form.fields if f.type in TEMPORAL_FIELD_TYPES]
    categories = [f.name for f in form.fields if f.type in CATEGORY_FIELD_TYPES]
    numeric = [f.name for f in value_axis_fields(form)]

    x_axis = config.x_axis or next(iter(temporal + categories), "")
    y_axis = config.y_axis or next(iter(numeric), "")
    return config.model_copy(update={"x_axis": x_axis, "y_axis": y_axis})


def axis_values(points: Sequence[dict[str, Any]], axis: str) -> list[float]:
    """Numeric values of one key across chart points"""
    return [to_number(point.get(axis)) for point in points]
