"""Stage 3: Aggregation"""

from .engine import AggregationEngine, ChartPoint, aggregate, UNKNOWN_CATEGORY
from .axes import axis_values, default_axes, value_axis_fields

__all__ = [
    "AggregationEngine",
    "ChartPoint",
    "aggregate",
    "UNKNOWN_CATEGORY",
    "axis_values",
    "default_axes",
    "value_axis_fields",
]
