"""Pipeline stages"""

from .s0_reception import Receiver
from .s1_validation import RowValidator
from .s2_import import BulkImporter
from .s3_aggregation import AggregationEngine

__all__ = [
    "Receiver",
    "RowValidator",
    "BulkImporter",
    "AggregationEngine",
]
