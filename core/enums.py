"""Core enumerations for Cuaderno"""

from enum import Enum


class FieldType(str, Enum):
    """Declared type of a form field"""
    TEXT = "text"
    NUMBER = "number"
    DECIMAL = "decimal"
    DATE = "date"
    TIME = "time"
    DROPDOWN = "dropdown"


class ChartType(str, Enum):
    """Supported chart types"""
    COLUMN = "column"
    BAR = "bar"
    LINE = "line"
    AREA = "area"
    COMBO = "combo"
    SCATTER = "scatter"
    HISTOGRAM = "histogram"
    PARETO = "pareto"


class FormStatus(str, Enum):
    """Lifecycle status of a stored form"""
    ACTIVE = "active"
    ARCHIVED = "archived"


class FileType(str, Enum):
    """Supported spreadsheet file types"""
    EXCEL_XLSX = "xlsx"
    EXCEL_XLS = "xls"
    CSV = "csv"


class Collection(str, Enum):
    """Document store collections"""
    FORMS = "forms"
    SUBMISSIONS = "submissions"


NUMERIC_FIELD_TYPES = frozenset({FieldType.NUMBER, FieldType.DECIMAL})
TEMPORAL_FIELD_TYPES = frozenset({FieldType.DATE, FieldType.TIME})
CATEGORY_FIELD_TYPES = frozenset({FieldType.TEXT, FieldType.DROPDOWN})
