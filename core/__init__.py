"""Core abstractions for Cuaderno"""

from .models import *
from .enums import *
from .exceptions import *
from .interfaces import *
from .values import *

__all__ = [
    # Models
    "FormField",
    "Form",
    "Submission",
    "NormalizedRow",
    "FileMetadata",
    "ParsedSheet",
    "ImportRequest",
    "ImportReport",
    "ChartConfig",
    "HistogramBin",
    "ParetoPoint",
    # Values
    "FieldValue",
    "TextValue",
    "NumberValue",
    "DateValue",
    "TimeValue",
    "ChoiceValue",
    "to_field_value",
    "is_blank",
    # Enums
    "FieldType",
    "ChartType",
    "FormStatus",
    "FileType",
    "Collection",
    # Exceptions
    "CuadernoError",
    "PipelineError",
    "StageError",
    "ValidationError",
    "MissingRequiredField",
    "EmptyImport",
    "FormDefinitionError",
    "EntrySubmissionError",
    "FileParseError",
    "DatabaseError",
    "StoreWriteFailure",
    "DocumentNotFound",
    # Interfaces
    "Stage",
    "FileParser",
    "DocumentStore",
    "OrderBy",
]
