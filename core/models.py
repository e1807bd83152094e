"""Core data models for Cuaderno"""

from datetime import datetime
from typing import Annotated, Any, Optional

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

from .enums import ChartType, FieldType, FileType, FormStatus
from .values import FieldValue
from utils.dates import format_timestamp

# Stored as fixed-width UTC text so ordered queries sort by time
Timestamp = Annotated[datetime, PlainSerializer(format_timestamp, return_type=str, when_used="json")]


class DocumentModel(BaseModel):
    """Model stored as a camelCase document"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_document(self) -> dict[str, Any]:
        """Serialize for the document store (id lives outside the body)"""
        return self.model_dump(mode="json", by_alias=True, exclude={"id"}, exclude_none=True)

    @classmethod
    def from_document(cls, doc: dict[str, Any]):
        return cls.model_validate(doc)


# ─────────────────────────────────────────────────────────────
# Schema
# ─────────────────────────────────────────────────────────────

class FormField(DocumentModel):
    """One typed column of a form"""
    id: str
    name: str
    type: FieldType = FieldType.TEXT
    required: bool = False
    options: list[str] = []  # Dropdown choices

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FormField):
            return self.id == other.id
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.id)


class Form(DocumentModel):
    """Named, ordered schema of typed fields"""
    id: Optional[str] = None
    name: str
    fields: list[FormField] = []
    status: FormStatus = FormStatus.ACTIVE
    created_by: Optional[str] = None
    created_at: Optional[Timestamp] = None
    updated_at: Optional[Timestamp] = None

    def field(self, name: str) -> Optional[FormField]:
        """Look up a field by name"""
        for form_field in self.fields:
            if form_field.name == name:
                return form_field
        return None

    @property
    def field_names(self) -> list[str]:
        return [form_field.name for form_field in self.fields]


class Submission(DocumentModel):
    """One data record conforming to a form"""
    id: Optional[str] = None
    form_id: str
    form_name: str
    data: dict[str, Any] = {}
    submitted_by: Optional[str] = None
    submitted_at: Optional[Timestamp] = None
    updated_by: Optional[str] = None
    updated_at: Optional[Timestamp] = None


class NormalizedRow(BaseModel):
    """Row that passed validation, ready to be stored"""
    data: dict[str, Any]
    values: dict[str, FieldValue] = {}


# ─────────────────────────────────────────────────────────────
# Import
# ─────────────────────────────────────────────────────────────

class FileMetadata(BaseModel):
    """Uploaded spreadsheet file"""
    file_path: str
    file_name: str
    file_type: FileType
    file_size_bytes: int
    encoding: Optional[str] = None
    sheets: list[str] = []


class ParsedSheet(BaseModel):
    """First sheet of a spreadsheet as header-keyed rows"""
    metadata: FileMetadata
    sheet_name: str
    headers: list[str] = []
    rows: list[dict[str, Any]] = []


class ImportRequest(BaseModel):
    """Rows to import into a form"""
    form: Form
    rows: list[dict[str, Any]]
    submitted_by: Optional[str] = None


class ImportReport(DocumentModel):
    """Aggregate outcome of a bulk import"""
    success_count: int = 0
    error_count: int = 0
    batch_count: int = 0

    @property
    def total(self) -> int:
        return self.success_count + self.error_count


# ─────────────────────────────────────────────────────────────
# Charts
# ─────────────────────────────────────────────────────────────

class ChartConfig(DocumentModel):
    """Chart selection made by the user"""
    type: ChartType = ChartType.COLUMN
    x_axis: str = ""
    y_axis: str = ""
    secondary_y_axis: Optional[str] = None
    group_by: Optional[str] = None  # Reserved
    target: Optional[float] = None


class HistogramBin(DocumentModel):
    """One equal-width bin of a histogram"""
    range: str
    count: int = 0
    start: float
    end: float
    target: Optional[float] = None

    def to_point(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class ParetoPoint(DocumentModel):
    """One category of a Pareto chart"""
    name: str
    value: float
    cumulative_percentage: int
    target: Optional[float] = None

    def to_point(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
