"""Database layer"""

from .connection import DatabaseManager
from .documents import PostgresDocumentStore
from .memory import InMemoryDocumentStore
from .repository import FormRepository, SubmissionRepository, new_field, validate_form_definition

__all__ = [
    "DatabaseManager",
    "PostgresDocumentStore",
    "InMemoryDocumentStore",
    "FormRepository",
    "SubmissionRepository",
    "new_field",
    "validate_form_definition",
]
