"""Abstract base classes for Cuaderno components"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")


class Stage(ABC, Generic[InputT, OutputT]):
    """Abstract base class for all pipeline stages"""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable stage name"""
        pass

    @property
    @abstractmethod
    def stage_number(self) -> int:
        """Stage number"""
        pass

    @abstractmethod
    async def execute(self, input_data: InputT) -> OutputT:
        """Execute the stage"""
        pass

    @abstractmethod
    def validate_input(self, input_data: InputT) -> bool:
        """Validate input before processing"""
        pass


class FileParser(ABC):
    """Abstract base class for spreadsheet parsers"""

    @property
    @abstractmethod
    def supported_extensions(self) -> list[str]:
        """List of supported file extensions"""
        pass

    @abstractmethod
    def parse(self, file_path: str) -> "ParsedSheet":
        """Parse the first sheet of a file"""
        pass

    @abstractmethod
    def detect_encoding(self, file_path: str) -> str:
        """Detect file encoding"""
        pass


@dataclass(frozen=True)
class OrderBy:
    """Sort clause for document queries"""
    field: str
    descending: bool = False


class DocumentStore(ABC):
    """Key-indexed document collections with equality/ordering queries"""

    @abstractmethod
    async def list(
        self,
        collection: str,
        filters: Optional[dict[str, Any]] = None,
        order_by: Optional[OrderBy] = None,
    ) -> list[dict[str, Any]]:
        """Return documents (with ``id``) matching every equality filter"""
        pass

    @abstractmethod
    async def create(self, collection: str, doc: dict[str, Any]) -> str:
        """Insert a document and return its new id"""
        pass

    @abstractmethod
    async def update(self, collection: str, doc_id: str, partial_doc: dict[str, Any]) -> None:
        """Merge top-level keys into an existing document"""
        pass

    @abstractmethod
    async def delete(self, collection: str, doc_id: str) -> None:
        """Remove a document"""
        pass
