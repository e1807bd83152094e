"""Base file parser"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional

import numpy as np
import pandas as pd

from core.interfaces import FileParser as IFileParser
from core.models import FileMetadata, ParsedSheet
from core.enums import FileType


class FileParser(IFileParser, ABC):
    """Abstract base class for spreadsheet parsers"""

    @abstractmethod
    def parse(self, file_path: str) -> ParsedSheet:
        """Parse the first sheet and return header-keyed rows"""
        pass

    @abstractmethod
    def detect_encoding(self, file_path: str) -> str:
        """Detect file encoding"""
        pass

    def _metadata(
        self,
        path: Path,
        file_type: FileType,
        encoding: Optional[str] = None,
        sheets: Optional[list[str]] = None,
    ) -> FileMetadata:
        return FileMetadata(
            file_path=str(path.absolute()),
            file_name=path.name,
            file_type=file_type,
            file_size_bytes=path.stat().st_size,
            encoding=encoding,
            sheets=sheets or []
        )

    def _frame_rows(self, df: pd.DataFrame) -> list[dict[str, Any]]:
        """
        Convert a DataFrame to row dicts

        Empty cells are left out of the row and rows with no values at all
        are dropped, so a missing cell and an absent column look the same.
        """
        rows = []
        for record in df.to_dict(orient="records"):
            row = {}
            for key, value in record.items():
                if _is_empty(value):
                    continue
                if isinstance(value, np.generic):
                    value = value.item()
                row[str(key)] = value
            if row:
                rows.append(row)
        return rows


def _is_empty(value: Any) -> bool:
    if value is None or (isinstance(value, str) and value == ""):
        return True
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False
