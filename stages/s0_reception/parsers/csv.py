"""CSV file parser"""

import pandas as pd
from pathlib import Path
from typing import List

from core.models import ParsedSheet
from core.enums import FileType
from core.exceptions import FileParseError
from .base import FileParser
from utils.encoding import detect_encoding


class CSVParser(FileParser):
    """Parser for CSV files; every cell stays text"""

    @property
    def supported_extensions(self) -> List[str]:
        return [".csv"]

    def detect_encoding(self, file_path: str) -> str:
        """Detect CSV file encoding"""
        return detect_encoding(Path(file_path))

    def parse(self, file_path: str) -> ParsedSheet:
        """Parse CSV file"""
        path = Path(file_path)

        if not path.exists():
            raise FileParseError(f"File not found: {file_path}", file_path)

        try:
            encoding = self.detect_encoding(path)
            delimiter = self._detect_delimiter(path, encoding)

            df = pd.read_csv(
                path,
                encoding=encoding,
                delimiter=delimiter,
                header=0,
                dtype=str,
                keep_default_na=False,
                on_bad_lines='skip'
            )
            df.columns = [str(col).strip() for col in df.columns]

            return ParsedSheet(
                metadata=self._metadata(path, FileType.CSV, encoding=encoding),
                sheet_name="Sheet1",  # CSV is single sheet
                headers=list(df.columns),
                rows=self._frame_rows(df)
            )

        except pd.errors.EmptyDataError:
            return ParsedSheet(
                metadata=self._metadata(path, FileType.CSV),
                sheet_name="Sheet1"
            )
        except Exception as e:
            raise FileParseError(
                f"Failed to parse CSV file: {e}",
                file_path
            ) from e

    def _detect_delimiter(self, path: Path, encoding: str) -> str:
        """Detect CSV delimiter"""
        delimiters = [',', '\t', '|', ';']

        with open(path, 'r', encoding=encoding) as f:
            sample = f.read(4096)

        scores = {}
        for delim in delimiters:
            counts = [line.count(delim) for line in sample.split('\n')[:10] if line.strip()]
            if counts and min(counts) > 0:
                avg = sum(counts) / len(counts)
                variance = sum((c - avg) ** 2 for c in counts) / len(counts)
                scores[delim] = min(counts) if variance < 2 else 0

        return max(scores, key=scores.get) if scores else ','
