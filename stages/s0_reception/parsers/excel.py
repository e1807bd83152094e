"""Excel file parser"""

import pandas as pd
from pathlib import Path
from typing import Any, List
import openpyxl

from core.models import ParsedSheet
from core.enums import FileType
from core.exceptions import FileParseError
from .base import FileParser


class ExcelParser(FileParser):
    """Parser for Excel files (.xlsx, .xls)"""

    @property
    def supported_extensions(self) -> List[str]:
        return [".xlsx", ".xls"]

    def detect_encoding(self, file_path: str) -> str:
        """Excel files are binary, no encoding needed"""
        return "binary"

    def parse(self, file_path: str) -> ParsedSheet:
        """Parse the first sheet; date cells come back as date/time objects"""
        path = Path(file_path)

        if not path.exists():
            raise FileParseError(f"File not found: {file_path}", file_path)

        try:
            if path.suffix.lower() == ".xlsx":
                return self._parse_xlsx(path)
            return self._parse_xls(path)
        except FileParseError:
            raise
        except Exception as e:
            raise FileParseError(
                f"Failed to parse Excel file: {e}",
                file_path
            ) from e

    def _parse_xlsx(self, path: Path) -> ParsedSheet:
        workbook = openpyxl.load_workbook(path, data_only=True, read_only=True)
        try:
            sheet = workbook.worksheets[0]
            metadata = self._metadata(path, FileType.EXCEL_XLSX, sheets=workbook.sheetnames)

            row_iter = sheet.iter_rows(values_only=True)
            header_row = next(row_iter, None)
            if header_row is None:
                return ParsedSheet(metadata=metadata, sheet_name=sheet.title)

            headers = [self._header(cell) for cell in header_row]
            rows = []
            for values in row_iter:
                row = {}
                for header, value in zip(headers, values):
                    if not header or value is None or value == "":
                        continue
                    row[header] = value
                if row:
                    rows.append(row)

            return ParsedSheet(
                metadata=metadata,
                sheet_name=sheet.title,
                headers=[header for header in headers if header],
                rows=rows
            )
        finally:
            workbook.close()

    def _parse_xls(self, path: Path) -> ParsedSheet:
        excel_file = pd.ExcelFile(path)
        sheet_name = excel_file.sheet_names[0]
        df = pd.read_excel(excel_file, sheet_name=sheet_name, header=0)
        df = df.loc[:, [not str(col).startswith("Unnamed:") for col in df.columns]]

        return ParsedSheet(
            metadata=self._metadata(path, FileType.EXCEL_XLS, sheets=excel_file.sheet_names),
            sheet_name=sheet_name,
            headers=[str(col) for col in df.columns],
            rows=self._frame_rows(df)
        )

    def _header(self, cell: Any) -> str:
        if cell is None:
            return ""
        return str(cell).strip()
