"""Stage 0: Reception - Spreadsheet parsing"""

import logging
from pathlib import Path

from core.interfaces import Stage
from core.models import ParsedSheet
from core.exceptions import StageError, FileParseError
from .parsers import ExcelParser, CSVParser

logger = logging.getLogger(__name__)


class Receiver(Stage[str, ParsedSheet]):
    """Stage 0: Reception - Read the first sheet of an uploaded file"""

    @property
    def name(self) -> str:
        return "Reception"

    @property
    def stage_number(self) -> int:
        return 0

    def __init__(self):
        self.parsers = {
            ".xlsx": ExcelParser(),
            ".xls": ExcelParser(),
            ".csv": CSVParser(),
        }

    def validate_input(self, input_data: str) -> bool:
        """Validate file path"""
        if not isinstance(input_data, str):
            return False

        path = Path(input_data)
        return path.exists() and path.is_file()

    async def execute(self, input_data: str) -> ParsedSheet:
        """Execute reception stage"""
        path = Path(input_data)
        ext = path.suffix.lower()

        if ext not in self.parsers:
            raise StageError(
                self.stage_number,
                f"Unsupported file type: {ext}. Supported: {', '.join(self.parsers.keys())}"
            )

        try:
            sheet = self.parsers[ext].parse(str(path))
        except FileParseError as e:
            raise StageError(self.stage_number, str(e)) from e

        logger.info(
            "Parsed %s: sheet %r, %d rows",
            sheet.metadata.file_name, sheet.sheet_name, len(sheet.rows)
        )
        return sheet
