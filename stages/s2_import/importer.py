"""Stage 2: Bulk import of spreadsheet rows"""

import asyncio
import logging
from typing import Any, Iterator, Optional

from core.interfaces import Stage
from core.models import Form, ImportReport, ImportRequest
from core.exceptions import EmptyImport, MissingRequiredField, StoreWriteFailure
from db.repository import SubmissionRepository
from ..s1_validation import RowValidator
from ui.progress import NullProgress, ProgressTracker
from config import settings

logger = logging.getLogger(__name__)


def chunked(rows: list[Any], size: int) -> Iterator[list[Any]]:
    """Consecutive slices of ``rows`` with at most ``size`` items"""
    for start in range(0, len(rows), size):
        yield rows[start:start + size]


async def _notify(result) -> None:
    # Trackers may be sync or async
    if hasattr(result, '__await__'):
        await result


class BulkImporter(Stage[ImportRequest, ImportReport]):
    """
    Stage 2: Validate and store spreadsheet rows as submissions.

    Batches run one after another; the rows of a batch are written
    concurrently and the batch settles completely before the next starts,
    so at most ``batch_size`` writes are in flight. Rejected rows are
    counted, never raised.
    """

    @property
    def name(self) -> str:
        return "Bulk Import"

    @property
    def stage_number(self) -> int:
        return 2

    def __init__(
        self,
        submissions: SubmissionRepository,
        validator: Optional[RowValidator] = None,
        progress: Optional[ProgressTracker] = None,
        batch_size: Optional[int] = None,
    ):
        self.submissions = submissions
        self.validator = validator or RowValidator()
        self.progress = progress or NullProgress()
        self.batch_size = batch_size or settings.IMPORT_BATCH_SIZE

    def validate_input(self, input_data: ImportRequest) -> bool:
        return isinstance(input_data, ImportRequest) and input_data.form.id is not None

    async def execute(self, input_data: ImportRequest) -> ImportReport:
        """Execute import stage"""
        return await self.import_batch(input_data.form, input_data.rows, input_data.submitted_by)

    async def import_batch(
        self,
        form: Form,
        parsed_rows: list[dict[str, Any]],
        submitted_by: Optional[str] = None,
    ) -> ImportReport:
        """
        Import parsed rows into a form

        Args:
            form: Target form
            parsed_rows: First-sheet rows keyed by header
            submitted_by: User recorded on every new submission

        Returns:
            ImportReport with success and error counts

        Raises:
            EmptyImport: If there are no rows
        """
        if not parsed_rows:
            await _notify(self.progress.fail("The uploaded file is empty."))
            raise EmptyImport()

        report = ImportReport()
        for batch_num, batch in enumerate(chunked(parsed_rows, self.batch_size), 1):
            await _notify(self.progress.start_batch(batch_num, len(batch)))

            offset = (batch_num - 1) * self.batch_size
            outcomes = await asyncio.gather(*(
                self._import_row(form, row, offset + i + 1, submitted_by)
                for i, row in enumerate(batch)
            ), return_exceptions=True)

            succeeded = sum(1 for ok in outcomes if ok is True)
            failed = len(outcomes) - succeeded
            report.success_count += succeeded
            report.error_count += failed
            report.batch_count = batch_num

            logger.info(
                "Import into %s: batch %d settled (%d saved, %d rejected)",
                form.id, batch_num, succeeded, failed
            )
            await _notify(self.progress.complete_batch(batch_num, succeeded, failed))

        await _notify(self.progress.complete(report))
        return report

    async def _import_row(
        self,
        form: Form,
        row: dict[str, Any],
        row_number: int,
        submitted_by: Optional[str],
    ) -> bool:
        try:
            normalized = self.validator.validate_and_normalize(form, row, row_number)
        except MissingRequiredField as e:
            logger.debug("Row %d rejected: %s", row_number, e)
            return False

        try:
            await self.submissions.create(form, normalized.data, submitted_by, row=row_number)
        except StoreWriteFailure as e:
            logger.warning("Row %d not stored: %s", row_number, e)
            return False
        except Exception as e:
            logger.warning("Row %d not stored: %s: %s", row_number, type(e).__name__, e)
            return False

        return True
