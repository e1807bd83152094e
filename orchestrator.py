"""Coordinator for form, entry, import and chart actions"""

import logging
from pathlib import Path
from typing import Any, Optional, Union

from core.interfaces import DocumentStore
from core.models import ChartConfig, Form, ImportReport, ImportRequest, ParsedSheet, Submission
from core.exceptions import PipelineError, StageError, StoreWriteFailure, EntrySubmissionError
from db.repository import FormRepository, SubmissionRepository
from stages import Receiver, RowValidator, BulkImporter, AggregationEngine
from stages.s2_import import write_template
from stages.s3_aggregation import ChartPoint, default_axes
from ui.progress import NullProgress, ProgressTracker

logger = logging.getLogger(__name__)


class Orchestrator:
    """
    Entry point for every user action.

    Each call is an independent unit of work against the store; nothing is
    cached between calls, so callers re-list submissions after writes.
    """

    def __init__(
        self,
        store: DocumentStore,
        progress: Optional[ProgressTracker] = None,
        batch_size: Optional[int] = None,
    ):
        self.store = store
        self.progress = progress or NullProgress()
        self.forms = FormRepository(store)
        self.submissions = SubmissionRepository(store)
        self.validator = RowValidator()
        self.engine = AggregationEngine()

        self.stages = {
            0: Receiver(),
            2: BulkImporter(
                self.submissions,
                validator=self.validator,
                progress=self.progress,
                batch_size=batch_size
            ),
        }

    # ─────────────────────────────────────────────────────────
    # Forms
    # ─────────────────────────────────────────────────────────

    async def list_forms(self) -> list[Form]:
        return await self.forms.list()

    async def save_form(self, form: Form, user_id: Optional[str] = None) -> Form:
        return await self.forms.save(form, user_id)

    async def export_template(self, form_id: str, path: Optional[Union[str, Path]] = None) -> Path:
        """Write the blank import workbook for a form"""
        form = await self.forms.get(form_id)
        target = write_template(form, path)
        logger.info("Wrote template for %s to %s", form.name, target)
        return target

    # ─────────────────────────────────────────────────────────
    # Manual entry
    # ─────────────────────────────────────────────────────────

    async def list_submissions(self, form_id: str) -> list[Submission]:
        return await self.submissions.list_for_form(form_id)

    async def submit_entry(
        self,
        form: Form,
        raw_row: dict[str, Any],
        user_id: Optional[str] = None,
        editing_id: Optional[str] = None,
    ) -> str:
        """
        Save one manually entered row, or replace an edited row's values

        Returns:
            Id of the created or edited submission

        Raises:
            MissingRequiredField: If a required field is empty
            EntrySubmissionError: If the store rejects the write
        """
        normalized = self.validator.validate_entry(form, raw_row)

        try:
            if editing_id:
                await self.submissions.replace_data(editing_id, normalized.data, user_id)
                logger.info("Updated entry %s of %s", editing_id, form.id)
                return editing_id

            submission = await self.submissions.create(form, normalized.data, user_id)
        except StoreWriteFailure as e:
            logger.error("Failed to save entry for %s: %s", form.id, e)
            raise EntrySubmissionError("Failed to save data") from e

        logger.info("Added entry %s to %s", submission.id, form.id)
        return submission.id

    async def delete_entry(self, submission_id: str) -> None:
        try:
            await self.submissions.delete(submission_id)
        except StoreWriteFailure as e:
            raise EntrySubmissionError("Failed to delete entry") from e
        logger.info("Deleted entry %s", submission_id)

    # ─────────────────────────────────────────────────────────
    # Bulk import
    # ─────────────────────────────────────────────────────────

    async def run_import(
        self,
        form_id: str,
        file_path: str,
        user_id: Optional[str] = None,
    ) -> ImportReport:
        """
        Parse a spreadsheet and import its first sheet into a form

        Raises:
            EmptyImport: If the sheet has no data rows
            PipelineError: If the file cannot be read
        """
        form = await self.forms.get(form_id)

        try:
            sheet: ParsedSheet = await self._execute_stage(0, file_path)
            return await self._execute_stage(
                2,
                ImportRequest(form=form, rows=sheet.rows, submitted_by=user_id)
            )
        except StageError as e:
            fail_result = self.progress.fail(str(e))
            if hasattr(fail_result, '__await__'):
                await fail_result
            raise PipelineError(f"Import failed at stage {e.stage}: {e}", stage=e.stage)

    async def import_rows(
        self,
        form: Form,
        rows: list[dict[str, Any]],
        user_id: Optional[str] = None,
    ) -> ImportReport:
        """Import rows that were already parsed by the caller"""
        return await self._execute_stage(2, ImportRequest(form=form, rows=rows, submitted_by=user_id))

    async def _execute_stage(self, stage_num: int, input_data) -> Any:
        stage = self.stages[stage_num]

        if not stage.validate_input(input_data):
            raise StageError(stage_num, "Invalid input")

        logger.debug("Running stage %d: %s", stage_num, stage.name)
        return await stage.execute(input_data)

    # ─────────────────────────────────────────────────────────
    # Charts
    # ─────────────────────────────────────────────────────────

    async def chart(self, form_id: str, config: ChartConfig) -> tuple[ChartConfig, list[ChartPoint]]:
        """
        Compute chart points for a form

        Unset axes are filled from the form first.

        Returns:
            The effective config and its points
        """
        form = await self.forms.get(form_id)
        submissions = await self.submissions.list_for_form(form_id)
        effective = default_axes(form, config)
        return effective, self.engine.aggregate(submissions, effective)
