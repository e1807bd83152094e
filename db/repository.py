"""Form and submission repositories over a document store"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional
from uuid import uuid4

from core.enums import Collection, FieldType, FormStatus
from core.exceptions import DatabaseError, DocumentNotFound, FormDefinitionError, StoreWriteFailure
from core.interfaces import DocumentStore, OrderBy
from core.models import Form, FormField, Submission
from utils.dates import format_timestamp

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_field(
    name: str,
    type: FieldType = FieldType.TEXT,
    required: bool = False,
    options: Optional[list[str]] = None,
) -> FormField:
    """Create a field with a fresh id"""
    return FormField(id=str(uuid4()), name=name, type=type, required=required, options=options or [])


def validate_form_definition(name: str, fields: list[FormField]) -> None:
    """
    Check a form definition before it is saved

    Raises:
        FormDefinitionError: If the name is blank, there are no fields, a field
            is unnamed or duplicated, or a dropdown has no options
    """
    if not name or not name.strip():
        raise FormDefinitionError("Please enter a form name")
    if not fields:
        raise FormDefinitionError("Please add at least one field")

    seen: set[str] = set()
    for index, form_field in enumerate(fields):
        field_name = form_field.name.strip()
        if not field_name:
            raise FormDefinitionError("All fields must have a name", column=f"#{index + 1}")
        if field_name in seen:
            raise FormDefinitionError(f"Duplicate field name: {field_name}", column=field_name)
        seen.add(field_name)

        if form_field.type == FieldType.DROPDOWN and not [o for o in form_field.options if o.strip()]:
            raise FormDefinitionError(
                f"Dropdown field {field_name} needs at least one option",
                column=field_name
            )


class FormRepository:
    """Forms collection"""

    def __init__(self, store: DocumentStore):
        self.store = store

    async def list(self) -> list[Form]:
        """All forms, newest first"""
        docs = await self.store.list(
            Collection.FORMS.value,
            order_by=OrderBy("createdAt", descending=True)
        )
        return [Form.from_document(doc) for doc in docs]

    async def get(self, form_id: str) -> Form:
        """Fetch one form by id, whether or not it carries timestamps"""
        for doc in await self.store.list(Collection.FORMS.value):
            if doc["id"] == form_id:
                return Form.from_document(doc)
        raise DocumentNotFound(Collection.FORMS.value, form_id)

    async def save(self, form: Form, user_id: Optional[str] = None) -> Form:
        """
        Create the form, or update it when it already has an id

        Args:
            form: Form definition
            user_id: Creator, recorded on first save only

        Returns:
            The stored form with its id and timestamps
        """
        validate_form_definition(form.name, form.fields)

        now = utcnow()
        if form.id:
            saved = form.model_copy(update={"updated_at": now})
            doc = saved.to_document()
            patch = {key: doc[key] for key in ("name", "fields", "updatedAt")}
            await self.store.update(Collection.FORMS.value, form.id, patch)
            logger.info("Updated form %s (%d fields)", form.id, len(form.fields))
            return saved

        saved = form.model_copy(update={
            "created_by": user_id,
            "created_at": now,
            "updated_at": now,
            "status": FormStatus.ACTIVE,
        })
        saved.id = await self.store.create(Collection.FORMS.value, saved.to_document())
        logger.info("Created form %s (%d fields)", saved.id, len(form.fields))
        return saved


class SubmissionRepository:
    """Submissions collection"""

    def __init__(self, store: DocumentStore):
        self.store = store

    async def list_for_form(self, form_id: str) -> list[Submission]:
        """Submissions of one form, newest first"""
        docs = await self.store.list(
            Collection.SUBMISSIONS.value,
            filters={"formId": form_id},
            order_by=OrderBy("submittedAt", descending=True)
        )
        return [Submission.from_document(doc) for doc in docs]

    async def create(
        self,
        form: Form,
        data: dict[str, Any],
        submitted_by: Optional[str] = None,
        row: Optional[int] = None,
    ) -> Submission:
        """
        Store a new submission

        Raises:
            StoreWriteFailure: If the store rejects the write
        """
        submission = Submission(
            form_id=form.id,
            form_name=form.name,
            data=data,
            submitted_by=submitted_by,
            submitted_at=utcnow(),
        )
        try:
            submission.id = await self.store.create(
                Collection.SUBMISSIONS.value,
                submission.to_document()
            )
        except DatabaseError as e:
            raise StoreWriteFailure(
                f"Failed to store submission: {e}",
                collection=Collection.SUBMISSIONS.value,
                row=row
            ) from e
        return submission

    async def replace_data(
        self,
        submission_id: str,
        data: dict[str, Any],
        updated_by: Optional[str] = None,
    ) -> None:
        """Replace the whole value map of a submission"""
        patch = {
            "data": data,
            "updatedAt": format_timestamp(utcnow()),
            "updatedBy": updated_by,
        }
        try:
            await self.store.update(Collection.SUBMISSIONS.value, submission_id, patch)
        except DocumentNotFound:
            raise
        except DatabaseError as e:
            raise StoreWriteFailure(
                f"Failed to update submission {submission_id}: {e}",
                collection=Collection.SUBMISSIONS.value
            ) from e

    async def delete(self, submission_id: str) -> None:
        try:
            await self.store.delete(Collection.SUBMISSIONS.value, submission_id)
        except DatabaseError as e:
            raise StoreWriteFailure(
                f"Failed to delete submission {submission_id}: {e}",
                collection=Collection.SUBMISSIONS.value
            ) from e
