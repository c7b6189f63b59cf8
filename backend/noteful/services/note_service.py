"""
Noteful Backend — Note Service
================================

What:  Data access and business rules for notes.
Why:   Encapsulates all note queries and validation in one place,
       independent of HTTP concerns.
How:   SQLAlchemy 2.0 statements against the AsyncSession handed in by the
       route; results are serialized through NoteResponse.from_model().
Who:   Called by the /api/notes route handlers.

Request flow (POST /api/notes):
    ┌──────────┐    ┌──────────────┐    ┌──────────┐    ┌──────────────┐
    │  Route   │───▶│  Presence    │───▶│  INSERT  │───▶│  Serialize   │
    │ (DTO in) │    │  check       │    │ (commit) │    │  (sanitize)  │
    └──────────┘    └──────────────┘    └──────────┘    └──────────────┘

    folder_id is never checked here. The foreign key does that; a note
    pointing at a missing folder fails the INSERT and surfaces as a
    DatabaseError (→ 500).

Error Handling Strategy:
    Missing rows → NotFoundError. Validation failures → ValidationError.
    Anything SQLAlchemy raises is wrapped in DatabaseError so internal
    details never reach the client.
"""

import logging
from typing import List

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.exceptions import DatabaseError, NotFoundError, ValidationError
from noteful.models.note import Note
from noteful.schemas.note import NoteCreate, NoteResponse, NoteUpdate

logger = logging.getLogger(__name__)

REQUIRED_FIELD_MISSING = "required field missing"
UPDATE_REQUIRES_FIELDS = "req body must contain 'note_content', 'note_name' and 'folder_id'"


class NoteService:
    """
    Business logic layer for note operations.

    Responsibilities:
        - list_notes(): every note in id order
        - get_note(): single note retrieval with not-found handling
        - create_note(): presence check on all three fields, then insert
        - update_note(): truthiness check, partial update
        - delete_note(): delete with not-found handling
    """

    async def list_notes(self, db: AsyncSession) -> List[NoteResponse]:
        """
        Return every note, serialized.

        Query plan:
            SELECT * FROM notes ORDER BY id
        """
        try:
            result = await db.execute(select(Note).order_by(Note.id))
            notes = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing notes: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve notes.",
                context={"error_type": type(e).__name__},
            )
        return [NoteResponse.from_model(note) for note in notes]

    async def get_note(self, db: AsyncSession, note_id: int) -> NoteResponse:
        """
        Retrieve a single note by ID.

        Raises:
            NotFoundError: Note with given ID does not exist (→ 404)
            DatabaseError: Query execution failed (→ 500)
        """
        try:
            note = await db.get(Note, note_id)
        except SQLAlchemyError as e:
            logger.error("Database error fetching note %s: %s", note_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the note.",
                context={"note_id": note_id, "error_type": type(e).__name__},
            )

        if note is None:
            # Converts SQLAlchemy's None into a 404 via the global error handler
            raise NotFoundError(resource="note", resource_id=note_id)
        return NoteResponse.from_model(note)

    async def create_note(self, db: AsyncSession, payload: NoteCreate) -> NoteResponse:
        """
        Insert a note and return its serialized form.

        All of note_name, note_content and folder_id must have been supplied.
        date_modified comes from the store, so the row is refreshed after the
        commit before it is serialized.

        Raises:
            ValidationError: A required key is missing (→ 400)
            DatabaseError: Insert failed, e.g. unknown folder_id (→ 500)
        """
        missing = payload.missing_fields()
        if missing:
            raise ValidationError(message=REQUIRED_FIELD_MISSING, fields=missing)

        note = Note(**payload.row_values())
        try:
            db.add(note)
            await db.commit()
            await db.refresh(note)
        except SQLAlchemyError as e:
            logger.error("Database error creating note: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not create the note.",
                context={"folder_id": payload.folder_id, "error_type": type(e).__name__},
            )

        logger.info("Note created: %s (folder %s)", note.id, note.folder_id)
        return NoteResponse.from_model(note)

    async def update_note(self, db: AsyncSession, note_id: int, payload: NoteUpdate) -> int:
        """
        Apply a partial update and return the number of rows touched.

        Rejected when none of the three values is truthy. Every key the
        client supplied is written as-is. A missing id updates nothing and
        is not reported as an error.
        """
        if payload.truthy_count() == 0:
            raise ValidationError(message=UPDATE_REQUIRES_FIELDS)

        try:
            result = await db.execute(
                update(Note)
                .where(Note.id == note_id)
                .values(**payload.supplied_values())
            )
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error updating note %s: %s", note_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not update the note.",
                context={"note_id": note_id, "error_type": type(e).__name__},
            )

        logger.info("Note %s updated (%d rows)", note_id, result.rowcount)
        return result.rowcount

    async def delete_note(self, db: AsyncSession, note_id: int) -> None:
        """
        Raises:
            NotFoundError: Nothing was deleted (→ 404 "note does not exist")
        """
        try:
            result = await db.execute(delete(Note).where(Note.id == note_id))
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error deleting note %s: %s", note_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not delete the note.",
                context={"note_id": note_id, "error_type": type(e).__name__},
            )

        if result.rowcount == 0:
            raise NotFoundError(resource="note", resource_id=note_id)
        logger.info("Note %s deleted", note_id)


# ── Singleton Instance ────────────────────────────────────────────────────
# NoteService is stateless; one shared instance is enough
note_service = NoteService()
