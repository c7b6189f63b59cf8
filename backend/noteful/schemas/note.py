"""
Noteful Backend — Note Request/Response Schemas
=================================================

What:  Pydantic models defining the notes API contract.
Why:   Explicit input schemas are validated before reaching business logic,
       and the response model controls exactly what leaves the API.
How:   FastAPI parses request bodies into NoteCreate / NoteUpdate; the
       service builds NoteResponse objects from ORM rows via from_model().

Design Decision:
    Schemas are separate from SQLAlchemy models because:
    1. The stored row holds raw user text; the API only ever exposes the
       sanitized form
    2. Presence rules (create) and truthiness rules (update) belong to the
       API contract, not to the table definition

    NoteCreate fields are all Optional on purpose: a missing key must turn
    into `400 required field missing`, not FastAPI's 422 field error, so the
    presence check runs in the service through missing_fields().
"""

from datetime import datetime
from typing import ClassVar, List, Optional, Tuple

from pydantic import BaseModel, Field

from noteful.models.note import Note
from noteful.sanitizer import sanitize


# ══════════════════════════════════════════════════════════════════════════
# Request Models — What the client sends
# ══════════════════════════════════════════════════════════════════════════


class NoteCreate(BaseModel):
    """
    What:  Body of POST /api/notes.

    Presence semantics:
        {"note_name": "", "note_content": "b", "folder_id": 0} passes the
        presence check; empty strings and zero are valid values here.
        Dropping any of the three keys fails it.
    """

    REQUIRED_FIELDS: ClassVar[Tuple[str, ...]] = ("note_name", "note_content", "folder_id")

    note_name: Optional[str] = None
    note_content: Optional[str] = None
    folder_id: Optional[int] = None

    def missing_fields(self) -> List[str]:
        """Required keys the client did not supply."""
        return [name for name in self.REQUIRED_FIELDS if name not in self.model_fields_set]

    def row_values(self) -> dict:
        return {
            "note_name": self.note_name,
            "note_content": self.note_content,
            "folder_id": self.folder_id,
        }


class NoteUpdate(BaseModel):
    """
    What:  Body of PATCH /api/notes/{id}.

    Truthiness semantics:
        The update is rejected when none of the three values is truthy, so
        {"note_name": "", "folder_id": 0} is rejected like {}. Once accepted,
        every key the client sent is written, falsy ones included.
    """

    note_name: Optional[str] = None
    note_content: Optional[str] = None
    folder_id: Optional[int] = None

    def truthy_count(self) -> int:
        return len([value for value in self.model_dump().values() if value])

    def supplied_values(self) -> dict:
        return self.model_dump(exclude_unset=True)


# ══════════════════════════════════════════════════════════════════════════
# Response Models — What the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """
    What:  Public representation of a note.
    Who:   Returned by GET /api/notes, GET /api/notes/{id} and POST /api/notes.

    Text fields are sanitized in from_model(); id, folder_id and
    date_modified pass through unchanged.
    """
    id: int = Field(description="Note identifier")
    note_name: str = Field(description="Note title, XSS-sanitized")
    note_content: str = Field(description="Note body, XSS-sanitized")
    date_modified: datetime = Field(description="Last modification time, set by the store")
    folder_id: int = Field(description="Identifier of the owning folder")

    @classmethod
    def from_model(cls, note: Note) -> "NoteResponse":
        return cls(
            id=note.id,
            note_name=sanitize(note.note_name),
            note_content=sanitize(note.note_content),
            date_modified=note.date_modified,
            folder_id=note.folder_id,
        )
