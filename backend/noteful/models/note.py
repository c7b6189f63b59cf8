"""
Noteful Backend — Note SQLAlchemy Model
=========================================

What:  ORM model representing the `notes` table.
Why:   Maps Python objects to database rows for type-safe database operations.
Who:   Used by NoteService for CRUD operations and by Alembic for schema management.

Table Design Rationale:
    - Integer surrogate key generated by the store on insert
    - note_name / note_content: free text, stored exactly as submitted
    - date_modified: set by the store (CURRENT_TIMESTAMP), never client supplied
    - folder_id: required reference to folders.id

    Referential integrity lives in the database only. The application never
    checks that folder_id exists before writing; a bad reference surfaces as an
    IntegrityError from the store. ON DELETE CASCADE removes a folder's notes
    together with the folder.

Query Patterns:
    - List notes: SELECT ... ORDER BY id
    - Get single note: SELECT ... WHERE id = :id (primary key lookup)
    - Notes of a folder: index on folder_id
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from noteful.database import Base


class Note(Base):
    """A text entity belonging to exactly one folder."""

    __tablename__ = "notes"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    note_name: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    note_content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    # Why server_default: the store owns the timestamp; CURRENT_TIMESTAMP
    # renders on both PostgreSQL and SQLite
    date_modified: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    folder_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("folders.id", ondelete="CASCADE"),
        nullable=False,
    )

    __table_args__ = (
        Index("idx_notes_folder_id", "folder_id"),
    )

    def __repr__(self) -> str:
        return (
            f"<Note(id={self.id}, folder_id={self.folder_id}, "
            f"note_name={self.note_name!r})>"
        )
