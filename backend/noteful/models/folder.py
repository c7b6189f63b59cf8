"""
Noteful Backend — Folder SQLAlchemy Model
===========================================

What:  ORM model representing the `folders` table.
Who:   Used by FolderService for CRUD operations and by Alembic for schema management.

Table Design:
    - Integer surrogate key generated by the store on insert
    - folder_name: free text, required
    Notes reference folders through notes.folder_id (ON DELETE CASCADE).
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from noteful.database import Base


class Folder(Base):
    """A named container that notes belong to."""

    __tablename__ = "folders"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    # Stored raw; sanitized only when serialized for a response
    folder_name: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Folder(id={self.id}, folder_name={self.folder_name!r})>"
