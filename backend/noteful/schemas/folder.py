"""
Noteful Backend — Folder Request/Response Schemas
===================================================

What:  Pydantic models for folder request bodies and the public folder shape.
Why:   Request bodies are parsed into explicit DTOs before they reach the
       service layer; responses are built from ORM rows with the text field
       sanitized.

Validation rules (deliberately different for create and update):
    FolderCreate:  a key counts as present when the client sent it at all,
                   even as "" or null (tracked through model_fields_set).
    FolderUpdate:  only truthy values count; {"folder_name": ""} is as good
                   as an empty body for the 400 decision.
"""

from typing import ClassVar, List, Optional, Tuple

from pydantic import BaseModel, Field

from noteful.models.folder import Folder
from noteful.sanitizer import sanitize


# ══════════════════════════════════════════════════════════════════════════
# Request Models — What the client sends
# ══════════════════════════════════════════════════════════════════════════


class FolderCreate(BaseModel):
    """Body of POST /api/folders. Unknown keys are ignored."""

    REQUIRED_FIELDS: ClassVar[Tuple[str, ...]] = ("folder_name",)

    folder_name: Optional[str] = None

    def missing_fields(self) -> List[str]:
        """Required keys the client did not supply."""
        return [name for name in self.REQUIRED_FIELDS if name not in self.model_fields_set]

    def row_values(self) -> dict:
        return {"folder_name": self.folder_name}


class FolderUpdate(BaseModel):
    """Body of PATCH /api/folders/{id}. Every field optional."""

    folder_name: Optional[str] = None

    def truthy_count(self) -> int:
        return len([value for value in self.model_dump().values() if value])

    def supplied_values(self) -> dict:
        """The keys the client actually sent, falsy ones included."""
        return self.model_dump(exclude_unset=True)


# ══════════════════════════════════════════════════════════════════════════
# Response Models — What the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class FolderResponse(BaseModel):
    """
    Public representation of a folder.

    Build it with `from_model()` so folder_name is sanitized exactly once;
    constructing it directly skips sanitization.
    """
    id: int = Field(description="Folder identifier")
    folder_name: str = Field(description="Folder name, XSS-sanitized")

    @classmethod
    def from_model(cls, folder: Folder) -> "FolderResponse":
        return cls(id=folder.id, folder_name=sanitize(folder.folder_name))
