"""
Noteful Backend — Notes Route Handlers
========================================

What:  Handles the /api/notes collection and /api/notes/{id} items.
Why:   Notes are the main content of the app; the frontend lists them per
       folder and edits them in place.
How:   Parses request bodies into NoteCreate / NoteUpdate, delegates to
       NoteService, returns JSON with the right status code.
Who:   Called by the frontend note list, note page and add/edit forms.

Status codes:
    GET    /api/notes          200
    GET    /api/notes/{id}     200 | 404
    POST   /api/notes          201 + Location | 400
    PATCH  /api/notes/{id}     204 | 400
    DELETE /api/notes/{id}     204 | 404
"""

import logging
import posixpath
from typing import List, Optional

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.database import get_db_session
from noteful.schemas.common import ErrorResponse
from noteful.schemas.note import NoteCreate, NoteResponse, NoteUpdate
from noteful.services.note_service import note_service

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/api/notes", tags=["Notes"])


@router.get(
    "",
    response_model=List[NoteResponse],
    responses={
        200: {"description": "All notes, oldest id first"},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List all notes",
)
async def list_notes(db: AsyncSession = Depends(get_db_session)) -> List[NoteResponse]:
    """
    Return every note with note_name and note_content sanitized.

    An empty store yields `[]` with status 200.
    """
    return await note_service.list_notes(db)


@router.get(
    "/{note_id}",
    response_model=NoteResponse,
    responses={
        200: {"description": "The note", "model": NoteResponse},
        404: {"description": "Note not found", "model": ErrorResponse},
    },
    summary="Get a single note by ID",
)
async def get_note(
    note_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> NoteResponse:
    return await note_service.get_note(db, note_id)


@router.post(
    "",
    status_code=201,
    response_model=NoteResponse,
    responses={
        201: {"description": "Note created", "model": NoteResponse},
        400: {"description": "Required field missing", "model": ErrorResponse},
    },
    summary="Create a note",
)
async def create_note(
    request: Request,
    response: Response,
    payload: Optional[NoteCreate] = None,
    db: AsyncSession = Depends(get_db_session),
) -> NoteResponse:
    """
    Create a note inside an existing folder.

    Example:
        POST /api/notes {"note_name": "a", "note_content": "b", "folder_id": 2}
        → 201, Location: /api/notes/<id>
    """
    note = await note_service.create_note(db, payload or NoteCreate())
    response.headers["Location"] = posixpath.join(request.url.path, str(note.id))
    return note


@router.patch(
    "/{note_id}",
    status_code=204,
    response_class=Response,
    responses={400: {"description": "No usable field in body", "model": ErrorResponse}},
    summary="Partially update a note",
)
async def update_note(
    note_id: int,
    payload: Optional[NoteUpdate] = None,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await note_service.update_note(db, note_id, payload or NoteUpdate())
    return Response(status_code=204)


@router.delete(
    "/{note_id}",
    status_code=204,
    response_class=Response,
    responses={404: {"description": "Note not found", "model": ErrorResponse}},
    summary="Delete a note",
)
async def delete_note(
    note_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await note_service.delete_note(db, note_id)
    return Response(status_code=204)
