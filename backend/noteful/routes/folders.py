"""
Noteful Backend — Folder Route Handlers
=========================================

What:  CRUD endpoints under /api/folders.
How:   Parse the body into a DTO, delegate to FolderService, set the status
       code and headers. Errors are raised as exceptions and turned into
       `{"error": {"message": ...}}` responses by the global handlers.
"""

import logging
import posixpath
from typing import List, Optional

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.database import get_db_session
from noteful.schemas.common import ErrorResponse
from noteful.schemas.folder import FolderCreate, FolderResponse, FolderUpdate
from noteful.services.folder_service import folder_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/folders", tags=["Folders"])


@router.get(
    "",
    response_model=List[FolderResponse],
    summary="List all folders",
)
async def list_folders(db: AsyncSession = Depends(get_db_session)) -> List[FolderResponse]:
    return await folder_service.list_folders(db)


@router.get(
    "/{folder_id}",
    response_model=FolderResponse,
    responses={404: {"description": "Folder not found", "model": ErrorResponse}},
    summary="Get a single folder by ID",
)
async def get_folder(
    folder_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> FolderResponse:
    return await folder_service.get_folder(db, folder_id)


@router.post(
    "",
    status_code=201,
    response_model=FolderResponse,
    responses={400: {"description": "Required field missing", "model": ErrorResponse}},
    summary="Create a folder",
)
async def create_folder(
    request: Request,
    response: Response,
    payload: Optional[FolderCreate] = None,
    db: AsyncSession = Depends(get_db_session),
) -> FolderResponse:
    """
    Create a folder and point the Location header at it.

    A request without a body is treated like an empty object, so it fails the
    presence check with 400 instead of FastAPI's 422.
    """
    folder = await folder_service.create_folder(db, payload or FolderCreate())
    response.headers["Location"] = posixpath.join(request.url.path, str(folder.id))
    return folder


@router.patch(
    "/{folder_id}",
    status_code=204,
    response_class=Response,
    responses={400: {"description": "No usable field in body", "model": ErrorResponse}},
    summary="Partially update a folder",
)
async def update_folder(
    folder_id: int,
    payload: Optional[FolderUpdate] = None,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    # 204 even when the id matched nothing
    await folder_service.update_folder(db, folder_id, payload or FolderUpdate())
    return Response(status_code=204)


@router.delete(
    "/{folder_id}",
    status_code=204,
    response_class=Response,
    responses={404: {"description": "Folder not found", "model": ErrorResponse}},
    summary="Delete a folder and its notes",
)
async def delete_folder(
    folder_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await folder_service.delete_folder(db, folder_id)
    return Response(status_code=204)
