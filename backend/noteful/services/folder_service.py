"""
Noteful Backend — Folder Service
==================================

What:  Data access and business rules for folders.
Why:   Keeps every query and every folder rule out of the HTTP layer.
How:   Plain SQLAlchemy 2.0 statements against the injected AsyncSession;
       missing rows become NotFoundError, store failures become DatabaseError.
Who:   Called by the /api/folders route handlers.

Design Decision:
    FolderService is stateless — it receives the db session for each call,
    so it needs no locking and is trivially mockable in tests.
"""

import logging
from typing import List

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.exceptions import DatabaseError, NotFoundError, ValidationError
from noteful.models.folder import Folder
from noteful.schemas.folder import FolderCreate, FolderResponse, FolderUpdate

logger = logging.getLogger(__name__)

REQUIRED_FIELD_MISSING = "required field missing"
UPDATE_REQUIRES_FIELDS = "req body must contain 'folder_name'"


class FolderService:
    """
    Business logic layer for folder operations.

    Responsibilities:
        - list_folders(): every folder in id order
        - get_folder(): single folder, 404 when absent
        - create_folder(): presence check, insert, serialized echo
        - update_folder(): truthiness check, partial update (no existence check)
        - delete_folder(): delete, 404 when nothing was removed
    """

    async def list_folders(self, db: AsyncSession) -> List[FolderResponse]:
        try:
            result = await db.execute(select(Folder).order_by(Folder.id))
            folders = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing folders: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve folders.",
                context={"error_type": type(e).__name__},
            )
        return [FolderResponse.from_model(folder) for folder in folders]

    async def get_folder(self, db: AsyncSession, folder_id: int) -> FolderResponse:
        """
        Retrieve a single folder by ID.

        Raises:
            NotFoundError: No folder with this id (→ 404 "folder does not exist")
            DatabaseError: Query execution failed (→ 500)
        """
        try:
            folder = await db.get(Folder, folder_id)
        except SQLAlchemyError as e:
            logger.error("Database error fetching folder %s: %s", folder_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the folder.",
                context={"folder_id": folder_id, "error_type": type(e).__name__},
            )

        if folder is None:
            raise NotFoundError(resource="folder", resource_id=folder_id)
        return FolderResponse.from_model(folder)

    async def create_folder(self, db: AsyncSession, payload: FolderCreate) -> FolderResponse:
        """
        Insert a folder and return its serialized form.

        Presence rule: `folder_name` must have been supplied. An empty string
        is a valid folder name here; only a missing key is rejected.
        """
        missing = payload.missing_fields()
        if missing:
            raise ValidationError(message=REQUIRED_FIELD_MISSING, fields=missing)

        folder = Folder(**payload.row_values())
        try:
            db.add(folder)
            await db.commit()
            await db.refresh(folder)
        except SQLAlchemyError as e:
            logger.error("Database error creating folder: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not create the folder.",
                context={"error_type": type(e).__name__},
            )

        logger.info("Folder created: %s", folder.id)
        return FolderResponse.from_model(folder)

    async def update_folder(self, db: AsyncSession, folder_id: int, payload: FolderUpdate) -> int:
        """
        Apply a partial update and return the number of rows touched.

        Rejected when no supplied value is truthy. The row count is returned
        for logging only; an update of a missing id is not an error.
        """
        if payload.truthy_count() == 0:
            raise ValidationError(message=UPDATE_REQUIRES_FIELDS)

        try:
            result = await db.execute(
                update(Folder)
                .where(Folder.id == folder_id)
                .values(**payload.supplied_values())
            )
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error updating folder %s: %s", folder_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not update the folder.",
                context={"folder_id": folder_id, "error_type": type(e).__name__},
            )

        logger.info("Folder %s updated (%d rows)", folder_id, result.rowcount)
        return result.rowcount

    async def delete_folder(self, db: AsyncSession, folder_id: int) -> None:
        """
        Delete a folder (its notes go with it through ON DELETE CASCADE).

        Raises:
            NotFoundError: Nothing was deleted (→ 404 "folder does not exist")
        """
        try:
            result = await db.execute(delete(Folder).where(Folder.id == folder_id))
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error deleting folder %s: %s", folder_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not delete the folder.",
                context={"folder_id": folder_id, "error_type": type(e).__name__},
            )

        if result.rowcount == 0:
            raise NotFoundError(resource="folder", resource_id=folder_id)
        logger.info("Folder %s deleted", folder_id)


# ── Singleton Instance ────────────────────────────────────────────────────
folder_service = FolderService()
