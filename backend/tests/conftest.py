"""
Noteful Backend — Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Provides reusable test infrastructure (mocked session, real SQLite
       database, API client, folder/note fixture rows).
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, fresh for each test):
    ├── mock_db_session: AsyncMock session for service unit tests (no DB)
    ├── database: Database handle on a throwaway SQLite file with tables created
    ├── test_client: HTTPX AsyncClient bound to create_app(database)
    ├── seed_folders / seed_notes: insert the fixture rows below
    ├── malicious_folder / malicious_note: rows carrying script markup
    └── insert_rows: helper to insert arbitrary ORM rows
"""

import os
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

# Override settings for testing BEFORE any app imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from noteful.database import Base, Database
from noteful.models.folder import Folder
from noteful.models.note import Note


# ══════════════════════════════════════════════════════════════════════════
# Fixture Data
# ══════════════════════════════════════════════════════════════════════════

def make_folders_array():
    return [
        {"id": 1, "folder_name": "Important"},
        {"id": 2, "folder_name": "Super"},
        {"id": 3, "folder_name": "Spangley"},
    ]


def make_notes_array():
    return [
        {
            "id": 1,
            "note_name": "Dogs",
            "note_content": "Corporis accusamus placeat quas non voluptas.",
            "date_modified": datetime(2029, 1, 22, 16, 28, 32),
            "folder_id": 1,
        },
        {
            "id": 2,
            "note_name": "Cats",
            "note_content": "Eos laudantium quia ab blanditiis temporibus.",
            "date_modified": datetime(2029, 1, 22, 16, 28, 32),
            "folder_id": 2,
        },
        {
            "id": 3,
            "note_name": "Pigs",
            "note_content": "Occaecati dignissimos quam qui facere deserunt.",
            "date_modified": datetime(2029, 1, 22, 16, 28, 32),
            "folder_id": 3,
        },
        {
            "id": 4,
            "note_name": "Birds",
            "note_content": "Eum culpa odit veniam at voluptas.",
            "date_modified": datetime(2029, 1, 22, 16, 28, 32),
            "folder_id": 1,
        },
    ]


MALICIOUS_NAME = 'Naughty naughty very naughty <script>alert("xss");</script>'
MALICIOUS_CONTENT = (
    'Bad image <img src="https://url.to.file.which/does-not.exist" '
    'onerror="alert(document.cookie);">. But not <strong>all</strong> bad.'
)


def as_json_note(row: dict) -> dict:
    """Fixture row → the JSON the API returns for it (no markup involved)."""
    return {**row, "date_modified": row["date_modified"].isoformat()}


@pytest.fixture
def malicious_folder():
    return {"id": 911, "folder_name": MALICIOUS_NAME}


@pytest.fixture
def malicious_note():
    return {
        "id": 911,
        "note_name": MALICIOUS_NAME,
        "note_content": MALICIOUS_CONTENT,
        "date_modified": datetime(2029, 1, 22, 16, 28, 32),
        "folder_id": 1,
    }


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures (created fresh for each test)
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_get_folder(mock_db_session):
            mock_db_session.get.return_value = folder
            result = await folder_service.get_folder(mock_db_session, 1)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.get = AsyncMock()
    session.commit = AsyncMock()
    session.refresh = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def database(tmp_path):
    """
    A Database handle on a fresh SQLite file with all tables created.

    A file (not :memory:) so every pooled connection sees the same data.
    """
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'noteful_test.db'}")
    async with db.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def insert_rows(database):
    """Returns an async helper: await insert_rows(Folder, [dict, ...])."""

    async def _insert(model, rows):
        async with database.session() as session:
            session.add_all([model(**row) for row in rows])

    return _insert


@pytest_asyncio.fixture
async def seed_folders(insert_rows):
    folders = make_folders_array()
    await insert_rows(Folder, folders)
    return folders


@pytest_asyncio.fixture
async def seed_notes(seed_folders, insert_rows):
    """Inserts the fixture notes; returns them in their JSON response shape."""
    notes = make_notes_array()
    await insert_rows(Note, notes)
    return [as_json_note(note) for note in notes]


@pytest_asyncio.fixture
async def test_client(database):
    """
    HTTPX AsyncClient talking to an app bound to the test database.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/api/folders")
            assert response.status_code == 200
    """
    from noteful.main import create_app
    app = create_app(database=database)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
