"""
Noteful Backend — Folder Endpoint Tests
=========================================

What:  HTTP-level tests for /api/folders against a real SQLite database.
How:   create_app(database) + HTTPX ASGITransport; rows are seeded through
       the ORM before each scenario.
"""

import pytest

from noteful.models.folder import Folder
from noteful.sanitizer import sanitize


class TestListFolders:
    """GET /api/folders"""

    @pytest.mark.asyncio
    async def test_empty_store_returns_empty_list(self, test_client):
        response = await test_client.get("/api/folders")
        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_returns_all_folders_in_store_order(self, test_client, seed_folders):
        response = await test_client.get("/api/folders")
        assert response.status_code == 200
        assert response.json() == seed_folders

    @pytest.mark.asyncio
    async def test_removes_xss_attack_content(self, test_client, insert_rows, malicious_folder):
        await insert_rows(Folder, [malicious_folder])

        response = await test_client.get("/api/folders")

        assert response.status_code == 200
        folder_name = response.json()[0]["folder_name"]
        assert folder_name == sanitize(malicious_folder["folder_name"])
        assert "<script>" not in folder_name
        assert "&lt;script&gt;" in folder_name


class TestGetFolder:
    """GET /api/folders/{id}"""

    @pytest.mark.asyncio
    async def test_missing_folder_returns_404(self, test_client):
        response = await test_client.get("/api/folders/123456")
        assert response.status_code == 404
        assert response.json() == {"error": {"message": "folder does not exist"}}

    @pytest.mark.asyncio
    async def test_returns_the_specified_folder(self, test_client, seed_folders):
        response = await test_client.get("/api/folders/2")
        assert response.status_code == 200
        assert response.json() == seed_folders[1]

    @pytest.mark.asyncio
    async def test_removes_xss_attack_content(self, test_client, insert_rows, malicious_folder):
        await insert_rows(Folder, [malicious_folder])

        response = await test_client.get(f"/api/folders/{malicious_folder['id']}")

        assert response.status_code == 200
        assert response.json()["folder_name"] == sanitize(malicious_folder["folder_name"])

    @pytest.mark.asyncio
    async def test_non_integer_id_is_a_bad_request(self, test_client):
        response = await test_client.get("/api/folders/abc")
        assert response.status_code == 400
        assert response.json() == {"error": {"message": "invalid request"}}


class TestCreateFolder:
    """POST /api/folders"""

    @pytest.mark.asyncio
    async def test_creates_folder_with_location(self, test_client):
        response = await test_client.post("/api/folders", json={"folder_name": "test new folder"})

        assert response.status_code == 201
        body = response.json()
        assert body["folder_name"] == "test new folder"
        assert isinstance(body["id"], int)
        assert response.headers["location"] == f"/api/folders/{body['id']}"

        fetched = await test_client.get(response.headers["location"])
        assert fetched.status_code == 200
        assert fetched.json() == body

    @pytest.mark.asyncio
    async def test_missing_folder_name_returns_400(self, test_client):
        response = await test_client.post("/api/folders", json={})
        assert response.status_code == 400
        assert response.json() == {"error": {"message": "required field missing"}}

    @pytest.mark.asyncio
    async def test_missing_body_returns_400(self, test_client):
        response = await test_client.post("/api/folders")
        assert response.status_code == 400
        assert response.json() == {"error": {"message": "required field missing"}}

    @pytest.mark.asyncio
    async def test_empty_string_counts_as_present(self, test_client):
        response = await test_client.post("/api/folders", json={"folder_name": ""})
        assert response.status_code == 201
        assert response.json()["folder_name"] == ""

    @pytest.mark.asyncio
    async def test_removes_xss_attack_content_from_response(self, test_client, malicious_folder):
        response = await test_client.post("/api/folders", json={"folder_name": malicious_folder["folder_name"]})
        assert response.status_code == 201
        assert response.json()["folder_name"] == sanitize(malicious_folder["folder_name"])

    @pytest.mark.asyncio
    async def test_malformed_json_is_a_bad_request(self, test_client):
        response = await test_client.post(
            "/api/folders",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json() == {"error": {"message": "invalid request"}}


class TestUpdateFolder:
    """PATCH /api/folders/{id}"""

    @pytest.mark.asyncio
    async def test_no_body_returns_400(self, test_client):
        response = await test_client.patch("/api/folders/123456")
        assert response.status_code == 400
        assert response.json() == {
            "error": {"message": "req body must contain 'folder_name'"}
        }

    @pytest.mark.asyncio
    async def test_falsy_values_count_as_absent(self, test_client, seed_folders):
        response = await test_client.patch("/api/folders/2", json={"folder_name": ""})
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_updates_folder(self, test_client, seed_folders):
        response = await test_client.patch("/api/folders/2", json={"folder_name": "new folder name"})

        assert response.status_code == 204
        assert response.content == b""

        fetched = await test_client.get("/api/folders/2")
        assert fetched.json() == {**seed_folders[1], "folder_name": "new folder name"}

    @pytest.mark.asyncio
    async def test_ignores_unknown_fields(self, test_client, seed_folders):
        response = await test_client.patch(
            "/api/folders/2",
            json={"folder_name": "new folder name", "fieldToIgnore": "should not be in GET response"},
        )
        assert response.status_code == 204

        fetched = await test_client.get("/api/folders/2")
        assert fetched.json() == {"id": 2, "folder_name": "new folder name"}

    @pytest.mark.asyncio
    async def test_missing_id_still_returns_204(self, test_client):
        response = await test_client.patch("/api/folders/123456", json={"folder_name": "ghost"})
        assert response.status_code == 204


class TestDeleteFolder:
    """DELETE /api/folders/{id}"""

    @pytest.mark.asyncio
    async def test_missing_folder_returns_404(self, test_client):
        response = await test_client.delete("/api/folders/123456")
        assert response.status_code == 404
        assert response.json() == {"error": {"message": "folder does not exist"}}

    @pytest.mark.asyncio
    async def test_removes_the_folder(self, test_client, seed_folders):
        response = await test_client.delete("/api/folders/2")
        assert response.status_code == 204

        remaining = await test_client.get("/api/folders")
        assert remaining.json() == [f for f in seed_folders if f["id"] != 2]

    @pytest.mark.asyncio
    async def test_cascades_to_notes(self, test_client, seed_notes):
        response = await test_client.delete("/api/folders/1")
        assert response.status_code == 204

        notes = (await test_client.get("/api/notes")).json()
        assert notes
        assert all(note["folder_id"] != 1 for note in notes)


@pytest.mark.asyncio
async def test_responses_carry_request_id(test_client):
    response = await test_client.get("/api/folders", headers={"X-Request-ID": "abc12345"})
    assert response.headers["x-request-id"] == "abc12345"
