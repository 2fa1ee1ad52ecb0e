"""
Noteful Backend — Folder API Tests
==================================

What:  End-to-end tests for /api/folders with a real SQLite store.
"""

from datetime import datetime

import pytest

NOT_FOUND_BODY = {"error": "not_found", "message": "Not Found"}


def parse_timestamp(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def assert_not_found(response):
    assert response.status_code == 404
    body = response.json()
    assert {k: body[k] for k in ("error", "message")} == NOT_FOUND_BODY


class TestFolderEndpoints:

    @pytest.mark.asyncio
    async def test_create_then_get(self, test_client):
        response = await test_client.post("/api/folders", json={"name": "School"})

        assert response.status_code == 201
        folder = response.json()
        assert set(folder) == {"id", "name", "createdAt", "updatedAt"}
        assert folder["name"] == "School"
        assert response.headers["location"] == f"/api/folders/{folder['id']}"

        fetched = await test_client.get(response.headers["location"])
        assert fetched.status_code == 200
        assert fetched.json() == folder

    @pytest.mark.asyncio
    async def test_list_sorted_by_name(self, test_client):
        for name in ["Work", "Archive", "Personal"]:
            await test_client.post("/api/folders", json={"name": name})

        response = await test_client.get("/api/folders")

        assert response.status_code == 200
        assert [f["name"] for f in response.json()] == ["Archive", "Personal", "Work"]

    @pytest.mark.asyncio
    async def test_missing_name(self, test_client):
        response = await test_client.post("/api/folders", json={})

        assert response.status_code == 400
        assert response.json()["message"] == "Missing `name` in request body"

    @pytest.mark.asyncio
    async def test_duplicate_name(self, test_client):
        await test_client.post("/api/folders", json={"name": "School"})
        response = await test_client.post("/api/folders", json={"name": "School"})

        assert response.status_code == 400
        assert response.json()["message"] == "That folder already exists"

    @pytest.mark.asyncio
    async def test_rename_to_existing_name(self, test_client):
        await test_client.post("/api/folders", json={"name": "School"})
        other = (await test_client.post("/api/folders", json={"name": "Home"})).json()

        response = await test_client.put(f"/api/folders/{other['id']}", json={"name": "School"})

        assert response.status_code == 400
        assert response.json()["message"] == "That folder already exists"

    @pytest.mark.asyncio
    async def test_update_bumps_updated_at(self, test_client):
        folder = (await test_client.post("/api/folders", json={"name": "School"})).json()

        response = await test_client.put(f"/api/folders/{folder['id']}", json={"name": "College"})

        assert response.status_code == 200
        updated = response.json()
        assert updated["name"] == "College"
        assert updated["id"] == folder["id"]
        assert parse_timestamp(updated["createdAt"]) == parse_timestamp(folder["createdAt"])
        assert parse_timestamp(updated["updatedAt"]) > parse_timestamp(folder["updatedAt"])

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["get", "delete"])
    async def test_malformed_id(self, test_client, method):
        response = await getattr(test_client, method)("/api/folders/99")

        assert response.status_code == 400
        assert response.json()["message"] == "The `id` is not valid"

    @pytest.mark.asyncio
    async def test_malformed_id_on_put_checked_before_body(self, test_client):
        response = await test_client.put("/api/folders/99", json={})

        assert response.status_code == 400
        assert response.json()["message"] == "The `id` is not valid"

    @pytest.mark.asyncio
    async def test_put_unknown_id(self, test_client):
        response = await test_client.put(
            "/api/folders/00000000-0000-4000-8000-000000000000", json={"name": "X"}
        )
        assert_not_found(response)

    @pytest.mark.asyncio
    async def test_delete_then_get(self, test_client):
        folder = (await test_client.post("/api/folders", json={"name": "School"})).json()

        response = await test_client.delete(f"/api/folders/{folder['id']}")
        assert response.status_code == 204
        assert response.content == b""

        assert_not_found(await test_client.get(f"/api/folders/{folder['id']}"))

    @pytest.mark.asyncio
    async def test_delete_detaches_notes(self, test_client):
        folder = (await test_client.post("/api/folders", json={"name": "School"})).json()
        note = (
            await test_client.post("/api/notes", json={"title": "Homework", "folderId": folder["id"]})
        ).json()
        assert note["folderId"] == folder["id"]

        await test_client.delete(f"/api/folders/{folder['id']}")

        notes = (await test_client.get("/api/notes")).json()
        assert len(notes) == 1
        assert notes[0]["id"] == note["id"]
        assert "folderId" not in notes[0]
