"""
活動記錄 API 測試
"""
import pytest
from httpx import AsyncClient


@pytest.mark.api
@pytest.mark.integration
class TestActivitiesAPI:
    """活動記錄測試類"""

    async def test_writes_are_recorded_newest_first(self, client: AsyncClient):
        response = await client.post("/api/departments", json={
            "name": "Audit", "floor": "1", "officeNumber": "2", "building": "A",
        })
        row_id = response.json()["id"]
        await client.put("/api/blocks/A", json={"name": "North"})

        response = await client.get("/api/activities")
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 2
        assert data["pages"] == 1
        assert [item["activity_type"] for item in data["items"]] == ["RENAME_BLOCK", "CREATE_DEPARTMENT"]
        assert data["items"][1]["row_id"] == row_id

    async def test_filter_and_paginate(self, client: AsyncClient, general_comment):
        for text in ("one", "two", "three"):
            await client.post("/api/comments/general", json={"comment": text, "comment-type": "Feedback"})
        await client.delete(f"/api/comments/general/{general_comment.id}")

        response = await client.get("/api/activities", params={"activity_type": "CREATE_COMMENT", "limit": 2})
        data = response.json()
        assert data["total"] == 3
        assert data["pages"] == 2
        assert len(data["items"]) == 2

        response = await client.get("/api/activities", params={"row_id": general_comment.id})
        assert [item["activity_type"] for item in response.json()["items"]] == ["DELETE_COMMENT"]

    async def test_invalid_type(self, client: AsyncClient):
        response = await client.get("/api/activities", params={"activity_type": "DANCE"})
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid activity type"}
