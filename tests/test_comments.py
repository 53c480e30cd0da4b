"""
留言 API 測試
"""
import pytest
from httpx import AsyncClient

from era_admin.services.comments import general_comments, personnel_comments


@pytest.mark.api
@pytest.mark.integration
class TestGeneralCommentsAPI:
    """一般留言測試類"""

    async def test_create_and_list(self, client: AsyncClient):
        response = await client.post("/api/comments/general", json={
            "comment": "Lift on block B is broken",
            "comment-type": "Issue",
        })
        assert response.status_code == 201
        data = response.json()
        assert data["comment-type"] == "Issue"
        assert data["category"] == "general"
        assert data["date"]

        response = await client.get("/api/comments/general")
        assert [c["comment"] for c in response.json()] == ["Lift on block B is broken"]

    async def test_invalid_type(self, client: AsyncClient):
        response = await client.post("/api/comments/general", json={
            "comment": "Hello",
            "comment-type": "Complaint",
        })
        assert response.status_code == 400
        assert "comment-type" in response.json()["error"]

    async def test_missing_text(self, client: AsyncClient):
        response = await client.post("/api/comments/general", json={"comment-type": "Feedback"})
        assert response.status_code == 400

    async def test_delete(self, client: AsyncClient, general_comment, db_session):
        response = await client.delete(f"/api/comments/general/{general_comment.id}")
        assert response.status_code == 200
        assert await general_comments.count(db_session) == 0

    async def test_delete_missing_keeps_count(self, client: AsyncClient, general_comment, db_session):
        """測試刪除不存在的留言回傳 404 且數量不變"""
        response = await client.delete("/api/comments/general/999")
        assert response.status_code == 404
        assert response.json() == {"error": "Comment not found"}
        assert await general_comments.count(db_session) == 1


@pytest.mark.api
@pytest.mark.integration
class TestPersonnelCommentsAPI:
    """人員回饋測試類"""

    async def test_create_and_list(self, client: AsyncClient, personnel_comment):
        response = await client.post("/api/comments/personnel", json={
            "department": "Legal Affairs",
            "title": "Director",
            "name": "Abebe Kebede",
            "feedback_text": "Quick response",
            "feedback_date": "2024-02-01",
        })
        assert response.status_code == 201
        assert response.json()["feedback_date"] == "2024-02-01"

        response = await client.get("/api/comments/personnel")
        assert [c["name"] for c in response.json()] == ["Sara Tesfaye", "Abebe Kebede"]

    async def test_missing_fields(self, client: AsyncClient):
        response = await client.post("/api/comments/personnel", json={
            "department": "Legal Affairs",
            "feedback_text": "Quick response",
        })
        assert response.status_code == 400

    async def test_delete_missing_keeps_count(self, client: AsyncClient, personnel_comment, db_session):
        response = await client.delete("/api/comments/personnel/999")
        assert response.status_code == 404
        assert await personnel_comments.count(db_session) == 1

    async def test_logs_are_independent(self, client: AsyncClient, general_comment, personnel_comment, db_session):
        """測試刪除人員回饋不影響一般留言"""
        response = await client.delete(f"/api/comments/personnel/{personnel_comment.id}")
        assert response.status_code == 200
        assert await personnel_comments.count(db_session) == 0
        assert await general_comments.count(db_session) == 1
