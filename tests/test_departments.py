"""
處室 API 測試
"""
import pytest
from httpx import AsyncClient


@pytest.mark.api
@pytest.mark.integration
class TestDepartmentsAPI:
    """處室 API 測試類"""

    async def test_create_then_move_between_blocks(self, client: AsyncClient):
        """測試建立處室、列表、搬遷後區塊分組跟著改變"""
        response = await client.post("/api/departments", json={
            "name": "Legal",
            "floor": "3",
            "officeNumber": "12",
            "building": "B",
        })
        assert response.status_code == 201
        created = response.json()
        assert created["name"] == "Legal"
        assert created["block"] == "B"

        response = await client.get("/api/departments")
        assert response.status_code == 200
        listed = [d for d in response.json() if d["name"] == "Legal"]
        assert len(listed) == 1
        assert listed[0]["officeno"] == "12"
        assert listed[0]["floor"] == "3"

        response = await client.put(f"/api/departments/{created['id']}", json={
            "name": "Legal",
            "floor": "3",
            "officeNumber": "12",
            "building": "C",
        })
        assert response.status_code == 200

        response = await client.get("/api/blocks")
        blocks = {b["name"]: b for b in response.json()}
        assert [d["name"] for d in blocks["C"]["departments"]] == ["Legal"]
        assert "B" not in blocks

    async def test_create_accepts_admin_field_names(self, client: AsyncClient):
        """測試管理介面的 newDepartment 欄位與數字樓層"""
        response = await client.post("/api/departments", json={
            "newDepartment": "Registry",
            "newDepartmentAmh": "መዝገብ",
            "floor": 1,
            "officeNumber": 101,
            "building": "A",
        })
        assert response.status_code == 201
        data = response.json()
        assert data["departmentamh"] == "መዝገብ"
        assert data["floor"] == "1"
        assert data["officeNumber"] == "101"

    async def test_create_missing_field(self, client: AsyncClient):
        response = await client.post("/api/departments", json={
            "name": "Legal",
            "floor": "3",
            "building": "B",
        })
        assert response.status_code == 400
        assert "error" in response.json()

    async def test_create_duplicate(self, client: AsyncClient, department_row):
        response = await client.post("/api/departments", json={
            "name": "Finance",
            "floor": "1",
            "officeNumber": "1",
            "building": "A",
        })
        assert response.status_code == 409
        assert "already exists" in response.json()["error"]

    async def test_update_not_found(self, client: AsyncClient):
        response = await client.put("/api/departments/999", json={
            "name": "Legal",
            "floor": "3",
            "officeNumber": "12",
            "building": "B",
        })
        assert response.status_code == 404
        assert response.json() == {"error": "Department not found"}

    async def test_delete(self, client: AsyncClient, shared_row, fetch_row):
        response = await client.delete(f"/api/departments/{shared_row.id}")
        assert response.status_code == 200
        assert response.json()["message"] == "Department deleted successfully"
        assert await fetch_row(shared_row.id) is None

        response = await client.delete(f"/api/departments/{shared_row.id}")
        assert response.status_code == 404

    async def test_check(self, client: AsyncClient, department_row):
        response = await client.get("/api/departments/check", params={"name": "Finance"})
        assert response.json() == {"exists": True, "id": department_row.id}

        response = await client.get("/api/departments/check", params={"name": "Nope"})
        assert response.json() == {"exists": False, "id": None}

        response = await client.get("/api/departments/check")
        assert response.status_code == 400

    async def test_available(self, client: AsyncClient, department_row, personnel_row, shared_row):
        response = await client.get("/api/departments/available")
        assert response.status_code == 200
        assert response.json() == [
            {"name": "Finance", "id": department_row.id},
            {"name": "Legal Affairs", "id": shared_row.id},
        ]

    async def test_invalid_id(self, client: AsyncClient):
        response = await client.delete("/api/departments/abc")
        assert response.status_code == 400
        assert "error" in response.json()
