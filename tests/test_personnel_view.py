"""
人員檢視測試
"""
import pytest

from era_admin.core.exceptions import NotFoundError, StoreError, ValidationError
from era_admin.services.personnel_view import personnel_view
from era_admin.services.row_store import row_store


@pytest.mark.unit
@pytest.mark.database
class TestPersonnelView:
    """人員檢視測試類"""

    async def test_create_without_photo(self, db_session, fetch_row):
        row = await personnel_view.create(
            db_session, wname="Hana Girma", wtitle="Clerk", department="Registry", wcontact="0933"
        )

        stored = await fetch_row(row.id)
        assert stored.wname == "Hana Girma"
        assert stored.department == "Registry"
        assert stored.photo_url is None
        assert stored.block is None
        assert stored.floor is None

    async def test_create_with_data_uri_saves_file(self, db_session, png_data_uri, isolated_paths, fetch_row):
        """測試 data URI 照片會存檔並只保存路徑"""
        row = await personnel_view.create(
            db_session, wname="Hana Girma", wtitle="Clerk", department="Registry", photo=png_data_uri
        )

        stored = await fetch_row(row.id)
        assert stored.photo_url.startswith("/uploads/")
        assert stored.photo_url.endswith("-Hana-Girma.png")
        saved = list(isolated_paths["uploads"].iterdir())
        assert len(saved) == 1
        assert saved[0].read_bytes().startswith(b"\x89PNG")

    async def test_failed_create_removes_saved_photo(
        self, db_session, png_data_uri, isolated_paths, monkeypatch
    ):
        """測試寫入資料庫失敗時不留下照片檔案"""
        async def failing_commit(db):
            await db.rollback()
            raise StoreError("Could not save changes")

        monkeypatch.setattr(row_store, "commit", failing_commit)

        with pytest.raises(StoreError):
            await personnel_view.create(
                db_session, wname="Hana Girma", wtitle="Clerk", department="Registry", photo=png_data_uri
            )
        assert list(isolated_paths["uploads"].iterdir()) == []

    async def test_failed_update_keeps_existing_photo_file(
        self, db_session, shared_row, png_data_uri, isolated_paths, monkeypatch
    ):
        """測試更新失敗時只刪除新存的照片，原參照的檔案不受影響"""
        isolated_paths["uploads"].mkdir()
        existing = isolated_paths["uploads"] / "abebe.png"
        existing.write_bytes(b"old")
        row_id = shared_row.id

        async def failing_commit(db):
            await db.rollback()
            raise StoreError("Could not save changes")

        monkeypatch.setattr(row_store, "commit", failing_commit)

        with pytest.raises(StoreError):
            await personnel_view.update(
                db_session, row_id, wname="Abebe", wtitle="Head", department="Legal Affairs", photo=png_data_uri
            )
        assert list(isolated_paths["uploads"].iterdir()) == [existing]

    async def test_create_with_reference_keeps_string(self, db_session, fetch_row):
        row = await personnel_view.create(
            db_session, wname="Hana", wtitle="Clerk", department="Registry", photo="/era_Images/hana.jpg"
        )
        assert (await fetch_row(row.id)).photo_url == "/era_Images/hana.jpg"

    async def test_create_with_invalid_base64(self, db_session, fetch_all_rows):
        with pytest.raises(ValidationError):
            await personnel_view.create(
                db_session,
                wname="Hana",
                wtitle="Clerk",
                department="Registry",
                photo="data:image/png;base64,@@not-base64@@",
            )
        assert await fetch_all_rows() == []

    @pytest.mark.parametrize("missing", ["wname", "wtitle", "department"])
    async def test_create_requires_fields(self, db_session, missing):
        fields = {"wname": "Hana", "wtitle": "Clerk", "department": "Registry"}
        fields[missing] = ""
        with pytest.raises(ValidationError):
            await personnel_view.create(db_session, **fields)

    async def test_update_without_photo_keeps_existing(self, db_session, shared_row, fetch_row):
        """測試未提供照片時保留原照片"""
        await personnel_view.update(
            db_session, shared_row.id, wname="Abebe K.", wtitle="Head", department="Legal Affairs"
        )

        stored = await fetch_row(shared_row.id)
        assert stored.wname == "Abebe K."
        assert stored.wtitle == "Head"
        assert stored.photo_url == "/uploads/abebe.png"
        assert stored.floor == "3"

    async def test_update_with_null_photo_clears(self, db_session, shared_row, fetch_row):
        await personnel_view.update(
            db_session, shared_row.id, wname="Abebe", wtitle="Head", department="Legal Affairs", photo=None
        )
        assert (await fetch_row(shared_row.id)).photo_url is None

    async def test_update_missing_row(self, db_session):
        with pytest.raises(NotFoundError):
            await personnel_view.update(db_session, 999, wname="A", wtitle="B", department="C")

    async def test_soft_delete_clears_three_fields(self, db_session, shared_row, fetch_row):
        """測試軟刪除只清空姓名與照片，其他欄位保留"""
        await personnel_view.soft_delete(db_session, shared_row.id)

        stored = await fetch_row(shared_row.id)
        assert stored is not None
        assert stored.wname is None
        assert stored.wnameamh is None
        assert stored.photo_url is None
        # 職稱與聯絡方式不在清除範圍內
        assert stored.wtitle == "Director"
        assert stored.wtitleamh == "ዳይሬክተር"
        assert stored.wcontact == "0911000000"
        assert stored.department == "Legal Affairs"
        assert stored.block == "B"

    async def test_soft_delete_missing_row(self, db_session):
        with pytest.raises(NotFoundError):
            await personnel_view.soft_delete(db_session, 999)

    async def test_list_includes_rows_without_name(self, db_session, department_row, personnel_row):
        people = await personnel_view.list_personnel(db_session)
        assert [p["id"] for p in people] == [department_row.id, personnel_row.id]
        assert people[0]["wname"] is None
        assert people[1]["wname"] == "Sara Tesfaye"
