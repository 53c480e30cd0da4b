"""
測試配置和 Fixtures
提供測試所需的共用資源和工具
"""
import os
import tempfile
from typing import AsyncGenerator

# ------------------------------------------------------------------
# 必須在匯入 era_admin 之前設定，避免在專案目錄建立檔案
# ------------------------------------------------------------------
_TEST_ROOT = tempfile.mkdtemp(prefix="era-admin-tests-")
os.environ.setdefault("DATABASE_URL", f"sqlite+aiosqlite:///{_TEST_ROOT}/unused.db")
os.environ.setdefault("UPLOAD_DIR", os.path.join(_TEST_ROOT, "uploads"))
os.environ.setdefault("IMAGES_DIR", os.path.join(_TEST_ROOT, "era_Images"))
os.environ.setdefault("LEGACY_CSV_PATH", os.path.join(_TEST_ROOT, "era.csv"))

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

import era_admin.models  # noqa: F401
from era_admin.core.database import Base, get_db
from era_admin.main import app
from era_admin.models import EraRow, GeneralComment, PersonnelComment
from era_admin.services.legacy_csv import legacy_csv_store
from era_admin.services.photo_storage import photo_storage


# ===== 資料庫 Fixtures =====

@pytest.fixture(scope="function")
async def test_engine(tmp_path):
    """創建測試資料庫引擎（每個測試一個 SQLite 檔案）"""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        echo=False,
        poolclass=NullPool,
    )

    # 創建表
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # 清理表
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture(scope="function")
async def test_session_maker(test_engine):
    """創建測試 Session Maker"""
    return async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture(scope="function")
async def db_session(test_session_maker) -> AsyncGenerator[AsyncSession, None]:
    """提供資料庫 Session"""
    async with test_session_maker() as session:
        yield session


@pytest.fixture(scope="function")
async def override_get_db(test_session_maker):
    """覆蓋資料庫依賴（每個請求一個新的 Session）"""
    async def _override_get_db():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db] = _override_get_db
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def fetch_row(test_session_maker):
    """以新的 Session 讀取資料列（不受其他 Session 的快取影響）"""
    async def _fetch(row_id: int):
        async with test_session_maker() as session:
            return await session.get(EraRow, row_id)
    return _fetch


@pytest.fixture
def fetch_all_rows(test_session_maker):
    """以新的 Session 讀取全部資料列"""
    from sqlalchemy import select

    async def _fetch():
        async with test_session_maker() as session:
            result = await session.execute(select(EraRow).order_by(EraRow.id))
            return list(result.scalars().all())
    return _fetch


# ===== 檔案路徑 Fixtures =====

@pytest.fixture(autouse=True)
def isolated_paths(tmp_path, monkeypatch):
    """照片、圖片與 CSV 一律寫到暫存目錄"""
    uploads = tmp_path / "uploads"
    images = tmp_path / "era_Images"
    images.mkdir()
    monkeypatch.setattr(photo_storage, "base_path", uploads)
    monkeypatch.setattr(photo_storage, "images_path", images)
    monkeypatch.setattr(legacy_csv_store, "csv_path", tmp_path / "era.csv")
    return {"uploads": uploads, "images": images, "csv": tmp_path / "era.csv"}


# ===== 客戶端 Fixtures =====

@pytest.fixture(scope="function")
async def client(override_get_db) -> AsyncGenerator[AsyncClient, None]:
    """異步測試客戶端"""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


# ===== 測試資料 Fixtures =====

@pytest.fixture
async def department_row(db_session: AsyncSession) -> EraRow:
    """只有處室欄位的資料列"""
    row = EraRow(
        department="Finance",
        departmentamh="ፋይናንስ",
        floor="2",
        officeno="201",
        block="A",
    )
    db_session.add(row)
    await db_session.commit()
    await db_session.refresh(row)
    return row


@pytest.fixture
async def shared_row(db_session: AsyncSession) -> EraRow:
    """同時代表處室與人員的資料列"""
    row = EraRow(
        department="Legal Affairs",
        departmentamh="ህግ ጉዳዮች",
        floor="3",
        officeno="305",
        block="B",
        description="Main building",
        wname="Abebe Kebede",
        wnameamh="አበበ ከበደ",
        wtitle="Director",
        wtitleamh="ዳይሬክተር",
        wcontact="0911000000",
        photo_url="/uploads/abebe.png",
    )
    db_session.add(row)
    await db_session.commit()
    await db_session.refresh(row)
    return row


@pytest.fixture
async def personnel_row(db_session: AsyncSession) -> EraRow:
    """只有人員欄位的資料列"""
    row = EraRow(
        wname="Sara Tesfaye",
        wtitle="Accountant",
        wcontact="0922000000",
        department="Finance",
    )
    db_session.add(row)
    await db_session.commit()
    await db_session.refresh(row)
    return row


@pytest.fixture
async def general_comment(db_session: AsyncSession) -> GeneralComment:
    comment = GeneralComment(
        date="2024-01-28",
        comment_type="Feedback",
        comment="The kiosk map is easy to follow",
        category="general",
    )
    db_session.add(comment)
    await db_session.commit()
    await db_session.refresh(comment)
    return comment


@pytest.fixture
async def personnel_comment(db_session: AsyncSession) -> PersonnelComment:
    comment = PersonnelComment(
        department="Finance",
        title="Accountant",
        name="Sara Tesfaye",
        feedback_date="2024-01-28",
        feedback_text="Very helpful",
    )
    db_session.add(comment)
    await db_session.commit()
    await db_session.refresh(comment)
    return comment


# ===== 工具 Fixtures =====

@pytest.fixture
def png_data_uri() -> str:
    """1x1 PNG 的 data URI"""
    return (
        "data:image/png;base64,"
        "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mP8/5+hHgAHggJ/PchI7wAAAABJRU5ErkJggg=="
    )
