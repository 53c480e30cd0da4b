"""資料庫連線與 Session 管理

整個程序只使用一個 engine：啟動時 init_db()，關閉時 close_db()，
每個請求透過 get_db() 取得自己的 Session，結束後一定關閉。
"""

from typing import AsyncGenerator
from loguru import logger
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase
from era_admin.config import settings


def _engine_options() -> dict:
    """依資料庫種類決定 engine 參數（SQLite 不支援連線池大小設定）"""
    options = {
        "echo": settings.DEBUG,
        "pool_pre_ping": True,
    }
    if not settings.is_sqlite:
        options.update(
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_recycle=3600,
        )
    return options


# 建立異步引擎
engine = create_async_engine(settings.DATABASE_URL, **_engine_options())

# 建立 Session Factory
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


# 建立 Base 類別供所有模型繼承
class Base(DeclarativeBase):
    """所有模型的基礎類別"""
    pass


# 依賴注入：取得資料庫 Session
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    資料庫 Session 依賴注入

    使用方式:
        @router.get("/")
        async def list_rows(db: AsyncSession = Depends(get_db)):
            ...
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()


async def init_db():
    """初始化資料庫：建立所有資料表"""
    # 匯入模型以註冊到 Base.metadata
    import era_admin.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ready ({})", settings.DATABASE_URL)


async def close_db():
    """關閉資料庫連線"""
    await engine.dispose()
    logger.info("Database engine disposed")
