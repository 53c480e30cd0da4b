"""目錄資料匯入腳本

此腳本會（每一步皆為單一交易，失敗時不寫入任何資料）：
1. 建立資料表（--reset 時先刪除所有表格）
2. 匯入目錄 CSV 到 era_data
3. 匯入人員回饋 CSV 到 personnel_comm
4. 依姓名連結圖片目錄中的人員照片

執行方式：
    python scripts/import_data.py --directory era.csv --feedback feedback.csv --link-photos
"""

import argparse
import asyncio
import sys
from pathlib import Path

# 添加專案根目錄到 Python 路徑
sys.path.insert(0, str(Path(__file__).parent.parent))

from era_admin.core.database import AsyncSessionLocal, Base, close_db, engine, init_db
from era_admin.core.exceptions import DirectoryError
from era_admin.core.logging import setup_logging
from era_admin.services.importer import import_personnel_comments, import_rows, link_photos
from era_admin.services.photo_storage import photo_storage


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Import ERA directory data")
    parser.add_argument("--directory", type=Path, help="directory CSV (era.csv)")
    parser.add_argument("--feedback", type=Path, help="personnel feedback CSV (feedback.csv)")
    parser.add_argument("--replace", action="store_true", help="clear era_data before importing")
    parser.add_argument("--link-photos", action="store_true", help="link images in IMAGES_DIR by name")
    parser.add_argument("--reset", action="store_true", help="drop and recreate all tables first")
    return parser.parse_args()


async def reset_tables():
    """刪除所有表格"""
    print("🗑️  正在刪除所有表格...")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    print("✅ 所有表格已刪除\n")


async def main(args: argparse.Namespace) -> int:
    print("=" * 60)
    print("🔄 ERA 目錄資料匯入")
    print("=" * 60)

    try:
        if args.reset:
            import era_admin.models  # noqa: F401
            await reset_tables()
        await init_db()

        async with AsyncSessionLocal() as session:
            if args.directory:
                count = await import_rows(
                    session,
                    args.directory.read_text(encoding="utf-8"),
                    replace=args.replace,
                )
                print(f"✅ 匯入 {count} 筆目錄資料")

            if args.feedback:
                imported, skipped = await import_personnel_comments(
                    session,
                    args.feedback.read_text(encoding="utf-8"),
                )
                print(f"✅ 匯入 {imported} 筆人員回饋（略過 {skipped} 筆）")

            if args.link_photos:
                linked = await link_photos(session, photo_storage.list_images())
                print(f"✅ 連結 {linked} 張人員照片")

        print("\n✨ 匯入完成")
        return 0
    except (DirectoryError, OSError) as e:
        print(f"\n❌ 匯入失敗: {e}")
        return 1
    finally:
        await close_db()


if __name__ == "__main__":
    setup_logging()
    sys.exit(asyncio.run(main(parse_args())))
