"""批次匯入服務

- 目錄 CSV → era_data
- 人員回饋 CSV → personnel_comm
- 依姓名將圖片目錄中的照片連結到人員

每個動作都是單一交易：全部成功或全部不寫入。
"""

import csv
import io
import re
from pathlib import Path
from typing import Iterable

from loguru import logger
from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from era_admin.config import settings
from era_admin.core.exceptions import StoreError, ValidationError
from era_admin.models.activity import ActivityType
from era_admin.models.comment import PersonnelComment
from era_admin.models.era_row import EraRow, ROW_FIELDS
from era_admin.services.activity import activity_service
from era_admin.services.row_store import is_blank, row_store

PERSONNEL_COMMENT_FIELDS = ("department", "title", "name", "feedback_date", "feedback_text")

# 舊資料欄位名稱對應
_COLUMN_ALIASES = {"photo": "photo_url"}


def normalize_name(value: str) -> str:
    """小寫並移除英數字以外的字元，用於姓名與檔名比對"""
    return re.sub(r"[^a-z0-9]", "", value.lower())


def _parse_int(value: str, column: str, line: int):
    if is_blank(value):
        return None
    try:
        return int(value.strip())
    except ValueError as e:
        raise ValidationError(f"Line {line}: {column} must be an integer, got '{value}'") from e


def parse_directory_csv(csv_text: str) -> list[dict]:
    """解析目錄 CSV，回傳可直接建立 EraRow 的欄位字典"""
    reader = csv.DictReader(io.StringIO(csv_text))
    if not reader.fieldnames:
        raise ValidationError("CSV file has no header row")

    rows = []
    # 第 1 行是標題
    for line, record in enumerate(reader, start=2):
        fields = {}
        for column, value in record.items():
            if column is None:
                continue
            key = _COLUMN_ALIASES.get(column.strip(), column.strip())
            if key == "id":
                fields["id"] = _parse_int(value, "id", line)
            elif key == "decat":
                fields["decat"] = _parse_int(value, "decat", line)
            elif key in ROW_FIELDS:
                fields[key] = None if is_blank(value) else value.strip()
        if all(value is None for value in fields.values()):
            continue
        if fields.get("id") is None:
            fields.pop("id", None)
        rows.append(fields)
    return rows


async def _save_import(db: AsyncSession, label: str, description: str) -> None:
    """flush 匯入的資料並記錄活動；任何資料庫錯誤都回滾整個匯入"""
    try:
        await db.flush()
        await activity_service.log_activity(db, ActivityType.IMPORT_DATA, description)
    except SQLAlchemyError as e:
        await db.rollback()
        logger.exception("{} failed, nothing was imported", label)
        raise StoreError(f"{label} failed") from e
    await row_store.commit(db)


async def import_rows(db: AsyncSession, csv_text: str, replace: bool = False) -> int:
    """匯入目錄 CSV

    Args:
        db: 資料庫 Session
        csv_text: CSV 內容（含標題列）
        replace: 是否先清空 era_data

    Returns:
        int: 匯入筆數
    """
    rows = parse_directory_csv(csv_text)

    if replace:
        try:
            await db.execute(delete(EraRow))
        except SQLAlchemyError as e:
            await db.rollback()
            raise StoreError("Could not clear era_data") from e

    db.add_all(EraRow(**fields) for fields in rows)
    await _save_import(
        db,
        "Directory import",
        f"Imported {len(rows)} directory rows" + (" (replaced existing data)" if replace else ""),
    )
    logger.info("Imported {} directory rows (replace={})", len(rows), replace)
    return len(rows)


async def import_personnel_comments(db: AsyncSession, csv_text: str) -> tuple[int, int]:
    """匯入人員回饋 CSV，缺欄位的資料列略過

    Returns:
        tuple: (匯入筆數, 略過筆數)
    """
    reader = csv.DictReader(io.StringIO(csv_text))
    headers = [name.strip() for name in (reader.fieldnames or [])]
    missing = [name for name in PERSONNEL_COMMENT_FIELDS if name not in headers]
    if missing:
        raise ValidationError(f"CSV is missing columns: {', '.join(missing)}")

    imported, skipped = 0, 0
    for line, record in enumerate(reader, start=2):
        values = {
            key.strip(): (value or "").strip()
            for key, value in record.items()
            if key is not None and isinstance(value, str)
        }
        if any(is_blank(values.get(name)) for name in PERSONNEL_COMMENT_FIELDS):
            logger.warning("Skipping feedback line {}: incomplete data", line)
            skipped += 1
            continue
        db.add(PersonnelComment(**{name: values[name] for name in PERSONNEL_COMMENT_FIELDS}))
        imported += 1

    await _save_import(
        db,
        "Feedback import",
        f"Imported {imported} personnel comments ({skipped} skipped)",
    )
    logger.info("Imported {} personnel comments, skipped {}", imported, skipped)
    return imported, skipped


async def link_photos(db: AsyncSession, filenames: Iterable[str]) -> int:
    """依姓名比對圖片檔名，設定人員的 photo_url

    Returns:
        int: 連結的資料列數
    """
    by_name: dict[str, str] = {}
    for filename in filenames:
        key = normalize_name(Path(filename).stem)
        if key:
            by_name.setdefault(key, filename)

    prefix = settings.IMAGES_URL_PREFIX.rstrip("/")
    linked = 0
    for row in await row_store.list_rows(db):
        if is_blank(row.wname):
            continue
        match = by_name.get(normalize_name(row.wname) or None)
        if match is None:
            logger.debug("No matching image for {}", row.wname)
            continue
        row.photo_url = f"{prefix}/{match}"
        linked += 1

    await _save_import(db, "Photo linking", f"Linked {linked} personnel photos")
    logger.info("Linked {} personnel photos", linked)
    return linked
