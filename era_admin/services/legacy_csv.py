"""舊版 CSV 處室資料服務

與 era_data 完全分開的另一種儲存方式，直接讀寫 era.csv。
每次改寫都先寫入暫存檔再 os.replace，失敗時原檔不變。
"""

import asyncio
import csv
import io
import os
import time
from pathlib import Path
from typing import Optional

import aiofiles
from loguru import logger

from era_admin.config import settings
from era_admin.core.exceptions import NotFoundError, StoreError, ValidationError


class LegacyCsvStore:
    """era.csv 讀寫"""

    def __init__(self, csv_path: str | Path | None = None):
        self.csv_path = Path(csv_path or settings.LEGACY_CSV_PATH)
        self._lock = asyncio.Lock()

    async def read_text(self) -> str:
        try:
            async with aiofiles.open(self.csv_path, "r", encoding="utf-8") as f:
                return await f.read()
        except OSError as e:
            logger.error("Could not read CSV file {}: {}", self.csv_path, e)
            raise StoreError("Could not read CSV file") from e

    async def read_records(self) -> tuple[list[dict], list[str]]:
        """回傳 (資料列, 欄位名稱)；檔案不存在時回傳空資料"""
        if not self.csv_path.exists():
            return [], []
        text = await self.read_text()
        reader = csv.DictReader(io.StringIO(text))
        fields = list(reader.fieldnames or [])
        records = [
            {key: (value if value is not None else "") for key, value in row.items() if key is not None}
            for row in reader
            if any((value or "").strip() for value in row.values() if isinstance(value, str))
        ]
        return records, fields

    async def _write_records(self, records: list[dict], fields: list[str]) -> None:
        buffer = io.StringIO()
        writer = csv.DictWriter(buffer, fieldnames=fields, extrasaction="ignore", lineterminator="\n")
        writer.writeheader()
        writer.writerows(records)

        temp_path = self.csv_path.with_name(self.csv_path.name + ".tmp")
        try:
            self.csv_path.parent.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(temp_path, "w", encoding="utf-8", newline="") as f:
                await f.write(buffer.getvalue())
            os.replace(temp_path, self.csv_path)
        except OSError as e:
            logger.exception("Could not write CSV file {}", self.csv_path)
            if temp_path.exists():
                temp_path.unlink()
            raise StoreError("Could not write CSV file") from e

    @staticmethod
    def _merge_fields(fields: list[str], record: dict) -> list[str]:
        merged = list(fields)
        for key in record:
            if key not in merged:
                merged.append(key)
        return merged

    @staticmethod
    def pad_id(value, records: list[dict]) -> str:
        """將 id 補零到與第一筆資料相同長度（例如 '1' → '01'）"""
        width = len(str(records[0].get("id") or "").strip()) if records else 2
        return str(value).strip().zfill(width)

    async def create(self, record: dict) -> dict:
        async with self._lock:
            records, fields = await self.read_records()
            new_record = {key: "" if value is None else str(value) for key, value in record.items()}
            new_record["id"] = str(int(time.time() * 1000))
            records.append(new_record)
            await self._write_records(records, self._merge_fields(fields or ["id"], new_record))
        logger.info("Legacy CSV department created (id={})", new_record["id"])
        return new_record

    async def update(self, record_id, changes: dict) -> dict:
        if record_id is None or str(record_id).strip() == "":
            raise ValidationError("Missing id")

        async with self._lock:
            records, fields = await self.read_records()
            padded = self.pad_id(record_id, records)
            updated: Optional[dict] = None
            clean_changes = {
                key: "" if value is None else str(value)
                for key, value in changes.items()
                if key != "id"
            }
            for index, row in enumerate(records):
                if str(row.get("id") or "").strip() == padded:
                    updated = {**row, **clean_changes, "id": padded}
                    records[index] = updated
                    break
            if updated is None:
                raise NotFoundError("Department not found")
            await self._write_records(records, self._merge_fields(fields, updated))
        logger.info("Legacy CSV department updated (id={})", padded)
        return {"id": padded, **clean_changes}

    async def delete(self, record_id) -> None:
        if record_id is None or str(record_id).strip() == "":
            raise ValidationError("Missing id")

        async with self._lock:
            records, fields = await self.read_records()
            padded = self.pad_id(record_id, records)
            remaining = [row for row in records if str(row.get("id") or "").strip() != padded]
            if len(remaining) == len(records):
                raise NotFoundError("Department not found")
            await self._write_records(remaining, fields)
        logger.info("Legacy CSV department deleted (id={})", padded)


# 建立全域 CSV 服務實例
legacy_csv_store = LegacyCsvStore()
