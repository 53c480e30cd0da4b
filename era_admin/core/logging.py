"""Loguru 日誌設定"""

import sys
from loguru import logger

from era_admin.config import settings

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def setup_logging(level: str | None = None) -> None:
    """移除 loguru 預設 sink，改用統一格式輸出到 stdout"""
    logger.remove()
    logger.add(
        sys.stdout,
        format=LOG_FORMAT,
        level=level or settings.LOG_LEVEL,
        colorize=True,
        backtrace=True,
        diagnose=settings.DEBUG,
    )
