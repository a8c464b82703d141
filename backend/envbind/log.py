"""
日志配置 - 按运行期配置设置 envbind 日志级别
"""

from __future__ import annotations

import logging

from .config import EnvBindSettings, get_settings


def configure_logging(settings: EnvBindSettings | None = None) -> logging.Logger:
    """设置 envbind 根日志器的级别（仅在显式配置时）"""
    settings = settings or get_settings()
    logger = logging.getLogger("envbind")
    if settings.logging.log_level:
        logger.setLevel(settings.logging.log_level.upper())
    return logger
