"""
配置与日志

配置来源: 环境变量, 以及当前目录下的 .env 文件 (python-dotenv)。

    AMBARI_LOG_LEVEL     日志级别 (默认 WARNING)
    AMBARI_CLUSTER_NAME  集群名称, 仅用于 CLI 显示
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv
from rich.logging import RichHandler

from .utils.errors import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class Settings:
    """运行配置"""
    log_level: str = DEFAULT_LOG_LEVEL
    cluster_name: Optional[str] = None


def _normalize_level(level: str) -> str:
    normalized = level.strip().upper()
    if normalized not in LOG_LEVELS:
        raise ConfigurationError(
            f"不支持的日志级别, 可选: {', '.join(LOG_LEVELS)}",
            setting="AMBARI_LOG_LEVEL",
            value=level
        )
    return normalized


def load_settings(log_level: Optional[str] = None) -> Settings:
    """加载配置

    Args:
        log_level: 命令行传入的日志级别, 优先于环境变量

    Raises:
        ConfigurationError: 日志级别无效
    """
    load_dotenv()

    level = log_level or os.getenv("AMBARI_LOG_LEVEL") or DEFAULT_LOG_LEVEL
    cluster_name = os.getenv("AMBARI_CLUSTER_NAME") or None

    return Settings(log_level=_normalize_level(level), cluster_name=cluster_name)


def setup_logging(level: str = DEFAULT_LOG_LEVEL) -> logging.Logger:
    """为 ambari_client 包日志安装 rich 输出"""
    logger = logging.getLogger("ambari_client")
    logger.setLevel(_normalize_level(level))

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(show_path=False))

    return logger
