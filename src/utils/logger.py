"""
日志配置

配置存储本身只通过 loguru 输出日志，不修改处理器；
应用启动时调用 setup_logging 设置控制台和文件输出。
"""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from loguru import logger

CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


@dataclass
class LoggingConfig:
    """日志配置数据类"""
    level: str = "INFO"

    # 控制台日志
    console_enabled: bool = True
    console_colored: bool = True

    # 文件日志
    file_enabled: bool = False
    file_path: str = "data/logs/config.log"
    file_level: str = "DEBUG"
    max_size_mb: int = 10
    retention_days: int = 30


def setup_logging(config: Optional[LoggingConfig] = None) -> List[int]:
    """
    设置日志系统

    Args:
        config: 日志配置，默认只输出到控制台

    Returns:
        已添加的 loguru 处理器 ID
    """
    if config is None:
        config = LoggingConfig()

    # 移除默认处理器
    logger.remove()
    handler_ids = []

    if config.console_enabled:
        handler_ids.append(logger.add(
            sys.stderr,
            level=config.level,
            format=CONSOLE_FORMAT,
            colorize=config.console_colored
        ))

    if config.file_enabled:
        Path(config.file_path).parent.mkdir(parents=True, exist_ok=True)
        handler_ids.append(logger.add(
            config.file_path,
            level=config.file_level,
            format=FILE_FORMAT,
            rotation=f"{config.max_size_mb} MB",
            retention=f"{config.retention_days} days",
            compression="zip"
        ))

    return handler_ids
