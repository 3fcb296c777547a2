"""
配置查询缓存文件

负责把已解析的配置键持久化到磁盘，包括：
- 缓存文件路径约定 (config-cache.json)
- 安全加载 (损坏或格式不符时视为空缓存)
- 原子写入 (临时文件 + 替换，不追加)
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Union

from loguru import logger

CACHE_FILE_NAME = "config-cache.json"

CacheData = Dict[str, Dict[str, Any]]


def get_cache_file_path(cache_dir: Union[str, Path]) -> Path:
    """获取缓存文件路径"""
    return Path(cache_dir) / CACHE_FILE_NAME


def _is_valid_cache(data: Any) -> bool:
    if not isinstance(data, dict):
        return False
    return all(isinstance(name, str) and isinstance(entries, dict)
               for name, entries in data.items())


def read_cache_file(cache_file: Path) -> CacheData:
    """
    读取缓存文件

    文件不可读、JSON 无效或结构不是 {配置名: {键: 值}} 时返回空字典，
    不向调用方抛出异常。
    """
    try:
        with open(cache_file, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"配置缓存文件无法读取，使用空缓存: {cache_file} - {e}")
        return {}

    if not _is_valid_cache(data):
        logger.warning(f"配置缓存文件格式不符，使用空缓存: {cache_file}")
        return {}

    return data


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def write_cache_file(cache_file: Path, cache: CacheData) -> None:
    """原子写入缓存文件"""
    cache_file.parent.mkdir(parents=True, exist_ok=True)
    json_data = json.dumps(cache, default=str, ensure_ascii=False, indent=2)

    temp_fd, temp_path = tempfile.mkstemp(
        suffix='.tmp', prefix='config-cache-', dir=str(cache_file.parent))
    try:
        with os.fdopen(temp_fd, 'w', encoding='utf-8') as f:
            f.write(json_data)
        # mkstemp 创建的文件为 0600，改为按 umask 的常规权限
        os.chmod(temp_path, 0o666 & ~_current_umask())
        os.replace(temp_path, cache_file)
    except BaseException:
        if os.path.exists(temp_path):
            os.unlink(temp_path)
        raise
