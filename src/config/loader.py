"""
配置文件加载模块

负责发现并解析配置目录中的文件，包括：
- JSON 配置 (*.json)
- YAML 配置 (*.yml)
"""

import json
from pathlib import Path
from typing import Any, Callable, Dict, IO, List

import yaml
from loguru import logger

from .errors import ConfigParseError


def _parse_json(f: IO[str]) -> Any:
    return json.load(f)


def _parse_yaml(f: IO[str]) -> Any:
    return yaml.safe_load(f)


PARSERS: Dict[str, Callable[[IO[str]], Any]] = {
    '.json': _parse_json,
    '.yml': _parse_yaml,
}


def discover_config_files(config_dir: Path, suffix: str) -> List[Path]:
    """列出目录下指定后缀的配置文件（按文件名排序）"""
    if not config_dir.is_dir():
        logger.warning(f"配置目录不存在: {config_dir}")
        return []

    return sorted(p for p in config_dir.glob(f"*{suffix}") if p.is_file())


def load_config_file(path: Path) -> Dict[str, Any]:
    """
    读取单个配置文件

    Args:
        path: 配置文件路径，后缀决定解析器

    Returns:
        解析后的配置树；空文件返回空字典

    Raises:
        ConfigParseError: 文件无法读取、格式错误或顶层不是字典
    """
    parser = PARSERS.get(path.suffix.lower())
    if parser is None:
        raise ConfigParseError(str(path), f"不支持的配置格式: {path.suffix}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = parser(f)
    except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError, OSError) as e:
        raise ConfigParseError(str(path), str(e)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigParseError(str(path), "配置顶层必须是字典")
    return data


def load_config_dir(config_dir: Path, suffix: str) -> Dict[str, Dict[str, Any]]:
    """加载目录下所有配置，以文件名（去掉后缀）为配置名"""
    configs: Dict[str, Dict[str, Any]] = {}

    for config_file in discover_config_files(config_dir, suffix):
        configs[config_file.stem] = load_config_file(config_file)
        logger.debug(f"配置文件加载成功: {config_file}")

    logger.info(f"配置目录加载完成: {config_dir} ({len(configs)} 个 {suffix} 文件)")
    return configs
