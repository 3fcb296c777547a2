"""
配置存储

负责加载、合并和查询应用配置，包括：
- JSON (*.json) 与 YAML (*.yml) 配置目录加载，同名时 YAML 覆盖 JSON
- 点分路径查询 (如 "database.host")，结果缓存
- 基于 options 模式的选项校验
- 查询缓存的持久化，加速后续启动
"""

import copy
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from loguru import logger

from .cache import CacheData, get_cache_file_path, read_cache_file, write_cache_file
from .errors import ConfigError, ConfigNotFoundError, SchemaMissingError
from .loader import load_config_dir
from .options import OptionsResolver
from .settings import StoreSettings


def _is_int_segment(segment: str) -> bool:
    digits = segment[1:] if segment.startswith('-') else segment
    return digits.isdecimal()


class ConfigStore:
    """统一配置存储"""

    def __init__(self, json_dir: Union[str, Path] = "config/json",
                 yml_dir: Union[str, Path] = "config/yml",
                 cache_dir: Optional[Union[str, Path]] = None):
        """
        初始化配置存储

        Args:
            json_dir: JSON 配置目录
            yml_dir: YAML 配置目录
            cache_dir: 缓存目录，None 表示不加载也不创建缓存文件
        """
        self.json_dir = Path(json_dir)
        self.yml_dir = Path(yml_dir)
        self.cache_dir = Path(cache_dir) if cache_dir is not None else None

        self.configs: Dict[str, Dict[str, Any]] = {}
        self.cache: CacheData = {}

        self.load_configs()

        if self.cache_dir is not None:
            self.cache = self._load_cache(self.cache_dir)

    @classmethod
    def from_settings(cls, settings: StoreSettings) -> "ConfigStore":
        """根据目录设置创建配置存储"""
        return cls(json_dir=settings.json_dir,
                   yml_dir=settings.yml_dir,
                   cache_dir=settings.cache_dir)

    def load_configs(self) -> None:
        """加载所有配置文件"""
        try:
            configs = load_config_dir(self.json_dir, '.json')
            configs.update(load_config_dir(self.yml_dir, '.yml'))
        except ConfigError as e:
            logger.error(f"配置文件加载失败: {e}")
            raise

        self.configs = configs
        logger.info(f"所有配置文件加载成功: {len(self.configs)} 个配置")

    def get(self, config_name: str, key: str) -> Any:
        """
        获取配置值

        Args:
            config_name: 配置名（文件名去掉后缀）
            key: 点分路径，如 "database.host"

        Returns:
            配置值；路径不存在时返回 None（None 同样会被缓存）

        Raises:
            ConfigNotFoundError: 配置名不存在且无缓存
        """
        entries = self.cache.get(config_name)
        if entries is not None and key in entries:
            return self._detach(entries[key])

        if config_name not in self.configs:
            raise ConfigNotFoundError(config_name)

        value = self._walk(self.configs[config_name], key)
        self.cache.setdefault(config_name, {})[key] = self._detach(value)
        return self._detach(value)

    @staticmethod
    def _detach(value: Any) -> Any:
        """字典和列表返回副本，调用方修改不影响存储"""
        if isinstance(value, (dict, list)):
            return copy.deepcopy(value)
        return value

    def _walk(self, tree: Dict[str, Any], key: str) -> Any:
        """按点分路径逐级查找，缺失时返回 None"""
        value: Any = tree
        for segment in key.split('.'):
            if isinstance(value, dict) and segment in value:
                value = value[segment]
            elif isinstance(value, dict) and _is_int_segment(segment) and int(segment) in value:
                # YAML 整数键 (如 80: http)
                value = value[int(segment)]
            elif isinstance(value, list) and segment.isdecimal() and int(segment) < len(value):
                value = value[int(segment)]
            else:
                return None
        return value

    def get_array(self, config_name: str, key: str) -> Optional[Union[Dict[str, Any], List[Any]]]:
        """获取字典或列表类型的配置值，标量返回 None"""
        value = self.get(config_name, key)

        if isinstance(value, (dict, list)):
            return value

        return None

    def resolve_options(self, config_name: str, options: Dict[str, Any]) -> Dict[str, Any]:
        """
        根据配置中的 options 模式校验选项

        Args:
            config_name: 配置名
            options: 调用方传入的选项

        Returns:
            校验并补全默认值后的选项

        Raises:
            SchemaMissingError: 配置未声明 options
            OptionValidationError: 选项不符合模式
        """
        schema = self.get_array(config_name, 'options')

        if schema is None:
            raise SchemaMissingError(config_name)

        resolver = OptionsResolver(schema)

        for name, value in options.items():
            resolver.add_option(name, value)

        return resolver.get_options()

    def save_cache(self, cache_dir: Union[str, Path]) -> None:
        """保存查询缓存到缓存目录"""
        cache_file = get_cache_file_path(cache_dir)

        try:
            write_cache_file(cache_file, self.cache)
        except OSError as e:
            logger.error(f"保存配置缓存失败: {cache_file} - {e}")
            raise

        logger.debug(f"配置缓存已保存: {cache_file}")

    def _load_cache(self, cache_dir: Path) -> CacheData:
        """加载查询缓存，不存在时创建空缓存文件"""
        cache_file = get_cache_file_path(cache_dir)

        if not cache_file.exists():
            logger.info(f"配置缓存文件不存在，创建空缓存: {cache_file}")
            self.cache = {}
            self.save_cache(cache_dir)
            return {}

        cache = read_cache_file(cache_file)
        logger.debug(f"配置缓存加载成功: {cache_file} ({len(cache)} 个配置)")
        return cache

    def names(self) -> List[str]:
        """获取所有配置名"""
        return sorted(self.configs)

    def has_config(self, config_name: str) -> bool:
        """检查配置是否存在"""
        return config_name in self.configs

    def __contains__(self, config_name: object) -> bool:
        return config_name in self.configs

    def get_cache_stats(self) -> Dict[str, Any]:
        """获取缓存统计信息"""
        return {
            'configs': len(self.configs),
            'cached_configs': len(self.cache),
            'cached_keys': sum(len(entries) for entries in self.cache.values()),
            'cache_file': str(get_cache_file_path(self.cache_dir)) if self.cache_dir else None
        }

    def __str__(self) -> str:
        """返回配置存储的字符串表示"""
        stats = self.get_cache_stats()
        return (f"ConfigStore("
                f"configs={stats['configs']}, "
                f"cached_keys={stats['cached_keys']})")

    def __repr__(self) -> str:
        return self.__str__()
