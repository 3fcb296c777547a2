"""
配置管理模块

提供配置文件加载、点分路径查询、选项校验和查询缓存功能。
"""

from .errors import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    OptionValidationError,
    SchemaMissingError,
)
from .options import OptionsResolver
from .settings import StoreSettings
from .store import ConfigStore

__all__ = [
    'ConfigStore',
    'StoreSettings',
    'OptionsResolver',
    'ConfigError',
    'ConfigParseError',
    'ConfigNotFoundError',
    'SchemaMissingError',
    'OptionValidationError',
]
