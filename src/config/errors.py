"""
配置模块异常定义
"""

from typing import Optional


class ConfigError(Exception):
    """配置相关异常基类"""


class ConfigParseError(ConfigError):
    """配置文件解析失败"""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"配置文件解析失败: {path} - {reason}")


class ConfigNotFoundError(ConfigError, KeyError):
    """配置名称不存在"""

    def __init__(self, config_name: str):
        self.config_name = config_name
        super().__init__(f"未找到配置: {config_name}")

    def __str__(self) -> str:
        # KeyError 会给消息加引号
        return self.args[0]


class SchemaMissingError(ConfigError):
    """配置未声明 options 模式"""

    def __init__(self, config_name: str):
        self.config_name = config_name
        super().__init__(f"配置 {config_name} 未声明 options")


class OptionValidationError(ConfigError, ValueError):
    """选项校验失败"""

    def __init__(self, message: str, option: Optional[str] = None):
        self.option = option
        super().__init__(message)
