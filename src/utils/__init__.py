"""
通用工具模块
"""

from .logger import LoggingConfig, setup_logging

__all__ = ['LoggingConfig', 'setup_logging']
