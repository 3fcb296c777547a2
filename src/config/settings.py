"""
配置存储的目录设置
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union


@dataclass
class StoreSettings:
    """配置存储目录数据类"""
    json_dir: str = "config/json"
    yml_dir: str = "config/yml"
    cache_dir: Optional[str] = None  # None 表示不持久化缓存

    @classmethod
    def from_root(cls, root: Union[str, Path], use_cache: bool = True) -> "StoreSettings":
        """
        按标准安装目录结构生成设置

        Args:
            root: 安装根目录
            use_cache: 是否启用缓存文件 (bin/cache/config)
        """
        root = Path(root)
        return cls(
            json_dir=str(root / "config" / "json"),
            yml_dir=str(root / "config" / "yml"),
            cache_dir=str(root / "bin" / "cache" / "config") if use_cache else None
        )
