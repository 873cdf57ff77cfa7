"""
配置层 - 加载运行期配置

职责：
- 加载 config/target_runtime.yaml（运行期参数）
- 提供类型安全的配置访问接口
"""

from .runtime_config import (
    CaptionConfig,
    DecorationConfig,
    FontConfig,
    LoggingConfig,
    PaletteConfig,
    RuntimeConfig,
    get_config,
    reload_config,
)

__all__ = [
    "RuntimeConfig",
    "DecorationConfig",
    "FontConfig",
    "CaptionConfig",
    "PaletteConfig",
    "LoggingConfig",
    "get_config",
    "reload_config",
]
