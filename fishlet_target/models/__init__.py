"""
数据模型层 - 定义系统核心数据结构

- TargetOptions: 命令行选项（只读）
- TargetGeometry: 由选项推导的靶面几何
"""

from .geometry import TargetGeometry
from .options import (
    DEFAULT_FNAME,
    DEFAULT_GEOM,
    DEFAULT_IRINGS,
    DEFAULT_LINEW,
    DEFAULT_MARGIN,
    DEFAULT_ORINGS,
    DEFAULT_RINGS,
    TargetOptions,
    parse_size,
)

__all__ = [
    "TargetOptions",
    "TargetGeometry",
    "parse_size",
    "DEFAULT_GEOM",
    "DEFAULT_MARGIN",
    "DEFAULT_FNAME",
    "DEFAULT_RINGS",
    "DEFAULT_IRINGS",
    "DEFAULT_ORINGS",
    "DEFAULT_LINEW",
]
