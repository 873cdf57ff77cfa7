"""
模块接口契约 - 定义绘制层的抽象接口与异常

设计原则：
1. 绘制驱动只依赖 IDrawingSurface，不直接依赖 reportlab
2. 坐标统一为"页面坐标"：原点在左上角，y 轴向下，单位为点(pt)
3. 便于单元测试中用记录型假画布替换

使用方式：
    from fishlet_target.interfaces import IDrawingSurface

    class MySurface(IDrawingSurface):
        def fill_circle(self, x, y, r, color): ...
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .layout.zones import RGB
    from .render.decoration import DecorativeImage


# ============================================================================
# 绘制层接口
# ============================================================================

class IDrawingSurface(ABC):
    """二维矢量画布接口 - 绑定一个单页PDF输出"""

    width: float
    height: float

    @abstractmethod
    def set_line_width(self, width: float) -> None:
        """设置描边线宽"""
        ...

    @abstractmethod
    def fill_rect(self, x: float, y: float, w: float, h: float, color: RGB) -> None:
        """填充矩形（x, y 为左上角）"""
        ...

    @abstractmethod
    def fill_circle(self, x: float, y: float, r: float, color: RGB) -> None:
        """填充圆盘"""
        ...

    @abstractmethod
    def stroke_circle(self, x: float, y: float, r: float, color: RGB) -> None:
        """描边圆"""
        ...

    @abstractmethod
    def set_font(self, name: str, size: float) -> None:
        """选择字体与字号"""
        ...

    @abstractmethod
    def text_extents(self, text: str) -> tuple[float, float]:
        """
        测量当前字体下文字的外框

        Returns:
            (宽度, 高度)
        """
        ...

    @abstractmethod
    def show_text(self, x: float, y: float, text: str, color: RGB) -> None:
        """在基线起点 (x, y) 处绘制文字"""
        ...

    @abstractmethod
    def paint_image(self, image: DecorativeImage, x: float, y: float) -> None:
        """
        绘制装饰图片

        Args:
            image: 已加载并设置渲染宽度的图片
            x, y: 图片左上角
        """
        ...

    @abstractmethod
    def save_state(self) -> None:
        """保存画布瞬时状态（变换/当前位置）"""
        ...

    @abstractmethod
    def restore_state(self) -> None:
        """恢复最近一次保存的画布状态"""
        ...

    @abstractmethod
    def close(self) -> None:
        """
        结束页面并写出文件

        必须在所有绘制完成后调用一次；先 show page 再保存，否则文件不完整。

        Raises:
            SurfaceError: 写出失败
        """
        ...


# ============================================================================
# 异常定义
# ============================================================================

class TargetError(Exception):
    """基础异常"""
    pass


class UsageError(TargetError):
    """命令行参数错误"""
    pass


class SurfaceError(TargetError):
    """画布/PDF输出错误"""
    pass


class ImageLoadError(TargetError):
    """装饰图片加载错误"""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not load image {path}: {reason}")
