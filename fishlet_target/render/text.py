"""
对齐文字 - 按锚点与对齐方式计算文字绘制起点

页面坐标 y 轴向下，文字基线在起点处；垂直居中需把基线下移半个文字高度。
"""

from __future__ import annotations

from enum import IntFlag
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..interfaces import IDrawingSurface
    from ..layout import RGB


class Align(IntFlag):
    """对齐标志，水平与垂直各取一个按位或组合"""
    H_CENTER = 1
    H_LEFT = 2
    H_RIGHT = 4

    V_CENTER = 8
    V_TOP = 16
    V_BOTTOM = 32


CENTERED = Align.H_CENTER | Align.V_CENTER


def text_origin(
    x: float, y: float, align: Align, width: float, height: float
) -> tuple[float, float]:
    """锚点 → 基线起点"""
    dx = 0.0
    if align & Align.H_CENTER:
        dx = -width / 2
    elif align & Align.H_RIGHT:
        dx = -width

    dy = 0.0
    if align & Align.V_CENTER:
        dy = height / 2
    elif align & Align.V_TOP:
        dy = height

    return x + dx, y + dy


def aligned_text(
    surface: IDrawingSurface, x: float, y: float, align: Align, text: str, color: RGB
) -> None:
    """按对齐方式绘制文字，前后保存/恢复画布状态"""
    width, height = surface.text_extents(text)
    ox, oy = text_origin(x, y, align, width, height)

    surface.save_state()
    try:
        surface.show_text(ox, oy, text, color)
    finally:
        surface.restore_state()
