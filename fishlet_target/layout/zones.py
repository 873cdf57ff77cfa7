"""
配色区划分

职责：
1. 填充圆盘的颜色与绘制顺序（蓝 → 白 → 红 → 白靶心，后画覆盖先画）
2. 环线描边颜色（白/黑，保证与底色对比）
3. 环号文字颜色（白/黑）

注意：环号规则与描边规则的边界不同：描边用开区间，环号用闭区间且整体偏移一环。
两者须保持原样，不要"统一"。

测试要点：
- test_fill_order: 圆盘顺序与半径环号
- test_stroke_color_bands: 描边开区间
- test_label_color_bands: 环号闭区间
"""

from __future__ import annotations

from enum import Enum

RGB = tuple[float, float, float]


class ZoneColor(str, Enum):
    """配色名（对应 PaletteConfig 字段）"""
    BLUE = "blue"
    WHITE = "white"
    RED = "red"
    BLACK = "black"


def fill_zones(rings: int, inner_rings: int, outer_rings: int) -> list[tuple[int, ZoneColor]]:
    """
    填充圆盘列表

    Returns:
        [(环号, 颜色), ...]，按绘制顺序
    """
    return [
        (rings, ZoneColor.BLUE),
        (rings - outer_rings, ZoneColor.WHITE),
        (inner_rings, ZoneColor.RED),
        (0, ZoneColor.WHITE),
    ]


def stroke_color(ring: int, rings: int, inner_rings: int, outer_rings: int) -> ZoneColor:
    """第 ring 环描边颜色：落在红区或蓝区内部时为白色"""
    if (0 < ring < inner_rings) or (rings - outer_rings < ring < rings):
        return ZoneColor.WHITE
    return ZoneColor.BLACK


def label_color(ring: int, rings: int, inner_rings: int, outer_rings: int) -> ZoneColor:
    """第 ring 环环号颜色"""
    if ring <= inner_rings or ring > rings - outer_rings:
        return ZoneColor.WHITE
    return ZoneColor.BLACK
