"""
页面几何

职责：
1. 英寸/点换算
2. 靶面外半径（扣除页边距与半个线宽，使外环线完整落在边距以内）
3. 四个"靶眼"的圆心
4. 四角装饰图片与四角标注文字的锚点

坐标为页面坐标：原点左上角，y 轴向下，单位pt
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models import TargetGeometry

INCH_PT = 72.0


def inch_pt(inches: float) -> float:
    return inches * INCH_PT


def pt_inch(points: float) -> float:
    return points / INCH_PT


def outer_radius(width: float, height: float, margin: float, line_width: float) -> float:
    """外环外缘半径，截断为整数点"""
    return float(int(min(width, height) / 2 - margin - line_width / 2))


def eye_centers(geom: TargetGeometry) -> list[tuple[float, float]]:
    """次外环上 45° 方向的四个靶眼圆心（左上、右上、右下、左下）"""
    d = geom.radius_at(geom.rings - 1) * math.sqrt(2.0) / 2
    return [
        (geom.cx - d, geom.cy - d),
        (geom.cx + d, geom.cy - d),
        (geom.cx + d, geom.cy + d),
        (geom.cx - d, geom.cy + d),
    ]


def label_positions(geom: TargetGeometry, ring: int) -> list[tuple[float, float]]:
    """第 ring 环环号的四个位置：右、左、下、上"""
    offset = ring * geom.spacing
    return [
        (geom.cx + offset, geom.cy),
        (geom.cx - offset, geom.cy),
        (geom.cx, geom.cy + offset),
        (geom.cx, geom.cy - offset),
    ]


@dataclass(frozen=True)
class CornerLayout:
    """四角装饰图片与标注锚点"""
    width: float
    height: float
    margin: float
    image_width: float
    image_height: float
    font_size: float

    def image_origins(self) -> list[tuple[float, float]]:
        """图片左上角：左上、右上、左下、右下"""
        right = self.width - self.margin - self.image_width
        bottom = self.height - self.margin - self.image_height
        return [
            (self.margin, self.margin),
            (right, self.margin),
            (self.margin, bottom),
            (right, bottom),
        ]

    @property
    def left_x(self) -> float:
        return self.margin + self.image_width / 2

    @property
    def right_x(self) -> float:
        return self.width - self.margin - self.image_width / 2

    @property
    def top_y(self) -> float:
        """上方图片下沿再向下一个字号"""
        return self.margin + self.image_height + self.font_size

    @property
    def bottom_y(self) -> float:
        """下方图片上沿再向上一个字号"""
        return self.height - self.margin - self.image_height - self.font_size
