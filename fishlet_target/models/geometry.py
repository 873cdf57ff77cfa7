"""
靶面几何模型 - 由 TargetOptions 推导的只读数值

坐标为页面坐标：原点左上角，y 轴向下，单位pt
"""

from __future__ import annotations

from pydantic import BaseModel

from ..layout.page import outer_radius
from ..layout.rings import ring_radius, ring_spacing
from .options import TargetOptions


class TargetGeometry(BaseModel):
    """靶面几何"""

    width: float
    height: float
    margin: float
    line_width: float
    cx: float
    cy: float
    radius: float
    rings: int

    model_config = {"frozen": True}

    @classmethod
    def from_options(cls, opts: TargetOptions) -> TargetGeometry:
        width = opts.width_pt
        height = opts.height_pt
        return cls(
            width=width,
            height=height,
            margin=opts.margin_pt,
            line_width=opts.line_width_pt,
            cx=width / 2,
            cy=height / 2,
            radius=outer_radius(width, height, opts.margin_pt, opts.line_width_pt),
            rings=opts.rings,
        )

    @property
    def spacing(self) -> float:
        """单环径向宽度"""
        return ring_spacing(self.radius, self.rings)

    def radius_at(self, ring: int) -> float:
        """第 ring 环外缘半径"""
        return ring_radius(self.radius, self.rings, ring)
