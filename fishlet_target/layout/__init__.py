"""
版面计算模块 - 纯函数，无绘制

子模块：
- rings: 环距/环半径
- zones: 配色区划分
- page: 页面几何与锚点
- caption: 环距分数标注
"""

from .caption import spacing_caption, spacing_fraction
from .page import CornerLayout, eye_centers, inch_pt, label_positions, outer_radius, pt_inch
from .rings import ring_radii, ring_radius, ring_spacing
from .zones import RGB, ZoneColor, fill_zones, label_color, stroke_color

__all__ = [
    "ring_spacing",
    "ring_radius",
    "ring_radii",
    "ZoneColor",
    "RGB",
    "fill_zones",
    "stroke_color",
    "label_color",
    "outer_radius",
    "eye_centers",
    "label_positions",
    "CornerLayout",
    "inch_pt",
    "pt_inch",
    "spacing_fraction",
    "spacing_caption",
]
