"""
绘制驱动 - 按固定顺序向画布发出绘制指令

职责：
1. 背景（可选）
2. 配色区圆盘 → 环线 → 环号
3. 四个靶眼
4. 四角装饰图片
5. 四角标注文字

依赖：
- IDrawingSurface: 画布（PDF实现见 pdf_surface）
- RuntimeConfig: 图片/字体/文字/配色

测试要点：
- test_draw_order: 圆盘/环线/环号/靶眼/图片/文字顺序
- test_ring_stroke_colors: 环线颜色
- test_corner_images: 四角图片位置与尺寸
- test_missing_image: 图片缺失时报 ImageLoadError
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..config import get_config
from ..layout import (
    CornerLayout,
    ZoneColor,
    eye_centers,
    fill_zones,
    inch_pt,
    label_color,
    label_positions,
    ring_radii,
    spacing_caption,
    stroke_color,
)
from ..models import TargetGeometry
from .decoration import DecorativeImage
from .pdf_surface import PDFSurface
from .text import CENTERED, Align, aligned_text

if TYPE_CHECKING:
    from ..config import RuntimeConfig
    from ..interfaces import IDrawingSurface
    from ..models import TargetOptions

logger = logging.getLogger(__name__)


class TargetRenderer:
    """靶纸绘制器"""

    def __init__(self, config: RuntimeConfig | None = None):
        self.config = config or get_config()
        self.palette = self.config.palette

    def render(self, opts: TargetOptions) -> None:
        """
        生成PDF靶纸

        Raises:
            ImageLoadError: 装饰图片加载失败
            SurfaceError: PDF写出失败
        """
        geom = TargetGeometry.from_options(opts)
        logger.info(
            f"生成靶纸: {opts.width_in}x{opts.height_in}in rings={opts.rings} "
            f"radius={geom.radius:.1f}pt spacing={geom.spacing:.3f}pt -> {opts.output_path}"
        )
        with PDFSurface(opts.output_path, geom.width, geom.height) as surface:
            self.draw(surface, opts, geom)

    def draw(self, surface: IDrawingSurface, opts: TargetOptions, geom: TargetGeometry) -> None:
        """在给定画布上绘制整页（不负责关闭画布）"""
        if opts.background:
            self._draw_background(surface, geom)

        surface.set_line_width(geom.line_width)

        self._draw_zones(surface, opts, geom)
        self._draw_rings(surface, opts, geom)
        self._draw_ring_labels(surface, opts, geom)
        self._draw_eyes(surface, geom)
        self._draw_decorations(surface, geom)

    def _draw_background(self, surface: IDrawingSurface, geom: TargetGeometry) -> None:
        m = geom.margin
        surface.fill_rect(
            m, m, geom.width - 2 * m, geom.height - 2 * m, self.palette.background
        )

    def _draw_zones(self, surface: IDrawingSurface, opts: TargetOptions, geom: TargetGeometry) -> None:
        # 大蓝盘 → 中白盘 → 小红盘 → 白靶心，后画覆盖先画
        for ring, color in fill_zones(opts.rings, opts.inner_rings, opts.outer_rings):
            surface.fill_circle(geom.cx, geom.cy, geom.radius_at(ring), self.palette.rgb(color))

    def _draw_rings(self, surface: IDrawingSurface, opts: TargetOptions, geom: TargetGeometry) -> None:
        for ring, r in enumerate(ring_radii(geom.radius, opts.rings)):
            color = stroke_color(ring, opts.rings, opts.inner_rings, opts.outer_rings)
            surface.stroke_circle(geom.cx, geom.cy, r, self.palette.rgb(color))

    def _draw_ring_labels(self, surface: IDrawingSurface, opts: TargetOptions, geom: TargetGeometry) -> None:
        surface.set_font(self.config.fonts.label_font, geom.spacing / 2)

        for ring in range(1, opts.rings + 1):
            color = self.palette.rgb(
                label_color(ring, opts.rings, opts.inner_rings, opts.outer_rings)
            )
            for x, y in label_positions(geom, ring):
                aligned_text(surface, x, y, CENTERED, str(ring), color)

    def _draw_eyes(self, surface: IDrawingSurface, geom: TargetGeometry) -> None:
        r = geom.spacing / 2
        for x, y in eye_centers(geom):
            surface.fill_circle(x, y, r, self.palette.rgb(ZoneColor.WHITE))
            surface.stroke_circle(x, y, r, self.palette.rgb(ZoneColor.BLACK))

    def _draw_decorations(self, surface: IDrawingSurface, geom: TargetGeometry) -> None:
        """四角图片与标注；图片在文字之前释放"""
        deco = self.config.decoration
        fonts = self.config.fonts

        with DecorativeImage(deco.image_path) as image:
            image.width = inch_pt(deco.image_inches)
            corners = CornerLayout(
                width=geom.width,
                height=geom.height,
                margin=geom.margin,
                image_width=image.width,
                image_height=image.height,
                font_size=fonts.caption_size,
            )
            for x, y in corners.image_origins():
                surface.paint_image(image, x, y)

        self._draw_captions(surface, geom, corners)

    def _draw_captions(self, surface: IDrawingSurface, geom: TargetGeometry, corners: CornerLayout) -> None:
        captions = self.config.captions
        black = self.palette.rgb(ZoneColor.BLACK)
        spacing_text = spacing_caption(
            geom.spacing, captions.spacing_template, captions.spacing_denominator
        )

        surface.set_font(self.config.fonts.caption_font, corners.font_size)

        top = Align.H_CENTER | Align.V_TOP
        bottom = Align.H_CENTER | Align.V_BOTTOM
        aligned_text(surface, corners.left_x, corners.top_y, top, captions.url_text, black)
        aligned_text(surface, corners.right_x, corners.top_y, top, captions.url_text, black)
        aligned_text(surface, corners.left_x, corners.bottom_y, bottom, spacing_text, black)
        aligned_text(surface, corners.right_x, corners.bottom_y, bottom, captions.copyright_text, black)
