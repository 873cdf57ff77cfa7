"""
版面计算单元测试

每个模块完成后必须运行：pytest tests/unit/test_layout.py -v
"""

import math

import pytest

from fishlet_target.layout import (
    CornerLayout,
    ZoneColor,
    eye_centers,
    fill_zones,
    label_color,
    label_positions,
    outer_radius,
    ring_radii,
    ring_radius,
    ring_spacing,
    spacing_caption,
    spacing_fraction,
    stroke_color,
)
from fishlet_target.models import TargetGeometry


class TestRings:
    """环距/环半径测试"""

    def test_spacing(self):
        # 100 / (8 + 0.5)
        assert ring_spacing(100, 8) == pytest.approx(100 / 8.5)
        assert ring_spacing(100, 8) == pytest.approx(11.765, abs=1e-3)

    @pytest.mark.parametrize("radius,rings", [(100, 1), (100, 8), (286, 8), (37.5, 13), (1, 50)])
    def test_outermost_equals_radius(self, radius, rings):
        """最外环外缘即靶面外半径"""
        assert ring_radius(radius, rings, rings) == pytest.approx(radius)

    @pytest.mark.parametrize("rings", [0, 1, 2, 8, 20])
    def test_radii_strictly_increasing(self, rings):
        radii = ring_radii(100, rings)
        assert len(radii) == rings + 1
        assert all(a < b for a, b in zip(radii, radii[1:]))

    def test_bullseye_is_half_spacing(self):
        assert ring_radius(100, 8, 0) == pytest.approx(ring_spacing(100, 8) / 2)

    def test_zero_rings(self):
        """0环退化为单个圆盘"""
        assert ring_spacing(100, 0) == pytest.approx(200)
        assert ring_radius(100, 0, 0) == pytest.approx(100)


class TestZones:
    """配色区测试"""

    def test_fill_order(self):
        assert fill_zones(8, 3, 2) == [
            (8, ZoneColor.BLUE),
            (6, ZoneColor.WHITE),
            (3, ZoneColor.RED),
            (0, ZoneColor.WHITE),
        ]

    def test_stroke_color_bands(self):
        """描边：0<k<3 或 6<k<8 为白色"""
        colors = [stroke_color(k, 8, 3, 2) for k in range(9)]
        white = [k for k, c in enumerate(colors) if c == ZoneColor.WHITE]
        assert white == [1, 2, 7]

    def test_label_color_bands(self):
        """环号：k<=3 或 k>6 为白色"""
        assert label_color(3, 8, 3, 2) == ZoneColor.WHITE
        assert label_color(4, 8, 3, 2) == ZoneColor.BLACK
        assert label_color(6, 8, 3, 2) == ZoneColor.BLACK
        assert label_color(7, 8, 3, 2) == ZoneColor.WHITE
        assert label_color(8, 8, 3, 2) == ZoneColor.WHITE

    def test_label_and_stroke_differ_at_boundary(self):
        """边界环上两种规则不一致"""
        assert stroke_color(3, 8, 3, 2) == ZoneColor.BLACK
        assert label_color(3, 8, 3, 2) == ZoneColor.WHITE
        assert stroke_color(8, 8, 3, 2) == ZoneColor.BLACK
        assert label_color(8, 8, 3, 2) == ZoneColor.WHITE


class TestPage:
    """页面几何测试"""

    def test_outer_radius_letter(self):
        # 612x792pt，边距18，线宽3.6 → 306-18-1.8=286.2 → 286
        assert outer_radius(612, 792, 18, 3.6) == 286.0

    def test_outer_radius_uses_shorter_side(self):
        assert outer_radius(792, 612, 18, 3.6) == outer_radius(612, 792, 18, 3.6)

    def test_eye_centers_on_second_outer_ring(self, default_geometry: TargetGeometry):
        r = default_geometry.radius_at(default_geometry.rings - 1)
        centers = eye_centers(default_geometry)
        assert len(centers) == 4
        for x, y in centers:
            dx = x - default_geometry.cx
            dy = y - default_geometry.cy
            assert math.hypot(dx, dy) == pytest.approx(r)
            assert abs(dx) == pytest.approx(abs(dy))

    def test_label_positions(self, default_geometry: TargetGeometry):
        g = default_geometry
        positions = label_positions(g, 2)
        assert positions[0] == pytest.approx((g.cx + 2 * g.spacing, g.cy))
        assert positions[3] == pytest.approx((g.cx, g.cy - 2 * g.spacing))

    def test_corner_layout(self):
        corners = CornerLayout(
            width=612, height=792, margin=18,
            image_width=144, image_height=72, font_size=12,
        )
        assert corners.image_origins() == [(18, 18), (450, 18), (18, 702), (450, 702)]
        assert corners.left_x == 90
        assert corners.right_x == 522
        assert corners.top_y == 102
        assert corners.bottom_y == 690


class TestCaption:
    """环距分数测试"""

    def test_three_quarters(self):
        assert spacing_fraction(54) == (3, 4)
        assert spacing_caption(54) == 'Ring spacing 3/4"'

    def test_default_target(self, default_geometry: TargetGeometry):
        # 286/8.5 ≈ 33.65pt ≈ 14.95/32in → 15/32
        assert spacing_caption(default_geometry.spacing) == 'Ring spacing 15/32"'

    def test_whole_inch(self):
        assert spacing_fraction(72) == (1, 1)

    def test_rounds_to_nearest_32nd(self):
        # 0.5/32 in = 1.125pt 恰好进位
        assert spacing_fraction(1.125) == (1, 32)
        assert spacing_fraction(1.0) == (0, 1)
