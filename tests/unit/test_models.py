"""
数据模型单元测试

每个模块完成后必须运行：pytest tests/unit/test_models.py -v
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from fishlet_target.interfaces import UsageError
from fishlet_target.models import TargetGeometry, TargetOptions, parse_size


class TestParseSize:
    """页面尺寸解析测试"""

    def test_parse(self):
        assert parse_size("8.5x11") == (8.5, 11.0)
        assert parse_size("17x11") == (17.0, 11.0)

    @pytest.mark.parametrize("text", ["10", "", "8.5*11"])
    def test_missing_separator(self, text):
        with pytest.raises(UsageError):
            parse_size(text)

    def test_not_a_number(self):
        with pytest.raises(UsageError):
            parse_size("axb")


class TestTargetOptions:
    """靶纸选项测试"""

    def test_defaults(self):
        opts = TargetOptions()
        assert (opts.width_in, opts.height_in) == (8.5, 11.0)
        assert opts.rings == 8
        assert opts.inner_rings == 3
        assert opts.outer_rings == 2
        assert opts.output_path == Path("target.pdf")
        assert opts.background is False

    def test_points(self):
        opts = TargetOptions()
        assert opts.width_pt == 612
        assert opts.height_pt == 792
        assert opts.margin_pt == 18
        assert opts.line_width_pt == pytest.approx(3.6)

    def test_frozen(self):
        opts = TargetOptions()
        with pytest.raises(ValidationError):
            opts.rings = 10

    def test_from_size(self):
        opts = TargetOptions.from_size("11x17", rings=5)
        assert (opts.width_in, opts.height_in, opts.rings) == (11.0, 17.0, 5)


class TestTargetGeometry:
    """靶面几何测试"""

    def test_from_default_options(self, default_geometry: TargetGeometry):
        g = default_geometry
        assert (g.cx, g.cy) == (306, 396)
        assert g.radius == 286
        assert g.spacing == pytest.approx(286 / 8.5)

    def test_outermost_ring_is_radius(self, default_geometry: TargetGeometry):
        assert default_geometry.radius_at(8) == pytest.approx(default_geometry.radius)

    def test_landscape(self):
        g = TargetGeometry.from_options(TargetOptions(width_in=11, height_in=8.5))
        assert (g.cx, g.cy) == (396, 306)
        assert g.radius == 286
