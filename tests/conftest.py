"""
pytest 配置与公共 fixtures

使用方式：
    def test_something(runtime_config, recording_surface):
        TargetRenderer(runtime_config).draw(recording_surface, opts, geom)
"""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Any, Generator

import pytest
from PIL import Image

from fishlet_target.config import DecorationConfig, RuntimeConfig
from fishlet_target.config import runtime_config as runtime_config_module
from fishlet_target.interfaces import IDrawingSurface
from fishlet_target.models import TargetGeometry, TargetOptions


# ============================================================================
# 文件 Fixtures
# ============================================================================

@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """临时目录"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_png(temp_dir: Path) -> Path:
    """200x100 的示例装饰图片（宽高比 2:1）"""
    path = temp_dir / "koi.png"
    Image.new("RGB", (200, 100), (230, 120, 40)).save(path)
    return path


# ============================================================================
# 配置 Fixtures
# ============================================================================

@pytest.fixture
def runtime_config(sample_png: Path) -> RuntimeConfig:
    """运行期配置（装饰图片指向示例图片）"""
    return RuntimeConfig(decoration=DecorationConfig(image_path=str(sample_png)))


@pytest.fixture
def reset_global_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """清空全局配置缓存，使 get_config() 按当前工作目录重新加载"""
    monkeypatch.setattr(runtime_config_module, "_config", None)


# ============================================================================
# 数据模型 Fixtures
# ============================================================================

@pytest.fixture
def default_options(temp_dir: Path) -> TargetOptions:
    """默认选项（8.5x11，8环，内3外2）"""
    return TargetOptions(output_path=temp_dir / "target.pdf")


@pytest.fixture
def default_geometry(default_options: TargetOptions) -> TargetGeometry:
    return TargetGeometry.from_options(default_options)


# ============================================================================
# 画布 Fixtures
# ============================================================================

class RecordingSurface(IDrawingSurface):
    """记录所有绘制调用的假画布"""

    def __init__(self, width: float = 612.0, height: float = 792.0):
        self.width = width
        self.height = height
        self.calls: list[tuple[str, Any]] = []
        self.font: tuple[str, float] = ("Helvetica", 12.0)
        self.depth = 0
        self.closed = False

    def named(self, name: str) -> list[Any]:
        return [args for op, args in self.calls if op == name]

    def set_line_width(self, width):
        self.calls.append(("set_line_width", width))

    def fill_rect(self, x, y, w, h, color):
        self.calls.append(("fill_rect", (x, y, w, h, color)))

    def fill_circle(self, x, y, r, color):
        self.calls.append(("fill_circle", (x, y, r, color)))

    def stroke_circle(self, x, y, r, color):
        self.calls.append(("stroke_circle", (x, y, r, color)))

    def set_font(self, name, size):
        self.font = (name, size)
        self.calls.append(("set_font", (name, size)))

    def text_extents(self, text):
        size = self.font[1]
        return len(text) * size * 0.5, size * 0.7

    def show_text(self, x, y, text, color):
        self.calls.append(("show_text", (x, y, text, color, self.depth)))

    def paint_image(self, image, x, y):
        self.calls.append(("paint_image", (x, y, image.width, image.height)))

    def save_state(self):
        self.depth += 1
        self.calls.append(("save_state", self.depth))

    def restore_state(self):
        self.calls.append(("restore_state", self.depth))
        self.depth -= 1

    def close(self):
        self.closed = True


@pytest.fixture
def recording_surface() -> RecordingSurface:
    return RecordingSurface()
