"""
PDF画布 - IDrawingSurface 的 reportlab 实现

职责：
1. 单页PDF画布创建（页面尺寸单位pt）
2. 页面坐标（左上原点，y向下）→ PDF坐标（左下原点，y向上）
3. 结束页面并写出文件

依赖：
- reportlab: 矢量绘制与PDF输出
- Pillow: 图片经 ImageReader 交给 reportlab

测试要点：
- test_close_writes_single_page: 写出单页PDF
- test_close_unwritable_path: 路径不可写时报 SurfaceError
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from reportlab.lib.utils import ImageReader
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfgen import canvas

from ..interfaces import IDrawingSurface, SurfaceError

if TYPE_CHECKING:
    from ..layout import RGB
    from .decoration import DecorativeImage

logger = logging.getLogger(__name__)


class PDFSurface(IDrawingSurface):
    """单页PDF画布"""

    def __init__(self, path: str | Path, width: float, height: float, title: str = "Target"):
        self.path = Path(path)
        self.width = width
        self.height = height
        self._font = "Helvetica"
        self._font_size = 12.0
        self._closed = False

        self.canvas = canvas.Canvas(str(self.path), pagesize=(width, height))
        self.canvas.setTitle(title)

    def __enter__(self) -> PDFSurface:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        # 出错时不写文件
        if exc_type is None:
            self.close()

    def _y(self, y: float) -> float:
        return self.height - y

    def set_line_width(self, width: float) -> None:
        self.canvas.setLineWidth(width)

    def fill_rect(self, x: float, y: float, w: float, h: float, color: RGB) -> None:
        self.canvas.setFillColorRGB(*color)
        self.canvas.rect(x, self._y(y) - h, w, h, stroke=0, fill=1)

    def fill_circle(self, x: float, y: float, r: float, color: RGB) -> None:
        self.canvas.setFillColorRGB(*color)
        self.canvas.circle(x, self._y(y), r, stroke=0, fill=1)

    def stroke_circle(self, x: float, y: float, r: float, color: RGB) -> None:
        self.canvas.setStrokeColorRGB(*color)
        self.canvas.circle(x, self._y(y), r, stroke=1, fill=0)

    def set_font(self, name: str, size: float) -> None:
        """
        Raises:
            SurfaceError: reportlab 未注册该字体
        """
        try:
            self.canvas.setFont(name, size)
        except KeyError as e:
            raise SurfaceError(f"unknown font: {name}") from e
        self._font = name
        self._font_size = size

    def text_extents(self, text: str) -> tuple[float, float]:
        try:
            width = pdfmetrics.stringWidth(text, self._font, self._font_size)
            height = pdfmetrics.getAscent(self._font, self._font_size)
        except KeyError as e:
            raise SurfaceError(f"unknown font: {self._font}") from e
        return width, height

    def show_text(self, x: float, y: float, text: str, color: RGB) -> None:
        self.canvas.setFillColorRGB(*color)
        self.canvas.drawString(x, self._y(y), text)

    def paint_image(self, image: DecorativeImage, x: float, y: float) -> None:
        s = image.scale
        self.canvas.saveState()
        try:
            self.canvas.translate(x, self._y(y) - image.height)
            self.canvas.scale(s, s)
            self.canvas.drawImage(
                ImageReader(image.image), 0, 0,
                width=image.im_w, height=image.im_h, mask="auto",
            )
        finally:
            self.canvas.restoreState()

    def save_state(self) -> None:
        self.canvas.saveState()

    def restore_state(self) -> None:
        self.canvas.restoreState()

    def close(self) -> None:
        """结束页面并写出文件（只执行一次）"""
        if self._closed:
            return
        self._closed = True

        # 先结束页面再保存，否则文件不完整
        self.canvas.showPage()
        try:
            self.canvas.save()
        except OSError as e:
            raise SurfaceError(f"{e.strerror or e}: {self.path}") from e
        logger.info(f"PDF已写出: {self.path}")
