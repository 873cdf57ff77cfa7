"""
装饰图片 - 加载一次、绘制四次、释放一次

依赖：
- Pillow: 位图解码与像素尺寸

使用方式：
    with DecorativeImage("koi.png") as koi:
        koi.width = inch_pt(2.0)
        surface.paint_image(koi, x, y)
"""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image

from ..interfaces import ImageLoadError

logger = logging.getLogger(__name__)


class DecorativeImage:
    """装饰位图（渲染宽度由调用方指定，高度按原始宽高比推导）"""

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self.image: Image.Image | None = None
        self.im_w = 0
        self.im_h = 0
        self.width = 0.0

    def __enter__(self) -> DecorativeImage:
        self.load()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def load(self) -> None:
        """
        解码图片

        Raises:
            ImageLoadError: 文件不存在或无法解码
        """
        try:
            image = Image.open(self.path)
            image.load()
        except OSError as e:
            raise ImageLoadError(str(self.path), e.strerror or str(e)) from e

        self.image = image
        self.im_w, self.im_h = image.size
        logger.debug(f"装饰图片已加载: {self.path} ({self.im_w}x{self.im_h})")

    def release(self) -> None:
        if self.image is not None:
            self.image.close()
            self.image = None

    @property
    def height(self) -> float:
        """渲染高度"""
        return self.width * self.im_h / self.im_w

    @property
    def scale(self) -> float:
        """像素 → pt 的统一缩放比"""
        if self.width == 0.0:
            raise ValueError("render width not set")
        return self.width / self.im_w
