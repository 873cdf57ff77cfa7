"""
绘制模块 - 画布/文字/装饰图片/绘制驱动

子模块：
- pdf_surface: reportlab 单页PDF画布
- text: 对齐文字
- decoration: 装饰图片加载
- driver: 绘制驱动
"""

from .decoration import DecorativeImage
from .driver import TargetRenderer
from .pdf_surface import PDFSurface
from .text import CENTERED, Align, aligned_text, text_origin

__all__ = [
    "TargetRenderer",
    "PDFSurface",
    "DecorativeImage",
    "Align",
    "CENTERED",
    "aligned_text",
    "text_origin",
]
