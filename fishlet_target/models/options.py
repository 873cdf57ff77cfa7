"""
靶纸选项模型 - 命令行输入构造的只读记录

所有长度输入单位为英寸，*_pt 属性换算为PDF点(1 inch = 72 pt)
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from ..interfaces import UsageError
from ..layout.page import inch_pt

DEFAULT_GEOM = "8.5x11"
DEFAULT_MARGIN = 0.25
DEFAULT_FNAME = "target.pdf"
DEFAULT_RINGS = 8
DEFAULT_IRINGS = 3
DEFAULT_ORINGS = 2
DEFAULT_LINEW = 0.05


def parse_size(text: str) -> tuple[float, float]:
    """
    解析 WxH 页面尺寸（英寸）

    Raises:
        UsageError: 缺少 x 分隔符或数值无法解析
    """
    width, sep, height = text.partition("x")
    if not sep:
        raise UsageError(f"size must be WxH, got {text!r}")
    try:
        return float(width), float(height)
    except ValueError as e:
        raise UsageError(f"size must be WxH, got {text!r}") from e


class TargetOptions(BaseModel):
    """靶纸配置（构造后只读）"""

    width_in: float = Field(8.5, description="页面宽度(英寸)")
    height_in: float = Field(11.0, description="页面高度(英寸)")
    margin_in: float = Field(DEFAULT_MARGIN, description="页边距(英寸)")
    line_width_in: float = Field(DEFAULT_LINEW, description="环线线宽(英寸)")
    rings: int = Field(DEFAULT_RINGS, description="总环数")
    inner_rings: int = Field(DEFAULT_IRINGS, description="内环(红区)环数")
    outer_rings: int = Field(DEFAULT_ORINGS, description="外环(蓝区)环数")
    output_path: Path = Field(Path(DEFAULT_FNAME), description="输出PDF路径")
    background: bool = Field(False, description="是否填充淡黄背景")

    model_config = {"frozen": True}

    @classmethod
    def from_size(cls, size: str, **kwargs) -> TargetOptions:
        """由 WxH 字符串构造"""
        width_in, height_in = parse_size(size)
        return cls(width_in=width_in, height_in=height_in, **kwargs)

    @property
    def width_pt(self) -> float:
        return inch_pt(self.width_in)

    @property
    def height_pt(self) -> float:
        return inch_pt(self.height_in)

    @property
    def margin_pt(self) -> float:
        return inch_pt(self.margin_in)

    @property
    def line_width_pt(self) -> float:
        return inch_pt(self.line_width_in)
