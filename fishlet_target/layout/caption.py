"""
环距标注 - 将环距(pt)表示为约分后的英寸分数
"""

from __future__ import annotations

from math import gcd

from .page import pt_inch

SPACING_DENOMINATOR = 32


def spacing_fraction(spacing_pt: float, den: int = SPACING_DENOMINATOR) -> tuple[int, int]:
    """
    环距 → (分子, 分母)，先按 1/den 英寸四舍五入，再用最大公约数约分

    例：54pt = 0.75in → 24/32 → (3, 4)
    """
    num = int(pt_inch(spacing_pt) * den + 0.5)
    g = gcd(num, den)
    return num // g, den // g


def spacing_caption(
    spacing_pt: float,
    template: str = 'Ring spacing {num}/{den}"',
    den: int = SPACING_DENOMINATOR,
) -> str:
    num, reduced_den = spacing_fraction(spacing_pt, den)
    return template.format(num=num, den=reduced_den)
