"""
环形布局计算 - 环距与环半径（闭式公式）

    ((    ((    (( c ))    ))    ))
    |<-- radius -->|

N 环加中心靶心共 N+1 个环带，靶心处留半个环距，因此环距为 R/(N+0.5)。
调用方保证 N >= 0 且 0 <= k <= N，此处不做校验。
"""

from __future__ import annotations


def ring_spacing(radius: float, rings: int) -> float:
    """单环径向宽度"""
    return radius / (rings + 0.5)


def ring_radius(radius: float, rings: int, ring: int) -> float:
    """第 ring 环外缘半径，第0环为靶心"""
    rs = ring_spacing(radius, rings)
    return rs / 2 + ring * rs


def ring_radii(radius: float, rings: int) -> list[float]:
    """0..rings 各环外缘半径"""
    return [ring_radius(radius, rings, k) for k in range(rings + 1)]
