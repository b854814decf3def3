"""
どこで: `src/yeargrid/core/shapes.py`。
何を: 描画プリミティブ（Rect / Circle / Line / Polygon）のモデルと検証ロジックを定義する。
なぜ: フォントや外部アセットに頼らず、全要素を同じ図形表現で合成・出力できるようにするため。
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import TypeAlias

BBox: TypeAlias = tuple[float, float, float, float]


def _check_finite(owner: str, **values: float) -> None:
    for name, value in values.items():
        if not math.isfinite(float(value)):
            raise ValueError(f"{owner}.{name} は有限値である必要がある: got={value!r}")


def _check_non_negative(owner: str, **values: float) -> None:
    for name, value in values.items():
        if float(value) < 0.0:
            raise ValueError(f"{owner}.{name} は 0 以上である必要がある: got={value!r}")


@dataclass(frozen=True, slots=True)
class Rect:
    """角丸を持てる軸並行矩形。

    Notes
    -----
    `opacity` は 1.0 のとき出力で省略する。
    `fill="none"` と `stroke` の組で輪郭のみの矩形を表す。
    """

    x: float
    y: float
    width: float
    height: float
    fill: str
    rx: float = 0.0
    opacity: float = 1.0
    stroke: str | None = None
    stroke_width: float = 0.0

    def __post_init__(self) -> None:
        _check_finite(
            "Rect",
            x=self.x,
            y=self.y,
            width=self.width,
            height=self.height,
            rx=self.rx,
            opacity=self.opacity,
            stroke_width=self.stroke_width,
        )
        _check_non_negative(
            "Rect",
            width=self.width,
            height=self.height,
            rx=self.rx,
            stroke_width=self.stroke_width,
        )
        if not 0.0 <= float(self.opacity) <= 1.0:
            raise ValueError(f"Rect.opacity は 0..1 である必要がある: got={self.opacity!r}")

    def bbox(self) -> BBox:
        half = self.stroke_width / 2.0 if self.stroke is not None else 0.0
        return (
            self.x - half,
            self.y - half,
            self.x + self.width + half,
            self.y + self.height + half,
        )

    def scaled(self, factor: float) -> "Rect":
        f = float(factor)
        return Rect(
            x=self.x * f,
            y=self.y * f,
            width=self.width * f,
            height=self.height * f,
            fill=self.fill,
            rx=self.rx * f,
            opacity=self.opacity,
            stroke=self.stroke,
            stroke_width=self.stroke_width * f,
        )

    def translated(self, dx: float, dy: float) -> "Rect":
        return replace(self, x=self.x + dx, y=self.y + dy)


@dataclass(frozen=True, slots=True)
class Circle:
    """塗り、または輪郭線のみの円。

    `fill="none"` と `stroke` の組で輪郭円を表す。
    """

    cx: float
    cy: float
    r: float
    fill: str
    stroke: str | None = None
    stroke_width: float = 0.0

    def __post_init__(self) -> None:
        _check_finite("Circle", cx=self.cx, cy=self.cy, r=self.r, stroke_width=self.stroke_width)
        _check_non_negative("Circle", r=self.r, stroke_width=self.stroke_width)

    def bbox(self) -> BBox:
        half = self.stroke_width / 2.0 if self.stroke is not None else 0.0
        extent = self.r + half
        return (self.cx - extent, self.cy - extent, self.cx + extent, self.cy + extent)

    def scaled(self, factor: float) -> "Circle":
        f = float(factor)
        return Circle(
            cx=self.cx * f,
            cy=self.cy * f,
            r=self.r * f,
            fill=self.fill,
            stroke=self.stroke,
            stroke_width=self.stroke_width * f,
        )

    def translated(self, dx: float, dy: float) -> "Circle":
        return replace(self, cx=self.cx + dx, cy=self.cy + dy)


@dataclass(frozen=True, slots=True)
class Line:
    """丸キャップの線分。"""

    x1: float
    y1: float
    x2: float
    y2: float
    stroke: str
    stroke_width: float

    def __post_init__(self) -> None:
        _check_finite(
            "Line",
            x1=self.x1,
            y1=self.y1,
            x2=self.x2,
            y2=self.y2,
            stroke_width=self.stroke_width,
        )
        _check_non_negative("Line", stroke_width=self.stroke_width)

    def bbox(self) -> BBox:
        # 丸キャップは端点から半径 stroke_width/2 の円で近似できる。
        half = self.stroke_width / 2.0
        return (
            min(self.x1, self.x2) - half,
            min(self.y1, self.y2) - half,
            max(self.x1, self.x2) + half,
            max(self.y1, self.y2) + half,
        )

    def scaled(self, factor: float) -> "Line":
        f = float(factor)
        return Line(
            x1=self.x1 * f,
            y1=self.y1 * f,
            x2=self.x2 * f,
            y2=self.y2 * f,
            stroke=self.stroke,
            stroke_width=self.stroke_width * f,
        )

    def translated(self, dx: float, dy: float) -> "Line":
        return replace(self, x1=self.x1 + dx, y1=self.y1 + dy, x2=self.x2 + dx, y2=self.y2 + dy)


@dataclass(frozen=True, slots=True)
class Polygon:
    """塗りつぶし多角形（斜めストローク用）。"""

    points: tuple[tuple[float, float], ...]
    fill: str

    def __post_init__(self) -> None:
        pts = tuple((float(x), float(y)) for x, y in self.points)
        if len(pts) < 3:
            raise ValueError("Polygon.points は 3 点以上である必要がある")
        for i, (x, y) in enumerate(pts):
            _check_finite("Polygon", **{f"x{i}": x, f"y{i}": y})
        object.__setattr__(self, "points", pts)

    def bbox(self) -> BBox:
        xs = [p[0] for p in self.points]
        ys = [p[1] for p in self.points]
        return (min(xs), min(ys), max(xs), max(ys))

    def scaled(self, factor: float) -> "Polygon":
        f = float(factor)
        return Polygon(points=tuple((x * f, y * f) for x, y in self.points), fill=self.fill)

    def translated(self, dx: float, dy: float) -> "Polygon":
        return Polygon(points=tuple((x + dx, y + dy) for x, y in self.points), fill=self.fill)


Shape: TypeAlias = Rect | Circle | Line | Polygon


def bounding_box(shapes: Iterable[Shape]) -> BBox:
    """図形列全体の外接矩形 `(min_x, min_y, max_x, max_y)` を返す。

    Raises
    ------
    ValueError
        図形が 1 つも無い場合。
    """

    boxes = [s.bbox() for s in shapes]
    if not boxes:
        raise ValueError("bounding_box には 1 つ以上の図形が必要")
    return (
        min(b[0] for b in boxes),
        min(b[1] for b in boxes),
        max(b[2] for b in boxes),
        max(b[3] for b in boxes),
    )


__all__ = ["BBox", "Circle", "Line", "Polygon", "Rect", "Shape", "bounding_box"]
