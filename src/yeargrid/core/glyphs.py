"""
どこで: `src/yeargrid/core/glyphs.py`。手続き的グリフ（数字・英字・記号）の生成。
何を: 文字 → 単位座標のパラメトリック図形記述子の表と、7 セグメント表から図形列を作る。
なぜ: フォントの無い描画環境でも、矩形・円・線・多角形だけで文字を同じ形に描けるようにするため。
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TypeAlias

from yeargrid.core.shapes import Circle, Line, Polygon, Rect, Shape

_logger = logging.getLogger(__name__)

# 単位: 文字高さ = 1.0。
STROKE = 0.18
"""ストローク太さ（高さ比）。"""
GLYPH_WIDTH = 0.7
"""英字・数字のグリフ幅（高さ比）。"""
CORNER = STROKE / 2.0
MID = (1.0 - STROKE) / 2.0

SPACE_ADVANCE = 0.4
NARROW_ADVANCE = 0.35
DEFAULT_ADVANCE = GLYPH_WIDTH

PLACEHOLDER_OPACITY = 0.3

# 7 セグメントの並び: top, upper-left, upper-right, middle, lower-left, lower-right, bottom
SEGMENTS: dict[str, tuple[int, int, int, int, int, int, int]] = {
    "0": (1, 1, 1, 0, 1, 1, 1),
    "1": (0, 0, 1, 0, 0, 1, 0),
    "2": (1, 0, 1, 1, 1, 0, 1),
    "3": (1, 0, 1, 1, 0, 1, 1),
    "4": (0, 1, 1, 1, 0, 1, 0),
    "5": (1, 1, 0, 1, 0, 1, 1),
    "6": (1, 1, 0, 1, 1, 1, 1),
    "7": (1, 0, 1, 0, 0, 1, 0),
    "8": (1, 1, 1, 1, 1, 1, 1),
    "9": (1, 1, 1, 1, 0, 1, 1),
}

SEGMENT_THICKNESS = 0.16
"""セグメント太さ（数字幅比）。"""


@dataclass(frozen=True, slots=True)
class Bar:
    """単位座標の角丸矩形（縦棒・横棒・点）。"""

    x: float
    y: float
    width: float
    height: float
    rx: float = CORNER

    def realize(self, x: float, y: float, height: float, color: str) -> Rect:
        return Rect(
            x=x + self.x * height,
            y=y + self.y * height,
            width=self.width * height,
            height=self.height * height,
            fill=color,
            rx=self.rx * height,
        )


@dataclass(frozen=True, slots=True)
class Slant:
    """単位座標の斜めストローク（太さ STROKE の平行四辺形）。"""

    points: tuple[tuple[float, float], ...]

    @classmethod
    def between(cls, x1: float, y1: float, x2: float, y2: float) -> "Slant":
        dx = x2 - x1
        dy = y2 - y1
        length = math.hypot(dx, dy)
        nx = -dy / length * (STROKE / 2.0)
        ny = dx / length * (STROKE / 2.0)
        return cls(
            points=(
                (x1 + nx, y1 + ny),
                (x2 + nx, y2 + ny),
                (x2 - nx, y2 - ny),
                (x1 - nx, y1 - ny),
            )
        )

    def realize(self, x: float, y: float, height: float, color: str) -> Polygon:
        return Polygon(
            points=tuple((x + px * height, y + py * height) for px, py in self.points),
            fill=color,
        )


Stroke: TypeAlias = Bar | Slant


def _h(x: float, y: float, length: float) -> Bar:
    return Bar(x, y, length, STROKE)


def _v(x: float, y: float, length: float) -> Bar:
    return Bar(x, y, STROKE, length)


def _dot(x: float, y: float) -> Bar:
    return Bar(x, y, STROKE * 1.2, STROKE * 1.2)


def _s(x1: float, y1: float, x2: float, y2: float) -> Slant:
    return Slant.between(x1, y1, x2, y2)


_W = GLYPH_WIDTH
_T = STROKE
_HT = STROKE / 2.0
_CX = (GLYPH_WIDTH - STROKE) / 2.0

GLYPHS: dict[str, tuple[Stroke, ...]] = {
    "a": (_v(0, _T, 1 - _T), _v(_W - _T, _T, 1 - _T), _h(_T, 0, _W - 2 * _T), _h(_T, MID, _W - 2 * _T)),
    "b": (
        _v(0, 0, 1),
        _h(0, 0, _W * 0.85),
        _h(0, MID, _W * 0.85),
        _h(0, 1 - _T, _W * 0.85),
        _v(_W * 0.85 - _T, _T, MID - _T),
        _v(_W - _T, MID + _T * 0.5, 1 - MID - _T * 1.5),
    ),
    "c": (_v(0, _T, 1 - 2 * _T), _h(_T, 0, _W - _T), _h(_T, 1 - _T, _W - _T)),
    "d": (_v(0, 0, 1), _h(0, 0, _W - _T), _h(0, 1 - _T, _W - _T), _v(_W - _T, _T, 1 - 2 * _T)),
    "e": (_v(0, 0, 1), _h(0, 0, _W), _h(0, MID, _W * 0.75), _h(0, 1 - _T, _W)),
    "f": (_v(0, 0, 1), _h(0, 0, _W), _h(0, MID, _W * 0.65)),
    "g": (
        _v(0, _T, 1 - 2 * _T),
        _h(_T, 0, _W - _T),
        _h(_T, 1 - _T, _W - _T),
        _v(_W - _T, MID, 1 - MID - _T),
        _h(_W * 0.45, MID, _W * 0.55),
    ),
    "h": (_v(0, 0, 1), _v(_W - _T, 0, 1), _h(_T, MID, _W - 2 * _T)),
    "i": (_v(_CX, 0, 1), _h(0, 0, _W), _h(0, 1 - _T, _W)),
    "j": (_v(_W - _T, 0, 1 - _T), _h(_W * 0.2, 0, _W * 0.8), _h(_T, 1 - _T, _W - 2 * _T), _v(0, 0.6, 0.4 - _T)),
    "k": (_v(0, 0, 1), _s(_T, MID + _HT, _W - _HT, _HT), _s(_T, MID + _HT, _W - _HT, 1 - _HT)),
    "l": (_v(0, 0, 1), _h(0, 1 - _T, _W)),
    "m": (_v(0, 0, 1), _v(_W - _T, 0, 1), _h(_T, 0, _W - 2 * _T), _v(_CX, 0, 0.6)),
    "n": (_v(0, 0, 1), _v(_W - _T, 0, 1), _s(_HT, _HT, _W - _HT, 1 - _HT)),
    "o": (_v(0, _T, 1 - 2 * _T), _v(_W - _T, _T, 1 - 2 * _T), _h(_T, 0, _W - 2 * _T), _h(_T, 1 - _T, _W - 2 * _T)),
    "p": (_v(0, 0, 1), _h(0, 0, _W), _h(0, MID, _W), _v(_W - _T, _T, MID - _T)),
    "q": (
        _v(0, _T, 1 - 2 * _T),
        _v(_W - _T, _T, 1 - 2 * _T),
        _h(_T, 0, _W - 2 * _T),
        _h(_T, 1 - _T, _W - 2 * _T),
        _s(_W * 0.5, 0.65, _W - _HT, 1 - _HT),
    ),
    "r": (
        _v(0, 0, 1),
        _h(0, 0, _W),
        _h(0, MID, _W),
        _v(_W - _T, _T, MID - _T),
        _s(_W * 0.4, MID + _HT, _W - _HT, 1 - _HT),
    ),
    "s": (
        _h(0, 0, _W),
        _h(0, MID, _W),
        _h(0, 1 - _T, _W),
        _v(0, _T, MID - _T),
        _v(_W - _T, MID + _T, 1 - 2 * _T - MID),
    ),
    "t": (_v(_CX, 0, 1), _h(0, 0, _W)),
    "u": (_v(0, 0, 1 - _T), _v(_W - _T, 0, 1 - _T), _h(0, 1 - _T, _W)),
    "v": (_s(_HT, _HT, _W / 2, 1 - _HT), _s(_W - _HT, _HT, _W / 2, 1 - _HT)),
    "w": (_v(0, 0, 1 - _T), _v(_W - _T, 0, 1 - _T), _v(_CX, 0.4, 0.6 - _T), _h(0, 1 - _T, _W)),
    "x": (_s(_HT, _HT, _W - _HT, 1 - _HT), _s(_W - _HT, _HT, _HT, 1 - _HT)),
    "y": (_s(_HT, _HT, _W / 2, MID + _HT), _s(_W - _HT, _HT, _W / 2, MID + _HT), _v(_CX, MID, 1 - MID)),
    "z": (_h(0, 0, _W), _h(0, 1 - _T, _W), _s(_W - _HT, _T, _HT, 1 - _T)),
    " ": (),
    ".": (_dot(0.07, 1 - _T * 1.2),),
    ",": (Bar(0.07, 1 - _T * 2, _T * 1.2, _T * 2.5),),
    "'": (_v(0.085, 0, _T * 2),),
    '"': (_v(_W * 0.2, 0, _T * 2), _v(_W * 0.5, 0, _T * 2)),
    "-": (_h(_T, MID, _W - 2 * _T),),
    "!": (_v(0.085, 0, 0.7), _dot(0.067, 1 - _T * 1.2)),
    "?": (
        _h(0, 0, _W),
        _v(_W - _T, _T, 0.25),
        _h(_W * 0.35, 0.35, _W * 0.65),
        _v(_W * 0.35, 0.35, 0.35),
        _dot(_W * 0.35 + _HT - _T * 0.6, 1 - _T * 1.2),
    ),
    ":": (_dot(0.067, 0.25), _dot(0.067, 1 - _T * 1.2)),
    "/": (_s(_W - _HT, _HT, _HT, 1 - _HT),),
}

# タイポグラフィ記号は ASCII の同等クラスとして扱う。
ALIASES: dict[str, str] = {
    "‘": "'",
    "’": "'",
    "“": '"',
    "”": '"',
    "–": "-",
    "—": "-",
}

_NARROW = frozenset(".,!':")

SUPPORTED_CHARS = frozenset(GLYPHS) | frozenset(SEGMENTS) | frozenset(ALIASES) | {"%"}


def normalize_char(char: str) -> str:
    """表引き用に 1 文字を正規化（小文字化・別名解決）して返す。"""

    if len(char) != 1:
        raise ValueError(f"1 文字である必要がある: got={char!r}")
    c = ALIASES.get(char, char)
    return c.lower()


def is_supported(char: str) -> bool:
    return normalize_char(char) in SUPPORTED_CHARS


def char_advance(char: str, height: float) -> float:
    """文字送り幅を返す（描画内容とは独立した文字クラスごとの固定値）。"""

    c = normalize_char(char)
    if c == " ":
        return SPACE_ADVANCE * height
    if c in _NARROW:
        return NARROW_ADVANCE * height
    return DEFAULT_ADVANCE * height


def _segment_boxes(width: float, height: float) -> tuple[tuple[float, float, float, float], ...]:
    """7 セグメントの (x, y, w, h) を SEGMENTS と同じ並びで返す。"""

    t = width * SEGMENT_THICKNESS
    g = t * 0.2
    half = height / 2.0
    side = half - t - g * 2.0
    inner = width - 2.0 * t
    return (
        (t, 0.0, inner, t),
        (0.0, t + g, t, side),
        (width - t, t + g, t, side),
        (t, half - t / 2.0, inner, t),
        (0.0, half + g, t, side),
        (width - t, half + g, t, side),
        (t, height - t, inner, t),
    )


def draw_digit(digit: str, x: float, y: float, width: float, height: float, color: str) -> tuple[Rect, ...]:
    """7 セグメント表に従って数字を描く。

    Raises
    ------
    KeyError
        digit が 0-9 でない場合。
    """

    bits = SEGMENTS[digit]
    r = width * SEGMENT_THICKNESS / 2.5
    return tuple(
        Rect(x=x + bx, y=y + by, width=bw, height=bh, fill=color, rx=r)
        for on, (bx, by, bw, bh) in zip(bits, _segment_boxes(width, height))
        if on
    )


def draw_decimal_point(x: float, y: float, size: float, color: str) -> tuple[Rect, ...]:
    return (Rect(x=x, y=y, width=size, height=size, fill=color, rx=size / 3.0),)


def draw_percent_sign(x: float, y: float, width: float, height: float, color: str) -> tuple[Shape, ...]:
    """円 2 つと丸キャップの斜線でパーセント記号を描く。

    Notes
    -----
    インクの横範囲は `[x, x + width]` に一致する。
    """

    r = height * 0.14
    sw = height * 0.1
    half = sw / 2.0
    return (
        Circle(cx=x + r, cy=y + r, r=r, fill=color),
        Circle(cx=x + width - r, cy=y + height - r, r=r, fill=color),
        Line(
            x1=x + width - half,
            y1=y + half,
            x2=x + half,
            y2=y + height - half,
            stroke=color,
            stroke_width=sw,
        ),
    )


def draw_placeholder(x: float, y: float, height: float, color: str) -> tuple[Rect, ...]:
    """未対応文字の代わりに描く半透明の矩形。"""

    w = GLYPH_WIDTH * height
    return (
        Rect(
            x=x + w * 0.25,
            y=y + height * 0.25,
            width=w * 0.5,
            height=height * 0.5,
            fill=color,
            rx=CORNER * height,
            opacity=PLACEHOLDER_OPACITY,
        ),
    )


def draw_glyph(char: str, x: float, y: float, height: float, color: str) -> tuple[Shape, ...]:
    """1 文字を図形列として描く。

    Parameters
    ----------
    char : str
        1 文字。英字は大小文字を区別しない。
    x, y : float
        グリフ左上。
    height : float
        文字高さ。全寸法はこの値に比例する。
    color : str
        塗り色。

    Returns
    -------
    tuple[Shape, ...]
        同じ引数なら常に同じ図形列。未対応文字はプレースホルダ 1 つ。
    """

    c = normalize_char(char)
    if c in SEGMENTS:
        return draw_digit(c, x, y, GLYPH_WIDTH * height, height, color)
    if c == "%":
        return draw_percent_sign(x, y, GLYPH_WIDTH * height, height, color)

    strokes = GLYPHS.get(c)
    if strokes is None:
        _logger.warning(
            "Character %r (U+%04X) has no glyph; drawing placeholder", char, ord(char)
        )
        return draw_placeholder(x, y, height, color)
    return tuple(s.realize(x, y, height, color) for s in strokes)


__all__ = [
    "ALIASES",
    "Bar",
    "GLYPHS",
    "GLYPH_WIDTH",
    "SEGMENTS",
    "STROKE",
    "SUPPORTED_CHARS",
    "Slant",
    "char_advance",
    "draw_decimal_point",
    "draw_digit",
    "draw_glyph",
    "draw_percent_sign",
    "draw_placeholder",
    "is_supported",
    "normalize_char",
]
