"""
どこで: `src/yeargrid/core/text.py`。グリフ列の横組み。
何を: 文字送りの総和を先に求め、目標 x を中心に 1 行（またはパーセンテージ表示）を配置する。
なぜ: 1 文字ずつの推定で中央がずれていくのを避け、行全体を 1 単位として中央寄せするため。
"""

from __future__ import annotations

from yeargrid.core.glyphs import (
    char_advance,
    draw_decimal_point,
    draw_digit,
    draw_glyph,
    draw_percent_sign,
    draw_placeholder,
)
from yeargrid.core.shapes import Shape, bounding_box

# パーセンテージ表示の寸法（文字高さ比）。
PERCENT_DIGIT_WIDTH = 0.5
PERCENT_DIGIT_ADVANCE = PERCENT_DIGIT_WIDTH * 1.2
PERCENT_POINT_SIZE = 0.18
PERCENT_POINT_ADVANCE = PERCENT_POINT_SIZE + PERCENT_DIGIT_ADVANCE * 0.2
PERCENT_POINT_LIFT = 0.07
PERCENT_SIGN_GAP = 0.15
PERCENT_SIGN_WIDTH = 0.6


def text_width(text: str, height: float, spacing: float = 0.0) -> float:
    """1 行の総幅（末尾の文字間を含まない）を返す。"""

    if not text:
        return 0.0
    total = sum(char_advance(ch, height) + spacing for ch in text)
    return total - spacing


def render_text(
    text: str,
    center_x: float,
    top_y: float,
    height: float,
    color: str,
    spacing: float = 0.0,
) -> tuple[Shape, ...]:
    """`center_x` を中心に 1 行のテキストを図形列として描く。

    Parameters
    ----------
    text : str
        描く文字列（改行は扱わない）。
    center_x : float
        行全体の中心 x。
    top_y : float
        行の上端 y。
    height : float
        文字高さ。
    color : str
        塗り色。
    spacing : float, optional
        文字間に足す追加幅。

    Returns
    -------
    tuple[Shape, ...]
        左から順の図形列。
    """

    x = center_x - text_width(text, height, spacing) / 2.0
    shapes: list[Shape] = []
    for ch in text:
        shapes.extend(draw_glyph(ch, x, top_y, height, color))
        x += char_advance(ch, height) + spacing
    return tuple(shapes)


def _percentage_advance(ch: str, height: float) -> float:
    if ch == ".":
        return PERCENT_POINT_ADVANCE * height
    return PERCENT_DIGIT_ADVANCE * height


def percentage_width(value: str, height: float) -> float:
    """パーセンテージ表示（`%` まで含む）の総幅を返す。"""

    digits = sum(_percentage_advance(ch, height) for ch in value)
    return digits + (PERCENT_SIGN_GAP + PERCENT_SIGN_WIDTH) * height


def render_percentage(
    value: str,
    center_x: float,
    center_y: float,
    height: float,
    color: str,
) -> tuple[Shape, ...]:
    """進捗率の文字列を数字・小数点・`%` の図形列として描く。

    Notes
    -----
    小数点と `%` は数字より狭い独自の送り幅を持ち、`%` の前には固定の間隔を入れる。
    数字と小数点以外の文字はプレースホルダで描く。
    横方向はインクの外接矩形で中央寄せする（先頭の "1" のように左側が空く数字でもずれない）。
    """

    text = str(value)
    x = 0.0
    top = center_y - height / 2.0
    digit_w = PERCENT_DIGIT_WIDTH * height

    shapes: list[Shape] = []
    for ch in text:
        if ch == ".":
            size = PERCENT_POINT_SIZE * height
            shapes.extend(
                draw_decimal_point(x, top + height - size - PERCENT_POINT_LIFT * height, size, color)
            )
        elif "0" <= ch <= "9":
            shapes.extend(draw_digit(ch, x, top, digit_w, height, color))
        else:
            shapes.extend(draw_placeholder(x, top, height, color))
        x += _percentage_advance(ch, height)

    x += PERCENT_SIGN_GAP * height
    shapes.extend(draw_percent_sign(x, top, PERCENT_SIGN_WIDTH * height, height, color))

    x0, _y0, x1, _y1 = bounding_box(shapes)
    dx = center_x - (x0 + x1) / 2.0
    return tuple(s.translated(dx, 0.0) for s in shapes)


def wrap_text(text: str, max_width: float, height: float, spacing: float = 0.0) -> list[str]:
    """単語単位で `max_width` に収まるよう折り返した行のリストを返す。

    1 単語だけで `max_width` を超える場合はその単語を 1 行にする。
    """

    lines: list[str] = []
    current = ""
    for word in text.split():
        candidate = word if not current else f"{current} {word}"
        if current and text_width(candidate, height, spacing) > max_width:
            lines.append(current)
            current = word
        else:
            current = candidate
    if current:
        lines.append(current)
    return lines


__all__ = [
    "percentage_width",
    "render_percentage",
    "render_text",
    "text_width",
    "wrap_text",
]
