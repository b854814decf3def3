"""テキスト組版（`yeargrid.core.text`）のテスト群。"""

from __future__ import annotations

import pytest

from yeargrid.core.glyphs import char_advance
from yeargrid.core.shapes import bounding_box
from yeargrid.core.text import (
    percentage_width,
    render_percentage,
    render_text,
    text_width,
    wrap_text,
)


def test_text_width_is_sum_of_advances() -> None:
    h = 20.0
    text = "Hi, you"
    assert text_width(text, h) == pytest.approx(sum(char_advance(c, h) for c in text))
    assert text_width(text, h, spacing=2.0) == pytest.approx(
        sum(char_advance(c, h) for c in text) + 2.0 * (len(text) - 1)
    )
    assert text_width("", h) == 0.0


def test_render_text_centers_advance_run_on_target() -> None:
    h = 20.0
    center = 300.0
    shapes = render_text("hello", center, 10.0, h, "#FFFFFF")

    x0, y0, x1, y1 = bounding_box(shapes)
    # "h" と "o" は左右端までインクがあるので、送り幅の総和とインク幅が一致する。
    assert x0 == pytest.approx(center - text_width("hello", h) / 2.0)
    assert x1 == pytest.approx(center + text_width("hello", h) / 2.0)
    assert (x0 + x1) / 2.0 == pytest.approx(center)
    assert y0 == pytest.approx(10.0)
    assert y1 == pytest.approx(30.0)


def test_render_text_applies_extra_spacing_between_glyphs() -> None:
    tight = bounding_box(render_text("ll", 0.0, 0.0, 10.0, "#FFFFFF"))
    loose = bounding_box(render_text("ll", 0.0, 0.0, 10.0, "#FFFFFF", spacing=4.0))
    assert (loose[2] - loose[0]) - (tight[2] - tight[0]) == pytest.approx(4.0)


@pytest.mark.parametrize("value", ["4.6", "4.64", "99.7", "99.73", "0.0", "50.00"])
def test_percentage_is_centered_on_target(value: str) -> None:
    center_x, center_y, h = 585.0, 2160.0, 55.0
    shapes = render_percentage(value, center_x, center_y, h, "#FFFFFF")

    x0, y0, x1, y1 = bounding_box(shapes)
    assert (x0 + x1) / 2.0 == pytest.approx(center_x)
    assert (y0 + y1) / 2.0 == pytest.approx(center_y)
    assert x1 - x0 == pytest.approx(percentage_width(value, h))


@pytest.mark.parametrize("value", ["1.6", "17.5", "10.38", "7.4", "37.2", "100.0"])
def test_percentage_without_left_segment_is_centered_by_ink(value: str) -> None:
    """先頭が "1" / "3" / "7" でもインクの外接矩形の中点が目標 x に一致する。"""
    h = 55.0
    shapes = render_percentage(value, 585.0, 0.0, h, "#FFFFFF")
    x0, _y0, x1, _y1 = bounding_box(shapes)
    assert (x0 + x1) / 2.0 == pytest.approx(585.0, abs=1e-9)


def test_percentage_keeps_glyph_spacing_when_recentered() -> None:
    h = 55.0
    a = render_percentage("17.5", 0.0, 0.0, h, "#FFFFFF")
    b = render_percentage("17.5", 300.0, 0.0, h, "#FFFFFF")
    assert len(a) == len(b)
    for sa, sb in zip(a, b):
        assert sa.translated(300.0, 0.0).bbox() == pytest.approx(sb.bbox())


def test_percentage_width_grows_with_decimal_places() -> None:
    assert percentage_width("4.64", 55.0) > percentage_width("4.6", 55.0)


def test_wrap_text_respects_width_and_keeps_words() -> None:
    text = "the only way to do great work is to love what you do"
    h = 20.0
    lines = wrap_text(text, 300.0, h)

    assert len(lines) > 1
    assert " ".join(lines) == text
    for line in lines:
        assert text_width(line, h) <= 300.0


def test_wrap_text_keeps_overlong_word_on_its_own_line() -> None:
    lines = wrap_text("a supercalifragilistic b", 50.0, 20.0)
    assert lines == ["a", "supercalifragilistic", "b"]
