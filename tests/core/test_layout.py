"""グリッドレイアウト（`yeargrid.core.layout`）のテスト群。"""

from __future__ import annotations

import dataclasses
import math

import numpy as np
import pytest

from yeargrid.core.config import DEFAULT_CONFIG
from yeargrid.core.layout import LayoutError, cell_centers, compute_layout


def test_default_layout_for_common_and_leap_year() -> None:
    for total in (365, 366):
        layout = compute_layout(total, DEFAULT_CONFIG)
        assert layout.rows == 27
        assert layout.cols == 14
        assert layout.spacing > 0
        assert layout.radius > 0
        assert layout.origin_x > 0
        assert layout.origin_y > 0


def test_rows_cover_all_cells_for_any_count_and_cols() -> None:
    """rows == ceil(total/cols) かつ rows*cols >= total。"""
    for cols in (1, 2, 3, 7, 14, 31):
        cfg = dataclasses.replace(DEFAULT_CONFIG, cols=cols)
        for total in (1, 2, 13, 14, 15, 365, 366, 1000):
            layout = compute_layout(total, cfg)
            assert layout.rows == math.ceil(total / cols)
            assert layout.rows * layout.cols >= total
            assert layout.rows * layout.spacing <= layout.available_height + 1e-9
            assert layout.cols * layout.spacing <= layout.available_width + 1e-9


def test_spacing_is_min_of_slots_and_grid_is_centered_in_padded_area() -> None:
    cfg = DEFAULT_CONFIG
    layout = compute_layout(366, cfg)

    avail_w = cfg.width - 2 * cfg.side_padding
    avail_h = cfg.height - cfg.top_padding - cfg.percentage_space - cfg.bottom_padding
    assert layout.available_width == pytest.approx(avail_w)
    assert layout.available_height == pytest.approx(avail_h)
    assert layout.spacing == pytest.approx(min(avail_w / 14, avail_h / 27))

    left = layout.origin_x - cfg.side_padding
    right = (cfg.side_padding + avail_w) - (layout.origin_x + layout.grid_width)
    top = layout.origin_y - cfg.top_padding
    bottom = (cfg.top_padding + avail_h) - (layout.origin_y + layout.grid_height)
    assert left == pytest.approx(right)
    assert top == pytest.approx(bottom)
    assert left >= 0 and top >= -1e-9


def test_wide_canvas_leaves_horizontal_margin_centered() -> None:
    cfg = dataclasses.replace(
        DEFAULT_CONFIG,
        width=4000,
        height=1000,
        top_padding=100,
        bottom_padding=100,
        percentage_space=100,
        side_padding=50,
    )
    layout = compute_layout(365, cfg)

    assert layout.spacing == pytest.approx(700 / 27)
    left = layout.origin_x - cfg.side_padding
    right = cfg.width - cfg.side_padding - (layout.origin_x + layout.grid_width)
    assert left > 0
    assert left == pytest.approx(right)
    assert layout.origin_y == pytest.approx(cfg.top_padding)


def test_cell_size_and_gap_follow_multiplier() -> None:
    cfg = dataclasses.replace(DEFAULT_CONFIG, cell_size_multiplier=0.5)
    layout = compute_layout(365, cfg)
    assert layout.cell_size == pytest.approx(layout.spacing * 0.5)
    assert layout.radius == pytest.approx(layout.cell_size / 2)
    assert layout.gap == pytest.approx(layout.spacing - layout.cell_size)


def test_grid_bottom_is_origin_plus_grid_height() -> None:
    layout = compute_layout(365, DEFAULT_CONFIG)
    assert layout.grid_bottom == pytest.approx(layout.origin_y + layout.rows * layout.spacing)


@pytest.mark.parametrize(
    "changes",
    [
        {"side_padding": 600},
        {"top_padding": 2000, "bottom_padding": 600},
        {"height": 970},
    ],
)
def test_padding_consuming_canvas_raises_layout_error(changes: dict) -> None:
    cfg = dataclasses.replace(DEFAULT_CONFIG, **changes)
    with pytest.raises(LayoutError):
        compute_layout(365, cfg)


def test_invalid_counts_raise_layout_error() -> None:
    with pytest.raises(LayoutError):
        compute_layout(0, DEFAULT_CONFIG)
    with pytest.raises(LayoutError):
        compute_layout(365, dataclasses.replace(DEFAULT_CONFIG, cols=0))


def test_layout_error_is_value_error() -> None:
    assert issubclass(LayoutError, ValueError)


def test_cell_centers_are_row_major() -> None:
    layout = compute_layout(366, DEFAULT_CONFIG)
    centers = cell_centers(layout, 366)

    assert centers.shape == (366, 2)
    s = layout.spacing
    np.testing.assert_allclose(centers[0], (layout.origin_x + s / 2, layout.origin_y + s / 2))
    # 15 日目は 2 行目の先頭。
    np.testing.assert_allclose(centers[14], (layout.origin_x + s / 2, layout.origin_y + 1.5 * s))
    np.testing.assert_allclose(centers[13, 0], layout.origin_x + 13.5 * s)
    assert np.all(centers[:, 1] < layout.grid_bottom)


def test_cell_centers_rejects_count_over_capacity() -> None:
    layout = compute_layout(14, DEFAULT_CONFIG)
    with pytest.raises(ValueError):
        cell_centers(layout, 15)
