"""描画設定のマージ（`yeargrid.core.config`）のテスト群。"""

from __future__ import annotations

import dataclasses

import pytest

from yeargrid.core.config import (
    CONFIG_KEYS,
    DEFAULT_CONFIG,
    RenderConfig,
    config_to_mapping,
    merge_config,
)


def test_defaults() -> None:
    cfg = DEFAULT_CONFIG
    assert (cfg.width, cfg.height) == (1170, 2532)
    assert cfg.cols == 14
    assert (cfg.top_padding, cfg.side_padding) == (500, 100)
    assert (cfg.percentage_space, cfg.bottom_padding) == (120, 350)
    assert cfg.cell_size_multiplier == pytest.approx(0.64)
    assert cfg.background_color == "#000000"
    assert cfg.filled_cell_color == "#FFFFFF"
    assert cfg.empty_cell_color == "#404040"
    assert cfg.text_color == "#FFFFFF"
    assert cfg.percentage_height == 55
    assert cfg.basis == "completedDays"
    assert cfg.decimal_places == 1


def test_merge_none_returns_defaults() -> None:
    assert merge_config(None) == DEFAULT_CONFIG
    assert merge_config({}) == DEFAULT_CONFIG


def test_partial_override_keeps_every_other_field() -> None:
    merged = merge_config({"cols": 7, "backgroundColor": "#112233"})

    assert merged.cols == 7
    assert merged.background_color == "#112233"
    for field in dataclasses.fields(RenderConfig):
        if field.name not in {"cols", "background_color"}:
            assert getattr(merged, field.name) == getattr(DEFAULT_CONFIG, field.name)


def test_none_values_fall_back_to_base() -> None:
    merged = merge_config({"cols": None, "textColor": None})
    assert merged == DEFAULT_CONFIG


def test_merge_does_not_mutate_inputs() -> None:
    overrides = {"cols": "10"}
    merged = merge_config(overrides)
    assert overrides == {"cols": "10"}
    assert merged.cols == 10
    assert DEFAULT_CONFIG.cols == 14


def test_field_names_are_accepted_alongside_camel_case() -> None:
    assert merge_config({"cell_size_multiplier": 0.5}).cell_size_multiplier == 0.5
    assert merge_config({"cellSizeMultiplier": "0.5"}).cell_size_multiplier == 0.5


def test_string_values_from_queries_are_coerced() -> None:
    merged = merge_config(
        {
            "width": "800",
            "strokeWidth": "2.5",
            "showMonthLabels": "false",
            "showQuote": "1",
            "decimalPlaces": "2",
            "cellShape": "square",
            "basis": "dayOfYear",
        }
    )
    assert merged.width == 800
    assert merged.stroke_width == 2.5
    assert merged.show_month_labels is False
    assert merged.show_quote is True
    assert merged.decimal_places == 2
    assert merged.cell_shape == "square"
    assert merged.basis == "dayOfYear"


def test_merge_over_custom_base() -> None:
    base = merge_config({"cols": 7})
    merged = merge_config({"textColor": "#ABC"}, base=base)
    assert merged.cols == 7
    assert merged.text_color == "#ABC"


def test_render_config_instance_passes_through() -> None:
    custom = dataclasses.replace(DEFAULT_CONFIG, cols=3)
    assert merge_config(custom) is custom


@pytest.mark.parametrize(
    "overrides",
    [
        {"unknownKey": 1},
        {"cols": 0},
        {"cols": 2.5},
        {"cols": True},
        {"width": "wide"},
        {"backgroundColor": "black"},
        {"decimalPlaces": 3},
        {"basis": "weeks"},
        {"cellShape": "hexagon"},
        {"cellSizeMultiplier": 0},
        {"cellSizeMultiplier": 1.5},
        {"showQuote": "maybe"},
        {"sidePadding": -1},
        {"percentageHeight": 0},
        {"strokeWidth": float("nan")},
    ],
)
def test_invalid_overrides_raise_value_error(overrides: dict) -> None:
    with pytest.raises(ValueError):
        merge_config(overrides)


def test_config_to_mapping_round_trips_through_merge() -> None:
    mapping = config_to_mapping(DEFAULT_CONFIG)
    assert set(mapping) == set(CONFIG_KEYS)
    assert merge_config(mapping) == DEFAULT_CONFIG
