"""公開 API（`yeargrid.render` / `yeargrid.export_wallpaper`）のテスト。"""

from __future__ import annotations

import datetime as dt
import xml.etree.ElementTree as ET

import pytest

import yeargrid
from yeargrid import LayoutError, export_wallpaper, render

_NS = {"svg": "http://www.w3.org/2000/svg"}


def _circles(svg: str) -> list[ET.Element]:
    root = ET.fromstring(svg.encode("utf-8"))
    cells = root.find("svg:g[@id='cells']", _NS)
    assert cells is not None
    return cells.findall("svg:circle", _NS)


@pytest.mark.parametrize(
    ("date", "filled", "empty"),
    [
        (dt.date(2024, 1, 1), 0, 366),
        (dt.date(2024, 1, 18), 17, 349),
        (dt.date(2024, 12, 31), 365, 1),
    ],
)
def test_render_fills_completed_days(date: dt.date, filled: int, empty: int) -> None:
    circles = _circles(render(date))
    assert sum(1 for c in circles if c.attrib["fill"] != "none") == filled
    assert sum(1 for c in circles if c.attrib["fill"] == "none") == empty


def test_render_is_byte_identical_for_same_input() -> None:
    date = dt.date(2024, 1, 18)
    overrides = {"cols": 7, "emptyCellColor": "#333333"}
    assert render(date, overrides) == render(date, dict(overrides))


def test_render_applies_overrides() -> None:
    svg = render(dt.date(2024, 1, 18), {"backgroundColor": "#102030", "width": 800, "height": 1600})
    root = ET.fromstring(svg.encode("utf-8"))
    assert root.attrib["viewBox"] == "0 0 800 1600"
    assert root.find("svg:rect", _NS).attrib["fill"] == "#102030"


def test_render_rejects_bad_overrides() -> None:
    with pytest.raises(ValueError):
        render(dt.date(2024, 1, 18), {"nope": 1})
    with pytest.raises(LayoutError):
        render(dt.date(2024, 1, 18), {"sidePadding": 1000})


def test_export_wallpaper_writes_svg(tmp_path) -> None:
    path = export_wallpaper(dt.date(2024, 1, 18), tmp_path / "wall.svg", {"cols": 7})
    assert path.read_text(encoding="utf-8") == render(dt.date(2024, 1, 18), {"cols": 7})


def test_root_package_exports() -> None:
    for name in ("render", "build_scene", "compute_layout", "draw_glyph", "RenderConfig", "DEFAULT_CONFIG"):
        assert name in yeargrid.__all__
        assert hasattr(yeargrid, name)
