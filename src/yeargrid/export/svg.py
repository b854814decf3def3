"""
どこで: `src/yeargrid/export/svg.py`。
何を: Scene を自己完結した SVG 文書へ直列化し、ファイルとして保存する関数を提供する。
なぜ: 同じ Scene から常にバイト単位で同一の文書を得られるよう、数値書式と要素順を 1 か所で固定するため。
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from xml.sax.saxutils import quoteattr

from yeargrid.core.scene import Scene
from yeargrid.core.shapes import Circle, Line, Polygon, Rect, Shape

_SVG_NS = "http://www.w3.org/2000/svg"
_FLOAT_DECIMALS = 3


def _fmt(value: float, *, decimals: int = _FLOAT_DECIMALS) -> str:
    """SVG 出力向けに float を決定的な文字列へ変換して返す。"""
    text = f"{float(value):.{int(decimals)}f}"
    if text.startswith("-0") and float(text) == 0.0:
        return text[1:]
    return text


def _stroke_attrs(stroke: str | None, stroke_width: float) -> str:
    if stroke is None:
        return ""
    return f" stroke={quoteattr(stroke)} stroke-width=\"{_fmt(stroke_width)}\""


def shape_to_element(shape: Shape) -> str:
    """1 図形を SVG 要素文字列に変換して返す。

    Raises
    ------
    TypeError
        未対応の図形型の場合。
    """

    if isinstance(shape, Rect):
        parts = [
            f'<rect x="{_fmt(shape.x)}" y="{_fmt(shape.y)}" '
            f'width="{_fmt(shape.width)}" height="{_fmt(shape.height)}"'
        ]
        if shape.rx > 0.0:
            parts.append(f' rx="{_fmt(shape.rx)}"')
        parts.append(f" fill={quoteattr(shape.fill)}")
        if shape.opacity < 1.0:
            parts.append(f' fill-opacity="{_fmt(shape.opacity)}"')
        parts.append(_stroke_attrs(shape.stroke, shape.stroke_width))
        parts.append(" />")
        return "".join(parts)

    if isinstance(shape, Circle):
        return (
            f'<circle cx="{_fmt(shape.cx)}" cy="{_fmt(shape.cy)}" r="{_fmt(shape.r)}" '
            f"fill={quoteattr(shape.fill)}{_stroke_attrs(shape.stroke, shape.stroke_width)} />"
        )

    if isinstance(shape, Line):
        return (
            f'<line x1="{_fmt(shape.x1)}" y1="{_fmt(shape.y1)}" '
            f'x2="{_fmt(shape.x2)}" y2="{_fmt(shape.y2)}" '
            f'stroke={quoteattr(shape.stroke)} stroke-width="{_fmt(shape.stroke_width)}" '
            f'stroke-linecap="round" />'
        )

    if isinstance(shape, Polygon):
        points = " ".join(f"{_fmt(x)},{_fmt(y)}" for x, y in shape.points)
        return f'<polygon points="{points}" fill={quoteattr(shape.fill)} />'

    raise TypeError(f"SVG に変換できない図形: {type(shape)!r}")


def _group(group_id: str, shapes: Iterable[Shape]) -> list[str]:
    lines = [f'  <g id="{group_id}">']
    lines.extend(f"    {shape_to_element(s)}" for s in shapes)
    lines.append("  </g>")
    return lines


def svg_document(scene: Scene) -> str:
    """Scene を SVG 文書文字列として返す。

    Notes
    -----
    要素順は 背景 → `cells` → `month-labels`（あれば）→ `percentage` → `quote`（あれば）。
    """

    w = int(scene.width)
    h = int(scene.height)
    if w <= 0 or h <= 0:
        raise ValueError("canvas は正の値である必要がある")

    lines: list[str] = []
    lines.append('<?xml version="1.0" encoding="UTF-8"?>')
    lines.append(f'<svg xmlns="{_SVG_NS}" viewBox="0 0 {w} {h}" width="{w}" height="{h}">')
    lines.append(f"  {shape_to_element(scene.background)}")
    lines.extend(_group("cells", scene.cell_shapes))
    if scene.overlay_shapes:
        lines.extend(_group("month-labels", scene.overlay_shapes))
    lines.extend(_group("percentage", scene.percentage_shapes))
    if scene.quote_shapes:
        lines.extend(_group("quote", scene.quote_shapes))
    lines.append("</svg>")
    return "\n".join(lines) + "\n"


def export_svg(scene: Scene, path: str | Path) -> Path:
    """Scene を SVG として保存する。

    Parameters
    ----------
    scene : Scene
        描画済みのシーン。
    path : str or Path
        出力先パス。親ディレクトリは作成する。

    Returns
    -------
    Path
        保存先パス。
    """
    _path = Path(path)
    _path.parent.mkdir(parents=True, exist_ok=True)
    with _path.open("w", encoding="utf-8", newline="\n") as f:
        f.write(svg_document(scene))
    return _path


__all__ = ["export_svg", "shape_to_element", "svg_document"]
