"""
どこで: `src/yeargrid/core/scene.py`。
何を: 日付と設定から、背景・日セル・月末ラベル・パーセンテージ・一言の図形列をまとめた Scene を構築する。
なぜ: 合成結果を出力形式（SVG/PNG）から切り離し、決定的な 1 つのシーン表現として扱うため。
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass

from yeargrid.core.calendar import (
    completed_days,
    day_of_year,
    month_end_labels,
    total_days_in_year,
    year_progress,
)
from yeargrid.core.config import RenderConfig, merge_config
from yeargrid.core.glyphs import GLYPH_WIDTH, draw_glyph
from yeargrid.core.layout import GridLayout, LayoutError, cell_centers, compute_layout
from yeargrid.core.quotes import quote_for_day
from yeargrid.core.shapes import Circle, Rect, Shape
from yeargrid.core.text import render_percentage, render_text, wrap_text

# 月末ラベルの文字高さ（セル半径比）。
MONTH_LABEL_SCALE = 1.1
# 塗りセル上のラベル色を背景色へ寄せる割合。
MONTH_LABEL_MIX = 0.3
QUOTE_LINE_HEIGHT = 1.6
# 四角セルの角丸（セル半径比）。
SQUARE_CORNER = 0.25


@dataclass(frozen=True, slots=True)
class DayCell:
    """1 日分のセル。"""

    day_number: int
    completed: bool
    cx: float
    cy: float
    label: str | None = None


@dataclass(frozen=True, slots=True)
class Scene:
    """1 回の描画結果。出力側はこの順に図形を並べる。"""

    width: int
    height: int
    background: Rect
    cells: tuple[DayCell, ...]
    cell_shapes: tuple[Shape, ...]
    overlay_shapes: tuple[Shape, ...]
    percentage_shapes: tuple[Shape, ...]
    quote_shapes: tuple[Shape, ...]
    layout: GridLayout
    progress: str
    config: RenderConfig

    @property
    def completed_count(self) -> int:
        return sum(1 for c in self.cells if c.completed)


def _parse_hex(color: str) -> tuple[int, int, int]:
    s = color.lstrip("#")
    if len(s) == 3:
        s = "".join(ch * 2 for ch in s)
    return int(s[0:2], 16), int(s[2:4], 16), int(s[4:6], 16)


def blend_colors(color: str, toward: str, amount: float) -> str:
    """`color` を `toward` へ `amount`（0..1）だけ寄せた `#RRGGBB` を返す。"""

    a = max(0.0, min(1.0, float(amount)))
    src = _parse_hex(color)
    dst = _parse_hex(toward)
    mixed = [int(round(s + (d - s) * a)) for s, d in zip(src, dst)]
    return "#{:02X}{:02X}{:02X}".format(*mixed)


def month_label_color(completed: bool, config: RenderConfig) -> str:
    """セル自身の色に対して低コントラストになるラベル色を返す。"""

    if completed:
        return blend_colors(config.filled_cell_color, config.background_color, MONTH_LABEL_MIX)
    return config.empty_cell_color


def _cell_shape(cell: DayCell, layout: GridLayout, config: RenderConfig) -> Shape:
    r = layout.radius
    if config.cell_shape == "square":
        if cell.completed:
            return Rect(
                x=cell.cx - r,
                y=cell.cy - r,
                width=layout.cell_size,
                height=layout.cell_size,
                fill=config.filled_cell_color,
                rx=r * SQUARE_CORNER,
            )
        return Rect(
            x=cell.cx - r,
            y=cell.cy - r,
            width=layout.cell_size,
            height=layout.cell_size,
            fill="none",
            rx=r * SQUARE_CORNER,
            stroke=config.empty_cell_color,
            stroke_width=float(config.stroke_width),
        )
    if cell.completed:
        return Circle(cx=cell.cx, cy=cell.cy, r=r, fill=config.filled_cell_color)
    return Circle(
        cx=cell.cx,
        cy=cell.cy,
        r=r,
        fill="none",
        stroke=config.empty_cell_color,
        stroke_width=float(config.stroke_width),
    )


def _month_label_shapes(
    cell: DayCell, label: str, layout: GridLayout, config: RenderConfig
) -> tuple[Shape, ...]:
    h = layout.radius * MONTH_LABEL_SCALE
    x = cell.cx - GLYPH_WIDTH * h / 2.0
    y = cell.cy - h / 2.0
    return draw_glyph(label, x, y, h, month_label_color(cell.completed, config))


def _quote_shapes(day: int, layout: GridLayout, config: RenderConfig) -> tuple[Shape, ...]:
    h = float(config.quote_height)
    lines = wrap_text(quote_for_day(day), layout.available_width, h)
    pitch = h * QUOTE_LINE_HEIGHT
    # 最終行の下端がグリッド上端から quote_margin 上に来るよう積み上げる。
    bottom = layout.origin_y - float(config.quote_margin)
    first_top = bottom - h - pitch * (len(lines) - 1)
    if first_top < 0.0:
        raise LayoutError(
            f"一言がキャンバス上端からはみ出します: top={first_top:.1f}, lines={len(lines)}"
            "（topPadding を増やすか quoteMargin / quoteHeight を小さくしてください）"
        )
    center_x = float(config.width) / 2.0
    shapes: list[Shape] = []
    for i, line in enumerate(lines):
        shapes.extend(render_text(line, center_x, first_top + pitch * i, h, config.text_color))
    return tuple(shapes)


def build_scene(date: dt.date, config: RenderConfig | None = None) -> Scene:
    """日付と設定から Scene を構築する。

    Parameters
    ----------
    date : datetime.date
        対象日（datetime の場合は日付部分のみ使う）。
    config : RenderConfig or None
        描画設定。None は既定設定。

    Returns
    -------
    Scene
        同じ (date, config) なら常に等しい Scene。

    Raises
    ------
    LayoutError
        設定からレイアウトが成立しない場合（一言がキャンバス上端に収まらない場合を含む）。
    """

    cfg = merge_config(config)
    if isinstance(date, dt.datetime):
        date = date.date()

    total = total_days_in_year(date.year)
    done = completed_days(date)
    progress = year_progress(date, basis=cfg.basis, decimal_places=cfg.decimal_places)
    labels = month_end_labels(date.year) if cfg.show_month_labels else {}

    layout = compute_layout(total, cfg)
    centers = cell_centers(layout, total)

    cells = tuple(
        DayCell(
            day_number=n,
            completed=n <= done,
            cx=float(centers[n - 1, 0]),
            cy=float(centers[n - 1, 1]),
            label=labels.get(n),
        )
        for n in range(1, total + 1)
    )

    background = Rect(x=0.0, y=0.0, width=float(cfg.width), height=float(cfg.height), fill=cfg.background_color)
    cell_shapes = tuple(_cell_shape(c, layout, cfg) for c in cells)

    overlay: list[Shape] = []
    for c in cells:
        if c.label is not None:
            overlay.extend(_month_label_shapes(c, c.label, layout, cfg))

    # パーセンテージ帯はグリッド実体の下端から percentage_space 分。
    text_y = layout.grid_bottom + float(cfg.percentage_space) / 2.0
    percentage = render_percentage(
        progress,
        float(cfg.width) / 2.0,
        text_y,
        float(cfg.percentage_height),
        cfg.text_color,
    )

    quote = _quote_shapes(day_of_year(date), layout, cfg) if cfg.show_quote else ()

    return Scene(
        width=int(cfg.width),
        height=int(cfg.height),
        background=background,
        cells=cells,
        cell_shapes=cell_shapes,
        overlay_shapes=tuple(overlay),
        percentage_shapes=percentage,
        quote_shapes=quote,
        layout=layout,
        progress=progress,
        config=cfg,
    )


__all__ = [
    "DayCell",
    "MONTH_LABEL_MIX",
    "MONTH_LABEL_SCALE",
    "Scene",
    "blend_colors",
    "build_scene",
    "month_label_color",
]
