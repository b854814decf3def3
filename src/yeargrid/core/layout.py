"""
どこで: `src/yeargrid/core/layout.py`。グリッドレイアウトの算出。
何を: セル総数と設定から行数・一様ピッチ・セル寸法・中央寄せした原点を求める。
なぜ: キャンバスの縦横比に関係なくセルを正方（円）に保ち、余白側を均等に振り分けるため。
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from yeargrid.core.config import RenderConfig


class LayoutError(ValueError):
    """余白がキャンバスを食い潰すなど、レイアウトが成立しない設定を表す。"""


@dataclass(frozen=True, slots=True)
class GridLayout:
    """`compute_layout` の結果（保存しない派生値）。

    Notes
    -----
    `origin_x`, `origin_y` はグリッドブロック左上。セル n（1 始まり）の中心は
    `origin + (col + 0.5, row + 0.5) * spacing`。
    """

    rows: int
    cols: int
    spacing: float
    cell_size: float
    radius: float
    gap: float
    origin_x: float
    origin_y: float
    available_width: float
    available_height: float
    grid_width: float
    grid_height: float

    @property
    def grid_bottom(self) -> float:
        return self.origin_y + self.grid_height


def compute_layout(total_cells: int, config: RenderConfig) -> GridLayout:
    """セル総数と設定からグリッドレイアウトを求める。

    Parameters
    ----------
    total_cells : int
        セル総数（実用上は 365 / 366）。1 以上。
    config : RenderConfig
        キャンバス寸法・余白・列数・セル縮小率。

    Returns
    -------
    GridLayout
        一様ピッチ `min(横スロット, 縦スロット)` で、パディング内側の領域に中央寄せしたレイアウト。

    Raises
    ------
    LayoutError
        セル数・列数が 1 未満、余白を引いた領域が正でない、ピッチが正の有限値にならない場合。
    """

    n = int(total_cells)
    cols = int(config.cols)
    if n < 1:
        raise LayoutError(f"total_cells は 1 以上である必要がある: got={total_cells!r}")
    if cols < 1:
        raise LayoutError(f"cols は 1 以上である必要がある: got={config.cols!r}")

    rows = math.ceil(n / cols)

    available_width = float(config.width) - 2.0 * float(config.side_padding)
    available_height = (
        float(config.height)
        - float(config.top_padding)
        - float(config.percentage_space)
        - float(config.bottom_padding)
    )
    if not available_width > 0.0:
        raise LayoutError(
            f"左右の余白がキャンバス幅を超えている: width={config.width}, side_padding={config.side_padding}"
        )
    if not available_height > 0.0:
        raise LayoutError(
            "上下の余白がキャンバス高さを超えている: "
            f"height={config.height}, top={config.top_padding}, "
            f"percentage={config.percentage_space}, bottom={config.bottom_padding}"
        )

    slot_w = available_width / cols
    slot_h = available_height / rows
    spacing = min(slot_w, slot_h)
    if not (math.isfinite(spacing) and spacing > 0.0):
        raise LayoutError(f"セルピッチが正の有限値にならない: spacing={spacing!r}")

    multiplier = float(config.cell_size_multiplier)
    if not 0.0 < multiplier <= 1.0:
        raise LayoutError(f"cell_size_multiplier は 0 < m <= 1 である必要がある: got={multiplier}")
    cell_size = spacing * multiplier

    grid_width = cols * spacing
    grid_height = rows * spacing
    # パディング内側の領域に対して中央寄せする（キャンバス全体ではない）。
    origin_x = float(config.side_padding) + (available_width - grid_width) / 2.0
    origin_y = float(config.top_padding) + (available_height - grid_height) / 2.0

    return GridLayout(
        rows=rows,
        cols=cols,
        spacing=spacing,
        cell_size=cell_size,
        radius=cell_size / 2.0,
        gap=spacing - cell_size,
        origin_x=origin_x,
        origin_y=origin_y,
        available_width=available_width,
        available_height=available_height,
        grid_width=grid_width,
        grid_height=grid_height,
    )


def cell_centers(layout: GridLayout, count: int) -> np.ndarray:
    """先頭 `count` セルの中心座標を row-major 順で返す。

    Returns
    -------
    np.ndarray
        float64 shape (count, 2)。
    """

    c = int(count)
    if c < 0:
        raise ValueError("count は 0 以上である必要がある")
    if c > layout.rows * layout.cols:
        raise ValueError(
            f"count がグリッド容量を超えている: count={c}, capacity={layout.rows * layout.cols}"
        )

    index = np.arange(c, dtype=np.int64)
    row, col = np.divmod(index, layout.cols)
    centers = np.empty((c, 2), dtype=np.float64)
    centers[:, 0] = layout.origin_x + (col + 0.5) * layout.spacing
    centers[:, 1] = layout.origin_y + (row + 0.5) * layout.spacing
    return centers


__all__ = ["GridLayout", "LayoutError", "cell_centers", "compute_layout"]
