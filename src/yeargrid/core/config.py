"""
どこで: `src/yeargrid/core/config.py`。
何を: 描画設定 `RenderConfig` と既定値、部分上書きのマージ関数を提供する。
なぜ: 認識するオプションを列挙可能な 1 か所に集め、欠損キーが必ず既定値に落ちるようにするため。
"""

from __future__ import annotations

import dataclasses
import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Literal

ProgressBasis = Literal["dayOfYear", "completedDays"]
CellShape = Literal["circle", "square"]

_PROGRESS_BASES: tuple[str, ...] = ("dayOfYear", "completedDays")
_CELL_SHAPES: tuple[str, ...] = ("circle", "square")
_HEX_COLOR = re.compile(r"^#(?:[0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})$")


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """1 回の描画で使う不変の設定値。

    Parameters
    ----------
    width, height : int
        キャンバス寸法 [px]。
    cols : int
        グリッドの列数（既定は 2 週間分）。
    top_padding, side_padding, percentage_space, bottom_padding : float
        上・左右・グリッド下のパーセンテージ帯・下の余白 [px]。
    cell_size_multiplier : float
        セル直径 / セルピッチ。0 < m <= 1。
    background_color, filled_cell_color, empty_cell_color, text_color : str
        `#RGB` / `#RRGGBB` 形式の色。
    stroke_width : float
        未完了セルの輪郭線幅 [px]。
    percentage_height : float
        パーセンテージ表示の文字高さ [px]。
    basis : {"dayOfYear", "completedDays"}
        進捗率の基準日数。
    decimal_places : {1, 2}
        進捗率の小数桁数。
    cell_shape : {"circle", "square"}
        セルの形状。
    show_month_labels : bool
        月末セルに月頭文字を重ねるか。
    show_quote : bool
        日替わりの一言を描くか。
    quote_height, quote_margin : float
        一言の文字高さと、グリッド上端からの距離 [px]。
    """

    width: int = 1170
    height: int = 2532
    cols: int = 14
    top_padding: float = 500
    side_padding: float = 100
    percentage_space: float = 120
    bottom_padding: float = 350
    cell_size_multiplier: float = 0.64
    background_color: str = "#000000"
    filled_cell_color: str = "#FFFFFF"
    empty_cell_color: str = "#404040"
    text_color: str = "#FFFFFF"
    stroke_width: float = 1.5
    percentage_height: float = 55
    basis: ProgressBasis = "completedDays"
    decimal_places: int = 1
    cell_shape: CellShape = "circle"
    show_month_labels: bool = True
    show_quote: bool = False
    quote_height: float = 28
    quote_margin: float = 60


DEFAULT_CONFIG = RenderConfig()
"""全フィールドの既定値を持つ唯一の既定設定。"""

# 外部（HTTP クエリ / YAML / JS 由来の呼び出し側）で使う camelCase キーとフィールド名の対応。
CONFIG_KEYS: Mapping[str, str] = MappingProxyType(
    {
        "width": "width",
        "height": "height",
        "cols": "cols",
        "topPadding": "top_padding",
        "sidePadding": "side_padding",
        "percentageSpace": "percentage_space",
        "bottomPadding": "bottom_padding",
        "cellSizeMultiplier": "cell_size_multiplier",
        "backgroundColor": "background_color",
        "filledCellColor": "filled_cell_color",
        "emptyCellColor": "empty_cell_color",
        "textColor": "text_color",
        "strokeWidth": "stroke_width",
        "percentageHeight": "percentage_height",
        "basis": "basis",
        "decimalPlaces": "decimal_places",
        "cellShape": "cell_shape",
        "showMonthLabels": "show_month_labels",
        "showQuote": "show_quote",
        "quoteHeight": "quote_height",
        "quoteMargin": "quote_margin",
    }
)

_FIELD_NAMES = frozenset(f.name for f in dataclasses.fields(RenderConfig))


def _field_name(key: str) -> str:
    if key in _FIELD_NAMES:
        return key
    name = CONFIG_KEYS.get(key)
    if name is None:
        raise ValueError(f"未対応の設定キーです: {key!r}")
    return name


def _as_int(value: Any, *, key: str, minimum: int) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{key} は整数である必要があります: got={value!r}")
    try:
        f = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{key} は整数である必要があります: got={value!r}") from exc
    if not math.isfinite(f) or f != int(f):
        raise ValueError(f"{key} は整数である必要があります: got={value!r}")
    i = int(f)
    if i < minimum:
        raise ValueError(f"{key} は {minimum} 以上である必要があります: got={i}")
    return i


def _as_float(value: Any, *, key: str) -> float:
    if isinstance(value, bool):
        raise ValueError(f"{key} は数値である必要があります: got={value!r}")
    try:
        f = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{key} は数値である必要があります: got={value!r}") from exc
    if not math.isfinite(f):
        raise ValueError(f"{key} は有限値である必要があります: got={value!r}")
    return f


def _as_bool(value: Any, *, key: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        s = value.strip().lower()
        if s in {"1", "true", "yes", "on"}:
            return True
        if s in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{key} は真偽値である必要があります: got={value!r}")


def _as_color(value: Any, *, key: str) -> str:
    s = str(value).strip()
    if not _HEX_COLOR.match(s):
        raise ValueError(f"{key} は #RGB または #RRGGBB 形式である必要があります: got={value!r}")
    return s


def _as_choice(value: Any, *, key: str, choices: tuple[str, ...]) -> str:
    s = str(value).strip()
    if s not in choices:
        raise ValueError(f"{key} は {choices} のいずれかである必要があります: got={value!r}")
    return s


def _coerce(name: str, value: Any) -> Any:
    """フィールド名に応じて値を正規化して返す。"""

    if name in {"width", "height"}:
        return _as_int(value, key=name, minimum=1)
    if name == "cols":
        return _as_int(value, key=name, minimum=1)
    if name == "decimal_places":
        places = _as_int(value, key=name, minimum=1)
        if places not in (1, 2):
            raise ValueError(f"decimal_places は 1 または 2 である必要があります: got={places}")
        return places
    if name.endswith("_color"):
        return _as_color(value, key=name)
    if name == "basis":
        return _as_choice(value, key=name, choices=_PROGRESS_BASES)
    if name == "cell_shape":
        return _as_choice(value, key=name, choices=_CELL_SHAPES)
    if name.startswith("show_"):
        return _as_bool(value, key=name)

    f = _as_float(value, key=name)
    if name == "cell_size_multiplier":
        if not 0.0 < f <= 1.0:
            raise ValueError(f"cell_size_multiplier は 0 < m <= 1 である必要があります: got={f}")
    elif name in {"percentage_height", "quote_height"}:
        if f <= 0.0:
            raise ValueError(f"{name} は正の値である必要があります: got={f}")
    elif f < 0.0:
        raise ValueError(f"{name} は 0 以上である必要があります: got={f}")
    return f


def merge_config(
    overrides: Mapping[str, Any] | RenderConfig | None = None,
    *,
    base: RenderConfig = DEFAULT_CONFIG,
) -> RenderConfig:
    """既定設定へ部分上書きをフィールド単位で重ねた `RenderConfig` を返す。

    Parameters
    ----------
    overrides : Mapping[str, Any] or RenderConfig or None
        camelCase キー（`CONFIG_KEYS`）またはフィールド名をキーとする部分上書き。
        値が None のキーは「未指定」として扱い、既定値を残す。
    base : RenderConfig
        上書き対象。既定は `DEFAULT_CONFIG`。

    Returns
    -------
    RenderConfig
        新しい設定インスタンス（入力は変更しない）。

    Raises
    ------
    ValueError
        未対応のキー、または値の型・範囲が不正な場合。
    """

    if overrides is None:
        return base
    if isinstance(overrides, RenderConfig):
        return overrides

    changes: dict[str, Any] = {}
    for key, value in overrides.items():
        name = _field_name(str(key))
        if value is None:
            continue
        changes[name] = _coerce(name, value)

    if not changes:
        return base
    return dataclasses.replace(base, **changes)


def config_to_mapping(config: RenderConfig) -> dict[str, Any]:
    """`RenderConfig` を camelCase キーの dict として返す。"""

    return {key: getattr(config, name) for key, name in CONFIG_KEYS.items()}


__all__ = [
    "CONFIG_KEYS",
    "CellShape",
    "DEFAULT_CONFIG",
    "ProgressBasis",
    "RenderConfig",
    "config_to_mapping",
    "merge_config",
]
