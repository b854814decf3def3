"""
どこで: `src/yeargrid/api/render.py`。
何を: 日付と設定上書きから SVG 文書を返す `render` と、ファイルへ書き出す `export_wallpaper` を提供する。
なぜ: core（Scene 構築）と export（直列化・ラスタライズ）を 1 つの呼び出しで使えるようにするため。
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from yeargrid.core.config import RenderConfig, merge_config
from yeargrid.core.scene import Scene, build_scene
from yeargrid.export.image import export_image
from yeargrid.export.svg import svg_document


def render_scene(
    date: dt.date,
    config_overrides: Mapping[str, Any] | RenderConfig | None = None,
) -> Scene:
    """設定上書きを既定値へマージして Scene を構築する。"""

    return build_scene(date, merge_config(config_overrides))


def render(
    date: dt.date,
    config_overrides: Mapping[str, Any] | RenderConfig | None = None,
) -> str:
    """日付の壁紙を SVG 文書文字列として返す。

    Parameters
    ----------
    date : datetime.date
        対象日。
    config_overrides : Mapping[str, Any] or RenderConfig or None
        `CONFIG_KEYS` の camelCase キー（またはフィールド名）による部分上書き。

    Returns
    -------
    str
        同じ入力なら常にバイト単位で同一の SVG 文書。

    Raises
    ------
    ValueError
        上書き値が不正な場合（`LayoutError` を含む）。
    """

    return svg_document(render_scene(date, config_overrides))


def export_wallpaper(
    date: dt.date,
    path: str | Path,
    config_overrides: Mapping[str, Any] | RenderConfig | None = None,
) -> Path:
    """日付の壁紙を `.svg` / `.png` として保存する。"""

    return export_image(render_scene(date, config_overrides), path)


__all__ = ["export_wallpaper", "render", "render_scene"]
