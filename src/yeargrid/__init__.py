# どこで: `src/yeargrid/__init__.py`。
# 何を: ルート `yeargrid` パッケージを定義し、主要な関数と型を再エクスポートする。
# なぜ: import 起点を `yeargrid` に統一するため。

from __future__ import annotations

from yeargrid.api import export_wallpaper, render, render_scene
from yeargrid.core.config import DEFAULT_CONFIG, RenderConfig, merge_config
from yeargrid.core.glyphs import char_advance, draw_glyph
from yeargrid.core.layout import GridLayout, LayoutError, compute_layout
from yeargrid.core.scene import Scene, build_scene
from yeargrid.core.text import render_percentage, render_text

__all__ = [
    "DEFAULT_CONFIG",
    "GridLayout",
    "LayoutError",
    "RenderConfig",
    "Scene",
    "build_scene",
    "char_advance",
    "compute_layout",
    "draw_glyph",
    "export_wallpaper",
    "merge_config",
    "render",
    "render_percentage",
    "render_scene",
    "render_text",
]
