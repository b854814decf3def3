# どこで: `src/yeargrid/api/__init__.py`。
# 何を: 公開 API（render / export_wallpaper）を再エクスポートする。
# なぜ: ユーザーコードからシンプルに描画関数を import できるようにするため。

from __future__ import annotations

from .render import export_wallpaper, render, render_scene

__all__ = ["export_wallpaper", "render", "render_scene"]
