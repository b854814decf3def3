"""
どこで: `src/yeargrid/web/app.py`。
何を: 今日の壁紙を PNG（ラスタライズ不可なら SVG）で返す FastAPI アプリを提供する。
なぜ: スマートフォンのショートカット等から URL 1 つで壁紙を取得できるようにするため。

起動: `uvicorn yeargrid.web.app:app` または `yeargrid serve`。
"""

from __future__ import annotations

import datetime as dt
import logging

from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse, RedirectResponse, Response

from yeargrid.api.render import render_scene
from yeargrid.core.calendar import today
from yeargrid.core.config import CONFIG_KEYS, merge_config
from yeargrid.core.layout import LayoutError
from yeargrid.core.runtime_config import runtime_config
from yeargrid.export.image import png_output_size, svg_to_png_bytes
from yeargrid.export.svg import svg_document

_logger = logging.getLogger(__name__)

CACHE_CONTROL = "public, max-age=3600"

app = FastAPI(title="yeargrid")


def _bad_request(message: str) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": message})


@app.get("/", include_in_schema=False)
def index() -> RedirectResponse:
    return RedirectResponse(url="/api/wallpaper", status_code=302)


@app.get("/api/wallpaper")
def wallpaper(
    request: Request,
    date: str | None = None,
    fmt: str = Query("png", alias="format"),
) -> Response:
    """壁紙を返す。

    Notes
    -----
    クエリの `CONFIG_KEYS`（例: `cols`, `backgroundColor`）は config.yaml の `render` に重ねる。
    PNG 変換に失敗した場合は同じ内容を `image/svg+xml` で返す。
    """

    fmt = fmt.lower().strip()
    if fmt not in {"png", "svg"}:
        return _bad_request(f"unsupported format: {fmt!r}")

    try:
        runtime = runtime_config()
    except Exception:
        # config.yaml の不備はリクエスト起因ではないので 500。
        _logger.exception("Error loading runtime config")
        return JSONResponse(status_code=500, content={"error": "Failed to generate wallpaper"})

    try:
        target = dt.date.fromisoformat(date) if date else today(runtime.timezone)
        query_overrides = {k: v for k, v in request.query_params.items() if k in CONFIG_KEYS}
        config = merge_config(query_overrides, base=merge_config(runtime.render_overrides))
    except ValueError as exc:
        return _bad_request(str(exc))

    try:
        scene = render_scene(target, config)
        svg = svg_document(scene)
    except LayoutError as exc:
        return _bad_request(str(exc))
    except Exception:
        _logger.exception("Error generating wallpaper: date=%s", target)
        return JSONResponse(status_code=500, content={"error": "Failed to generate wallpaper"})

    headers = {"Cache-Control": CACHE_CONTROL}
    if fmt == "png":
        try:
            png = svg_to_png_bytes(
                svg,
                output_size=png_output_size((scene.width, scene.height)),
                background_color=config.background_color,
            )
        except RuntimeError:
            _logger.warning("PNG rasterization unavailable; serving SVG", exc_info=True)
        else:
            return Response(content=png, media_type="image/png", headers=headers)

    return Response(content=svg, media_type="image/svg+xml", headers=headers)


__all__ = ["app"]
