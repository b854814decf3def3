"""
どこで: `src/yeargrid/cli.py`。
何を: `yeargrid render` / `yeargrid serve` のコマンドラインを提供する。
なぜ: スクリプトや cron から壁紙を書き出し、ローカルで HTTP 配信も試せるようにするため。
"""

from __future__ import annotations

import argparse
import datetime as dt
import logging
import sys
from pathlib import Path
from typing import Any

from yeargrid.api.render import export_wallpaper, render
from yeargrid.core.calendar import today
from yeargrid.core.config import merge_config
from yeargrid.core.runtime_config import runtime_config, set_config_path

_logger = logging.getLogger(__name__)


def _parse_set(values: list[str]) -> dict[str, Any]:
    """`key=value` の列を上書き dict に変換して返す。"""

    out: dict[str, Any] = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            raise ValueError(f"--set は key=value 形式である必要があります: got={item!r}")
        out[key.strip()] = value.strip()
    return out


def _cmd_render(args: argparse.Namespace) -> int:
    runtime = runtime_config()
    date = dt.date.fromisoformat(args.date) if args.date else today(runtime.timezone)
    config = merge_config(_parse_set(args.set), base=merge_config(runtime.render_overrides))

    if args.out is None:
        sys.stdout.write(render(date, config))
        return 0

    path = export_wallpaper(date, Path(args.out), config)
    _logger.info("Wrote %s", path)
    return 0


def _cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run("yeargrid.web.app:app", host=args.host, port=int(args.port))
    return 0


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="yeargrid", description="年の進捗を図形だけで描く壁紙ジェネレータ")
    p.add_argument("--config", default=None, help="config.yaml のパス（省略時は既定の探索）")
    p.add_argument("-v", "--verbose", action="store_true", help="DEBUG ログを出す")
    sub = p.add_subparsers(dest="command", required=True)

    r = sub.add_parser("render", help="壁紙を SVG / PNG として書き出す")
    r.add_argument("--date", default=None, help="対象日（YYYY-MM-DD。省略時は設定タイムゾーンの今日）")
    r.add_argument("--out", default=None, help="出力パス（.svg / .png。省略時は SVG を標準出力へ）")
    r.add_argument(
        "--set",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="描画設定の上書き（例: --set cols=7 --set backgroundColor=#101010）",
    )
    r.set_defaults(func=_cmd_render)

    s = sub.add_parser("serve", help="HTTP サーバを起動する")
    s.add_argument("--host", default="127.0.0.1")
    s.add_argument("--port", type=int, default=3001)
    s.set_defaults(func=_cmd_serve)

    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.config is not None:
        set_config_path(args.config)

    try:
        return int(args.func(args))
    except (ValueError, RuntimeError, FileNotFoundError) as exc:
        _logger.error("%s", exc)
        return 1


__all__ = ["main"]
