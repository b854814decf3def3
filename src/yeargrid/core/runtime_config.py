# どこで: `src/yeargrid/core/runtime_config.py`。
# 何を: config.yaml による実行時設定（探索・ロード・キャッシュ）を提供する。
# なぜ: CLI / HTTP 経由でも、タイムゾーンや描画の上書き値をユーザーが指定できるようにするため。

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any

import pytz
import yaml

from yeargrid.core.calendar import DEFAULT_TIMEZONE
from yeargrid.core.config import merge_config


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """yeargrid の実行時設定。"""

    config_path: Path | None
    timezone: str
    render_overrides: Mapping[str, Any]
    png_scale: float


_DEFAULT_PNG_SCALE = 1.0

_EXPLICIT_CONFIG_PATH: Path | None = None
_CONFIG_CACHE: RuntimeConfig | None = None


def set_config_path(path: str | Path | None) -> None:
    """以降の設定探索で使う明示 config パスを設定する。

    Notes
    -----
    `path` を None にすると明示指定を解除し、既定の探索に戻る。
    """

    global _EXPLICIT_CONFIG_PATH, _CONFIG_CACHE
    if path is None:
        _EXPLICIT_CONFIG_PATH = None
        _CONFIG_CACHE = None
        return
    _EXPLICIT_CONFIG_PATH = Path(str(path)).expanduser()
    _CONFIG_CACHE = None


def _default_config_candidates() -> tuple[Path, ...]:
    cwd = Path.cwd()
    home = Path.home()
    return (
        cwd / ".yeargrid" / "config.yaml",
        home / ".config" / "yeargrid" / "config.yaml",
    )


def _as_mapping(value: Any, *, key: str) -> dict[str, Any]:
    if value is None:
        return {}
    if isinstance(value, dict):
        return dict(value)
    raise RuntimeError(f"{key} は mapping である必要があります: got={value!r}")


def _load_yaml_config(path: Path) -> dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"config.yaml の読み込みに失敗しました: source={path}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise RuntimeError(f"config.yaml は mapping である必要があります: source={path}")
    return dict(data)


def _merge_payload(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """`render` / `export` は 1 段深くマージし、それ以外は後勝ちで上書きする。"""

    out = dict(base)
    for key, value in update.items():
        if key in {"render", "export"} and isinstance(value, dict):
            merged = _as_mapping(out.get(key), key=key)
            merged.update(value)
            out[key] = merged
        else:
            out[key] = value
    return out


def runtime_config() -> RuntimeConfig:
    """実行時設定をロードして返す（キャッシュ）。

    上書き順（後勝ち）:
    1) 既定値（timezone=Asia/Kolkata, png.scale=1.0）
    2) `./.yeargrid/config.yaml` / `~/.config/yeargrid/config.yaml`
    3) `set_config_path(...)` で指定したパス
    """

    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None:
        return _CONFIG_CACHE

    explicit_path = _EXPLICIT_CONFIG_PATH
    if explicit_path is not None and not explicit_path.is_file():
        raise FileNotFoundError(f"config.yaml が見つかりません: {explicit_path}")

    discovered_path: Path | None = None
    for p in _default_config_candidates():
        if p.is_file():
            discovered_path = p
            break

    payload: dict[str, Any] = {"version": 1}
    if discovered_path is not None:
        payload = _merge_payload(payload, _load_yaml_config(discovered_path))
    if explicit_path is not None:
        payload = _merge_payload(payload, _load_yaml_config(explicit_path))

    version = payload.get("version")
    try:
        version_i = int(version)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise RuntimeError(f"config.yaml の version は整数である必要があります: got={version!r}") from exc
    if version_i != 1:
        raise RuntimeError(f"未対応の config.yaml version です: got={version_i}")

    timezone = str(payload.get("timezone") or DEFAULT_TIMEZONE)
    try:
        pytz.timezone(timezone)
    except pytz.UnknownTimeZoneError as exc:
        raise RuntimeError(f"未知のタイムゾーンです: {timezone!r}") from exc

    render = _as_mapping(payload.get("render"), key="render")
    # キーと値はここで検証しておき、描画時の失敗を避ける。
    merge_config(render)

    export = _as_mapping(payload.get("export"), key="export")
    png = _as_mapping(export.get("png"), key="export.png")
    scale_value = png.get("scale", _DEFAULT_PNG_SCALE)
    try:
        png_scale = float(scale_value)
    except (TypeError, ValueError) as exc:
        raise RuntimeError(f"export.png.scale は数値である必要があります: got={scale_value!r}") from exc
    if png_scale <= 0:
        raise RuntimeError(f"export.png.scale は正の値である必要があります: got={png_scale}")

    cfg = RuntimeConfig(
        config_path=explicit_path or discovered_path,
        timezone=timezone,
        render_overrides=MappingProxyType(render),
        png_scale=png_scale,
    )
    _CONFIG_CACHE = cfg
    return cfg


__all__ = ["RuntimeConfig", "runtime_config", "set_config_path"]
