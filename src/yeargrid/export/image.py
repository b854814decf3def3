"""
どこで: `src/yeargrid/export/image.py`。
何を: SVG を外部ラスタライザ（resvg）で PNG に変換する関数を提供する。
なぜ: SVG を正（ソース）として保ち、PNG は必要な解像度で再生成できる導線を用意するため。
"""

from __future__ import annotations

import subprocess
import tempfile
from pathlib import Path

from yeargrid.core.runtime_config import runtime_config
from yeargrid.core.scene import Scene
from yeargrid.export.svg import export_svg


def png_output_size(canvas_size: tuple[int, int]) -> tuple[int, int]:
    """canvas_size を基準に PNG 出力ピクセルサイズを返す。"""

    canvas_w, canvas_h = canvas_size
    if int(canvas_w) <= 0 or int(canvas_h) <= 0:
        raise ValueError("canvas_size は正の (width, height) である必要がある")
    scale = float(runtime_config().png_scale)
    return int(int(canvas_w) * scale), int(int(canvas_h) * scale)


def _resvg_command(
    *,
    input_svg: Path,
    output_png: Path,
    output_size: tuple[int, int],
    background_color: str,
) -> list[str]:
    out_w, out_h = output_size
    if int(out_w) <= 0 or int(out_h) <= 0:
        raise ValueError("output_size は正の (width, height) である必要がある")
    return [
        "resvg",
        "--width",
        str(int(out_w)),
        "--height",
        str(int(out_h)),
        "--background",
        str(background_color),
        str(input_svg),
        str(output_png),
    ]


def rasterize_svg_to_png(
    svg_path: str | Path,
    png_path: str | Path,
    *,
    output_size: tuple[int, int],
    background_color: str = "#000000",
) -> Path:
    """SVG を PNG として保存する。

    Parameters
    ----------
    svg_path : str or Path
        入力 SVG パス。
    png_path : str or Path
        出力 PNG パス。
    output_size : tuple[int, int]
        出力 PNG の (width, height) ピクセルサイズ。
    background_color : str
        背景色（`#RRGGBB`）。

    Returns
    -------
    Path
        出力 PNG パス。

    Raises
    ------
    RuntimeError
        resvg が見つからない、またはラスタライズに失敗した場合。
    """

    _svg_path = Path(svg_path)
    _png_path = Path(png_path)
    _png_path.parent.mkdir(parents=True, exist_ok=True)

    cmd = _resvg_command(
        input_svg=_svg_path,
        output_png=_png_path,
        output_size=output_size,
        background_color=background_color,
    )
    try:
        proc = subprocess.run(cmd, capture_output=True, text=True, check=False)
    except FileNotFoundError as e:
        raise RuntimeError(
            "resvg が見つかりません（`resvg` をインストールして PATH を通してください）"
        ) from e

    if proc.returncode != 0:
        details = (proc.stderr or proc.stdout or "").strip()
        raise RuntimeError(f"resvg が失敗しました (code={proc.returncode}). {details}".strip())

    return _png_path


def svg_to_png_bytes(
    svg_text: str,
    *,
    output_size: tuple[int, int],
    background_color: str = "#000000",
) -> bytes:
    """SVG 文字列を PNG バイト列に変換して返す（一時ディレクトリ経由）。"""

    with tempfile.TemporaryDirectory(prefix="yeargrid-") as tmp:
        tmp_dir = Path(tmp)
        svg_path = tmp_dir / "in.svg"
        png_path = tmp_dir / "out.png"
        svg_path.write_text(svg_text, encoding="utf-8")
        rasterize_svg_to_png(
            svg_path,
            png_path,
            output_size=output_size,
            background_color=background_color,
        )
        return png_path.read_bytes()


def export_image(scene: Scene, path: str | Path) -> Path:
    """Scene を拡張子に応じて SVG / PNG として保存する。

    Notes
    -----
    PNG の場合も SVG を隣に保存し、それを resvg でラスタライズする。
    """
    _path = Path(path)
    suffix = _path.suffix.lower()

    if suffix == ".svg":
        return export_svg(scene, _path)

    if suffix == ".png":
        svg_path = export_svg(scene, _path.with_suffix(".svg"))
        return rasterize_svg_to_png(
            svg_path,
            _path,
            output_size=png_output_size((scene.width, scene.height)),
            background_color=scene.config.background_color,
        )

    raise ValueError(f"未対応の画像フォーマット: {suffix!r}")


__all__ = ["export_image", "png_output_size", "rasterize_svg_to_png", "svg_to_png_bytes"]
