from pathlib import Path

import pytest

from yeargrid.core.runtime_config import runtime_config, set_config_path


@pytest.fixture(autouse=True)
def _reset_runtime_config() -> None:
    set_config_path(None)
    yield
    set_config_path(None)


def _isolate_config_discovery(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_packaged_defaults_without_config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)

    cfg = runtime_config()
    assert cfg.config_path is None
    assert cfg.timezone == "Asia/Kolkata"
    assert dict(cfg.render_overrides) == {}
    assert cfg.png_scale == 1.0


def test_discovered_config_overrides_packaged_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)

    discovered = _write(
        tmp_path / ".yeargrid" / "config.yaml",
        'version: 1\ntimezone: "UTC"\nrender:\n  cols: 7\n  backgroundColor: "#111111"\nexport:\n  png:\n    scale: 2\n',
    )

    cfg = runtime_config()
    assert cfg.config_path == discovered
    assert cfg.timezone == "UTC"
    assert dict(cfg.render_overrides) == {"cols": 7, "backgroundColor": "#111111"}
    assert cfg.png_scale == 2.0


def test_home_config_is_discovered(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)

    home_cfg = _write(tmp_path / ".config" / "yeargrid" / "config.yaml", 'timezone: "Europe/London"\n')

    cfg = runtime_config()
    assert cfg.config_path == home_cfg
    assert cfg.timezone == "Europe/London"


def test_explicit_config_overrides_discovered_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)

    _write(
        tmp_path / ".yeargrid" / "config.yaml",
        'timezone: "UTC"\nrender:\n  cols: 7\n  textColor: "#FF0000"\n',
    )
    explicit = _write(tmp_path / "explicit.yaml", "render:\n  cols: 10\n")
    set_config_path(explicit)

    cfg = runtime_config()
    assert cfg.config_path == explicit
    assert cfg.timezone == "UTC"
    # render は 1 段深くマージされる。
    assert dict(cfg.render_overrides) == {"cols": 10, "textColor": "#FF0000"}


def test_runtime_config_is_cached_until_path_changes(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)

    first = runtime_config()
    assert runtime_config() is first

    explicit = _write(tmp_path / "explicit.yaml", 'timezone: "UTC"\n')
    set_config_path(explicit)
    assert runtime_config().timezone == "UTC"


def test_explicit_config_path_missing_raises(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)

    set_config_path(tmp_path / "missing.yaml")

    with pytest.raises(FileNotFoundError):
        runtime_config()


@pytest.mark.parametrize(
    ("text", "error"),
    [
        ("version: 2\n", RuntimeError),
        ('timezone: "Mars/Olympus"\n', RuntimeError),
        ("render: [1, 2]\n", RuntimeError),
        ("render:\n  nope: 1\n", ValueError),
        ("render:\n  cols: 0\n", ValueError),
        ("export:\n  png:\n    scale: 0\n", RuntimeError),
        ("export:\n  png:\n    scale: -2\n", RuntimeError),
        ("- just\n- a list\n", RuntimeError),
        ("render: {cols: [\n", RuntimeError),
    ],
)
def test_invalid_config_is_rejected(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, text: str, error: type):
    _isolate_config_discovery(tmp_path, monkeypatch)

    set_config_path(_write(tmp_path / "bad.yaml", text))

    with pytest.raises(error):
        runtime_config()
