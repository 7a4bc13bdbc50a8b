from pathlib import Path

from broadside.game.infra.app_data import (
    ensure_app_data_dirs,
    resolve_app_data_root,
    resolve_game_root,
    resolve_logs_dir,
)


def test_app_data_root_defaults_under_game_root(monkeypatch) -> None:
    monkeypatch.delenv("BROADSIDE_APP_DATA_DIR", raising=False)
    assert resolve_app_data_root() == resolve_game_root() / "appdata"


def test_relative_app_data_root_is_anchored_to_game_root(monkeypatch) -> None:
    monkeypatch.setenv("BROADSIDE_APP_DATA_DIR", "custom_data")
    assert resolve_app_data_root() == resolve_game_root() / "custom_data"


def test_log_dir_override_relative_to_app_data(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("BROADSIDE_APP_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("BROADSIDE_LOG_DIR", "runs")
    assert resolve_logs_dir() == Path(tmp_path) / "runs"


def test_ensure_app_data_dirs_creates_directories(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("BROADSIDE_APP_DATA_DIR", str(tmp_path / "appdata"))
    monkeypatch.delenv("BROADSIDE_LOG_DIR", raising=False)
    paths = ensure_app_data_dirs()
    assert paths["root"].is_dir()
    assert paths["logs"] == tmp_path / "appdata" / "logs"
    assert paths["logs"].is_dir()


def test_game_root_is_the_directory_holding_the_package() -> None:
    root = resolve_game_root()
    assert (root / "broadside" / "game" / "infra" / "app_data.py").is_file()
