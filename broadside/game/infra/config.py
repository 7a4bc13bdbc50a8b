"""Application configuration and env loading."""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from broadside.game.app.state_machine import MatchMode
from broadside.game.infra.app_data import resolve_game_root

logger = logging.getLogger(__name__)

DEFAULT_AI_DELAY_SECONDS = 1.0


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    """
    env_path = _resolve_env_path(path)
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load split env files with optional local overrides.

    Precedence is left-to-right because later loads may overwrite previous values.
    Default order:
    1) appdata/config/.env.app
    2) appdata/config/.env.app.local
    3) .env
    4) .env.local
    """
    to_load = (
        tuple(paths)
        if paths is not None
        else (
            "appdata/config/.env.app",
            "appdata/config/.env.app.local",
            ".env",
            ".env.local",
        )
    )
    for path in to_load:
        load_env_file(path, override_existing=override_existing)


@dataclass(frozen=True, slots=True)
class MatchSettings:
    """Match options resolved from env and CLI overrides."""

    mode: MatchMode = MatchMode.VS_COMPUTER
    ai_delay_seconds: float = DEFAULT_AI_DELAY_SECONDS
    seed: int | None = None

    @classmethod
    def from_env(cls) -> MatchSettings:
        return cls(
            mode=_parse_mode(os.getenv("BROADSIDE_MODE", "")),
            ai_delay_seconds=_parse_delay(os.getenv("BROADSIDE_AI_DELAY_SECONDS", "")),
            seed=_parse_seed(os.getenv("BROADSIDE_SEED", "")),
        )


def _parse_mode(raw: str) -> MatchMode:
    normalized = raw.strip().lower().replace("-", "_")
    if normalized in {"two_player", "two_players", "pvp"}:
        return MatchMode.TWO_PLAYER
    if normalized and normalized not in {"vs_computer", "computer", "ai"}:
        logger.warning("unknown_match_mode value=%s", raw)
    return MatchMode.VS_COMPUTER


def _parse_delay(raw: str) -> float:
    if not raw.strip():
        return DEFAULT_AI_DELAY_SECONDS
    try:
        value = float(raw)
    except ValueError:
        logger.warning("invalid_ai_delay value=%s", raw)
        return DEFAULT_AI_DELAY_SECONDS
    return max(0.0, value)


def _parse_seed(raw: str) -> int | None:
    if not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning("invalid_seed value=%s", raw)
        return None


def _resolve_env_path(path: str) -> Path:
    """Resolve env path from cwd, then project root."""
    candidate = Path(path)
    if candidate.exists():
        return candidate

    # Fallback for IDE run configs with different working directory.
    return resolve_game_root() / path
