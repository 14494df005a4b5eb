"""
app/config.py

Application-level configuration helpers.

Settings only provide defaults. Per-run column roles, mode and threshold
are always supplied by the caller.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path


ENV_FILES = (".env", ".env.local")


def _read_env_file(path: Path) -> dict[str, str]:
    pairs: dict[str, str] = {}
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        key, sep, value = raw_line.strip().partition("=")
        key = key.strip()
        if not sep or not key or key.startswith("#"):
            continue
        pairs[key] = value.strip().strip("\"'")
    return pairs


def load_env_files(root: Path | None = None) -> None:
    """
    Apply `KEY=VALUE` lines from ENV_FILES under ``root`` (the project root
    by default). Variables already set in the process win.
    """

    root = root or Path(__file__).resolve().parents[1]
    for filename in ENV_FILES:
        env_path = root / filename
        if env_path.is_file():
            for key, value in _read_env_file(env_path).items():
                os.environ.setdefault(key, value)


@lru_cache(maxsize=1)
def _load_env_once() -> None:
    """
    Ensure project `.env` files are loaded once before reading settings.
    """

    load_env_files()


def _get_bool_env(name: str, default: bool) -> bool:
    """
    Read a boolean from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    return raw_value.strip().lower() in {"1", "true", "yes", "on"}


def _get_int_env(name: str, default: int) -> int:
    """
    Read an integer from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return int(raw_value)
    except ValueError:
        return default


def _get_float_env(name: str, default: float) -> float:
    """
    Read a float from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return float(raw_value)
    except ValueError:
        return default


@dataclass(frozen=True)
class AuditSettings:
    """
    Runtime defaults for the audit pipeline.
    """

    default_threshold: float = 0.5
    min_usable_rows: int = 10
    risk_medium_gap: float = 0.10
    risk_high_gap: float = 0.20
    log_dropped_rows: bool = True


@lru_cache(maxsize=1)
def get_audit_settings() -> AuditSettings:
    """
    Return cached audit settings from environment variables.
    """

    medium_gap = max(0.0, _get_float_env("AUDIT_RISK_MEDIUM_GAP", 0.10))
    return AuditSettings(
        default_threshold=min(1.0, max(0.0, _get_float_env("AUDIT_DEFAULT_THRESHOLD", 0.5))),
        min_usable_rows=max(1, _get_int_env("AUDIT_MIN_USABLE_ROWS", 10)),
        risk_medium_gap=medium_gap,
        risk_high_gap=max(medium_gap, _get_float_env("AUDIT_RISK_HIGH_GAP", 0.20)),
        log_dropped_rows=_get_bool_env("AUDIT_LOG_DROPPED_ROWS", True),
    )
