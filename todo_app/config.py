"""
Application settings loaded from environment variables.

Every value has a default, so the app starts with an empty environment.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

ENV_PREFIX = "TODO_APP"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env_int(env: Mapping[str, str], name: str, default: int, minimum: int = 0) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r, using %d", name, raw, default)
        return default
    return max(minimum, value)


def _env_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(env: Mapping[str, str], name: str) -> Optional[Path]:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


@dataclass(frozen=True)
class Settings:
    # ---- Timers (ms) ----
    splash_delay_ms: int = 2000
    login_delay_ms: int = 1500
    toast_duration_ms: int = 3000

    # ---- Logging ----
    log_level: str = "INFO"
    log_dir: Optional[Path] = None

    # ---- Demo data ----
    seed_demo: bool = False
    seed_count: int = 6


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from the environment.

    Args:
        env: Mapping to read from (defaults to os.environ)

    Returns:
        Frozen Settings instance
    """
    env = os.environ if env is None else env
    defaults = Settings()

    log_level = (env.get(_k("LOG_LEVEL")) or defaults.log_level).strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        logger.warning("Unknown log level %r, falling back to %s", log_level, defaults.log_level)
        log_level = defaults.log_level

    return Settings(
        splash_delay_ms=_env_int(env, _k("SPLASH_DELAY_MS"), defaults.splash_delay_ms),
        login_delay_ms=_env_int(env, _k("LOGIN_DELAY_MS"), defaults.login_delay_ms),
        toast_duration_ms=_env_int(env, _k("TOAST_DURATION_MS"), defaults.toast_duration_ms),
        log_level=log_level,
        log_dir=_env_path(env, _k("LOG_DIR")),
        seed_demo=_env_bool(env, _k("SEED_DEMO"), defaults.seed_demo),
        seed_count=_env_int(env, _k("SEED_COUNT"), defaults.seed_count),
    )
