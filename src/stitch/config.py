"""Runtime settings for stitch frontends.

Settings come from the environment. A ``.env`` file in the working
directory (or the nearest parent holding a pyproject.toml) is loaded
first, without overriding variables that are already set.

Environment Variables:
    STITCH_LOG_LEVEL: Log level (default INFO)
    STITCH_LOG_FORMAT: "text" or "json" (default text)
    STITCH_LOG_FILE: Optional log file path
    STITCH_STRICT: Treat warnings and diagnostics as failures in `validate`
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class Settings:
    """Frontend settings.

    Attributes:
        log_level: Log level name.
        log_format: Log output format.
        log_file: Optional log file path.
        strict: Fail validation on warnings and diagnostics, not only cycles.
    """

    log_level: str = "INFO"
    log_format: Literal["text", "json"] = "text"
    log_file: str | None = None
    strict: bool = False


def _find_env_file(start: Path | None = None) -> Path | None:
    current = (start or Path.cwd()).resolve()
    for parent in [current, *current.parents]:
        candidate = parent / ".env"
        if candidate.exists():
            return candidate
        if (parent / "pyproject.toml").exists():
            break
    return None


def load_settings(env_file: str | Path | None = None) -> Settings:
    """Load settings from the environment, after reading a .env file.

    Args:
        env_file: Explicit .env path. Defaults to the nearest .env found
            from the working directory up to the project root.

    Returns:
        The settings.
    """
    from dotenv import load_dotenv

    path = Path(env_file) if env_file else _find_env_file()
    if path is not None and path.exists():
        load_dotenv(path, override=False)

    log_format = os.getenv("STITCH_LOG_FORMAT", "text").lower()
    return Settings(
        log_level=os.getenv("STITCH_LOG_LEVEL", "INFO").upper(),
        log_format="json" if log_format == "json" else "text",
        log_file=os.getenv("STITCH_LOG_FILE") or None,
        strict=os.getenv("STITCH_STRICT", "").strip().lower() in _TRUE_VALUES,
    )
