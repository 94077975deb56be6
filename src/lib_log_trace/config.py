"""Optional ``.env`` loading for hosts and the CLI.

Purpose
-------
Let operators keep ``LOG_*`` overrides in a ``.env`` file next to the project
instead of exporting them in every shell. Loading is opt-in: the CLI flag
``--use-dotenv`` or the :data:`DOTENV_ENV_VAR` environment variable enables it.

Contents
--------
* :func:`should_use_dotenv` - precedence between the flag and the variable.
* :func:`enable_dotenv` - locate and load the nearest ``.env`` once.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DOTENV_ENV_VAR = "LIB_LOG_TRACE_USE_DOTENV"
_TRUTHY = {"1", "true", "yes", "on"}

_loaded_path: Path | None = None
_attempted = False


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Return whether ``.env`` loading is requested.

    An explicit CLI flag wins; otherwise the environment toggle decides.

    Examples
    --------
    >>> should_use_dotenv(explicit=True, env_value="0")
    True
    >>> should_use_dotenv(explicit=None, env_value="yes")
    True
    >>> should_use_dotenv(explicit=None, env_value=None)
    False
    """

    if explicit is not None:
        return explicit
    if env_value is None:
        env_value = os.getenv(DOTENV_ENV_VAR)
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def _candidates(start: Path) -> list[Path]:
    return [directory / ".env" for directory in (start, *start.parents)]


def enable_dotenv(search_from: str | Path | None = None) -> Path | None:
    """Load the nearest ``.env`` walking up from ``search_from``.

    Existing environment variables are never overridden. The lookup runs once
    per process; later calls return the cached result.

    Returns
    -------
    Path | None
        Resolved path of the loaded file, or ``None`` when none was found.
    """

    global _loaded_path, _attempted
    if _attempted:
        return _loaded_path
    _attempted = True

    start = Path(search_from) if search_from is not None else Path.cwd()
    for candidate in _candidates(start.resolve()):
        if candidate.is_file():
            load_dotenv(candidate, override=False)
            _loaded_path = candidate.resolve()
            logger.debug("loaded environment overrides from %s", _loaded_path)
            break
    return _loaded_path


def _reset_dotenv_state_for_testing() -> None:
    global _loaded_path, _attempted
    _loaded_path = None
    _attempted = False


__all__ = ["DOTENV_ENV_VAR", "enable_dotenv", "should_use_dotenv"]
