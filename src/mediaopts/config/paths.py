"""Shared path utilities for the configuration file location.

Policy (portable by default):
- Config: repository-root ``<repo_root>/config/config.toml`` unless
  overridden by ``MEDIAOPTS_CONFIG``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final

ENV_CONFIG_FILE: Final[str] = "MEDIAOPTS_CONFIG"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a configuration path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = (mapping.get(env_var) or "").strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    return default_factory().expanduser().resolve()


def _detect_repo_root(start: Path | None = None) -> Path:
    """Detect the repository root by walking up parents.

    Looks for markers like ``pyproject.toml`` or ``.git`` and falls back to
    the current working directory.
    """
    here = (start or Path(__file__).resolve()).parent
    for p in [here, *here.parents]:
        if (p / "pyproject.toml").exists() or (p / ".git").exists():
            return p
    return Path.cwd()


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the path to the TOML config file."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=ENV_CONFIG_FILE,
        default_factory=lambda: _detect_repo_root() / "config" / "config.toml",
    )


__all__ = [
    "ENV_CONFIG_FILE",
    "default_config_path",
    "resolve_overridable_path",
]
