"""
Settings for golden matching.

Loaded from a YAML file (optional). Lookup order:
1. explicit `config_path` argument
2. `GOLDEN_MATCH_CONFIG` environment variable
3. built-in defaults

File layout (the `golden:` section is optional):

    golden:
      env_var: golden
      differ: external        # external | difflib
      diff_command: [diff, -u]
      encoding: utf-8
      temp_dir: null
      block_record_in_ci: true
"""

import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from golden_match.domain.constants import (
    DEFAULT_DIFF_COMMAND,
    DEFAULT_ENCODING,
    DIFFER_DIFFLIB,
    DIFFER_EXTERNAL,
    GOLDEN_ENV,
    SETTINGS_ENV,
    SETTINGS_SECTION,
)
from golden_match.domain.errors import ErrorCodes, GoldenConfigurationError

logger = logging.getLogger(__name__)


@dataclass
class GoldenSettings:
    """Golden matching settings."""
    # Environment flag selecting record mode
    env_var: str = GOLDEN_ENV

    # "external" runs diff_command, "difflib" diffs in-process
    differ: str = DIFFER_EXTERNAL
    diff_command: list[str] = field(default_factory=lambda: list(DEFAULT_DIFF_COMMAND))

    encoding: str = DEFAULT_ENCODING

    # None → system temp directory
    temp_dir: str | None = None

    # Refuse to record when a CI indicator is set
    block_record_in_ci: bool = False

    def __post_init__(self) -> None:
        if self.differ not in (DIFFER_EXTERNAL, DIFFER_DIFFLIB):
            raise GoldenConfigurationError(
                ErrorCodes.INVALID_SETTINGS,
                f"differ must be {DIFFER_EXTERNAL!r} or {DIFFER_DIFFLIB!r}",
                differ=self.differ,
            )
        if isinstance(self.diff_command, str):
            self.diff_command = self.diff_command.split()
        if not self.diff_command:
            raise GoldenConfigurationError(
                ErrorCodes.INVALID_SETTINGS,
                "diff_command must not be empty",
            )
        self.diff_command = [str(part) for part in self.diff_command]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GoldenSettings":
        """Build settings from a mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise GoldenConfigurationError(
                ErrorCodes.INVALID_SETTINGS,
                "unknown settings keys",
                keys=unknown,
            )
        return cls(**data)


def load_settings(config_path: Path | str | None = None) -> GoldenSettings:
    """
    Load settings.

    Args:
        config_path: YAML settings file (None → GOLDEN_MATCH_CONFIG, then defaults)

    Returns:
        GoldenSettings (defaults when no file is configured or it does not exist)

    Raises:
        GoldenConfigurationError: Malformed settings file
    """
    if config_path is None:
        config_path = os.environ.get(SETTINGS_ENV) or None

    if config_path is None:
        return GoldenSettings()

    config_path = Path(config_path)
    if not config_path.exists():
        logger.debug(f"Settings file not found, using defaults: {config_path}")
        return GoldenSettings()

    with open(config_path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise GoldenConfigurationError(
                ErrorCodes.INVALID_SETTINGS,
                "settings file is not valid YAML",
                path=str(config_path),
            ) from e

    if data is None:
        data = {}
    if isinstance(data, dict) and SETTINGS_SECTION in data:
        data = data[SETTINGS_SECTION] or {}
    if not isinstance(data, dict):
        raise GoldenConfigurationError(
            ErrorCodes.INVALID_SETTINGS,
            "settings must be a mapping",
            path=str(config_path),
        )

    logger.debug(f"Loaded golden settings from {config_path}")
    return GoldenSettings.from_dict(data)
