"""Per-project configuration helpers."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

import yaml

from .constants import CONFIG_FILE, GIT_TIMEOUT
from .errors import ConfigError


logger = logging.getLogger(__name__)


@dataclass
class AutoignoreConfig:
    """Optional settings read from .autoignore.yaml in the scanned directory."""

    extra: List[str] = field(default_factory=list)           # appended as "# Custom"
    exclude_stacks: List[str] = field(default_factory=list)  # dropped after detection
    git_timeout: float = GIT_TIMEOUT


def _string_list(data: dict, key: str, path: Path) -> List[str]:
    value = data.get(key) or []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(str(path), f"'{key}' must be a list of strings")
    return value


def parse_config(path: Path) -> AutoignoreConfig:
    """Parse a configuration file, raising ConfigError if it is malformed."""
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        raise ConfigError(str(path), str(e))

    if not isinstance(data, dict):
        raise ConfigError(str(path), "expected a mapping at the top level")

    timeout = data.get("git_timeout", GIT_TIMEOUT)
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ConfigError(str(path), "'git_timeout' must be a positive number")

    return AutoignoreConfig(
        extra=_string_list(data, "extra", path),
        exclude_stacks=_string_list(data, "exclude_stacks", path),
        git_timeout=float(timeout),
    )


def load_config(root: Path) -> AutoignoreConfig:
    """Load configuration from .autoignore.yaml if present.

    A malformed file is reported as a warning and the defaults are used.
    """
    cfg_path = root / CONFIG_FILE
    if not cfg_path.exists():
        return AutoignoreConfig()

    try:
        return parse_config(cfg_path)
    except ConfigError as e:
        logger.warning("%s; using defaults", e)
        return AutoignoreConfig()
