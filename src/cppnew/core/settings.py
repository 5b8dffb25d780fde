"""Tool settings for cppnew.

Settings are read from ``.cppnew.json`` in the working directory and can be
overridden through environment variables:

- CPPNEW_INIT_GIT   → init_git (1/true/yes/on)
- CPPNEW_BUILD_DIR  → build_output_dir
- CPPNEW_LOG_LEVEL  → log_level
"""

import json
import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

SETTINGS_FILE = ".cppnew.json"

TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class ScaffoldSettings:
    """Settings that are not exposed as command-line flags."""
    init_git: bool = False
    build_output_dir: str = "./bin"
    log_level: str = "WARNING"
    git_timeout_seconds: int = 60

    @classmethod
    def from_dict(cls, data: dict) -> "ScaffoldSettings":
        return cls(**{
            k: v for k, v in data.items()
            if k in cls.__dataclass_fields__
        })


def _read_settings_file(path: Path) -> ScaffoldSettings:
    if not path.exists():
        return ScaffoldSettings()
    try:
        data = json.loads(path.read_text())
        return ScaffoldSettings.from_dict(data)
    except (json.JSONDecodeError, TypeError, AttributeError) as e:
        logger.warning("Ignoring unreadable settings file %s: %s", path, e)
        return ScaffoldSettings()


def load_settings(
    cwd: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ScaffoldSettings:
    """Load settings from the settings file, then apply environment overrides.

    Args:
        cwd: Directory holding the settings file (defaults to cwd)
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Resolved ScaffoldSettings
    """
    cwd = cwd or Path.cwd()
    environ = os.environ if environ is None else environ

    settings = _read_settings_file(cwd / SETTINGS_FILE)

    overrides = {}
    if "CPPNEW_INIT_GIT" in environ:
        overrides["init_git"] = environ["CPPNEW_INIT_GIT"].strip().lower() in TRUE_VALUES
    if environ.get("CPPNEW_BUILD_DIR"):
        overrides["build_output_dir"] = environ["CPPNEW_BUILD_DIR"]
    if environ.get("CPPNEW_LOG_LEVEL"):
        overrides["log_level"] = environ["CPPNEW_LOG_LEVEL"].upper()

    if overrides:
        logger.debug("Settings overridden from environment: %s", sorted(overrides))
        settings = replace(settings, **overrides)
    return settings
