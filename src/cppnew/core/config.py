"""Project configuration resolution.

Configuration is built in two stages: ``defaults()`` produces a fully
populated ProjectConfig, and ``apply_overrides()`` returns a new config with
values taken from the command-line tokens. Neither stage touches the
filesystem.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from types import MappingProxyType
from typing import Optional, Sequence, Tuple

from cppnew.core.settings import ScaffoldSettings
from cppnew.errors import UnknownTemplateError

logger = logging.getLogger(__name__)

DEFAULT_PROJECT_NAME = "MyProject"
DEFAULT_STANDARD_VERSION = "17"
DEFAULT_MIN_TOOL_VERSION = "3.22"
DEFAULT_BUILD_OUTPUT_DIR = "./bin"

FLAG_PREFIX = "-"


class TemplateId(Enum):
    """Closed set of project templates."""
    DEFAULT = "default"
    LIBRARY = "library"

    @classmethod
    def parse(cls, raw: str) -> "TemplateId":
        """Normalize a template token, accepting synonyms.

        Raises:
            UnknownTemplateError: If the token names no template
        """
        template_id = _TEMPLATE_SYNONYMS.get(raw.strip().lower())
        if template_id is None:
            raise UnknownTemplateError(raw)
        return template_id


_TEMPLATE_SYNONYMS = {
    "default": TemplateId.DEFAULT,
    "lib": TemplateId.LIBRARY,
    "library": TemplateId.LIBRARY,
}

# Canonical config field -> accepted flag spellings
FLAG_TABLE = MappingProxyType({
    "project_name": ("-n", "--name"),
    "standard_version": ("-s", "--std"),
    "min_tool_version": ("-c", "--cmake-min"),
})


@dataclass(frozen=True)
class ProjectConfig:
    """Fully resolved parameters of one scaffolding run."""
    template_id: TemplateId
    project_name: str
    standard_version: str
    min_tool_version: str
    build_output_dir: str


def resolve_flag(tokens: Sequence[str], spellings: Tuple[str, ...]) -> Optional[str]:
    """Find the value following a flag.

    The last occurrence of any spelling wins. A flag in the final position
    has no value and is ignored.

    Args:
        tokens: Command-line tokens
        spellings: Accepted spellings of the flag

    Returns:
        The resolved value, or None if the flag is absent
    """
    value = None
    for i, token in enumerate(tokens[:-1]):
        if token in spellings:
            value = tokens[i + 1]
    return value


def defaults(settings: Optional[ScaffoldSettings] = None) -> ProjectConfig:
    """Configuration used when no overrides are given."""
    build_dir = settings.build_output_dir if settings else DEFAULT_BUILD_OUTPUT_DIR
    return ProjectConfig(
        template_id=TemplateId.DEFAULT,
        project_name=DEFAULT_PROJECT_NAME,
        standard_version=DEFAULT_STANDARD_VERSION,
        min_tool_version=DEFAULT_MIN_TOOL_VERSION,
        build_output_dir=build_dir,
    )


def select_template(tokens: Sequence[str]) -> Optional[TemplateId]:
    """Template named by the second token, or None when it is absent or a flag."""
    if len(tokens) < 2 or tokens[1].startswith(FLAG_PREFIX):
        return None
    return TemplateId.parse(tokens[1])


def apply_overrides(config: ProjectConfig, tokens: Sequence[str]) -> ProjectConfig:
    """Return a copy of ``config`` with values taken from ``tokens``.

    ``tokens`` include the command token, so the template is read from the
    second position.

    Raises:
        UnknownTemplateError: If the template token is not recognized
    """
    overrides = {}

    template_id = select_template(tokens)
    if template_id is not None:
        overrides["template_id"] = template_id

    for key, spellings in FLAG_TABLE.items():
        value = resolve_flag(tokens, spellings)
        # An empty name would put the project into the working directory
        if value is not None and (value or key != "project_name"):
            overrides[key] = value

    logger.debug("Config overrides: %s", overrides)
    return replace(config, **overrides)


def build_config(
    tokens: Sequence[str],
    settings: Optional[ScaffoldSettings] = None,
) -> ProjectConfig:
    """Resolve a ProjectConfig from command-line tokens."""
    return apply_overrides(defaults(settings), tokens)
