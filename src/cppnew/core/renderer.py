"""Placeholder substitution for template resources."""

import logging
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Dict, Optional, Tuple

from cppnew.core.config import ProjectConfig
from cppnew.templates import TemplateResources

logger = logging.getLogger(__name__)

BUILD_SCRIPT = "build.sh"
BUILD_CONFIG = "CMakeLists.txt"
SOURCE_DIR = "src"
MAIN_SOURCE = f"{SOURCE_DIR}/main.cpp"
IGNORE_FILE = ".gitignore"
EXTERNAL_LIB_DIRS = ("external/lib/win", "external/lib/linux")


@dataclass(frozen=True)
class RenderedFile:
    """A file to write, relative to the project root."""
    relative_path: str
    content: str
    executable: bool = False


@dataclass(frozen=True)
class RenderedFileSet:
    """Everything the materializer writes for one project.

    ``ignore_file`` is written only after repository initialization succeeds.
    """
    files: Tuple[RenderedFile, ...]
    directories: Tuple[str, ...]
    ignore_file: Optional[RenderedFile] = None


def placeholder_values(config: ProjectConfig) -> Dict[str, str]:
    """Marker -> replacement for every known placeholder."""
    return {
        "{{project_name}}": config.project_name,
        "{{cmake_min_version}}": config.min_tool_version,
        "{{cpp_standard}}": config.standard_version,
        "{{build_dir}}": config.build_output_dir,
    }


def ignore_pattern(build_dir: str) -> str:
    """Anchored ignore-file pattern for a build directory.

    Git does not match patterns starting with "./", so "./bin" becomes "/bin".
    """
    path = PurePosixPath(build_dir.replace("\\", "/")).as_posix().lstrip("/")
    return f"/{path}"


def substitute(text: str, values: Dict[str, str]) -> str:
    """Replace each marker in ``text``; unknown markers are left as they are."""
    for marker, value in values.items():
        text = text.replace(marker, value)
    return text


def render(resources: TemplateResources, config: ProjectConfig) -> RenderedFileSet:
    """Render a template's resources with the given configuration.

    Args:
        resources: TemplateResources of the selected template
        config: Resolved project configuration

    Returns:
        RenderedFileSet ready for materialization
    """
    values = placeholder_values(config)
    ignore_values = {
        **values,
        "{{build_dir}}": ignore_pattern(config.build_output_dir),
    }

    files = (
        RenderedFile(BUILD_SCRIPT, substitute(resources.build_sh, values), executable=True),
        RenderedFile(BUILD_CONFIG, substitute(resources.cmake_lists, values)),
        RenderedFile(MAIN_SOURCE, substitute(resources.main_cpp, values)),
    )
    logger.debug(
        "Rendered %d files for %s (%s)",
        len(files), config.project_name, config.template_id.value,
    )
    return RenderedFileSet(
        files=files,
        directories=(SOURCE_DIR,) + EXTERNAL_LIB_DIRS,
        ignore_file=RenderedFile(IGNORE_FILE, substitute(resources.gitignore, ignore_values)),
    )
