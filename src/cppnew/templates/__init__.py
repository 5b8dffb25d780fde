"""Template registry for cppnew scaffolding.

Templates available:
- default: CMake executable project
- library (alias: lib): CMake static library project

Each template is a fixed bundle of text resources containing
``{{placeholder}}`` markers that the renderer fills in.
"""

from dataclasses import dataclass
from typing import Union

from cppnew.core.config import TemplateId
from cppnew.templates import executable, library


@dataclass(frozen=True)
class TemplateResources:
    """Named text resources of one template."""
    build_sh: str
    cmake_lists: str
    main_cpp: str
    gitignore: str


# Template registry
TEMPLATES = {
    TemplateId.DEFAULT: TemplateResources(
        build_sh=executable.BUILD_SH,
        cmake_lists=executable.CMAKE_LISTS,
        main_cpp=executable.MAIN_CPP,
        gitignore=executable.GITIGNORE,
    ),
    TemplateId.LIBRARY: TemplateResources(
        build_sh=library.BUILD_SH,
        cmake_lists=library.CMAKE_LISTS,
        main_cpp=executable.MAIN_CPP,
        gitignore=library.GITIGNORE,
    ),
}

DESCRIPTIONS = {
    TemplateId.DEFAULT: "CMake executable project",
    TemplateId.LIBRARY: "CMake static library project (alias: lib)",
}


def get_available_templates() -> dict:
    """Get dictionary of template names and descriptions."""
    return {template_id.value: text for template_id, text in DESCRIPTIONS.items()}


def lookup(template_id: Union[TemplateId, str]) -> TemplateResources:
    """Get the resources of a template.

    Args:
        template_id: TemplateId or raw template name (synonyms accepted)

    Returns:
        TemplateResources for the template

    Raises:
        UnknownTemplateError: If the name matches no template
    """
    if not isinstance(template_id, TemplateId):
        template_id = TemplateId.parse(template_id)
    return TEMPLATES[template_id]
