"""Shared test fixtures for cppnew.

Provides:
- workspace: Temporary directory projects are created in
- cli_runner: Click CliRunner
- git_settings: Settings with repository initialization enabled
- mock_git_init: pytest-subprocess fixture with `git init` registered
"""

import pytest
from click.testing import CliRunner

from cppnew.core.config import TemplateId, build_config, defaults
from cppnew.core.renderer import render
from cppnew.core.settings import ScaffoldSettings
from cppnew.templates import lookup


@pytest.fixture
def workspace(tmp_path):
    """Empty directory to scaffold into."""
    parent = tmp_path / "workspace"
    parent.mkdir()
    return parent


@pytest.fixture
def cli_runner():
    """Click CliRunner for testing the entry point."""
    return CliRunner()


@pytest.fixture
def git_settings():
    return ScaffoldSettings(init_git=True)


@pytest.fixture
def default_file_set():
    """Rendered default template with default configuration."""
    config = defaults()
    return render(lookup(TemplateId.DEFAULT), config)


@pytest.fixture
def library_file_set():
    config = build_config(["new", "lib", "-n", "engine"])
    return render(lookup(config.template_id), config)


@pytest.fixture
def mock_git_init(fp):
    """Mock `git init` using pytest-subprocess.

    Use `fp` directly for custom subprocess mocking in individual tests.
    """
    fp.register(["git", "init"], stdout="Initialized empty Git repository\n")
    return fp
