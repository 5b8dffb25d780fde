"""Tests for cppnew.core.config module."""

import dataclasses

import pytest

from cppnew.core.config import (
    DEFAULT_PROJECT_NAME,
    FLAG_TABLE,
    ProjectConfig,
    TemplateId,
    apply_overrides,
    build_config,
    defaults,
    resolve_flag,
    select_template,
)
from cppnew.core.settings import ScaffoldSettings
from cppnew.errors import UnknownTemplateError, UsageError


class TestResolveFlag:
    """Tests for resolve_flag()."""

    def test_returns_value_after_flag(self):
        assert resolve_flag(["new", "-n", "app"], ("-n", "--name")) == "app"

    def test_long_spelling(self):
        assert resolve_flag(["new", "--name", "app"], ("-n", "--name")) == "app"

    def test_last_occurrence_wins(self):
        assert resolve_flag(["new", "-n", "a", "-n", "b"], ("-n", "--name")) == "b"

    def test_last_occurrence_wins_across_spellings(self):
        tokens = ["new", "--name", "a", "-n", "b", "--name", "c"]
        assert resolve_flag(tokens, ("-n", "--name")) == "c"

    def test_short_after_long(self):
        tokens = ["new", "--name", "a", "-n", "b"]
        assert resolve_flag(tokens, ("-n", "--name")) == "b"

    def test_trailing_flag_is_ignored(self):
        assert resolve_flag(["new", "-n"], ("-n", "--name")) is None

    def test_trailing_flag_keeps_earlier_value(self):
        assert resolve_flag(["new", "-n", "a", "-n"], ("-n", "--name")) == "a"

    def test_absent(self):
        assert resolve_flag(["new", "-s", "20"], ("-n", "--name")) is None

    def test_empty_tokens(self):
        assert resolve_flag([], ("-n",)) is None

    def test_value_may_look_like_a_flag(self):
        assert resolve_flag(["new", "-n", "-s"], ("-n",)) == "-s"


class TestTemplateId:
    """Tests for TemplateId.parse()."""

    @pytest.mark.parametrize("raw,expected", [
        ("default", TemplateId.DEFAULT),
        ("lib", TemplateId.LIBRARY),
        ("library", TemplateId.LIBRARY),
        ("LIB", TemplateId.LIBRARY),
    ])
    def test_synonyms(self, raw, expected):
        assert TemplateId.parse(raw) is expected

    def test_unknown_raises(self):
        with pytest.raises(UnknownTemplateError) as exc_info:
            TemplateId.parse("unknown-template")
        assert exc_info.value.token == "unknown-template"
        assert "unknown-template" in str(exc_info.value)

    def test_unknown_is_usage_error(self):
        with pytest.raises(UsageError):
            TemplateId.parse("exe")


class TestDefaults:
    """Tests for defaults()."""

    def test_every_field_populated(self):
        config = defaults()
        assert config == ProjectConfig(
            template_id=TemplateId.DEFAULT,
            project_name=DEFAULT_PROJECT_NAME,
            standard_version="17",
            min_tool_version="3.22",
            build_output_dir="./bin",
        )

    def test_build_dir_from_settings(self):
        config = defaults(ScaffoldSettings(build_output_dir="out"))
        assert config.build_output_dir == "out"

    def test_config_is_immutable(self):
        config = defaults()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.project_name = "other"


class TestSelectTemplate:
    """Tests for select_template()."""

    def test_no_second_token(self):
        assert select_template(["new"]) is None

    def test_second_token_is_flag(self):
        assert select_template(["new", "-n", "app"]) is None

    def test_second_token_names_template(self):
        assert select_template(["new", "lib"]) is TemplateId.LIBRARY

    def test_second_token_unknown(self):
        with pytest.raises(UnknownTemplateError):
            select_template(["new", "unknown-template"])


class TestBuildConfig:
    """Tests for build_config() and apply_overrides()."""

    def test_defaults_without_flags(self):
        assert build_config(["new"]) == defaults()

    def test_all_flags(self):
        config = build_config(["new", "library", "-n", "engine", "-s", "20", "-c", "3.25"])
        assert config.template_id is TemplateId.LIBRARY
        assert config.project_name == "engine"
        assert config.standard_version == "20"
        assert config.min_tool_version == "3.25"
        assert config.build_output_dir == "./bin"

    def test_long_flags(self):
        config = build_config(["new", "--name", "app", "--std", "23", "--cmake-min", "3.28"])
        assert (config.project_name, config.standard_version, config.min_tool_version) == (
            "app", "23", "3.28"
        )

    def test_flags_order_independent(self):
        a = build_config(["new", "-s", "20", "-n", "app"])
        b = build_config(["new", "-n", "app", "-s", "20"])
        assert a == b

    def test_repeated_name_last_wins(self):
        assert build_config(["new", "-n", "a", "-n", "b"]).project_name == "b"

    def test_trailing_flag_falls_back_to_default(self):
        config = build_config(["new", "-n", "app", "-s"])
        assert config.standard_version == "17"

    def test_empty_name_falls_back_to_default(self):
        assert build_config(["new", "-n", ""]).project_name == DEFAULT_PROJECT_NAME

    def test_unknown_template_raises(self):
        with pytest.raises(UnknownTemplateError):
            build_config(["new", "unknown-template", "-n", "app"])

    def test_apply_overrides_returns_new_object(self):
        base = defaults()
        config = apply_overrides(base, ["new", "-n", "app"])
        assert config is not base
        assert base.project_name == DEFAULT_PROJECT_NAME

    def test_build_dir_has_no_flag(self):
        assert "build_output_dir" not in FLAG_TABLE
