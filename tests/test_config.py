"""Unit tests for the configuration model (cppinit.config).

Tests cover:
- ProjectConfig defaults and language-dependent defaults
- Resolution of unrecognised enumerated values
- Presets
- Project name validation
"""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest
from pydantic import ValidationError

from cppinit.config import (
    TOGGLES,
    Language,
    License,
    PackageManager,
    ProjectConfig,
    ProjectType,
    TestFramework,
    resolve_language,
    resolve_project_type,
    resolve_test_framework,
    validate_project_name,
)
from cppinit.errors import ProjectNameError, ScaffoldError


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------


class TestProjectConfigDefaults:
    @pytest.mark.unit
    def test_cpp_defaults(self):
        config = ProjectConfig(project_name="myapp")
        assert config.language == "c++"
        assert config.standard == "17"
        assert config.description == "A modern C++ project"
        assert config.project_type == "executable"
        assert config.test_framework == "none"
        assert config.package_manager == "none"
        assert config.license == "mit"
        assert config.output_dir == Path("myapp")

    @pytest.mark.unit
    def test_c_defaults(self):
        config = ProjectConfig(project_name="clib", language="c")
        assert config.standard == "11"
        assert config.description == "A modern C project"

    @pytest.mark.unit
    def test_explicit_values_kept(self):
        config = ProjectConfig(
            project_name="clib",
            language="c",
            standard="99",
            description="Mine",
            output_dir=Path("/tmp/elsewhere"),
        )
        assert config.standard == "99"
        assert config.description == "Mine"
        assert config.output_dir == Path("/tmp/elsewhere")

    @pytest.mark.unit
    def test_default_toggles(self):
        toggles = ProjectConfig(project_name="myapp").toggles()
        assert list(toggles) == list(TOGGLES)
        assert toggles["use_clang_format"] is True
        assert toggles["use_clang_tidy"] is True
        assert not any(v for k, v in toggles.items() if k not in ("use_clang_format", "use_clang_tidy"))

    @pytest.mark.unit
    def test_year_defaults_to_current(self):
        assert ProjectConfig(project_name="myapp").year == str(date.today().year)

    @pytest.mark.unit
    def test_frozen(self):
        config = ProjectConfig(project_name="myapp")
        with pytest.raises(ValidationError):
            config.project_name = "other"

    @pytest.mark.unit
    def test_unknown_values_accepted(self):
        config = ProjectConfig(project_name="x", project_type="shared", license="wtfpl")
        assert config.project_type == "shared"
        assert config.resolved_project_type is ProjectType.EXECUTABLE
        assert config.resolved_license is License.NONE


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------


class TestResolution:
    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["c++", "cpp", "rust", ""])
    def test_non_c_is_cpp(self, value):
        assert resolve_language(value) is Language.CPP

    @pytest.mark.unit
    def test_c(self):
        assert resolve_language("C") is Language.C

    @pytest.mark.unit
    def test_project_type(self):
        assert resolve_project_type("header-only") is ProjectType.HEADER_ONLY
        assert resolve_project_type("dll") is ProjectType.EXECUTABLE

    @pytest.mark.unit
    def test_framework_fallbacks(self):
        assert resolve_test_framework("gtest", Language.CPP) is TestFramework.CATCH2
        assert resolve_test_framework("cmocka", Language.C) is TestFramework.UNITY

    @pytest.mark.unit
    def test_framework_for_other_language_is_none(self):
        assert resolve_test_framework("unity", Language.CPP) is TestFramework.NONE
        assert resolve_test_framework("googletest", Language.C) is TestFramework.NONE

    @pytest.mark.unit
    def test_package_manager_fallback(self):
        config = ProjectConfig(project_name="x", package_manager="hunter")
        assert config.resolved_package_manager is PackageManager.NONE

    @pytest.mark.unit
    def test_fallbacks_reported(self):
        config = ProjectConfig(project_name="x", test_framework="gtest", license="wtfpl")
        notes = config.fallbacks()
        assert "test framework 'gtest' treated as catch2" in notes
        assert "license 'wtfpl' treated as none" in notes

    @pytest.mark.unit
    def test_no_fallbacks_for_valid_config(self):
        config = ProjectConfig(project_name="x", language="c", test_framework="unity")
        assert config.fallbacks() == []


# ---------------------------------------------------------------------------
# Presets
# ---------------------------------------------------------------------------


class TestPresets:
    @pytest.mark.unit
    def test_full_enables_everything(self):
        config = ProjectConfig(project_name="x").with_preset("full")
        assert all(config.toggles().values())
        assert config.test_framework == "googletest"

    @pytest.mark.unit
    def test_full_c_upgrades_to_unity(self):
        config = ProjectConfig(project_name="x", language="c").with_preset("full")
        assert config.test_framework == "unity"

    @pytest.mark.unit
    def test_full_keeps_chosen_framework(self):
        config = ProjectConfig(project_name="x", test_framework="doctest").with_preset("full")
        assert config.test_framework == "doctest"

    @pytest.mark.unit
    def test_minimal_disables_everything(self):
        config = ProjectConfig(
            project_name="x", include_ci=True, test_framework="catch2"
        ).with_preset("minimal")
        assert not any(config.toggles().values())
        assert config.test_framework == "catch2"

    @pytest.mark.unit
    def test_preset_returns_new_instance(self):
        base = ProjectConfig(project_name="x")
        assert base.with_preset("full") is not base
        assert base.use_docker is False


# ---------------------------------------------------------------------------
# Project name validation
# ---------------------------------------------------------------------------


class TestValidateProjectName:
    @pytest.mark.unit
    @pytest.mark.parametrize("name", ["myapp", "my-lib", "my_lib2", "3d"])
    def test_valid(self, name):
        assert validate_project_name(name) == name

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "name",
        ["", "my app", "a/b", "a\\b", "c:d", "x*", "q?", 'say"hi', "<x>", "a|b", ".hidden", "-flag"],
    )
    def test_invalid(self, name):
        with pytest.raises(ProjectNameError):
            validate_project_name(name)

    @pytest.mark.unit
    def test_error_hierarchy(self):
        with pytest.raises(ScaffoldError):
            validate_project_name("")
        with pytest.raises(ValueError):
            validate_project_name("")
