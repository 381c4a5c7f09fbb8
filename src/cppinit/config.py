"""cppinit configuration model.

A single immutable ``ProjectConfig`` holds every user decision that drives
generation.  Enumerated choices are stored as the raw strings supplied by
the caller; the ``resolve_*`` helpers map them onto closed enumerations,
routing anything unrecognised to one documented default so the planner never
has to guess.
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from cppinit.errors import ProjectNameError


# ---------------------------------------------------------------------------
# Closed enumerations
# ---------------------------------------------------------------------------


class Language(str, Enum):
    C = "c"
    CPP = "c++"


class ProjectType(str, Enum):
    EXECUTABLE = "executable"
    STATIC = "static"
    HEADER_ONLY = "header-only"


class TestFramework(str, Enum):
    __test__ = False  # not a pytest class

    NONE = "none"
    GOOGLETEST = "googletest"
    CATCH2 = "catch2"
    DOCTEST = "doctest"
    UNITY = "unity"


class PackageManager(str, Enum):
    NONE = "none"
    VCPKG = "vcpkg"
    CONAN = "conan"
    CPM = "cpm"


class License(str, Enum):
    NONE = "none"
    MIT = "mit"
    APACHE2 = "apache2"
    GPL3 = "gpl3"
    BSD3 = "bsd3"


class Preset(str, Enum):
    FULL = "full"
    MINIMAL = "minimal"


STANDARDS: dict[Language, tuple[str, ...]] = {
    Language.C: ("89", "99", "11", "17", "23"),
    Language.CPP: ("11", "14", "17", "20", "23"),
}

DEFAULT_STANDARD: dict[Language, str] = {
    Language.C: "11",
    Language.CPP: "17",
}

DEFAULT_DESCRIPTION: dict[Language, str] = {
    Language.C: "A modern C project",
    Language.CPP: "A modern C++ project",
}

TEST_FRAMEWORKS: dict[Language, tuple[TestFramework, ...]] = {
    Language.CPP: (
        TestFramework.NONE,
        TestFramework.GOOGLETEST,
        TestFramework.CATCH2,
        TestFramework.DOCTEST,
    ),
    Language.C: (TestFramework.NONE, TestFramework.UNITY),
}

# Framework used for an unrecognised value, and the one ``full`` upgrades to.
FALLBACK_TEST_FRAMEWORK: dict[Language, TestFramework] = {
    Language.CPP: TestFramework.CATCH2,
    Language.C: TestFramework.UNITY,
}

PRESET_TEST_FRAMEWORK: dict[Language, TestFramework] = {
    Language.CPP: TestFramework.GOOGLETEST,
    Language.C: TestFramework.UNITY,
}

TOGGLES: tuple[str, ...] = (
    "use_clang_format",
    "use_clang_tidy",
    "use_sanitizers",
    "use_coverage",
    "use_doxygen",
    "use_docker",
    "use_pre_commit",
    "include_ci",
    "include_vscode",
    "include_benchmark",
)

LICENSE_NAMES: dict[License, str] = {
    License.MIT: "MIT",
    License.APACHE2: "Apache 2.0",
    License.GPL3: "GPL 3.0",
    License.BSD3: "BSD 3-Clause",
}

FORBIDDEN_NAME_CHARS = ' /\\:*?"<>|'


# ---------------------------------------------------------------------------
# Resolution of raw strings onto the enumerations
# ---------------------------------------------------------------------------


def resolve_language(value: str) -> Language:
    """Anything other than ``c`` is treated as C++."""
    return Language.C if value.strip().lower() == Language.C.value else Language.CPP


def resolve_project_type(value: str) -> ProjectType:
    """Unknown project types fall back to ``executable``."""
    try:
        return ProjectType(value.strip().lower())
    except ValueError:
        return ProjectType.EXECUTABLE


def resolve_test_framework(value: str, language: Language) -> TestFramework:
    """Map *value* onto a framework valid for *language*.

    A framework that only exists for the other language is ignored
    (``none``); a value nobody recognises falls back to the language's
    default framework (Catch2 for C++, Unity for C).
    """
    try:
        framework = TestFramework(value.strip().lower())
    except ValueError:
        return FALLBACK_TEST_FRAMEWORK[language]
    if framework in TEST_FRAMEWORKS[language]:
        return framework
    return TestFramework.NONE


def resolve_package_manager(value: str) -> PackageManager:
    try:
        return PackageManager(value.strip().lower())
    except ValueError:
        return PackageManager.NONE


def resolve_license(value: str) -> License:
    try:
        return License(value.strip().lower())
    except ValueError:
        return License.NONE


# ---------------------------------------------------------------------------
# Project name validation
# ---------------------------------------------------------------------------


def validate_project_name(name: str) -> str:
    """Return *name* unchanged if it is safe to use as a directory and symbol.

    Raises:
        ProjectNameError: If the name is empty, contains a path separator or
            shell-special character, or starts with ``.`` or ``-``.
    """
    if not name:
        raise ProjectNameError("project name cannot be empty")
    if any(ch in FORBIDDEN_NAME_CHARS for ch in name):
        raise ProjectNameError("project name cannot contain special characters")
    if name.startswith((".", "-")):
        raise ProjectNameError("project name cannot start with . or -")
    return name


# ---------------------------------------------------------------------------
# Configuration model
# ---------------------------------------------------------------------------


class ProjectConfig(BaseModel):
    """Every user decision needed to scaffold one project.

    Instances are frozen: presets and overrides produce a new config through
    :meth:`with_preset` or ``model_copy``.
    """

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(..., description="Directory name and CMake target name")
    description: str = Field(default="", description="Short project description")
    author_name: str = Field(default="", description="Copyright holder in the LICENSE")
    language: str = Field(default=Language.CPP.value, description="c or c++")
    standard: str = Field(default="", description="Language standard, e.g. 17 or 11")
    project_type: str = Field(default=ProjectType.EXECUTABLE.value)
    test_framework: str = Field(default=TestFramework.NONE.value)
    package_manager: str = Field(default=PackageManager.NONE.value)
    license: str = Field(default=License.MIT.value)

    use_clang_format: bool = True
    use_clang_tidy: bool = True
    use_sanitizers: bool = False
    use_coverage: bool = False
    use_doxygen: bool = False
    use_docker: bool = False
    use_pre_commit: bool = False
    include_ci: bool = False
    include_vscode: bool = False
    include_benchmark: bool = False

    output_dir: Path = Field(default=Path("."), description="Root of the generated tree")
    year: str = Field(default="", description="Copyright year used in the LICENSE")

    @model_validator(mode="before")
    @classmethod
    def _fill_defaults(cls, data: Any) -> Any:
        """Fill language-dependent and derived defaults.

        Every default is computed from the caller-supplied values only, so
        the result does not depend on the order fields are visited in.
        """
        if not isinstance(data, dict):
            return data
        values = dict(data)
        language = resolve_language(str(values.get("language") or Language.CPP.value))
        if not values.get("standard"):
            values["standard"] = DEFAULT_STANDARD[language]
        if not values.get("description"):
            values["description"] = DEFAULT_DESCRIPTION[language]
        if not values.get("output_dir"):
            values["output_dir"] = Path(str(values.get("project_name", "")))
        if not values.get("year"):
            values["year"] = str(date.today().year)
        return values

    # -- Resolved views ----------------------------------------------------

    @property
    def resolved_language(self) -> Language:
        return resolve_language(self.language)

    @property
    def resolved_project_type(self) -> ProjectType:
        return resolve_project_type(self.project_type)

    @property
    def resolved_test_framework(self) -> TestFramework:
        return resolve_test_framework(self.test_framework, self.resolved_language)

    @property
    def resolved_package_manager(self) -> PackageManager:
        return resolve_package_manager(self.package_manager)

    @property
    def resolved_license(self) -> License:
        return resolve_license(self.license)

    def toggles(self) -> dict[str, bool]:
        """Return the ten feature toggles as a ``{field: value}`` mapping."""
        return {name: getattr(self, name) for name in TOGGLES}

    def fallbacks(self) -> list[str]:
        """Describe every enumerated value that was routed to a default."""
        notes: list[str] = []
        language = self.resolved_language
        if self.language.strip().lower() != language.value:
            notes.append(f"language {self.language!r} treated as {language.value}")
        checks = [
            ("project type", self.project_type, self.resolved_project_type.value),
            ("test framework", self.test_framework, self.resolved_test_framework.value),
            ("package manager", self.package_manager, self.resolved_package_manager.value),
            ("license", self.license, self.resolved_license.value),
        ]
        for label, raw, resolved in checks:
            if raw.strip().lower() != resolved:
                notes.append(f"{label} {raw!r} treated as {resolved}")
        return notes

    # -- Presets -----------------------------------------------------------

    def with_preset(self, preset: Preset | str) -> "ProjectConfig":
        """Return a copy with *preset* applied as a total toggle override.

        ``full`` turns every toggle on and upgrades a ``none`` test framework
        to the language default; ``minimal`` turns every toggle off and
        leaves the test framework untouched.
        """
        preset = Preset(preset)
        enabled = preset is Preset.FULL
        update: dict[str, Any] = {name: enabled for name in TOGGLES}
        if enabled and self.resolved_test_framework is TestFramework.NONE:
            update["test_framework"] = PRESET_TEST_FRAMEWORK[self.resolved_language].value
        return self.model_copy(update=update)
