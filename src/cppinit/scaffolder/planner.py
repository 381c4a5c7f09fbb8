"""File-set planning.

``plan_project`` turns a :class:`~cppinit.config.ProjectConfig` into a
:class:`ProjectPlan`: the directories to create and the ``{path: content}``
mapping of files to write.  Planning is pure; nothing here touches the
filesystem except for reading templates.

Which files appear is decided by a flat table of :class:`EmissionRule`
entries.  Each rule has a predicate over the shared render context and an
emitter returning its own files; rules are evaluated independently and in
table order, so adding a feature means adding a row.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import partial
from typing import Any, Callable

from cppinit.config import (
    LICENSE_NAMES,
    Language,
    License,
    PackageManager,
    ProjectConfig,
    ProjectType,
    TestFramework,
)
from cppinit.utils import to_identifier

from .ci_gen import CIGenerator
from .cmake_gen import CMakeGenerator
from .docker_gen import DockerGenerator
from .ide_gen import VSCodeGenerator
from .source_gen import SourceGenerator
from .templates import TemplateRenderer
from .tooling_gen import ToolingGenerator

Context = dict[str, Any]
Predicate = Callable[[Context], bool]
Emitter = Callable[[Context], dict[str, str]]


# ---------------------------------------------------------------------------
# Plan data structures
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class EmissionRule:
    """One row of the planning table."""

    name: str
    predicate: Predicate
    emit: Emitter


@dataclass(frozen=True)
class ProjectPlan:
    """Everything a materializer needs to write a project.

    Attributes:
        directories: Relative directory paths, in creation order.
        files: Relative file path -> rendered content, in emission order.
    """

    directories: tuple[str, ...]
    files: dict[str, str] = field(default_factory=dict)

    def paths(self) -> list[str]:
        """Return the planned file paths sorted alphabetically."""
        return sorted(self.files)


# ---------------------------------------------------------------------------
# Render context
# ---------------------------------------------------------------------------

_VCPKG_PACKAGES: dict[TestFramework, str] = {
    TestFramework.GOOGLETEST: "gtest",
    TestFramework.CATCH2: "catch2",
    TestFramework.DOCTEST: "doctest",
}

_CONAN_PACKAGES: dict[TestFramework, str] = {
    TestFramework.GOOGLETEST: "gtest/1.14.0",
    TestFramework.CATCH2: "catch2/3.5.2",
    TestFramework.DOCTEST: "doctest/2.4.11",
}

_SOURCE_GLOBS: dict[Language, str] = {
    Language.CPP: "-name '*.cpp' -o -name '*.hpp' -o -name '*.h'",
    Language.C: "-name '*.c' -o -name '*.h'",
}


def build_context(config: ProjectConfig) -> Context:
    """Build the single render context shared by every emitter.

    Every enumerated value is resolved here, once, so that templates only
    ever see members of the closed enumerations.
    """
    language = config.resolved_language
    project_type = config.resolved_project_type
    framework = config.resolved_test_framework
    license_ = config.resolved_license
    is_c = language is Language.C

    name = config.project_name
    symbol = to_identifier(name)
    src_ext, hdr_ext = ("c", "h") if is_c else ("cpp", "hpp")
    compiler_id = "CMAKE_C_COMPILER_ID" if is_c else "CMAKE_CXX_COMPILER_ID"
    source_globs = _SOURCE_GLOBS[language]

    context: Context = {
        "project_name": name,
        "description": config.description,
        "author_name": config.author_name,
        "year": config.year,
        # Language
        "language": language.value,
        "is_c": is_c,
        "lang_label": "C" if is_c else "C++",
        "cmake_lang": "C" if is_c else "CXX",
        "standard": config.standard,
        "compiler_id": compiler_id,
        "compiler_id_ref": "${" + compiler_id + "}",
        "src_ext": src_ext,
        "hdr_ext": hdr_ext,
        # Project shape
        "project_type": project_type.value,
        "is_executable": project_type is ProjectType.EXECUTABLE,
        "is_library": project_type is not ProjectType.EXECUTABLE,
        "test_framework": framework.value,
        "has_tests": framework is not TestFramework.NONE,
        "test_source": "test_main.c" if is_c else "test_main.cpp",
        "has_benchmarks": (
            config.include_benchmark and project_type is not ProjectType.EXECUTABLE
        ),
        "package_manager": config.resolved_package_manager.value,
        "vcpkg_dependency": _VCPKG_PACKAGES.get(framework, ""),
        "conan_dependency": _CONAN_PACKAGES.get(framework, ""),
        "license": license_.value,
        "license_name": LICENSE_NAMES.get(license_, ""),
        # Shared identifiers
        "symbol": symbol,
        "api_function": f"{symbol}_add" if is_c else f"{symbol}::add",
        "header_path": f"{name}/{name}.{hdr_ext}",
        "source_globs": source_globs,
        "format_command": (
            f"find src include tests {source_globs} | xargs clang-format -i"
        ),
    }
    context.update(config.toggles())
    return context


# ---------------------------------------------------------------------------
# Directory rules
# ---------------------------------------------------------------------------


def _directories(context: Context) -> tuple[str, ...]:
    rules: list[tuple[str, bool]] = [
        ("src", True),
        (f"include/{context['project_name']}", True),
        ("cmake", True),
        ("tests", context["has_tests"]),
        ("benchmarks", context["has_benchmarks"]),
        (".vscode", context["include_vscode"]),
        (".devcontainer", context["use_docker"]),
        (".github/workflows", context["include_ci"]),
    ]
    return tuple(path for path, wanted in rules if wanted)


# ---------------------------------------------------------------------------
# ProjectPlanner
# ---------------------------------------------------------------------------


def _always(context: Context) -> bool:
    return True


def _flag(key: str) -> Predicate:
    return lambda context: bool(context[key])


def _equals(key: str, value: str) -> Predicate:
    return lambda context: context[key] == value


class ProjectPlanner:
    """Evaluates the emission table against one configuration."""

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.rules = self._build_rules()

    def _build_rules(self) -> tuple[EmissionRule, ...]:
        cmake = CMakeGenerator(self.renderer)
        sources = SourceGenerator(self.renderer)
        tooling = ToolingGenerator(self.renderer)
        vscode = VSCodeGenerator(self.renderer)
        docker = DockerGenerator(self.renderer)
        ci = CIGenerator(self.renderer)

        return (
            EmissionRule("cmake-root", _always, cmake.root),
            EmissionRule("compiler-warnings", _always, partial(cmake.module, "warnings")),
            EmissionRule("cmake-presets", _always, cmake.presets),
            EmissionRule("sources", _always, sources.sources),
            EmissionRule("sanitizers", _flag("use_sanitizers"), partial(cmake.module, "sanitizers")),
            EmissionRule("coverage", _flag("use_coverage"), partial(cmake.module, "coverage")),
            EmissionRule(
                "static-analysis",
                _flag("use_clang_tidy"),
                partial(cmake.module, "static_analysis"),
            ),
            EmissionRule("doxygen", _flag("use_doxygen"), partial(cmake.module, "doxygen")),
            EmissionRule(
                "cpm",
                _equals("package_manager", PackageManager.CPM.value),
                partial(cmake.module, "cpm"),
            ),
            EmissionRule("tests", _flag("has_tests"), sources.tests),
            EmissionRule("benchmarks", _flag("has_benchmarks"), sources.benchmarks),
            EmissionRule(
                "vcpkg",
                _equals("package_manager", PackageManager.VCPKG.value),
                sources.vcpkg_manifest,
            ),
            EmissionRule(
                "conan",
                _equals("package_manager", PackageManager.CONAN.value),
                sources.conan_manifest,
            ),
            EmissionRule("clang-format", _flag("use_clang_format"), tooling.clang_format),
            EmissionRule("clang-tidy", _flag("use_clang_tidy"), tooling.clang_tidy),
            EmissionRule("editorconfig", _always, tooling.editorconfig),
            EmissionRule("gitignore", _always, tooling.gitignore),
            EmissionRule("readme", _always, tooling.readme),
            EmissionRule(
                "license",
                lambda context: context["license"] != License.NONE.value,
                tooling.license,
            ),
            EmissionRule("vscode", _flag("include_vscode"), vscode.generate),
            EmissionRule("docker", _flag("use_docker"), docker.generate),
            EmissionRule("pre-commit", _flag("use_pre_commit"), tooling.pre_commit),
            EmissionRule("ci", _flag("include_ci"), ci.generate),
        )

    def plan(self, config: ProjectConfig) -> ProjectPlan:
        """Plan the full file set for *config*.

        Never raises for a valid :class:`ProjectConfig`; unrecognised
        enumerated values were already resolved to their defaults.
        """
        context = build_context(config)
        files: dict[str, str] = {}
        for rule in self.rules:
            if rule.predicate(context):
                files.update(rule.emit(context))
        return ProjectPlan(directories=_directories(context), files=files)


def plan_project(
    config: ProjectConfig, renderer: TemplateRenderer | None = None
) -> ProjectPlan:
    """Convenience wrapper: ``ProjectPlanner(renderer).plan(config)``."""
    return ProjectPlanner(renderer).plan(config)
