"""Interactive project wizard.

Four pages of rich prompts collect the same choices the command-line flags
expose.  Answers are gathered into a plain dict; the immutable
``ProjectConfig`` is only built once every page has been answered.
"""

from __future__ import annotations

import getpass
from pathlib import Path
from typing import Any

from rich.prompt import Confirm, Prompt

from cppinit.config import (
    DEFAULT_STANDARD,
    STANDARDS,
    TEST_FRAMEWORKS,
    Language,
    License,
    PackageManager,
    ProjectConfig,
    ProjectType,
    resolve_language,
    validate_project_name,
)
from cppinit.errors import ProjectNameError
from cppinit.utils import console, print_error, print_header


def _default_author() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return ""


def _ask_project_name(default: str) -> str:
    """Ask until the answer passes :func:`validate_project_name`."""
    while True:
        name = Prompt.ask("Project name", default=default, console=console)
        try:
            return validate_project_name(name.strip())
        except ProjectNameError as exc:
            print_error(str(exc))


# ---------------------------------------------------------------------------
# Pages
# ---------------------------------------------------------------------------


def _basics_page(answers: dict[str, Any]) -> None:
    console.rule("Project Basics")
    answers["project_name"] = _ask_project_name(Path.cwd().name)
    answers["description"] = Prompt.ask(
        "Description", default="", show_default=False, console=console
    )
    answers["author_name"] = Prompt.ask(
        "Author name", default=_default_author(), console=console
    )
    answers["language"] = Prompt.ask(
        "Language",
        choices=[Language.CPP.value, Language.C.value],
        default=Language.CPP.value,
        console=console,
    )
    language = resolve_language(answers["language"])
    answers["standard"] = Prompt.ask(
        f"{'C' if language is Language.C else 'C++'} standard",
        choices=list(STANDARDS[language]),
        default=DEFAULT_STANDARD[language],
        console=console,
    )
    answers["project_type"] = Prompt.ask(
        "Project type",
        choices=[t.value for t in ProjectType],
        default=ProjectType.EXECUTABLE.value,
        console=console,
    )


def _dependencies_page(answers: dict[str, Any]) -> None:
    console.rule("Dependencies & Testing")
    language = resolve_language(answers["language"])
    answers["package_manager"] = Prompt.ask(
        "Package manager",
        choices=[p.value for p in PackageManager],
        default=PackageManager.NONE.value,
        console=console,
    )
    answers["test_framework"] = Prompt.ask(
        "Testing framework",
        choices=[f.value for f in TEST_FRAMEWORKS[language]],
        default=TEST_FRAMEWORKS[language][0].value,
        console=console,
    )
    answers["include_benchmark"] = Confirm.ask(
        "Include Google Benchmark?", default=False, console=console
    )


def _code_quality_page(answers: dict[str, Any]) -> None:
    console.rule("Code Quality")
    questions = (
        ("use_clang_format", "clang-format (code formatting)?", True),
        ("use_clang_tidy", "clang-tidy (static analysis)?", True),
        ("use_sanitizers", "Sanitizers (ASan, UBSan, TSan)?", False),
        ("use_coverage", "Code coverage (gcov/lcov)?", False),
        ("use_doxygen", "Doxygen (documentation)?", False),
        ("use_pre_commit", "pre-commit hooks?", False),
    )
    for field, question, default in questions:
        answers[field] = Confirm.ask(question, default=default, console=console)


def _devops_page(answers: dict[str, Any]) -> None:
    console.rule("DevOps & IDE")
    answers["license"] = Prompt.ask(
        "License",
        choices=[lic.value for lic in License],
        default=License.MIT.value,
        console=console,
    )
    answers["include_ci"] = Confirm.ask(
        "Include GitHub Actions CI?", default=False, console=console
    )
    answers["include_vscode"] = Confirm.ask(
        "Include VSCode configuration?", default=False, console=console
    )
    answers["use_docker"] = Confirm.ask(
        "Include Docker support?", default=False, console=console
    )


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def run_prompts() -> ProjectConfig:
    """Run the wizard and return the resulting configuration.

    Raises:
        KeyboardInterrupt: If the user aborts with Ctrl-C.
        EOFError: If stdin closes mid-session.
    """
    print_header(
        "Create C/C++ Project",
        "Configure your new C/C++ project with modern CMake",
    )
    answers: dict[str, Any] = {}
    for page in (_basics_page, _dependencies_page, _code_quality_page, _devops_page):
        page(answers)
        console.print()
    answers["output_dir"] = Path(answers["project_name"])
    return ProjectConfig(**answers)
