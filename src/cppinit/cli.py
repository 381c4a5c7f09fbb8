"""Command-line entry point for cppinit.

``cppinit -name <name> [options]`` generates a project non-interactively;
plain ``cppinit`` runs the interactive wizard.  Options use the single-dash
long form (``-name``, ``-lang``) and also accept ``--name``, ``--lang``.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from cppinit import __version__
from cppinit.config import Preset, ProjectConfig, validate_project_name
from cppinit.errors import ScaffoldError
from cppinit.scaffolder import ProjectGenerator
from cppinit.utils import (
    console,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)

EPILOG = (
    "Examples:\n"
    "  cppinit\n"
    "  cppinit -name myapp\n"
    "  cppinit -name mylib -type static -tests googletest -pkg vcpkg\n"
    "  cppinit -name myheader -type header-only -tests catch2 -minimal\n"
    "  cppinit -name myproject -full\n"
    "  cppinit -name clib -lang c -std 99 -type static -tests unity\n"
)

# Toggle flag -> (config field, default, help)
_TOGGLE_FLAGS: tuple[tuple[str, str, bool, str], ...] = (
    ("clang-format", "use_clang_format", True, "Include clang-format config (default: on)"),
    ("clang-tidy", "use_clang_tidy", True, "Include clang-tidy config (default: on)"),
    ("sanitizers", "use_sanitizers", False, "Include Address/UB/Thread sanitizers"),
    ("coverage", "use_coverage", False, "Include code coverage support"),
    ("doxygen", "use_doxygen", False, "Include Doxygen documentation setup"),
    ("docker", "use_docker", False, "Include Dockerfile and devcontainer"),
    ("precommit", "use_pre_commit", False, "Include pre-commit hooks"),
    ("ci", "include_ci", False, "Include GitHub Actions CI"),
    ("vscode", "include_vscode", False, "Include VSCode configuration"),
    ("benchmark", "include_benchmark", False, "Include Google Benchmark"),
)


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cppinit",
        description="cppinit -- create C/C++ projects with modern CMake",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EPILOG,
        add_help=False,
        allow_abbrev=False,
    )

    project = parser.add_argument_group("Project options")
    project.add_argument(
        "-name", "--name",
        default=None,
        help="Project name (enables non-interactive mode)",
    )
    project.add_argument("-desc", "--desc", default="", help="Project description")
    project.add_argument("-author", "--author", default="", help="Author name for the license")
    project.add_argument("-lang", "--lang", default="c++", help="Language: c, c++ (default: c++)")
    project.add_argument(
        "-std", "--std",
        default="",
        help="Standard (C: 89, 99, 11, 17, 23 | C++: 11, 14, 17, 20, 23); "
        "defaults to C11 for C, C++17 for C++",
    )
    project.add_argument(
        "-type", "--type",
        dest="project_type",
        default="executable",
        help="Project type: executable, static, header-only (default: executable)",
    )
    project.add_argument(
        "-license", "--license",
        default="mit",
        help="License: none, mit, apache2, gpl3, bsd3 (default: mit)",
    )
    project.add_argument(
        "-output", "--output",
        default=None,
        help="Output directory (default: the project name)",
    )

    deps = parser.add_argument_group("Dependencies")
    deps.add_argument(
        "-tests", "--tests",
        default="none",
        help="Test framework: none, googletest, catch2, doctest (C++); none, unity (C)",
    )
    deps.add_argument(
        "-pkg", "--pkg",
        default="none",
        help="Package manager: none, vcpkg, conan, cpm (default: none)",
    )

    features = parser.add_argument_group("Features")
    for flag, dest, default, help_text in _TOGGLE_FLAGS:
        if default:
            features.add_argument(
                f"-{flag}", f"--{flag}",
                dest=dest,
                action=argparse.BooleanOptionalAction,
                default=True,
                help=help_text,
            )
        else:
            features.add_argument(
                f"-{flag}", f"--{flag}", dest=dest, action="store_true", help=help_text
            )

    presets = parser.add_argument_group("Presets")
    presets.add_argument(
        "-full", "--full",
        action="store_true",
        help="Enable every feature; upgrades -tests none to the language default",
    )
    presets.add_argument(
        "-minimal", "--minimal",
        action="store_true",
        help="Minimal project with no extra tooling",
    )

    other = parser.add_argument_group("Other")
    other.add_argument("-version", "--version", action="store_true", help="Show version")
    other.add_argument(
        "-h", "-help", "--help", action="help", help="Show this help message"
    )
    return parser


def config_from_args(args: argparse.Namespace) -> ProjectConfig:
    """Build a ``ProjectConfig`` from parsed flags.

    Raises:
        ProjectNameError: If ``-name`` is not a valid project name.
    """
    name = validate_project_name(args.name)
    values = {
        "project_name": name,
        "description": args.desc,
        "author_name": args.author,
        "language": args.lang,
        "standard": args.std,
        "project_type": args.project_type,
        "test_framework": args.tests,
        "package_manager": args.pkg,
        "license": args.license,
        "output_dir": Path(args.output) if args.output else Path(name),
    }
    for _, dest, _, _ in _TOGGLE_FLAGS:
        values[dest] = getattr(args, dest)

    config = ProjectConfig(**values)
    if args.full:
        config = config.with_preset(Preset.FULL)
    elif args.minimal:
        config = config.with_preset(Preset.MINIMAL)
    return config


# ---------------------------------------------------------------------------
# Success report
# ---------------------------------------------------------------------------


def print_next_steps(config: ProjectConfig, project_root: Path, file_count: int) -> None:
    """Print what was generated and the commands to build it."""
    framework = config.resolved_test_framework.value
    package_manager = config.resolved_package_manager.value
    lang_label = "C" if config.resolved_language.value == "c" else "C++"

    console.print()
    print_success("Project created successfully!")
    console.print()
    print_summary_table(
        {
            "Project": config.project_name,
            "Location": str(project_root),
            "Language": f"{lang_label}{config.standard}",
            "Type": config.resolved_project_type.value,
            "Tests": framework,
            "Package manager": package_manager,
            "License": config.resolved_license.value,
            "Files": str(file_count),
        },
        title="Created project",
    )
    features = [
        (config.use_clang_format, "clang-format"),
        (config.use_clang_tidy, "clang-tidy"),
        (config.use_sanitizers, "Address/UB/Thread sanitizers"),
        (config.use_coverage, "Code coverage"),
        (config.include_ci, "GitHub Actions CI"),
        (config.use_docker, "Docker & devcontainer"),
    ]
    enabled_features = [label for enabled, label in features if enabled]
    if enabled_features:
        console.print("Features:")
        for label in enabled_features:
            console.print(f"  - {label}")

    console.print()
    console.print("Next steps:")
    console.print()
    console.print(f"  [bold cyan]cd {project_root}[/bold cyan]")
    console.print()
    console.print("  # Configure and build")
    console.print("  cmake --preset debug")
    console.print("  cmake --build --preset debug")
    console.print()
    if framework != "none":
        console.print("  # Run tests")
        console.print("  ctest --preset debug")
        console.print()
    if config.use_sanitizers:
        console.print("  # Run with sanitizers")
        console.print("  cmake --preset asan && cmake --build --preset asan")
        console.print()
    if config.use_pre_commit:
        console.print("  # Setup pre-commit hooks")
        console.print("  pip install pre-commit && pre-commit install")
        console.print()
    if config.use_docker and config.resolved_project_type.value == "executable":
        console.print("  # Or use Docker")
        console.print(f"  docker build -t {config.project_name} .")
        console.print()
    console.print("[dim]Happy coding![/dim]")


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: Sequence[str] | None = None) -> int:
    """Run cppinit and return the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        console.print(f"cppinit {__version__}")
        return 0

    if args.full and args.minimal:
        print_error("-full and -minimal cannot be used together")
        return 1

    try:
        if args.name is not None:
            config = config_from_args(args)
        else:
            # Imported lazily: the wizard is only needed without -name.
            from cppinit.prompts import run_prompts

            config = run_prompts()
            if args.output:
                config = config.model_copy(update={"output_dir": Path(args.output)})
    except ScaffoldError as exc:
        print_error(str(exc))
        return 1
    except (KeyboardInterrupt, EOFError):
        print_error("aborted")
        return 1

    for note in config.fallbacks():
        print_warning(note)

    try:
        generator = ProjectGenerator(config)
        project_root = generator.generate()
    except ScaffoldError as exc:
        print_error(str(exc))
        return 1

    print_next_steps(config, project_root, len(generator.written))
    return 0


if __name__ == "__main__":
    sys.exit(main())
