"""Shared pytest fixtures for the cppinit test suite.

Provides reusable fixtures for:
- Temporary output directories
- A shared TemplateRenderer
- Configurations for the reference scenarios
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest

from cppinit.config import ProjectConfig
from cppinit.scaffolder.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_project_dir(tmp_path: Path) -> Path:
    """Destination directory for a generated project (not yet created)."""
    return tmp_path / "generated"


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

@pytest.fixture(scope="session")
def renderer() -> TemplateRenderer:
    """A TemplateRenderer over the packaged templates."""
    return TemplateRenderer()


# ---------------------------------------------------------------------------
# Configurations
# ---------------------------------------------------------------------------

@pytest.fixture
def make_config() -> Callable[..., ProjectConfig]:
    """Factory for configs with every toggle off unless overridden.

    ``year`` is pinned so rendered output is comparable across runs.
    """

    def _make(**overrides: Any) -> ProjectConfig:
        values: dict[str, Any] = {
            "project_name": "demo",
            "author_name": "Jane Doe",
            "year": "2024",
            "use_clang_format": False,
            "use_clang_tidy": False,
        }
        values.update(overrides)
        return ProjectConfig(**values)

    return _make


@pytest.fixture
def minimal_executable_config() -> ProjectConfig:
    """``myapp``: C++17 executable, no tests, default toggles, MIT."""
    return ProjectConfig(
        project_name="myapp",
        language="c++",
        standard="17",
        project_type="executable",
        test_framework="none",
        package_manager="none",
        license="mit",
        author_name="Jane Doe",
        year="2024",
    )


@pytest.fixture
def full_library_config() -> ProjectConfig:
    """``mylib``: static library, googletest, full preset."""
    return ProjectConfig(
        project_name="mylib",
        project_type="static",
        test_framework="googletest",
        author_name="Jane Doe",
        year="2024",
    ).with_preset("full")


@pytest.fixture
def header_only_config() -> ProjectConfig:
    """``myheader``: header-only library, minimal preset."""
    return ProjectConfig(
        project_name="myheader",
        project_type="header-only",
        year="2024",
    ).with_preset("minimal")
