"""Main scaffolding orchestrator.

Takes a ``ProjectConfig`` and produces a ready-to-build CMake project:
plan the file set, then write it under the configured output directory.
"""

from __future__ import annotations

from pathlib import Path

from cppinit.config import ProjectConfig

from .materializer import materialize
from .planner import ProjectPlan, ProjectPlanner
from .templates import TemplateRenderer


class ProjectGenerator:
    """Plans and writes a complete project for one configuration.

    The generated tree contains:
    - CMakeLists.txt, CMakePresets.json and helper modules under cmake/
    - source and header stubs for the project type and language
    - test and benchmark scaffolding when enabled
    - tooling dotfiles, README and LICENSE
    - optional VS Code, Docker, pre-commit and GitHub Actions files
    """

    def __init__(
        self, config: ProjectConfig, renderer: TemplateRenderer | None = None
    ) -> None:
        self.config = config
        self.planner = ProjectPlanner(renderer)
        self.written: list[Path] = []

    # -- Public API --------------------------------------------------------

    def plan(self) -> ProjectPlan:
        """Return the file plan without touching the filesystem."""
        return self.planner.plan(self.config)

    def generate(self, output_dir: str | Path | None = None) -> Path:
        """Generate the project and return its root directory.

        Args:
            output_dir: Where to write the project.  Defaults to
                ``config.output_dir``.

        Raises:
            MaterializeError: If a directory or file cannot be written.
        """
        project_root = Path(output_dir) if output_dir is not None else self.config.output_dir
        self.written = materialize(self.plan(), project_root)
        return project_root
