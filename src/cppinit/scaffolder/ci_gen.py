"""GitHub Actions workflow and Dependabot configuration."""

from __future__ import annotations

from typing import Any

from .templates import TemplateRenderer


class CIGenerator:
    """Generates ``.github/workflows/ci.yml`` and ``.github/dependabot.yml``.

    The workflow always has build and lint jobs; test, sanitizer and
    coverage jobs appear only when the project has the matching setup, so
    the workflow never references a preset that does not exist.
    """

    _FILES: dict[str, str] = {
        ".github/workflows/ci.yml": "ci/ci.yml.j2",
        ".github/dependabot.yml": "ci/dependabot.yml.j2",
    }

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def generate(self, context: dict[str, Any]) -> dict[str, str]:
        return self.renderer.render_many(self._FILES, context)
