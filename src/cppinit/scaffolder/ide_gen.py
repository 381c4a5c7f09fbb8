"""VS Code workspace configuration."""

from __future__ import annotations

from typing import Any

from .templates import TemplateRenderer


class VSCodeGenerator:
    """Generates ``.vscode/`` settings, extensions, launch and tasks files."""

    _FILES: dict[str, str] = {
        ".vscode/settings.json": "vscode/settings.json.j2",
        ".vscode/extensions.json": "vscode/extensions.json.j2",
        ".vscode/launch.json": "vscode/launch.json.j2",
        ".vscode/tasks.json": "vscode/tasks.json.j2",
    }

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def generate(self, context: dict[str, Any]) -> dict[str, str]:
        return self.renderer.render_many(self._FILES, context)
