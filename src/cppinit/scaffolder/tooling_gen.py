"""Repository tooling and documentation files.

Covers dotfiles (``.clang-format``, ``.clang-tidy``, ``.editorconfig``,
``.gitignore``, ``.pre-commit-config.yaml``), the README and the LICENSE.
Template names carry no leading dot; the dot is added on output.
"""

from __future__ import annotations

from typing import Any

from .templates import TemplateRenderer


class ToolingGenerator:
    """Renders tooling configuration, README and LICENSE."""

    # License value -> template path
    _LICENSES: dict[str, str] = {
        "mit": "licenses/mit.j2",
        "apache2": "licenses/apache2.j2",
        "gpl3": "licenses/gpl3.j2",
        "bsd3": "licenses/bsd3.j2",
    }

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def clang_format(self, context: dict[str, Any]) -> dict[str, str]:
        return {".clang-format": self.renderer.render("tooling/clang-format.j2", context)}

    def clang_tidy(self, context: dict[str, Any]) -> dict[str, str]:
        return {".clang-tidy": self.renderer.render("tooling/clang-tidy.j2", context)}

    def editorconfig(self, context: dict[str, Any]) -> dict[str, str]:
        return {".editorconfig": self.renderer.render("tooling/editorconfig.j2", context)}

    def gitignore(self, context: dict[str, Any]) -> dict[str, str]:
        return {".gitignore": self.renderer.render("tooling/gitignore.j2", context)}

    def pre_commit(self, context: dict[str, Any]) -> dict[str, str]:
        return {
            ".pre-commit-config.yaml": self.renderer.render(
                "tooling/pre-commit-config.yaml.j2", context
            )
        }

    def readme(self, context: dict[str, Any]) -> dict[str, str]:
        return {"README.md": self.renderer.render("tooling/README.md.j2", context)}

    def license(self, context: dict[str, Any]) -> dict[str, str]:
        """Render ``LICENSE`` for the resolved license.

        Raises:
            KeyError: For ``none``; callers guard on ``license != "none"``.
        """
        template_path = self._LICENSES[context["license"]]
        return {"LICENSE": self.renderer.render(template_path, context)}
