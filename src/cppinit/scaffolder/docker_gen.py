"""Docker and dev-container file generation.

The ``Dockerfile`` builds and runs the project binary, so it is only
produced for executables; libraries still get ``.dockerignore`` and the
dev container.
"""

from __future__ import annotations

from typing import Any

from .templates import TemplateRenderer


class DockerGenerator:
    """Generates the Dockerfile, ``.dockerignore`` and ``.devcontainer/``."""

    _CONTAINER_FILES: dict[str, str] = {
        ".dockerignore": "docker/dockerignore.j2",
        ".devcontainer/devcontainer.json": "docker/devcontainer.json.j2",
    }

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def generate(self, context: dict[str, Any]) -> dict[str, str]:
        """Render every Docker-related file that applies to *context*.

        Returns:
            ``{relative_path: content}``; ``Dockerfile`` is present only
            when ``context["is_executable"]`` is true.
        """
        files: dict[str, str] = {}
        if context["is_executable"]:
            files["Dockerfile"] = self.renderer.render("docker/Dockerfile.j2", context)
        files.update(self.renderer.render_many(self._CONTAINER_FILES, context))
        return files
