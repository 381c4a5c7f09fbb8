"""CMake build-system file generation.

Produces the root ``CMakeLists.txt``, ``CMakePresets.json`` and the helper
modules under ``cmake/``.  Every module the root file ``include()``s is
emitted under the same toggle that guards the include line.
"""

from __future__ import annotations

from typing import Any

from .templates import TemplateRenderer


class CMakeGenerator:
    """Renders the CMake side of a project plan."""

    # Module name -> (output path, template path)
    _MODULES: dict[str, tuple[str, str]] = {
        "warnings": ("cmake/CompilerWarnings.cmake", "cmake/CompilerWarnings.cmake.j2"),
        "sanitizers": ("cmake/Sanitizers.cmake", "cmake/Sanitizers.cmake.j2"),
        "coverage": ("cmake/Coverage.cmake", "cmake/Coverage.cmake.j2"),
        "static_analysis": ("cmake/StaticAnalysis.cmake", "cmake/StaticAnalysis.cmake.j2"),
        "doxygen": ("cmake/Doxygen.cmake", "cmake/Doxygen.cmake.j2"),
        "cpm": ("cmake/CPM.cmake", "cmake/CPM.cmake.j2"),
    }

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def root(self, context: dict[str, Any]) -> dict[str, str]:
        """Top-level ``CMakeLists.txt``."""
        return self.renderer.render_many(
            {"CMakeLists.txt": "cmake/CMakeLists.txt.j2"}, context
        )

    def presets(self, context: dict[str, Any]) -> dict[str, str]:
        """``CMakePresets.json`` with debug/release plus the enabled extras."""
        return self.renderer.render_many(
            {"CMakePresets.json": "cmake/CMakePresets.json.j2"}, context
        )

    def module(self, name: str, context: dict[str, Any]) -> dict[str, str]:
        """Render one helper module from ``cmake/`` by its short *name*.

        Raises:
            KeyError: If *name* is not a known module.
        """
        output_path, template_path = self._MODULES[name]
        return {output_path: self.renderer.render(template_path, context)}
