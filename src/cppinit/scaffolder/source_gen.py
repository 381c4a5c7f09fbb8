"""Source, test, benchmark and dependency-manifest generation.

The stub sources depend on the project type and language:

* executable   -> ``src/main.<ext>``
* static       -> ``src/<name>.<ext>`` + ``include/<name>/<name>.<hdr>``
* header-only  -> ``include/<name>/<name>.<hdr>`` only

Tests and benchmarks include the public header through ``header_path`` so
the include line always matches the header this module emits.
"""

from __future__ import annotations

from typing import Any

from .templates import TemplateRenderer


class SourceGenerator:
    """Renders source stubs, test scaffolding and package manifests."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    # -- Sources -----------------------------------------------------------

    def sources(self, context: dict[str, Any]) -> dict[str, str]:
        name = context["project_name"]
        src_ext = context["src_ext"]
        hdr_ext = context["hdr_ext"]
        project_type = context["project_type"]

        if project_type == "static":
            mapping = {
                f"src/{name}.{src_ext}": f"source/library.{src_ext}.j2",
                f"include/{context['header_path']}": f"source/library.{hdr_ext}.j2",
            }
        elif project_type == "header-only":
            mapping = {
                f"include/{context['header_path']}": f"source/header_only.{hdr_ext}.j2",
            }
        else:
            mapping = {f"src/main.{src_ext}": f"source/main.{src_ext}.j2"}
        return self.renderer.render_many(mapping, context)

    # -- Tests and benchmarks ---------------------------------------------

    def tests(self, context: dict[str, Any]) -> dict[str, str]:
        """``tests/CMakeLists.txt`` and the framework-specific test file."""
        test_source = context["test_source"]
        return self.renderer.render_many(
            {
                "tests/CMakeLists.txt": "tests/CMakeLists.txt.j2",
                f"tests/{test_source}": f"tests/{test_source}.j2",
            },
            context,
        )

    def benchmarks(self, context: dict[str, Any]) -> dict[str, str]:
        return self.renderer.render_many(
            {
                "benchmarks/CMakeLists.txt": "benchmarks/CMakeLists.txt.j2",
                "benchmarks/benchmark_main.cpp": "benchmarks/benchmark_main.cpp.j2",
            },
            context,
        )

    # -- Package manifests -------------------------------------------------

    def vcpkg_manifest(self, context: dict[str, Any]) -> dict[str, str]:
        return {"vcpkg.json": self.renderer.render("packages/vcpkg.json.j2", context)}

    def conan_manifest(self, context: dict[str, Any]) -> dict[str, str]:
        return {
            "conanfile.txt": self.renderer.render("packages/conanfile.txt.j2", context)
        }
