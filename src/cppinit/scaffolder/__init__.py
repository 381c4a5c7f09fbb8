"""cppinit scaffolder -- plans and writes CMake project trees.

Quick usage::

    from cppinit.config import ProjectConfig
    from cppinit.scaffolder import ProjectGenerator

    config = ProjectConfig(project_name="mylib", project_type="static")
    generator = ProjectGenerator(config)
    project_path = generator.generate("/tmp/mylib")
"""

from cppinit.scaffolder.generator import ProjectGenerator
from cppinit.scaffolder.materializer import materialize
from cppinit.scaffolder.planner import (
    EmissionRule,
    ProjectPlan,
    ProjectPlanner,
    build_context,
    plan_project,
)
from cppinit.scaffolder.templates import TemplateRenderer

__all__ = [
    "EmissionRule",
    "ProjectGenerator",
    "ProjectPlan",
    "ProjectPlanner",
    "TemplateRenderer",
    "build_context",
    "materialize",
    "plan_project",
]
