"""Write a :class:`ProjectPlan` to disk."""

from __future__ import annotations

from pathlib import Path

from cppinit.errors import MaterializeError

from .planner import ProjectPlan


def materialize(plan: ProjectPlan, root: str | Path) -> list[Path]:
    """Create *root*, every planned directory, then every planned file.

    Existing files are overwritten; running twice with the same plan
    produces the same tree.  Files with empty content are skipped.  Nothing
    is rolled back on failure.

    Args:
        plan: The plan to write.
        root: Destination directory; created if missing.

    Returns:
        The paths of the files written, in plan order.

    Raises:
        MaterializeError: On the first filesystem error, carrying the
            path that could not be created or written.
    """
    root = Path(root)
    _mkdir(root)
    for directory in plan.directories:
        _mkdir(root / directory)

    written: list[Path] = []
    for relative_path, content in plan.files.items():
        if not content:
            continue
        path = root / relative_path
        _mkdir(path.parent)
        try:
            path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise MaterializeError(path, exc) from exc
        written.append(path)
    return written


def _mkdir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise MaterializeError(path, exc) from exc
