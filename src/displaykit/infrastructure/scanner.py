"""Source scanning helpers for development tooling.

Finds class names declared in a project's source tree without importing
it, and lists the concrete classes of an imported module.
"""

from __future__ import annotations

import inspect
import logging
import re
from pathlib import Path
from types import ModuleType

from displaykit.config.discovery import walk_up

PROJECT_MARKER = "pyproject.toml"
CLASS_RE = re.compile(r"\bclass\s+(\w+)")

logger = logging.getLogger(__name__)


class ProjectRootNotFoundError(RuntimeError):
    """No directory above the start point holds a project marker."""


def find_project_root(start: Path | None = None) -> Path:
    """Walk up from *start* (default: cwd) to the directory with pyproject.toml."""
    marker = walk_up(start, PROJECT_MARKER)
    if marker is None:
        msg = f"Could not locate project root above {start or Path.cwd()}"
        raise ProjectRootNotFoundError(msg)
    return marker.parent


def scan_class_names(relative_folder: str | Path, start: Path | None = None) -> list[str]:
    """Return class names declared in ``*.py`` files under a project folder.

    *relative_folder* is resolved against the project root. Names are
    distinct, in first-seen order over a sorted walk.

    Raises:
        ProjectRootNotFoundError: If no project root is found.
        FileNotFoundError: If the folder does not exist.
    """
    root = find_project_root(start)
    target = root / relative_folder
    if not target.is_dir():
        raise FileNotFoundError(str(target))

    names: dict[str, None] = {}
    files = sorted(target.rglob("*.py"))
    for py_file in files:
        text = py_file.read_text(encoding="utf-8", errors="replace")
        for match in CLASS_RE.finditer(text):
            names.setdefault(match.group(1), None)
    logger.debug("Scanned %d files under %s", len(files), target)
    return list(names)


def list_module_classes(module: ModuleType, *, include_imported: bool = False) -> list[str]:
    """Return sorted names of concrete classes in *module*.

    Classes imported from other modules are skipped unless
    *include_imported* is set.
    """
    names = {
        obj.__name__
        for _attr, obj in inspect.getmembers(module, inspect.isclass)
        if not inspect.isabstract(obj)
        and (include_imported or obj.__module__ == module.__name__)
    }
    return sorted(names)
