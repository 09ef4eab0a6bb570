"""Resolve ``pkg.module:Name`` target strings to Python objects."""

from __future__ import annotations

import importlib
from typing import Any


def import_object(target: str) -> Any:
    """Import and return the object named by *target*.

    Accepts ``pkg.module:Name`` (attribute path may be dotted) or
    ``pkg.module.Name``.

    Raises:
        ValueError: If *target* is empty or has no attribute part.
        ImportError: If the module cannot be imported.
        AttributeError: If the attribute does not exist.
    """
    if not target or not target.strip():
        msg = "Import target must not be empty"
        raise ValueError(msg)

    if ":" in target:
        module_name, _, attr_path = target.partition(":")
    else:
        module_name, _, attr_path = target.rpartition(".")
    if not module_name or not attr_path:
        msg = f"Import target {target!r} must look like 'pkg.module:Name'"
        raise ValueError(msg)

    obj: Any = importlib.import_module(module_name)
    for part in attr_path.split("."):
        obj = getattr(obj, part)
    return obj


def import_types(targets: list[str]) -> list[type]:
    """Import every target and check that each one is a class."""
    resolved: list[type] = []
    for target in targets:
        obj = import_object(target)
        if not isinstance(obj, type):
            msg = f"{target!r} is not a class"
            raise TypeError(msg)
        resolved.append(obj)
    return resolved
