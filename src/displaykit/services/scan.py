"""ScanService: class discovery for development tooling."""

from __future__ import annotations

import importlib
from pathlib import Path

from displaykit.infrastructure.scanner import (
    ProjectRootNotFoundError,
    list_module_classes,
    scan_class_names,
)
from displaykit.services.result import ServiceResult


class ScanService:
    """Lists class names from source folders or imported modules."""

    def __init__(self, project_root: Path | None = None) -> None:
        self._start = project_root

    def scan_folder(self, folder: str) -> ServiceResult:
        op = "scan_classes"
        try:
            names = scan_class_names(folder, start=self._start)
        except ProjectRootNotFoundError as exc:
            return ServiceResult.failure(op, "no_project_root", str(exc))
        except FileNotFoundError as exc:
            return ServiceResult.failure(op, "not_found", f"Folder not found: {exc}", folder=folder)
        return ServiceResult(ok=True, op=op, data={"folder": folder, "count": len(names), "classes": names})

    def scan_module(self, module_name: str) -> ServiceResult:
        op = "list_classes"
        try:
            module = importlib.import_module(module_name)
        except ImportError as exc:
            return ServiceResult.failure(op, "invalid_target", str(exc), module=module_name)
        names = list_module_classes(module)
        return ServiceResult(ok=True, op=op, data={"module": module_name, "count": len(names), "classes": names})
