"""DisplayService — resolve display metadata for importable models."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from displaykit.domain.scope import ScopeRule
from displaykit.domain.words import split_pascal_case
from displaykit.infrastructure.loader import import_object, import_types
from displaykit.plugins.manager import MetadataProviderPipeline
from displaykit.services.resolver import FieldPresentationResolver
from displaykit.services.result import ServiceResult

if TYPE_CHECKING:
    from displaykit.config.settings import DisplaySettings

logger = logging.getLogger(__name__)


class DisplayService:
    """Builds display metadata using the configured scope and providers."""

    def __init__(self, settings: DisplaySettings) -> None:
        self._settings = settings

    def build_pipeline(self, scope: ScopeRule) -> tuple[MetadataProviderPipeline, list[str]]:
        """Create a provider pipeline for *scope*, loading plugins if enabled."""
        pipeline = MetadataProviderPipeline(FieldPresentationResolver(scope))
        if self._settings.plugins.enabled:
            names = pipeline.discover_and_load(local_dir=self._settings.local_plugin_dir)
        else:
            names = pipeline.list_plugin_names()
        return pipeline, names

    def describe(
        self,
        target: str,
        *,
        scope_targets: list[str] | None = None,
        include_derived: bool | None = None,
    ) -> ServiceResult:
        """Resolve metadata for every property of the model named by *target*.

        *scope_targets* extend ``[scope] targets`` from config;
        *include_derived* overrides ``[scope] include_derived`` when given.
        """
        op = "describe_model"
        try:
            model_cls = import_object(target)
        except (ImportError, AttributeError, ValueError) as exc:
            return ServiceResult.failure(op, "invalid_target", str(exc), target=target)
        if not isinstance(model_cls, type):
            return ServiceResult.failure(op, "invalid_target", f"{target!r} is not a class")

        targets = [*self._settings.scope.targets, *(scope_targets or [])]
        derived = self._settings.scope.include_derived if include_derived is None else include_derived
        try:
            scope = ScopeRule(import_types(targets), include_derived=derived)
        except (ImportError, AttributeError, TypeError, ValueError) as exc:
            return ServiceResult.failure(op, "invalid_scope", str(exc), targets=targets)

        pipeline, plugin_names = self.build_pipeline(scope)
        try:
            metadata = pipeline.build_model(model_cls)
        except (NameError, TypeError) as exc:
            # Unresolvable annotations surface from get_type_hints.
            return ServiceResult.failure(op, "invalid_target", str(exc), target=target)

        warnings: list[str] = []
        if not targets:
            warnings.append("No scope targets configured; labels are not generated")

        logger.debug("Described %s with scope %s", target, targets)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "model": target,
                "scope": targets,
                "include_derived": derived,
                "plugins": plugin_names,
                "count": len(metadata),
                "properties": [m.to_dict() for m in metadata.values()],
            },
            warnings=warnings,
        )

    @staticmethod
    def labels(names: list[str]) -> ServiceResult:
        """Split each PascalCase name into a label."""
        op = "split_labels"
        if not names:
            return ServiceResult.failure(op, "invalid_argument", "At least one name is required")
        return ServiceResult(
            ok=True,
            op=op,
            data={"labels": {name: split_pascal_case(name) for name in names}},
        )

