"""Built-in provider applying the presentation conventions.

Runs first among providers so third-party plugins see (and may adjust)
the conventional metadata.
"""

from __future__ import annotations

import logging

from displaykit.domain.descriptors import PropertyDescriptor
from displaykit.plugins.hookspecs import hookimpl
from displaykit.plugins.metadata import DisplayMetadata
from displaykit.services.resolver import FieldPresentationResolver

logger = logging.getLogger(__name__)


class PresentationConventionsPlugin:
    """Writes a FieldPresentationResolver decision onto DisplayMetadata."""

    def __init__(self, resolver: FieldPresentationResolver | None = None) -> None:
        self._resolver = resolver or FieldPresentationResolver()

    @property
    def resolver(self) -> FieldPresentationResolver:
        return self._resolver

    @hookimpl(tryfirst=True)
    def create_display_metadata(
        self,
        descriptor: PropertyDescriptor,
        metadata: DisplayMetadata,
    ) -> None:
        decision = self._resolver.resolve(descriptor)

        if decision.display_format is not None:
            metadata.display_format_string = decision.display_format
        if decision.edit_format is not None:
            metadata.edit_format_string = decision.edit_format
        if decision.ui_hint is not None:
            metadata.template_hint = decision.ui_hint.value

        label = decision.label
        if label is not None and not metadata.has_label():
            metadata.display_name = lambda: label
        logger.debug("Applied conventions to %s: %s", descriptor.name, decision)
