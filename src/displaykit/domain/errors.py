"""Domain exceptions."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """A required configuration input was missing or malformed."""


class FormatTemplateError(ValueError):
    """A display template is not of the ``{0:pattern}`` form."""
