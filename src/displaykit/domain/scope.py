"""ScopeRule: which container types receive generated labels."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from displaykit.domain.errors import InvalidArgumentError


@dataclass(frozen=True)
class ScopeRule:
    """Target container types for label generation.

    An empty target set matches nothing. With ``include_derived`` the rule
    also matches subclasses of any target.
    """

    target_types: frozenset[type]
    include_derived: bool = False

    def __init__(self, target_types: Iterable[type] | None, include_derived: bool = False) -> None:
        if target_types is None:
            msg = "target_types must not be None"
            raise InvalidArgumentError(msg)
        object.__setattr__(self, "target_types", frozenset(target_types))
        object.__setattr__(self, "include_derived", include_derived)

    def applies_to(self, container_type: type | None) -> bool:
        """Whether label conventions apply to properties of *container_type*."""
        if container_type is None:
            return False
        if container_type in self.target_types:
            return True
        if not self.include_derived:
            return False
        return any(issubclass(container_type, target) for target in self.target_types)
