"""Pluggy hook specifications for display metadata providers.

Each provider receives the static description of a property and may
mutate the host-owned DisplayMetadata record.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from displaykit.domain.descriptors import PropertyDescriptor
    from displaykit.plugins.metadata import DisplayMetadata

PROJECT_NAME = "displaykit"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class DisplayKitHookSpec:
    """Hook specifications for the displaykit provider system."""

    @hookspec
    def create_display_metadata(
        self,
        descriptor: PropertyDescriptor,
        metadata: DisplayMetadata,
    ) -> None:
        """Optionally mutate *metadata* for the property in *descriptor*."""
