"""Extension layer — display metadata providers via pluggy.

INVARIANT: Provider failures are warnings, never errors.
"""

from displaykit.plugins.hookspecs import hookimpl
from displaykit.plugins.manager import MetadataProviderPipeline
from displaykit.plugins.metadata import DisplayMetadata

__all__ = ["DisplayMetadata", "MetadataProviderPipeline", "hookimpl"]
