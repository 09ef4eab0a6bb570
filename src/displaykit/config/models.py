"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, displaykit.toml only contains
overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ScopeConfig(BaseModel):
    """[scope] section: container types that receive generated labels."""

    model_config = {"frozen": True}

    targets: list[str] = Field(default_factory=list)
    include_derived: bool = False


class ConsoleConfig(BaseModel):
    """[console] section."""

    model_config = {"frozen": True}

    title: str = ""


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    local_dir: str = ".displaykit/plugins"

