"""Provider discovery, loading, and metadata builds.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints,
plus local directory discovery of single-file plugins.
INVARIANT: Provider failures are warnings, never errors.
"""

from __future__ import annotations

import dataclasses
import importlib.util
import inspect
import logging
import sys
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pluggy
from pluggy import HookImpl

from displaykit.domain.descriptors import PropertyDescriptor
from displaykit.plugins.builtins.conventions import PresentationConventionsPlugin
from displaykit.plugins.hookspecs import PROJECT_NAME, DisplayKitHookSpec
from displaykit.plugins.metadata import DisplayMetadata
from displaykit.services.introspect import describe_model
from displaykit.services.resolver import FieldPresentationResolver

ENTRY_POINT_GROUP = "displaykit.plugins"
BUILTIN_PLUGIN_NAME = "conventions"

logger = logging.getLogger(__name__)


class MetadataProviderPipeline:
    """Runs display metadata providers and caches results per model type."""

    def __init__(self, resolver: FieldPresentationResolver | None = None) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(DisplayKitHookSpec)
        self._pm.register(PresentationConventionsPlugin(resolver), name=BUILTIN_PLUGIN_NAME)
        self._cache: dict[type, dict[str, DisplayMetadata]] = {}
        self._loaded: bool = False

    def discover_and_load(self, *, local_dir: Path | None = None) -> list[str]:
        """Discover providers from entry points and an optional local directory.

        Returns a list of registered provider names.
        """
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._normalize_plugin_instances()
        if local_dir is not None:
            self._discover_local(local_dir)
        self._loaded = True
        self._cache.clear()
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a provider instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        self._cache.clear()
        logger.debug("Registered provider: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        self._pm.unregister(plugin)
        self._cache.clear()

    @property
    def is_loaded(self) -> bool:
        """Whether discover_and_load() has been called."""
        return self._loaded

    def list_plugin_names(self) -> list[str]:
        """Return names of all registered providers."""
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    # ------------------------------------------------------------------
    # Metadata builds
    # ------------------------------------------------------------------

    def build(self, descriptor: PropertyDescriptor) -> DisplayMetadata:
        """Run every provider against a fresh DisplayMetadata for *descriptor*.

        A pre-existing explicit label is installed before providers run.
        Wrapper providers (``wrapper=True`` or ``hookwrapper=True``) run
        their code before ``yield`` ahead of the plain providers and their
        teardown after all of them, as a pluggy hook call would.
        """
        metadata = DisplayMetadata(property_name=descriptor.name)
        if descriptor.explicit_label:
            explicit = descriptor.explicit_label
            metadata.display_name = lambda: explicit

        available: dict[str, Any] = {"descriptor": descriptor, "metadata": metadata}
        results: list[Any] = []
        teardowns: list[tuple[HookImpl, Generator[Any, Any, Any]]] = []
        # get_hookimpls() is in registration order; pluggy calls them reversed.
        for impl in reversed(self._pm.hook.create_display_metadata.get_hookimpls()):
            kwargs = {name: available[name] for name in impl.argnames}
            try:
                if impl.wrapper or impl.hookwrapper:
                    gen = impl.function(**kwargs)
                    next(gen)
                    teardowns.append((impl, gen))
                else:
                    res = impl.function(**kwargs)
                    if res is not None:
                        results.append(res)
            except Exception:
                self._warn_failed(impl, descriptor)

        for impl, gen in reversed(teardowns):
            outcome = pluggy.Result(results, None) if impl.hookwrapper else results
            try:
                gen.send(outcome)
            except StopIteration:
                continue
            except Exception:
                self._warn_failed(impl, descriptor)
                continue
            gen.close()
            logger.warning(
                "Provider %s yielded more than once on property %s",
                impl.plugin_name,
                descriptor.name,
            )
        return metadata

    @staticmethod
    def _warn_failed(impl: HookImpl, descriptor: PropertyDescriptor) -> None:
        logger.warning(
            "Provider %s failed on property %s",
            impl.plugin_name,
            descriptor.name,
            exc_info=True,
        )

    def build_model(self, model_cls: type) -> dict[str, DisplayMetadata]:
        """Return metadata for every property of *model_cls*.

        Builds are cached per type. Callers receive copies, so mutating a
        returned record never alters the cache.
        """
        cached = self._cache.get(model_cls)
        if cached is None:
            cached = {d.name: self.build(d) for d in describe_model(model_cls)}
            self._cache[model_cls] = cached
            logger.debug(
                "Built metadata for %s (%d properties)", model_cls.__qualname__, len(cached)
            )
        return {name: dataclasses.replace(m) for name, m in cached.items()}

    # ------------------------------------------------------------------
    # Local directory discovery
    # ------------------------------------------------------------------

    def _discover_local(self, local_dir: Path) -> None:
        """Scan *local_dir* for single-file Python providers.

        Each ``*.py`` file (excluding ``_``-prefixed names) is loaded as a
        module. Classes defined there that carry hookimpl-decorated methods
        are instantiated and registered.
        """
        if not local_dir.is_dir():
            return

        for py_file in sorted(local_dir.glob("*.py")):
            if py_file.name.startswith("_"):
                continue
            module_name = f"displaykit_local_plugin_{py_file.stem}"
            try:
                spec = importlib.util.spec_from_file_location(module_name, py_file)
                if spec is None or spec.loader is None:
                    logger.warning("Could not create module spec for %s", py_file)
                    continue
                module = importlib.util.module_from_spec(spec)
                sys.modules[module_name] = module
                spec.loader.exec_module(module)
            except Exception:
                logger.warning("Failed to load local provider %s", py_file, exc_info=True)
                sys.modules.pop(module_name, None)
                continue

            for _attr_name, obj in inspect.getmembers(module, inspect.isclass):
                if obj.__module__ != module_name:
                    continue
                if not self._has_hook_impls(obj):
                    continue
                try:
                    self.register_plugin(obj(), name=module_name)
                except Exception:
                    logger.warning(
                        "Failed to instantiate provider class %s from %s",
                        obj.__name__,
                        py_file,
                        exc_info=True,
                    )

    def _normalize_plugin_instances(self) -> None:
        """Replace registered provider classes with instantiated objects.

        Entry-point loading may register a class directly, which leaves
        ``self`` unbound at hook call time.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin) or not self._has_hook_impls(plugin):
                continue

            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)
            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point provider %s",
                    plugin_name,
                    exc_info=True,
                )
                continue
            self._pm.register(instance, name=plugin_name)
            logger.debug("Instantiated entry-point provider: %s", plugin_name)

    @staticmethod
    def _has_hook_impls(cls: type) -> bool:
        """Check whether *cls* has any methods decorated with ``@hookimpl``.

        Pluggy's ``HookimplMarker("displaykit")`` sets a ``displaykit_impl``
        attribute on decorated methods.
        """
        for name in dir(cls):
            if name.startswith("_"):
                continue
            method = getattr(cls, name, None)
            if callable(method) and getattr(method, f"{PROJECT_NAME}_impl", None):
                return True
        return False
