# plugins.py
# SPDX-License-Identifier: MIT
"""Plugin discovery for license definitions.

Definitions come from two places: submodules of configured packages (the
built-in ``licensekit.licenses`` package by default) and entry points in the
``licensekit.licenses`` group. A plugin that cannot be imported or does not
look like a license definition is logged and skipped; discovery always
carries on with the rest.
"""

from __future__ import annotations

import importlib
import inspect
import pkgutil
from collections.abc import Iterable, Iterator, Mapping, Sequence
from importlib import metadata
from types import ModuleType
from typing import Any, cast

from .config import DEFAULT_PLUGIN_GROUP
from .interfaces import LicenseDefinition
from .log import get_logger

log = get_logger(__name__)

__all__ = [
    "iter_module_plugins",
    "iter_entrypoint_plugins",
    "is_license_definition",
]


def is_license_definition(obj: Any) -> bool:
    """Return True if ``obj`` satisfies the :class:`LicenseDefinition` protocol."""
    try:
        return isinstance(obj, LicenseDefinition)
    except Exception:  # noqa: BLE001
        return False


def _definitions_in_module(module: ModuleType) -> list[Any]:
    """Collect concrete ``License`` subclasses defined in ``module``."""
    from ..licenses.base import License  # local import to avoid cycles

    found: list[Any] = []
    for _, obj in inspect.getmembers(module, inspect.isclass):
        if obj.__module__ != module.__name__:
            continue
        if issubclass(obj, License) and obj.id:
            found.append(obj)
    return found


def iter_module_plugins(packages: Sequence[str]) -> Iterator[Any]:
    """Yield license definitions found in the submodules of ``packages``.

    Modules are visited in name order so that discovery is reproducible.
    Import failures of a package or of one of its submodules are logged and
    skipped.
    """
    for package_name in packages:
        try:
            package = importlib.import_module(package_name)
        except Exception as exc:  # noqa: BLE001
            log.warning("Failed to import license package %s: %s", package_name, exc)
            continue
        search_path = getattr(package, "__path__", None)
        if search_path is None:
            # A plain module: take whatever it defines.
            yield from _definitions_in_module(package)
            continue
        for info in sorted(pkgutil.iter_modules(search_path), key=lambda m: m.name):
            if info.name.startswith("_"):
                continue
            module_name = f"{package_name}.{info.name}"
            try:
                module = importlib.import_module(module_name)
            except Exception as exc:  # noqa: BLE001
                log.warning("Failed to import license module %s: %s", module_name, exc)
                continue
            yield from _definitions_in_module(module)


def _select_entry_points(group: str) -> Sequence[metadata.EntryPoint]:
    try:
        entry_points = metadata.entry_points()
    except Exception as exc:  # pragma: no cover - importlib.metadata safety
        log.debug("Plugin discovery skipped: %s", exc)
        return ()
    if hasattr(entry_points, "select"):
        return cast(Sequence[metadata.EntryPoint], entry_points.select(group=group))
    grouped = cast(Mapping[str, Sequence[metadata.EntryPoint]], entry_points)
    return grouped.get(group, ())


def iter_entrypoint_plugins(group: str = DEFAULT_PLUGIN_GROUP) -> Iterator[Any]:
    """Yield license definitions published through entry points.

    An entry point may load to a single definition or to an iterable of
    definitions. Anything else is logged and ignored.
    """
    for ep in _select_entry_points(group):
        try:
            loaded = ep.load()
        except Exception as exc:  # noqa: BLE001
            log.warning("Failed to import license plugin %s: %s", ep.name, exc)
            continue
        if is_license_definition(loaded):
            yield loaded
            continue
        if isinstance(loaded, Iterable) and not isinstance(loaded, (str, bytes)):
            for item in loaded:
                if is_license_definition(item):
                    yield item
                else:
                    log.warning("License plugin %s provided a non-definition: %r", ep.name, item)
            continue
        log.warning("License plugin %s is not a license definition: %r", ep.name, loaded)
