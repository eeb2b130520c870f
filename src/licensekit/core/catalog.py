# catalog.py
# SPDX-License-Identifier: MIT
"""Process-wide catalog of known licenses.

The catalog maps v1 and v2 metadata keys to the license identifiers using
them, keeps the definitions for the factory, and carries the assembled
phrase table. It is built once, on first use, and never mutated; call
:func:`rebuild_catalog` to pick up plugins installed after that.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from .config import CatalogConfig
from .log import get_logger
from .phrases import PhraseEntry, build_phrase_table

log = get_logger(__name__)

__all__ = [
    "LicenseCatalog",
    "build_catalog",
    "get_catalog",
    "rebuild_catalog",
    "set_catalog",
    "normalize_meta_version",
]

KeyIndex = Mapping[str, frozenset[str]]


def normalize_meta_version(version: str | int | None) -> str | None:
    """Validate a metadata version selector.

    Raises:
        ValueError: For anything other than ``None``, ``"1"`` or ``"2"``.
    """
    if version is None:
        return None
    text = str(version)
    if text not in {"1", "2"}:
        raise ValueError(f"illegal metadata version: {version!r}")
    return text


@dataclass(frozen=True, slots=True)
class LicenseCatalog:
    """Immutable key indexes, definitions and phrase table.

    Invariant: ``keys_all[k]`` is the union of ``keys_v1.get(k)`` and
    ``keys_v2.get(k)``.
    """

    keys_v1: KeyIndex
    keys_v2: KeyIndex
    keys_all: KeyIndex
    definitions: Mapping[str, Any]
    phrases: tuple[PhraseEntry, ...]

    def lookup(self, key: str, version: str | int | None = None) -> frozenset[str]:
        """Return the identifiers registered under ``key``.

        Args:
            key (str): Metadata key, matched verbatim.
            version (str | int | None): ``"1"`` or ``"2"`` to select one
                naming scheme; ``None`` for both.

        Raises:
            ValueError: If ``version`` is not a supported selector.
        """
        selected = normalize_meta_version(version)
        index = {None: self.keys_all, "1": self.keys_v1, "2": self.keys_v2}[selected]
        return index.get(key, frozenset())

    def definition(self, identifier: str) -> Any | None:
        return self.definitions.get(identifier)

    def identifiers(self) -> list[str]:
        return sorted(self.definitions)


def _freeze(index: Mapping[str, set[str]]) -> KeyIndex:
    return MappingProxyType({key: frozenset(ids) for key, ids in index.items()})


def build_catalog(definitions: Iterable[Any]) -> LicenseCatalog:
    """Build a catalog from license definitions.

    Definitions whose identification data cannot be read are logged and
    skipped. Later definitions with an identifier already seen are ignored.
    """
    keys_v1: dict[str, set[str]] = {}
    keys_v2: dict[str, set[str]] = {}
    keys_all: dict[str, set[str]] = {}
    found: dict[str, Any] = {}
    named: list[tuple[str, str]] = []

    for definition in definitions:
        try:
            ident = definition.identifier()
            v1 = definition.v1_key()
            v2 = definition.v2_key()
            name = definition.canonical_name()
        except Exception as exc:  # noqa: BLE001
            log.warning("Skipping license definition %r: %s", definition, exc)
            continue
        if ident in found:
            log.debug("Duplicate license identifier %s ignored", ident)
            continue
        found[ident] = definition
        keys_v1.setdefault(v1, set()).add(ident)
        keys_v2.setdefault(v2, set()).add(ident)
        keys_all.setdefault(v1, set()).add(ident)
        keys_all.setdefault(v2, set()).add(ident)
        if name:
            named.append((name, ident))

    catalog = LicenseCatalog(
        keys_v1=_freeze(keys_v1),
        keys_v2=_freeze(keys_v2),
        keys_all=_freeze(keys_all),
        definitions=MappingProxyType(found),
        phrases=build_phrase_table(named),
    )
    log.debug(
        "License catalog built: %d definitions, %d v1 keys, %d v2 keys",
        len(found),
        len(keys_v1),
        len(keys_v2),
    )
    return catalog


_CATALOG: LicenseCatalog | None = None
_CATALOG_LOCK = threading.Lock()


def _build_default(config: CatalogConfig | None) -> LicenseCatalog:
    from .registries import default_license_registry  # local import to avoid cycles

    return build_catalog(default_license_registry(config))


def get_catalog(config: CatalogConfig | None = None) -> LicenseCatalog:
    """Return the process-wide catalog, building it on first use.

    ``config`` only matters for the call that performs the build; once the
    catalog exists it is returned as-is.
    """
    global _CATALOG
    catalog = _CATALOG
    if catalog is not None:
        return catalog
    with _CATALOG_LOCK:
        if _CATALOG is None:
            _CATALOG = _build_default(config)
        return _CATALOG


def rebuild_catalog(config: CatalogConfig | None = None) -> LicenseCatalog:
    """Discard the process-wide catalog and build a fresh one."""
    global _CATALOG
    with _CATALOG_LOCK:
        _CATALOG = _build_default(config)
        return _CATALOG


def set_catalog(catalog: LicenseCatalog | None) -> None:
    """Install a prebuilt catalog, or clear it with ``None``."""
    global _CATALOG
    with _CATALOG_LOCK:
        _CATALOG = catalog
