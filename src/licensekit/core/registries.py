# registries.py
# SPDX-License-Identifier: MIT
"""Registry of license definitions keyed by identifier."""
from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

from .config import CatalogConfig
from .log import get_logger

log = get_logger(__name__)


@dataclass
class LicenseRegistry:
    """Registry for license definitions keyed by their identifiers."""

    _definitions: dict[str, Any] = field(default_factory=dict)

    def register(self, definition: Any, *, replace: bool = False) -> None:
        """Register a license definition.

        Raises:
            ValueError: If the identifier is already registered and
                ``replace`` is False.
        """
        ident = definition.identifier()
        if not ident:
            raise ValueError(f"License definition {definition!r} has an empty identifier")
        if not replace and ident in self._definitions:
            raise ValueError(f"License {ident!r} is already registered")
        self._definitions[ident] = definition

    def register_all(self, definitions: Iterable[Any]) -> None:
        """Register definitions, keeping the first one seen per identifier.

        Definitions that cannot be registered are logged and skipped.
        """
        for definition in definitions:
            try:
                self.register(definition)
            except Exception as exc:  # noqa: BLE001
                log.warning("Skipping license definition %r: %s", definition, exc)

    def license(self, definition: Any) -> Any:
        """Class decorator registering ``definition`` and returning it unchanged."""
        self.register(definition)
        return definition

    def get(self, identifier: str) -> Any | None:
        return self._definitions.get(identifier)

    def identifiers(self) -> list[str]:
        return sorted(self._definitions)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._definitions

    def __iter__(self) -> Iterator[Any]:
        return iter(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)


def default_license_registry(config: CatalogConfig | None = None) -> LicenseRegistry:
    """Build a LicenseRegistry from the plugin catalog.

    Module-scanned definitions are registered first, then entry-point
    plugins when ``config.load_plugins`` is set. On identifier clashes the
    first registration wins.
    """
    from .plugins import iter_entrypoint_plugins, iter_module_plugins  # local import to avoid cycles

    cfg = config or CatalogConfig()
    reg = LicenseRegistry()
    reg.register_all(iter_module_plugins(cfg.modules))
    if cfg.load_plugins:
        reg.register_all(iter_entrypoint_plugins(cfg.plugin_group))
    return reg


__all__ = ["LicenseRegistry", "default_license_registry"]
