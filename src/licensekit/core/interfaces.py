# interfaces.py
# SPDX-License-Identifier: MIT
"""Protocol implemented by license definitions."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LicenseDefinition(Protocol):
    """A discoverable license definition (usually a class).

    The engine only ever reads these four values; how a definition stores
    its text or renders notices is its own concern.
    """

    def identifier(self) -> str:
        """Canonical short token, e.g. ``GPL_2``."""
        ...

    def v1_key(self) -> str:
        """Key naming this license under the v1 metadata convention."""
        ...

    def v2_key(self) -> str:
        """Key naming this license under the v2 metadata convention."""
        ...

    def canonical_name(self) -> str:
        """Full display name, matched verbatim in free text."""
        ...


__all__ = ["LicenseDefinition"]
