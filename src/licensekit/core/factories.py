# factories.py
# SPDX-License-Identifier: MIT
"""Build license objects from identifiers or short names."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .catalog import LicenseCatalog, get_catalog
from .log import get_logger

log = get_logger(__name__)

__all__ = [
    "SHORT_NAMES",
    "UnknownLicenseError",
    "new_license",
    "short_name_to_identifier",
    "resolve_short_name",
]

# Historically ambiguous abbreviations; anything else goes through the
# "-"/"." to "_" naming convention.
SHORT_NAMES: Mapping[str, str] = {
    "GPL-1": "GPL_1",
    "GPL-2": "GPL_2",
    "GPL-3": "GPL_3",
    "LGPL-2": "LGPL_2",
    "LGPL-2.1": "LGPL_2_1",
    "LGPL-3": "LGPL_3_0",
    "LGPL-3.0": "LGPL_3_0",
    "Artistic": "Artistic_1_0",
    "Artistic-1": "Artistic_1_0",
    "Artistic-2": "Artistic_2_0",
}


class UnknownLicenseError(LookupError):
    """No license definition is registered for the requested name."""


def new_license(identifier: str, *, catalog: LicenseCatalog | None = None, **params: Any) -> Any:
    """Instantiate the definition registered under ``identifier``.

    Raises:
        UnknownLicenseError: If no definition is registered for it.
    """
    definition = (catalog or get_catalog()).definition(identifier)
    if definition is None:
        raise UnknownLicenseError(f"unknown license identifier {identifier!r}")
    return definition(**params)


def short_name_to_identifier(short_name: str) -> str:
    """Map a short name such as ``LGPL-2.1`` or ``Apache-2.0`` to an identifier."""
    return SHORT_NAMES.get(short_name) or short_name.replace("-", "_").replace(".", "_")


def resolve_short_name(
    short_name: str | None,
    *,
    catalog: LicenseCatalog | None = None,
    **params: Any,
) -> Any:
    """Create a license object from its short name.

    Args:
        short_name (str | None): ``GPL-2``, ``Artistic``, ``MIT``,
            ``Apache-2.0`` and so on.
        catalog (LicenseCatalog | None): Catalog to use; defaults to the
            process-wide one.
        **params: Passed to the license constructor (``holder``, ``year``...).

    Raises:
        ValueError: If no short name was given.
        UnknownLicenseError: If the name does not resolve to a known license.
    """
    if not short_name:
        raise ValueError("no license short name specified")
    identifier = short_name_to_identifier(short_name)
    log.debug("Short name %s resolved to %s", short_name, identifier)
    try:
        return new_license(identifier, catalog=catalog, **params)
    except UnknownLicenseError as exc:
        raise UnknownLicenseError(f"unknown license with short name {short_name!r} ({exc})") from exc
