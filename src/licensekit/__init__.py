# __init__.py
# SPDX-License-Identifier: MIT
"""
Top-level package exports for :mod:`licensekit`.

licensekit guesses which open-source license applies to a piece of code from
its embedded documentation or from its distribution metadata. The guessers
are best effort: they return every plausible candidate, an empty result when
nothing is recognizable, and never pick one answer out of several.

Public surface
--------------
The symbols listed in :data:`PRIMARY_API` are the stable surface:

- :func:`classify_from_text` for POD / Markdown documentation,
- :func:`classify_from_metadata` for ``META.yml`` / ``META.json`` style blobs,
- :func:`lookup_by_key` for direct metadata-key lookups,
- :func:`resolve_short_name` to build a license object from ``GPL-2``,
  ``Apache-2.0`` and the like.

License definitions are discovered once per process from the built-in
:mod:`licensekit.licenses` package and from entry points in the
``licensekit.licenses`` group. Use :func:`rebuild_catalog` after installing
new plugins at runtime.

Examples:
    >>> from licensekit import classify_from_text
    >>> classify_from_text("=head1 LICENSE\\n\\nGNU General Public License\\n")
    Guesses(['GPL_1', 'GPL_2', 'GPL_3'])
    >>> classify_from_text("=head1 LICENSE\\n\\nunder the same terms as perl itself\\n")
    Guesses(['Perl_5'])
"""

from __future__ import annotations

try:
    from importlib.metadata import version as _pkg_version

    __version__ = _pkg_version("licensekit")
except Exception:  # PackageNotFoundError or runtime env oddities
    __version__ = "0.0.0+unknown"


from .core.catalog import (
    LicenseCatalog,
    build_catalog,
    get_catalog,
    rebuild_catalog,
    set_catalog,
)
from .core.config import CatalogConfig, LicenseKitConfig, load_config_from_path
from .core.factories import (
    SHORT_NAMES,
    UnknownLicenseError,
    new_license,
    resolve_short_name,
)
from .core.guess import (
    AmbiguousGuessError,
    Guesses,
    classify_from_metadata,
    classify_from_text,
    extract_license_section,
    lookup_by_key,
)
from .core.interfaces import LicenseDefinition
from .core.log import configure_logging, get_logger, temp_level
from .core.phrases import PhraseEntry
from .core.registries import LicenseRegistry, default_license_registry
from .licenses import License

PRIMARY_API = [
    "__version__",
    "classify_from_text",
    "classify_from_metadata",
    "lookup_by_key",
    "resolve_short_name",
    "Guesses",
    "AmbiguousGuessError",
    "UnknownLicenseError",
    "License",
    "LicenseDefinition",
    "LicenseCatalog",
    "get_catalog",
    "rebuild_catalog",
    "LicenseKitConfig",
    "load_config_from_path",
]

__all__ = list(PRIMARY_API)
