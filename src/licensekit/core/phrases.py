# phrases.py
# SPDX-License-Identifier: MIT
"""Ordered phrase table used to guess licenses from free text.

Entries are evaluated top to bottom and the first match wins, so the order
below is the precedence. Exact canonical names discovered in the catalog are
placed in front of the authored heuristics by :func:`build_phrase_table`.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Union

VersionMapper = Callable[[Union[str, None]], tuple[str, ...]]
Resolver = Union[str, tuple[str, ...], VersionMapper]

__all__ = [
    "PhraseEntry",
    "Resolver",
    "VersionMapper",
    "STATIC_PHRASES",
    "compile_phrase",
    "exact_name_entry",
    "build_phrase_table",
]

# Optional "version"/"ver." prefix in front of a version number.
_V = r"(?:v(?:er(?:sion|\.))(?: |\.)?)"


def compile_phrase(phrase: str) -> re.Pattern[str]:
    """Compile an authored phrase; each whitespace run matches ``\\s+``."""
    return re.compile(re.sub(r"\s+", r"\\s+", phrase), re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class PhraseEntry:
    """A pattern plus how a match turns into license identifiers.

    Attributes:
        pattern (re.Pattern[str]): Case-insensitive expression searched in
            the license section.
        resolver (Resolver): A single identifier, an ordered tuple of
            candidates, or a callable mapping the first capture group to
            identifiers. An empty callable result means the family was
            recognized but the version was not.
    """

    pattern: re.Pattern[str]
    resolver: Resolver

    def resolve(self, match: re.Match[str]) -> tuple[str, ...]:
        resolver = self.resolver
        if isinstance(resolver, str):
            return (resolver,)
        if isinstance(resolver, tuple):
            return resolver
        captured = match.group(1) if match.re.groups else None
        return tuple(resolver(captured))


def _never(_: str | None) -> tuple[str, ...]:
    return ()


def _gpl(version: str | None) -> tuple[str, ...]:
    return (f"GPL_{version}",) if version in {"1", "2", "3"} else ()


def _lgpl(version: str | None) -> tuple[str, ...]:
    ident = {"2": "LGPL_2_1", "3": "LGPL_3_0"}.get(version or "")
    return (ident,) if ident else ()


def _artistic(version: str | None) -> tuple[str, ...]:
    return (f"Artistic_{version}_0",) if version in {"1", "2"} else ()


def _apache(version: str | None) -> tuple[str, ...]:
    ident = {"1.1": "Apache_1_1", "2": "Apache_2_0", "2.0": "Apache_2_0"}.get(version or "")
    return (ident,) if ident else ()


def _mozilla(version: str | None) -> tuple[str, ...]:
    ident = {"1.1": "Mozilla_1_1", "2": "Mozilla_2_0", "2.0": "Mozilla_2_0"}.get(version or "")
    return (ident,) if ident else ()


_GPL_ALL = ("GPL_1", "GPL_2", "GPL_3")
_LGPL_ALL = ("LGPL_2_1", "LGPL_3_0")
_ARTISTIC_ALL = ("Artistic_1_0", "Artistic_2_0")
_APACHE_ALL = ("Apache_1_1", "Apache_2_0")

_AUTHORED: tuple[tuple[str, Resolver], ...] = (
    (rf"under the same (?:terms|license) as perl {_V}?6", _never),
    (r"under the same (?:terms|license) as (?:the )?perl", "Perl_5"),
    (r"affero g", "AGPL_3"),
    (rf"GNU (?:general )?public license,? {_V}?([123])", _gpl),
    (r"GNU (?:general )?public license", _GPL_ALL),
    (rf"GNU (?:lesser|library) (?:general )?public license,? {_V}?([23])\D", _lgpl),
    (r"GNU (?:lesser|library) (?:general )?public license", _LGPL_ALL),
    (r"BSD license", "BSD"),
    (rf"Artistic license {_V}?(\d)", _artistic),
    (r"Artistic license", _ARTISTIC_ALL),
    (rf"Apache (?:software )?license,? {_V}?(\d(?:\.\d)?)", _apache),
    (r"Apache (?:software )?license", _APACHE_ALL),
    (rf"Mozilla public license,? {_V}?(\d(?:\.\d)?)", _mozilla),
    (rf"\bLGPL,? {_V}?(\d)", _lgpl),
    (r"\bLGPL", _LGPL_ALL),
    (rf"\bGPL,? {_V}?(\d)", _gpl),
    (r"\bGPL", _GPL_ALL),
    (r"\bBSD\b", "BSD"),
    (r"Artistic", _ARTISTIC_ALL),
    (r"\bMIT\b", "MIT"),
)

STATIC_PHRASES: tuple[PhraseEntry, ...] = tuple(
    PhraseEntry(compile_phrase(phrase), resolver) for phrase, resolver in _AUTHORED
)


def exact_name_entry(name: str, identifier: str) -> PhraseEntry:
    """Entry matching a canonical license name verbatim (case-insensitive)."""
    return PhraseEntry(re.compile(re.escape(name), re.IGNORECASE), identifier)


def build_phrase_table(named: Iterable[tuple[str, str]]) -> tuple[PhraseEntry, ...]:
    """Assemble the full table from ``(canonical_name, identifier)`` pairs.

    Exact-name entries come first, longest name first so that a name which
    contains another name still wins; the authored heuristics follow in
    their authored order.
    """
    ordered = sorted(
        {(name, ident) for name, ident in named if name},
        key=lambda pair: (-len(pair[0]), pair[1], pair[0]),
    )
    return tuple(exact_name_entry(name, ident) for name, ident in ordered) + STATIC_PHRASES
