# guess.py
# SPDX-License-Identifier: MIT
"""Guess licenses from documentation text or distribution metadata.

All guessers return :class:`Guesses`: a sorted, de-duplicated tuple of
license identifiers. An empty result means "no guess" and is not an error.
Several identifiers mean the input was ambiguous; callers that need exactly
one answer must ask for it through :meth:`Guesses.only`, which refuses to
pick one out of many.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from .catalog import LicenseCatalog, get_catalog
from .log import get_logger

log = get_logger(__name__)

__all__ = [
    "AmbiguousGuessError",
    "Guesses",
    "SectionSyntax",
    "SECTION_SYNTAXES",
    "extract_license_section",
    "classify_from_text",
    "classify_from_metadata",
    "lookup_by_key",
]


class AmbiguousGuessError(RuntimeError):
    """A single license was requested from a multi-candidate guess."""


class Guesses(tuple):
    """Sorted, de-duplicated license identifiers."""

    __slots__ = ()

    def __new__(cls, identifiers: Iterable[str] = ()) -> Guesses:
        return super().__new__(cls, sorted(set(identifiers)))

    def only(self) -> str | None:
        """Return the single guess, or None when there is no guess.

        Raises:
            AmbiguousGuessError: If more than one license was guessed.
        """
        if len(self) > 1:
            raise AmbiguousGuessError(
                f"expected at most one license but guessed {len(self)}: {', '.join(self)}"
            )
        return self[0] if self else None

    def __repr__(self) -> str:
        return f"Guesses({list(self)!r})"


_SECTION_WORDS = r"(?:licen[cs]e|licensing|copyright|legal)\b"


@dataclass(frozen=True, slots=True)
class SectionSyntax:
    """How a documentation format marks the license section and its end."""

    name: str
    header: re.Pattern[str]
    terminator: re.Pattern[str]


SECTION_SYNTAXES: dict[str, SectionSyntax] = {
    "pod": SectionSyntax(
        name="pod",
        header=re.compile(r"=head\d\s+" + _SECTION_WORDS, re.IGNORECASE | re.MULTILINE),
        terminator=re.compile(r"=head\d|=cut", re.IGNORECASE),
    ),
    "markdown": SectionSyntax(
        name="markdown",
        header=re.compile(r"^#{1,6}[ \t]+" + _SECTION_WORDS, re.IGNORECASE | re.MULTILINE),
        terminator=re.compile(r"^#{1,6}[ \t]", re.MULTILINE),
    ),
}


def _syntax(name: str) -> SectionSyntax:
    try:
        return SECTION_SYNTAXES[name]
    except KeyError:
        raise ValueError(
            f"Unknown documentation syntax {name!r}; expected one of {sorted(SECTION_SYNTAXES)}"
        ) from None


def extract_license_section(text: str, *, syntax: str = "pod") -> str | None:
    """Return the license section (header included), or None if absent.

    The section runs from the first license-like heading up to the next
    heading or end-of-documentation marker, or to the end of ``text``.
    """
    rules = _syntax(syntax)
    header = rules.header.search(text)
    if header is None:
        return None
    end = rules.terminator.search(text, header.end())
    body = text[header.end():end.start() if end else len(text)]
    return header.group(0) + body


def classify_from_text(
    text: str,
    *,
    syntax: str = "pod",
    catalog: LicenseCatalog | None = None,
) -> Guesses:
    """Guess the license from embedded documentation.

    The phrase table is evaluated in order against the license section and
    the first matching entry decides the outcome. When that entry recognizes
    a license family but not its version, the result is empty rather than a
    weaker guess from a later entry.

    Args:
        text (str): Source or documentation text.
        syntax (str): ``"pod"`` or ``"markdown"``.
        catalog (LicenseCatalog | None): Catalog to use; defaults to the
            process-wide one.

    Returns:
        Guesses: Candidate identifiers, possibly empty.
    """
    section = extract_license_section(text, syntax=syntax)
    if section is None:
        return Guesses()
    phrases = (catalog or get_catalog()).phrases
    for entry in phrases:
        match = entry.pattern.search(section)
        if match is None:
            continue
        result = Guesses(entry.resolve(match))
        if not result:
            log.debug("Pattern %r matched without a version guess", entry.pattern.pattern)
        return result
    return Guesses()


# Key optionally quoted, ":" separator, value optionally quoted and optionally
# the first item of a JSON list or a YAML sequence.
_META_LICENSE_RE = re.compile(
    r"""\b["']?license["']?\s*:\s*(?:\[\s*|-\s+)?["']?([a-z_0-9]+)["']?""",
    re.MULTILINE,
)


def classify_from_metadata(text: str, *, catalog: LicenseCatalog | None = None) -> Guesses:
    """Guess the license from distribution metadata such as META.yml/META.json.

    The first ``license`` field is looked up verbatim among both v1 and v2
    metadata keys; no heuristics are applied.
    """
    match = _META_LICENSE_RE.search(text)
    if match is None:
        return Guesses()
    return Guesses((catalog or get_catalog()).lookup(match.group(1)))


def lookup_by_key(
    key: str,
    version: str | int | None = None,
    *,
    catalog: LicenseCatalog | None = None,
) -> Guesses:
    """Return the licenses known to use ``key`` as their metadata key.

    Raises:
        ValueError: If ``version`` is not ``None``, ``"1"`` or ``"2"``.
    """
    return Guesses((catalog or get_catalog()).lookup(key, version))
