# base.py
# SPDX-License-Identifier: MIT
"""Base class for license definitions."""

from __future__ import annotations

import datetime
from typing import ClassVar


class License:
    """A license applied to a piece of software by a rights holder.

    Subclasses describe one license variant through class attributes; the
    catalog reads them through the ``identifier``/``v1_key``/``v2_key``/
    ``canonical_name`` classmethods without instantiating anything.

    Attributes:
        id (str): License identifier, e.g. ``GPL_2``. Empty on abstract bases.
        title (str): Canonical display name.
        meta1 (str): Key used by v1 distribution metadata.
        meta2 (str): Key used by v2 distribution metadata.
        url (str | None): Where the license text is published.
    """

    id: ClassVar[str] = ""
    title: ClassVar[str] = ""
    meta1: ClassVar[str] = "unknown"
    meta2: ClassVar[str] = "unknown"
    url: ClassVar[str | None] = None

    def __init__(self, holder: str, *, year: int | None = None, program: str | None = None) -> None:
        if not holder:
            raise ValueError(f"{type(self).__name__} requires a rights holder")
        self.holder = holder
        self.year = year if year is not None else datetime.date.today().year
        self.program = program

    @classmethod
    def identifier(cls) -> str:
        return cls.id

    @classmethod
    def canonical_name(cls) -> str:
        return cls.title

    @classmethod
    def v1_key(cls) -> str:
        return cls.meta1

    @classmethod
    def v2_key(cls) -> str:
        return cls.meta2

    def terms(self) -> str:
        """Sentence naming the license in the notice."""
        return f"This is free software, licensed under:\n\n  {self.title}\n"

    def notice(self) -> str:
        """Short copyright notice suitable for a file header or README."""
        subject = self.program or "This software"
        return f"{subject} is copyright (c) {self.year} by {self.holder}.\n\n{self.terms()}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(holder={self.holder!r}, year={self.year!r})"
