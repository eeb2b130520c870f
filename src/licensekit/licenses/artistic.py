# artistic.py
# SPDX-License-Identifier: MIT
"""Artistic licenses and the Perl 5 dual license."""

from __future__ import annotations

from .base import License


class Artistic10(License):
    id = "Artistic_1_0"
    title = "The Artistic License 1.0"
    meta1 = "artistic"
    meta2 = "artistic_1"
    url = "https://www.perlfoundation.org/artistic-license-10.html"


class Artistic20(License):
    id = "Artistic_2_0"
    title = "The Artistic License 2.0 (GPL Compatible)"
    meta1 = "artistic_2"
    meta2 = "artistic_2"
    url = "https://www.perlfoundation.org/artistic-license-20.html"


class Perl5(License):
    """Artistic 1.0 or GPL 1 (or later), as Perl 5 itself."""

    id = "Perl_5"
    title = "the same terms as the perl 5 programming language system itself"
    meta1 = "perl"
    meta2 = "perl_5"

    def terms(self) -> str:
        return (
            "This is free software; you can redistribute it and/or modify it under\n"
            "the same terms as the Perl 5 programming language system itself.\n"
        )
