# other.py
# SPDX-License-Identifier: MIT
"""Mozilla and public-domain style dedications."""

from __future__ import annotations

from .base import License


class Mozilla11(License):
    id = "Mozilla_1_1"
    title = "The Mozilla Public License 1.1"
    meta1 = "mozilla"
    meta2 = "mozilla_1_1"
    url = "https://www.mozilla.org/MPL/1.1/"


class Mozilla20(License):
    id = "Mozilla_2_0"
    title = "Mozilla Public License Version 2.0"
    meta1 = "open_source"
    meta2 = "open_source"
    url = "https://www.mozilla.org/MPL/2.0/"


class CC010(License):
    id = "CC0_1_0"
    title = "the CC0 1.0 Universal License"
    meta1 = "unrestricted"
    meta2 = "unrestricted"
    url = "https://creativecommons.org/publicdomain/zero/1.0/"

    def terms(self) -> str:
        return f"The copyright holder has dedicated this work under:\n\n  {self.title}\n"


class Unlicense(License):
    id = "Unlicense"
    title = "The Unlicense"
    meta1 = "unrestricted"
    meta2 = "unrestricted"
    url = "https://unlicense.org/"
