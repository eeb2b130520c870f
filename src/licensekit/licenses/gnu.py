# gnu.py
# SPDX-License-Identifier: MIT
"""GNU family licenses."""

from __future__ import annotations

from .base import License


class GPL1(License):
    id = "GPL_1"
    title = "The GNU General Public License, Version 1, February 1989"
    meta1 = "gpl"
    meta2 = "gpl_1"
    url = "https://www.gnu.org/licenses/old-licenses/gpl-1.0.txt"


class GPL2(License):
    id = "GPL_2"
    title = "The GNU General Public License, Version 2, June 1991"
    meta1 = "gpl"
    meta2 = "gpl_2"
    url = "https://www.gnu.org/licenses/old-licenses/gpl-2.0.txt"


class GPL3(License):
    id = "GPL_3"
    title = "The GNU General Public License, Version 3, June 2007"
    meta1 = "gpl"
    meta2 = "gpl_3"
    url = "https://www.gnu.org/licenses/gpl-3.0.txt"


class LGPL2(License):
    # No v2 metadata key exists for the Library GPL 2.0.
    id = "LGPL_2"
    title = "The GNU Library General Public License, Version 2, June 1991"
    meta1 = "lgpl"
    meta2 = "open_source"
    url = "https://www.gnu.org/licenses/old-licenses/lgpl-2.0.txt"


class LGPL21(License):
    id = "LGPL_2_1"
    title = "The GNU Lesser General Public License, Version 2.1, February 1999"
    meta1 = "lgpl"
    meta2 = "lgpl_2_1"
    url = "https://www.gnu.org/licenses/old-licenses/lgpl-2.1.txt"


class LGPL30(License):
    id = "LGPL_3_0"
    title = "The GNU Lesser General Public License, Version 3, June 2007"
    meta1 = "lgpl"
    meta2 = "lgpl_3_0"
    url = "https://www.gnu.org/licenses/lgpl-3.0.txt"


class AGPL3(License):
    id = "AGPL_3"
    title = "The GNU Affero General Public License, Version 3, November 2007"
    meta1 = "open_source"
    meta2 = "agpl_3"
    url = "https://www.gnu.org/licenses/agpl-3.0.txt"
