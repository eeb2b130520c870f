# permissive.py
# SPDX-License-Identifier: MIT
"""Permissive licenses: BSD, MIT, ISC, Apache, zlib."""

from __future__ import annotations

from .base import License


class BSD(License):
    id = "BSD"
    title = "The (three-clause) BSD License"
    meta1 = "bsd"
    meta2 = "bsd"
    url = "https://opensource.org/license/bsd-3-clause"


class FreeBSD(License):
    id = "FreeBSD"
    title = "The FreeBSD License"
    meta1 = "bsd"
    meta2 = "freebsd"
    url = "https://opensource.org/license/bsd-2-clause"


class MIT(License):
    id = "MIT"
    title = "The MIT (X11) License"
    meta1 = "mit"
    meta2 = "mit"
    url = "https://opensource.org/license/mit"


class ISC(License):
    id = "ISC"
    title = "The ISC License"
    meta1 = "open_source"
    meta2 = "open_source"
    url = "https://opensource.org/license/isc-license-txt"


class Apache11(License):
    id = "Apache_1_1"
    title = "The Apache Software License, Version 1.1"
    meta1 = "apache"
    meta2 = "apache_1_1"
    url = "https://www.apache.org/licenses/LICENSE-1.1"


class Apache20(License):
    id = "Apache_2_0"
    title = "The Apache License, Version 2.0, January 2004"
    meta1 = "apache"
    meta2 = "apache_2_0"
    url = "https://www.apache.org/licenses/LICENSE-2.0"


class Zlib(License):
    id = "Zlib"
    title = "The zlib License"
    meta1 = "zlib"
    meta2 = "zlib"
    url = "https://zlib.net/zlib_license.html"
