# __init__.py
# SPDX-License-Identifier: MIT
"""Built-in license definitions.

Every submodule of this package is scanned when the catalog is built; any
:class:`License` subclass with a non-empty ``id`` becomes part of it.
"""

from .base import License

__all__ = ["License"]
