# __init__.py
# SPDX-License-Identifier: MIT
