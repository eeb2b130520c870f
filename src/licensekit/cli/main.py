# main.py
# SPDX-License-Identifier: MIT

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Optional, Sequence

from ..core.catalog import get_catalog
from ..core.config import TEXT_SYNTAXES, LicenseKitConfig, load_config_from_path
from ..core.factories import resolve_short_name
from ..core.guess import classify_from_metadata, classify_from_text, lookup_by_key


def _build_parser() -> argparse.ArgumentParser:
    """Build the top-level licensekit CLI argument parser."""
    parser = argparse.ArgumentParser(prog="licensekit", description="Guess software licenses")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (e.g., DEBUG, INFO, WARNING). Overrides the config file.",
    )
    parser.add_argument("-c", "--config", help="Path to config file (TOML or JSON).")
    subparsers = parser.add_subparsers(dest="command", required=True)

    text_p = subparsers.add_parser("text", help="Guess from documentation in a file.")
    text_p.add_argument("path", type=Path, help="File containing POD or Markdown.")
    text_p.add_argument(
        "--syntax",
        choices=TEXT_SYNTAXES,
        help="Documentation syntax (defaults to text.syntax from the config).",
    )

    meta_p = subparsers.add_parser("meta", help="Guess from a META.yml / META.json file.")
    meta_p.add_argument("path", type=Path, help="Metadata file.")

    key_p = subparsers.add_parser("key", help="List licenses using a metadata key.")
    key_p.add_argument("key", help="Metadata license key, e.g. perl_5.")
    key_p.add_argument("--meta-version", help="Metadata version: 1 or 2.")

    subparsers.add_parser("list", help="List known license definitions.")

    notice_p = subparsers.add_parser("notice", help="Print the notice for a short license name.")
    notice_p.add_argument("short_name", help="Short name such as GPL-2 or Apache-2.0.")
    notice_p.add_argument("--holder", required=True, help="Copyright holder.")
    notice_p.add_argument("--year", type=int, help="Copyright year (defaults to this year).")
    notice_p.add_argument("--program", help="Program name used in the notice.")

    return parser


def _load_config(path: Optional[str]) -> LicenseKitConfig:
    if not path:
        return LicenseKitConfig()
    return load_config_from_path(path)


def _cmd_list() -> int:
    """Print every definition in the catalog with its keys and name."""
    catalog = get_catalog()
    rows = []
    for ident in catalog.identifiers():
        definition = catalog.definition(ident)
        rows.append(
            {
                "id": ident,
                "name": definition.canonical_name(),
                "meta1": definition.v1_key(),
                "meta2": definition.v2_key(),
            }
        )
    print(json.dumps(rows, indent=2))
    return 0


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch a parsed CLI command to the appropriate handler.

    Returns:
        int: Process exit code, where 0 indicates success.
    """
    cfg = _load_config(args.config)
    if args.log_level:
        cfg.logging.level = args.log_level
    cfg.logging.apply()
    # First use in this process, so the config decides what gets discovered.
    get_catalog(cfg.catalog)
    cmd = args.command

    if cmd == "text":
        text = args.path.read_text(encoding="utf-8", errors="replace")
        guesses = classify_from_text(text, syntax=args.syntax or cfg.text.syntax)
        print(json.dumps(list(guesses)))
        return 0

    if cmd == "meta":
        text = args.path.read_text(encoding="utf-8", errors="replace")
        print(json.dumps(list(classify_from_metadata(text))))
        return 0

    if cmd == "key":
        print(json.dumps(list(lookup_by_key(args.key, args.meta_version))))
        return 0

    if cmd == "list":
        return _cmd_list()

    if cmd == "notice":
        license_obj = resolve_short_name(
            args.short_name,
            holder=args.holder,
            year=args.year,
            program=args.program,
        )
        sys.stdout.write(license_obj.notice())
        return 0

    print(f"Unknown command: {cmd}", file=sys.stderr)
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for the licensekit command-line interface.

    Args:
        argv (Sequence[str] | None): Optional argument list used instead of
            ``sys.argv[1:]``. Primarily useful for tests.

    Returns:
        int: Process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    try:
        return _dispatch(args)
    except Exception as exc:  # noqa: BLE001
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
