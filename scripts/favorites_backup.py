#!/usr/bin/env python3
"""Export or restore the favorites collection.

Usage
-----
Point the tool at a storage directory and run::

    export OPENRADIO_STORAGE_DIR="$HOME/.local/share/openradio"
    python scripts/favorites_backup.py export -o favorites.json
    python scripts/favorites_backup.py restore favorites.json
    python scripts/favorites_backup.py list

Options::

    --storage-dir DIR    Storage directory (default: $OPENRADIO_STORAGE_DIR)
    --verbose, -v        Enable debug logging
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pyopenradio import OpenRadioConfig, OpenRadioError, build_dependencies  # noqa: E402


def _cmd_export(store, args: argparse.Namespace) -> int:
    text = store.get_all_as_string()
    if args.output:
        Path(args.output).write_text(text, encoding="utf-8")
        print(f"Exported {len(store)} favorite(s) to {args.output}", file=sys.stderr)
    else:
        print(text)
    return 0


def _cmd_restore(store, args: argparse.Namespace) -> int:
    text = Path(args.input).read_text(encoding="utf-8")
    restored = store.restore_from_string(text)
    print(f"Restored {len(restored)} favorite(s)", file=sys.stderr)
    return 0


def _cmd_list(store, args: argparse.Namespace) -> int:
    for station in sorted(store.get_all(), key=lambda s: s.sort_id):
        print(f"{station.sort_id:>4}  {station.id}  {station.name or ''}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Export or restore pyopenradio favorites.")
    parser.add_argument("--storage-dir", help="Storage directory (default: $OPENRADIO_STORAGE_DIR)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    export = sub.add_parser("export", help="Print the favorites collection")
    export.add_argument("--output", "-o", help="Write output to FILE instead of stdout")
    export.set_defaults(handler=_cmd_export)

    restore = sub.add_parser("restore", help="Add favorites from an export")
    restore.add_argument("input", help="File produced by 'export'")
    restore.set_defaults(handler=_cmd_restore)

    listing = sub.add_parser("list", help="List favorites by sort position")
    listing.set_defaults(handler=_cmd_list)

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    overrides = {"storage_dir": args.storage_dir, "persistent": True} if args.storage_dir else {}
    try:
        config = OpenRadioConfig.from_env(**overrides)
    except OpenRadioError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    if not config.persistent:
        print(
            "Configuration error: no storage directory; pass --storage-dir or set OPENRADIO_STORAGE_DIR",
            file=sys.stderr,
        )
        return 2

    dependencies = build_dependencies(config)
    try:
        return args.handler(dependencies.favorites_store, args)
    except OpenRadioError as exc:
        print(f"Storage error: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"File error: {exc}", file=sys.stderr)
        return 1
    finally:
        dependencies.close()


if __name__ == "__main__":
    sys.exit(main())
