"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version


def _package_version() -> str:
    try:
        return version("langsync")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="langsync")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    update_parser = subparsers.add_parser("update", help="Download the language catalogue and merge it locally")
    update_parser.add_argument("--config", default=None, help="Path to langsync.json (defaults are used if omitted)")
    update_parser.add_argument("--manifest-url", default=None, help="Override the language bookmarks URL")
    update_parser.add_argument("--store", default=None, help="Override the local language store path")
    update_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    list_parser = subparsers.add_parser("list", help="Show the locally installed languages")
    list_parser.add_argument("--config", default=None, help="Path to langsync.json (defaults are used if omitted)")
    list_parser.add_argument("--store", default=None, help="Override the local language store path")
    list_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    return parser


__all__ = ["build_parser"]
