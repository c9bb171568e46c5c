"""List command."""

from __future__ import annotations

import argparse

from langsync.cli.common import resolve_config
from langsync.contracts.language import Language
from langsync.sdk import LangSync


def format_language_list(languages: list[Language]) -> str:
    if not languages:
        return "No languages installed."
    lines = []
    for language in languages:
        label = f"{language.name} ({language.key})" if language.key else language.name
        lines.append(f"  {label} v{language.version}")
    return "\n".join(lines)


def run_list(args: argparse.Namespace) -> list[Language]:
    config = resolve_config(args)
    languages = LangSync.from_config(config).languages()
    print(format_language_list(languages))
    return languages


__all__ = ["format_language_list", "run_list"]
