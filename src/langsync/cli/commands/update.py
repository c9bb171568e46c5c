"""Update command."""

from __future__ import annotations

import argparse

from langsync.cli.common import resolve_config
from langsync.cli.progress.rich import RichUpdateProgress
from langsync.contracts.report import UpdateResult
from langsync.sdk import LangSync


def format_update_summary(result: UpdateResult) -> str:
    lines = ["", result.title, "", result.message, ""]
    return "\n".join(lines)


async def run_update(args: argparse.Namespace) -> UpdateResult:
    config = resolve_config(args)

    if not args.verbose:
        with RichUpdateProgress() as progress:
            result = await LangSync.from_config(config, progress=progress).update()
    else:
        result = await LangSync.from_config(config).update()
        print(format_update_summary(result))

    return result


__all__ = ["format_update_summary", "run_update"]
