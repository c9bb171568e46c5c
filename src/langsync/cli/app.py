"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import sys

from langsync import ConfigError, StoreError, UpdateInProgressError


def main(argv: list[str] | None = None) -> int:
    import langsync.cli as cli

    parser = cli.build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        cli.logging.basicConfig(level=cli.logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        if args.command == "list":
            cli._run_list(args)
            return 0
        result = cli.asyncio.run(cli._run_update(args))
        return 0 if result.succeeded else 6
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except StoreError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except UpdateInProgressError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 5
    except Exception as exc:  # pragma: no cover
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
