"""Shared CLI helpers."""

from __future__ import annotations

import argparse

from langsync.config import load_config, override_config
from langsync.contracts.config import LangSyncConfig


def resolve_config(args: argparse.Namespace) -> LangSyncConfig:
    config = load_config(args.config) if args.config else LangSyncConfig()
    return override_config(
        config,
        manifest_url=getattr(args, "manifest_url", None),
        store_path=getattr(args, "store", None),
    )
