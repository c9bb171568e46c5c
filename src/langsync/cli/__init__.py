"""Command-line interface for langsync."""

from __future__ import annotations

import asyncio as asyncio
import logging as logging

from langsync.cli.app import main as main
from langsync.cli.commands import list_languages as list_command
from langsync.cli.commands import update as update_command
from langsync.cli.parser import build_parser as build_parser

_format_update_summary = update_command.format_update_summary
_format_language_list = list_command.format_language_list

_run_update = update_command.run_update
_run_list = list_command.run_list
