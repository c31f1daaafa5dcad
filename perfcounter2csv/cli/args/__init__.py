# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# perfcounter2csv/cli/args/__init__.py
"""
Argument parsing for the perfcounter2csv CLI.
"""
from __future__ import annotations

from .builder import HelpFormatter, _build_epilog
from .groups import _add_connection_knobs, _add_global_config_logging, _add_output_knobs
from .parser import (
    _build_preparser,
    _layered_defaults,
    _load_merged_config,
    build_parser,
    parse_args_with_config,
    resolve_run_settings,
    setup_logging,
)

__all__ = [
    "HelpFormatter",
    "_add_connection_knobs",
    "_add_global_config_logging",
    "_add_output_knobs",
    "_build_epilog",
    "_build_preparser",
    "_layered_defaults",
    "_load_merged_config",
    "build_parser",
    "parse_args_with_config",
    "resolve_run_settings",
    "setup_logging",
]
