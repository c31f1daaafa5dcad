# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# perfcounter2csv/cli/args/builder.py
from __future__ import annotations

import argparse

from ...core.logger import c
from ..help_texts import ENV_HELP, EXIT_CODES, YAML_EXAMPLE


class HelpFormatter(argparse.RawDescriptionHelpFormatter):
    """Keeps the epilog layout; defaults are spelled out per flag so the URL password never shows up."""


def _build_epilog() -> str:
    return (
        c(ENV_HELP, "cyan")
        + "\n"
        + c("YAML example:\n", "cyan", ["bold"])
        + c(YAML_EXAMPLE, "cyan")
        + "\n"
        + c(EXIT_CODES, "cyan")
    )
