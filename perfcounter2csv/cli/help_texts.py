# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# perfcounter2csv/cli/help_texts.py
from __future__ import annotations

# Pure help text for the argparse epilog; no imports beyond this module.

ENV_HELP = r"""Environment:
  GOVMOMI_URL       default for -url
  GOVMOMI_INSECURE  default for -insecure (t/y/1 = true, case-insensitive)
  GOVMOMI_USERNAME  replaces the user name embedded in the URL
  GOVMOMI_PASSWORD  replaces the password embedded in the URL

The "u:" line on stdout echoes the URL as given, before the two overrides
above, with any password shown as xxxxx.

Precedence (lowest first): built-in defaults, --config files, environment, flags.
"""

YAML_EXAMPLE = r"""# perfcounter2csv configuration (YAML)
#
# Run:
#   perfcounter2csv --config vcenter.yaml
#
# Merge multiple configs (later overrides earlier):
#   perfcounter2csv --config base.yaml --config lab.yaml
#
url: https://vcenter.example.com/sdk
insecure: false           # skip certificate verification
output: performanceCounters.csv
timeout: 60               # seconds, applies to login and retrieval
"""

EXIT_CODES = r"""Exit codes:
  0    success
  2    configuration error (bad URL, flag or config file)
  10   authentication failed
  12   connection failed
  30   counter retrieval failed
  40   output file could not be written
  130  interrupted
"""
