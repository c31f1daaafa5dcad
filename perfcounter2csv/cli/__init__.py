# SPDX-License-Identifier: LGPL-3.0-or-later
# perfcounter2csv/cli/__init__.py
"""Command-line interface."""
