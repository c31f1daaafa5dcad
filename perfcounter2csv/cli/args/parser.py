# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# perfcounter2csv/cli/args/parser.py
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from ...config.config_loader import Config
from ...config.connection import DEFAULT_URL, ConnectionConfig, resolve_connection_config
from ...config.env import ENV_INSECURE, ENV_URL, get_env_bool, get_env_string
from ...core.logger import Log, c
from ...orchestrator.orchestrator import RunOptions
from .builder import HelpFormatter, _build_epilog
from .groups import _add_connection_knobs, _add_global_config_logging, _add_output_knobs


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="perfcounter2csv",
        description=c("perfcounter2csv: dump ESXi / vCenter performance counter definitions to CSV", "green", ["bold"]),
        formatter_class=HelpFormatter,
        epilog=_build_epilog(),
    )

    _add_global_config_logging(p)
    _add_connection_knobs(p)
    _add_output_knobs(p)
    return p


def _build_preparser() -> argparse.ArgumentParser:
    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument("--config", action="append", default=[])
    pre.add_argument("-v", "--verbose", action="count", default=0)
    pre.add_argument("--log-file", dest="log_file", default=None)
    pre.add_argument("--json-logs", dest="json_logs", action="store_true")
    return pre


def _load_merged_config(logger: logging.Logger, cfgs: Sequence[str]) -> Dict[str, Any]:
    if not cfgs:
        return {}
    return Config.load_many(logger, list(cfgs))


def _layered_defaults(conf: Dict[str, Any], environ: Optional[Mapping[str, str]]) -> Dict[str, Any]:
    """
    Built-in defaults < config files < environment.
    CLI flags are applied on top by argparse itself.
    """
    out = dict(conf)
    out["url"] = get_env_string(ENV_URL, str(conf.get("url") or DEFAULT_URL), environ)
    out["insecure"] = get_env_bool(ENV_INSECURE, bool(conf.get("insecure", False)), environ)
    return out


def setup_logging(argv: Optional[Sequence[str]] = None) -> logging.Logger:
    """Phase 0: only the logging flags, so errors in later phases can be reported."""
    import sys

    if argv is None:
        argv = sys.argv[1:]
    args0, _rest = _build_preparser().parse_known_args(list(argv))
    return Log.setup(args0.verbose, args0.log_file, json_logs=args0.json_logs)


def parse_args_with_config(
    argv: Optional[Sequence[str]] = None,
    logger: Optional[logging.Logger] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Tuple[argparse.Namespace, Dict[str, Any], logging.Logger]:
    """
    Flow:
      Phase 0: parse ONLY global flags needed to locate config/logging
      Phase 1: load+merge config files
      Phase 2: layer environment over config and apply as parser defaults
      Phase 3: full parse; explicit flags win
    """
    import sys

    if argv is None:
        argv = sys.argv[1:]
    argv = list(argv)

    parser = build_parser()

    pre = _build_preparser()
    args0, _rest = pre.parse_known_args(argv)

    if logger is None:
        logger = Log.setup(args0.verbose, args0.log_file, json_logs=args0.json_logs)

    conf = _load_merged_config(logger, args0.config or [])

    Config.apply_as_defaults(logger, parser, _layered_defaults(conf, environ))

    args = parser.parse_args(argv)
    return args, conf, logger


def resolve_run_settings(
    args: argparse.Namespace,
    environ: Optional[Mapping[str, str]] = None,
) -> Tuple[ConnectionConfig, RunOptions]:
    """Turn parsed flags into the immutable settings the pipeline runs with."""
    config = resolve_connection_config(
        args.url,
        insecure=bool(args.insecure),
        timeout=args.timeout,
        environ=environ,
    )
    options = RunOptions(
        output=Path(args.output).expanduser(),
        verbose=int(args.verbose or 0),
    )
    return config, options
