# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# perfcounter2csv/__main__.py
from __future__ import annotations

import logging
import sys
import traceback
from typing import Mapping, Optional, Sequence

from .cli.args.parser import parse_args_with_config, resolve_run_settings, setup_logging
from .core.exceptions import PerfCounterError, format_exception_for_cli
from .orchestrator.orchestrator import Orchestrator
from .vmware.vsphere.errors import ExitCode, exit_code_for


def _report(logger: Optional[logging.Logger], e: BaseException, verbose: int) -> None:
    msg = f"Error: {format_exception_for_cli(e, verbose=verbose)}"
    if logger is None:
        print(msg, file=sys.stderr)
    else:
        logger.error(msg)


def run(argv: Optional[Sequence[str]] = None, environ: Optional[Mapping[str, str]] = None) -> int:
    logger: Optional[logging.Logger] = None
    verbose = 0

    # Phase 1: configuration (ConfigurationError can happen here)
    try:
        logger = setup_logging(argv)
        args, _conf, logger = parse_args_with_config(argv, logger=logger, environ=environ)
        verbose = int(args.verbose or 0)
        config, options = resolve_run_settings(args, environ)
    except PerfCounterError as e:
        _report(logger, e, verbose)
        return e.code
    except KeyboardInterrupt:
        _report(logger, KeyboardInterrupt("interrupted by user (Ctrl+C)"), verbose)
        return int(ExitCode.INTERRUPTED)

    # Phase 2: connect, fetch, write
    try:
        return Orchestrator(logger, config, options).run()
    except PerfCounterError as e:
        _report(logger, e, verbose)
        return e.code
    except KeyboardInterrupt:
        _report(logger, KeyboardInterrupt("interrupted by user (Ctrl+C)"), verbose)
        return int(ExitCode.INTERRUPTED)
    except Exception as e:
        # Unexpected: still one line, traceback only at debug level.
        _report(logger, e, max(verbose, 2))
        logger.debug(traceback.format_exc())
        return exit_code_for(e)


def main() -> None:
    raise SystemExit(run())


if __name__ == "__main__":
    main()
