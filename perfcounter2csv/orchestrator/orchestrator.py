# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# perfcounter2csv/orchestrator/orchestrator.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional

from rich.console import Console

from ..config.connection import ConnectionConfig
from ..core.logger import Log, log_step
from ..counters.csv_writer import DEFAULT_OUTPUT, write_rows
from ..counters.fetcher import fetch_counter_descriptors
from ..counters.model import CounterDescriptor
from ..counters.projector import project_rows
from ..vmware.clients.base import SessionClient

SessionFactory = Callable[[logging.Logger, ConnectionConfig], SessionClient]


@dataclass(frozen=True)
class RunOptions:
    output: Path = Path(DEFAULT_OUTPUT)
    verbose: int = 0


def _default_session_factory(logger: logging.Logger, config: ConnectionConfig) -> SessionClient:
    from ..vmware.clients.client import VSphereSession

    return VSphereSession(logger, config)


class Orchestrator:
    """
    connect -> fetch counter definitions -> project rows -> write CSV.

    The session is always disconnected once the definitions are in hand (or
    the fetch failed); the CSV is written afterwards.
    """

    def __init__(
        self,
        logger: logging.Logger,
        config: ConnectionConfig,
        options: Optional[RunOptions] = None,
        *,
        session_factory: Optional[SessionFactory] = None,
        console: Optional[Console] = None,
    ):
        self.logger = logger
        self.config = config
        self.options = options or RunOptions()
        self.session_factory = session_factory or _default_session_factory
        self.console = console or Console(highlight=False)

        Log.trace(
            self.logger,
            "Orchestrator init: endpoint=%s output=%s",
            config.redacted_url(),
            self.options.output,
        )

    def _say(self, text: str) -> None:
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)

    def _fetch(self) -> List[CounterDescriptor]:
        session = self.session_factory(self.logger, self.config)

        with log_step(self.logger, f"Connecting to {self.config.host}"):
            session.connect()

        try:
            self._say("connected to vCenter" if session.is_vcenter() else "connected to ESXi host")
            with log_step(self.logger, "Fetching performance counter definitions"):
                return fetch_counter_descriptors(session, self.logger)
        finally:
            session.disconnect()

    def run(self) -> int:
        Log.step(self.logger, "Dumping performance counter definitions", output=str(self.options.output))
        self._say(f"u: {self.config.given_url or self.config.redacted_url()}")

        descriptors = self._fetch()
        rows = project_rows(descriptors)

        out = self.options.output
        with log_step(self.logger, f"Writing {out}"):
            n = write_rows(rows, out)

        if n == 0:
            Log.warn(self.logger, "Endpoint reported no performance counters; wrote an empty file", output=str(out))
        else:
            Log.ok(self.logger, f"Wrote {n} counter definitions", output=str(out))
        return 0
