# SPDX-License-Identifier: LGPL-3.0-or-later
from types import SimpleNamespace

from perfcounter2csv.core.exceptions import AuthenticationError, RetrievalError
from perfcounter2csv.vmware.clients.base import SessionClient


def counter_info(group, name, rollup, level=1, summary=""):
    """Shaped like vim.PerformanceManager.CounterInfo."""
    return SimpleNamespace(
        groupInfo=SimpleNamespace(key=group, label=group, summary=group),
        nameInfo=SimpleNamespace(key=name, label=name, summary=summary),
        rollupType=rollup,
        level=level,
    )


DEFAULT_COUNTERS = [
    counter_info("cpu", "usage", "average", 1, "CPU usage as a percentage during the interval"),
    counter_info("cpu", "usage", "maximum", 4, "CPU usage as a percentage during the interval"),
    counter_info("mem", "consumed", "average", 1, "Amount of host physical memory consumed"),
    counter_info("net", "received", "average", 2, 'Average rate at which data was received, "KBps"'),
]


class FakeSession(SessionClient):
    def __init__(self, logger=None, config=None, *, counters=None, vcenter=True, fail=None, props=None):
        self.logger = logger
        self.config = config
        self.counters = list(DEFAULT_COUNTERS if counters is None else counters)
        self.vcenter = vcenter
        self.fail = fail
        self.props = props
        self.calls = []
        self.connected = False

    def connect(self):
        self.calls.append("connect")
        if self.fail == "connect":
            raise AuthenticationError("cannot log in to host:443: Cannot complete login due to an incorrect user name or password.")
        self.connected = True

    def disconnect(self):
        self.calls.append("disconnect")
        self.connected = False

    def is_vcenter(self):
        return self.vcenter

    def perf_manager_ref(self):
        return "PerfMgr"

    def retrieve_one(self, ref, path_set=None):
        self.calls.append(("retrieve_one", ref, path_set))
        if self.fail == "retrieve":
            raise RetrievalError("failed to retrieve PerfMgr: session is not authenticated")
        if self.props is not None:
            return dict(self.props)
        return {"perfCounter": list(self.counters), "historicalInterval": [], "description": None}


def factory_for(session):
    """Session factory for Orchestrator that hands out a prepared FakeSession."""

    def _factory(logger, config):
        session.logger = logger
        session.config = config
        return session

    return _factory
