# SPDX-License-Identifier: LGPL-3.0-or-later
# perfcounter2csv/counters/fetcher.py
from __future__ import annotations

import logging
from typing import List, Optional

from ..core.exceptions import RetrievalError
from ..core.logger import LOGGER_NAME, Log
from ..vmware.clients.base import SessionClient
from .model import CounterDescriptor

PERF_COUNTER_PROPERTY = "perfCounter"


def fetch_counter_descriptors(
    session: SessionClient,
    logger: Optional[logging.Logger] = None,
) -> List[CounterDescriptor]:
    """
    Read every counter definition the endpoint knows about.

    The PerformanceManager is fetched with a single property retrieval. A
    failed retrieval raises RetrievalError; an object that simply has no
    counters gives an empty list.
    """
    logger = logger or logging.getLogger(LOGGER_NAME)

    ref = session.perf_manager_ref()
    props = session.retrieve_one(ref)

    counters = props.get(PERF_COUNTER_PROPERTY)
    if counters is None:
        Log.warn(logger, "PerformanceManager returned no perfCounter property", object=str(ref))
        return []

    try:
        descriptors = [CounterDescriptor.from_vim(info) for info in counters]
    except (TypeError, ValueError) as e:
        raise RetrievalError(f"malformed counter definition: {e}", cause=e)

    Log.trace(logger, "Fetched %d counter definitions", len(descriptors))
    return descriptors
