# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# perfcounter2csv/vmware/clients/client.py
"""
pyVmomi session for ESXi / vCenter.
"""
from __future__ import annotations

import logging
import socket
import ssl
from typing import Any, Dict, Optional, Sequence

from pyVim.connect import Disconnect, SmartConnect
from pyVmomi import vmodl

from ...config.connection import ConnectionConfig
from ...core.exceptions import RetrievalError, VSphereConnectionError
from ..vsphere.errors import classify_connect_error, wrap_retrieval_error
from .base import SessionClient

VCENTER_API_TYPE = "VirtualCenter"


class VSphereSession(SessionClient):
    """
    One authenticated pyVmomi session.

    ``config.timeout`` is installed as the process socket timeout for the
    lifetime of the session, so both the login and every later round trip are
    bounded. The previous value is restored on disconnect.
    """

    def __init__(self, logger: logging.Logger, config: ConnectionConfig) -> None:
        self.logger = logger
        self.config = config
        self.si: Any = None
        self.content: Any = None
        self._saved_timeout: Optional[float] = None
        self._timeout_installed = False

    @property
    def endpoint(self) -> str:
        return f"{self.config.host}:{self.config.port}"

    def _ssl_context(self) -> ssl.SSLContext:
        """
        SECURITY WARNING: with insecure=True the server certificate is not
        verified at all. Only use it against hosts with self-signed certificates
        on a trusted network.
        """
        if self.config.insecure:
            self.logger.warning("TLS certificate verification is DISABLED (insecure=True) for %s", self.endpoint)
            ctx = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
            ctx.check_hostname = False
            ctx.verify_mode = ssl.CERT_NONE
            return ctx
        return ssl.create_default_context()

    def _install_timeout(self) -> None:
        if self.config.timeout is None or self._timeout_installed:
            return
        self._saved_timeout = socket.getdefaulttimeout()
        socket.setdefaulttimeout(self.config.timeout)
        self._timeout_installed = True

    def _restore_timeout(self) -> None:
        if self._timeout_installed:
            socket.setdefaulttimeout(self._saved_timeout)
            self._timeout_installed = False

    def connect(self) -> None:
        cfg = self.config
        self._install_timeout()
        self.logger.debug(
            "Connecting to %s://%s%s as %r (timeout=%s)",
            cfg.scheme,
            self.endpoint,
            cfg.path,
            cfg.username or "",
            cfg.timeout,
        )
        try:
            self.si = SmartConnect(
                protocol=cfg.scheme,
                host=cfg.host,
                port=cfg.port,
                path=cfg.path,
                user=cfg.username or "",
                pwd=cfg.password or "",
                sslContext=self._ssl_context() if cfg.scheme == "https" else None,
            )
        except Exception as e:
            self.si = None
            self._restore_timeout()
            raise classify_connect_error(e, endpoint=self.endpoint)

        # Service content is fetched once per session and reused.
        try:
            self.content = self.si.RetrieveContent()
        except Exception as e:
            self.disconnect()
            raise wrap_retrieval_error(e, what="service content")

        self.logger.info("Connected to vSphere: %s", self.endpoint)

    def disconnect(self) -> None:
        try:
            if self.si is not None:
                Disconnect(self.si)
        except Exception as e:
            self.logger.error("Error during disconnect: %s", e)
        finally:
            self.si = None
            self.content = None
            self._restore_timeout()

    def _content(self) -> Any:
        if self.si is None or self.content is None:
            raise VSphereConnectionError("not connected", endpoint=self.endpoint)
        return self.content

    def is_vcenter(self) -> bool:
        about = self._content().about
        self.logger.debug("Endpoint: %s %s (apiType=%s)", about.fullName, about.apiVersion, about.apiType)
        return about.apiType == VCENTER_API_TYPE

    def perf_manager_ref(self) -> Any:
        ref = self._content().perfManager
        if ref is None:
            raise RetrievalError("endpoint does not advertise a PerformanceManager", endpoint=self.endpoint)
        return ref

    def retrieve_one(self, ref: Any, path_set: Optional[Sequence[str]] = None) -> Dict[str, Any]:
        what = getattr(ref, "_moId", None) or type(ref).__name__
        pc = self._content().propertyCollector

        obj_spec = vmodl.query.PropertyCollector.ObjectSpec(obj=ref, skip=False)
        prop_spec = vmodl.query.PropertyCollector.PropertySpec(
            type=type(ref),
            all=not path_set,
            pathSet=list(path_set or []),
        )
        filter_spec = vmodl.query.PropertyCollector.FilterSpec(objectSet=[obj_spec], propSet=[prop_spec])

        try:
            contents = pc.RetrieveContents([filter_spec])
        except Exception as e:
            raise wrap_retrieval_error(e, what=what)

        if not contents:
            raise RetrievalError(f"no properties returned for {what}", object=what)
        if len(contents) != 1:
            raise RetrievalError(f"expected one object for {what}, got {len(contents)}", object=what)

        oc = contents[0]
        missing = list(getattr(oc, "missingSet", None) or [])
        if missing:
            paths = ", ".join(str(getattr(m, "path", m)) for m in missing)
            raise RetrievalError(f"properties of {what} could not be read: {paths}", object=what)

        props = {p.name: p.val for p in (oc.propSet or [])}
        self.logger.debug("Retrieved %d properties of %s", len(props), what)
        return props
