# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# perfcounter2csv/config/config_loader.py
"""
YAML config files.

A config file is a flat mapping using the long option names:

    url: https://administrator@vsphere.local@vcenter.example.com/sdk
    insecure: true
    output: ./performanceCounters.csv
    timeout: 30

Several files may be given; later files override earlier ones. The merged
mapping sits below environment variables and CLI flags.
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any, Dict, Sequence

import yaml

from ..core.exceptions import ConfigurationError
from .env import parse_bool

KNOWN_KEYS = ("url", "insecure", "output", "timeout")


class Config:
    @staticmethod
    def load_file(logger: logging.Logger, path: Path) -> Dict[str, Any]:
        p = Path(path).expanduser()
        try:
            raw = p.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(f"cannot read config {p}: {e.strerror or e}", cause=e, path=str(p))

        try:
            data = yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"invalid YAML in {p}: {e}", cause=e, path=str(p))

        if data is None:
            logger.debug("Config %s is empty", p)
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"config {p} must be a mapping, got {type(data).__name__}", path=str(p))

        logger.debug("Loaded config %s (%d keys)", p, len(data))
        return Config.normalize(logger, data, source=str(p))

    @staticmethod
    def normalize(logger: logging.Logger, data: Dict[str, Any], *, source: str = "<config>") -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for k, v in data.items():
            key = str(k).replace("-", "_")
            if key not in KNOWN_KEYS:
                logger.warning("Ignoring unknown config key %r in %s", k, source)
                continue
            if v is None:
                continue
            if key == "insecure" and not isinstance(v, bool):
                v = parse_bool(str(v))
            elif key == "timeout":
                try:
                    v = float(v)
                except (TypeError, ValueError) as e:
                    raise ConfigurationError(f"timeout in {source} must be a number, got {v!r}", cause=e)
            else:
                v = v if isinstance(v, bool) else str(v)
            out[key] = v
        return out

    @staticmethod
    def load_many(logger: logging.Logger, paths: Sequence[str]) -> Dict[str, Any]:
        merged: Dict[str, Any] = {}
        for p in paths:
            merged.update(Config.load_file(logger, Path(p)))
        return merged

    @staticmethod
    def apply_as_defaults(logger: logging.Logger, parser: argparse.ArgumentParser, conf: Dict[str, Any]) -> None:
        if not conf:
            return
        parser.set_defaults(**conf)
        logger.debug("Applied config defaults: %s", ", ".join(sorted(conf)))
