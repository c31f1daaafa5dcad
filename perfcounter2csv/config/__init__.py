# SPDX-License-Identifier: LGPL-3.0-or-later
# perfcounter2csv/config/__init__.py
"""Connection settings: defaults, YAML files, environment and credential overrides."""

from .config_loader import Config
from .connection import (
    DEFAULT_URL,
    ConnectionConfig,
    apply_credential_overrides,
    parse_endpoint_url,
    resolve_connection_config,
)
from .env import ENV_INSECURE, ENV_PASSWORD, ENV_URL, ENV_USERNAME, get_env_bool, get_env_string, parse_bool

__all__ = [
    "Config",
    "ConnectionConfig",
    "DEFAULT_URL",
    "ENV_INSECURE",
    "ENV_PASSWORD",
    "ENV_URL",
    "ENV_USERNAME",
    "apply_credential_overrides",
    "get_env_bool",
    "get_env_string",
    "parse_bool",
    "parse_endpoint_url",
    "resolve_connection_config",
]
