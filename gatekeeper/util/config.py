"""
Configuration utilities for Gatekeeper.
Provides configuration loading from environment variables and files.

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


ENV_PREFIX = "GATEKEEPER_"


def load_config_from_env(prefix: str = ENV_PREFIX) -> Dict[str, str]:
    """
    Load configuration from environment variables with given prefix.
    """
    config = {}

    for key, value in os.environ.items():
        if key.startswith(prefix):
            # Remove prefix and convert to lowercase
            config_key = key[len(prefix):].lower()
            config[config_key] = value

    return config


def get_config_value(key: str, default: Any = None,
                     env_prefix: str = ENV_PREFIX) -> Any:
    """Get configuration value from environment or return default."""
    env_key = f"{env_prefix}{key.upper()}"
    return os.environ.get(env_key, default)


def load_config_file(file_path: str) -> Dict[str, Any]:
    """Load configuration from a file (JSON or YAML)."""
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    file_ext = Path(file_path).suffix.lower()

    with open(file_path, 'r', encoding='utf-8') as f:
        if file_ext in ['.json']:
            data = json.load(f)
        elif file_ext in ['.yaml', '.yml']:
            data = yaml.safe_load(f)
        else:
            raise ValueError(f"Unsupported configuration file format: {file_ext}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration file must contain a mapping: {file_path}")
    return data


def get_section(config: Dict[str, Any], name: str,
                default: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return a nested section of a configuration mapping, or the default."""
    section = config.get(name)
    if section is None:
        return dict(default or {})
    if not isinstance(section, dict):
        raise ValueError(f"Configuration section '{name}' must be a mapping")
    return section
