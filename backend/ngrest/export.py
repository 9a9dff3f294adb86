"""Order-preserving export of a built configuration for generators."""

from __future__ import annotations

import json
from typing import Any, Optional

from ngrest.config import ConfigInterface


def export_config(config: ConfigInterface) -> dict[str, Any]:
    """Plain nested dicts in declaration order. Registered objects are left out."""
    return {
        "rest_url": config.get_rest_url(),
        "rest_primary_key": config.get_rest_primary_key(),
        "config_hash": config.get_config_hash(),
        "sections": {
            section: {key: entry.model_dump() for key, entry in entries.items()}
            for section, entries in config.get().items()
        },
    }


def export_json(config: ConfigInterface, indent: Optional[int] = None) -> str:
    """JSON document of :func:`export_config`; equal trees give equal strings."""
    # Keys stay in insertion order, generators rely on it
    return json.dumps(export_config(config), indent=indent, default=str, ensure_ascii=False)
