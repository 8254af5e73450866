"""
kafka_config - cluster registry files

Copyright (c) 2023 Aiven Ltd
See LICENSE for details
"""

from __future__ import annotations

from kafka_config.deriver import lookup_cluster
from kafka_config.errors import InvalidRegistry
from kafka_config.utils import json_decode
from pathlib import Path
from pydantic import ValidationError
from typing import Any

import logging

LOG = logging.getLogger(__name__)


def read_registry(path: Path) -> dict[str, Any]:
    """Read a registry document ``{"<cluster>": {"brokers": {"<host>": <id>}}}``.

    An empty file or a JSON ``null`` is an empty registry. Every record is validated, a null
    record stands for a standalone cluster.
    """
    try:
        content = path.read_text(encoding="utf8")
    except OSError as e:
        raise InvalidRegistry(f"Cannot read cluster registry {str(path)!r}: {e}") from e

    if not content.strip():
        LOG.info("Cluster registry %r is empty", str(path))
        return {}

    try:
        data = json_decode(content)
    except ValueError as e:
        raise InvalidRegistry(f"Cluster registry {str(path)!r} is not valid JSON: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidRegistry(f"Cluster registry {str(path)!r} must be a JSON object, got {type(data).__name__}")

    try:
        for cluster_name in data:
            lookup_cluster(data, cluster_name)
    except ValidationError as e:
        raise InvalidRegistry(f"Cluster registry {str(path)!r} has invalid cluster records: {e}") from e

    LOG.debug("Read %d cluster(s) from %r", len(data), str(path))
    return data


def load_registry(location: str | None) -> dict[str, Any] | None:
    """Registry at `location`, or None when no registry was configured."""
    if not location:
        return None
    return read_registry(Path(location))
