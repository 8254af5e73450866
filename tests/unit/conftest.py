"""
Copyright (c) 2023 Aiven Ltd
See LICENSE for details
"""

from pathlib import Path
from typing import Any

import json
import pytest

PROD_CLUSTERS = {
    "prod": {
        "brokers": {
            "kafka1.example.org": "1",
            "kafka3.example.org": "3",
            "kafka2.example.org": None,
        }
    },
    "analytics": {"brokers": {"an1.example.org": "11"}},
}


@pytest.fixture(name="clusters")
def fixture_clusters() -> dict[str, Any]:
    return json.loads(json.dumps(PROD_CLUSTERS))


@pytest.fixture(name="registry_file")
def fixture_registry_file(tmp_path: Path) -> Path:
    path = tmp_path / "clusters.json"
    path.write_text(json.dumps(PROD_CLUSTERS), encoding="utf8")
    return path
