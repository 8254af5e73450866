"""
kafka_config - utils

Copyright (c) 2023 Aiven Ltd
See LICENSE for details
"""
from __future__ import annotations

from typing import Any

import ujson


def json_encode(obj: Any, *, sort_keys: bool = False, indent: int | None = None) -> str:
    # ujson escapes "/" by default, which mangles the ZooKeeper chroot
    return ujson.dumps(
        obj,
        sort_keys=sort_keys,
        indent=indent or 0,
        ensure_ascii=False,
        escape_forward_slashes=False,
    )


def json_decode(content: str) -> Any:
    return ujson.loads(content)
