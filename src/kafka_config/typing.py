"""
Copyright (c) 2023 Aiven Ltd
See LICENSE for details
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, TypeAlias, Union

HostName: TypeAlias = str
ClusterName: TypeAlias = str

# Registries written by hand in JSON or YAML often carry integer ids.
BrokerId: TypeAlias = Union[str, int, None]
BrokerTopology: TypeAlias = Mapping[HostName, BrokerId]

# Mapping of cluster name to record. Upstream callers may hand over None or an "undef"
# placeholder instead when no registry exists, so any object is accepted.
ArgClusterRegistry: TypeAlias = object
ArgZookeeperHosts: TypeAlias = Union[Sequence[HostName], Mapping[HostName, Any]]
