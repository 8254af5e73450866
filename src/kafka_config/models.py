"""
kafka_config - descriptor models

Copyright (c) 2023 Aiven Ltd
See LICENSE for details
"""

from __future__ import annotations

from kafka_config.typing import BrokerId, HostName
from pydantic import BaseModel, ConfigDict
from typing import Any


class ClusterRecord(BaseModel):
    """One registry entry, ``{"brokers": {host: id}}``."""

    model_config = ConfigDict(extra="ignore")

    brokers: dict[HostName, BrokerId]


class BrokersConfig(BaseModel):
    hash: dict[HostName, BrokerId]
    array: list[HostName]
    string: str
    graphite: str
    size: int


class ZookeeperConfig(BaseModel):
    hosts: list[HostName]
    chroot: str
    url: str


class ClusterConfig(BaseModel):
    """Connection descriptor of one Kafka cluster.

    The field names are the keys the templates read, so they must not be renamed.
    """

    brokers: BrokersConfig
    jmx_port: int
    zookeeper: ZookeeperConfig

    def as_dict(self) -> dict[str, Any]:
        return self.model_dump()
