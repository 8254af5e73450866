"""
kafka_config - cluster descriptor derivation

Reworks the cluster registry and the ZooKeeper host list into the shape the
Kafka configuration templates expect.

Copyright (c) 2023 Aiven Ltd
See LICENSE for details
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from kafka_config.constants import DEFAULT_BROKER_PORT, JMX_PORT, STANDALONE_BROKER_ID, ZOOKEEPER_CHROOT_PREFIX
from kafka_config.models import BrokersConfig, ClusterConfig, ClusterRecord, ZookeeperConfig
from kafka_config.typing import ArgClusterRegistry, ArgZookeeperHosts, BrokerTopology, ClusterName, HostName
from typing import Any

import logging
import socket

LOG = logging.getLogger(__name__)


def normalize_clusters(clusters: ArgClusterRegistry) -> Mapping[ClusterName, Any]:
    """Anything but a mapping counts as an empty registry.

    Configuration management layers pass "undef" style placeholders when no registry was defined.
    """
    if not isinstance(clusters, Mapping):
        return {}
    return clusters


def lookup_cluster(registry: Mapping[ClusterName, Any], cluster_name: ClusterName) -> ClusterRecord | None:
    """Validated record of `cluster_name`, None when missing or null.

    Other entries of the registry are never looked at.
    """
    record = registry.get(cluster_name)
    if record is None:
        return None
    return ClusterRecord.model_validate(record)


def normalize_zookeeper_hosts(zookeeper_hosts: ArgZookeeperHosts) -> list[HostName]:
    if isinstance(zookeeper_hosts, Mapping):
        return sorted(zookeeper_hosts.keys())
    if isinstance(zookeeper_hosts, (str, bytes)) or not isinstance(zookeeper_hosts, Sequence):
        raise TypeError(f"ZooKeeper hosts must be a sequence or a mapping of host names, got {zookeeper_hosts!r}")
    return list(zookeeper_hosts)


def standalone_cluster(hostname: HostName) -> ClusterRecord:
    return ClusterRecord(brokers={hostname: STANDALONE_BROKER_ID})


def brokers_config(brokers: BrokerTopology) -> BrokersConfig:
    hosts = list(brokers.keys())
    addresses = sorted(f"{host}:{DEFAULT_BROKER_PORT if port is None else port}" for host, port in brokers.items())
    return BrokersConfig(
        hash=dict(brokers),
        array=hosts,
        string=",".join(addresses),
        graphite=",".join(f"{host.replace('.', '_')}_{JMX_PORT}" for host in hosts),
        size=len(hosts),
    )


def zookeeper_config(cluster_name: ClusterName, hosts: list[HostName]) -> ZookeeperConfig:
    # cluster_name is used verbatim, a name containing "/" nests the chroot
    chroot = f"{ZOOKEEPER_CHROOT_PREFIX}/{cluster_name}"
    return ZookeeperConfig(hosts=hosts, chroot=chroot, url=f"{','.join(hosts)}{chroot}")


def kafka_config(
    cluster_name: ClusterName,
    clusters: ArgClusterRegistry,
    zookeeper_hosts: ArgZookeeperHosts,
    *,
    hostname_provider: Callable[[], HostName] = socket.getfqdn,
) -> ClusterConfig:
    """Build the connection descriptor of `cluster_name`.

    A cluster missing from the registry, or registered with a null record, is treated
    as a standalone single broker running on this host, so an unconfigured node still
    renders a usable config.

    :param cluster_name Registry key, also the ZooKeeper chroot name
    :param clusters Registry mapping cluster names to ``{"brokers": {host: id}}``
    :param zookeeper_hosts Host names, either a sequence or a mapping keyed by host name
    :param hostname_provider Returns the local FQDN, only called for unknown clusters
    """
    registry = normalize_clusters(clusters)
    hosts = normalize_zookeeper_hosts(zookeeper_hosts)

    cluster = lookup_cluster(registry, cluster_name)
    if cluster is None:
        hostname = hostname_provider()
        LOG.debug("Cluster %r not in registry, using standalone broker %r", cluster_name, hostname)
        cluster = standalone_cluster(hostname)

    brokers = brokers_config(cluster.brokers)
    LOG.debug("Cluster %r has %d broker(s), ZooKeeper hosts %r", cluster_name, brokers.size, hosts)
    return ClusterConfig(
        brokers=brokers,
        jmx_port=JMX_PORT,
        zookeeper=zookeeper_config(cluster_name, hosts),
    )
