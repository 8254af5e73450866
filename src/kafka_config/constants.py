"""
kafka_config - constants

Copyright (c) 2023 Aiven Ltd
See LICENSE for details
"""
from typing import Final

JMX_PORT: Final = 9999
DEFAULT_BROKER_PORT: Final = 9092
ZOOKEEPER_CHROOT_PREFIX: Final = "/kafka"
STANDALONE_BROKER_ID: Final = "1"
