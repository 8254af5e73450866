"""
kafka_config

Copyright (c) 2023 Aiven Ltd
See LICENSE for details
"""

from kafka_config.deriver import kafka_config
from kafka_config.models import ClusterConfig

__all__ = ["ClusterConfig", "kafka_config"]
