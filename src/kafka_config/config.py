"""
kafka_config - configuration validation

Copyright (c) 2023 Aiven Ltd
See LICENSE for details
"""

from __future__ import annotations

from collections.abc import Mapping
from copy import deepcopy
from kafka_config.errors import InvalidConfiguration
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Any

import logging
import socket


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="kafka_config_", env_ignore_empty=True)

    registry_file: str | None = None
    zookeeper_hosts: list[str] = []
    hostname: str | None = None
    log_handler: str | None = "stderr"
    log_level: str = "WARNING"
    log_format: str = "%(name)-20s\t%(threadName)s\t%(levelname)-8s\t%(message)s"
    log_identifier: str = "kafka-config"

    def get_hostname(self) -> str:
        return self.hostname or socket.getfqdn()

    def set_config_defaults(self, new_config: Mapping[str, Any] | None = None) -> Config:
        config = deepcopy(self)
        if new_config:
            for key, value in new_config.items():
                setattr(config, key, value)

        validate_config(config)
        return config


def validate_config(config: Config) -> None:
    log_level = config.log_level
    if not isinstance(logging.getLevelName(log_level.upper()), int):
        valid_levels = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]
        raise InvalidConfiguration(f"Invalid log level: {log_level}, valid values are {valid_levels}")

    if config.hostname is not None and not config.hostname.strip():
        raise InvalidConfiguration("'hostname' must not be blank when set")
