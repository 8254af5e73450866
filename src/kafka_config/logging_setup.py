"""
Copyright (c) 2024 Aiven Ltd
See LICENSE for details
"""

from kafka_config.config import Config

import logging
import sys


def configure_logging(*, config: Config) -> None:
    root_handler: logging.Handler | None = None

    log_handler = config.log_handler
    match log_handler:
        case "stderr" | None:
            root_handler = logging.StreamHandler(stream=sys.stderr)
        case "stdout":
            root_handler = logging.StreamHandler(stream=sys.stdout)
        case "systemd":
            from systemd import journal

            root_handler = journal.JournalHandler(SYSLOG_IDENTIFIER=config.log_identifier)
        case _:
            logging.basicConfig(level=config.log_level.upper(), format=config.log_format)
            logging.getLogger().setLevel(config.log_level.upper())
            logging.warning("Log handler %s not recognized, root handler not set.", log_handler)

    if root_handler is not None:
        root_handler.setFormatter(logging.Formatter(config.log_format))
        root_handler.setLevel(config.log_level.upper())
        root_handler.set_name(name=config.log_identifier)
        logging.root.addHandler(root_handler)

    logging.root.setLevel(config.log_level.upper())


def log_config(config: Config) -> None:
    logging.log(logging.DEBUG, "Config %r", config.model_dump())
