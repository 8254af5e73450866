"""
kafka_config - command line interface

Copyright (c) 2023 Aiven Ltd
See LICENSE for details
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from kafka_config.config import Config
from kafka_config.deriver import kafka_config
from kafka_config.errors import InvalidConfiguration, InvalidRegistry
from kafka_config.logging_setup import configure_logging, log_config
from kafka_config.registry import load_registry
from kafka_config.utils import json_encode
from kafka_config.version import __version__
from pathlib import Path
from pydantic import ValidationError
from pydantic_settings import BaseSettings, JsonConfigSettingsSource, PydanticBaseSettingsSource
from typing import Type

import argparse
import contextlib
import logging

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="kafka-config", description="Kafka cluster configuration descriptor tool")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(help="Descriptor command", dest="command", required=True)

    parser_derive = subparsers.add_parser("derive", help="Print the configuration descriptor of a cluster as JSON")
    parser_clusters = subparsers.add_parser("clusters", help="List the clusters defined in the registry")

    # Options shared by all subparsers.
    for p in (parser_derive, parser_clusters):
        p.add_argument("--registry", help="Cluster registry JSON file path", required=False)
        p.add_argument("--config", help="Configuration file path", required=False)
        p.add_argument("--verbose", default=False, action="store_true", help="Enable debug logging.")

    parser_derive.add_argument("cluster", help="Name of the cluster in the registry")
    parser_derive.add_argument(
        "--zookeeper-host",
        dest="zookeeper_hosts",
        action="append",
        default=None,
        help="ZooKeeper host, repeat for every member of the ensemble. Order is kept.",
    )
    parser_derive.add_argument("--indent", type=int, default=None, help="Indent the JSON output.")

    return parser.parse_args(argv)


def get_config(args: argparse.Namespace) -> Config:
    """Returns config for the CLI

    Settings come from KAFKA_CONFIG_* environment variables, a JSON configuration
    file given with --config takes precedence over them.
    """
    if args.config is None:
        try:
            return Config()
        except ValidationError as e:
            raise InvalidConfiguration(str(e)) from e

    if not Path(args.config).is_file():
        raise InvalidConfiguration(f"Configuration file {args.config!r} does not exist")

    class CLIConfig(Config):
        @classmethod
        def settings_customise_sources(
            cls,
            settings_cls: Type[BaseSettings],
            init_settings: PydanticBaseSettingsSource,
            env_settings: PydanticBaseSettingsSource,
            dotenv_settings: PydanticBaseSettingsSource,
            file_secret_settings: PydanticBaseSettingsSource,
        ) -> tuple[
            JsonConfigSettingsSource,
            PydanticBaseSettingsSource,
            PydanticBaseSettingsSource,
            PydanticBaseSettingsSource,
            PydanticBaseSettingsSource,
        ]:
            return (
                JsonConfigSettingsSource(settings_cls=settings_cls, json_file=args.config),
                init_settings,
                env_settings,
                dotenv_settings,
                file_secret_settings,
            )

    try:
        return CLIConfig()
    except ValidationError as e:
        raise InvalidConfiguration(str(e)) from e


def dispatch(args: argparse.Namespace) -> None:
    overrides = {"log_level": "DEBUG"} if args.verbose else None
    config = get_config(args).set_config_defaults(overrides)
    configure_logging(config=config)
    log_config(config)

    registry = load_registry(args.registry or config.registry_file)

    if args.command == "derive":
        zookeeper_hosts = args.zookeeper_hosts or config.zookeeper_hosts
        descriptor = kafka_config(args.cluster, registry, zookeeper_hosts, hostname_provider=config.get_hostname)
        print(json_encode(descriptor.as_dict(), indent=args.indent))
    elif args.command == "clusters":
        for cluster_name in registry or {}:
            print(cluster_name)
    else:
        raise NotImplementedError(f"Unknown command: {args.command!r}")


@contextlib.contextmanager
def handle_keyboard_interrupt() -> Iterator[None]:
    try:
        yield
    except KeyboardInterrupt as e:
        raise SystemExit(2) from e


@handle_keyboard_interrupt()
def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)

    try:
        dispatch(args)
    except InvalidConfiguration as e:
        logger.error("Invalid configuration: %s", e)
        raise SystemExit(1) from e
    except InvalidRegistry as e:
        logger.error("Invalid cluster registry: %s", e)
        raise SystemExit(1) from e


if __name__ == "__main__":
    main()
