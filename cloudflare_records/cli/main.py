#!/usr/bin/env python3
"""
Cloudflare Records - Command Line Interface

Main entry point for managing a Cloudflare DNS record from a YAML
configuration and a local state file.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict

import yaml

from ..core.record_manager import RecordManager

logger = logging.getLogger(__name__)

DEFAULT_STATE_FILE = "terraform.cfrecord.yaml"


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Cloudflare Records - Declarative Cloudflare DNS record management"
    )

    parser.add_argument(
        "--config",
        "-c",
        default="configs/config.yaml",
        help="Configuration file path (default: configs/config.yaml)",
    )

    parser.add_argument(
        "--state",
        "-s",
        default=DEFAULT_STATE_FILE,
        help=f"State file path (default: {DEFAULT_STATE_FILE})",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    apply_parser = subparsers.add_parser(
        "apply", help="Create or update the record to match a configuration"
    )
    apply_parser.add_argument(
        "--file", "-f", required=True, help="YAML file with the record configuration"
    )

    subparsers.add_parser("refresh", help="Refresh state from the provider")
    subparsers.add_parser("destroy", help="Delete the record")
    subparsers.add_parser("show", help="Show the record in state")

    import_parser = subparsers.add_parser("import", help="Adopt an existing record")
    import_parser.add_argument("id", help="Record identifier as subdomain|domain|type")

    args = parser.parse_args(argv)

    if args.command == "apply" and not Path(args.file).exists():
        print(f"Error: Record file '{args.file}' not found")
        sys.exit(1)

    config = load_config(args.config)
    config_logger(config, args.verbose)

    try:
        manager = RecordManager(config)

        if args.command == "apply":
            manager.display_state(manager.apply(load_record(args.file), args.state))
        elif args.command == "refresh":
            manager.display_state(manager.refresh(args.state))
        elif args.command == "destroy":
            manager.destroy(args.state)
        elif args.command == "import":
            manager.display_state(manager.import_record(args.id, args.state))
        elif args.command == "show":
            manager.display_state(manager.load_state(args.state))

        sys.exit(0)

    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        sys.exit(1)


def load_config(config_path: str) -> Dict:
    """Load configuration from YAML file."""
    try:
        with open(config_path, "r") as f:
            config = yaml.safe_load(f) or {}
        logger.info(f"Configuration loaded from {config_path}")
        return config
    except FileNotFoundError:
        logger.warning(f"Config file {config_path} not found, using defaults")
        return get_default_config()
    except yaml.YAMLError as e:
        logger.error(f"Error parsing config file: {e}")
        sys.exit(1)


def load_record(record_path: str) -> Dict:
    """Load a record configuration from YAML file."""
    with open(record_path, "r") as f:
        record = yaml.safe_load(f)
    if not isinstance(record, dict):
        raise ValueError(f"Record file {record_path} must contain a mapping")
    return record


def get_default_config() -> Dict:
    """Return default configuration."""
    return {
        "dns_providers": {"mock": {}},
        "default_provider": "mock",
        "logging": {"level": "INFO", "file": "cloudflare_records.log"},
    }


def config_logger(config: Dict, verbose: bool = False):
    """Configure logging."""
    logging_config = config.get("logging", None)
    if logging_config:
        log_level = "DEBUG" if verbose else logging_config.get("level", "INFO")
        log_file = logging_config.get("file", "cloudflare_records.log")

        logging.basicConfig(
            level=log_level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            handlers=[
                logging.FileHandler(log_file),
                logging.StreamHandler(sys.stdout),
            ],
        )
        return

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


if __name__ == "__main__":
    main()
