"""
Command-line interface and entry points for structfactory.

Record types can be declared in a JSON or YAML file:

    {
        "options": {"fill_missing": true},
        "records": [{"name": "Point", "fields": ["x", "y"]}]
    }

``main`` builds them into a registry, ``validate_config`` only checks them.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from structfactory.core.logger import configure_root_logger, get_logger
from structfactory.factory import build_records
from structfactory.models.factory_config import FactoryConfig
from structfactory.registry import RecordRegistry

logger = get_logger(__name__)


def load_config(config_path: str) -> Dict[str, Any]:
    """
    Read a declaration file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the suffix is neither JSON nor YAML
    """
    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_file, "r") as f:
        if config_file.suffix == ".json":
            return json.load(f)
        if config_file.suffix in (".yaml", ".yml"):
            try:
                import yaml
            except ImportError:
                raise ImportError(
                    "PyYAML required for YAML configs. "
                    "Install with: pip install pyyaml"
                )
            return yaml.safe_load(f)

    raise ValueError(
        f"Unsupported config format: {config_file.suffix}. "
        "Use .json or .yaml"
    )


def main(
    config_path: Optional[str] = None,
    config_dict: Optional[Dict[str, Any]] = None,
    *,
    registry: Optional[RecordRegistry] = None,
    log_level: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Build every record type declared in a config file or dictionary.

    Args:
        config_path: Path to a JSON/YAML declaration file
        config_dict: Declarations given directly
        registry: Registry receiving named types (``default_registry`` if None)
        log_level: Overrides ``options.log_level`` from the config

    Returns:
        Summary with status and the members of each built type

    Example:
        >>> from structfactory.cli import main
        >>> main(config_dict={"records": [{"name": "Point", "fields": ["x", "y"]}]})
        {'status': 'success', 'records': [{'name': 'Point', 'members': ['x', 'y']}]}
    """
    try:
        if config_dict:
            config = config_dict
            logger.info("Using provided config dictionary")
        elif config_path:
            config = load_config(config_path)
            logger.info(f"Loaded config from {config_path}")
        else:
            raise ValueError(
                "Either config_path or config_dict must be provided"
            )

        cfg = FactoryConfig.model_validate(config)
        configure_root_logger(log_level or cfg.options.log_level)

        built = build_records(cfg, registry=registry)
        records: List[Dict[str, Any]] = [
            {"name": name, "members": list(record_type.members())}
            for name, record_type in built.items()
        ]

        logger.info(f"Built {len(records)} record type(s)")
        return {"status": "success", "records": records}

    except Exception as e:
        logger.error(f"Record build failed: {str(e)}", exc_info=True)
        raise


def validate_config(config_path: str) -> bool:
    """
    Validate a declaration file without touching the default registry.

    Returns:
        True if every declaration builds

    Raises:
        Exception: If the configuration is invalid
    """
    try:
        config = load_config(config_path)
        logger.info(f"Validating config: {config_path}")

        cfg = FactoryConfig.model_validate(config)
        build_records(cfg, registry=RecordRegistry())

        logger.info("Configuration is valid")
        return True

    except Exception as e:
        logger.error(f"Config validation failed: {str(e)}")
        raise


def cli(argv: Optional[List[str]] = None) -> None:
    """
    Command-line interface for structfactory.

    Usage:
        structfactory build /path/to/records.yaml
        structfactory validate /path/to/records.json
    """
    parser = argparse.ArgumentParser(
        prog="structfactory",
        description="Build record types from declaration files"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Command to execute"
    )

    build_parser = subparsers.add_parser(
        "build",
        help="Build the declared record types and print their members"
    )
    build_parser.add_argument(
        "config",
        help="Path to declaration file (JSON or YAML)"
    )
    build_parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate declarations without registering them"
    )
    validate_parser.add_argument(
        "config",
        help="Path to declaration file (JSON or YAML)"
    )

    args = parser.parse_args(argv)

    if args.command == "build":
        try:
            result = main(
                config_path=args.config,
                registry=RecordRegistry(),
                log_level="DEBUG" if args.verbose else None,
            )
            print(json.dumps(result, indent=2))
            sys.exit(0)
        except Exception as e:
            logger.error(f"Build failed: {e}")
            sys.exit(1)

    elif args.command == "validate":
        try:
            validate_config(args.config)
            sys.exit(0)
        except Exception as e:
            logger.error(f"Validation failed: {e}")
            sys.exit(1)

    else:
        parser.print_help()
        sys.exit(0)


if __name__ == "__main__":
    cli()
