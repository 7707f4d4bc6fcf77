"""
Command-line interface and entry points for paramobject.

This module provides the public API for flattening a parameter object class
into the leaf parameters a schema generator documents, either from Python
(``main``) or from a shell (``paramobject extract pkg.module:Query``).
"""

import argparse
import json
import sys
from typing import Any, Dict, Optional

import yaml

from paramobject.bootstrap import apply_config, load_config
from paramobject.core.exceptions import ConfigurationError
from paramobject.core.imports import import_string
from paramobject.core.logger import get_logger, push_target, reset_target
from paramobject.extractor import extract_from
from paramobject.models.extractor_config import ExtractorConfig

logger = get_logger(__name__)


def main(
    target: str,
    config_path: Optional[str] = None,
    config_dict: Optional[Dict[str, Any]] = None,
    *,
    log_level: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Extract the leaf parameters of a parameter object class.

    Configuration is optional and can be given as:
    - A config file path (JSON/YAML)
    - A config dictionary (programmatic)

    Args:
        target: Import path of the class, e.g. ``"shop.api.params:OrderQuery"``
        config_path: Path to JSON/YAML configuration file
        config_dict: Direct configuration dictionary
        log_level: Overrides the configured log level

    Returns:
        Result with status, target and the list of parameter summaries

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigurationError: If the config or target cannot be resolved
        CyclicParameterObjectError: If the class graph refers back to itself

    Example:
        >>> from paramobject.cli import main
        >>> result = main("shop.api.params:OrderQuery")
        >>> [p["name"] for p in result["parameters"]]
        ['status', 'customer.email', 'customer.country', 'price.amount', 'price.currency', 'tags']
    """
    try:
        if config_dict is not None:
            config = ExtractorConfig.model_validate(config_dict)
            logger.info("Using provided config dictionary")
        elif config_path:
            config = load_config(config_path)
            logger.info(f"Loaded config from {config_path}")
        else:
            config = ExtractorConfig()

        if log_level:
            config = config.model_copy(update={"log_level": log_level.upper()})
        apply_config(config)

        cls = import_string(target)
        if not isinstance(cls, type):
            raise ConfigurationError("Target must be a class", target)

        token = push_target(cls.__qualname__)
        try:
            parameters = [parameter.to_dict() for parameter in extract_from(cls)]
        finally:
            reset_target(token)

        logger.info(f"Extracted {len(parameters)} parameters from {target}")
        return {
            "status": "success",
            "target": target,
            "parameters": parameters,
        }

    except Exception as e:
        logger.error(f"Parameter extraction failed: {str(e)}", exc_info=True)
        raise


def validate_config(config_path: str) -> bool:
    """
    Validate configuration without extracting anything.

    Checks the schema and that every plugin module and type resolves.

    Example:
        >>> validate_config("/path/to/paramobject.yaml")
        True
    """
    try:
        logger.info(f"Validating config: {config_path}")
        config = load_config(config_path)
        apply_config(config)
        logger.info("Configuration is valid")
        return True

    except Exception as e:
        logger.error(f"Config validation failed: {str(e)}")
        raise


def _render(result: Dict[str, Any], output_format: str) -> str:
    if output_format == "yaml":
        return yaml.safe_dump(result, sort_keys=False)
    return json.dumps(result, indent=2)


def cli() -> None:
    """
    Command-line interface for paramobject.

    Supports subcommands:
    - extract: Print the leaf parameters of a class
    - validate: Validate a configuration

    Usage:
        paramobject extract shop.api.params:OrderQuery --config paramobject.yaml
        paramobject validate paramobject.yaml
    """
    parser = argparse.ArgumentParser(
        prog="paramobject",
        description="Flatten parameter object classes into documented API parameters"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Command to execute"
    )

    # 'extract' subcommand
    extract_parser = subparsers.add_parser(
        "extract",
        help="Print the leaf parameters of a parameter object class"
    )
    extract_parser.add_argument(
        "target",
        help="Import path of the class (pkg.module:Name)"
    )
    extract_parser.add_argument(
        "--config", "-c",
        help="Path to configuration file (JSON or YAML)"
    )
    extract_parser.add_argument(
        "--format", "-f",
        choices=("json", "yaml"),
        default="json",
        help="Output format"
    )
    extract_parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    # 'validate' subcommand
    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate configuration without extracting"
    )
    validate_parser.add_argument(
        "config",
        help="Path to configuration file (JSON or YAML)"
    )

    args = parser.parse_args()

    if args.command == "extract":
        try:
            result = main(
                args.target,
                config_path=args.config,
                log_level="DEBUG" if args.verbose else None,
            )
            print(_render(result, args.format))
            sys.exit(0 if result.get("status") == "success" else 1)
        except Exception as e:
            logger.error(f"Extraction failed: {e}")
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
