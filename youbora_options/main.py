#!/usr/bin/env python3
"""Resolve layered plugin options and print them for inspection."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import cast

import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from youbora_options.activation import ActivationError, validate_for_activation
from youbora_options.loader import load_layered


class Args(argparse.Namespace):
    config: list[Path] | None
    log_level: str
    rich_logs: bool
    only_set: bool
    no_activation_check: bool


logger = logging.getLogger(__name__)


def parse_args() -> Args:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Resolve Youbora plugin options",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--config",
        type=Path,
        action="append",
        help="Path to a YAML options file, can be repeated. Later files override earlier ones",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Set the logging level",
    )

    parser.add_argument(
        "--rich-logs",
        action="store_true",
        help="Enable rich colored logging output",
    )

    parser.add_argument(
        "--only-set",
        action="store_true",
        help="Print only the options that were explicitly set",
    )

    parser.add_argument(
        "--no-activation-check",
        action="store_true",
        help="Do not fail when the options are missing the account code",
    )

    return cast(Args, parser.parse_args())


def configure_logging(log_level: str, use_rich: bool = False) -> None:
    """Configure logging with optional rich formatting.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        use_rich: Whether to use rich colored logging
    """
    if use_rich:
        # rich renders the time and level itself
        handler: logging.Handler = RichHandler(
            console=Console(stderr=True),
            markup=True,
            rich_tracebacks=True,
            log_time_format="[%X]",
        )
        log_format = "%(message)s"
    else:
        handler = logging.StreamHandler()
        log_format = "%(asctime)s [%(name)s:%(lineno)d] %(levelname)s: %(message)s"

    logging.basicConfig(
        level=getattr(logging, log_level), format=log_format, handlers=[handler]
    )


def format_validation_error(error: ValidationError) -> str:
    return "\n".join(
        [
            f"{'.'.join([str(loc) for loc in err['loc']])}: {err['msg']} (got {err['input']})"
            for err in error.errors()
        ]
    )


def main() -> int:
    """Main function."""
    args = parse_args()

    configure_logging(args.log_level, args.rich_logs)

    try:
        options = load_layered(args.config or [])

        if not args.no_activation_check:
            validate_for_activation(options)

    except ValidationError as e:
        logger.error("Invalid options\n%s", format_validation_error(e))
        return 1
    except ActivationError as e:
        logger.error("Activation check failed: %s", e)
        logger.info("Set accountCode in an options file or YOUBORA_ACCOUNT_CODE")
        return 1
    except (OSError, yaml.YAMLError, ValueError) as e:
        logger.error("Could not load options: %s", e)
        return 1

    print(
        json.dumps(
            options.to_dict(only_set=args.only_set),
            indent=2,
            sort_keys=True,
            default=str,
        )
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
