import argparse
import json
import logging
import os
import sys
from typing import Any, List, Optional

from gofr_view.config import ViewConfig
from gofr_view.config_docs import DEFAULT_LOG_LEVEL, validate_configuration
from gofr_view.driver import get_driver
from gofr_view.exceptions import GofrViewError
from gofr_view.logger import ConsoleLogger, Logger, session_logger
from gofr_view.models.view import ViewRequest

logger: Logger = session_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="gofr-view renderer - render a view (and its layout) to stdout"
    )
    parser.add_argument("view", type=str, help="Logical view name, e.g. users/profile")
    parser.add_argument(
        "--root",
        type=str,
        default=None,
        help="Template root directory (default: GOFR_VIEW_ROOT or asset/views)",
    )
    parser.add_argument("--language", type=str, default="", help="Language code, e.g. en")
    parser.add_argument("--site", type=str, default="", help="Site identifier")
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML config file (left, right, root, shared, autoescape)",
    )
    parser.add_argument("--left", type=str, default=None, help="Left tag delimiter (default: {%%)")
    parser.add_argument("--right", type=str, default=None, help="Right tag delimiter (default: %%})")
    parser.add_argument("--shared", type=str, default=None, help="Shared subdirectory name")
    data_group = parser.add_mutually_exclusive_group()
    data_group.add_argument("--data", type=str, default=None, help="Template data as a JSON object")
    data_group.add_argument("--data-file", type=str, default=None, help="JSON file with template data")
    parser.add_argument("--model", type=str, default=None, help="Body model as JSON")
    parser.add_argument(
        "--log-level",
        type=str,
        default=os.environ.get("GOFR_VIEW_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        help="Logging verbosity (default: INFO, or GOFR_VIEW_LOG_LEVEL env var)",
    )
    return parser


def load_config(args: argparse.Namespace) -> ViewConfig:
    """Environment first, then the YAML file, then explicit flags."""
    config = ViewConfig.from_env()
    if args.config:
        from_file = ViewConfig.from_yaml(args.config)
        file_settings = from_file.model_dump(include=from_file.model_fields_set)
        config = ViewConfig.from_mapping({**config.model_dump(), **file_settings})
    overrides = {
        "root": args.root,
        "left": args.left,
        "right": args.right,
        "shared": args.shared,
    }
    overrides = {key: value for key, value in overrides.items() if value}
    if overrides:
        config = ViewConfig.from_mapping({**config.model_dump(), **overrides})
    return config


def load_data(args: argparse.Namespace) -> dict:
    if args.data_file:
        with open(args.data_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    elif args.data:
        data = json.loads(args.data)
    else:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("template data must be a JSON object")
    return data


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if isinstance(logger, ConsoleLogger):
        logger.set_level(getattr(logging, args.log_level.upper(), logging.INFO))

    try:
        config = load_config(args)
        data = load_data(args)
        model: Any = json.loads(args.model) if args.model else None
    except GofrViewError as e:
        logger.error("Invalid configuration", error=str(e))
        return 1
    except (OSError, ValueError) as e:
        logger.error("Invalid input", error=str(e), error_type=type(e).__name__)
        return 1

    is_valid, errors = validate_configuration(config)
    for message in errors:
        logger.warning("Configuration problem", problem=message)
    if not is_valid:
        return 1

    connection = get_driver().connect(config, logger=logger)
    try:
        connection.open()
        html = connection.parse(
            ViewRequest(
                view=args.view,
                language=args.language,
                site=args.site,
                model=model,
                data=data,
            )
        )
    except GofrViewError as e:
        logger.error("Render failed", code=e.code, error=str(e))
        return 1
    finally:
        connection.close()

    sys.stdout.write(html)
    return 0


if __name__ == "__main__":
    sys.exit(main())
