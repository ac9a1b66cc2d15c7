"""
Command Line Interface

trajectory-goals parse "накопить 50 тыс руб"
trajectory-goals percent 75 100
trajectory-goals apply best 80 95
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

import yaml

from .goal.config import GoalConfig
from .goal.modes import ProgressMode
from .goal.parser import GoalInputParser
from .goal.progress import apply_progress, calc_progress_percent


logger = logging.getLogger("trajectory")


def setup_logging(config: GoalConfig) -> None:
    """Setup logging"""
    logger.setLevel(getattr(logging, config.log_level.upper()))

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("[%(asctime)s] %(levelname)s: %(message)s")
        )
        logger.addHandler(handler)

        if config.log_file:
            file_handler = logging.FileHandler(config.log_file)
            file_handler.setFormatter(
                logging.Formatter("[%(asctime)s] %(levelname)s: %(message)s")
            )
            logger.addHandler(file_handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trajectory-goals",
        description="Parse goal descriptions and compute progress",
    )
    parser.add_argument("--config", "-c", help="Path to YAML config file")
    parser.add_argument("--log-level", "-l", help="Override log level")

    commands = parser.add_subparsers(dest="command", required=True)

    parse_cmd = commands.add_parser("parse", help="Parse a goal description")
    parse_cmd.add_argument("text", nargs="+", help="Goal description")

    percent_cmd = commands.add_parser("percent", help="Progress percentage")
    percent_cmd.add_argument("current", type=float)
    percent_cmd.add_argument("target", type=float)

    apply_cmd = commands.add_parser("apply", help="Apply a progress report")
    apply_cmd.add_argument("mode", choices=[m.value for m in ProgressMode])
    apply_cmd.add_argument("current", type=float)
    apply_cmd.add_argument("reported", type=float)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)

    try:
        config = GoalConfig.from_yaml(args.config) if args.config else GoalConfig()
        if args.log_level:
            config.log_level = args.log_level
        setup_logging(config)
    except (OSError, ValueError, AttributeError, yaml.YAMLError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    if args.command == "parse":
        text = " ".join(args.text)
        result = GoalInputParser(config).parse(text).to_dict()
    elif args.command == "percent":
        result = {"percent": calc_progress_percent(args.current, args.target)}
    else:
        mode = ProgressMode(args.mode)
        result = {"value": apply_progress(args.current, args.reported, mode)}

    logger.debug(f"{args.command}: {result}")
    print(json.dumps(result, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
