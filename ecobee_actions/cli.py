"""Command-line interface for ecobee-actions."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from . import constants
from .actions import ACTION_DOCS, EcobeeActions, describe_actions
from .config import ActionsConfig, load_config
from .core.utils import parse_iso8601
from .logging import configure_logging
from .messages import EcobeeFunction

LOGGER = logging.getLogger(__name__)


class RecordingProvider:
    """Provider that captures requests instead of sending them."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, EcobeeFunction]] = []

    def call_ecobee(self, selection: str, function: EcobeeFunction) -> bool:
        self.calls.append((selection, function))
        return True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=constants.APP_NAME,
        description="Invoke ecobee thermostat functions from automation rules",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=constants.DEFAULT_CONFIG_PATH,
        help=f"Path to configuration file (default: {constants.DEFAULT_CONFIG_PATH})",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list-actions", help="Describe every available action")

    subparsers.add_parser(
        "show-config", help="Print the resolved configuration and exit"
    )

    render_parser = subparsers.add_parser(
        "render",
        help="Build an action's request and print it without sending it",
    )
    render_parser.add_argument("action", help="Action name, e.g. set_hold")
    render_parser.add_argument(
        "--selection", default="registered", help="Thermostat selection"
    )
    render_parser.add_argument(
        "--args",
        default="{}",
        help='Action arguments as a JSON object, e.g. \'{"cool_hold_temp": 76}\'',
    )

    return parser


def _print_actions() -> None:
    for doc in describe_actions():
        print(f"{doc.name}: {doc.text}")
        for param in doc.params:
            print(f"    {param.name}: {param.text}")
        print()


def _decode_arguments(raw: str) -> Dict[str, Any]:
    try:
        arguments = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError(f"--args is not valid JSON: {exc}") from exc

    if not isinstance(arguments, dict):
        raise ValueError("--args must be a JSON object")

    for key, value in list(arguments.items()):
        if key.endswith("_date_time"):
            parsed = parse_iso8601(value)
            if parsed is not None:
                arguments[key] = parsed
    return arguments


def _render(config: ActionsConfig, action: str, selection: str, raw_args: str) -> int:
    name = action.replace("-", "_")
    if name not in ACTION_DOCS:
        LOGGER.error("Unknown action: %s", action)
        return 1

    try:
        arguments = _decode_arguments(raw_args)
    except ValueError as exc:
        LOGGER.error("%s", exc)
        return 1

    provider = RecordingProvider()
    actions = EcobeeActions.for_provider(
        provider, temperature_scale=config.ecobee.temperature_scale
    )
    try:
        accepted = getattr(actions, name)(selection, **arguments)
    except TypeError as exc:
        LOGGER.error("Invalid arguments for %s: %s", name, exc)
        return 1

    if not accepted or not provider.calls:
        return 1

    recorded_selection, function = provider.calls[0]
    print(
        json.dumps(
            {"selection": recorded_selection, "functions": [function.as_payload()]},
            indent=2,
        )
    )
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = load_config(args.config)
    configure_logging(
        config.logging.level,
        log_path=config.logging.path,
        log_requests=config.logging.log_requests,
        logger_levels=config.logging.loggers,
    )

    if args.command == "list-actions":
        _print_actions()
        return 0

    if args.command == "show-config":
        print(f"Configuration loaded from {config.path!s}\n")
        for section in config.raw.sections():
            print(f"[{section}]")
            for key, value in config.raw[section].items():
                print(f"{key} = {value}")
            print()
        return 0

    if args.command == "render":
        return _render(config, args.action, args.selection, args.args)

    LOGGER.error("Unknown command: %s", args.command)
    return 1


if __name__ == "__main__":
    sys.exit(main())
