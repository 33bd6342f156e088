"""Configuration loader for ecobee-actions."""

from __future__ import annotations

import logging
from configparser import ConfigParser
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from . import constants
from .logging import parse_logger_levels
from .messages.temperature import TemperatureScale
from .messages.types import InvalidFunctionParameter

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class EcobeeConfig:
    temperature_scale: TemperatureScale = TemperatureScale.FAHRENHEIT


@dataclass(slots=True)
class LoggingConfig:
    level: str = "INFO"
    path: Optional[Path] = None  # console only when unset
    log_requests: bool = False
    loggers: Dict[str, str] = field(default_factory=dict)


@dataclass(slots=True)
class ActionsConfig:
    ecobee: EcobeeConfig
    logging: LoggingConfig
    raw: ConfigParser
    path: Path = field(default=constants.DEFAULT_CONFIG_PATH)


def _parse_scale(value: str) -> TemperatureScale:
    try:
        return TemperatureScale.parse(value)
    except InvalidFunctionParameter:
        LOGGER.warning(
            "Unknown temperature_scale '%s', falling back to Fahrenheit", value
        )
        return TemperatureScale.FAHRENHEIT


def load_config(path: Optional[Path] = None) -> ActionsConfig:
    """Load configuration from disk, applying defaults where necessary."""

    config_path = path or constants.DEFAULT_CONFIG_PATH
    parser = ConfigParser()
    parser.read_dict(
        {
            "ecobee": {
                "temperature_scale": constants.DEFAULT_TEMPERATURE_SCALE,
            },
            "logging": {
                "level": "INFO",
                "path": "",
                "log_requests": "false",
                "loggers": "",
            },
        }
    )

    if config_path.exists():
        parser.read(config_path)

    ecobee = EcobeeConfig(
        temperature_scale=_parse_scale(
            parser.get(
                "ecobee",
                "temperature_scale",
                fallback=constants.DEFAULT_TEMPERATURE_SCALE,
            )
        ),
    )

    log_path_value = parser.get("logging", "path", fallback="").strip()
    logging_config = LoggingConfig(
        level=parser.get("logging", "level", fallback="INFO"),
        path=Path(log_path_value).expanduser() if log_path_value else None,
        log_requests=parser.getboolean("logging", "log_requests", fallback=False),
        loggers=parse_logger_levels(parser.get("logging", "loggers", fallback="")),
    )

    return ActionsConfig(
        ecobee=ecobee,
        logging=logging_config,
        raw=parser,
        path=config_path,
    )


def save_config(config: ActionsConfig) -> None:
    """Persist the current configuration to disk."""

    config_path = config.path
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with config_path.open("w", encoding="utf-8") as stream:
        config.raw.write(stream)
