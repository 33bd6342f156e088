from pathlib import Path

from ecobee_actions.config import load_config, save_config
from ecobee_actions.messages import TemperatureScale


def test_load_config_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "ecobee-actions.cfg"
    config = load_config(config_path)

    assert config.ecobee.temperature_scale is TemperatureScale.FAHRENHEIT
    assert config.logging.level == "INFO"
    assert config.logging.path is None
    assert config.logging.log_requests is False
    assert config.logging.loggers == {}
    assert config.path == config_path


def test_load_config_overrides_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "ecobee-actions.cfg"
    log_path = tmp_path / "logs" / "ecobee-actions.log"
    config_path.write_text(
        f"""
[ecobee]
temperature_scale = celsius

[logging]
level = DEBUG
path = {log_path}
log_requests = true
loggers = ecobee_actions.messages.event=ERROR
        """.strip()
        + "\n",
        encoding="utf-8",
    )

    config = load_config(config_path)

    assert config.ecobee.temperature_scale is TemperatureScale.CELSIUS
    assert config.logging.level == "DEBUG"
    assert config.logging.path == log_path
    assert config.logging.log_requests is True
    assert config.logging.loggers == {"ecobee_actions.messages.event": "ERROR"}


def test_load_config_falls_back_on_unknown_scale(tmp_path: Path, caplog) -> None:
    config_path = tmp_path / "ecobee-actions.cfg"
    config_path.write_text("[ecobee]\ntemperature_scale = kelvin\n", encoding="utf-8")

    config = load_config(config_path)

    assert config.ecobee.temperature_scale is TemperatureScale.FAHRENHEIT
    assert "Unknown temperature_scale 'kelvin'" in caplog.text


def test_save_config_round_trip(tmp_path: Path) -> None:
    config_path = tmp_path / "nested" / "ecobee-actions.cfg"
    config = load_config(config_path)
    config.raw.set("ecobee", "temperature_scale", "C")

    save_config(config)

    assert config_path.exists()
    assert load_config(config_path).ecobee.temperature_scale is TemperatureScale.CELSIUS
