import json
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .errors import CommandParseError, ConfigFileParseError

# Largest wait time.sleep and socket timeouts accept.
MAX_INTERVAL = int(threading.TIMEOUT_MAX)


@dataclass(frozen=True)
class Settings:
    username: str
    password: str
    interval: int = 0


def json_type_name(value: object) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _reject_constant(name: str) -> None:
    raise ValueError(f"non-standard JSON constant {name}")


def load_config_file(path: Union[str, Path]) -> dict:
    """Read a JSON config file and return its type-checked fields.

    ``username`` and ``password`` are required strings. ``interval`` is an
    optional JSON number, truncated to an int. Unknown keys are ignored.
    """
    try:
        with Path(path).open("r", encoding="utf-8") as f:
            raw = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigFileParseError("an error occurred when reading config file") from exc

    try:
        data = json.loads(raw, parse_constant=_reject_constant)
    except ValueError as exc:
        raise ConfigFileParseError("an error occurred when parsing config file") from exc
    if not isinstance(data, dict):
        raise ConfigFileParseError("an error occurred when parsing config file")

    if data.get("username") is None or data.get("password") is None:
        raise ConfigFileParseError("username and password are required")

    config = {}
    for field in ("username", "password"):
        value = data[field]
        if not isinstance(value, str):
            raise ConfigFileParseError(
                f"{field} should be string format, not {json_type_name(value)}"
            )
        config[field] = value

    interval = data.get("interval")
    if interval is not None:
        if isinstance(interval, bool) or not isinstance(interval, (int, float)):
            raise ConfigFileParseError(
                f"interval should be integer, not {json_type_name(interval)}"
            )
        try:
            config["interval"] = int(interval)
        except (OverflowError, ValueError) as exc:
            raise ConfigFileParseError(
                f"interval should be integer, not {interval!r}"
            ) from exc

    return config


def resolve_settings(
    username: str = "",
    password: str = "",
    config_path: Optional[Union[str, Path]] = None,
    interval: Optional[int] = None,
) -> Settings:
    """Merge CLI values with an optional config file and validate the result.

    A value given on the command line wins over the file's.
    """
    file_config: dict = {}
    if config_path:
        file_config = load_config_file(config_path)

    resolved_username = username or file_config.get("username", "")
    resolved_password = password or file_config.get("password", "")
    resolved_interval = interval if interval is not None else file_config.get("interval", 0)

    if not resolved_username or not resolved_password:
        raise CommandParseError("username and password are required.")
    if resolved_interval < 0:
        raise CommandParseError("-i option cannot be less than 0.")
    if resolved_interval > MAX_INTERVAL:
        raise CommandParseError(f"-i option cannot be greater than {MAX_INTERVAL}.")

    return Settings(
        username=resolved_username,
        password=resolved_password,
        interval=resolved_interval,
    )
