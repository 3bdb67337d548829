"""Keep-alive login client for the SEU campus wireless portal."""

from .errors import (
    CommandParseError,
    ConfigFileParseError,
    ErrorKind,
    LoginError,
    ParseError,
    ReadError,
    RequestError,
    SeuWlanError,
)
from .portal_login import (
    LOGIN_URL,
    LoginResponse,
    LoginResult,
    Outcome,
    build_login_payload,
    classify,
    emit_log,
    login,
)
from .scheduler import run, run_in_loop, run_once
from .settings import Settings, load_config_file, resolve_settings

__all__ = [
    "CommandParseError",
    "ConfigFileParseError",
    "ErrorKind",
    "LOGIN_URL",
    "LoginError",
    "LoginResponse",
    "LoginResult",
    "Outcome",
    "ParseError",
    "ReadError",
    "RequestError",
    "SeuWlanError",
    "Settings",
    "build_login_payload",
    "classify",
    "emit_log",
    "load_config_file",
    "login",
    "resolve_settings",
    "run",
    "run_in_loop",
    "run_once",
]
