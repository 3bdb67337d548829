from enum import Enum


class ErrorKind(str, Enum):
    COMMAND_PARSE = "Command Parse Error"
    CONFIG_FILE_PARSE = "Config File Parse Error"
    HTTP_REQUEST = "HTTP Request Error"
    READ_RESPONSE = "Read Response Error"
    PARSE_JSON = "Parse JSON Error"


class SeuWlanError(Exception):
    """Base error carrying a fixed kind and a human-readable hint."""

    kind: ErrorKind

    def __init__(self, hint: str) -> None:
        super().__init__(hint)
        self.hint = hint

    def __str__(self) -> str:
        return f"[{self.kind.value}]  {self.hint}"


class CommandParseError(SeuWlanError):
    kind = ErrorKind.COMMAND_PARSE


class ConfigFileParseError(SeuWlanError):
    kind = ErrorKind.CONFIG_FILE_PARSE


class LoginError(SeuWlanError):
    """Failure of a single login attempt."""


class RequestError(LoginError):
    kind = ErrorKind.HTTP_REQUEST
    default_hint = "error occurred when sending post request"

    def __init__(self, hint: str = default_hint) -> None:
        super().__init__(hint)


class ReadError(LoginError):
    kind = ErrorKind.READ_RESPONSE
    default_hint = "error occurred when reading response from server"

    def __init__(self, hint: str = default_hint) -> None:
        super().__init__(hint)


class ParseError(LoginError):
    kind = ErrorKind.PARSE_JSON
    default_hint = "error occurred when parsing JSON format response"

    def __init__(self, hint: str = default_hint) -> None:
        super().__init__(hint)
