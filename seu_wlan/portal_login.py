import base64
import json
import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional

import requests

from .errors import LoginError, ParseError, ReadError, RequestError
from .logging_config import mask_value
from .settings import Settings

LOGIN_URL = "http://w.seu.edu.cn/index.php/index/login"
MISSING = "<nil>"
# urllib3 only returns a chunk once it is full, so a one-byte chunk lets the
# deadline be checked as soon as any data arrives.
DEADLINE_CHUNK_SIZE = 1
READ_CHUNK_SIZE = 8192


class Outcome(Enum):
    ERROR = "error"
    FORCED_LOGOUT = "forced_logout"
    LOGIN = "login"


def _optional_str(value: Any) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    return str(value)


@dataclass(frozen=True)
class LoginResponse:
    status: Any = None
    info: Optional[str] = None
    logout_username: Optional[str] = None
    logout_ip: Optional[str] = None
    logout_location: Optional[str] = None

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "LoginResponse":
        return cls(
            status=data.get("status"),
            info=_optional_str(data.get("info")),
            logout_username=_optional_str(data.get("logout_username")),
            logout_ip=_optional_str(data.get("logout_ip")),
            logout_location=_optional_str(data.get("logout_location")),
        )

    @property
    def is_forced_logout(self) -> bool:
        # JSON numbers only; "1" and true fall through to a plain login.
        status = self.status
        if isinstance(status, bool) or not isinstance(status, (int, float)):
            return False
        return status == 1.0


@dataclass(frozen=True)
class LoginResult:
    response: Optional[LoginResponse] = None
    error: Optional[LoginError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def encode_password(password: str) -> str:
    return base64.b64encode(password.encode("utf-8")).decode("ascii")


def build_login_payload(settings: Settings) -> Dict[str, str]:
    return {
        "username": settings.username,
        "password": encode_password(settings.password),
        "enablemacauth": "0",
    }


def login_timeout(interval: int) -> Optional[int]:
    return interval if interval > 0 else None


def _read_body(response: requests.Response, deadline: Optional[float]) -> bytes:
    chunk_size = READ_CHUNK_SIZE if deadline is None else DEADLINE_CHUNK_SIZE
    chunks = []
    for chunk in response.iter_content(chunk_size=chunk_size):
        chunks.append(chunk)
        if deadline is not None and time.monotonic() >= deadline:
            raise ReadError()
    return b"".join(chunks)


def send_login_request(
    session: requests.Session,
    payload: Mapping[str, str],
    timeout: Optional[float],
    url: str = LOGIN_URL,
) -> LoginResponse:
    """POST the login form once and decode the JSON reply.

    ``timeout`` bounds the whole call, body included. Raises RequestError
    when the request cannot be sent or no reply headers arrive in time,
    ReadError when the body cannot be drained in time and ParseError when
    it is not a JSON object. A ``null`` body decodes to an empty response.
    """
    deadline = None
    request_timeout = None
    if timeout is not None:
        deadline = time.monotonic() + timeout
        request_timeout = (timeout, timeout)

    try:
        response = session.post(url, data=dict(payload), timeout=request_timeout, stream=True)
    except requests.RequestException as exc:
        raise RequestError() from exc

    with response:
        if deadline is not None and time.monotonic() >= deadline:
            raise RequestError()
        try:
            raw = _read_body(response, deadline)
        except requests.RequestException as exc:
            raise ReadError() from exc

    try:
        data = json.loads(raw)
    except ValueError as exc:
        raise ParseError() from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ParseError()
    return LoginResponse.from_json(data)


def login(
    session: requests.Session,
    payload: Mapping[str, str],
    timeout: Optional[float],
    logger: logging.Logger,
    url: str = LOGIN_URL,
) -> LoginResult:
    logger.debug(
        "Submitting login url=%s user=%s timeout=%s",
        url,
        mask_value(payload.get("username", "")),
        timeout,
    )
    try:
        response = send_login_request(session, payload, timeout, url=url)
    except LoginError as exc:
        logger.debug("Login attempt failed: %r", exc.__cause__)
        return LoginResult(error=exc)
    return LoginResult(response=response)


def classify(result: LoginResult) -> Outcome:
    if result.error is not None or result.response is None:
        return Outcome.ERROR
    if result.response.is_forced_logout:
        return Outcome.FORCED_LOGOUT
    return Outcome.LOGIN


def _show(value: Any) -> str:
    return MISSING if value is None else str(value)


def emit_log(logger: logging.Logger, result: LoginResult) -> Outcome:
    """Write exactly one log line describing the attempt."""
    outcome = classify(result)
    if outcome is Outcome.ERROR:
        logger.error("%s", result.error)
        return outcome

    response = result.response
    if outcome is Outcome.FORCED_LOGOUT:
        logger.info(
            "%s\tlogin user: %s\tlogin ip: %s\tlogin loc: %s",
            _show(response.info),
            _show(response.logout_username),
            _show(response.logout_ip),
            _show(response.logout_location),
        )
    else:
        logger.info("%s", _show(response.info))
    return outcome
