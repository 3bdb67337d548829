import logging
import time
from typing import Callable, Mapping

import requests

from .portal_login import LOGIN_URL, LoginResult, emit_log, login, login_timeout


def attempt(
    session: requests.Session,
    payload: Mapping[str, str],
    interval: int,
    logger: logging.Logger,
    url: str = LOGIN_URL,
) -> LoginResult:
    result = login(session, payload, login_timeout(interval), logger, url=url)
    emit_log(logger, result)
    return result


def run_once(
    session: requests.Session,
    payload: Mapping[str, str],
    logger: logging.Logger,
    url: str = LOGIN_URL,
) -> LoginResult:
    return attempt(session, payload, 0, logger, url=url)


def run_in_loop(
    session: requests.Session,
    payload: Mapping[str, str],
    interval: int,
    logger: logging.Logger,
    url: str = LOGIN_URL,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Log in every ``interval`` seconds until the process is terminated."""
    logger.debug("Keep-alive loop started interval=%ss", interval)
    while True:
        attempt(session, payload, interval, logger, url=url)
        sleep(interval)


def run(
    session: requests.Session,
    payload: Mapping[str, str],
    interval: int,
    logger: logging.Logger,
    url: str = LOGIN_URL,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    if interval > 0:
        run_in_loop(session, payload, interval, logger, url=url, sleep=sleep)
    else:
        run_once(session, payload, logger, url=url)
