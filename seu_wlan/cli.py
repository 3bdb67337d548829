import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

import requests

from .errors import CommandParseError, SeuWlanError
from .logging_config import mask_value, setup_logging
from .portal_login import build_login_payload
from .scheduler import run
from .settings import resolve_settings


class ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:
        raise CommandParseError(message)


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="seu-wlan",
        usage="seu-wlan [options]",
        description="Log in to the SEU campus wireless portal, once or on an interval.",
    )
    parser.add_argument("-u", dest="username", default="", help="Your card number. (Required)")
    parser.add_argument("-p", dest="password", default="", help="Your password. (Required)")
    parser.add_argument(
        "-c",
        dest="config",
        default="",
        help="Your config file. Values given with -u, -p or -i take precedence.",
    )
    parser.add_argument(
        "-i",
        dest="interval",
        type=int,
        default=None,
        help="Re-send the login request every N seconds. 0 or omitted runs once.",
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level. (default: INFO)")
    parser.add_argument("--log-dir", type=Path, default=None, help="Also write logs to a dated file here.")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except CommandParseError as exc:
        logger = setup_logging()
        logger.error("%s", exc)
        parser.print_help(sys.stdout)
        return 1

    logger = setup_logging(args.log_dir, log_level=args.log_level)

    try:
        settings = resolve_settings(
            username=args.username,
            password=args.password,
            config_path=args.config or None,
            interval=args.interval,
        )
    except SeuWlanError as exc:
        logger.error("%s", exc)
        parser.print_help(sys.stdout)
        return 1

    logger.debug(
        "Resolved settings user=%s interval=%s",
        mask_value(settings.username),
        settings.interval,
    )
    payload = build_login_payload(settings)
    with requests.Session() as session:
        run(session, payload, settings.interval, logger)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
