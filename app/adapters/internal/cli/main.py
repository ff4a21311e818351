"""
buy-bitcoin 커맨드라인 진입점

    buy-bitcoin <amount>     펀딩 통화 <amount> 만큼 시장가 매수
    buy-bitcoin --init       설정 템플릿 생성 (거래 없음)
"""

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import NoReturn

from dependency_injector import providers
from pydantic import ValidationError

from app.adapters.external.config.credentials import CredentialStore
from app.adapters.external.console.notification_adapter import (
    ConsoleNotificationAdapter,
)
from app.application.dto.buy_dto import BuyResult
from app.application.reporter import BuyReporter
from app.container import Container
from app.domain.constants import CLI_PROGRAM_NAME, CONFIG_DIR_NAME
from app.domain.enums import ExitCode
from app.domain.exceptions import BuyError, InvalidAmountError
from app.domain.models.amount import Amount
from app.domain.models.settings import BuySettings
from common.logging import setup_logging

logger = logging.getLogger(__name__)


class UsageError(Exception):
    pass


class CliArgumentParser(argparse.ArgumentParser):
    """argparse 기본 종료 코드(2) 대신 UsageError를 발생시킵니다."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_parser() -> CliArgumentParser:
    parser = CliArgumentParser(
        prog=CLI_PROGRAM_NAME,
        description="Buy cryptocurrency with a market order and wait for settlement.",
    )
    parser.add_argument(
        "amount",
        nargs="?",
        help="amount of the funding currency to spend (ex. 50 or 12.34)",
    )
    parser.add_argument(
        "--init",
        action="store_true",
        help="create a configuration template and exit without trading",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        metavar="SECONDS",
        help="give up waiting for settlement after SECONDS",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="log debug output to stderr"
    )
    return parser


def _usage(parser: argparse.ArgumentParser, message: str | None = None) -> int:
    parser.print_usage(sys.stderr)
    if message:
        print(f"{CLI_PROGRAM_NAME}: {message}", file=sys.stderr)
    return ExitCode.USAGE


def _report_failure(error: BuyError) -> int:
    reporter = BuyReporter(ConsoleNotificationAdapter())
    asyncio.run(reporter.report(BuyResult.create_failure(error)))
    return error.exit_code


def _init_config(store: CredentialStore) -> int:
    path, created = store.init()
    if created:
        print(f"{CLI_PROGRAM_NAME}: Created {path}, fill in your API credentials.")
    else:
        print(f"{CLI_PROGRAM_NAME}: {path} already exists, leaving it untouched.")
    return ExitCode.OK


def main(argv: Sequence[str] | None = None, home: Path | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        return _usage(parser, str(e))

    if not args.init and args.amount is None:
        return _usage(parser)
    if args.init and args.amount is not None:
        return _usage(parser, "--init does not take an amount")

    try:
        settings = BuySettings.from_env()
        if args.timeout is not None:
            settings = BuySettings.model_validate(
                {**settings.model_dump(), "settlement_timeout_seconds": args.timeout}
            )
    except (ValidationError, ValueError) as e:
        print(f"{CLI_PROGRAM_NAME}: invalid settings: {e}", file=sys.stderr)
        return ExitCode.CONFIGURATION

    config_dir = settings.config_dir or (home or Path.home()) / CONFIG_DIR_NAME
    setup_logging(
        service_name=CLI_PROGRAM_NAME,
        level=logging.DEBUG if args.verbose else logging.CRITICAL,
        log_dir=config_dir / "logs",
    )
    store = CredentialStore(config_dir)

    if args.init:
        return _init_config(store)

    try:
        amount = Amount.parse(args.amount, settings.funding_currency)
    except InvalidAmountError as e:
        return _usage(parser, str(e))
    if not amount.is_positive:
        return _usage(parser, "amount must be greater than zero")

    try:
        credentials = store.load()
    except BuyError as e:
        return _report_failure(e)

    container = Container(settings=providers.Object(settings))
    container.config.from_dict({"coinbase": credentials.model_dump()})
    usecase = container.buy_usecase()

    try:
        result = asyncio.run(usecase.execute(amount))
    except KeyboardInterrupt:
        logger.warning("Interrupted while buying")
        print(f"{CLI_PROGRAM_NAME}: interrupted", file=sys.stderr)
        return ExitCode.INTERRUPTED

    if result.error is None:
        return ExitCode.OK
    return result.error.exit_code
