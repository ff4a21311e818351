import json

from app.application.dto.buy_dto import BuyResult
from app.domain.constants import (
    CLI_PROGRAM_NAME,
    CURRENCY_SYMBOLS,
    PRECISION_ASSET_PLACES,
    PRECISION_FUNDING_REPORT_PLACES,
)
from app.domain.exceptions import BuyError, UnexpectedOrderStatus
from app.domain.models.amount import Amount
from app.domain.repositories.notification_repository import NotificationRepository


def _format_funds(amount: Amount) -> str:
    text = amount.format(PRECISION_FUNDING_REPORT_PLACES)
    symbol = CURRENCY_SYMBOLS.get(amount.currency)
    if symbol:
        return f"{symbol}{text}"
    return f"{text} {amount.currency}"


class BuyReporter:
    """매수 결과를 사람이 읽을 수 있는 메시지로 만들어 전달합니다."""

    def __init__(self, notification_repo: NotificationRepository) -> None:
        self.notification_repo = notification_repo

    def format_success(self, result: BuyResult) -> str:
        if result.filled_size is None or result.funds_spent is None:
            raise ValueError("Successful result must carry filled size and funds")
        size = result.filled_size.format(PRECISION_ASSET_PLACES)
        return (
            f"{CLI_PROGRAM_NAME}: Done, bought {size} {result.filled_size.currency} "
            f"for {_format_funds(result.funds_spent)}"
        )

    def format_failure(self, error: BuyError) -> str:
        return f"{CLI_PROGRAM_NAME}: {error}"

    async def report(self, result: BuyResult) -> bool:
        """결과 전송 (성공은 info, 실패는 error 채널)"""
        if result.success:
            return await self.notification_repo.send_info(self.format_success(result))

        if result.error is None:
            raise ValueError("Failed result must carry an error")

        details = None
        if isinstance(result.error, UnexpectedOrderStatus):
            details = json.dumps(result.error.payload, indent=2, sort_keys=True, default=str)
        return await self.notification_repo.send_error(
            self.format_failure(result.error), details=details
        )
