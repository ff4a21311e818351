"""
주문 정산 폴러

주문이 pending 상태를 벗어날 때까지 고정 간격으로 주문 상태를 조회합니다.
최대 재시도 횟수나 지수 백오프는 없으며, 호출자가 timeout을 넘기거나
태스크를 취소하는 방식으로만 대기를 제한할 수 있습니다.
"""

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable

from app.domain.constants import SETTLEMENT_DEFAULT_POLL_INTERVAL_SECONDS
from app.domain.exceptions import PollingFailed, SettlementTimeout, VenueAPIError
from app.domain.models.order import Order
from app.domain.repositories.order_repository import OrderRepository

logger = logging.getLogger(__name__)

SleepFunc = Callable[[float], Awaitable[None]]
ClockFunc = Callable[[], float]


class SettlementPoller:
    def __init__(
        self,
        order_repository: OrderRepository,
        poll_interval: float = SETTLEMENT_DEFAULT_POLL_INTERVAL_SECONDS,
        sleep: SleepFunc = asyncio.sleep,
        clock: ClockFunc = time.monotonic,
    ) -> None:
        if poll_interval <= 0:
            raise ValueError("poll_interval must be positive")
        self._order_repository = order_repository
        self.poll_interval = poll_interval
        self._sleep = sleep
        self._clock = clock

    async def _fetch(self, order_id: str) -> Order:
        try:
            return await self._order_repository.get_order(order_id)
        except VenueAPIError as e:
            logger.error(f"Polling order {order_id} failed: {e}")
            raise PollingFailed(order_id, e) from e

    async def await_terminal(
        self, order_id: str, timeout: float | None = None
    ) -> Order:
        """주문이 종료 상태(pending 이외)가 될 때까지 대기합니다.

        Args:
            order_id: 주문 ID
            timeout: 최대 대기 시간(초). None이면 무제한

        Returns:
            Order: 처음 관측된 종료 상태의 주문 (수정 없이 반환)

        Raises:
            PollingFailed: 주문 조회 요청 자체가 실패한 경우
            SettlementTimeout: timeout 내에 종료 상태가 관측되지 않은 경우
        """
        started_at = self._clock()
        polls = 0

        while True:
            order = await self._fetch(order_id)
            polls += 1

            if not order.is_pending:
                logger.info(
                    f"Order {order_id} reached status '{order.status}' "
                    f"after {polls} poll(s)"
                )
                return order

            elapsed = self._clock() - started_at
            if timeout is not None and elapsed + self.poll_interval > timeout:
                logger.warning(
                    f"Order {order_id} still pending after {elapsed:.1f}s, giving up"
                )
                raise SettlementTimeout(order_id, elapsed, polls)

            logger.debug(
                f"Order {order_id} pending (poll {polls}), "
                f"retrying in {self.poll_interval}s"
            )
            await self._sleep(self.poll_interval)
