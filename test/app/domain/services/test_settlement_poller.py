"""정산 폴러 테스트"""

import asyncio
from unittest.mock import AsyncMock, Mock

import pytest

from app.adapters.external.coinbase.exceptions import CoinbaseAPIException
from app.domain.exceptions import PollingFailed, SettlementTimeout
from app.domain.models.order import Order
from app.domain.repositories.order_repository import OrderRepository
from app.domain.services.settlement_poller import SettlementPoller


class FakeClock:
    """sleep 호출만큼 시간이 흐르는 가짜 시계"""

    def __init__(self) -> None:
        self.now = 0.0
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def mock_order_repository():
    return Mock(spec=OrderRepository)


def _orders(order_payload, *statuses):
    return [
        Order.from_coinbase_api(order_payload(status=status, settled=status == "done"))
        for status in statuses
    ]


@pytest.mark.asyncio
async def test_polls_until_terminal(mock_order_repository, clock, order_payload):
    orders = _orders(order_payload, "pending", "pending", "done")
    mock_order_repository.get_order = AsyncMock(side_effect=orders)
    poller = SettlementPoller(
        mock_order_repository, poll_interval=2.0, sleep=clock.sleep, clock=clock
    )

    result = await poller.await_terminal("order-1")

    assert result is orders[-1]
    assert mock_order_repository.get_order.await_count == 3
    assert clock.sleeps == [2.0, 2.0]
    assert clock.now == pytest.approx(4.0)


@pytest.mark.asyncio
async def test_returns_immediately_when_not_pending(
    mock_order_repository, clock, order_payload
):
    orders = _orders(order_payload, "done")
    mock_order_repository.get_order = AsyncMock(side_effect=orders)
    poller = SettlementPoller(mock_order_repository, sleep=clock.sleep, clock=clock)

    result = await poller.await_terminal("order-1")

    assert result is orders[0]
    assert clock.sleeps == []


@pytest.mark.asyncio
async def test_any_non_pending_status_is_terminal(
    mock_order_repository, clock, order_payload
):
    """pending 이외의 상태는 수정 없이 그대로 반환"""
    orders = _orders(order_payload, "pending", "rejected")
    mock_order_repository.get_order = AsyncMock(side_effect=orders)
    poller = SettlementPoller(mock_order_repository, sleep=clock.sleep, clock=clock)

    result = await poller.await_terminal("order-1")

    assert result.status == "rejected"
    assert result.raw == orders[-1].raw


@pytest.mark.asyncio
async def test_polling_is_read_only(mock_order_repository, clock, order_payload):
    orders = _orders(order_payload, "pending", "pending", "pending", "done")
    mock_order_repository.get_order = AsyncMock(side_effect=orders)
    mock_order_repository.place_order = AsyncMock()
    poller = SettlementPoller(mock_order_repository, sleep=clock.sleep, clock=clock)

    await poller.await_terminal("order-1")

    mock_order_repository.place_order.assert_not_awaited()
    assert all(
        call.args == ("order-1",)
        for call in mock_order_repository.get_order.await_args_list
    )


@pytest.mark.asyncio
async def test_poll_failure_is_not_retried(mock_order_repository, clock, order_payload):
    mock_order_repository.get_order = AsyncMock(
        side_effect=[
            Order.from_coinbase_api(order_payload()),
            CoinbaseAPIException("502 Bad Gateway"),
        ]
    )
    poller = SettlementPoller(mock_order_repository, sleep=clock.sleep, clock=clock)

    with pytest.raises(PollingFailed) as exc_info:
        await poller.await_terminal("order-1")

    assert exc_info.value.order_id == "order-1"
    assert isinstance(exc_info.value.__cause__, CoinbaseAPIException)
    assert mock_order_repository.get_order.await_count == 2


@pytest.mark.asyncio
async def test_timeout_bounds_total_wait(mock_order_repository, clock, order_payload):
    mock_order_repository.get_order = AsyncMock(
        return_value=Order.from_coinbase_api(order_payload())
    )
    poller = SettlementPoller(
        mock_order_repository, poll_interval=2.0, sleep=clock.sleep, clock=clock
    )

    with pytest.raises(SettlementTimeout) as exc_info:
        await poller.await_terminal("order-1", timeout=5.0)

    # 0s, 2s, 4s 에 조회하고, 다음 대기는 5초를 넘기므로 중단
    assert mock_order_repository.get_order.await_count == 3
    assert clock.sleeps == [2.0, 2.0]
    assert exc_info.value.polls == 3


@pytest.mark.asyncio
async def test_cancellation_propagates(mock_order_repository, order_payload):
    mock_order_repository.get_order = AsyncMock(
        return_value=Order.from_coinbase_api(order_payload())
    )
    poller = SettlementPoller(mock_order_repository, poll_interval=0.01)

    task = asyncio.create_task(poller.await_terminal("order-1"))
    await asyncio.sleep(0.05)
    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task


def test_poll_interval_must_be_positive(mock_order_repository):
    with pytest.raises(ValueError):
        SettlementPoller(mock_order_repository, poll_interval=0)
