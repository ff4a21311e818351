import asyncio
import logging

from app.adapters.external.coinbase.client import CoinbaseClient
from app.adapters.external.coinbase.exceptions import CoinbaseAPIException
from app.domain.constants import (
    NETWORK_COINBASE_API_BASE_URL,
    NETWORK_DEFAULT_REQUEST_TIMEOUT_SECONDS,
)
from app.domain.models.account import Account, Accounts
from app.domain.models.order import Order, OrderRequest
from app.domain.models.product import Product
from app.domain.repositories.account_repository import AccountRepository
from app.domain.repositories.order_repository import OrderRepository
from app.domain.repositories.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class CoinbaseAdapter(AccountRepository, ProductRepository, OrderRepository):
    def __init__(
        self,
        key: str,
        secret: str,
        passphrase: str,
        api_uri: str = NETWORK_COINBASE_API_BASE_URL,
        timeout: float = NETWORK_DEFAULT_REQUEST_TIMEOUT_SECONDS,
    ):
        self.client = CoinbaseClient(
            key=key,
            secret=secret,
            passphrase=passphrase,
            api_uri=api_uri,
            timeout=timeout,
        )

    # AccountRepository 구현
    async def get_accounts(self) -> Accounts:
        """계좌 목록 조회"""
        try:
            response = await asyncio.to_thread(self.client.get_accounts)
            return Accounts(
                accounts=[Account.from_coinbase_api(item) for item in response]
            )
        except Exception as e:
            logger.exception(f"Failed to get accounts: {e!s}")
            raise CoinbaseAPIException(f"Failed to get accounts: {e!s}") from e

    # ProductRepository 구현
    async def get_products(self) -> list[Product]:
        """상품 목록 조회 (거래소 응답 순서 유지)"""
        try:
            response = await asyncio.to_thread(self.client.get_products)
            return [Product.from_coinbase_api(item) for item in response]
        except Exception as e:
            logger.exception(f"Failed to get products: {e!s}")
            raise CoinbaseAPIException(f"Failed to get products: {e!s}") from e

    # OrderRepository 구현
    async def place_order(self, order_request: OrderRequest) -> Order:
        """주문을 실행합니다."""
        payload = order_request.to_payload()
        try:
            response = await asyncio.to_thread(
                self.client.place_order,
                side=payload["side"],
                product_id=payload["product_id"],
                order_type=payload["type"],
                funds=payload["funds"],
            )
            return Order.from_coinbase_api(response)
        except Exception as e:
            logger.exception(f"Failed to place order: {e!s}")
            raise CoinbaseAPIException(f"Failed to place order: {e!s}") from e

    async def get_order(self, order_id: str) -> Order:
        """특정 주문 정보를 조회합니다."""
        try:
            response = await asyncio.to_thread(self.client.get_order, order_id)
            return Order.from_coinbase_api(response)
        except Exception as e:
            logger.exception(f"Failed to get order {order_id}: {e!s}")
            raise CoinbaseAPIException(f"Failed to get order {order_id}: {e!s}") from e
