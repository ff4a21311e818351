from abc import ABC, abstractmethod

from app.domain.models.order import Order, OrderRequest


class OrderRepository(ABC):
    @abstractmethod
    async def place_order(self, order_request: OrderRequest) -> Order:
        """주문을 실행합니다.

        Args:
            order_request: 주문 요청 정보

        Returns:
            Order: 접수된 주문 (보통 pending 상태)
        """

    @abstractmethod
    async def get_order(self, order_id: str) -> Order:
        """특정 주문의 현재 스냅샷을 조회합니다.

        Args:
            order_id: 주문 ID

        Returns:
            Order: 주문 정보
        """
