from abc import ABC, abstractmethod

from app.domain.models.product import Product


class ProductRepository(ABC):
    @abstractmethod
    async def get_products(self) -> list[Product]:
        """거래 가능한 상품 목록을 거래소가 반환한 순서대로 조회합니다."""
