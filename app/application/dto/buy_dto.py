from typing import Self

from pydantic import BaseModel, ConfigDict

from app.domain.exceptions import BuyError
from app.domain.models.amount import Amount


class BuyResult(BaseModel):
    """시장가 매수 워크플로우 결과 (저장하지 않음)"""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    success: bool
    product_id: str | None = None
    order_id: str | None = None
    filled_size: Amount | None = None
    funds_spent: Amount | None = None
    error: BuyError | None = None

    @property
    def error_message(self) -> str | None:
        return str(self.error) if self.error else None

    @classmethod
    def create_success(
        cls,
        product_id: str,
        order_id: str,
        filled_size: Amount,
        funds_spent: Amount,
    ) -> Self:
        """성공 결과 생성"""
        return cls(
            success=True,
            product_id=product_id,
            order_id=order_id,
            filled_size=filled_size,
            funds_spent=funds_spent,
        )

    @classmethod
    def create_failure(cls, error: BuyError) -> Self:
        """실패 결과 생성"""
        return cls(success=False, error=error)
