from decimal import Decimal
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from app.domain.enums import OrderSide, OrderStatus, OrderType
from app.domain.exceptions import InvalidVenueResponse
from app.domain.models.amount import Amount, to_decimal


def _optional_decimal(data: dict[str, Any], key: str) -> Decimal | None:
    value = data.get(key)
    if value is None or value == "":
        return None
    return to_decimal(value)


class Order(BaseModel):
    """주문 정보 (거래소 응답 스냅샷)"""

    model_config = ConfigDict(validate_assignment=True, arbitrary_types_allowed=True)

    id: str
    side: OrderSide
    type: OrderType
    product_id: str
    status: OrderStatus
    settled: bool = False
    funds: Decimal | None = None
    specified_funds: Decimal | None = None
    filled_size: Decimal | None = None
    executed_value: Decimal | None = None
    fill_fees: Decimal | None = None
    done_reason: str | None = None
    created_at: str | None = None
    raw: dict[str, Any] = Field(default_factory=dict, repr=False)

    @field_serializer(
        "funds",
        "specified_funds",
        "filled_size",
        "executed_value",
        "fill_fees",
    )
    def serialize_decimal(self, value: Decimal | None) -> str | None:
        """Decimal을 문자열로 직렬화"""
        return format(value, "f") if value is not None else None

    @property
    def is_pending(self) -> bool:
        """정산 대기 여부"""
        return self.status == OrderStatus.PENDING

    @property
    def is_filled(self) -> bool:
        """정산 완료 + 체결 완료 여부"""
        return self.settled and self.status == OrderStatus.DONE

    @property
    def spent_funds(self) -> Decimal | None:
        """실제 사용 금액 (funds가 없으면 specified_funds)"""
        return self.funds if self.funds is not None else self.specified_funds

    @classmethod
    def from_coinbase_api(cls, data: dict[str, Any]) -> Self:
        """Coinbase API 응답을 Order 도메인 모델로 변환합니다."""
        try:
            status = OrderStatus(data["status"])
        except ValueError:
            raise InvalidVenueResponse(
                f"Unknown order status {data['status']!r} for order {data.get('id')}"
            ) from None

        return cls(
            id=str(data["id"]),
            side=OrderSide(data["side"]),
            type=OrderType(data["type"]),
            product_id=data["product_id"],
            status=status,
            settled=bool(data.get("settled", False)),
            funds=_optional_decimal(data, "funds"),
            specified_funds=_optional_decimal(data, "specified_funds"),
            filled_size=_optional_decimal(data, "filled_size"),
            executed_value=_optional_decimal(data, "executed_value"),
            fill_fees=_optional_decimal(data, "fill_fees"),
            done_reason=data.get("done_reason"),
            created_at=data.get("created_at"),
            raw=dict(data),
        )


class OrderRequest(BaseModel):
    """주문 요청 (시장가 매수 전용)"""

    model_config = ConfigDict(frozen=True)

    product_id: str
    funds: Amount
    side: OrderSide = OrderSide.BUY
    type: OrderType = OrderType.MARKET

    def to_payload(self) -> dict[str, str]:
        """거래소 전송용 페이로드 (금액은 정확한 십진수 문자열)"""
        return {
            "side": self.side.value,
            "product_id": self.product_id,
            "type": self.type.value,
            "funds": self.funds.to_wire(),
        }

    @classmethod
    def create_market_buy(cls, product_id: str, funds: Amount) -> Self:
        """시장가 매수 주문 생성"""
        return cls(product_id=product_id, funds=funds)
