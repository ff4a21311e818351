from decimal import Decimal
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, field_serializer

from app.domain.enums import Currency
from app.domain.exceptions import InvalidVenueResponse
from app.domain.models.amount import Amount, to_decimal


class Account(BaseModel):
    """거래소에 보유 중인 단일 통화 계좌"""

    model_config = ConfigDict(
        validate_assignment=True,
        arbitrary_types_allowed=True,
    )

    id: str
    currency: Currency
    balance: Decimal
    available: Decimal
    hold: Decimal

    @field_serializer("balance", "available", "hold")
    def serialize_decimal(self, value: Decimal) -> str:
        """Decimal을 문자열로 직렬화"""
        return format(value, "f")

    @property
    def available_amount(self) -> Amount:
        """주문에 사용 가능한 잔액"""
        return Amount(self.available, self.currency)

    @classmethod
    def from_coinbase_api(cls, data: dict[str, Any]) -> Self:
        """Coinbase API 응답을 Account 도메인 모델로 변환합니다."""
        return cls(
            id=str(data["id"]),
            currency=data["currency"],
            balance=to_decimal(data.get("balance", "0")),
            available=to_decimal(data["available"]),
            hold=to_decimal(data.get("hold", "0")),
        )


class Accounts(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    accounts: list[Account]

    def __len__(self) -> int:
        return len(self.accounts)

    def find(self, currency: Currency) -> Account | None:
        """특정 통화의 계좌 조회 (통화당 계좌는 하나만 존재해야 함)"""
        matched = [account for account in self.accounts if account.currency == currency]
        if len(matched) > 1:
            raise InvalidVenueResponse(
                f"Venue returned {len(matched)} accounts for currency {currency}"
            )
        return matched[0] if matched else None
