from typing import Any, Self

from pydantic import BaseModel, ConfigDict

from app.domain.enums import Currency


class Product(BaseModel):
    """거래 가능한 마켓 (ex. BTC-USD)"""

    model_config = ConfigDict(frozen=True)

    id: str
    base_currency: Currency
    quote_currency: Currency
    display_name: str | None = None
    trading_disabled: bool = False

    def matches(self, base: Currency, quote: Currency) -> bool:
        return self.base_currency == base and self.quote_currency == quote

    @classmethod
    def from_coinbase_api(cls, data: dict[str, Any]) -> Self:
        """Coinbase API 응답을 Product 도메인 모델로 변환합니다."""
        return cls(
            id=data["id"],
            base_currency=data["base_currency"],
            quote_currency=data["quote_currency"],
            display_name=data.get("display_name"),
            trading_disabled=bool(data.get("trading_disabled", False)),
        )
