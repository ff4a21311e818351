from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, field_serializer

from app.domain.constants import CURRENCY_SYMBOLS
from app.domain.enums import Currency
from app.domain.exceptions import CurrencyMismatchError, InvalidAmountError


def to_decimal(value: Any) -> Decimal:
    """문자열/정수/Decimal 값을 정확한 Decimal로 변환합니다.

    float는 이진 부동소수점 오차가 이미 포함되어 있으므로 거부합니다.
    """
    if isinstance(value, bool) or isinstance(value, float):
        raise InvalidAmountError(value, "binary floats are not accepted")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation:
            raise InvalidAmountError(value) from None
    else:
        raise InvalidAmountError(value, f"unsupported type {type(value).__name__}")

    if not result.is_finite():
        raise InvalidAmountError(value, "amount must be finite")
    return result


class Amount(BaseModel):
    """통화 태그가 붙은 정확한 십진수 금액"""

    model_config = ConfigDict(frozen=True)

    value: Decimal
    currency: Currency

    def __init__(self, value: Decimal | int | str, currency: Currency) -> None:
        super().__init__(value=to_decimal(value), currency=currency)

    @classmethod
    def parse(cls, text: str, currency: Currency) -> Self:
        """사용자 입력이나 거래소 응답 문자열을 금액으로 변환"""
        return cls(text, currency)

    @field_serializer("value")
    def serialize_decimal(self, value: Decimal) -> str:
        """Decimal을 문자열로 직렬화 (float 변환 금지)"""
        return format(value, "f")

    def _check_currency(self, other: object) -> "Amount":
        if not isinstance(other, Amount):
            raise TypeError(f"Expected Amount, got {type(other).__name__}")
        if other.currency != self.currency:
            raise CurrencyMismatchError(self.currency, other.currency)
        return other

    def __add__(self, other: object) -> "Amount":
        other = self._check_currency(other)
        return Amount(self.value + other.value, self.currency)

    def __sub__(self, other: object) -> "Amount":
        other = self._check_currency(other)
        return Amount(self.value - other.value, self.currency)

    def __lt__(self, other: object) -> bool:
        return self.value < self._check_currency(other).value

    def __le__(self, other: object) -> bool:
        return self.value <= self._check_currency(other).value

    def __gt__(self, other: object) -> bool:
        return self.value > self._check_currency(other).value

    def __ge__(self, other: object) -> bool:
        return self.value >= self._check_currency(other).value

    def __str__(self) -> str:
        symbol = CURRENCY_SYMBOLS.get(self.currency)
        if symbol:
            return f"{symbol}{self.to_wire()}"
        return f"{self.to_wire()} {self.currency}"

    @property
    def is_positive(self) -> bool:
        return self.value > 0

    def quantize(self, places: int) -> "Amount":
        """지정한 소수점 자리수로 반올림 (ROUND_HALF_UP)"""
        exponent = Decimal(1).scaleb(-places)
        return Amount(self.value.quantize(exponent, rounding=ROUND_HALF_UP), self.currency)

    def format(self, places: int) -> str:
        """고정 소수점 문자열"""
        return format(self.quantize(places).value, "f")

    def to_wire(self) -> str:
        """거래소 전송용 정확한 십진수 문자열 (지수 표기 없음)"""
        return format(self.value, "f")
