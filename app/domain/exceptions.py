"""도메인 예외 클래스들"""

from typing import TYPE_CHECKING, Any

from app.domain.enums import ExitCode

if TYPE_CHECKING:
    from app.domain.models.amount import Amount
    from app.domain.models.order import Order


# ==========================================================
# 값 검증 예외
# ==========================================================


class InvalidAmountError(ValueError):
    """금액 형식 오류"""

    def __init__(self, value: Any, reason: str = "not a valid decimal amount") -> None:
        self.value = value
        super().__init__(f"Invalid amount {value!r}: {reason}")


class CurrencyMismatchError(ValueError):
    """서로 다른 통화 간 연산 오류"""

    def __init__(self, left: str, right: str) -> None:
        self.left = left
        self.right = right
        super().__init__(f"Cannot combine amounts in {left} and {right}")


# ==========================================================
# 거래소 포트 예외
# ==========================================================


class VenueAPIError(RuntimeError):
    """거래소 호출 실패 (리포지토리 구현체가 발생시킴)"""

    pass


class InvalidVenueResponse(VenueAPIError):
    """거래소 응답 형식 오류"""

    pass


# ==========================================================
# 매수 워크플로우 예외
# ==========================================================


class BuyError(RuntimeError):
    """매수 워크플로우 실패의 기반 예외"""

    exit_code: ExitCode = ExitCode.VENUE_REQUEST


class ConfigurationMissing(BuyError):
    """인증 정보가 아직 설정되지 않음"""

    exit_code = ExitCode.CONFIGURATION

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(
            f"Configuration not found at {path}. "
            "Run with --init to create a template and fill in your API credentials."
        )


class ConfigurationInvalid(BuyError):
    """설정 파일 형식 오류"""

    exit_code = ExitCode.CONFIGURATION

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Configuration at {path} is invalid: {reason}")


class PreconditionError(BuyError):
    """주문 전 사전 조건 실패"""

    exit_code = ExitCode.PRECONDITION


class NoFundingAccount(PreconditionError):
    def __init__(self, currency: str) -> None:
        self.currency = currency
        super().__init__(f"Could not find {currency} account on the exchange!")


class InsufficientFunds(PreconditionError):
    def __init__(self, available: "Amount", requested: "Amount") -> None:
        self.available = available
        self.requested = requested
        super().__init__(
            f"Available balance ({available}) is less than {requested}"
        )


class PairNotFound(PreconditionError):
    def __init__(self, base: str, quote: str) -> None:
        self.base = base
        self.quote = quote
        super().__init__(f"Could not find {base}-{quote} pair!")


class AmbiguousPair(PreconditionError):
    """엄격 모드에서 여러 상품이 매칭됨"""

    def __init__(self, base: str, quote: str, product_ids: list[str]) -> None:
        self.base = base
        self.quote = quote
        self.product_ids = product_ids
        super().__init__(
            f"Found {len(product_ids)} products for {base}-{quote}: "
            f"{', '.join(product_ids)}"
        )


class VenueRequestFailed(BuyError):
    """거래소 요청 실패 (폴링 제외)"""

    exit_code = ExitCode.VENUE_REQUEST

    def __init__(self, operation: str, cause: BaseException) -> None:
        self.operation = operation
        self.cause = cause
        super().__init__(f"Request to {operation} failed: {cause}")


class UnexpectedOrderStatus(BuyError):
    """주문이 체결 완료 이외의 종료 상태에 도달함"""

    exit_code = ExitCode.UNEXPECTED_ORDER_STATUS

    def __init__(self, order: "Order") -> None:
        self.order = order
        super().__init__(
            f"Order returned an unexpected status: {order.status} "
            f"(settled={order.settled})"
        )

    @property
    def payload(self) -> dict[str, Any]:
        """진단용 주문 원본 데이터"""
        return self.order.raw


class PollingFailed(BuyError):
    """주문 상태 조회 자체가 실패함"""

    exit_code = ExitCode.SETTLEMENT

    def __init__(self, order_id: str, cause: BaseException) -> None:
        self.order_id = order_id
        self.cause = cause
        super().__init__(f"Polling order {order_id} failed: {cause}")


class SettlementTimeout(BuyError):
    """정산 대기 시간 초과"""

    exit_code = ExitCode.SETTLEMENT

    def __init__(self, order_id: str, waited: float, polls: int) -> None:
        self.order_id = order_id
        self.waited = waited
        self.polls = polls
        super().__init__(
            f"Order {order_id} still pending after {waited:.1f}s ({polls} polls)"
        )
