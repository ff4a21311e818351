from enum import IntEnum, StrEnum


class OrderSide(StrEnum):
    """주문 방향"""

    BUY = "buy"  # 매수
    SELL = "sell"  # 매도


class OrderType(StrEnum):
    """주문 타입"""

    MARKET = "market"  # 시장가
    LIMIT = "limit"  # 지정가


# ==========================================================
# OrderStatus Enum
# ==========================================================


class OrderStatus(StrEnum):
    """주문 상태

    PENDING 이외의 상태는 폴링 관점에서 모두 종료 상태로 취급합니다.
    """

    PENDING = "pending"  # 접수 대기
    RECEIVED = "received"  # 접수됨
    OPEN = "open"  # 호가창 등록
    ACTIVE = "active"  # 활성
    DONE = "done"  # 완료(체결)
    REJECTED = "rejected"  # 거부
    CANCELLED = "cancelled"  # 취소


class ExitCode(IntEnum):
    """CLI 종료 코드"""

    OK = 0
    USAGE = 1
    CONFIGURATION = 2
    PRECONDITION = 3
    VENUE_REQUEST = 4
    UNEXPECTED_ORDER_STATUS = 5
    SETTLEMENT = 6
    INTERRUPTED = 130


# ==========================================================
# Currency Type
# ==========================================================

# Currency는 단순히 문자열로 처리합니다 (BTC, ETH, USD 등)
Currency = str
