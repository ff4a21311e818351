"""도메인 모델 패키지

이 패키지는 다음을 제공합니다:
- 금액(Amount) 값 타입
- 계좌/상품/주문 모델
- 매수 워크플로우 설정
"""

from app.domain.models.account import Account, Accounts
from app.domain.models.amount import Amount
from app.domain.models.order import Order, OrderRequest
from app.domain.models.product import Product
from app.domain.models.settings import BuySettings

__all__ = [
    # Value types
    "Amount",
    # Venue models
    "Account",
    "Accounts",
    "Order",
    "OrderRequest",
    "Product",
    # Settings
    "BuySettings",
]
