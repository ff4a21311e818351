import logging

from app.application.dto.buy_dto import BuyResult
from app.application.reporter import BuyReporter
from app.domain.exceptions import (
    AmbiguousPair,
    BuyError,
    CurrencyMismatchError,
    InsufficientFunds,
    InvalidAmountError,
    NoFundingAccount,
    PairNotFound,
    UnexpectedOrderStatus,
    VenueAPIError,
    VenueRequestFailed,
)
from app.domain.models.amount import Amount
from app.domain.models.order import Order, OrderRequest
from app.domain.models.product import Product
from app.domain.models.settings import BuySettings
from app.domain.repositories.account_repository import AccountRepository
from app.domain.repositories.order_repository import OrderRepository
from app.domain.repositories.product_repository import ProductRepository
from app.domain.services.settlement_poller import SettlementPoller

logger = logging.getLogger(__name__)


class BuyUseCase:
    """시장가 매수 워크플로우

    잔액 확인 → 마켓 조회 → 주문 → 정산 대기 → 결과 검증 → 보고 순서로
    실행하며, 각 단계의 실패는 즉시 워크플로우를 중단시킵니다.
    """

    def __init__(
        self,
        account_repository: AccountRepository,
        product_repository: ProductRepository,
        order_repository: OrderRepository,
        poller: SettlementPoller,
        reporter: BuyReporter,
        settings: BuySettings,
    ) -> None:
        self.account_repository = account_repository
        self.product_repository = product_repository
        self._order_repository = order_repository
        self.poller = poller
        self.reporter = reporter
        self.settings = settings

    async def execute(self, funding_amount: Amount) -> BuyResult:
        """펀딩 통화 금액만큼 대상 코인을 시장가로 매수합니다.

        Args:
            funding_amount: 사용할 금액 (펀딩 통화)

        Returns:
            BuyResult: 성공 결과 또는 단 하나의 오류를 담은 실패 결과
        """
        if funding_amount.currency != self.settings.funding_currency:
            raise CurrencyMismatchError(
                self.settings.funding_currency, funding_amount.currency
            )
        if not funding_amount.is_positive:
            raise InvalidAmountError(funding_amount.value, "amount must be positive")

        logger.info(
            f"Executing market buy - {self.settings.target_asset} "
            f"for {funding_amount}"
        )

        try:
            result = await self._run(funding_amount)
        except BuyError as e:
            logger.error(f"Market buy failed: {e}")
            result = BuyResult.create_failure(e)

        await self.reporter.report(result)
        return result

    async def _run(self, funding_amount: Amount) -> BuyResult:
        await self._check_balance(funding_amount)
        product = await self._resolve_product()
        order = await self._submit(OrderRequest.create_market_buy(product.id, funding_amount))

        logger.info(f"Order {order.id} placed, waiting for settlement")
        settled = await self.poller.await_terminal(
            order.id, timeout=self.settings.settlement_timeout_seconds
        )
        return self._validate(product, settled)

    async def _check_balance(self, funding_amount: Amount) -> None:
        currency = self.settings.funding_currency
        try:
            accounts = await self.account_repository.get_accounts()
            account = accounts.find(currency)
        except VenueAPIError as e:
            raise VenueRequestFailed("get accounts", e) from e

        if account is None:
            raise NoFundingAccount(currency)

        available = account.available_amount
        logger.info(f"Available {currency} balance: {available}")
        if available < funding_amount:
            raise InsufficientFunds(available, funding_amount)

    async def _resolve_product(self) -> Product:
        base = self.settings.target_asset
        quote = self.settings.funding_currency
        try:
            products = await self.product_repository.get_products()
        except VenueAPIError as e:
            raise VenueRequestFailed("get products", e) from e

        matched = [product for product in products if product.matches(base, quote)]
        if not matched:
            raise PairNotFound(base, quote)

        if len(matched) > 1:
            product_ids = [product.id for product in matched]
            if self.settings.strict_pair_resolution:
                raise AmbiguousPair(base, quote, product_ids)
            logger.warning(
                f"Multiple products match {base}-{quote} ({product_ids}), "
                f"using the first one"
            )
        return matched[0]

    async def _submit(self, order_request: OrderRequest) -> Order:
        logger.info(f"Placing order: {order_request.to_payload()}")
        try:
            return await self._order_repository.place_order(order_request)
        except VenueAPIError as e:
            raise VenueRequestFailed("place order", e) from e

    def _validate(self, product: Product, order: Order) -> BuyResult:
        if not order.is_filled:
            logger.error(f"Order {order.id} ended unexpectedly: {order.raw}")
            raise UnexpectedOrderStatus(order)

        spent = order.spent_funds
        if order.filled_size is None or spent is None:
            logger.error(f"Order {order.id} is missing fill details: {order.raw}")
            raise UnexpectedOrderStatus(order)

        return BuyResult.create_success(
            product_id=product.id,
            order_id=order.id,
            filled_size=Amount(order.filled_size, product.base_currency),
            funds_spent=Amount(spent, product.quote_currency),
        )
