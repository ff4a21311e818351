from dependency_injector import containers, providers

from app.adapters.external.coinbase.adapter import CoinbaseAdapter
from app.adapters.external.console.notification_adapter import (
    ConsoleNotificationAdapter,
)
from app.application.reporter import BuyReporter
from app.application.usecase.buy_usecase import BuyUseCase
from app.domain.models.settings import BuySettings
from app.domain.repositories.notification_repository import NotificationRepository
from app.domain.services.settlement_poller import SettlementPoller


class Container(containers.DeclarativeContainer):
    config = providers.Configuration()

    settings = providers.Dependency(instance_of=BuySettings)

    coinbase_adapter = providers.Singleton(
        CoinbaseAdapter,
        key=config.coinbase.key,
        secret=config.coinbase.secret,
        passphrase=config.coinbase.passphrase,
        api_uri=config.coinbase.api_uri,
        timeout=settings.provided.request_timeout_seconds,
    )

    notification_adapter: providers.Provider[NotificationRepository] = (
        providers.Singleton(ConsoleNotificationAdapter)
    )

    settlement_poller = providers.Factory(
        SettlementPoller,
        order_repository=coinbase_adapter,
        poll_interval=settings.provided.poll_interval_seconds,
    )

    reporter = providers.Factory(
        BuyReporter,
        notification_repo=notification_adapter,
    )

    # Use cases
    buy_usecase = providers.Factory(
        BuyUseCase,
        account_repository=coinbase_adapter,
        product_repository=coinbase_adapter,
        order_repository=coinbase_adapter,
        poller=settlement_poller,
        reporter=reporter,
        settings=settings,
    )
