from app.domain.services.settlement_poller import SettlementPoller

__all__ = [
    "SettlementPoller",
]
