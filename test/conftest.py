from typing import Any

import pytest


def make_order_payload(**overrides: Any) -> dict[str, Any]:
    """Coinbase 시장가 매수 주문 응답 샘플"""
    payload: dict[str, Any] = {
        "id": "d0c5340b-6d6c-49d9-b567-48c4bfca13d2",
        "product_id": "BTC-USD",
        "side": "buy",
        "type": "market",
        "stp": "dc",
        "specified_funds": "50",
        "funds": "49.75124378",
        "post_only": False,
        "created_at": "2018-01-06T22:25:36.146Z",
        "fill_fees": "0",
        "filled_size": "0",
        "executed_value": "0",
        "status": "pending",
        "settled": False,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def order_payload():
    return make_order_payload


@pytest.fixture
def accounts_payload() -> list[dict[str, Any]]:
    return [
        {
            "id": "71452118-efc7-4cc4-8780-a5e22d4baa53",
            "currency": "BTC",
            "balance": "0.0000000000000000",
            "available": "0.0000000000000000",
            "hold": "0.0000000000000000",
            "profile_id": "75da88c5-05bf-4f54-bc85-5c775bd68254",
        },
        {
            "id": "e316cb9a-0808-4fd7-8914-97829c1925de",
            "currency": "USD",
            "balance": "100.0000000000000000",
            "available": "100.00",
            "hold": "0.0000000000000000",
            "profile_id": "75da88c5-05bf-4f54-bc85-5c775bd68254",
        },
    ]


@pytest.fixture
def products_payload() -> list[dict[str, Any]]:
    return [
        {
            "id": "ETH-USD",
            "base_currency": "ETH",
            "quote_currency": "USD",
            "display_name": "ETH/USD",
            "trading_disabled": False,
        },
        {
            "id": "BTC-USD",
            "base_currency": "BTC",
            "quote_currency": "USD",
            "display_name": "BTC/USD",
            "trading_disabled": False,
        },
        {
            "id": "BTC-EUR",
            "base_currency": "BTC",
            "quote_currency": "EUR",
            "display_name": "BTC/EUR",
            "trading_disabled": False,
        },
    ]
