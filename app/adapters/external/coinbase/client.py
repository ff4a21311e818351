import json
import logging
from typing import Any, cast

import requests

from app.adapters.external.coinbase.auth import CoinbaseAuth
from app.domain.constants import (
    NETWORK_COINBASE_API_BASE_URL,
    NETWORK_DEFAULT_REQUEST_TIMEOUT_SECONDS,
)

logger = logging.getLogger(__name__)


class CoinbaseClient:
    def __init__(
        self,
        key: str,
        secret: str,
        passphrase: str,
        api_uri: str = NETWORK_COINBASE_API_BASE_URL,
        timeout: float = NETWORK_DEFAULT_REQUEST_TIMEOUT_SECONDS,
    ):
        self.auth = CoinbaseAuth(key=key, secret=secret, passphrase=passphrase)
        self.base_url = api_uri.rstrip("/")
        self.timeout = timeout

    def _request(
        self,
        method: str,
        endpoint: str,
        json_data: dict[str, str] | None = None,
    ) -> Any:
        url = f"{self.base_url}{endpoint}"
        # 서명한 본문과 전송하는 본문이 정확히 같아야 함
        body = json.dumps(json_data) if json_data is not None else ""
        headers = {
            **self.auth.create_headers(method, endpoint, body),
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

        logger.debug(f"Request: {method} {url}, body: {body}")

        response = requests.request(
            method, url, headers=headers, data=body or None, timeout=self.timeout
        )

        # HTTP 오류 상태 확인
        if not response.ok:
            try:
                error_data = response.json()
            except ValueError:
                # JSON 파싱 실패 시 기본 HTTP 오류 처리
                response.raise_for_status()
            else:
                if isinstance(error_data, dict) and "message" in error_data:
                    detailed_message = (
                        f"{error_data['message']} (HTTP {response.status_code})"
                    )
                    logger.error(f"Coinbase API Error: {detailed_message}")
                    raise requests.HTTPError(detailed_message, response=response)
                response.raise_for_status()

        return response.json()

    def get_accounts(self) -> list[dict[str, Any]]:
        """계좌 목록 조회"""
        return cast(list[dict[str, Any]], self._request("GET", "/accounts"))

    def get_products(self) -> list[dict[str, Any]]:
        """거래 가능한 상품(마켓) 목록 조회"""
        return cast(list[dict[str, Any]], self._request("GET", "/products"))

    def place_order(
        self,
        side: str,
        product_id: str,
        order_type: str,
        funds: str,
    ) -> dict[str, Any]:
        """주문하기

        Args:
            side: 주문 방향 ("buy", "sell")
            product_id: 상품 ID (ex. "BTC-USD")
            order_type: 주문 타입 ("market")
            funds: 사용할 금액 (정확한 십진수 문자열)

        Returns:
            dict[str, Any]: 접수된 주문
        """
        order_data = {
            "side": side,
            "product_id": product_id,
            "type": order_type,
            "funds": funds,
        }
        return cast(
            dict[str, Any], self._request("POST", "/orders", json_data=order_data)
        )

    def get_order(self, order_id: str) -> dict[str, Any]:
        """개별 주문 조회

        Args:
            order_id: 주문 ID

        Returns:
            dict[str, Any]: 주문 정보
        """
        return cast(dict[str, Any], self._request("GET", f"/orders/{order_id}"))
