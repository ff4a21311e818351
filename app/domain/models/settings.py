import os
from pathlib import Path
from typing import Self

from pydantic import BaseModel, ConfigDict, field_validator

from app.domain.constants import (
    NETWORK_DEFAULT_REQUEST_TIMEOUT_SECONDS,
    SETTLEMENT_DEFAULT_POLL_INTERVAL_SECONDS,
    TRADING_DEFAULT_FUNDING_CURRENCY,
    TRADING_DEFAULT_TARGET_ASSET,
)
from app.domain.enums import Currency

_TRUE_VALUES = {"1", "true", "yes", "on"}


class BuySettings(BaseModel):
    """매수 워크플로우 설정"""

    model_config = ConfigDict(frozen=True)

    funding_currency: Currency = TRADING_DEFAULT_FUNDING_CURRENCY
    target_asset: Currency = TRADING_DEFAULT_TARGET_ASSET
    poll_interval_seconds: float = SETTLEMENT_DEFAULT_POLL_INTERVAL_SECONDS
    settlement_timeout_seconds: float | None = None
    strict_pair_resolution: bool = False
    request_timeout_seconds: float = NETWORK_DEFAULT_REQUEST_TIMEOUT_SECONDS
    config_dir: Path | None = None

    @field_validator("poll_interval_seconds", "request_timeout_seconds")
    @classmethod
    def check_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("must be positive")
        return v

    @field_validator("settlement_timeout_seconds")
    @classmethod
    def check_timeout(cls, v: float | None) -> float | None:
        if v is not None and v <= 0:
            raise ValueError("must be positive")
        return v

    @classmethod
    def from_env(cls) -> Self:
        """환경변수에서 설정을 읽어옵니다. (설정되지 않은 값은 기본값 사용)"""
        values: dict[str, object] = {}
        if currency := os.getenv("BUY_FUNDING_CURRENCY"):
            values["funding_currency"] = currency
        if asset := os.getenv("BUY_TARGET_ASSET"):
            values["target_asset"] = asset
        if interval := os.getenv("BUY_POLL_INTERVAL_SECONDS"):
            values["poll_interval_seconds"] = float(interval)
        if timeout := os.getenv("BUY_SETTLEMENT_TIMEOUT_SECONDS"):
            values["settlement_timeout_seconds"] = float(timeout)
        if strict := os.getenv("BUY_STRICT_PAIR_RESOLUTION"):
            values["strict_pair_resolution"] = strict.strip().lower() in _TRUE_VALUES
        if request_timeout := os.getenv("BUY_REQUEST_TIMEOUT_SECONDS"):
            values["request_timeout_seconds"] = float(request_timeout)
        if config_dir := os.getenv("BUY_CONFIG_DIR"):
            values["config_dir"] = Path(config_dir)
        return cls.model_validate(values)
