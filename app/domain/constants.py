# ==========================================================
# 🟢 Trading 관련 상수
# ==========================================================

TRADING_DEFAULT_FUNDING_CURRENCY = "USD"
TRADING_DEFAULT_TARGET_ASSET = "BTC"

# ==========================================================
# 🔵 정밀도 관련 상수
# ==========================================================

PRECISION_ASSET_PLACES = 8  # 코인 수량 소수점 자리수
PRECISION_FUNDING_REPORT_PLACES = 3  # 결과 보고 시 사용 금액 자리수

CURRENCY_SYMBOLS: dict[str, str] = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
}

# ==========================================================
# 🟣 정산 폴링 관련 상수
# ==========================================================

SETTLEMENT_DEFAULT_POLL_INTERVAL_SECONDS = 2.0

# ==========================================================
# 🟤 네트워크 관련 상수
# ==========================================================

NETWORK_COINBASE_API_BASE_URL = "https://api.exchange.coinbase.com"
NETWORK_DEFAULT_REQUEST_TIMEOUT_SECONDS = 10.0

# ==========================================================
# 🟡 설정 파일 관련 상수
# ==========================================================

CONFIG_DIR_NAME = ".buy-bitcoin"
CONFIG_FILE_NAME = "config.json"
CONFIG_PLACEHOLDER = "<replace-me>"

# ==========================================================
# ⚪ CLI 관련 상수
# ==========================================================

CLI_PROGRAM_NAME = "buy-bitcoin"
