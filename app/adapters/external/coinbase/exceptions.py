from app.domain.exceptions import VenueAPIError


class CoinbaseAPIException(VenueAPIError):
    """Coinbase API 호출 실패"""

    pass
