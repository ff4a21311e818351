# Use Cases

from app.application.usecase.buy_usecase import BuyUseCase

__all__ = [
    "BuyUseCase",
]
