from abc import ABC, abstractmethod

from app.domain.models.account import Accounts


class AccountRepository(ABC):
    @abstractmethod
    async def get_accounts(self) -> Accounts:
        """계좌 목록을 조회합니다."""
