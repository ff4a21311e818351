from abc import ABC, abstractmethod


class NotificationRepository(ABC):
    """알림 리포지토리 인터페이스"""

    @abstractmethod
    async def send_info(self, message: str) -> bool:
        """정보 메시지 전송"""
        ...

    @abstractmethod
    async def send_error(self, message: str, details: str | None = None) -> bool:
        """에러 메시지 전송"""
        ...
