import logging
import sys
from typing import TextIO

from app.domain.repositories.notification_repository import NotificationRepository

logger = logging.getLogger(__name__)


class ConsoleNotificationAdapter(NotificationRepository):
    """콘솔 알림 어댑터 (정보는 stdout, 에러는 stderr)"""

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None):
        self._out = out
        self._err = err

    @property
    def out(self) -> TextIO:
        return self._out or sys.stdout

    @property
    def err(self) -> TextIO:
        return self._err or sys.stderr

    async def send_info(self, message: str) -> bool:
        """정보 메시지 전송"""
        print(message, file=self.out, flush=True)
        return True

    async def send_error(self, message: str, details: str | None = None) -> bool:
        """에러 메시지 전송"""
        if details:
            print(details, file=self.err)
        print(message, file=self.err, flush=True)
        logger.debug(f"Reported error to console: {message}")
        return True
