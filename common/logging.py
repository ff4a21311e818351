"""로깅 설정"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

# 로깅 상수
LOG_MAX_BYTES = 1 * 1024 * 1024  # 1MB
LOG_BACKUP_COUNT = 3  # 백업 파일 개수
LOG_ENCODING = "utf-8"  # 로그 파일 인코딩
CONSOLE_HANDLER_NAME = "console"
FILE_HANDLER_NAME = "file"


def setup_logging(
    service_name: str = "buy-bitcoin",
    level: int = logging.CRITICAL,
    log_dir: Path | None = None,
) -> None:
    """로깅 설정 초기화

    콘솔(stderr)에는 level 이상만, 파일에는 INFO 이상을 기록합니다.
    사용자에게 보여줄 오류는 리포터가 출력하므로 콘솔 기본 레벨은 CRITICAL입니다.
    """

    # 로거 생성
    logger = logging.getLogger()
    logger.setLevel(min(level, logging.INFO))

    # 중복 핸들러 방지
    if any(h.get_name() == CONSOLE_HANDLER_NAME for h in logger.handlers):
        return

    # 포매터 생성
    formatter = logging.Formatter(
        f"%(asctime)s - {service_name} - %(name)s - %(levelname)s - %(message)s"
    )

    # 콘솔 핸들러
    console_handler = logging.StreamHandler()
    console_handler.set_name(CONSOLE_HANDLER_NAME)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # 파일 핸들러 (회전)
    if log_dir is not None:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            filename=log_dir / f"{service_name.lower()}.log",
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding=LOG_ENCODING,
        )
        file_handler.set_name(FILE_HANDLER_NAME)
        file_handler.setLevel(logging.INFO)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # 외부 라이브러리 로그 레벨 조정
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("requests").setLevel(logging.WARNING)

    logging.debug(f"Logging configured with service: {service_name}")
