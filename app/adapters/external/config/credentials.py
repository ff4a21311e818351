import json
import logging
from pathlib import Path
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from app.domain.constants import (
    CONFIG_FILE_NAME,
    CONFIG_PLACEHOLDER,
    NETWORK_COINBASE_API_BASE_URL,
)
from app.domain.exceptions import ConfigurationInvalid, ConfigurationMissing

logger = logging.getLogger(__name__)


class Credentials(BaseModel):
    """거래소 API 인증 정보"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    key: str
    secret: str = Field(repr=False)
    passphrase: str = Field(repr=False)
    api_uri: str = Field(alias="apiURI")

    @property
    def is_placeholder(self) -> bool:
        """템플릿 값이 그대로 남아 있는지 여부"""
        return CONFIG_PLACEHOLDER in (self.key, self.secret, self.passphrase)

    @classmethod
    def template(cls) -> Self:
        return cls(
            key=CONFIG_PLACEHOLDER,
            secret=CONFIG_PLACEHOLDER,
            passphrase=CONFIG_PLACEHOLDER,
            api_uri=NETWORK_COINBASE_API_BASE_URL,
        )


class CredentialStore:
    """사용자별 설정 디렉토리의 config.json 관리"""

    def __init__(self, config_dir: Path) -> None:
        self.config_dir = config_dir

    @property
    def path(self) -> Path:
        return self.config_dir / CONFIG_FILE_NAME

    def load(self) -> Credentials:
        """인증 정보를 읽어옵니다.

        Raises:
            ConfigurationMissing: 파일이 없거나 템플릿 값이 그대로인 경우
            ConfigurationInvalid: JSON 형식이나 필드가 잘못된 경우
        """
        try:
            contents = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise ConfigurationMissing(str(self.path)) from None

        try:
            credentials = Credentials.model_validate(json.loads(contents))
        except json.JSONDecodeError as e:
            raise ConfigurationInvalid(str(self.path), f"malformed JSON ({e})") from e
        except ValidationError as e:
            fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])
            raise ConfigurationInvalid(
                str(self.path), f"missing or invalid fields: {fields}"
            ) from e

        if credentials.is_placeholder:
            raise ConfigurationMissing(str(self.path))

        logger.info(f"Loaded credentials from {self.path} (api: {credentials.api_uri})")
        return credentials

    def init(self) -> tuple[Path, bool]:
        """템플릿 설정 파일을 생성합니다. 기존 파일은 덮어쓰지 않습니다.

        Returns:
            tuple[Path, bool]: 설정 파일 경로, 새로 생성했는지 여부
        """
        self.config_dir.mkdir(parents=True, exist_ok=True)
        if self.path.exists():
            logger.info(f"Configuration already exists at {self.path}")
            return self.path, False

        template = Credentials.template().model_dump(by_alias=True)
        self.path.touch(mode=0o600)
        self.path.write_text(json.dumps(template, indent=2) + "\n", encoding="utf-8")
        logger.info(f"Created configuration template at {self.path}")
        return self.path, True
