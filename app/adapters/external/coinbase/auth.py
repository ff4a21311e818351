import base64
import binascii
import hashlib
import hmac
import time

from pydantic import BaseModel


class CoinbaseAuth(BaseModel):
    key: str
    secret: str
    passphrase: str

    def sign(self, timestamp: str, method: str, request_path: str, body: str = "") -> str:
        """timestamp + METHOD + path + body 에 대한 HMAC-SHA256 서명 (base64)"""
        message = f"{timestamp}{method.upper()}{request_path}{body}".encode()
        try:
            secret = base64.b64decode(self.secret, validate=True)
        except binascii.Error as e:
            raise ValueError("API secret must be base64 encoded") from e
        digest = hmac.new(secret, message, hashlib.sha256).digest()
        return base64.b64encode(digest).decode()

    def create_headers(
        self,
        method: str,
        request_path: str,
        body: str = "",
        timestamp: str | None = None,
    ) -> dict[str, str]:
        timestamp = timestamp or str(time.time())
        return {
            "CB-ACCESS-KEY": self.key,
            "CB-ACCESS-SIGN": self.sign(timestamp, method, request_path, body),
            "CB-ACCESS-TIMESTAMP": timestamp,
            "CB-ACCESS-PASSPHRASE": self.passphrase,
        }
