"""Configuration types for bluepay_gateway."""

import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator


DEFAULT_GATEWAY_URL = "https://secure.bluepay.com/interfaces/bp20post"
DEFAULT_TIMEOUT_SECONDS = 30.0


class GatewayCredentials(BaseModel):
    """Merchant identity used to sign and address gateway requests.

    The secret key is a ``SecretStr`` so that it never shows up in reprs,
    logs or serialized models; use ``secret_key.get_secret_value()`` to read
    it.
    """
    model_config = ConfigDict(frozen=True)

    account_id: str = ""
    secret_key: SecretStr = SecretStr("")
    gateway_url: str = DEFAULT_GATEWAY_URL

    @field_validator("gateway_url")
    @classmethod
    def _gateway_url_is_http(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"gateway_url must be an http(s) URL, got {value!r}")
        return value


class GatewayConfig(BaseModel):
    """Client settings: credentials plus transport options."""
    model_config = ConfigDict(frozen=True)

    credentials: GatewayCredentials = Field(default_factory=GatewayCredentials)
    timeout: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)
    test_mode: bool = False

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "GatewayConfig":
        """Builds a config from BLUEPAY_* environment variables.

        Values from ``env_file`` (or a ``.env`` found from the working
        directory) are loaded first without overriding variables that are
        already set.
        """
        load_dotenv(env_file or find_dotenv(usecwd=True))
        return cls(
            credentials=GatewayCredentials(
                account_id=os.environ.get("BLUEPAY_ACCOUNT_ID", ""),
                secret_key=SecretStr(os.environ.get("BLUEPAY_SECRET_KEY", "")),
                gateway_url=os.environ.get("BLUEPAY_GATEWAY_URL", DEFAULT_GATEWAY_URL),
            ),
            timeout=float(os.environ.get("BLUEPAY_TIMEOUT", str(DEFAULT_TIMEOUT_SECONDS))),
            test_mode=os.environ.get("BLUEPAY_TEST_MODE", "").strip().lower() in ("1", "true", "yes", "on"),
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.credentials.account_id.strip()) and bool(
            self.credentials.secret_key.get_secret_value()
        )
