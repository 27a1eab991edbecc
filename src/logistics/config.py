"""Logistics configuration.

Provides get_config() / set_config() for the ECPay server the pipelines
target, and get_notify_credentials() / set_notify_credentials() for the
credentials used to authenticate inbound callbacks.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from logistics.credentials import Credentials
from logistics.errors import CredentialMissing, InvalidValue

STAGE_SERVER_URL = "https://logistics-stage.ecpay.com.tw"
PRODUCTION_SERVER_URL = "https://logistics.ecpay.com.tw"

_SERVER_URLS = {
    "stage": STAGE_SERVER_URL,
    "production": PRODUCTION_SERVER_URL,
}


@dataclass(frozen=True)
class LogisticsConfig:
    """Where requests built by a pipeline are meant to be sent."""

    server_url: str = STAGE_SERVER_URL

    def __post_init__(self) -> None:
        object.__setattr__(self, "server_url", self.server_url.rstrip("/"))

    def url_for(self, request_path: str) -> str:
        return f"{self.server_url}{request_path}"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "LogisticsConfig":
        """Build a config from LOGISTICS_ENV and LOGISTICS_SERVER_URL."""
        environ = os.environ if environ is None else environ
        override = environ.get("LOGISTICS_SERVER_URL")
        if override:
            return cls(server_url=override)

        env = environ.get("LOGISTICS_ENV", "stage")
        if env not in _SERVER_URLS:
            raise InvalidValue("LOGISTICS_ENV", f"Unknown logistics environment: {env}")
        return cls(server_url=_SERVER_URLS[env])


_current_config: LogisticsConfig | None = None
_notify_credentials: Credentials | None = None


def get_config() -> LogisticsConfig:
    """Return the active config. Defaults to LogisticsConfig.from_env()."""
    global _current_config
    if _current_config is None:
        _current_config = LogisticsConfig.from_env()
    return _current_config


def set_config(config: LogisticsConfig) -> None:
    """Override the active config (useful for tests)."""
    global _current_config
    _current_config = config


def reset_config() -> None:
    """Reset to the environment-derived default."""
    global _current_config
    _current_config = None


def get_notify_credentials() -> Credentials:
    """Return the credentials inbound callbacks are verified against."""
    if _notify_credentials is None:
        raise CredentialMissing("HashKey")
    return _notify_credentials


def set_notify_credentials(credentials: Credentials) -> None:
    global _notify_credentials
    _notify_credentials = credentials


def reset_notify_credentials() -> None:
    global _notify_credentials
    _notify_credentials = None
