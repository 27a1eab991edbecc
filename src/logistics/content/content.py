"""Content: the configure → validate → sign pipeline shared by every operation.

State machine:
    CONFIGURING → (unsigned_payload) → VALIDATING → PAYLOAD_READY
    CONFIGURING → (signed_payload)   → VALIDATING → SIGNED

Setters write fields immediately and raise on locally checkable constraints
(length, sign, allowed sub-type). Retrieving a payload always re-runs the
full validation against the current fields, and signing always recomputes
the checksum; nothing is cached between calls.
"""

from dataclasses import replace
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any

from logistics.config import LogisticsConfig, get_config
from logistics.content.rules import FieldMap, FieldRule, Operation
from logistics.credentials import Credentials
from logistics.errors import InvalidValue
from logistics.security.checkmac import CHECK_MAC_FIELD, CheckMacEncoder
from logistics.utils.dates import datetime_value
from logistics.utils.logging import get_logger

logger = get_logger(__name__)

MERCHANT_TRADE_NO_MAX_LENGTH = 20

_RESERVED_FIELDS = frozenset({CHECK_MAC_FIELD, "HashKey", "HashIV"})

# Rules every operation inherits unless it declares its own
BASE_RULES: dict[str, FieldRule] = {
    "MerchantTradeNo": FieldRule(max_length=MERCHANT_TRADE_NO_MAX_LENGTH),
    "MerchantTradeDate": FieldRule(render=datetime_value),
}


class Content:
    """Builds, validates and signs the field map for one operation."""

    MERCHANT_TRADE_NO_MAX_LENGTH = MERCHANT_TRADE_NO_MAX_LENGTH

    def __init__(
        self,
        operation: Operation,
        merchant_id: str = "",
        hash_key: str = "",
        hash_iv: str = "",
        *,
        config: LogisticsConfig | None = None,
        encoder: CheckMacEncoder | None = None,
    ) -> None:
        self.operation = operation
        self._credentials = Credentials(merchant_id, hash_key, hash_iv)
        self._config = config or get_config()
        self._encoder = encoder

        self._fields: FieldMap = {"MerchantID": merchant_id}
        self._fields.update(operation.defaults())

    def __repr__(self) -> str:
        return f"<Content {self.operation.name} merchant_id={self.merchant_id!r}>"

    # ------------------------------------------------------------------
    # Credentials
    # ------------------------------------------------------------------
    @property
    def credentials(self) -> Credentials:
        return self._credentials

    @property
    def merchant_id(self) -> str:
        return self._credentials.merchant_id

    def set_merchant_id(self, merchant_id: str) -> "Content":
        self._credentials = replace(self._credentials, merchant_id=merchant_id)
        self._fields["MerchantID"] = merchant_id
        return self

    def set_hash_key(self, hash_key: str) -> "Content":
        self._credentials = replace(self._credentials, hash_key=hash_key)
        self._encoder = None
        return self

    def set_hash_iv(self, hash_iv: str) -> "Content":
        self._credentials = replace(self._credentials, hash_iv=hash_iv)
        self._encoder = None
        return self

    def set_credentials(self, credentials: Credentials) -> "Content":
        self._credentials = credentials
        self._fields["MerchantID"] = credentials.merchant_id
        self._encoder = None
        return self

    @property
    def encoder(self) -> CheckMacEncoder:
        """The signer, built lazily from the current HashKey/HashIV."""
        if self._encoder is None:
            self._encoder = CheckMacEncoder.from_credentials(self._credentials)
        return self._encoder

    def set_encoder(self, encoder: CheckMacEncoder) -> "Content":
        self._encoder = encoder
        return self

    # ------------------------------------------------------------------
    # Endpoint
    # ------------------------------------------------------------------
    @property
    def config(self) -> LogisticsConfig:
        return self._config

    def set_server_url(self, server_url: str) -> "Content":
        self._config = replace(self._config, server_url=server_url)
        return self

    @property
    def request_path(self) -> str:
        return self.operation.path_for(self._fields)

    @property
    def request_url(self) -> str:
        return self._config.url_for(self.request_path)

    # ------------------------------------------------------------------
    # Field configuration
    # ------------------------------------------------------------------
    def _rule_for(self, field: str) -> FieldRule | None:
        return self.operation.rules.get(field) or BASE_RULES.get(field)

    def configure(self, field: str, value: Any) -> "Content":
        """Write one field, enforcing its rule. Never touches credentials."""
        if field in _RESERVED_FIELDS:
            raise InvalidValue(field, "Reserved field cannot be configured")
        if field == "MerchantID":
            raise InvalidValue(field, "Use set_merchant_id to change the merchant")

        if isinstance(value, Enum):
            value = value.value

        rule = self._rule_for(field)
        if rule is not None:
            value = rule.apply(field, value)

        self._fields[field] = value

        hook = self.operation.on_change.get(field)
        if hook is not None:
            hook(self._fields)
        return self

    def update(self, **fields: Any) -> "Content":
        for field, value in fields.items():
            self.configure(field, value)
        return self

    def append(self, field: str, value: Any) -> "Content":
        """Add one more value to a comma-joined multi-value field."""
        current = self._fields.get(field)
        values = str(current).split(",") if current not in (None, "") else []
        values.append(str(value))
        return self.configure(field, ",".join(values))

    def use(self, sub_type) -> "Content":
        return self.configure("LogisticsSubType", sub_type)

    def set_platform_id(self, platform_id: str) -> "Content":
        if platform_id:
            self._fields["PlatformID"] = platform_id
        return self

    def set_merchant_trade_no(self, trade_no: str) -> "Content":
        return self.configure("MerchantTradeNo", trade_no)

    def set_merchant_trade_date(self, trade_date: datetime | str) -> "Content":
        return self.configure("MerchantTradeDate", trade_date)

    def set_server_reply_url(self, url: str) -> "Content":
        return self.configure("ServerReplyURL", url)

    def set_client_reply_url(self, url: str) -> "Content":
        return self.configure("ClientReplyURL", url)

    def set_remark(self, remark: str) -> "Content":
        return self.configure("Remark", remark)

    def get(self, field: str, default: Any = None) -> Any:
        return self._fields.get(field, default)

    # ------------------------------------------------------------------
    # Validation and retrieval
    # ------------------------------------------------------------------
    def validate(self) -> None:
        """Credential check shared by all operations, then the operation's own."""
        self._credentials.require()
        self.operation.validate(MappingProxyType(self._fields))

    def unsigned_payload(self) -> FieldMap:
        """Validate and return a snapshot of the fields, MerchantID re-synced."""
        self.validate()
        self._fields["MerchantID"] = self.merchant_id
        return dict(self._fields)

    def signed_payload(self) -> FieldMap:
        """Validate, then return the snapshot with a fresh CheckMacValue."""
        payload = self.unsigned_payload()
        signed = self.encoder.encode_payload(payload)
        logger.debug(
            "Logistics payload signed",
            operation=self.operation.name,
            request_path=self.request_path,
            field_count=len(payload),
        )
        return signed
