"""CheckMacValue signer: canonical serialization and MD5 checksum.

ECPay logistics authenticates every request and callback with a
CheckMacValue computed as follows:

    1. drop any existing CheckMacValue
    2. sort keys case-insensitively (original casing kept)
    3. join ``key=value`` pairs with ``&``
    4. wrap as ``HashKey=<key>&<pairs>&HashIV=<iv>``
    5. percent-encode as a URI component, then lowercase everything
    6. undo the escapes .NET's UrlEncode leaves literal, and map %20 to +
    7. MD5, hex, uppercase

Step 6 reproduces the legacy .NET encoding profile the remote service
checks against. It is not standard percent-encoding and must stay as is.
"""

import hashlib
import hmac
from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any
from urllib.parse import quote

from logistics.credentials import Credentials
from logistics.errors import ChecksumMismatch, CredentialMissing
from logistics.utils.logging import get_logger

logger = get_logger(__name__)

CHECK_MAC_FIELD = "CheckMacValue"

# Characters encodeURIComponent leaves unescaped
_URI_COMPONENT_SAFE = "-_.!~*'()"

_DOTNET_REPLACEMENTS = (
    ("%2d", "-"),
    ("%5f", "_"),
    ("%2e", "."),
    ("%21", "!"),
    ("%2a", "*"),
    ("%28", "("),
    ("%29", ")"),
    ("%20", "+"),
)


def render_value(value: Any) -> str:
    """Render a field value the way the remote service stringifies it."""
    if value is None:
        return ""
    if isinstance(value, Enum):
        return render_value(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


def _sort_key(key: str) -> tuple[str, str]:
    return key.lower(), key


def canonical_query(data: Mapping[str, Any]) -> str:
    """Sorted ``key=value`` pairs joined with ``&``, CheckMacValue excluded."""
    keys = sorted((key for key in data if key != CHECK_MAC_FIELD), key=_sort_key)
    return "&".join(f"{key}={render_value(data[key])}" for key in keys)


def dotnet_url_encode(text: str) -> str:
    encoded = quote(text, safe=_URI_COMPONENT_SAFE).lower()
    for escaped, literal in _DOTNET_REPLACEMENTS:
        encoded = encoded.replace(escaped, literal)
    return encoded


@dataclass(frozen=True)
class CheckMacEncoder:
    """Computes and verifies CheckMacValue for one HashKey/HashIV pair.

    Stateless after construction, so a single instance can be shared
    between threads.
    """

    hash_key: str = field(repr=False)
    hash_iv: str = field(repr=False)

    def __post_init__(self) -> None:
        if not self.hash_key:
            raise CredentialMissing("HashKey")
        if not self.hash_iv:
            raise CredentialMissing("HashIV")

    @classmethod
    def from_credentials(cls, credentials: Credentials) -> "CheckMacEncoder":
        return cls(credentials.hash_key, credentials.hash_iv)

    def canonical_string(self, data: Mapping[str, Any]) -> str:
        """The encoded string that gets hashed (steps 1-6)."""
        raw = f"HashKey={self.hash_key}&{canonical_query(data)}&HashIV={self.hash_iv}"
        return dotnet_url_encode(raw)

    def generate_check_mac_value(self, data: Mapping[str, Any]) -> str:
        encoded = self.canonical_string(data)
        digest = hashlib.md5(encoded.encode("utf-8"), usedforsecurity=False)
        return digest.hexdigest().upper()

    def encode_payload(self, payload: Mapping[str, Any]) -> dict[str, Any]:
        """Return a copy of ``payload`` with a fresh CheckMacValue appended."""
        data = {key: value for key, value in payload.items() if key != CHECK_MAC_FIELD}
        data[CHECK_MAC_FIELD] = self.generate_check_mac_value(data)
        return data

    def verify_response(self, data: Mapping[str, Any]) -> bool:
        """Recompute the checksum of ``data`` and compare it to the claimed one.

        The comparison ignores case; a missing or empty claim never verifies.
        """
        received = data.get(CHECK_MAC_FIELD)
        if not received:
            return False

        calculated = self.generate_check_mac_value(data)
        matched = hmac.compare_digest(str(received).upper().encode("utf-8"), calculated.encode("utf-8"))
        if not matched:
            logger.warning("CheckMacValue mismatch", field_count=len(data) - 1)
        return matched

    def verify_or_fail(self, data: Mapping[str, Any]) -> Mapping[str, Any]:
        if not self.verify_response(data):
            raise ChecksumMismatch()
        return data
