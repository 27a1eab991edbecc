"""Merchant credential triple used to sign requests and verify callbacks."""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from logistics.errors import CredentialMissing

ENV_PREFIX = "ECPAY_LOGISTICS_"


@dataclass(frozen=True)
class Credentials:
    """Merchant id plus the HashKey/HashIV pair.

    Immutable: pipelines swap the whole value through their setters.
    The key and IV are kept out of ``repr`` so they never reach logs.
    """

    merchant_id: str = ""
    hash_key: str = field(default="", repr=False)
    hash_iv: str = field(default="", repr=False)

    def missing(self) -> str | None:
        """Return the wire name of the first empty member, or None."""
        for wire_name, value in (
            ("MerchantID", self.merchant_id),
            ("HashKey", self.hash_key),
            ("HashIV", self.hash_iv),
        ):
            if not value:
                return wire_name
        return None

    def require(self) -> "Credentials":
        wire_name = self.missing()
        if wire_name is not None:
            raise CredentialMissing(wire_name)
        return self

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, prefix: str = ENV_PREFIX) -> "Credentials":
        """Build credentials from ``<prefix>MERCHANT_ID``, ``HASH_KEY`` and ``HASH_IV``.

        Only called explicitly (e.g. by the app entry point); nothing in the
        package reads credentials from the environment on its own.
        """
        environ = os.environ if environ is None else environ
        return cls(
            merchant_id=environ.get(f"{prefix}MERCHANT_ID", ""),
            hash_key=environ.get(f"{prefix}HASH_KEY", ""),
            hash_iv=environ.get(f"{prefix}HASH_IV", ""),
        )
