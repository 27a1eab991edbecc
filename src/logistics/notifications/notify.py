"""Inbound logistics status notifications.

ECPay posts status changes to the ServerReplyURL given when the order was
created, signed with the same CheckMacValue scheme as outbound requests.
Return (reverse logistics) orders report to their own callback URL but are
signed identically.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from logistics.credentials import Credentials
from logistics.errors import ChecksumMismatch, InvalidValue
from logistics.security.checkmac import CheckMacEncoder
from logistics.utils.logging import get_logger

logger = get_logger(__name__)


class LogisticsNotifyResult(BaseModel):
    """Typed view of a status notification. Unknown fields are kept as extras."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    rtn_code: str = Field(alias="RtnCode")
    rtn_msg: str = Field(alias="RtnMsg")
    all_pay_logistics_id: str = Field(alias="AllPayLogisticsID")
    logistics_type: str = Field(alias="LogisticsType")
    logistics_sub_type: str = Field(alias="LogisticsSubType")
    goods_amount: int = Field(alias="GoodsAmount")
    update_status_date: str = Field(alias="UpdateStatusDate")

    merchant_id: str | None = Field(default=None, alias="MerchantID")
    merchant_trade_no: str | None = Field(default=None, alias="MerchantTradeNo")
    receiver_name: str | None = Field(default=None, alias="ReceiverName")
    receiver_phone: str | None = Field(default=None, alias="ReceiverPhone")
    receiver_cell_phone: str | None = Field(default=None, alias="ReceiverCellPhone")
    receiver_email: str | None = Field(default=None, alias="ReceiverEmail")
    receiver_address: str | None = Field(default=None, alias="ReceiverAddress")
    cvs_payment_no: str | None = Field(default=None, alias="CVSPaymentNo")
    cvs_validation_no: str | None = Field(default=None, alias="CVSValidationNo")
    booking_note: str | None = Field(default=None, alias="BookingNote")
    check_mac_value: str | None = Field(default=None, alias="CheckMacValue")


class LogisticsNotify:
    """Verifies and parses forward logistics status notifications."""

    kind = "logistics"

    @classmethod
    def verify(cls, fields: Mapping[str, Any], credentials: Credentials) -> bool:
        verified = CheckMacEncoder.from_credentials(credentials).verify_response(fields)
        if not verified:
            logger.warning(
                "Logistics notification failed verification",
                kind=cls.kind,
                merchant_trade_no=fields.get("MerchantTradeNo"),
            )
        return verified

    @classmethod
    def verify_or_fail(cls, fields: Mapping[str, Any], credentials: Credentials) -> Mapping[str, Any]:
        if not cls.verify(fields, credentials):
            raise ChecksumMismatch()
        return fields

    @classmethod
    def parse(cls, fields: Mapping[str, Any]) -> LogisticsNotifyResult:
        try:
            return LogisticsNotifyResult.model_validate(dict(fields))
        except ValidationError as exc:
            error = exc.errors()[0]
            field = ".".join(str(part) for part in error["loc"])
            raise InvalidValue(field, error["msg"]) from exc


class ReturnLogisticsNotify(LogisticsNotify):
    """Reverse logistics notifications; same signing rule, separate callback URL."""

    kind = "return_logistics"
