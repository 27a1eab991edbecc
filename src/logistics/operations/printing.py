"""Shipping document printing.

C2C convenience-store orders print through a per-store endpoint; B2C and
home delivery orders share the trade document endpoint. Each accepts one
id or a batch (list, sent comma-joined).
"""

from logistics.content.content import Content
from logistics.content.rules import FieldRule, Operation, join_values, require, sub_type_rule
from logistics.enums import LogisticsSubType

_CVS_PRINT_PATHS = {
    LogisticsSubType.UNIMART_C2C.value: "/Express/PrintUniMartC2COrderInfo",
    LogisticsSubType.FAMI_C2C.value: "/Express/PrintFAMIC2COrderInfo",
    LogisticsSubType.HILIFE_C2C.value: "/Express/PrintHILIFEC2COrderInfo",
    LogisticsSubType.OKMART_C2C.value: "/Express/PrintOKMARTC2COrderInfo",
}

_MULTI_VALUE = FieldRule(render=join_values)


def _cvs_print_path(fields) -> str:
    return _CVS_PRINT_PATHS.get(fields.get("LogisticsSubType"), _CVS_PRINT_PATHS[LogisticsSubType.UNIMART_C2C.value])


def _validate_cvs(fields) -> None:
    require(fields, "LogisticsSubType")
    # 7-ELEVEN prints by payment/validation number, the others by logistics id
    if fields["LogisticsSubType"] == LogisticsSubType.UNIMART_C2C.value:
        require(fields, "CVSPaymentNo", "CVSValidationNo")
    else:
        require(fields, "AllPayLogisticsID")


PRINT_CVS_DOCUMENT = Operation(
    name="print_cvs_document",
    request_path=_cvs_print_path,
    validate=_validate_cvs,
    rules={
        "LogisticsSubType": sub_type_rule(
            lambda member: member.is_c2c, "Please use print_trade_document for B2C/Home orders"
        ),
        "AllPayLogisticsID": _MULTI_VALUE,
        "CVSPaymentNo": _MULTI_VALUE,
        "CVSValidationNo": _MULTI_VALUE,
    },
)


def print_cvs_document(merchant_id: str = "", hash_key: str = "", hash_iv: str = "", **kwargs) -> Content:
    return Content(PRINT_CVS_DOCUMENT, merchant_id, hash_key, hash_iv, **kwargs)


def for_unimart(content: Content, payment_no, validation_no) -> Content:
    """7-ELEVEN C2C shortcut: sub-type plus payment and validation numbers."""
    return (
        content.use(LogisticsSubType.UNIMART_C2C)
        .configure("CVSPaymentNo", payment_no)
        .configure("CVSValidationNo", validation_no)
    )


def _validate_trade(fields) -> None:
    require(fields, "AllPayLogisticsID")


PRINT_TRADE_DOCUMENT = Operation(
    name="print_trade_document",
    request_path="/helper/printTradeDocument",
    validate=_validate_trade,
    rules={
        "LogisticsSubType": sub_type_rule(
            lambda member: not member.is_c2c, "Please use print_cvs_document for C2C orders"
        ),
        "AllPayLogisticsID": _MULTI_VALUE,
    },
)


def print_trade_document(merchant_id: str = "", hash_key: str = "", hash_iv: str = "", **kwargs) -> Content:
    return Content(PRINT_TRADE_DOCUMENT, merchant_id, hash_key, hash_iv, **kwargs)
