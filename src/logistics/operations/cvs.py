"""Convenience-store (CVS) pickup operations: create, cancel, return, update.

Supported stores: 7-ELEVEN (UNIMART), FamilyMart (FAMI), Hi-Life (HILIFE)
in both C2C and B2C flavours, and OK Mart (OKMART) for C2C only.
"""

from logistics.content.content import Content
from logistics.content.rules import (
    FieldRule,
    Operation,
    amount_rule,
    require,
    require_any,
    sub_type_rule,
    sync_logistics_type,
)
from logistics.enums import IsCollection, LogisticsSubType, LogisticsType
from logistics.utils.dates import current_date, current_datetime, date_value

GOODS_NAME_MAX_LENGTH = 50
SENDER_NAME_MAX_LENGTH = 10
RECEIVER_NAME_MAX_LENGTH = 10


# ---------------------------------------------------------------------------
# Create
# ---------------------------------------------------------------------------
def _create_defaults() -> dict:
    return {
        "MerchantTradeDate": current_datetime(),
        "LogisticsType": LogisticsType.CVS.value,
        "LogisticsSubType": LogisticsSubType.UNIMART_C2C.value,
        "GoodsAmount": 0,
        "IsCollection": IsCollection.NO.value,
    }


def _validate_create(fields) -> None:
    require(fields, "MerchantTradeNo", "MerchantTradeDate", "LogisticsSubType", "GoodsName", "SenderName")
    require_any(fields, "SenderPhone", "SenderCellPhone")
    require(fields, "ReceiverName")
    require_any(fields, "ReceiverPhone", "ReceiverCellPhone")
    require(fields, "ReceiverStoreID", "ServerReplyURL")


CREATE_CVS_ORDER = Operation(
    name="create_cvs_order",
    request_path="/Express/Create",
    validate=_validate_create,
    rules={
        "LogisticsSubType": sub_type_rule(lambda member: member.is_cvs, "Must be a CVS type"),
        "GoodsAmount": amount_rule(),
        "CollectionAmount": amount_rule(),
        "GoodsName": FieldRule(max_length=GOODS_NAME_MAX_LENGTH),
        "SenderName": FieldRule(max_length=SENDER_NAME_MAX_LENGTH),
        "ReceiverName": FieldRule(max_length=RECEIVER_NAME_MAX_LENGTH),
    },
    defaults=_create_defaults,
    on_change={"LogisticsSubType": sync_logistics_type},
)


def create_cvs_order(merchant_id: str = "", hash_key: str = "", hash_iv: str = "", **kwargs) -> Content:
    """Create a convenience-store pickup order.

    Example::

        create_cvs_order("2000132", key, iv)
            .use(LogisticsSubType.UNIMART_C2C)
            .set_merchant_trade_no("ORDER001")
            .update(GoodsName="Keyboard", GoodsAmount=500, SenderName="Alice",
                    SenderCellPhone="0912345678", ReceiverName="Bob",
                    ReceiverCellPhone="0987654321", ReceiverStoreID="991182")
            .set_server_reply_url("https://example.com/callback")
            .signed_payload()
    """
    return Content(CREATE_CVS_ORDER, merchant_id, hash_key, hash_iv, **kwargs)


def with_collection(content: Content, amount: int | float = 0) -> Content:
    """Enable cash-on-pickup; a positive amount also sets CollectionAmount."""
    content.configure("IsCollection", IsCollection.YES)
    if amount > 0:
        content.configure("CollectionAmount", amount)
    return content


def without_collection(content: Content) -> Content:
    return content.configure("IsCollection", IsCollection.NO)


# ---------------------------------------------------------------------------
# Cancel
# ---------------------------------------------------------------------------
def _validate_cancel(fields) -> None:
    require(fields, "AllPayLogisticsID", "CVSPaymentNo", "CVSValidationNo")


CANCEL_CVS_ORDER = Operation(
    name="cancel_cvs_order",
    request_path="/Express/CancelCVS",
    validate=_validate_cancel,
)


def cancel_cvs_order(merchant_id: str = "", hash_key: str = "", hash_iv: str = "", **kwargs) -> Content:
    return Content(CANCEL_CVS_ORDER, merchant_id, hash_key, hash_iv, **kwargs)


# ---------------------------------------------------------------------------
# Return (reverse logistics)
# ---------------------------------------------------------------------------
def _validate_return(fields) -> None:
    require(fields, "AllPayLogisticsID", "ServerReplyURL", "GoodsName", "GoodsAmount", "SenderName", "SenderPhone")


RETURN_CVS_ORDER = Operation(
    name="return_cvs_order",
    request_path="/Express/ReturnCVS",
    validate=_validate_return,
    rules={
        "GoodsAmount": amount_rule(),
        "GoodsName": FieldRule(max_length=GOODS_NAME_MAX_LENGTH),
        "SenderName": FieldRule(max_length=SENDER_NAME_MAX_LENGTH),
    },
)


def return_cvs_order(merchant_id: str = "", hash_key: str = "", hash_iv: str = "", **kwargs) -> Content:
    return Content(RETURN_CVS_ORDER, merchant_id, hash_key, hash_iv, **kwargs)


# ---------------------------------------------------------------------------
# Update shipment info
# ---------------------------------------------------------------------------
def _validate_update(fields) -> None:
    require(fields, "AllPayLogisticsID")


UPDATE_CVS_ORDER = Operation(
    name="update_cvs_order",
    request_path="/Express/UpdateShipmentInfo",
    validate=_validate_update,
    rules={"ShipmentDate": FieldRule(render=date_value)},
    defaults=lambda: {"ShipmentDate": current_date()},
)


def update_cvs_order(merchant_id: str = "", hash_key: str = "", hash_iv: str = "", **kwargs) -> Content:
    return Content(UPDATE_CVS_ORDER, merchant_id, hash_key, hash_iv, **kwargs)
