"""Home delivery operations (T-CAT, Chunghwa Post): create and return."""

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
from logistics.enums import LogisticsSubType, LogisticsType
from logistics.operations.cvs import GOODS_NAME_MAX_LENGTH, RECEIVER_NAME_MAX_LENGTH, SENDER_NAME_MAX_LENGTH
from logistics.utils.dates import current_datetime


def _create_defaults() -> dict:
    return {
        "MerchantTradeDate": current_datetime(),
        "LogisticsType": LogisticsType.HOME.value,
        "LogisticsSubType": LogisticsSubType.TCAT.value,
        "GoodsAmount": 0,
    }


def _validate_create(fields) -> None:
    require(fields, "MerchantTradeNo", "MerchantTradeDate", "LogisticsSubType", "GoodsAmount", "GoodsName")

    require(fields, "SenderName")
    require_any(fields, "SenderPhone", "SenderCellPhone")
    require(fields, "SenderZipCode", "SenderAddress")

    require(fields, "ReceiverName")
    require_any(fields, "ReceiverPhone", "ReceiverCellPhone")
    require(fields, "ReceiverZipCode", "ReceiverAddress")

    require(fields, "ServerReplyURL")


CREATE_HOME_ORDER = Operation(
    name="create_home_order",
    request_path="/Express/Create",
    validate=_validate_create,
    rules={
        "LogisticsSubType": sub_type_rule(lambda member: member.is_home, "Must be a Home delivery type"),
        "GoodsAmount": amount_rule(),
        "GoodsName": FieldRule(max_length=GOODS_NAME_MAX_LENGTH),
        "SenderName": FieldRule(max_length=SENDER_NAME_MAX_LENGTH),
        "ReceiverName": FieldRule(max_length=RECEIVER_NAME_MAX_LENGTH),
    },
    defaults=_create_defaults,
    on_change={"LogisticsSubType": sync_logistics_type},
)


def create_home_order(merchant_id: str = "", hash_key: str = "", hash_iv: str = "", **kwargs) -> Content:
    """Create a home delivery order. Temperature, Distance, Specification and
    the scheduled pickup/delivery windows are set with ``configure`` using
    the matching enums."""
    return Content(CREATE_HOME_ORDER, merchant_id, hash_key, hash_iv, **kwargs)


def _validate_return(fields) -> None:
    require(fields, "AllPayLogisticsID", "ServerReplyURL")
    # Pickup happens at the sender's address
    require(fields, "SenderName", "SenderPhone", "SenderZipCode", "SenderAddress")
    require(fields, "GoodsName", "GoodsAmount")


RETURN_HOME_ORDER = Operation(
    name="return_home_order",
    request_path="/Express/ReturnHome",
    validate=_validate_return,
    rules={
        "GoodsAmount": amount_rule(),
        "GoodsName": FieldRule(max_length=GOODS_NAME_MAX_LENGTH),
        "SenderName": FieldRule(max_length=SENDER_NAME_MAX_LENGTH),
    },
)


def return_home_order(merchant_id: str = "", hash_key: str = "", hash_iv: str = "", **kwargs) -> Content:
    return Content(RETURN_HOME_ORDER, merchant_id, hash_key, hash_iv, **kwargs)
