"""Store map: parameters for ECPay's convenience-store picker page."""

from logistics.content.content import Content
from logistics.content.rules import FieldRule, Operation, require, sub_type_rule, sync_logistics_type
from logistics.enums import Device, IsCollection, LogisticsSubType, LogisticsType


def _validate(fields) -> None:
    require(fields, "MerchantTradeNo", "LogisticsType", "LogisticsSubType", "ServerReplyURL")


OPEN_STORE_MAP = Operation(
    name="open_store_map",
    request_path="/Express/map",
    validate=_validate,
    rules={
        "LogisticsSubType": sub_type_rule(reason="Unknown logistics sub-type"),
        "Device": FieldRule(choices=frozenset(member.value for member in Device), choices_reason="Unknown device"),
    },
    defaults=lambda: {
        "LogisticsType": LogisticsType.CVS.value,
        "LogisticsSubType": LogisticsSubType.UNIMART_C2C.value,
        "IsCollection": IsCollection.NO.value,
        "Device": Device.PC.value,
    },
    on_change={"LogisticsSubType": sync_logistics_type},
)


def open_store_map(merchant_id: str = "", hash_key: str = "", hash_iv: str = "", **kwargs) -> Content:
    """The signed payload is posted from the browser; ExtraData is echoed back
    unchanged in the store selection callback."""
    return Content(OPEN_STORE_MAP, merchant_id, hash_key, hash_iv, **kwargs)
