"""Read-only queries: store search and logistics order status."""

from logistics.content.content import Content
from logistics.content.rules import Operation, require, require_any, sub_type_rule
from logistics.enums import StoreType
from logistics.utils.dates import current_timestamp


def _validate_store_list(fields) -> None:
    require(fields, "LogisticsSubType")
    require_any(fields, "Keyword", "ZipCode", "City", label="Keyword, ZipCode or City")


GET_STORE_LIST = Operation(
    name="get_store_list",
    request_path="/Express/GetStoreList",
    validate=_validate_store_list,
    rules={"LogisticsSubType": sub_type_rule(lambda member: member.is_cvs, "Must be a CVS type")},
    defaults=lambda: {"StoreType": StoreType.PICKUP_ONLY.value},
)


def get_store_list(merchant_id: str = "", hash_key: str = "", hash_iv: str = "", **kwargs) -> Content:
    return Content(GET_STORE_LIST, merchant_id, hash_key, hash_iv, **kwargs)


def _validate_query(fields) -> None:
    require(fields, "AllPayLogisticsID", "TimeStamp")


QUERY_LOGISTICS_ORDER = Operation(
    name="query_logistics_order",
    request_path="/Helper/QueryLogisticsTradeInfo/V4",
    validate=_validate_query,
    defaults=lambda: {"TimeStamp": current_timestamp()},
)


def query_logistics_order(merchant_id: str = "", hash_key: str = "", hash_iv: str = "", **kwargs) -> Content:
    return Content(QUERY_LOGISTICS_ORDER, merchant_id, hash_key, hash_iv, **kwargs)
