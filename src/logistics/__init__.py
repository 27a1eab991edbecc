"""ECPay logistics request signing and callback verification.

Builds and signs requests for the ECPay logistics API (convenience-store
pickup, home delivery, store map, document printing, queries) and verifies
the status callbacks it sends back::

    from logistics import LogisticsSubType, create_cvs_order

    payload = (
        create_cvs_order("2000132", hash_key, hash_iv)
        .use(LogisticsSubType.UNIMART_C2C)
        .set_merchant_trade_no("ORDER001")
        .update(
            GoodsName="Mechanical keyboard",
            GoodsAmount=500,
            SenderName="Alice",
            SenderCellPhone="0912345678",
            ReceiverName="Bob",
            ReceiverCellPhone="0987654321",
            ReceiverStoreID="991182",
        )
        .set_server_reply_url("https://example.com/callback")
        .signed_payload()
    )
"""

from logistics.config import LogisticsConfig, get_config, set_config
from logistics.content.content import Content
from logistics.content.rules import FieldRule, Operation
from logistics.credentials import Credentials
from logistics.enums import (
    Device,
    Distance,
    IsCollection,
    LogisticsSubType,
    LogisticsType,
    ScheduledDeliveryTime,
    ScheduledPickupTime,
    Specification,
    StoreType,
    Temperature,
)
from logistics.errors import (
    ChecksumMismatch,
    CredentialMissing,
    FieldTooLong,
    InvalidValue,
    LogisticsError,
    RequiredFieldMissing,
)
from logistics.notifications.notify import LogisticsNotify, LogisticsNotifyResult, ReturnLogisticsNotify
from logistics.operations import OPERATIONS, get_operation
from logistics.operations.cvs import (
    cancel_cvs_order,
    create_cvs_order,
    return_cvs_order,
    update_cvs_order,
    with_collection,
    without_collection,
)
from logistics.operations.home import create_home_order, return_home_order
from logistics.operations.map import open_store_map
from logistics.operations.printing import for_unimart, print_cvs_document, print_trade_document
from logistics.operations.queries import get_store_list, query_logistics_order
from logistics.security.checkmac import CheckMacEncoder

__all__ = [
    "OPERATIONS",
    "CheckMacEncoder",
    "ChecksumMismatch",
    "Content",
    "CredentialMissing",
    "Credentials",
    "Device",
    "Distance",
    "FieldRule",
    "FieldTooLong",
    "InvalidValue",
    "IsCollection",
    "LogisticsConfig",
    "LogisticsError",
    "LogisticsNotify",
    "LogisticsNotifyResult",
    "LogisticsSubType",
    "LogisticsType",
    "Operation",
    "RequiredFieldMissing",
    "ReturnLogisticsNotify",
    "ScheduledDeliveryTime",
    "ScheduledPickupTime",
    "Specification",
    "StoreType",
    "Temperature",
    "cancel_cvs_order",
    "create_cvs_order",
    "create_home_order",
    "for_unimart",
    "get_config",
    "get_operation",
    "get_store_list",
    "open_store_map",
    "print_cvs_document",
    "print_trade_document",
    "query_logistics_order",
    "return_cvs_order",
    "return_home_order",
    "set_config",
    "update_cvs_order",
    "with_collection",
    "without_collection",
]
