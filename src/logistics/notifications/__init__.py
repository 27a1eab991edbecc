"""Notification handler registry.

Provides get_notification_handler() / set_notification_handler() so the
application decides what happens to a verified callback. The default
handler only logs it.
"""

from collections.abc import Callable

from logistics.notifications.notify import LogisticsNotify, LogisticsNotifyResult, ReturnLogisticsNotify
from logistics.utils.logging import get_logger

logger = get_logger(__name__)

NotificationHandler = Callable[[str, LogisticsNotifyResult], None]


def log_notification(kind: str, result: LogisticsNotifyResult) -> None:
    logger.info(
        "Logistics notification received",
        kind=kind,
        all_pay_logistics_id=result.all_pay_logistics_id,
        rtn_code=result.rtn_code,
        rtn_msg=result.rtn_msg,
    )


_current_handler: NotificationHandler | None = None


def get_notification_handler() -> NotificationHandler:
    """Return the current handler. Defaults to log_notification."""
    return _current_handler or log_notification


def set_notification_handler(handler: NotificationHandler) -> None:
    """Override the active handler (useful for tests)."""
    global _current_handler
    _current_handler = handler


def reset_notification_handler() -> None:
    global _current_handler
    _current_handler = None


__all__ = [
    "LogisticsNotify",
    "LogisticsNotifyResult",
    "NotificationHandler",
    "ReturnLogisticsNotify",
    "get_notification_handler",
    "log_notification",
    "reset_notification_handler",
    "set_notification_handler",
]
