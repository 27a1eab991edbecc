"""FastAPI routes for ECPay logistics callbacks.

ECPay posts form-encoded status notifications and expects the literal
body ``1|OK`` once the merchant has accepted one. A callback whose
CheckMacValue does not verify is rejected with 401 and never reaches the
notification handler.
"""

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import PlainTextResponse

from logistics.config import get_notify_credentials
from logistics.errors import CredentialMissing, LogisticsError
from logistics.notifications import get_notification_handler
from logistics.notifications.notify import LogisticsNotify, ReturnLogisticsNotify
from logistics.utils.logging import get_logger

logger = get_logger(__name__)

ACKNOWLEDGEMENT = "1|OK"

# ---------------------------------------------------------------------------
# Notify Router
# ---------------------------------------------------------------------------
notify_router = APIRouter(prefix="/logistics", tags=["logistics"])


async def _handle_callback(request: Request, notify: type[LogisticsNotify]) -> PlainTextResponse:
    form = await request.form()
    fields = {key: value for key, value in form.items() if isinstance(value, str)}

    try:
        credentials = get_notify_credentials().require()
    except CredentialMissing as exc:
        logger.error("Callback credentials are not configured", kind=notify.kind)
        raise HTTPException(status_code=503, detail="Callback verification is not configured") from exc

    if not notify.verify(fields, credentials):
        raise HTTPException(status_code=401, detail="Invalid CheckMacValue")

    try:
        result = notify.parse(fields)
    except LogisticsError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    get_notification_handler()(notify.kind, result)
    return PlainTextResponse(ACKNOWLEDGEMENT)


@notify_router.post("/notify", response_class=PlainTextResponse)
async def logistics_notify(request: Request) -> PlainTextResponse:
    """Receive a forward logistics status notification."""
    return await _handle_callback(request, LogisticsNotify)


@notify_router.post("/return-notify", response_class=PlainTextResponse)
async def return_logistics_notify(request: Request) -> PlainTextResponse:
    """Receive a reverse (return) logistics status notification."""
    return await _handle_callback(request, ReturnLogisticsNotify)
