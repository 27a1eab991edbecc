"""Logistics callback FastAPI application.

Receives ECPay logistics status callbacks and verifies their CheckMacValue
against the merchant credentials loaded from the environment
(ECPAY_LOGISTICS_MERCHANT_ID / _HASH_KEY / _HASH_IV).

Usage:
    uvicorn src.app:app --host 0.0.0.0 --port 8000 --reload
"""

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from logistics.api.routes import notify_router
from logistics.config import get_config, set_notify_credentials
from logistics.credentials import Credentials
from logistics.utils.logging import configure_logging, get_logger

configure_logging()
logger = get_logger(__name__)

# ---------------------------------------------------------------------------
# Credentials
# ---------------------------------------------------------------------------
_credentials = Credentials.from_env()
set_notify_credentials(_credentials)
if _credentials.missing():
    logger.warning("Callback credentials incomplete", missing=_credentials.missing())

# Resolve the target server now so a bad LOGISTICS_ENV fails at startup
logger.info("Logistics server selected", server_url=get_config().server_url)

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Logistics Callback API",
    description="ECPay logistics status notifications",
)

app.include_router(notify_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "server_url": get_config().server_url,
            "credentials_configured": _credentials.missing() is None,
        }
    )
