import logging
from fastapi import Request, HTTPException
import httpx

logger = logging.getLogger(__name__)


async def get_http_client(request: Request):
    if (
        not hasattr(request.app.state, "http_client")
        or not request.app.state.http_client
    ):
        logger.error("HTTP client is not available")
        raise HTTPException(status_code=503, detail="Booking service is unavailable")
    client: httpx.AsyncClient = request.app.state.http_client
    return client
