import logging
from fastapi import FastAPI, HTTPException
from contextlib import asynccontextmanager
from fastapi.middleware.cors import CORSMiddleware
from routers import calendar_router, booking_router
from utils.config import CORS_ORIGINS, QUICKCOURT_API_TIMEOUT
from utils.log import setup_logging
import httpx

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.http_client = httpx.AsyncClient(timeout=QUICKCOURT_API_TIMEOUT)
    logger.info("Booking API client ready")
    try:
        yield
    finally:
        if app.state.http_client:
            await app.state.http_client.aclose()
            app.state.http_client = None


app = FastAPI(title="QuickCourt availability", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(calendar_router.router)
app.include_router(booking_router.router)


@app.get("/status")
async def check_status():
    if not getattr(app.state, "http_client", None):
        raise HTTPException(status_code=500, detail="Booking service is unavailable")
    return {"status": "success", "message": "Booking service is running"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
