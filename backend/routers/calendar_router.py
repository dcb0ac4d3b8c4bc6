import logging
from fastapi import APIRouter, HTTPException, Depends
from typing import Optional
from datetime import date
import httpx
from models.calendar_model import DailySlotsResponse
from services.calendar_service import build_daily_slots
from services.quickcourt_api import fetch_facility, fetch_facility_bookings
from utils.auth import get_session_token
from utils.dependencies import get_http_client
from utils.errors import SubmissionError

router = APIRouter(prefix="/api", tags=["calendar"])
logger = logging.getLogger(__name__)


@router.get(
    "/facilities/{facility_id}/slots",
    response_model=DailySlotsResponse,
    response_model_by_alias=True,
)
async def get_facility_slots(
    facility_id: str,
    date: Optional[date] = None,
    token: Optional[str] = Depends(get_session_token),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    try:
        facility = await fetch_facility(facility_id, client, token)
        bookings = []
        if date is not None:
            bookings = await fetch_facility_bookings(facility_id, date, client, token)
        return build_daily_slots(facility, date, bookings)
    except SubmissionError as e:
        raise HTTPException(status_code=e.http_status, detail=e.message)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Failed to load slots for facility %s: %s", facility_id, e)
        raise HTTPException(status_code=500, detail="Failed to load time slots")
