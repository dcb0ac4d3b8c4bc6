import logging
from fastapi import APIRouter, HTTPException, Depends
from typing import Optional
import httpx
from models.booking_model import BookingSubmission, BookingResult
from services.booking_service import submit_booking_for_time
from utils.auth import get_session_token
from utils.dependencies import get_http_client
from utils.errors import SelectionError, SubmissionError

router = APIRouter(prefix="/api", tags=["booking"])
logger = logging.getLogger(__name__)


@router.post("/bookings", response_model=BookingResult, status_code=201)
async def create_booking_endpoint(
    submission: BookingSubmission,
    token: Optional[str] = Depends(get_session_token),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    try:
        return await submit_booking_for_time(
            client,
            token,
            submission.facility_id,
            submission.booking_date,
            submission.start_time,
            submission.notes,
        )
    except SelectionError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except SubmissionError as e:
        raise HTTPException(status_code=e.http_status, detail=e.message)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Booking failed: %s", e)
        raise HTTPException(status_code=500, detail="Failed to create booking. Please try again.")
