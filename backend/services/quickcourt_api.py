import logging
from datetime import date
from typing import Any, Dict, List, Optional
import httpx
from pydantic import ValidationError
from models.booking_model import Booking, BookingRequest
from models.facility_model import Facility
from utils.config import QUICKCOURT_API_URL
from utils.errors import SubmissionError

logger = logging.getLogger(__name__)


def auth_headers(token: Optional[str]) -> Dict[str, str]:
    if not token:
        return {}
    return {"Authorization": f"Bearer {token}"}


def upstream_message(response: httpx.Response) -> Optional[str]:
    try:
        body = response.json()
    except ValueError:
        return response.text or None
    if isinstance(body, dict):
        return body.get("message") or body.get("detail")
    return None


def optional_json(response: httpx.Response) -> Any:
    if not response.content.strip():
        return {}
    try:
        return response.json()
    except ValueError:
        return {"body": response.text}


async def request_json(
    method: str,
    path: str,
    client: httpx.AsyncClient,
    token: Optional[str] = None,
    require_body: bool = True,
    **kwargs,
) -> Any:
    url = f"{QUICKCOURT_API_URL}{path}"
    try:
        response = await client.request(method, url, headers=auth_headers(token), **kwargs)
        response.raise_for_status()
        if not require_body:
            return optional_json(response)
        return response.json()
    except httpx.HTTPStatusError as e:
        message = upstream_message(e.response) or f"Upstream request failed ({e.response.status_code})"
        logger.error("%s %s failed: %s - %s", method, url, e.response.status_code, message)
        raise SubmissionError(message, status_code=e.response.status_code) from e
    except httpx.HTTPError as e:
        logger.error("%s %s could not reach the booking API: %s", method, url, e)
        raise SubmissionError("Booking service is unreachable") from e
    except ValueError as e:
        logger.error("%s %s returned an invalid body: %s", method, url, e)
        raise SubmissionError("Booking service returned an invalid response") from e


async def fetch_facility(
    facility_id, client: httpx.AsyncClient, token: Optional[str] = None
) -> Facility:
    data = await request_json("GET", f"/facilities/{facility_id}", client, token)
    try:
        return Facility.model_validate(data)
    except ValidationError as e:
        logger.error("Facility %s payload is invalid: %s", facility_id, e)
        raise SubmissionError("Facility data is invalid") from e


async def fetch_facility_bookings(
    facility_id,
    target_date: date,
    client: httpx.AsyncClient,
    token: Optional[str] = None,
) -> List[Booking]:
    data = await request_json(
        "GET",
        f"/facilities/{facility_id}/bookings",
        client,
        token,
        params={"date": target_date.isoformat()},
    )
    if not isinstance(data, list):
        raise SubmissionError("Booking service returned an invalid response")
    try:
        return [Booking.model_validate(item) for item in data]
    except ValidationError as e:
        logger.error("Bookings for facility %s are invalid: %s", facility_id, e)
        raise SubmissionError("Booking data is invalid") from e


async def create_booking(
    booking_request: BookingRequest,
    client: httpx.AsyncClient,
    token: Optional[str] = None,
) -> Dict[str, Any]:
    # any 2xx is a created booking
    data = await request_json(
        "POST",
        "/bookings",
        client,
        token,
        require_body=False,
        json=booking_request.to_payload(),
    )
    return data if isinstance(data, dict) else {"result": data}
