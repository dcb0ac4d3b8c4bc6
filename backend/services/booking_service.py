import logging
from datetime import date, datetime
from typing import Optional
import httpx
from models.booking_model import BookingRequest, BookingResult
from models.calendar_model import TimeSlot
from models.facility_model import Facility
from services.calendar_service import (
    SLOT_FORMAT,
    generate_time_slots,
    find_time_slot,
    is_date_bookable,
)
from services.quickcourt_api import (
    create_booking,
    fetch_facility,
    fetch_facility_bookings,
)
from utils.config import ADVANCE_BOOKING_DAYS, MAX_NOTES_LENGTH
from utils.errors import SelectionError

logger = logging.getLogger(__name__)


def validate_selection(
    session_token: Optional[str],
    selected_date: Optional[date],
    selected_slot: Optional[TimeSlot],
    notes: Optional[str] = None,
    today: Optional[date] = None,
):
    if not session_token:
        raise SelectionError("Please log in to make a booking.", status_code=401)
    if selected_date is None or selected_slot is None:
        raise SelectionError("Please select a date and time slot.")
    if not is_date_bookable(selected_date, today):
        raise SelectionError(
            f"Bookings can only be made up to {ADVANCE_BOOKING_DAYS} days in advance and not for past dates."
        )
    if not selected_slot.available:
        raise SelectionError(f"The {selected_slot.start_time} slot is already booked.")
    if notes and len(notes) > MAX_NOTES_LENGTH:
        raise SelectionError(f"Notes must not exceed {MAX_NOTES_LENGTH} characters.")


def apply_wall_clock(selected_date: date, value: str) -> datetime:
    wall_clock = datetime.strptime(value, SLOT_FORMAT).time()
    return datetime.combine(selected_date, wall_clock).astimezone()


def build_booking_request(
    facility_id,
    selected_date: date,
    slot: TimeSlot,
    notes: Optional[str] = None,
) -> BookingRequest:
    return BookingRequest(
        facility_id=facility_id,
        booking_date=selected_date,
        start_time=apply_wall_clock(selected_date, slot.start_time),
        end_time=apply_wall_clock(selected_date, slot.end_time),
        total_amount=slot.price,
        notes=notes or None,
    )


async def submit_booking(
    client: httpx.AsyncClient,
    session_token: Optional[str],
    facility: Facility,
    selected_date: Optional[date],
    selected_slot: Optional[TimeSlot],
    notes: Optional[str] = None,
    today: Optional[date] = None,
) -> BookingResult:
    validate_selection(session_token, selected_date, selected_slot, notes, today)
    booking_request = build_booking_request(
        facility.id, selected_date, selected_slot, notes
    )
    booking = await create_booking(booking_request, client, session_token)
    logger.info(
        "Booked facility %s on %s at %s",
        facility.id,
        selected_date.isoformat(),
        selected_slot.start_time,
    )
    return BookingResult(success=True, booking=booking, message="Booking Confirmed")


async def submit_booking_for_time(
    client: httpx.AsyncClient,
    session_token: Optional[str],
    facility_id,
    selected_date: Optional[date],
    start_time: Optional[str],
    notes: Optional[str] = None,
    today: Optional[date] = None,
) -> BookingResult:
    """Re-check a requested slot against the current bookings, then book it.

    Selection problems are reported before anything is fetched.
    """
    if not session_token:
        raise SelectionError("Please log in to make a booking.", status_code=401)
    if selected_date is None or not start_time:
        raise SelectionError("Please select a date and time slot.")
    facility = await fetch_facility(facility_id, client, session_token)
    bookings = await fetch_facility_bookings(
        facility_id, selected_date, client, session_token
    )
    slots = generate_time_slots(
        facility.operating_hours, facility.price_per_hour, selected_date, bookings
    )
    selected_slot = find_time_slot(slots, start_time)
    if selected_slot is None:
        raise SelectionError(f"{start_time} is not a bookable slot on {selected_date.isoformat()}.")
    return await submit_booking(
        client, session_token, facility, selected_date, selected_slot, notes, today
    )
