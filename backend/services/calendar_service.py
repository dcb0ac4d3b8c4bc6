import logging
from datetime import datetime, date, timedelta
from typing import Iterable, List, Optional
from models.booking_model import Booking, BookingStatus
from models.calendar_model import TimeSlot, DailySlotsResponse
from models.facility_model import Facility, DayHours
from services.operating_hours_service import parse_operating_hours, resolve_day_hours
from utils.config import ADVANCE_BOOKING_DAYS
from utils.errors import ConfigurationError

logger = logging.getLogger(__name__)

SLOT_LENGTH = timedelta(hours=1)
SLOT_FORMAT = "%H:%M"


def to_local_naive(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def slots_overlap(
    a_start: datetime, a_end: datetime, b_start: datetime, b_end: datetime
) -> bool:
    return a_start < b_end and a_end > b_start


def is_slot_booked(
    slot_start: datetime, slot_end: datetime, bookings: Iterable[Booking]
) -> bool:
    booked = False
    for booking in bookings:
        if booking.status == BookingStatus.CANCELLED:
            continue
        if slots_overlap(
            slot_start,
            slot_end,
            to_local_naive(booking.start_time),
            to_local_naive(booking.end_time),
        ):
            booked = True
    return booked


def generate_time_slots(
    operating_hours_raw: Optional[str],
    price_per_hour: float,
    selected_date: Optional[date],
    existing_bookings: Iterable[Booking] = (),
) -> List[TimeSlot]:
    """Split the facility's open interval on selected_date into one-hour slots.

    A trailing interval shorter than an hour is dropped. A slot is unavailable
    when it overlaps any booking that is not cancelled.
    """
    if selected_date is None:
        return []
    day_hours = resolve_day_hours(
        parse_operating_hours(operating_hours_raw), selected_date
    )
    return generate_day_slots(day_hours, price_per_hour, selected_date, existing_bookings)


def open_interval(day_hours: DayHours, selected_date: date):
    open_at = datetime.combine(selected_date, day_hours.open)
    close_at = datetime.combine(selected_date, day_hours.close)
    if open_at >= close_at:
        raise ConfigurationError(
            f"Opening time {day_hours.open} is not before closing time {day_hours.close}"
        )
    return open_at, close_at


def generate_day_slots(
    day_hours: DayHours,
    price_per_hour: float,
    selected_date: date,
    existing_bookings: Iterable[Booking] = (),
) -> List[TimeSlot]:
    if day_hours.closed:
        return []
    try:
        open_at, close_at = open_interval(day_hours, selected_date)
    except ConfigurationError as e:
        logger.warning("No slots for %s: %s", selected_date, e.message)
        return []

    bookings = list(existing_bookings)
    price = float(price_per_hour)
    slots = []
    current = open_at
    while current < close_at:
        slot_end = current + SLOT_LENGTH
        if slot_end > close_at:
            break
        slots.append(
            TimeSlot(
                start_time=current.strftime(SLOT_FORMAT),
                end_time=slot_end.strftime(SLOT_FORMAT),
                available=not is_slot_booked(current, slot_end, bookings),
                price=price,
            )
        )
        current = slot_end
    return slots


def find_time_slot(slots: Iterable[TimeSlot], start_time: str) -> Optional[TimeSlot]:
    for slot in slots:
        if slot.start_time == start_time:
            return slot
    return None


def is_date_bookable(
    target_date: date, today: Optional[date] = None, advance_days: int = ADVANCE_BOOKING_DAYS
) -> bool:
    today = today or date.today()
    return today <= target_date <= today + timedelta(days=advance_days)


def build_daily_slots(
    facility: Facility,
    selected_date: Optional[date],
    bookings: Iterable[Booking] = (),
    today: Optional[date] = None,
) -> DailySlotsResponse:
    if selected_date is None:
        return DailySlotsResponse(facility_id=facility.id, slots=[])
    day_hours = resolve_day_hours(
        parse_operating_hours(facility.operating_hours), selected_date
    )
    slots = generate_day_slots(
        day_hours, facility.price_per_hour, selected_date, bookings
    )
    return DailySlotsResponse(
        facility_id=facility.id,
        target_date=selected_date,
        is_closed=day_hours.closed,
        is_bookable=is_date_bookable(selected_date, today),
        slots=slots,
    )
