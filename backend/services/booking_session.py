import logging
from datetime import date
from typing import List, Optional
import httpx
from models.booking_model import Booking, BookingResult
from models.calendar_model import TimeSlot
from models.facility_model import Facility
from services.booking_service import submit_booking
from services.calendar_service import find_time_slot, generate_time_slots
from services.quickcourt_api import fetch_facility_bookings
from utils.errors import SelectionError, SubmissionError

logger = logging.getLogger(__name__)


class BookingSession:
    """Selection state for booking one facility.

    Every date change bumps a request sequence number. A bookings fetch is
    only applied if no newer date was selected while it was in flight, so
    the slots always reflect the latest selected date.
    """

    def __init__(
        self,
        facility: Facility,
        client: httpx.AsyncClient,
        session_token: Optional[str] = None,
        today: Optional[date] = None,
    ):
        self.facility = facility
        self.client = client
        self.session_token = session_token
        self.today = today
        self.selected_date: Optional[date] = None
        self.selected_slot: Optional[TimeSlot] = None
        self.notes = ""
        self.existing_bookings: List[Booking] = []
        self._request_seq = 0
        self.reset()

    def reset(self):
        self.select_date(self.today or date.today())
        self.notes = ""

    def select_date(self, selected_date: Optional[date]) -> int:
        self.selected_date = selected_date
        self.selected_slot = None
        self.existing_bookings = []
        self._request_seq += 1
        return self._request_seq

    def is_current(self, request_seq: int, requested_date: Optional[date]) -> bool:
        return request_seq == self._request_seq and requested_date == self.selected_date

    async def load_bookings(self) -> bool:
        if self.selected_date is None:
            return False
        request_seq = self._request_seq
        requested_date = self.selected_date
        try:
            bookings = await fetch_facility_bookings(
                self.facility.id, requested_date, self.client, self.session_token
            )
        except SubmissionError:
            if not self.is_current(request_seq, requested_date):
                logger.debug("Ignoring failed bookings fetch for stale date %s", requested_date)
                return False
            raise
        if not self.is_current(request_seq, requested_date):
            logger.debug("Discarding stale bookings for %s", requested_date)
            return False
        self.existing_bookings = bookings
        return True

    async def change_date(self, selected_date: Optional[date]) -> bool:
        self.select_date(selected_date)
        return await self.load_bookings()

    @property
    def time_slots(self) -> List[TimeSlot]:
        return generate_time_slots(
            self.facility.operating_hours,
            self.facility.price_per_hour,
            self.selected_date,
            self.existing_bookings,
        )

    def select_slot(self, start_time: str) -> TimeSlot:
        slot = find_time_slot(self.time_slots, start_time)
        if slot is None:
            raise SelectionError(f"{start_time} is not a slot on the selected date.")
        if not slot.available:
            raise SelectionError(f"The {start_time} slot is already booked.")
        self.selected_slot = slot
        return slot

    def clear_slot(self):
        self.selected_slot = None

    async def submit(self) -> BookingResult:
        result = await submit_booking(
            self.client,
            self.session_token,
            self.facility,
            self.selected_date,
            self.selected_slot,
            self.notes,
            self.today,
        )
        self.reset()
        return result
