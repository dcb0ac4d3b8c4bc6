import asyncio
import httpx
import pytest
from models.calendar_model import TimeSlot
from services.booking_service import build_booking_request
from services.calendar_service import generate_time_slots
from services.quickcourt_api import (
    auth_headers,
    create_booking,
    fetch_facility,
    fetch_facility_bookings,
)
from utils.errors import SubmissionError
from helpers import TUESDAY, booking, every_day

SLOT = TimeSlot(start_time="07:00", end_time="08:00", available=True, price=1200.0)


def run_with(handler, call):
    async def scenario():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            return await call(client)

    return asyncio.run(scenario())


def test_auth_headers_skip_empty_token():
    assert auth_headers(None) == {}
    assert auth_headers("abc") == {"Authorization": "Bearer abc"}


def test_fetch_facility_accepts_decoded_operating_hours(fake_api):
    fake_api.add_facility("fac-1", {"monday": {"open": "06:00", "close": "09:00"}})
    facility = run_with(fake_api.handler, lambda c: fetch_facility("fac-1", c, "token"))
    assert facility.price_per_hour == 1200.0
    assert '"monday"' in facility.operating_hours


def test_fetch_bookings_sends_date_and_token(fake_api):
    fake_api.add_facility("fac-1", every_day("06:00", "09:00"))
    fake_api.bookings[("fac-1", "2026-10-20")] = [booking(TUESDAY, "07:00", "08:00")]
    bookings = run_with(
        fake_api.handler, lambda c: fetch_facility_bookings("fac-1", TUESDAY, c, "token")
    )
    assert len(bookings) == 1
    (request,) = fake_api.requests
    assert request.url.params["date"] == "2026-10-20"
    assert request.headers["Authorization"] == "Bearer token"


def test_missing_facility_maps_to_upstream_status(fake_api):
    with pytest.raises(SubmissionError) as exc:
        run_with(fake_api.handler, lambda c: fetch_facility("nope", c))
    assert exc.value.status_code == 404
    assert exc.value.message == "Facility not found"


def test_server_errors_surface_as_bad_gateway():
    def handler(request):
        return httpx.Response(500, text="boom")

    with pytest.raises(SubmissionError) as exc:
        run_with(handler, lambda c: fetch_facility_bookings("fac-1", TUESDAY, c))
    assert exc.value.http_status == 502


def test_unreachable_api():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(SubmissionError, match="unreachable") as exc:
        run_with(handler, lambda c: fetch_facility("fac-1", c))
    assert exc.value.status_code is None


def test_non_list_bookings_payload_is_rejected():
    def handler(request):
        return httpx.Response(200, json={"bookings": []})

    with pytest.raises(SubmissionError):
        run_with(handler, lambda c: fetch_facility_bookings("fac-1", TUESDAY, c))


@pytest.mark.parametrize("operating_hours", [["06:00", "23:00"], 42])
def test_non_object_operating_hours_use_default_schedule(fake_api, operating_hours):
    fake_api.add_facility("fac-1", operating_hours)
    facility = run_with(fake_api.handler, lambda c: fetch_facility("fac-1", c))
    slots = generate_time_slots(facility.operating_hours, facility.price_per_hour, TUESDAY)
    assert len(slots) == 17


@pytest.mark.parametrize(
    "response,expected",
    [
        (httpx.Response(201, text=""), {}),
        (httpx.Response(204), {}),
        (httpx.Response(201, text="created"), {"body": "created"}),
    ],
)
def test_created_booking_without_json_body_is_success(response, expected):
    request = build_booking_request("fac-1", TUESDAY, SLOT)
    booking = run_with(lambda r: response, lambda c: create_booking(request, c, "token"))
    assert booking == expected
