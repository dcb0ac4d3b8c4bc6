import json
from datetime import date
import httpx

MONDAY = date(2026, 10, 19)
TUESDAY = date(2026, 10, 20)
WEDNESDAY = date(2026, 10, 21)
SUNDAY = date(2026, 10, 25)

ALL_WEEKDAYS = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)


def hours_json(**days) -> str:
    return json.dumps(days)


def every_day(open_time: str, close_time: str) -> str:
    return json.dumps(
        {day: {"open": open_time, "close": close_time} for day in ALL_WEEKDAYS}
    )


def booking(target_date: date, start: str, end: str, status: str = "confirmed") -> dict:
    return {
        "id": f"{target_date.isoformat()}-{start}",
        "startTime": f"{target_date.isoformat()}T{start}:00",
        "endTime": f"{target_date.isoformat()}T{end}:00",
        "status": status,
    }


class FakeBookingApi:
    """In-memory stand-in for the upstream QuickCourt REST API."""

    def __init__(self):
        self.facilities = {}
        self.bookings = {}
        self.requests = []
        self.create_status = 201
        self.create_body = None

    def add_facility(self, facility_id: str, operating_hours, price: str = "1200.00"):
        self.facilities[facility_id] = {
            "id": facility_id,
            "name": "Green Court",
            "pricePerHour": price,
            "operatingHours": operating_hours,
            "city": "Ahmedabad",
        }

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        parts = request.url.path.strip("/").split("/")
        if request.method == "POST" and parts[-1] == "bookings":
            if self.create_status >= 400:
                return httpx.Response(self.create_status, json=self.create_body or {})
            payload = json.loads(request.content)
            return httpx.Response(self.create_status, json={"id": "bk-1", "status": "pending", **payload})
        if request.method == "GET" and parts[-1] == "bookings":
            target = request.url.params.get("date")
            return httpx.Response(200, json=self.bookings.get((parts[-2], target), []))
        if request.method == "GET" and parts[-2] == "facilities":
            facility = self.facilities.get(parts[-1])
            if facility is None:
                return httpx.Response(404, json={"message": "Facility not found"})
            return httpx.Response(200, json=facility)
        return httpx.Response(404, json={"message": "Not found"})

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    @property
    def posted(self):
        return [r for r in self.requests if r.method == "POST"]
