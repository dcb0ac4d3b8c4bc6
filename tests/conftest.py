import pytest
from models.facility_model import Facility
from helpers import FakeBookingApi


@pytest.fixture
def make_facility():
    def _make(operating_hours=None, price="1200.00", facility_id="fac-1"):
        return Facility.model_validate(
            {
                "id": facility_id,
                "name": "Green Court",
                "pricePerHour": price,
                "operatingHours": operating_hours,
            }
        )

    return _make


@pytest.fixture
def fake_api():
    return FakeBookingApi()
