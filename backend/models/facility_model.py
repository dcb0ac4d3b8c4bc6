from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Optional, Union, Any
from datetime import time
import json
import re

TIME_PATTERN = re.compile(r"^([01]?[0-9]|2[0-3]):[0-5][0-9]$")

WEEKDAYS = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)


def parse_wall_clock(value: str) -> time:
    if not isinstance(value, str) or not TIME_PATTERN.fullmatch(value):
        raise ValueError(f"Invalid time format (HH:MM): {value!r}")
    hour, minute = value.split(":")
    return time(int(hour), int(minute))


class DayHours(BaseModel):
    open: Optional[time] = None
    close: Optional[time] = None
    closed: bool = False

    @field_validator("open", "close", mode="before")
    @classmethod
    def parse_time(cls, value: Any):
        if value is None or isinstance(value, time):
            return value
        return parse_wall_clock(value)

    @model_validator(mode="after")
    def require_open_and_close(self):
        if not self.closed and (self.open is None or self.close is None):
            raise ValueError("open and close are required unless the day is closed")
        return self


class Facility(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Union[str, int]
    name: Optional[str] = None
    price_per_hour: float = Field(alias="pricePerHour", ge=0)
    operating_hours: Optional[str] = Field(default=None, alias="operatingHours")

    @field_validator("operating_hours", mode="before")
    @classmethod
    def serialize_operating_hours(cls, value: Any):
        # jsonb columns come back already decoded
        if value is None or isinstance(value, str):
            return value
        return json.dumps(value)
