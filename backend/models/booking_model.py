from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Dict, Any, Union
from datetime import datetime, date
from enum import Enum


class BookingStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class Booking(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Optional[Union[str, int]] = None
    start_time: datetime = Field(alias="startTime")
    end_time: datetime = Field(alias="endTime")
    status: Optional[BookingStatus] = None


class BookingRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    facility_id: Union[str, int] = Field(alias="facilityId")
    booking_date: date = Field(alias="date")
    start_time: datetime = Field(alias="startTime")
    end_time: datetime = Field(alias="endTime")
    total_amount: float = Field(alias="totalAmount")
    notes: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class BookingSubmission(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    facility_id: Union[str, int] = Field(alias="facilityId")
    booking_date: Optional[date] = Field(default=None, alias="date")
    start_time: Optional[str] = Field(default=None, alias="startTime")
    notes: Optional[str] = None


class BookingResult(BaseModel):
    success: bool
    booking: Optional[Dict[str, Any]] = None
    message: Optional[str] = None
