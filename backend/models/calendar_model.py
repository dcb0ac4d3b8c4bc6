from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Union
from datetime import date


class TimeSlot(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    start_time: str = Field(alias="startTime")
    end_time: str = Field(alias="endTime")
    available: bool
    price: float


class DailySlotsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    facility_id: Union[str, int] = Field(alias="facilityId")
    target_date: Optional[date] = Field(default=None, alias="date")
    is_closed: bool = Field(default=False, alias="isClosed")
    is_bookable: bool = Field(default=False, alias="isBookable")
    slots: List[TimeSlot]
