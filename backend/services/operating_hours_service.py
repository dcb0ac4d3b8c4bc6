import json
import logging
from datetime import date, time
from typing import Dict, Optional
from pydantic import ValidationError
from models.facility_model import DayHours, WEEKDAYS
from utils.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_OPEN = time(6, 0)
DEFAULT_CLOSE = time(23, 0)
DEFAULT_KEY = "default"

DEFAULT_OPERATING_HOURS: Dict[str, DayHours] = {
    weekday: DayHours(open=DEFAULT_OPEN, close=DEFAULT_CLOSE)
    for weekday in WEEKDAYS
    if weekday != "sunday"
}
DEFAULT_OPERATING_HOURS["sunday"] = DayHours(closed=True)


def load_operating_hours(raw: Optional[str]) -> Dict[str, DayHours]:
    """Decode and validate an operating hours JSON string.

    Raises ConfigurationError when the input is missing or is not a JSON
    object. Entries that fail validation are dropped so the weekday falls
    back like a missing key. Keys other than weekdays and "default" are
    ignored.
    """
    if raw is None or not str(raw).strip():
        raise ConfigurationError("Operating hours are missing")
    try:
        data = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Operating hours are not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError("Operating hours must be a JSON object")
    hours = {}
    for key, entry in data.items():
        name = str(key).lower()
        if name not in WEEKDAYS and name != DEFAULT_KEY:
            continue
        try:
            hours[name] = DayHours.model_validate(entry)
        except ValidationError as e:
            logger.warning("Ignoring invalid operating hours for %s: %s", name, e)
    return hours


def parse_operating_hours(raw: Optional[str]) -> Dict[str, DayHours]:
    try:
        return load_operating_hours(raw)
    except ConfigurationError as e:
        logger.warning("Falling back to default operating hours: %s", e.message)
        return dict(DEFAULT_OPERATING_HOURS)


def weekday_name(target_date: date) -> str:
    return WEEKDAYS[target_date.weekday()]


def resolve_day_hours(hours: Dict[str, DayHours], target_date: date) -> DayHours:
    entry = hours.get(weekday_name(target_date))
    if entry is None:
        entry = hours.get(DEFAULT_KEY) or hours.get("monday")
    if entry is None:
        entry = DayHours(open=DEFAULT_OPEN, close=DEFAULT_CLOSE)
    return entry
