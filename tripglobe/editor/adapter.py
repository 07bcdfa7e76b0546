import logging
import uuid
from datetime import timedelta
from typing import Any, Dict, List, Optional

from tripglobe.editor.dates import parse_day_key, to_day_key
from tripglobe.models.itinerary import Location, Stop

logger = logging.getLogger(__name__)


def _activity_location(activity: Dict[str, Any]) -> Optional[Location]:
    location = activity.get("location") or activity.get("poiSnapshot") or {}
    if not isinstance(location, dict):
        return None
    coords = location.get("coordinates") or location
    if not isinstance(coords, dict):
        return None
    lat, lng = coords.get("lat"), coords.get("lng")
    if lat is None or lng is None:
        return None
    return Location(lat=lat, lng=lng)


def _activity_place(activity: Dict[str, Any]) -> str:
    location = activity.get("location") or activity.get("poiSnapshot")
    if isinstance(location, dict) and location.get("name"):
        return location["name"]
    if isinstance(location, str):
        return location
    return activity.get("title") or activity.get("name") or ""


def _day_key_for(day: Dict[str, Any], position: int, start_date: Optional[str]) -> Optional[str]:
    explicit = parse_day_key(day.get("date"))
    if explicit:
        return to_day_key(explicit)
    start = parse_day_key(start_date)
    if start is None:
        return None
    try:
        day_number = int(day.get("dayIndex") or day.get("day") or position + 1)
    except (TypeError, ValueError):
        # labels like "Day 1"
        day_number = position + 1
    return to_day_key(start + timedelta(days=day_number - 1))


def flatten_ai_itinerary(data: Dict[str, Any], start_date: Optional[str] = None) -> List[Stop]:
    """
    Flatten a generated {days: [{day, date?, activities: [...]}]} itinerary into stops.

    Days without their own date are placed relative to `start_date`
    (day 1 = start date). Without either, stops come back undated.
    """
    start_date = start_date or (data.get("input") or {}).get("startDate")
    stops = []
    for position, day in enumerate(data.get("days") or []):
        if not isinstance(day, dict):
            logger.warning(f"Skipping malformed day entry at position {position}")
            continue
        day_key = _day_key_for(day, position, start_date)
        for activity in day.get("activities") or []:
            if not isinstance(activity, dict):
                logger.warning(f"Skipping malformed activity on day {position + 1}: {activity!r}")
                continue
            stops.append(Stop(
                id=f"ai-{uuid.uuid4().hex[:12]}",
                date=day_key,
                title=activity.get("title") or activity.get("name") or "Untitled activity",
                description=activity.get("description") or "",
                destination=_activity_place(activity),
                startTime=activity.get("startTime") or activity.get("time") or "",
                endTime=activity.get("endTime") or "",
                imageUrl=activity.get("imageUrl"),
                location=_activity_location(activity),
            ))
    return stops
