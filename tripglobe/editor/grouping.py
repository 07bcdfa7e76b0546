import logging
from collections import OrderedDict
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from tripglobe.editor.dates import generate_date_range, parse_day_key
from tripglobe.editor.preview import fallback_itinerary
from tripglobe.models.itinerary import Stop

logger = logging.getLogger(__name__)

DayBucket = Tuple[str, List[Stop]]


def _day_sort_key(day_key: str):
    parsed = parse_day_key(day_key)
    # unparseable keys sort after every real day
    return (parsed is None, parsed.toordinal() if parsed else 0, day_key)


def _trip_field(trip: Any, name: str, default=None):
    if trip is None:
        return default
    if isinstance(trip, dict):
        return trip.get(name, default)
    return getattr(trip, name, default)


def _as_stops(raw: Optional[Iterable[Any]]) -> List[Stop]:
    return [s if isinstance(s, Stop) else Stop.model_validate(s) for s in (raw or [])]


def group_stops_by_day(stops: Sequence[Stop]) -> List[DayBucket]:
    """
    Bucket stops by their day key.

    Stops keep their relative input order inside a bucket; buckets come back
    in calendar order. Stops without a date are left out.
    """
    buckets: "OrderedDict[str, List[Stop]]" = OrderedDict()
    for stop in stops:
        if not stop.date:
            logger.debug("Dropping undated stop %s from grouped view", stop.id)
            continue
        buckets.setdefault(stop.date, []).append(stop)
    return sorted(buckets.items(), key=lambda item: _day_sort_key(item[0]))


def flatten_days(days: Sequence[DayBucket]) -> List[Stop]:
    return [stop for _, stops in days for stop in stops]


def build_complete_itinerary_days(trip: Any) -> List[DayBucket]:
    """
    Grouped view with one bucket for every day of the trip's declared range.

    Days with no stops get an empty bucket; stops dated outside the range are
    not shown. A trip without both a start and an end date falls back to the
    plain grouped view.
    """
    stops = _as_stops(_trip_field(trip, "itinerary"))
    grouped = group_stops_by_day(stops)

    start = _trip_field(trip, "start_date")
    end = _trip_field(trip, "end_date")
    if parse_day_key(start) is None or parse_day_key(end) is None:
        return grouped

    by_day = dict(grouped)
    day_keys = generate_date_range(start, end)
    orphaned = set(by_day) - set(day_keys)
    if orphaned:
        logger.info(f"Hiding stops on {len(orphaned)} day(s) outside {start}..{end}: {sorted(orphaned)}")
    return [(key, by_day.get(key, [])) for key in day_keys]


def build_itinerary_days(trip: Any) -> List[DayBucket]:
    """Days for the editor: the trip's own days, or the demo preview when there is no trip data."""
    has_stops = bool(_trip_field(trip, "itinerary"))
    has_range = bool(generate_date_range(_trip_field(trip, "start_date"), _trip_field(trip, "end_date")))
    if has_stops or has_range:
        return build_complete_itinerary_days(trip)
    return group_stops_by_day(fallback_itinerary())
