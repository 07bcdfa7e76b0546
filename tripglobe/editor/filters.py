"""Filtering for flight and hotel search results (SerpAPI google_flights / google_hotels shapes)."""

from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

MINUTES_PER_DAY = 1440


def time_to_minutes(value: Optional[str]) -> int:
    """Minutes since midnight for 'HH:MM' or 'YYYY-MM-DD HH:MM'; 0 when missing."""
    if not value:
        return 0
    clock = value.strip().split(" ")[-1].split("T")[-1]
    try:
        hours, minutes = clock.split(":")[:2]
        return int(hours) * 60 + int(minutes)
    except ValueError:
        return 0


def _all_flights(results: Dict[str, Any]) -> List[Dict[str, Any]]:
    return list(results.get("best_flights") or []) + list(results.get("other_flights") or [])


def unique_airlines(results: Dict[str, Any]) -> List[str]:
    airlines = {leg.get("airline") for flight in _all_flights(results) for leg in flight.get("flights") or []}
    airlines.discard(None)
    return sorted(airlines)


def filter_flights(
    results: Dict[str, Any],
    departure_window: Tuple[int, int] = (0, MINUTES_PER_DAY - 1),
    duration_range: Tuple[int, int] = (0, 2000),
    airlines: Optional[Iterable[str]] = None,
) -> List[Dict[str, Any]]:
    """
    Flights from both result lists that depart inside the window and last
    within the duration range. The airline filter applies only when some,
    but not all, airlines are selected.
    """
    selected = set(airlines or [])
    known = unique_airlines(results)
    airline_filter_on = 0 < len(selected) < len(known)

    kept = []
    for flight in _all_flights(results):
        legs = flight.get("flights") or []
        first = legs[0] if legs else {}
        departure = time_to_minutes((first.get("departure_airport") or {}).get("time"))
        if not departure_window[0] <= departure <= departure_window[1]:
            continue
        duration = flight.get("total_duration") or 0
        if not duration_range[0] <= duration <= duration_range[1]:
            continue
        if airline_filter_on and not any(leg.get("airline") in selected for leg in legs):
            continue
        kept.append(flight)
    return kept


def _hotel_stars(hotel: Dict[str, Any]) -> int:
    raw = str(hotel.get("hotel_class") or hotel.get("extracted_hotel_class") or "").strip()
    digits = ""
    for ch in raw:
        if not ch.isdigit():
            break
        digits += ch
    return int(digits) if digits else 0


def filter_hotels(
    hotels: Sequence[Dict[str, Any]],
    price_range: Tuple[float, float] = (0, 1000),
    stars: Iterable[int] = (5, 4, 3),
) -> List[Dict[str, Any]]:
    wanted = set(stars)
    kept = []
    for hotel in hotels:
        price = (hotel.get("rate_per_night") or {}).get("extracted_lowest") or 0
        if price_range[0] <= price <= price_range[1] and _hotel_stars(hotel) in wanted:
            kept.append(hotel)
    return kept
