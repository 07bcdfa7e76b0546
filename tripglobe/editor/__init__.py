from tripglobe.editor.dates import format_date_label, generate_date_range, trip_duration_text
from tripglobe.editor.drag import DragState, ReorderSwapEngine
from tripglobe.editor.grouping import (
    build_complete_itinerary_days,
    build_itinerary_days,
    flatten_days,
    group_stops_by_day,
)
from tripglobe.editor.metadata import DayMetadataStore
from tripglobe.editor.sections import make_day_section_id
from tripglobe.editor.session import TripEditingSession

__all__ = [
    "DayMetadataStore",
    "DragState",
    "ReorderSwapEngine",
    "TripEditingSession",
    "build_complete_itinerary_days",
    "build_itinerary_days",
    "flatten_days",
    "format_date_label",
    "generate_date_range",
    "group_stops_by_day",
    "make_day_section_id",
    "trip_duration_text",
]
