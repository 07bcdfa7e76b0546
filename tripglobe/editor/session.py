import logging
import uuid
from typing import Any, Dict, List, Optional

from tripglobe.editor.dates import format_date_label, generate_date_range, parse_day_key
from tripglobe.editor.drag import ReorderSwapEngine
from tripglobe.editor.grouping import DayBucket, build_complete_itinerary_days
from tripglobe.editor.metadata import DayMetadataStore
from tripglobe.editor.sections import make_day_section_id
from tripglobe.models.itinerary import ItineraryData, Location, Stop, TripRecord

logger = logging.getLogger(__name__)


class TripEditingSession:
    """
    State of one trip being edited: the flat stop list, the trip's date range,
    day titles and stop notes, and the drag engine for the active gesture.

    Nothing here is shared; a caller that persists the session reads
    `to_itinerary_data()` after each change it wants to keep.
    """

    def __init__(
        self,
        stops: Optional[List[Stop]] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        metadata: Optional[DayMetadataStore] = None,
        trip_id: Optional[str] = None,
        place_photos: Optional[Dict[str, str]] = None,
    ):
        self.trip_id = trip_id
        # destination -> looked-up photo url
        self.place_photos: Dict[str, str] = dict(place_photos or {})
        self.stops: List[Stop] = list(stops or [])
        self.start_date = start_date
        self.end_date = end_date
        self.metadata = metadata or DayMetadataStore()
        self.engine = ReorderSwapEngine()

    @classmethod
    def from_trip(
        cls,
        trip: TripRecord,
        metadata: Optional[DayMetadataStore] = None,
        place_photos: Optional[Dict[str, str]] = None,
    ) -> "TripEditingSession":
        return cls(
            stops=trip.itinerary,
            start_date=trip.start_date,
            end_date=trip.end_date,
            metadata=metadata,
            trip_id=trip.trip_id,
            place_photos=place_photos,
        )

    @classmethod
    def from_itinerary_data(cls, data: ItineraryData, trip_id: Optional[str] = None) -> "TripEditingSession":
        return cls(
            stops=data.stops,
            start_date=data.start_date,
            end_date=data.end_date,
            metadata=DayMetadataStore(data.dayTitles, data.stopNotes),
            trip_id=trip_id,
            place_photos=data.placePhotos,
        )

    # -------------------------
    # Views
    # -------------------------
    def days(self) -> List[DayBucket]:
        return build_complete_itinerary_days(
            {"itinerary": self.stops, "start_date": self.start_date, "end_date": self.end_date}
        )

    def overview(self) -> List[Dict[str, Any]]:
        return [
            {
                "dayKey": day_key,
                "label": format_date_label(day_key),
                "sectionId": make_day_section_id(day_key),
                "stopCount": len(stops),
                "title": self.metadata.get_day_title(day_key),
            }
            for day_key, stops in self.days()
        ]

    # -------------------------
    # Stop list edits
    # -------------------------
    def add_stop(self, day_key: str, place: Dict[str, Any]) -> Stop:
        """Append a stop for a place picked in the search flow to the end of `day_key`."""
        if parse_day_key(day_key) is None:
            raise ValueError(f"Invalid day key: {day_key!r}")

        location = place.get("location")
        stop = Stop(
            id=f"stop-{uuid.uuid4().hex[:12]}",
            date=day_key,
            title=place.get("name", ""),
            description=place.get("address") or "",
            destination=place.get("name", ""),
            startTime=place.get("startTime") or "",
            endTime=place.get("endTime") or "",
            imageUrl=place.get("photoUrl") or None,
            location=Location.model_validate(location) if location else None,
        )
        self.stops = self.stops + [stop]
        if stop.imageUrl and stop.destination:
            self.place_photos.setdefault(stop.destination, stop.imageUrl)
        if self.start_date and self.end_date and day_key not in generate_date_range(self.start_date, self.end_date):
            logger.warning(f"Stop {stop.id} added on {day_key}, outside the trip range")
        return stop

    def remove_stop(self, day_key: str, stop_id: str) -> bool:
        remaining = [s for s in self.stops if not (s.date == day_key and s.id == stop_id)]
        removed = len(remaining) != len(self.stops)
        self.stops = remaining
        if removed:
            self.metadata.remove_stop_note(stop_id)
        return removed

    # -------------------------
    # Drag and drop
    # -------------------------
    def begin_drag(self, day_key: str, index: int, stop_id: Optional[str]):
        self.engine.begin_drag(day_key, index, stop_id)

    def drop(self, target_day_key: str, target_index: int, target_stop_id: Optional[str] = None) -> List[Stop]:
        self.stops = self.engine.drop(self.stops, target_day_key, target_index, target_stop_id)
        return self.stops

    def end_drag(self):
        self.engine.end_drag()

    # -------------------------
    # Metadata
    # -------------------------
    def set_day_title(self, day_key: str, title: str):
        self.metadata.set_day_title(day_key, title)

    def set_stop_note(self, stop_id: str, note: str):
        self.metadata.set_stop_note(stop_id, note)

    def to_itinerary_data(self, **extra: Any) -> ItineraryData:
        return ItineraryData(
            stops=self.stops,
            start_date=self.start_date,
            end_date=self.end_date,
            placePhotos=dict(self.place_photos),
            **self.metadata.to_dict(),
            **extra,
        )
