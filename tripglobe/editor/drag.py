"""
Drag-and-drop model for the day-by-day activity list.

A gesture is `begin_drag` followed by either `drop` or `end_drag`. Dropping
onto another stop swaps the two stops (and their days, when they differ).
Dropping onto a bare drop zone (no target stop) moves the dragged stop into
that day at the zone's index; the zone after a day's last stop is the
end-of-day position.

The engine works on the flat stop list and always returns a new list. The
stops handed in are never mutated: a stop whose day changes is replaced by a
copy carrying the new date. One engine serves one pointer; it is not safe to
share across concurrent gestures.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from tripglobe.models.itinerary import Stop

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DragState:
    day_key: str
    index: int
    stop_id: Optional[str]


def _with_date(stop: Stop, day_key: Optional[str]) -> Stop:
    if stop.date == day_key:
        return stop
    return stop.model_copy(update={"date": day_key})


def _day_positions(stops: Sequence[Stop], day_key: str) -> List[int]:
    return [pos for pos, stop in enumerate(stops) if stop.date == day_key]


def _find(stops: Sequence[Stop], stop_id: str) -> Optional[int]:
    for pos, stop in enumerate(stops):
        if stop.id == stop_id:
            return pos
    return None


def _locate(stops: Sequence[Stop], day_key: str, index: int, stop_id: Optional[str]) -> Optional[int]:
    """Flat-list position of a stop, by id first and by (day, index) otherwise."""
    if stop_id is not None:
        pos = _find(stops, stop_id)
        if pos is not None:
            return pos
    positions = _day_positions(stops, day_key)
    if 0 <= index < len(positions):
        return positions[index]
    return None


def _swap(stops: Sequence[Stop], first: int, second: int) -> List[Stop]:
    result = list(stops)
    a, b = stops[first], stops[second]
    result[first] = _with_date(b, a.date)
    result[second] = _with_date(a, b.date)
    return result


def _move(stops: Sequence[Stop], source: int, target_day_key: str, target_index: int) -> List[Stop]:
    moving = stops[source]
    remaining = list(stops[:source]) + list(stops[source + 1:])

    index = target_index
    if moving.date == target_day_key:
        source_index = sum(1 for stop in stops[:source] if stop.date == moving.date)
        # zone indexes count the dragged stop's old slot
        if source_index < target_index:
            index -= 1

    positions = _day_positions(remaining, target_day_key)
    index = max(0, min(index, len(positions)))
    if not positions:
        insert_at = len(remaining)
    elif index < len(positions):
        insert_at = positions[index]
    else:
        insert_at = positions[-1] + 1

    remaining.insert(insert_at, _with_date(moving, target_day_key))
    return remaining


class ReorderSwapEngine:
    """Idle/Dragging state machine driven by begin, drop and cancel events."""

    def __init__(self):
        self._drag: Optional[DragState] = None

    @property
    def drag_state(self) -> Optional[DragState]:
        return self._drag

    @property
    def is_dragging(self) -> bool:
        return self._drag is not None

    def begin_drag(self, day_key: str, index: int, stop_id: Optional[str]):
        if self._drag is not None:
            logger.warning(f"Discarding unfinished drag of stop {self._drag.stop_id}")
        self._drag = DragState(day_key, index, stop_id)

    def end_drag(self):
        self._drag = None

    def drop(
        self,
        stops: Sequence[Stop],
        target_day_key: str,
        target_index: int,
        target_stop_id: Optional[str] = None,
    ) -> List[Stop]:
        """
        Finish the current gesture and return the resulting flat stop list.

        Args:
            stops: Current flat stop list
            target_day_key: Day the stop was dropped on
            target_index: Position within that day (a stop's index, or a drop zone's)
            target_stop_id: Stop dropped onto, or None for a bare drop zone. An id
                no longer in the list is treated as a drop zone at target_index.

        Returns:
            A new list with the same stops; unchanged when idle, when dropped
            onto itself, or when the dragged stop can no longer be found.
        """
        drag, self._drag = self._drag, None
        if drag is None:
            logger.debug("Drop received with no drag in progress")
            return list(stops)

        if target_stop_id is not None and target_stop_id == drag.stop_id:
            return list(stops)

        source = _locate(stops, drag.day_key, drag.index, drag.stop_id)
        if source is None:
            logger.warning(f"Dragged stop {drag.stop_id} ({drag.day_key}#{drag.index}) not found; ignoring drop")
            return list(stops)

        if target_stop_id is not None:
            # targets match by id only
            target = _find(stops, target_stop_id)
            if target is not None:
                if target == source:
                    return list(stops)
                logger.info(f"Swapping stops {stops[source].id} and {stops[target].id}")
                return _swap(stops, source, target)
            logger.debug(f"Target stop {target_stop_id} not found; treating drop as a move")

        logger.info(f"Moving stop {stops[source].id} to {target_day_key}#{target_index}")
        return _move(stops, source, target_day_key, target_index)
