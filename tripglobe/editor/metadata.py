from typing import Any, Dict, Optional

EMPTY = ""


class DayMetadataStore:
    """Day titles and per-stop notes, kept apart from the stop list and merged at render time."""

    def __init__(self, day_titles: Optional[Dict[str, str]] = None, stop_notes: Optional[Dict[str, str]] = None):
        self.day_titles: Dict[str, str] = dict(day_titles or {})
        self.stop_notes: Dict[str, str] = dict(stop_notes or {})

    def set_day_title(self, day_key: str, title: str):
        self.day_titles[day_key] = title

    def get_day_title(self, day_key: str) -> str:
        return self.day_titles.get(day_key, EMPTY)

    def set_stop_note(self, stop_id: str, note: str):
        self.stop_notes[stop_id] = note

    def get_stop_note(self, stop_id: str) -> str:
        return self.stop_notes.get(stop_id, EMPTY)

    def remove_stop_note(self, stop_id: str):
        self.stop_notes.pop(stop_id, None)

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        return {"dayTitles": dict(self.day_titles), "stopNotes": dict(self.stop_notes)}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "DayMetadataStore":
        data = data or {}
        return cls(data.get("dayTitles"), data.get("stopNotes"))
