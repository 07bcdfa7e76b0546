import re

SECTION_PREFIX = "day-"

_UNSAFE = re.compile(r"[^A-Za-z0-9]")


def make_day_section_id(day_key: str) -> str:
    """DOM anchor id for a day section, e.g. '2024-12-22' -> 'day-2024-12-22'."""
    return SECTION_PREFIX + _UNSAFE.sub("-", day_key).lower()
