from typing import Mapping, Optional

from tripglobe.models.itinerary import Stop

FALLBACK_IMAGE_URL = (
    "https://images.unsplash.com/photo-1500530855697-b586d89ba3ee?auto=format&fit=crop&w=800&q=60"
)


def resolve_stop_photo(stop: Stop, photos: Optional[Mapping[str, str]] = None) -> str:
    """Photo for a stop: looked-up photo for its destination, then its own imageUrl, then the fallback."""
    looked_up = (photos or {}).get(stop.destination) if stop.destination else None
    return looked_up or stop.imageUrl or FALLBACK_IMAGE_URL
