from tripglobe.models.itinerary import Stop
from tripglobe.services.photo_service import FALLBACK_IMAGE_URL, resolve_stop_photo

photos = {"Ben Thanh Market": "https://photos.test/ben-thanh.jpg"}


def test_looked_up_photo_wins():
    stop = Stop(id="a", destination="Ben Thanh Market", imageUrl="https://example.com/own.jpg")
    assert resolve_stop_photo(stop, photos) == "https://photos.test/ben-thanh.jpg"


def test_own_image_when_destination_not_looked_up():
    stop = Stop(id="a", destination="Cu Chi Tunnels", imageUrl="https://example.com/own.jpg")
    assert resolve_stop_photo(stop, photos) == "https://example.com/own.jpg"


def test_fallback_last():
    assert resolve_stop_photo(Stop(id="a", destination="Cu Chi Tunnels"), photos) == FALLBACK_IMAGE_URL
    assert resolve_stop_photo(Stop(id="b"), None) == FALLBACK_IMAGE_URL
