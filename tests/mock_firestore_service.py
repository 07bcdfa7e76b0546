"""
In-memory stand-in for FirestoreService, used by the API tests in place of a
real Firestore client.
"""

import copy
from typing import Any, Dict, List, Optional


class MockFirestoreService:
    """Same interface as tripglobe.services.firestore_service.FirestoreService"""

    def __init__(self):
        self.trips: Dict[str, Dict[str, Dict[str, Any]]] = {}
        self.itineraries: Dict[str, Dict[str, Dict[str, Any]]] = {}
        self._counter = 0

    def create_trip(self, uid: str, trip: Dict[str, Any]) -> str:
        self._counter += 1
        trip_id = f"trip_{self._counter:04d}"
        self.trips.setdefault(uid, {})[trip_id] = {**copy.deepcopy(trip), "trip_id": trip_id, "user_id": uid}
        return trip_id

    def get_trip(self, uid: str, trip_id: str) -> Optional[Dict[str, Any]]:
        trip = self.trips.get(uid, {}).get(trip_id)
        return copy.deepcopy(trip) if trip else None

    def list_trips(self, uid: str, limit: int = 20) -> List[Dict[str, Any]]:
        return [copy.deepcopy(t) for t in reversed(list(self.trips.get(uid, {}).values()))][:limit]

    def update_trip(self, uid: str, trip_id: str, fields: Dict[str, Any]) -> bool:
        trip = self.trips.get(uid, {}).get(trip_id)
        if trip is None:
            return False
        trip.update(copy.deepcopy(fields))
        return True

    def delete_trip(self, uid: str, trip_id: str) -> bool:
        if trip_id not in self.trips.get(uid, {}):
            return False
        del self.trips[uid][trip_id]
        self.itineraries.get(uid, {}).pop(trip_id, None)
        return True

    def save_itinerary_record(self, uid: str, trip_id: str, itinerary_data: Dict[str, Any]) -> str:
        self.itineraries.setdefault(uid, {})[trip_id] = {
            "trip_id": trip_id,
            "itinerary_data": copy.deepcopy(itinerary_data),
        }
        return trip_id

    def get_itinerary_record(self, uid: str, trip_id: str) -> Optional[Dict[str, Any]]:
        record = self.itineraries.get(uid, {}).get(trip_id)
        return copy.deepcopy(record) if record else None
