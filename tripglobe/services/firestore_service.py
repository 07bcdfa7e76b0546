"""
Firestore persistence for trips and their editable itineraries.

Layout:
- users/{uid}/trips/{tripId}        trip record (origin, destination, dates, flat stop list)
- users/{uid}/itineraries/{tripId}  itinerary record (stops, day titles, stop notes)

Only the latest version of an itinerary is stored; saving replaces it.
"""

import logging
import uuid
from typing import Optional, Dict, Any, List
from firebase_admin import firestore

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


class FirestoreService:
    def __init__(self, db: firestore.Client):
        self.db = db

    # -------------------------
    # Utility
    # -------------------------
    def _new_id(self, prefix: str) -> str:
        return f"{prefix}_{uuid.uuid4().hex[:10]}"

    def _trips(self, uid: str):
        return self.db.collection("users").document(uid).collection("trips")

    def _itineraries(self, uid: str):
        return self.db.collection("users").document(uid).collection("itineraries")

    # -------------------------
    # Trips
    # -------------------------
    def create_trip(self, uid: str, trip: Dict[str, Any]) -> str:
        trip_id = self._new_id("trip")

        trip_to_save = trip.copy()
        trip_to_save["trip_id"] = trip_id
        trip_to_save["user_id"] = uid
        trip_to_save["createdAt"] = firestore.SERVER_TIMESTAMP
        trip_to_save["updatedAt"] = firestore.SERVER_TIMESTAMP

        self._trips(uid).document(trip_id).set(trip_to_save)
        logger.info(f"Created trip {trip_id} for user {uid}")
        return trip_id

    def get_trip(self, uid: str, trip_id: str) -> Optional[Dict[str, Any]]:
        snap = self._trips(uid).document(trip_id).get()
        return snap.to_dict() if snap.exists else None

    def list_trips(self, uid: str, limit: int = 20) -> List[Dict[str, Any]]:
        col = self._trips(uid)
        snaps = col.order_by("updatedAt", direction=firestore.Query.DESCENDING).limit(limit).stream()
        return [s.to_dict() for s in snaps]

    def update_trip(self, uid: str, trip_id: str, fields: Dict[str, Any]) -> bool:
        doc_ref = self._trips(uid).document(trip_id)
        if not doc_ref.get().exists:
            return False
        doc_ref.set({**fields, "updatedAt": firestore.SERVER_TIMESTAMP}, merge=True)
        return True

    def delete_trip(self, uid: str, trip_id: str) -> bool:
        doc_ref = self._trips(uid).document(trip_id)
        if not doc_ref.get().exists:
            return False
        doc_ref.delete()
        self._itineraries(uid).document(trip_id).delete()
        logger.info(f"Deleted trip {trip_id} for user {uid}")
        return True

    # -------------------------
    # Itinerary records
    # -------------------------
    def save_itinerary_record(self, uid: str, trip_id: str, itinerary_data: Dict[str, Any]) -> str:
        doc_ref = self._itineraries(uid).document(trip_id)
        snapshot = doc_ref.get()
        created_at = snapshot.to_dict().get("createdAt") if snapshot.exists else firestore.SERVER_TIMESTAMP

        doc_ref.set(
            {
                "trip_id": trip_id,
                "itinerary_data": itinerary_data,
                "createdAt": created_at,
                "updatedAt": firestore.SERVER_TIMESTAMP,
            }
        )
        return trip_id

    def get_itinerary_record(self, uid: str, trip_id: str) -> Optional[Dict[str, Any]]:
        snap = self._itineraries(uid).document(trip_id).get()
        return snap.to_dict() if snap.exists else None
