import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from tripglobe.dependencies import get_firestore_client, get_current_uid, verify_id_token_dependency
from tripglobe.editor import TripEditingSession, format_date_label, make_day_section_id, trip_duration_text
from tripglobe.editor.grouping import DayBucket, build_itinerary_days, flatten_days
from tripglobe.editor.metadata import DayMetadataStore
from tripglobe.models.itinerary import (
    AddStopRequest,
    CreateTripRequest,
    DayBucketOut,
    ErrorResponse,
    ListTripsResponse,
    SaveItineraryRequest,
    SwapStopsRequest,
    TripDaysResponse,
    TripRecord,
    TripResponse,
)
from tripglobe.services.firestore_service import FirestoreService
from tripglobe.services.photo_service import resolve_stop_photo

logger = logging.getLogger(__name__)
router = APIRouter(tags=["trips"])


def get_firestore_service() -> FirestoreService:
    """Dependency to get FirestoreService instance"""
    return FirestoreService(get_firestore_client())


def _load_trip(fs: FirestoreService, uid: str, trip_id: str) -> TripRecord:
    data = fs.get_trip(uid, trip_id)
    if not data:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"status": "error", "message": f"Trip {trip_id} not found"}
        )
    return TripRecord.model_validate(data)


def _load_session(fs: FirestoreService, uid: str, trip: TripRecord) -> TripEditingSession:
    """Editing session for a trip, restoring titles and notes from its saved itinerary record"""
    record = fs.get_itinerary_record(uid, trip.trip_id)
    data = (record or {}).get("itinerary_data") or {}
    return TripEditingSession.from_trip(
        trip,
        metadata=DayMetadataStore.from_dict(data),
        place_photos=data.get("placePhotos"),
    )


def serialize_days(
    days: List[DayBucket],
    metadata: DayMetadataStore,
    photos: Optional[Dict[str, str]] = None,
) -> List[DayBucketOut]:
    return [
        DayBucketOut(
            dayKey=day_key,
            label=format_date_label(day_key),
            sectionId=make_day_section_id(day_key),
            title=metadata.get_day_title(day_key),
            stops=[stop.model_copy(update={"imageUrl": resolve_stop_photo(stop, photos)}) for stop in stops],
        )
        for day_key, stops in days
    ]


def _days_response(session: TripEditingSession, trip: TripRecord) -> TripDaysResponse:
    return TripDaysResponse(
        tripId=trip.trip_id,
        duration=trip_duration_text(trip.start_date, trip.end_date),
        days=serialize_days(session.days(), session.metadata, session.place_photos),
        overview=session.overview(),
    )


def _persist_session(fs: FirestoreService, uid: str, trip: TripRecord, session: TripEditingSession):
    stops = [stop.model_dump() for stop in session.stops]
    fs.update_trip(uid, trip.trip_id, {"itinerary": stops})
    data = session.to_itinerary_data(
        origin=trip.origin,
        destination=trip.destination,
        travelers=trip.travellers,
    )
    fs.save_itinerary_record(uid, trip.trip_id, data.model_dump())


@router.post("/trips", response_model=TripResponse, status_code=status.HTTP_201_CREATED)
def create_trip(
    body: CreateTripRequest,
    fs: FirestoreService = Depends(get_firestore_service),
    decoded_token: Dict[str, Any] = Depends(verify_id_token_dependency)
):
    uid = get_current_uid(decoded_token)
    if body.start_date and body.end_date and body.start_date > body.end_date:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"status": "error", "message": "start_date must not be after end_date"}
        )

    trip = TripRecord(user_id=uid, **body.model_dump())
    trip_id = fs.create_trip(uid, trip.model_dump(exclude={"trip_id"}))
    trip.trip_id = trip_id
    return TripResponse(trip=trip)


@router.get("/trips", response_model=ListTripsResponse)
def list_trips(
    fs: FirestoreService = Depends(get_firestore_service),
    decoded_token: Dict[str, Any] = Depends(verify_id_token_dependency)
):
    uid = get_current_uid(decoded_token)
    return ListTripsResponse(trips=[TripRecord.model_validate(t) for t in fs.list_trips(uid)])


@router.get("/trips/{trip_id}", response_model=TripResponse)
def get_trip(
    trip_id: str,
    fs: FirestoreService = Depends(get_firestore_service),
    decoded_token: Dict[str, Any] = Depends(verify_id_token_dependency)
):
    uid = get_current_uid(decoded_token)
    return TripResponse(trip=_load_trip(fs, uid, trip_id))


@router.delete("/trips/{trip_id}")
def delete_trip(
    trip_id: str,
    fs: FirestoreService = Depends(get_firestore_service),
    decoded_token: Dict[str, Any] = Depends(verify_id_token_dependency)
):
    uid = get_current_uid(decoded_token)
    if not fs.delete_trip(uid, trip_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"status": "error", "message": f"Trip {trip_id} not found"}
        )
    return {"ok": True, "tripId": trip_id}


@router.get("/trips/{trip_id}/days", response_model=TripDaysResponse)
def get_trip_days(
    trip_id: str,
    fs: FirestoreService = Depends(get_firestore_service),
    decoded_token: Dict[str, Any] = Depends(verify_id_token_dependency)
):
    """Day-by-day view of a trip: every day of its range, with titles and stop photos"""
    uid = get_current_uid(decoded_token)
    trip = _load_trip(fs, uid, trip_id)
    return _days_response(_load_session(fs, uid, trip), trip)


@router.put("/trips/{trip_id}/itinerary", response_model=TripDaysResponse)
def save_trip_itinerary(
    trip_id: str,
    body: SaveItineraryRequest,
    fs: FirestoreService = Depends(get_firestore_service),
    decoded_token: Dict[str, Any] = Depends(verify_id_token_dependency)
):
    """Replace the trip's stop list, day titles and stop notes with the editor's current state"""
    uid = get_current_uid(decoded_token)
    trip = _load_trip(fs, uid, trip_id)

    session = TripEditingSession(
        stops=body.stops,
        start_date=trip.start_date,
        end_date=trip.end_date,
        metadata=DayMetadataStore(body.dayTitles, body.stopNotes),
        trip_id=trip_id,
        place_photos=body.placePhotos,
    )
    _persist_session(fs, uid, trip, session)
    trip.itinerary = session.stops
    logger.info(f"Saved itinerary for trip {trip_id}: {len(session.stops)} stops")
    return _days_response(session, trip)


@router.post("/trips/{trip_id}/swap", response_model=TripDaysResponse, responses={
    404: {"model": ErrorResponse, "description": "Trip not found"},
})
def swap_trip_stops(
    trip_id: str,
    body: SwapStopsRequest,
    fs: FirestoreService = Depends(get_firestore_service),
    decoded_token: Dict[str, Any] = Depends(verify_id_token_dependency)
):
    """Apply one completed drag-and-drop gesture to the stored trip"""
    uid = get_current_uid(decoded_token)
    trip = _load_trip(fs, uid, trip_id)
    session = _load_session(fs, uid, trip)

    session.begin_drag(body.source.dayKey, body.source.index, body.source.stopId)
    session.drop(body.target.dayKey, body.target.index, body.target.stopId)

    _persist_session(fs, uid, trip, session)
    trip.itinerary = session.stops
    return _days_response(session, trip)


@router.post("/trips/{trip_id}/stops", response_model=TripDaysResponse, status_code=status.HTTP_201_CREATED)
def add_trip_stop(
    trip_id: str,
    body: AddStopRequest,
    fs: FirestoreService = Depends(get_firestore_service),
    decoded_token: Dict[str, Any] = Depends(verify_id_token_dependency)
):
    """Add a place picked from search to the end of a day"""
    uid = get_current_uid(decoded_token)
    trip = _load_trip(fs, uid, trip_id)
    session = _load_session(fs, uid, trip)

    try:
        session.add_stop(body.dayKey, body.model_dump(exclude={"dayKey"}, exclude_none=True))
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"status": "error", "message": str(e)}
        )

    _persist_session(fs, uid, trip, session)
    trip.itinerary = session.stops
    return _days_response(session, trip)


@router.delete("/trips/{trip_id}/days/{day_key}/stops/{stop_id}", response_model=TripDaysResponse)
def remove_trip_stop(
    trip_id: str,
    day_key: str,
    stop_id: str,
    fs: FirestoreService = Depends(get_firestore_service),
    decoded_token: Dict[str, Any] = Depends(verify_id_token_dependency)
):
    uid = get_current_uid(decoded_token)
    trip = _load_trip(fs, uid, trip_id)
    session = _load_session(fs, uid, trip)

    if not session.remove_stop(day_key, stop_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"status": "error", "message": f"Stop {stop_id} not found on {day_key}"}
        )

    _persist_session(fs, uid, trip, session)
    trip.itinerary = session.stops
    return _days_response(session, trip)


@router.get("/preview/days", response_model=TripDaysResponse)
def preview_days():
    """Demo itinerary for the editor when no trip is selected"""
    session = TripEditingSession(stops=flatten_days(build_itinerary_days(None)))
    return _days_response(session, TripRecord())
