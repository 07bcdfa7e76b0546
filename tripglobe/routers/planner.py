from fastapi import APIRouter, Depends, HTTPException, Response, status
from typing import Any, Dict, Optional
import logging
from datetime import datetime, timezone

from tripglobe.dependencies import optional_verify_id_token_dependency
from tripglobe.editor import TripEditingSession
from tripglobe.models.itinerary import ErrorResponse, GenerateItineraryRequest, GenerateItineraryResponse
from tripglobe.routers.trips import serialize_days
from tripglobe.services.itinerary_service import ItineraryService, get_itinerary_service

logger = logging.getLogger(__name__)
router = APIRouter(tags=["planner"])


@router.post("/itinerary/generate", response_model=GenerateItineraryResponse, responses={
    400: {"model": ErrorResponse, "description": "Bad Request"},
    502: {"model": ErrorResponse, "description": "AI service unavailable"},
    500: {"model": ErrorResponse, "description": "Internal Server Error"}
})
async def generate_itinerary(
    request: GenerateItineraryRequest,
    response: Response,
    itinerary_service: ItineraryService = Depends(get_itinerary_service),
    decoded_token: Optional[Dict[str, Any]] = Depends(optional_verify_id_token_dependency)
):
    """
    Generate a day-by-day itinerary for a trip.

    The stops come back flat and grouped into every day of the trip so the
    editor can show them directly; saving is a separate call.
    """
    start_time = datetime.now()
    user_id = decoded_token.get("uid") if decoded_token else None

    try:
        result = await itinerary_service.generate_itinerary(
            destination=request.destination,
            start_date=request.start_date,
            end_date=request.end_date,
            origin=request.origin,
            travellers=request.travellers,
            interests=request.interests,
        )
    except ValueError as e:
        logger.error(f"Validation error in itinerary generation: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"status": "error", "message": f"Invalid request: {str(e)}"}
        )
    except RuntimeError as e:
        logger.error(f"Runtime error in itinerary generation: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={"status": "error", "message": "AI service temporarily unavailable"}
        )
    except Exception as e:
        logger.error(f"Unexpected error in itinerary generation: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"status": "error", "message": "Internal server error"}
        )

    session = TripEditingSession(stops=result["stops"], start_date=request.start_date, end_date=request.end_date)
    processing_time = (datetime.now() - start_time).total_seconds()
    logger.info(f"Generated {len(session.stops)} stops in {processing_time:.2f}s")

    response.headers["X-Processing-Time"] = str(processing_time)
    return GenerateItineraryResponse(
        status="success",
        stops=session.stops,
        days=serialize_days(session.days(), session.metadata, session.place_photos),
        processingTime=processing_time,
        metadata={
            "userId": user_id,
            "title": result["title"],
            "generatedAt": result["generatedAt"],
            "fallbackUsed": result["fallbackUsed"],
        }
    )
