from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import List, Optional
import logging

from tripglobe.editor.filters import filter_flights, filter_hotels, unique_airlines
from tripglobe.services.serpapi_service import SerpAPIService, get_serpapi_service

logger = logging.getLogger(__name__)
router = APIRouter(tags=["offers"])


@router.get("/flights")
def search_flights(
    origin: str = Query(..., min_length=3, max_length=3),
    destination: str = Query(..., min_length=3, max_length=3),
    outbound_date: str = Query(..., pattern=r'^\d{4}-\d{2}-\d{2}$'),
    return_date: Optional[str] = Query(None, pattern=r'^\d{4}-\d{2}-\d{2}$'),
    adults: int = Query(1, ge=1, le=9),
    departure_from: int = Query(0, ge=0, le=1439),
    departure_to: int = Query(1439, ge=0, le=1439),
    max_duration: int = Query(2000, ge=0),
    airlines: Optional[List[str]] = Query(None),
    serpapi: SerpAPIService = Depends(get_serpapi_service)
):
    """Flight search proxy; results are filtered by departure time, duration and airline"""
    try:
        results = serpapi.search_flights(origin, destination, outbound_date, return_date, adults)
    except RuntimeError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={"status": "error", "message": str(e)}
        )

    flights = filter_flights(
        results,
        departure_window=(departure_from, departure_to),
        duration_range=(0, max_duration),
        airlines=airlines,
    )
    logger.info(f"Flights {origin}->{destination}: {len(flights)} after filtering")
    return {"flights": flights, "airlines": unique_airlines(results)}


@router.get("/hotels")
def search_hotels(
    destination: str = Query(..., min_length=2),
    checkIn: str = Query(..., pattern=r'^\d{4}-\d{2}-\d{2}$'),
    checkOut: str = Query(..., pattern=r'^\d{4}-\d{2}-\d{2}$'),
    guests: int = Query(2, ge=1, le=20),
    currency: str = Query("USD", min_length=3, max_length=3),
    min_price: float = Query(0, ge=0),
    max_price: float = Query(1000, ge=0),
    stars: List[int] = Query([5, 4, 3]),
    serpapi: SerpAPIService = Depends(get_serpapi_service)
):
    """Hotel search proxy; properties are filtered by nightly price and star rating"""
    try:
        results = serpapi.search_hotels(destination, checkIn, checkOut, guests, currency)
    except RuntimeError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={"status": "error", "message": str(e)}
        )

    properties = results.get("properties") or []
    filtered = filter_hotels(properties, price_range=(min_price, max_price), stars=stars)
    return {"properties": filtered, "total": len(properties)}
