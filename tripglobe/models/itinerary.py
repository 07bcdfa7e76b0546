from pydantic import BaseModel, ConfigDict, Field, AliasChoices, field_validator
from typing import Optional, Dict, Any, List


# ---------------------------
# Core Models
# ---------------------------

class Location(BaseModel):
    lat: Optional[float] = None
    lng: Optional[float] = None


class Stop(BaseModel):
    """One itinerary activity. `date` is a timezone-naive YYYY-MM-DD day key."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    date: Optional[str] = None
    title: str = ""
    description: str = ""
    destination: str = ""
    startTime: str = ""
    endTime: str = ""
    imageUrl: Optional[str] = Field(None, validation_alias=AliasChoices("imageUrl", "image_url"))
    location: Optional[Location] = None

    @field_validator("date", mode="before")
    @classmethod
    def normalize_date(cls, v):
        """Reduce dates and datetimes to their calendar day; unparseable values are kept as given."""
        from tripglobe.editor.dates import parse_day_key, to_day_key

        if not v:
            return v
        parsed = parse_day_key(v)
        return to_day_key(parsed) if parsed else v


class TripRecord(BaseModel):
    trip_id: Optional[str] = None
    user_id: Optional[str] = None
    origin: Optional[str] = None
    destination: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    travellers: int = 1
    status: str = "planned"
    budget: Optional[float] = None
    itinerary: List[Stop] = []


class ItineraryData(BaseModel):
    stops: List[Stop] = []
    dayTitles: Dict[str, str] = {}
    stopNotes: Dict[str, str] = {}
    placePhotos: Dict[str, str] = {}
    origin: Optional[str] = None
    destination: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    travelers: Optional[int] = None


class ItineraryRecord(BaseModel):
    trip_id: str
    itinerary_data: ItineraryData = ItineraryData()


# ---------------------------
# Request/Response Models
# ---------------------------

class CreateTripRequest(BaseModel):
    origin: Optional[str] = Field(None, max_length=100)
    destination: str = Field(..., min_length=2, max_length=100, description="Travel destination")
    start_date: Optional[str] = Field(None, pattern=r'^\d{4}-\d{2}-\d{2}$', description="Start date (YYYY-MM-DD)")
    end_date: Optional[str] = Field(None, pattern=r'^\d{4}-\d{2}-\d{2}$', description="End date (YYYY-MM-DD)")
    travellers: int = Field(1, ge=1, le=20)
    budget: Optional[float] = Field(None, ge=0)
    itinerary: List[Stop] = []


class TripResponse(BaseModel):
    ok: bool = True
    trip: TripRecord


class ListTripsResponse(BaseModel):
    ok: bool = True
    trips: List[TripRecord]


class DayBucketOut(BaseModel):
    dayKey: str
    label: str
    sectionId: str
    title: str = ""
    stops: List[Stop] = []


class DayOverviewItem(BaseModel):
    dayKey: str
    label: str
    sectionId: str
    stopCount: int
    title: str = ""


class TripDaysResponse(BaseModel):
    ok: bool = True
    tripId: Optional[str] = None
    duration: str
    days: List[DayBucketOut]
    overview: List[DayOverviewItem]


class SaveItineraryRequest(BaseModel):
    stops: List[Stop]
    dayTitles: Dict[str, str] = {}
    stopNotes: Dict[str, str] = {}
    placePhotos: Dict[str, str] = {}


class AddStopRequest(BaseModel):
    dayKey: str = Field(..., pattern=r'^\d{4}-\d{2}-\d{2}$')
    name: str = Field(..., min_length=1)
    address: Optional[str] = None
    location: Optional[Location] = None
    photoUrl: Optional[str] = None
    startTime: Optional[str] = None
    endTime: Optional[str] = None


class DragEndpoint(BaseModel):
    dayKey: str
    index: int = Field(..., ge=0)
    stopId: Optional[str] = None


class SwapStopsRequest(BaseModel):
    source: DragEndpoint
    target: DragEndpoint


class GenerateItineraryRequest(BaseModel):
    origin: Optional[str] = Field(None, max_length=100)
    destination: str = Field(..., min_length=2, max_length=100)
    start_date: str = Field(..., pattern=r'^\d{4}-\d{2}-\d{2}$')
    end_date: str = Field(..., pattern=r'^\d{4}-\d{2}-\d{2}$')
    travellers: int = Field(1, ge=1, le=20)
    interests: Optional[List[str]] = None


class GenerateItineraryResponse(BaseModel):
    status: str
    stops: List[Stop]
    days: List[DayBucketOut]
    processingTime: float
    metadata: Dict[str, Any]


class ErrorResponse(BaseModel):
    status: str = "error"
    message: str
    details: Optional[Dict[str, Any]] = None
