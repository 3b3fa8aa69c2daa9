# models/facility_schema.py
"""Facility Pydantic schemas (ambulance services, blood banks, hospitals)"""

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field


class Coordinate(BaseModel):
    """WGS84 point"""
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)


class Facility(BaseModel):
    """Fields shared by every facility shown on the locator pages"""
    id: str
    name: str
    address: str = ""
    phone: str = ""
    latitude: float
    longitude: float
    distance: float = 0.0          # km from the user, one decimal, never persisted
    city_match: bool = False
    source: Literal["static", "places"] = "static"


class AmbulanceService(Facility):
    available: bool = True
    operating_hours: str = "24 hours"
    service_type: Literal["government", "private", "ngo"] = "private"
    services: List[str] = Field(default_factory=list)
    emergency_response: bool = True
    city_area: Optional[str] = None


class BloodTypeInfo(BaseModel):
    available: bool
    quantity: int


class BloodBank(Facility):
    open: bool = True
    open_hours: str = ""
    blood_types: Dict[str, BloodTypeInfo] = Field(default_factory=dict)


class Hospital(Facility):
    open: bool = True
    open_hours: str = ""
    category: Literal["government", "private", "specialty"] = "private"
    services: List[str] = Field(default_factory=list)
    emergency_services: bool = False


class BloodTypeData(BaseModel):
    """Inventory row on the blood bank page"""
    blood_type: str
    available: bool
    quantity: int
    last_updated: str


class CityContext(BaseModel):
    """City resolver output"""
    city: Optional[str] = None
    administrative_area: Optional[str] = None
    source: Literal["geocoder", "region_override", "none"] = "none"


class FacilityCard(BaseModel):
    """Display extras attached to each ranked facility"""
    proximity: str
    directions_url: str


class AmbulanceSearchResponse(BaseModel):
    success: bool = True
    location: Optional[Coordinate] = None
    city: Optional[str] = None
    message: str
    results: List[AmbulanceService]
    cards: List[FacilityCard] = Field(default_factory=list)
    total_found: int


class BloodBankStats(BaseModel):
    available_blood_banks: int
    within_range_km: Optional[int] = None
    open_count: int


class BloodBankSearchResponse(BaseModel):
    success: bool = True
    location: Optional[Coordinate] = None
    city: Optional[str] = None
    message: str
    results: List[BloodBank]
    hospitals: List[Hospital] = Field(default_factory=list)
    cards: List[FacilityCard] = Field(default_factory=list)
    stats: BloodBankStats
    map: Dict = Field(default_factory=dict)
    total_found: int


class BloodEnquiryRequest(BaseModel):
    name: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    blood_type: Literal["A+", "A-", "B+", "B-", "AB+", "AB-", "O+", "O-"]
    purpose: Literal["requirement", "donation"] = "requirement"
    urgency: Literal["urgent", "normal"] = "normal"
    accept_terms: bool = False
