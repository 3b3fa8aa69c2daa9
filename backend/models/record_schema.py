# models/record_schema.py
"""Pydantic schemas for the dashboard records (appointments, medicines, reports, activities)"""

from typing import List, Literal, Optional

from pydantic import AliasChoices, BaseModel, Field


# ============================================================
# Appointments
# ============================================================

AppointmentStatus = Literal["upcoming", "completed", "cancelled"]


class AppointmentCreate(BaseModel):
    appointment_date: str = Field(..., description="YYYY-MM-DD", pattern=r"^\d{4}-\d{2}-\d{2}$")
    doctor_name: str
    start_time: str = Field(..., description="HH:MM")
    end_time: str = Field(..., description="HH:MM")
    patient_name: str
    speciality: str
    status: AppointmentStatus = "upcoming"
    symptoms: Optional[str] = None
    type: Optional[str] = None
    notes: Optional[str] = None


class AppointmentUpdate(BaseModel):
    appointment_date: Optional[str] = Field(None, pattern=r"^\d{4}-\d{2}-\d{2}$")
    doctor_name: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    patient_name: Optional[str] = None
    speciality: Optional[str] = None
    status: Optional[AppointmentStatus] = None
    symptoms: Optional[str] = None
    type: Optional[str] = None
    notes: Optional[str] = None


class Appointment(AppointmentCreate):
    id: str


# ============================================================
# Pharmacy
# ============================================================

StockStatus = Literal["In Stock", "Low Stock", "Out of Stock"]


class MedicineCreate(BaseModel):
    name: str
    stock: int = Field(..., ge=0)
    category: str
    price: float = Field(..., ge=0)
    expiry_date: str = Field(..., description="YYYY-MM-DD")
    status: Optional[StockStatus] = None  # derived from stock when omitted


class MedicineUpdate(BaseModel):
    name: Optional[str] = None
    stock: Optional[int] = Field(None, ge=0)
    category: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    expiry_date: Optional[str] = None
    status: Optional[StockStatus] = None


class Medicine(BaseModel):
    id: str
    name: str
    stock: int
    category: str
    price: float
    expiry_date: str
    status: StockStatus


class StockUpdate(BaseModel):
    stock: int = Field(..., ge=0)


class OrderItem(BaseModel):
    medicine_id: str
    medicine_name: str
    quantity: int = Field(..., gt=0)
    price: float = Field(..., ge=0)


class MedicineOrderCreate(BaseModel):
    user_id: Optional[str] = None
    patient_name: str
    contact_number: str
    address: str
    items: List[OrderItem] = Field(..., min_length=1)
    total_amount: float = Field(..., ge=0)
    notes: Optional[str] = None
    prescription_required: bool = False
    prescription_url: Optional[str] = None


class MedicineOrder(MedicineOrderCreate):
    id: str
    status: str = "Pending"
    order_date: str


# ============================================================
# Reports
# ============================================================

class AIAnalysis(BaseModel):
    """Fixed-shape JSON returned by the report analyzer"""
    summary: str
    key_findings: List[str] = Field(
        default_factory=list, validation_alias=AliasChoices("keyFindings", "key_findings")
    )
    recommendations: List[str] = Field(default_factory=list)
    needs_review: bool = Field(False, validation_alias=AliasChoices("needsReview", "needs_review"))
    confidence: float = Field(0.0, ge=0, le=1)


class ReportUpload(BaseModel):
    title: str
    type: str
    content: str = Field(..., description="Text extracted from the uploaded file")
    file_url: str = ""


class Report(BaseModel):
    id: str
    title: str
    type: str
    content: str
    file_url: str
    status: str
    created_at: str
    updated_at: str
    ai_analysis: Optional[AIAnalysis] = None


# ============================================================
# Activities
# ============================================================

class ActivityMetadata(BaseModel):
    doctor_name: Optional[str] = None
    location: Optional[str] = None
    speciality: Optional[str] = None
    prescription: Optional[List[str]] = None
    test_results: Optional[List[str]] = None
    notes: Optional[str] = None


class ActivityCreate(BaseModel):
    type: str
    title: str
    description: str
    timestamp: str
    category: str
    status: str
    related_id: Optional[str] = None
    metadata: Optional[ActivityMetadata] = None


class Activity(ActivityCreate):
    id: str
