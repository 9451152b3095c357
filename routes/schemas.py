"""Request and response models for the HTTP API."""

from decimal import Decimal
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from shared.constants import MAX_AMOUNT, MAX_MONTHS


class ClassCreateRequest(BaseModel):
    """Request model for adding a class type."""
    name: str = Field(..., min_length=1, description="Class name, unique by convention")
    intensity: str = Field(..., description="LIGHT, MEDIUM or HARD")
    base_price: Decimal = Field(..., ge=0, le=MAX_AMOUNT, description="Monthly base price")


class ClassResponse(BaseModel):
    name: str
    intensity: str
    base_price: str


class TrainerCreateRequest(BaseModel):
    """Request model for adding a trainer of either employment kind."""
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    type: Literal["permanent", "external"]
    specialization: Optional[str] = Field(None, description="Class name, or null for none")
    monthly_salary: Optional[Decimal] = Field(None, ge=0, le=MAX_AMOUNT, description="Required for permanent trainers")
    company: Optional[str] = Field(None, description="Required for external trainers")
    hourly_rate: Optional[Decimal] = Field(None, ge=0, le=MAX_AMOUNT, description="Required for external trainers")


class TrainerResponse(BaseModel):
    id: int
    name: str
    email: str
    type: str
    specialization: Optional[str] = None
    monthly_salary: Optional[str] = None
    company: Optional[str] = None
    hourly_rate: Optional[str] = None


class SubscriptionCreateRequest(BaseModel):
    """Request model for creating (or quoting) a subscription."""
    subscriber_name: str = Field(..., min_length=1)
    class_name: str = Field(..., min_length=1)
    months: int = Field(..., ge=1, le=MAX_MONTHS)
    is_premium: bool = False


class QuoteRequest(BaseModel):
    class_name: str = Field(..., min_length=1)
    months: int = Field(..., ge=1, le=MAX_MONTHS)
    is_premium: bool = False


class SubscriptionResponse(BaseModel):
    id: int
    subscriber_name: str
    class_name: Optional[str] = None
    months: int
    is_premium: bool
    plan: str
    price: str


class QuoteResponse(BaseModel):
    class_name: Optional[str] = None
    base_price: str
    intensity_factor: str
    monthly: str
    months: int
    subtotal: str
    duration_factor: str
    discounted: str
    premium_factor: str
    total: str
    price: str


class TrainerBrief(BaseModel):
    id: int
    name: str
    type: str


class ReportResponse(BaseModel):
    """Trainers grouped by class name, groups ordered by name."""
    groups: Dict[str, List[TrainerBrief]]
