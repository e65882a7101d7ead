"""API Schemas - Request and Response DTOs"""
from pydantic import BaseModel, Field
from datetime import date, datetime
from decimal import Decimal
from uuid import UUID
from typing import Optional


# ============================================================================
# HOTEL SCHEMAS
# ============================================================================

class CreateHotelRequest(BaseModel):
    """Create or update hotel request DTO"""
    name: str
    city: str
    address: str
    phone: str = ""
    nightly_rate: Decimal = Field(default=Decimal("0"), ge=0)


class HotelResponse(BaseModel):
    """Hotel response DTO"""
    id: int
    name: str
    city: str
    address: str
    phone: str
    nightly_rate: Decimal


# ============================================================================
# RESERVATION SCHEMAS
# ============================================================================

class CreateReservationRequest(BaseModel):
    """Create reservation request DTO.

    total_price is never accepted from the client; price_per_night is an
    optional override of the rate used to compute it.
    """
    hotel_id: int = Field(gt=0)
    guest_name: str
    guest_email: str
    check_in_date: date
    check_out_date: date
    room_number: int = Field(gt=0)
    price_per_night: Optional[Decimal] = Field(default=None, ge=0)


class UpdateReservationStatusRequest(BaseModel):
    """Update reservation status request DTO"""
    status: str


class ReservationResponse(BaseModel):
    """Reservation response DTO"""
    id: int
    hotel_id: int
    hotel_name: Optional[str] = None
    guest_name: str
    guest_email: str
    check_in_date: date
    check_out_date: date
    room_number: int
    status: str
    total_price: Decimal
    created_at: datetime
    updated_at: datetime


class ReservationStatsResponse(BaseModel):
    """Per-hotel reservation statistics DTO"""
    hotel_id: int
    total_reservations: int
    total_revenue: Decimal
    average_price: Decimal


# ============================================================================
# AUTH SCHEMAS
# ============================================================================

class Token(BaseModel):
    """Token response DTO"""
    access_token: str
    token_type: str

class TokenData(BaseModel):
    """Token payload DTO"""
    username: Optional[str] = None

class UserResponse(BaseModel):
    """User response DTO"""
    user_id: UUID
    username: str
    email: Optional[str] = None
    full_name: Optional[str] = None
    disabled: bool
    is_admin: bool
