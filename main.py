import logging
from datetime import timedelta
from typing import List

from fastapi import FastAPI, HTTPException, Depends, Query, Request, Response
from fastapi.responses import JSONResponse
from fastapi.security import OAuth2PasswordRequestForm

from api.schemas import (
    # Hotels
    CreateHotelRequest, HotelResponse,
    # Reservations
    CreateReservationRequest, UpdateReservationStatusRequest,
    ReservationResponse, ReservationStatsResponse,
    # Auth
    Token, UserResponse
)

from api.dependencies import (
    get_current_active_user, get_current_admin_user, users_db, get_user
)
from infrastructure.config import Settings, get_settings
from infrastructure.logging_config import configure_logging
from infrastructure.security import verify_password, create_access_token, ACCESS_TOKEN_EXPIRE_MINUTES
from domain.auth import User
from domain.entities import Hotel, Reservation
from domain.enums import ReservationStatus
from domain.exceptions import BusinessRuleViolationError, ResourceNotFoundError

from application.services import ReservationService, HotelService
from infrastructure.repositories.in_memory_repositories import (
    InMemoryHotelRepository, InMemoryReservationRepository
)

configure_logging(get_settings().log_level)
logger = logging.getLogger("hotel_reservation.api")

app = FastAPI(
    title="Hotel Reservation API",
    description="Hotel catalog and reservation management",
    version="1.0.0"
)

# Initialize repositories
hotel_repo = InMemoryHotelRepository()
reservation_repo = InMemoryReservationRepository(hotel_repo)

# Dependency injection
def get_hotel_repository() -> InMemoryHotelRepository:
    return hotel_repo

def get_reservation_repository() -> InMemoryReservationRepository:
    return reservation_repo

def get_reservation_service(
    repository: InMemoryReservationRepository = Depends(get_reservation_repository),
    hotel_repository: InMemoryHotelRepository = Depends(get_hotel_repository),
    settings: Settings = Depends(get_settings)
) -> ReservationService:
    return ReservationService(repository, hotel_repository, settings.default_nightly_rate)

def get_hotel_service(
    repository: InMemoryHotelRepository = Depends(get_hotel_repository),
    reservation_repository: InMemoryReservationRepository = Depends(get_reservation_repository)
) -> HotelService:
    return HotelService(repository, reservation_repository)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})

# ============================================================================
# HEALTH & ENUM REFERENCE ENDPOINTS
# ============================================================================

@app.get("/api/health", tags=["Health"])
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "message": "API is running"}

@app.get("/api/enums/reservation-status", tags=["Enum Reference"])
async def get_reservation_statuses():
    """Get all ReservationStatus values"""
    return {
        "values": ReservationStatus.accepted_values(),
        "description": "Reservation status values: Pending, Confirmed, Cancelled"
    }

# ============================================================================
# AUTH ENDPOINTS
# ============================================================================

@app.post("/token", response_model=Token, tags=["Auth"])
async def login_for_access_token(form_data: OAuth2PasswordRequestForm = Depends()):
    user = get_user(users_db, form_data.username)
    if not user or not verify_password(form_data.password, user.hashed_password):
        raise HTTPException(
            status_code=401,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    access_token_expires = timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    access_token = create_access_token(
        data={"sub": user.username}, expires_delta=access_token_expires
    )
    return {"access_token": access_token, "token_type": "bearer"}

@app.get("/users/me", response_model=UserResponse, tags=["Auth"])
async def read_users_me(current_user: User = Depends(get_current_active_user)):
    return current_user

# ============================================================================
# HOTEL ENDPOINTS
# ============================================================================

@app.get("/api/hotels", response_model=List[HotelResponse], tags=["Hotels"])
async def get_all_hotels(service: HotelService = Depends(get_hotel_service)):
    """List every hotel"""
    hotels = await service.get_all_hotels()
    return [_hotel_to_response(h) for h in hotels]

@app.get("/api/hotels/{hotel_id}", response_model=HotelResponse, tags=["Hotels"])
async def get_hotel(hotel_id: int, service: HotelService = Depends(get_hotel_service)):
    """Get hotel by ID"""
    try:
        hotel = await service.get_hotel(hotel_id)
    except ResourceNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _hotel_to_response(hotel)

@app.post("/api/hotels", response_model=HotelResponse, status_code=201, tags=["Hotels"])
async def create_hotel(
    request: CreateHotelRequest,
    response: Response,
    service: HotelService = Depends(get_hotel_service),
    current_user: User = Depends(get_current_admin_user)
):
    """Register a hotel"""
    try:
        hotel = await service.create_hotel(
            name=request.name,
            city=request.city,
            address=request.address,
            phone=request.phone,
            nightly_rate=request.nightly_rate
        )
    except BusinessRuleViolationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    response.headers["Location"] = app.url_path_for("get_hotel", hotel_id=str(hotel.id))
    return _hotel_to_response(hotel)

@app.put("/api/hotels/{hotel_id}", response_model=HotelResponse, tags=["Hotels"])
async def update_hotel(
    hotel_id: int,
    request: CreateHotelRequest,
    service: HotelService = Depends(get_hotel_service),
    current_user: User = Depends(get_current_admin_user)
):
    """Update hotel details"""
    try:
        hotel = await service.update_hotel(
            hotel_id=hotel_id,
            name=request.name,
            city=request.city,
            address=request.address,
            phone=request.phone,
            nightly_rate=request.nightly_rate
        )
    except ResourceNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except BusinessRuleViolationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _hotel_to_response(hotel)

@app.delete("/api/hotels/{hotel_id}", status_code=204, tags=["Hotels"])
async def delete_hotel(
    hotel_id: int,
    service: HotelService = Depends(get_hotel_service),
    current_user: User = Depends(get_current_admin_user)
):
    """Delete hotel and its reservations"""
    if not await service.delete_hotel(hotel_id):
        raise HTTPException(status_code=404, detail="Hotel not found")
    return Response(status_code=204)

# ============================================================================
# RESERVATION ENDPOINTS
# ============================================================================
# Literal paths are declared before /{reservation_id}.

@app.get("/api/reservations", response_model=List[ReservationResponse], tags=["Reservations"])
async def get_reservations_by_email(
    email: str = Query(default=""),
    service: ReservationService = Depends(get_reservation_service)
):
    """Get reservations made with an email address"""
    if not email.strip():
        raise HTTPException(status_code=400, detail="The 'email' query parameter is required")
    reservations = await service.get_reservations_by_email(email)
    return [_reservation_to_response(r) for r in reservations]

@app.get("/api/reservations/pending", response_model=List[ReservationResponse], tags=["Reservations"])
async def get_pending_reservations(
    service: ReservationService = Depends(get_reservation_service),
    current_user: User = Depends(get_current_admin_user)
):
    """Get reservations awaiting confirmation"""
    reservations = await service.get_pending_reservations()
    return [_reservation_to_response(r) for r in reservations]

@app.get("/api/reservations/hotel/{hotel_id}", response_model=List[ReservationResponse], tags=["Reservations"])
async def get_reservations_by_hotel(
    hotel_id: int,
    service: ReservationService = Depends(get_reservation_service),
    current_user: User = Depends(get_current_admin_user)
):
    """Get all reservations of a hotel"""
    try:
        reservations = await service.get_reservations_by_hotel(hotel_id)
    except ResourceNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return [_reservation_to_response(r) for r in reservations]

@app.get("/api/reservations/hotel/{hotel_id}/stats", response_model=ReservationStatsResponse, tags=["Reservations"])
async def get_hotel_reservation_stats(
    hotel_id: int,
    service: ReservationService = Depends(get_reservation_service),
    current_user: User = Depends(get_current_admin_user)
):
    """Reservation count, revenue and average price of a hotel"""
    try:
        stats = await service.get_hotel_stats(hotel_id)
    except ResourceNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return ReservationStatsResponse(
        hotel_id=hotel_id,
        total_reservations=stats.total_reservations,
        total_revenue=stats.total_revenue,
        average_price=stats.average_price
    )

@app.get("/api/reservations/{reservation_id}", response_model=ReservationResponse, tags=["Reservations"])
async def get_reservation(
    reservation_id: int,
    service: ReservationService = Depends(get_reservation_service)
):
    """Get reservation by ID"""
    try:
        reservation = await service.get_reservation(reservation_id)
    except ResourceNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _reservation_to_response(reservation)

@app.post("/api/reservations", response_model=ReservationResponse, status_code=201, tags=["Reservations"])
async def create_reservation(
    request: CreateReservationRequest,
    response: Response,
    service: ReservationService = Depends(get_reservation_service)
):
    """Create new reservation"""
    try:
        reservation = await service.create_reservation(
            hotel_id=request.hotel_id,
            guest_name=request.guest_name,
            guest_email=request.guest_email,
            check_in_date=request.check_in_date,
            check_out_date=request.check_out_date,
            room_number=request.room_number,
            price_per_night=request.price_per_night
        )
    except ResourceNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except BusinessRuleViolationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    response.headers["Location"] = app.url_path_for(
        "get_reservation", reservation_id=str(reservation.id)
    )
    return _reservation_to_response(reservation)

@app.patch("/api/reservations/{reservation_id}/status", response_model=ReservationResponse, tags=["Reservations"])
async def update_reservation_status(
    reservation_id: int,
    request: UpdateReservationStatusRequest,
    service: ReservationService = Depends(get_reservation_service),
    current_user: User = Depends(get_current_admin_user)
):
    """Set reservation status (Pending, Confirmed or Cancelled)"""
    try:
        reservation = await service.update_status(reservation_id, request.status)
    except ResourceNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except BusinessRuleViolationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _reservation_to_response(reservation)

@app.delete("/api/reservations/{reservation_id}", status_code=204, tags=["Reservations"])
async def cancel_reservation(
    reservation_id: int,
    service: ReservationService = Depends(get_reservation_service)
):
    """Cancel reservation. The record is kept with status Cancelled."""
    try:
        cancelled = await service.cancel_reservation(reservation_id)
    except BusinessRuleViolationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not cancelled:
        raise HTTPException(status_code=404, detail="Reservation not found")
    return Response(status_code=204)

# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def _hotel_to_response(hotel: Hotel) -> HotelResponse:
    """Convert Hotel entity to HotelResponse"""
    return HotelResponse(
        id=hotel.id,
        name=hotel.name,
        city=hotel.city,
        address=hotel.address,
        phone=hotel.phone,
        nightly_rate=hotel.nightly_rate
    )

def _reservation_to_response(reservation: Reservation) -> ReservationResponse:
    """Convert Reservation entity to ReservationResponse"""
    return ReservationResponse(
        id=reservation.id,
        hotel_id=reservation.hotel_id,
        hotel_name=reservation.hotel_name,
        guest_name=reservation.guest_name,
        guest_email=reservation.guest_email,
        check_in_date=reservation.check_in_date,
        check_out_date=reservation.check_out_date,
        room_number=reservation.room_number,
        status=reservation.status.value,
        total_price=reservation.total_price,
        created_at=reservation.created_at,
        updated_at=reservation.updated_at
    )

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
