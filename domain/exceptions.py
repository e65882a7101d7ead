"""Domain Exceptions"""


class DomainError(Exception):
    """Base class for business errors raised by the domain and services"""
    pass


class ResourceNotFoundError(DomainError):
    """A referenced record does not exist"""
    pass


class BusinessRuleViolationError(DomainError):
    """A business rule rejected the operation"""
    pass


class HotelNotFound(ResourceNotFoundError):
    def __init__(self, hotel_id: int):
        self.hotel_id = hotel_id
        super().__init__(f"Hotel with ID {hotel_id} not found")


class ReservationNotFound(ResourceNotFoundError):
    def __init__(self, reservation_id: int):
        self.reservation_id = reservation_id
        super().__init__(f"Reservation with ID {reservation_id} not found")


class InvalidReservation(BusinessRuleViolationError):
    def __init__(self, reasons):
        self.reasons = list(reasons)
        super().__init__("Invalid reservation: " + "; ".join(self.reasons))


class InvalidStatusValue(BusinessRuleViolationError):
    def __init__(self, value, accepted):
        self.value = value
        self.accepted = list(accepted)
        super().__init__(
            f"Status '{value}' is not valid. Use: {', '.join(self.accepted)}"
        )


class AlreadyCancelled(BusinessRuleViolationError):
    def __init__(self, reservation_id: int):
        self.reservation_id = reservation_id
        super().__init__(f"Reservation {reservation_id} is already cancelled")


class InvalidHotel(BusinessRuleViolationError):
    def __init__(self, reasons):
        self.reasons = list(reasons)
        super().__init__("Invalid hotel: " + "; ".join(self.reasons))
