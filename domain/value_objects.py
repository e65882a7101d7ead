"""Domain Value Objects"""
from pydantic import BaseModel
from datetime import date
from decimal import Decimal


class DateRange(BaseModel):
    """Value Object for a stay, measured in whole days"""
    check_in: date
    check_out: date

    def nights(self) -> int:
        """Calculate number of nights"""
        return (self.check_out - self.check_in).days

    def is_ordered(self) -> bool:
        return self.check_out > self.check_in

    class Config:
        frozen = True


class ReservationStats(BaseModel):
    """Value Object summarising the reservations of one hotel"""
    total_reservations: int = 0
    total_revenue: Decimal = Decimal("0")
    average_price: Decimal = Decimal("0")

    @staticmethod
    def from_prices(prices) -> "ReservationStats":
        prices = list(prices)
        total = sum(prices, Decimal("0"))
        average = total / len(prices) if prices else Decimal("0")
        return ReservationStats(
            total_reservations=len(prices),
            total_revenue=total,
            average_price=average
        )

    class Config:
        frozen = True
