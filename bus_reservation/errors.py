"""Errors raised by catalog lookups and seat bookings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from .models.trip import SeatRejection


class BookingError(Exception):
    """Base class for recoverable booking errors with a user-facing message."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidPosition(BookingError):
    """Position outside the catalog bounds."""

    def __init__(self, position: int, catalog_size: int):
        self.position = position
        self.catalog_size = catalog_size
        super().__init__("Invalid bus index!")


class InvalidSeatCount(BookingError):
    """Requested seat count is non-positive or above the trip capacity."""

    def __init__(self, requested: int, total_seats: int):
        self.requested = requested
        self.total_seats = total_seats
        super().__init__("Invalid number of seats!")


class InvalidOrTakenSeat(BookingError):
    """One or more requested seats are out of range, taken or repeated."""

    def __init__(self, rejections: Sequence[SeatRejection]):
        self.rejections = list(rejections)
        super().__init__("\n".join(rejection.describe() for rejection in self.rejections))

    @property
    def seat_numbers(self) -> list[int]:
        return [rejection.seat_number for rejection in self.rejections]
