"""Booking operations exposed to the presentation layer."""

from .book import (
    BookingResult,
    Reservation,
    add_trip,
    book_seats,
    check_seat_count,
    list_trips,
    search_trips,
    view_reservation,
)

__all__ = [
    "BookingResult",
    "Reservation",
    "add_trip",
    "book_seats",
    "check_seat_count",
    "list_trips",
    "search_trips",
    "view_reservation",
]
