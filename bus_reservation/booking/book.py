from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from ..catalog.catalog import TripCatalog
from ..errors import InvalidOrTakenSeat, InvalidSeatCount
from ..models.trip import Trip, TripSnapshot

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class BookingResult:
    """Outcome of a successful booking; the cost is reported, never stored."""

    trip: TripSnapshot
    seat_numbers: Tuple[int, ...]
    total_cost: float


@dataclass(slots=True, frozen=True)
class Reservation:
    """A trip together with the status of every one of its seats."""

    trip: TripSnapshot
    seats: Tuple[Tuple[int, bool], ...]


def add_trip(
    catalog: TripCatalog,
    bus_number: str,
    destination: str,
    source_city: str,
    total_seats: int,
    price: float,
) -> Trip:
    return catalog.add(bus_number, destination, source_city, total_seats, price)


def list_trips(catalog: TripCatalog) -> List[TripSnapshot]:
    return [trip.snapshot(position) for position, trip in catalog.list()]


def search_trips(catalog: TripCatalog, source_city: str, destination: str) -> List[TripSnapshot]:
    """Trips running the given route, in catalog order; empty when none match."""

    return [trip.snapshot(position) for position, trip in catalog.search(source_city, destination)]


def check_seat_count(trip: Trip, requested: int) -> None:
    if requested <= 0 or requested > trip.total_seats:
        raise InvalidSeatCount(requested, trip.total_seats)


def book_seats(catalog: TripCatalog, position: int, seat_numbers: Sequence[int]) -> BookingResult:
    """Book a batch of seats on the trip at ``position``.

    The whole batch is validated before any seat is marked, so a rejected
    request leaves the inventory untouched.
    """

    trip = catalog.get(position)
    requested = list(seat_numbers)
    check_seat_count(trip, len(requested))
    try:
        total_cost = trip.book_seats(requested)
    except InvalidOrTakenSeat as exc:
        LOGGER.warning("Booking on bus %s rejected seats %s", trip.bus_number, exc.seat_numbers)
        raise
    LOGGER.info(
        "Booked seats %s on bus %s (position %d) for %.2f",
        requested,
        trip.bus_number,
        position,
        total_cost,
    )
    return BookingResult(trip=trip.snapshot(position), seat_numbers=tuple(requested), total_cost=total_cost)


def view_reservation(catalog: TripCatalog, position: int) -> Reservation:
    trip = catalog.get(position)
    return Reservation(trip=trip.snapshot(position), seats=tuple(trip.seat_status()))
