from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from ..errors import InvalidOrTakenSeat

REASON_OUT_OF_RANGE = "out_of_range"
REASON_ALREADY_BOOKED = "already_booked"
REASON_DUPLICATE = "duplicate"


@dataclass(slots=True, frozen=True)
class SeatRejection:
    """A requested seat number that cannot be booked, and why."""

    seat_number: int
    reason: str

    def describe(self) -> str:
        if self.reason == REASON_DUPLICATE:
            return f"Seat number {self.seat_number} was requested more than once!"
        return f"Seat number {self.seat_number} is invalid or already booked!"


@dataclass(slots=True)
class SeatCheck:
    """Outcome of validating a seat request against a trip's inventory."""

    accepted: List[int] = field(default_factory=list)
    rejected: List[SeatRejection] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.rejected


@dataclass(slots=True, frozen=True)
class TripSnapshot:
    """Read-only view of a trip as shown to the user at a catalog position."""

    position: int
    bus_number: str
    source_city: str
    destination: str
    total_seats: int
    booked_seats: int
    ticket_price: float

    @property
    def available_seats(self) -> int:
        return self.total_seats - self.booked_seats


@dataclass(slots=True)
class Trip:
    """One scheduled bus service together with its seat inventory.

    ``seats[0]`` holds seat number 1. The list length is fixed when the trip
    is created and a seat only ever moves from available to booked.
    """

    bus_number: str
    destination: str
    source_city: str
    ticket_price: float
    seats: List[bool]
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    @classmethod
    def create(
        cls,
        bus_number: str,
        destination: str,
        source_city: str,
        total_seats: int,
        price: float,
    ) -> "Trip":
        if total_seats <= 0:
            raise ValueError(f"total_seats must be positive, got {total_seats}")
        if price < 0:
            raise ValueError(f"ticket price must be non-negative, got {price}")
        return cls(
            bus_number=bus_number,
            destination=destination,
            source_city=source_city,
            ticket_price=float(price),
            seats=[False] * total_seats,
        )

    @property
    def total_seats(self) -> int:
        return len(self.seats)

    def count_booked(self) -> int:
        return sum(1 for seat in self.seats if seat)

    def is_booked(self, seat_number: int) -> bool:
        return self.seats[seat_number - 1]

    def seat_status(self) -> List[Tuple[int, bool]]:
        return [(index, booked) for index, booked in enumerate(self.seats, start=1)]

    def matches_route(self, source_city: str, destination: str) -> bool:
        return _normalize(self.source_city) == _normalize(source_city) and _normalize(
            self.destination
        ) == _normalize(destination)

    def check_seats(self, seat_numbers: Iterable[int]) -> SeatCheck:
        """Validate a seat request without touching the inventory."""

        check = SeatCheck()
        seen: set[int] = set()
        for seat_number in seat_numbers:
            if not 1 <= seat_number <= len(self.seats):
                check.rejected.append(SeatRejection(seat_number, REASON_OUT_OF_RANGE))
            elif self.seats[seat_number - 1]:
                check.rejected.append(SeatRejection(seat_number, REASON_ALREADY_BOOKED))
            elif seat_number in seen:
                check.rejected.append(SeatRejection(seat_number, REASON_DUPLICATE))
            else:
                seen.add(seat_number)
                check.accepted.append(seat_number)
        return check

    def book_seats(self, seat_numbers: Iterable[int]) -> float:
        """Book every requested seat or none of them; return the total cost."""

        requested = list(seat_numbers)
        with self._lock:
            check = self.check_seats(requested)
            if not check.ok:
                raise InvalidOrTakenSeat(check.rejected)
            for seat_number in check.accepted:
                self.seats[seat_number - 1] = True
        return len(requested) * self.ticket_price

    def snapshot(self, position: int) -> TripSnapshot:
        return TripSnapshot(
            position=position,
            bus_number=self.bus_number,
            source_city=self.source_city,
            destination=self.destination,
            total_seats=self.total_seats,
            booked_seats=self.count_booked(),
            ticket_price=self.ticket_price,
        )


def _normalize(value: str) -> str:
    return value.strip().lower()
