from __future__ import annotations

import logging
from typing import Callable, List

from ..booking.book import book_seats, check_seat_count, list_trips, search_trips, view_reservation
from ..catalog.catalog import TripCatalog
from ..catalog.formatting import (
    format_price,
    format_search_results,
    format_seat_status,
    format_trip_details,
    format_trip_table,
)
from ..errors import BookingError, InvalidSeatCount

LOGGER = logging.getLogger(__name__)

MENU_TEXT = "\n".join(
    [
        "",
        "Bus Reservation System",
        "1. View Buses",
        "2. Search Buses",
        "3. Book Seats",
        "4. View Reservations",
        "5. Exit",
    ]
)
EXIT_CHOICE = 5


class MenuSession:
    """Interactive numbered menu driving the booking operations.

    ``prompt`` and ``write`` default to :func:`input` and :func:`print`; tests
    pass scripted replacements. End of input ends the session.
    """

    def __init__(
        self,
        catalog: TripCatalog,
        *,
        currency: str = "$",
        prompt: Callable[[str], str] | None = None,
        write: Callable[[str], None] | None = None,
    ) -> None:
        self.catalog = catalog
        self.currency = currency
        self._prompt = prompt or input
        self._write = write or print

    def run(self) -> None:
        handlers = {
            1: self.show_trips,
            2: self.search,
            3: self.book,
            4: self.view,
        }
        try:
            while True:
                self._write(MENU_TEXT)
                choice = self._read_int("Enter your choice: ")
                if choice == EXIT_CHOICE:
                    break
                handler = handlers.get(choice)
                if handler is None:
                    self._write("Invalid choice! Please try again.")
                    continue
                try:
                    handler()
                except BookingError as exc:
                    LOGGER.debug("Menu operation aborted: %s", exc.message)
                    self._write(exc.message)
        except EOFError:
            LOGGER.debug("Input closed; leaving menu")
        self._write("Exiting...")

    def show_trips(self) -> None:
        self._write("Available Buses:")
        self._write(format_trip_table(list_trips(self.catalog), currency=self.currency))

    def search(self) -> None:
        source_city = self._prompt("Enter source city: ")
        destination = self._prompt("Enter destination: ")
        matches = search_trips(self.catalog, source_city, destination)
        self._write(format_search_results(source_city, destination, matches, currency=self.currency))

    def book(self) -> None:
        self.show_trips()
        position = self._read_int("Enter the bus index to book seats (starting from 1): ")
        reservation = view_reservation(self.catalog, position)
        self._write(format_seat_status(reservation.trip.bus_number, reservation.seats))

        count = self._read_int("Enter the number of seats you want to book: ")
        trip = self.catalog.get(position)
        check_seat_count(trip, count)
        if count > trip.total_seats - trip.count_booked():
            raise InvalidSeatCount(count, trip.total_seats)

        self._write("Enter the seat numbers (separated by spaces):")
        seats = self._read_ints(count)
        check = trip.check_seats(seats)
        while not check.ok:
            for rejection in check.rejected:
                self._write(rejection.describe())
            self._write(f"Enter {len(check.rejected)} replacement seat number(s):")
            seats = check.accepted + self._read_ints(len(check.rejected))
            check = trip.check_seats(seats)

        result = book_seats(self.catalog, position, seats)
        self._write(f"Booking successful! Total cost: {format_price(result.total_cost, self.currency)}")

    def view(self) -> None:
        self.show_trips()
        position = self._read_int("Enter the bus index to view reservations (starting from 1): ")
        reservation = view_reservation(self.catalog, position)
        self._write(format_trip_details(reservation.trip, currency=self.currency))
        self._write(format_seat_status(reservation.trip.bus_number, reservation.seats))

    def _read_int(self, message: str) -> int:
        while True:
            raw = self._prompt(message).strip()
            try:
                return int(raw)
            except ValueError:
                self._write("Please enter a whole number.")

    def _read_ints(self, count: int) -> List[int]:
        values: List[int] = []
        while len(values) < count:
            tokens = self._prompt("").split()
            try:
                parsed = [int(token) for token in tokens]
            except ValueError:
                self._write("Please enter whole numbers only.")
                continue
            values.extend(parsed)
        if len(values) > count:
            extra = " ".join(str(value) for value in values[count:])
            self._write(f"Ignoring extra seat numbers: {extra}")
        return values[:count]
