from __future__ import annotations

from typing import List, Sequence, Tuple

from ..models.trip import TripSnapshot

NO_MATCH_MESSAGE = "No buses found for the given source and destination."
TRIP_HEADERS = ["Index", "Bus Number", "Source City", "Destination", "Total Seats", "Booked Seats", "Ticket Price"]
SEAT_HEADERS = ["Seat No.", "Status"]


def format_price(amount: float, currency: str = "$") -> str:
    return f"{currency}{amount:.2f}"


def format_trip_table(trips: Sequence[TripSnapshot], *, currency: str = "$") -> str:
    """Return an ASCII table of trips keyed by their catalog position."""

    rows = [
        [
            str(trip.position),
            trip.bus_number,
            trip.source_city,
            trip.destination,
            str(trip.total_seats),
            str(trip.booked_seats),
            format_price(trip.ticket_price, currency),
        ]
        for trip in trips
    ]
    return _render_table(TRIP_HEADERS, rows)


def format_search_results(
    source_city: str,
    destination: str,
    trips: Sequence[TripSnapshot],
    *,
    currency: str = "$",
) -> str:
    title = f"Searching for buses from {source_city} to {destination}:"
    if not trips:
        return "\n".join([title, NO_MATCH_MESSAGE])
    return "\n".join([title, format_trip_table(trips, currency=currency)])


def format_seat_status(bus_number: str, seats: Sequence[Tuple[int, bool]]) -> str:
    rows = [[str(seat_number), "Booked" if booked else "Available"] for seat_number, booked in seats]
    return "\n".join([f"Seat Status for Bus {bus_number}:", _render_table(SEAT_HEADERS, rows)])


def format_trip_details(trip: TripSnapshot, *, currency: str = "$") -> str:
    return (
        f"Bus Number: {trip.bus_number}, Destination: {trip.destination}, "
        f"Source City: {trip.source_city}, Total Seats: {trip.total_seats}, "
        f"Booked Seats: {trip.booked_seats}, Ticket Price: {format_price(trip.ticket_price, currency)}"
    )


def _render_table(headers: Sequence[str], rows: List[List[str]]) -> str:
    widths = [len(header) for header in headers]
    for row in rows:
        for idx, value in enumerate(row):
            widths[idx] = max(widths[idx], len(value))

    header_line = " | ".join(header.ljust(widths[idx]) for idx, header in enumerate(headers))
    divider = "-+-".join("-" * width for width in widths)
    data_lines = [" | ".join(row[idx].ljust(widths[idx]) for idx in range(len(headers))) for row in rows]
    return "\n".join(line.rstrip() for line in [header_line, divider, *data_lines])
