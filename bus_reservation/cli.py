from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from .booking import book_seats, list_trips, search_trips, view_reservation
from .catalog import (
    TripCatalog,
    format_price,
    format_search_results,
    format_seat_status,
    format_trip_details,
    format_trip_table,
)
from .config import Settings, load_settings
from .errors import BookingError
from .menu import MenuSession

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Bus reservation command-line interface")
    parser.add_argument("--trips-file", type=Path, default=None, help="Optional JSON file listing trips to load")
    parser.add_argument("--log-level", default=None, help="Logging level (WARNING, INFO, DEBUG, ...)")
    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("menu", help="Run the interactive menu (default)")
    subparsers.add_parser("list", help="List every bus with its index")
    search_parser = subparsers.add_parser("search", help="Find buses running a route")
    search_parser.add_argument("source_city")
    search_parser.add_argument("destination")
    book_parser = subparsers.add_parser("book", help="Book seats on the bus at INDEX")
    book_parser.add_argument("index", type=int)
    book_parser.add_argument("seats", type=int, nargs="+", metavar="SEAT")
    view_parser = subparsers.add_parser("view", help="Show reservations for the bus at INDEX")
    view_parser.add_argument("index", type=int)
    return parser


def run_command(args: argparse.Namespace, catalog: TripCatalog, settings: Settings) -> None:
    currency = settings.currency_symbol
    if args.command in (None, "menu"):
        MenuSession(catalog, currency=currency).run()
    elif args.command == "list":
        print(format_trip_table(list_trips(catalog), currency=currency))
    elif args.command == "search":
        matches = search_trips(catalog, args.source_city, args.destination)
        print(format_search_results(args.source_city, args.destination, matches, currency=currency))
    elif args.command == "book":
        result = book_seats(catalog, args.index, args.seats)
        print(f"Booking successful! Total cost: {format_price(result.total_cost, currency)}")
    elif args.command == "view":
        reservation = view_reservation(catalog, args.index)
        print(format_trip_details(reservation.trip, currency=currency))
        print(format_seat_status(reservation.trip.bus_number, reservation.seats))
    else:  # pragma: no cover - argparse enforces valid commands
        raise ValueError(f"Unknown command: {args.command}")


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(trips_file=args.trips_file)
    except ValueError as exc:
        parser.error(f"invalid configuration: {exc}")
    log_level = args.log_level or settings.log_level
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    catalog = TripCatalog.from_seeds(settings.iter_trips())
    try:
        run_command(args, catalog, settings)
    except BookingError as exc:
        LOGGER.debug("Command %s failed: %s", args.command, exc.message)
        print(exc.message, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
