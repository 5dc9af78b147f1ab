"""Trip catalog and its table formatting."""

from .catalog import TripCatalog
from .formatting import (
    format_price,
    format_search_results,
    format_seat_status,
    format_trip_details,
    format_trip_table,
)

__all__ = [
    "TripCatalog",
    "format_price",
    "format_search_results",
    "format_seat_status",
    "format_trip_details",
    "format_trip_table",
]
