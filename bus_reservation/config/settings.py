from __future__ import annotations

from dataclasses import dataclass, field
import json
import os
from pathlib import Path
from typing import Any, Iterable, List

from dotenv import load_dotenv

load_dotenv()

_REQUIRED_TRIP_KEYS = ("bus_number", "destination", "source_city", "total_seats", "ticket_price")


def _resolve_path(path_str: str | None) -> Path | None:
    if not path_str:
        return None
    candidate = Path(path_str).expanduser().resolve()
    return candidate if candidate.exists() else None


@dataclass(slots=True, frozen=True)
class TripSeed:
    """One trip to load into the catalog at startup."""

    bus_number: str
    destination: str
    source_city: str
    total_seats: int
    ticket_price: float

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "TripSeed":
        if not isinstance(payload, dict):
            raise ValueError(f"Trip entry must be an object, got {type(payload).__name__}")
        missing = [key for key in _REQUIRED_TRIP_KEYS if key not in payload]
        if missing:
            raise ValueError(f"Trip entry is missing keys: {', '.join(missing)}")
        total_seats = int(payload["total_seats"])
        ticket_price = float(payload["ticket_price"])
        if total_seats <= 0:
            raise ValueError(f"Trip {payload['bus_number']}: total_seats must be positive, got {total_seats}")
        if ticket_price < 0:
            raise ValueError(f"Trip {payload['bus_number']}: ticket_price must be non-negative, got {ticket_price}")
        return cls(
            bus_number=str(payload["bus_number"]),
            destination=str(payload["destination"]),
            source_city=str(payload["source_city"]),
            total_seats=total_seats,
            ticket_price=ticket_price,
        )


DEFAULT_TRIPS: tuple[TripSeed, ...] = (
    TripSeed("123A", "New York", "Boston", 50, 30.0),
    TripSeed("456B", "Los Angeles", "San Francisco", 40, 25.0),
    TripSeed("789C", "Chicago", "Detroit", 30, 20.0),
    TripSeed("012D", "New York", "Boston", 50, 28.0),
)


@dataclass(slots=True)
class Settings:
    """Aggregated runtime configuration."""

    currency_symbol: str = "$"
    log_level: str = "WARNING"
    trips_file: Path | None = None
    trip_seeds: List[TripSeed] = field(default_factory=list)

    def iter_trips(self) -> Iterable[TripSeed]:
        return self.trip_seeds or DEFAULT_TRIPS


def _load_trip_seeds(path: Path | None) -> List[TripSeed]:
    if not path:
        return []
    if not path.is_file():
        raise ValueError(f"Trips file not found: {path}")
    with path.open("r", encoding="utf-8") as handle:
        payload = json.load(handle)
    if not isinstance(payload, list):
        raise ValueError("Trips JSON must be a list of trip objects")
    return [TripSeed.from_dict(item) for item in payload]


def load_settings(trips_file: str | Path | None = None) -> Settings:
    """Load configuration from environment variables and an optional trips file."""

    resolved_trips_path = (
        Path(trips_file).expanduser().resolve() if trips_file else _resolve_path(os.getenv("BUS_TRIPS_FILE"))
    )

    return Settings(
        currency_symbol=os.getenv("CURRENCY_SYMBOL", "$"),
        log_level=os.getenv("LOG_LEVEL", "WARNING") or "WARNING",
        trips_file=resolved_trips_path,
        trip_seeds=_load_trip_seeds(resolved_trips_path),
    )
