from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Tuple

from ..config.settings import TripSeed
from ..errors import InvalidPosition
from ..models.trip import Trip

LOGGER = logging.getLogger(__name__)


class TripCatalog:
    """Ordered, in-memory collection of trips addressed by 1-based position."""

    def __init__(self, trips: Iterable[Trip] | None = None) -> None:
        self._trips: List[Trip] = list(trips or [])

    @classmethod
    def from_seeds(cls, seeds: Iterable[TripSeed]) -> "TripCatalog":
        catalog = cls()
        for seed in seeds:
            catalog.add(seed.bus_number, seed.destination, seed.source_city, seed.total_seats, seed.ticket_price)
        LOGGER.info("Catalog seeded with %d trips", len(catalog))
        return catalog

    def __len__(self) -> int:
        return len(self._trips)

    def __iter__(self) -> Iterator[Trip]:
        return iter(self._trips)

    def add(
        self,
        bus_number: str,
        destination: str,
        source_city: str,
        total_seats: int,
        price: float,
    ) -> Trip:
        trip = Trip.create(bus_number, destination, source_city, total_seats, price)
        self._trips.append(trip)
        LOGGER.debug(
            "Added bus %s (%s -> %s, %d seats) at position %d",
            bus_number,
            source_city,
            destination,
            total_seats,
            len(self._trips),
        )
        return trip

    def list(self) -> List[Tuple[int, Trip]]:
        return list(enumerate(self._trips, start=1))

    def search(self, source_city: str, destination: str) -> List[Tuple[int, Trip]]:
        """Return trips whose route matches, ignoring case and outer whitespace."""

        matches = [
            (position, trip)
            for position, trip in enumerate(self._trips, start=1)
            if trip.matches_route(source_city, destination)
        ]
        LOGGER.debug("Search %r -> %r matched %d trips", source_city, destination, len(matches))
        return matches

    def get(self, position: int) -> Trip:
        if not 1 <= position <= len(self._trips):
            raise InvalidPosition(position, len(self._trips))
        return self._trips[position - 1]
