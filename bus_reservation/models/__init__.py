"""Data models."""

from .trip import SeatCheck, SeatRejection, Trip, TripSnapshot

__all__ = ["SeatCheck", "SeatRejection", "Trip", "TripSnapshot"]
