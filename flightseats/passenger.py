"""Passengers booked on a flight."""

from __future__ import annotations

import itertools
from dataclasses import dataclass

from .seat import Seat

FIRST_PASSENGER_ID = 4000

_ids = itertools.count(FIRST_PASSENGER_ID)


def next_passenger_id() -> int:
    """Hand out the next passenger id from the shared counter."""
    return next(_ids)


@dataclass
class Passenger:
    """A passenger and the seat they occupy.

    Every new passenger advances the shared id counter; an explicitly given
    id is kept, otherwise the counter's value is used.
    """

    first_name: str
    last_name: str
    phone: str
    seat: Seat
    id: int | None = None

    def __post_init__(self) -> None:
        assigned = next_passenger_id()
        if self.id is None:
            self.id = assigned

    def format_row(self) -> str:
        """Fixed-width line used in listings and saved files."""
        return (
            f"{self.first_name:<20}"
            f"{self.last_name:<20}"
            f"{self.phone:<20}"
            f"{self.seat.label:<8}"
            f"{self.id:<8}"
        )