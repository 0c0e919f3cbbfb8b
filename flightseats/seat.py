"""Seats on a flight's seat map."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Seat:
    """A single seat, addressed by zero-based row and column."""

    row: int
    column: int
    taken: bool = False

    @property
    def label(self) -> str:
        """Column letter followed by the one-based row number, e.g. ``C12``."""
        return f"{chr(ord('A') + self.column)}{self.row + 1}"