"""A flight: its seat map and passenger list."""

from __future__ import annotations

import re
import string
from os import PathLike
from pathlib import Path

from .passenger import Passenger
from .seat import Seat

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class FlightError(Exception):
    """Base class for errors raised by flight operations."""


class InvalidSeatError(FlightError, ValueError):
    """A seat label is malformed or outside the seat map."""


class SeatTakenError(FlightError):
    """The requested seat is already occupied."""


class InvalidPhoneError(FlightError, ValueError):
    """A phone number does not hold exactly ten digits."""


class PassengerNotFoundError(FlightError, LookupError):
    """No passenger carries the given id."""


def _leading_int(text: str) -> int | None:
    """Integer at the start of ``text`` after optional whitespace, or None."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def _ascii_upper(char: str) -> str:
    return char.upper() if "a" <= char <= "z" else char


def normalize_phone(phone: str) -> str:
    """Keep the digits of ``phone`` and format them as ``ddd-ddd-dddd``."""
    digits = "".join(char for char in phone if char in string.digits)
    if len(digits) != 10:
        raise InvalidPhoneError("Invalid input. Please enter exactly 10 digits")
    return f"{digits[:3]}-{digits[3:6]}-{digits[6:]}"


def parse_seat_label(label: str, rows: int, columns: int) -> tuple[int, int]:
    """Turn a label such as ``A4`` into a zero-based ``(row, column)``."""
    if len(label) < 2:
        raise InvalidSeatError("Invalid seat format.")
    column = ord(_ascii_upper(label[0])) - ord("A")
    row = _leading_int(label[1:])
    if row is None:
        raise InvalidSeatError("Invalid row number.")
    row -= 1
    if not (0 <= row < rows and 0 <= column < columns):
        raise InvalidSeatError("Invalid seat position.")
    return row, column


class Flight:
    """A flight with a rectangular seat map and the passengers booked on it."""

    def __init__(self, flight_number: str, rows: int, columns: int) -> None:
        if rows < 0 or columns < 0:
            raise ValueError("rows and columns must not be negative")
        self.flight_number = flight_number
        self.rows = rows
        self.columns = columns
        self._seats = [[Seat(row, column) for column in range(columns)] for row in range(rows)]
        self._passengers: list[Passenger] = []

    @property
    def passengers(self) -> tuple[Passenger, ...]:
        """Passengers in booking order."""
        return tuple(self._passengers)

    def seat_at(self, row: int, column: int) -> Seat:
        """The seat at a zero-based row and column."""
        if not (0 <= row < self.rows and 0 <= column < self.columns):
            raise InvalidSeatError("Invalid seat position.")
        return self._seats[row][column]

    def _grouped(self, cells) -> str:
        parts = []
        for index, cell in enumerate(cells):
            parts.append(cell)
            if (index + 1) % 3 == 0 and index != self.columns - 1:
                parts.append("  ")
        return "".join(parts)

    def render_map(self) -> str:
        """The seat map as text, taken seats marked ``[X]``."""
        header = "   " + self._grouped(f" {chr(ord('A') + column)} " for column in range(self.columns))
        lines = [header]
        for number, row in enumerate(self._seats, start=1):
            cells = ("[X]" if seat.taken else "[ ]" for seat in row)
            lines.append(f"{number:2d} " + self._grouped(cells))
        return "\n".join(lines) + "\n"

    def render_passengers(self) -> str:
        """A table of all passengers with a header line."""
        header = f"{'First Name':<20}{'Last Name':<20}{'Phone Number':<20}{'Seat':<8}{'Id':<8}\n\n"
        body = "".join(f"{passenger.format_row()}\n" for passenger in self._passengers)
        return header + body + "\n"

    def add_passenger(self, first_name: str, last_name: str, phone: str, seat_label: str) -> Passenger:
        """Book a new passenger into a free seat and return them."""
        if not first_name or not last_name:
            raise FlightError("Passenger names must not be empty.")
        formatted_phone = normalize_phone(phone)
        row, column = parse_seat_label(seat_label, self.rows, self.columns)
        seat = self._seats[row][column]
        if seat.taken:
            raise SeatTakenError("Seat is already taken.")
        seat.taken = True
        passenger = Passenger(first_name, last_name, formatted_phone, seat)
        self._passengers.append(passenger)
        return passenger

    def remove_passenger(self, passenger_id: int) -> Passenger:
        """Remove the first passenger with ``passenger_id`` and free their seat."""
        for index, passenger in enumerate(self._passengers):
            if passenger.id == passenger_id:
                self._seats[passenger.seat.row][passenger.seat.column].taken = False
                del self._passengers[index]
                return passenger
        raise PassengerNotFoundError("Passenger not found.")

    def quick_add_passenger(self, passenger: Passenger) -> None:
        """Append a passenger without any checks."""
        self._passengers.append(passenger)

    def render_file(self) -> str:
        """The flight as it is written to a data file."""
        header = f"{self.flight_number:<10}{self.rows:<3}{self.columns:<2}\n"
        return header + "".join(f"{passenger.format_row()}\n" for passenger in self._passengers)

    def save(self, path: str | PathLike[str]) -> None:
        """Write :meth:`render_file` to ``path``."""
        Path(path).write_text(self.render_file(), encoding="utf-8")