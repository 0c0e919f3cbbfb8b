"""Reading a flight and its passengers from a data file."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable
from os import PathLike

from .flight import Flight, _ascii_upper, _leading_int
from .passenger import Passenger

MIN_RECORD_LENGTH = 70


class FlightFileError(Exception):
    """The flight data file cannot be opened or has no usable header."""


class _BadRecord(Exception):
    pass


def _warn_stderr(message: str) -> None:
    print(message, file=sys.stderr)


def _parse_header(header: str | None) -> Flight:
    if header is None:
        raise FlightFileError("Flight file is empty")
    fields = header.split()
    if len(fields) < 3:
        raise FlightFileError(f"Invalid flight header: {header.rstrip()!r}")
    try:
        rows, columns = int(fields[1]), int(fields[2])
    except ValueError:
        raise FlightFileError(f"Invalid flight header: {header.rstrip()!r}") from None
    if rows < 0 or columns < 0:
        raise FlightFileError(f"Invalid flight size: {rows}x{columns}")
    return Flight(fields[0], rows, columns)


def _parse_record(line: str, flight: Flight) -> Passenger:
    if len(line) < MIN_RECORD_LENGTH:
        raise _BadRecord(f"Skipping incomplete line: {line}")

    first_name = line[0:20].rstrip(" ")
    last_name = line[20:40].rstrip(" ")
    phone = line[40:60].rstrip(" ")
    seat_text = "".join(line[60:64].split())
    id_text = line[64:69]

    if len(seat_text) < 2:
        raise _BadRecord(f"Invalid seat string (too short): [{seat_text}]")
    column = ord(_ascii_upper(seat_text[-1])) - ord("A")
    row = _leading_int(seat_text[:-1])
    if row is None:
        raise _BadRecord(f"Invalid seat row in: [{seat_text}]")
    row -= 1
    if not (0 <= row < flight.rows and 0 <= column < flight.columns):
        raise _BadRecord(f"Seat out of bounds: {seat_text}")

    passenger_id = _leading_int(id_text)
    if passenger_id is None:
        raise _BadRecord(f"Invalid ID: [{id_text}]")

    seat = flight.seat_at(row, column)
    seat.taken = True
    return Passenger(first_name, last_name, phone, seat, id=passenger_id)


def parse_flight(lines: Iterable[str], warn: Callable[[str], None] | None = None) -> Flight:
    """Build a flight from a header line and fixed-width passenger records.

    Records that cannot be used are reported through ``warn`` and skipped.
    """
    report = warn or _warn_stderr
    iterator = iter(lines)
    flight = _parse_header(next(iterator, None))
    for raw in iterator:
        line = raw.rstrip("\n")
        try:
            passenger = _parse_record(line, flight)
        except _BadRecord as problem:
            report(str(problem))
            continue
        flight.quick_add_passenger(passenger)
    return flight


def load_flight(path: str | PathLike[str], warn: Callable[[str], None] | None = None) -> Flight:
    """Read a flight data file from ``path``."""
    try:
        with open(path, encoding="utf-8") as handle:
            return parse_flight(handle, warn)
    except OSError as exc:
        raise FlightFileError("File could not be opened") from exc