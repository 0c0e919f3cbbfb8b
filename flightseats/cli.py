"""Interactive seat-booking console."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from typing import TextIO

from .flight import (
    Flight,
    FlightError,
    InvalidPhoneError,
    InvalidSeatError,
    PassengerNotFoundError,
    SeatTakenError,
    _leading_int,
    normalize_phone,
)
from .loader import FlightFileError, load_flight

DEFAULT_DATA_FILE = "flight_info.txt"
DEFAULT_OUTPUT_FILE = "Flight.txt"

_MENU = (
    "What would you like to do?\n"
    "  1. Display Flight Seat Map\n"
    "  2. Display Passenger Information\n"
    "  3. Add a New Passenger\n"
    "  4. Remove an Existing Passenger\n"
    "  5. Save data to a file\n"
    "  6. Quit\n\n"
)
_PROMPT = "  Enter your choice (1, 2, 3, 4, 5, or 6): "


def menu(stdin: TextIO | None = None, stdout: TextIO | None = None) -> int | None:
    """Show the menu and read a choice; None once input runs out."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stdout.write(_MENU + _PROMPT)
    for line in stdin:
        if not line.strip():
            continue
        choice = _leading_int(line)
        if choice is not None:
            stdout.write("\n")
            return choice
        sys.stderr.write("\n Invalid input Try again\n")
        stdout.write(_PROMPT)
    return None


class _Console:
    """Line and whitespace-token reading over a text stream."""

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self._stdin = stdin
        self._stdout = stdout
        self._pending: deque[str] = deque()

    def write(self, text: str) -> None:
        self._stdout.write(text)

    def line(self) -> str:
        self._pending.clear()
        text = self._stdin.readline()
        if not text:
            raise EOFError
        return text.rstrip("\r\n")

    def token(self) -> str:
        while not self._pending:
            text = self._stdin.readline()
            if not text:
                raise EOFError
            self._pending.extend(text.split())
        return self._pending.popleft()

    def discard_pending(self) -> None:
        self._pending.clear()


def _add_passenger(flight: Flight, console: _Console) -> None:
    console.write("Enter first name: ")
    first_name = console.line()
    console.write("Enter last name: ")
    last_name = console.line()
    console.write("Enter phone number [phone]): ")
    while True:
        try:
            phone = normalize_phone(console.token())
            break
        except InvalidPhoneError:
            console.write("Invalid input. Please enter exactly 10 digits: ")
    while True:
        console.write("Enter seat (e.g., A4): ")
        label = console.token()
        try:
            passenger = flight.add_passenger(first_name, last_name, phone, label)
        except (InvalidSeatError, SeatTakenError) as problem:
            console.write(f"{problem}\n")
            continue
        break
    console.write(f"Passenger added successfully to seat {passenger.seat.label}.\n")


def _remove_passenger(flight: Flight, console: _Console) -> None:
    console.write(flight.render_passengers())
    console.write("Enter the ID of the passenger you wish to remove:")
    passenger_id = _leading_int(console.token())
    try:
        flight.remove_passenger(passenger_id if passenger_id is not None else 0)
    except PassengerNotFoundError:
        console.write("Passenger not found.\n")
    else:
        console.write("Passenger removed successfully. \n")


def _save(flight: Flight, console: _Console, path: str) -> None:
    try:
        flight.save(path)
    except OSError:
        console.write("Could not open file for writing.\n")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive booking console."""
    parser = argparse.ArgumentParser(prog="flightseats", description="Manage a flight's seats and passengers.")
    parser.add_argument("data", nargs="?", default=DEFAULT_DATA_FILE, help="flight data file to load")
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT_FILE, help="file written by the save option")
    args = parser.parse_args(argv)

    try:
        flight = load_flight(args.data)
    except FlightFileError as exc:
        print(exc)
        return 1

    console = _Console(sys.stdin, sys.stdout)
    while True:
        choice = menu(sys.stdin, sys.stdout)
        if choice is None:
            return 0
        try:
            match choice:
                case 1:
                    console.write(flight.render_map())
                case 2:
                    console.write(flight.render_passengers())
                case 3:
                    _add_passenger(flight, console)
                case 4:
                    _remove_passenger(flight, console)
                case 5:
                    _save(flight, console, args.output)
                case 6:
                    console.write("Thank you! \n")
                    return 1
                case _:
                    console.write("Invalid Option, not within bounds \n")
        except EOFError:
            return 0
        except FlightError as problem:
            console.write(f"{problem}\n")
        finally:
            console.discard_pending()


if __name__ == "__main__":
    raise SystemExit(main())