# flightseats

A small console tool for managing the seats and passengers of one flight.

It reads a flight description from a fixed-width text file and shows a menu
that lets you:

1. display the flight's seat map,
2. list the passengers,
3. add a new passenger to a free seat,
4. remove a passenger by ID,
5. save the flight to a file,
6. quit.

## Installation

```
pip install .
```

## Running

```
flightseats [DATA] [-o OUTPUT]
```

- `DATA` is the flight file to load; it defaults to `flight_info.txt` in the
  current directory.
- `-o`, `--output` names the file written by menu option 5; it defaults to
  `Flight.txt`.

If the data file cannot be opened, or its first line is not a valid header,
the message is printed and the command exits with status 1. Choosing option 6
prints `Thank you!` and also exits with status 1. When input runs out the
command exits with status 0.

An unreadable menu choice prints `Invalid input Try again` on standard error
and asks again; a number outside 1–6 prints `Invalid Option, not within bounds`.

## Input file format

The first line holds the flight number, the number of rows and the number of
seat columns, separated by whitespace:

```
WJ1145 20 6
```

Every following line describes one passenger in fixed-width fields:

| Columns | Width | Field                         |
|---------|-------|-------------------------------|
| 0–19    | 20    | first name                    |
| 20–39   | 20    | last name                     |
| 40–59   | 20    | phone number                  |
| 60–63   | 4     | seat, row then letter (`12C`) |
| 64–68   | 5     | passenger ID                  |

Lines shorter than 70 characters, with an unreadable seat or ID, or with a
seat outside the cabin are skipped with a warning.

## Seat map

Columns are lettered from `A`, rows numbered from 1, and an aisle gap appears
after every three columns. Taken seats show as `[X]`, free ones as `[ ]`:

```
    A  B  C    D  E  F
 1 [X][ ][ ]  [ ][ ][X]
 2 [ ][ ][ ]  [ ][X][ ]
```

## Adding and removing passengers

When a passenger is added interactively, the seat is entered letter first
(`A4`). The phone number must contain exactly ten digits; any other characters
are dropped, and it is stored as `XXX-XXX-XXXX`. A bad phone number, a bad or
out-of-range seat, or a taken seat is reported and asked for again.

Passenger IDs come from one counter that starts at 4000 and advances for every
passenger created, including those read from the data file (which keep the ID
given in the file).

## Saved files

Option 5 writes a header line (flight number, rows and columns in fixed-width
fields) followed by one line per passenger: first name, last name and phone in
20-character fields, then the seat label in 8 characters and the ID in 8.

The saved file writes the seat letter first (`A4`) and places the ID after an
8-character seat field, while the loader expects the seat as row then letter in
a 4-character field. Passenger lines of a saved file are therefore skipped when
that file is loaded again; only its header is read back.

## Using it from Python

```python
from flightseats.flight import Flight

flight = Flight("WJ1145", 20, 6)
passenger = flight.add_passenger("Ada", "Byron", "555 010 0199", "C3")
print(flight.render_map())
flight.remove_passenger(passenger.id)
flight.save("Flight.txt")
```

- `flightseats.seat.Seat` — a seat with `row`, `column`, `taken` and a `label`
  such as `C3`.
- `flightseats.passenger.Passenger` — first and last name, phone, seat and id;
  `format_row()` gives the fixed-width line. `next_passenger_id()` draws from
  the shared id counter.
- `flightseats.flight.Flight` — `passengers`, `seat_at(row, column)`,
  `render_map()`, `render_passengers()`, `add_passenger(...)`,
  `remove_passenger(passenger_id)`, `quick_add_passenger(passenger)`,
  `render_file()` and `save(path)`. Helpers `normalize_phone(phone)` and
  `parse_seat_label(label, rows, columns)` are in the same module. Errors derive
  from `FlightError`: `InvalidSeatError`, `SeatTakenError`,
  `InvalidPhoneError` and `PassengerNotFoundError`.
- `flightseats.loader.load_flight(path, warn)` reads a flight file and
  `parse_flight(lines, warn)` reads from any iterable of lines. `warn` is a
  callable that is handed a message for each skipped line; without it the
  messages go to standard error. Unopenable files and bad headers raise
  `FlightFileError`.
- `flightseats.cli.menu(stdin, stdout)` shows the menu and returns the chosen
  number, or `None` once input runs out; `flightseats.cli.main(argv)` runs the
  console.