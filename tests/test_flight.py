import pytest

from flightseats.flight import (
    Flight,
    FlightError,
    InvalidPhoneError,
    InvalidSeatError,
    PassengerNotFoundError,
    SeatTakenError,
    normalize_phone,
    parse_seat_label,
)
from flightseats.passenger import Passenger
from flightseats.seat import Seat

DIGITS = "0" * 10


@pytest.fixture
def flight():
    return Flight("WJ1145", 3, 6)


def test_normalize_phone_keeps_digits_and_inserts_dashes():
    result = normalize_phone("a" + DIGITS + "b")
    assert result.replace("-", "") == DIGITS
    assert result[3] == "-" and result[7] == "-"
    assert result.count("-") == 2


@pytest.mark.parametrize("phone", ["12345", "", "0" * 11, "abc"])
def test_normalize_phone_rejects_wrong_length(phone):
    with pytest.raises(InvalidPhoneError):
        normalize_phone(phone)


def test_parse_seat_label_lowercase(flight):
    assert parse_seat_label("b3", 3, 6) == parse_seat_label("B3", 3, 6)
    assert parse_seat_label("B3", 3, 6) == (2, 1)


def test_parse_seat_label_short():
    with pytest.raises(InvalidSeatError, match="Invalid seat format."):
        parse_seat_label("A", 3, 6)


def test_parse_seat_label_bad_row():
    with pytest.raises(InvalidSeatError, match="Invalid row number."):
        parse_seat_label("AX", 3, 6)


@pytest.mark.parametrize("label", ["Z1", "A0", "A99", "G1"])
def test_parse_seat_label_out_of_bounds(label):
    with pytest.raises(InvalidSeatError, match="Invalid seat position."):
        parse_seat_label(label, 3, 6)


def test_empty_map_row(flight):
    lines = flight.render_map().splitlines()
    assert len(lines) == flight.rows + 1
    assert lines[1] == " 1 [ ][ ][ ]  [ ][ ][ ]"
    assert "[X]" not in flight.render_map()


def test_add_passenger_marks_seat(flight):
    passenger = flight.add_passenger("Ann", "Lee", DIGITS, "B2")
    assert passenger.seat.row == 1 and passenger.seat.column == 1
    assert flight.seat_at(1, 1).taken is True
    assert flight.passengers == (passenger,)
    lines = flight.render_map().splitlines()
    assert lines[2][6:9] == "[X]"
    assert flight.render_map().count("[X]") == 1


def test_add_passenger_formats_phone(flight):
    passenger = flight.add_passenger("Ann", "Lee", DIGITS, "A1")
    assert passenger.phone == normalize_phone(DIGITS)


def test_add_passenger_to_taken_seat(flight):
    flight.add_passenger("Ann", "Lee", DIGITS, "A1")
    with pytest.raises(SeatTakenError, match="Seat is already taken."):
        flight.add_passenger("Bob", "Ray", DIGITS, "a1")
    assert len(flight.passengers) == 1


def test_add_passenger_bad_phone_books_nothing(flight):
    with pytest.raises(InvalidPhoneError):
        flight.add_passenger("Ann", "Lee", "123", "A1")
    assert flight.passengers == ()
    assert flight.seat_at(0, 0).taken is False


def test_add_passenger_empty_name(flight):
    with pytest.raises(FlightError):
        flight.add_passenger("", "Lee", DIGITS, "A1")


def test_remove_passenger_frees_seat(flight):
    passenger = flight.add_passenger("Ann", "Lee", DIGITS, "C3")
    removed = flight.remove_passenger(passenger.id)
    assert removed is passenger
    assert flight.passengers == ()
    assert flight.seat_at(2, 2).taken is False


def test_remove_unknown_passenger(flight):
    with pytest.raises(PassengerNotFoundError, match="Passenger not found."):
        flight.remove_passenger(-1)


def test_seat_at_out_of_bounds(flight):
    with pytest.raises(InvalidSeatError):
        flight.seat_at(3, 0)


def test_quick_add_passenger_appends(flight):
    passenger = Passenger("Ann", "Lee", "n/a", Seat(0, 0), id=5)
    flight.quick_add_passenger(passenger)
    assert flight.passengers[-1] is passenger


def test_render_passengers_lists_everyone(flight):
    first = flight.add_passenger("Ann", "Lee", DIGITS, "A1")
    second = flight.add_passenger("Bob", "Ray", DIGITS, "B1")
    text = flight.render_passengers()
    assert text.startswith("First Name")
    assert first.format_row() in text
    assert second.format_row() in text
    assert text.index(first.format_row()) < text.index(second.format_row())


def test_render_file_layout(flight):
    passenger = flight.add_passenger("Ann", "Lee", DIGITS, "A1")
    lines = flight.render_file().splitlines()
    assert lines[0].split() == ["WJ1145", "3", "6"]
    assert lines[1] == passenger.format_row()


def test_save_writes_rendered_file(flight, tmp_path):
    flight.add_passenger("Ann", "Lee", DIGITS, "A1")
    target = tmp_path / "out.txt"
    flight.save(target)
    assert target.read_text(encoding="utf-8") == flight.render_file()


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Flight("X", -1, 3)