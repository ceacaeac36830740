import pytest

from trainstation.wagons import (
    FirstClassWagon,
    PassengerClassWagon,
    SleepingWagon,
    Wagon,
)


def test_seat_counts_and_types():
    first = FirstClassWagon(50, 0.5, True)
    passenger = PassengerClassWagon(20, 1.5, 10)
    sleeping = SleepingWagon(30, 10, 200)
    assert first.seats_count == 10
    assert passenger.seats_count == 20
    assert sleeping.seats_count == 5
    assert first.wagon_type == "First Class"
    assert passenger.wagon_type == "Passenger Class"
    assert sleeping.wagon_type == "Sleeping Class"


def test_wagon_id_range():
    assert 0 <= SleepingWagon(30, 10, 200).id < 10**4


def test_base_wagon_is_abstract():
    with pytest.raises(TypeError):
        Wagon(10, 5)


def test_base_price_must_be_positive():
    with pytest.raises(ValueError):
        PassengerClassWagon(0, 1, 1)


def test_buy_ticket_marks_seat():
    wagon = PassengerClassWagon(20, 1.5, 10)
    assert not wagon.has_bought_seats()
    wagon.buy_ticket(3)
    assert wagon.seats[2] is True
    assert sum(wagon.seats) == 1
    assert wagon.has_bought_seats()


def test_buy_taken_seat_raises():
    wagon = SleepingWagon(30, 10, 200)
    wagon.buy_ticket(5)
    with pytest.raises(ValueError, match="already been taken"):
        wagon.buy_ticket(5)


@pytest.mark.parametrize("seat", [0, -1, 6])
def test_buy_invalid_seat_raises(seat):
    wagon = SleepingWagon(30, 10, 200)
    with pytest.raises(ValueError, match="Invalid seat!"):
        wagon.buy_ticket(seat)


def test_first_class_food_adds_fixed_price():
    with_food = FirstClassWagon(80, 0.5, True)
    without_food = FirstClassWagon(80, 0.5, False)
    assert with_food.ticket_price() - without_food.ticket_price() == pytest.approx(10)


def test_first_class_full_comfort_costs_base_price():
    assert FirstClassWagon(80, 1, False).ticket_price() == pytest.approx(80)


@pytest.mark.parametrize("factor", [-0.1, 1.1])
def test_first_class_invalid_comfort(factor):
    with pytest.raises(ValueError, match="Comfort factor"):
        FirstClassWagon(80, factor, False)


def test_passenger_price_grows_with_luggage():
    light = PassengerClassWagon(10, 2, 3)
    heavy = PassengerClassWagon(10, 2, 6)
    assert light.ticket_price() == pytest.approx(16)
    assert heavy.ticket_price() - 10 == pytest.approx(2 * (light.ticket_price() - 10))


def test_passenger_invalid_values():
    with pytest.raises(ValueError, match="price per kilo"):
        PassengerClassWagon(10, 0, 3)
    with pytest.raises(ValueError, match="weight of the luggage"):
        PassengerClassWagon(10, 2, 0)


def test_sleeping_price_for_hundred_km():
    assert SleepingWagon(30, 12, 100).ticket_price() == pytest.approx(42)


def test_sleeping_invalid_values():
    with pytest.raises(ValueError, match="Distance"):
        SleepingWagon(30, 12, 0)
    with pytest.raises(ValueError, match="Price per 100 km"):
        SleepingWagon(30, 0, 100)


def test_render_lists_every_seat():
    wagon = PassengerClassWagon(20, 1.5, 10)
    text = wagon.render()
    for seat in range(1, 21):
        assert f"{seat:02d}" in text
    assert "xx" not in text


def test_render_marks_sold_seat():
    wagon = PassengerClassWagon(20, 1.5, 10)
    wagon.buy_ticket(7)
    text = wagon.render()
    assert text.count("xx") == 1
    assert "07" not in text
    assert "08" in text


def test_render_shape():
    wagon = SleepingWagon(30, 12, 100)
    lines = wagon.render().splitlines()
    assert len(lines) == 11
    body = lines[1:]
    assert all(len(line) == len(body[0]) for line in body)
    assert all(line.startswith("|") and line.endswith("|") for line in body)


def test_print_wagon_matches_render(capsys):
    wagon = FirstClassWagon(80, 0.5, True)
    wagon.buy_ticket(1)
    wagon.print_wagon()
    assert capsys.readouterr().out == wagon.render() + "\n"