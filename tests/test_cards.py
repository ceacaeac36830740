import pytest

from trainstation.cards import (
    AgeDiscountCard,
    DiscountCard,
    DistanceDiscountCard,
    RouteDiscountCard,
)


@pytest.mark.parametrize(
    "age, expected",
    [(1, 100), (10, 100), (11, 50), (18, 50), (19, 20), (70, 20)],
)
def test_age_discount_bands(age, expected):
    assert AgeDiscountCard("Ivan", age).discount_percents == expected


def test_age_card_fields():
    card = AgeDiscountCard("Ivan", 7)
    assert card.age == 7
    assert card.card_holder == "Ivan"
    assert card.field_info == "7 years old"


@pytest.mark.parametrize("age", [0, -5])
def test_invalid_age_rejected(age):
    with pytest.raises(ValueError, match="Invalid age!"):
        AgeDiscountCard("Ivan", age)


def test_distance_within_limit():
    card = DistanceDiscountCard("Maria", 100, 100)
    assert card.discount_percents == 50
    assert card.field_info == "100 km"


def test_distance_over_limit():
    assert DistanceDiscountCard("Maria", 100, 150).discount_percents == 30


def test_distance_invalid_values():
    with pytest.raises(ValueError, match="Invalid distance!"):
        DistanceDiscountCard("Maria", 0, 10)
    with pytest.raises(ValueError, match="Invalid travelled distance!"):
        DistanceDiscountCard("Maria", 10, 0)


def test_route_card():
    card = RouteDiscountCard("Petar", "Varna")
    assert card.discount_percents == 100
    assert card.field_info == "Varna"


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        DiscountCard("Nobody")


def test_card_id_range():
    card = RouteDiscountCard("Petar", "Varna")
    assert 0 <= card.id < 10**6


def test_render_frame():
    card = AgeDiscountCard("Ivan", 7)
    lines = card.render().splitlines()
    assert lines[0] == "|===Age card===|"
    assert lines[-1] == "|" + "=" * (len(lines[0]) - 2) + "|"
    assert all(len(line) == len(lines[0]) for line in lines)
    assert lines[1].startswith("|Ivan")
    assert lines[2].startswith("|7 years old")
    assert lines[3].startswith(f"|{card.id:06d}")


def test_render_wraps_long_holder_name():
    name = "A" * 30
    card = RouteDiscountCard(name, "Sofia")
    lines = card.render().splitlines()
    width = len(lines[0])
    assert all(len(line) == width for line in lines)
    name_text = "".join(line[1:-1].rstrip() for line in lines[1:-3])
    assert name_text == name


def test_print_card_matches_render(capsys):
    card = DistanceDiscountCard("Maria", 200, 50)
    card.print_card()
    assert capsys.readouterr().out == card.render()