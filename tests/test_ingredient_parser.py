import itertools

import pytest
from app.parsing import parse_ingredient_line
from app.parsing.ingredient_parser import find_split_point, is_measurement_word


@pytest.fixture
def new_id():
    counter = itertools.count()
    return lambda: f"id-{next(counter)}"


@pytest.mark.parametrize(
    "line,name,amount",
    [
        ("2 cups flour", "Flour", "2 cups"),
        ("2 cups pasta", "Pasta", "2 cups"),
        ("1/2 tsp baking soda", "Baking soda", "1/2 tsp"),
        ("1.5 kg beef", "Beef", "1.5 kg"),
        ("3 eggs", "Eggs", "3"),
        ("500g spaghetti", "Spaghetti", "500g"),
        ("1 Tbsp. olive oil", "Olive oil", "1 Tbsp."),
        ("a pinch of salt", "Salt", "a pinch"),
        ("handful basil leaves", "Basil leaves", "a handful"),
    ],
)
def test_amount_and_name_split(new_id, line, name, amount):
    ing = parse_ingredient_line(line, new_id)
    assert ing.name == name
    assert ing.amount == amount


def test_no_amount_keeps_whole_line(new_id):
    ing = parse_ingredient_line("salt", new_id)
    assert ing.name == "Salt"
    assert ing.amount == ""


@pytest.mark.parametrize("line", ["pepper to taste", "Pepper, to taste", "pepper as needed", "pepper as required"])
def test_to_taste(new_id, line):
    ing = parse_ingredient_line(line, new_id)
    assert ing.name == "Pepper"
    assert ing.amount == "to taste"


def test_measurement_word_beats_number(new_id):
    # "2" after the unit would win if numbers were preferred
    ing = parse_ingredient_line("1 can tomatoes 2", new_id)
    assert ing.amount == "1 can"
    assert ing.name == "Tomatoes 2"


def test_preparation_note_reattached(new_id):
    ing = parse_ingredient_line("2 onions (finely chopped)", new_id)
    assert ing.amount == "2"
    assert ing.name == "Onions (finely chopped)"


def test_parenthetical_amount_is_one_token(new_id):
    ing = parse_ingredient_line("1 (14 oz) can chickpeas", new_id)
    assert ing.amount == "1 (14 oz) can"
    assert ing.name == "Chickpeas"


def test_amount_without_name_falls_back(new_id):
    ing = parse_ingredient_line("2 cups", new_id)
    assert ing.name == "2 cups"
    assert ing.amount == ""


def test_ids_come_from_factory(new_id):
    first = parse_ingredient_line("1 cup rice", new_id)
    second = parse_ingredient_line("1 cup rice", new_id)
    assert first.id == "id-0"
    assert second.id == "id-1"


def test_never_raises_on_odd_input(new_id):
    for line in ['"unclosed', "(((", "1/", "))) 2 cups", ""]:
        parse_ingredient_line(line, new_id)


@pytest.mark.parametrize("token", ["cup", "Cups", "tbsp.", "pinches", "lbs", "2tbsp", "bunches"])
def test_measurement_words(token):
    assert is_measurement_word(token)


@pytest.mark.parametrize("token", ["cupcake", "egg", "garlic", "2"])
def test_not_measurement_words(token):
    assert not is_measurement_word(token)


def test_find_split_point():
    assert find_split_point(["2", "cups", "flour"]) == 2
    assert find_split_point(["3", "eggs"]) == 1
    assert find_split_point(["salt"]) is None


@pytest.mark.parametrize("line", ["", "   ", None])
def test_blank_line_gives_nothing(new_id, line):
    assert parse_ingredient_line(line, new_id) is None
