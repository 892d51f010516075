from unittest import mock

import pytest

from whimsy.core import (
    Category,
    all_words,
    animals,
    categories,
    colors,
    plants,
    random_animal,
    random_choice,
    random_color,
    random_name,
    random_plant,
)


def test_random_plant_in_list():
    plant = random_plant()
    assert plant
    assert plant in plants()


def test_random_animal_in_list():
    animal = random_animal()
    assert animal
    assert animal in animals()


def test_random_color_in_list():
    color = random_color()
    assert color
    assert color in colors()


def test_random_name_default_has_two_parts():
    name = random_name()
    assert name
    assert len(name.split("-")) == 2


@pytest.mark.parametrize("count", [1, 2, 3])
def test_random_name_part_count(count):
    assert len(random_name(count).split("-")) == count


def test_random_name_max_parts_valid_and_unique():
    max_parts = len(categories())
    parts = random_name(max_parts).split("-")
    assert len(parts) == max_parts
    known = set(all_words())
    assert all(part in known for part in parts)
    assert len(set(parts)) == len(parts)


@pytest.mark.parametrize("count", [0, -1, len(categories()) + 1])
def test_random_name_invalid_count(count):
    with pytest.raises(ValueError, match="count must be between 1 and 3"):
        random_name(count)


def test_random_name_varies():
    names = {random_name(2) for _ in range(20)}
    assert len(names) >= 10


def test_random_name_skips_repeated_words():
    with mock.patch("whimsy.core.secrets.randbelow", side_effect=[0, 0, 1]):
        assert random_name(2) == "acacia-acer"


def test_categories():
    cats = categories()
    assert len(cats) == 3
    assert {cat.name for cat in cats} == {"plants", "animals", "colors"}
    assert all(cat.words for cat in cats)
    assert all(isinstance(cat, Category) for cat in cats)


def test_categories_hold_the_lists():
    by_name = {cat.name: cat.words for cat in categories()}
    assert by_name["plants"] == plants()
    assert by_name["animals"] == animals()
    assert by_name["colors"] == colors()


def test_random_choice_empty():
    with pytest.raises(ValueError, match="empty"):
        random_choice([])


def test_random_choice_single():
    assert random_choice(["only"]) == "only"


def test_all_words():
    words = all_words()
    assert len(words) == len(plants()) + len(animals()) + len(colors())
    word_set = set(words)
    assert set(plants()) <= word_set
    assert set(animals()) <= word_set
    assert set(colors()) <= word_set