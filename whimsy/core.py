"""Random memorable names built from plants, animals and colors."""

from __future__ import annotations

import secrets
from collections.abc import Sequence
from dataclasses import dataclass

from whimsy.names import ANIMALS, COLORS, PLANTS


@dataclass(frozen=True)
class Category:
    """A named list of words."""

    name: str
    words: tuple[str, ...]


def plants() -> tuple[str, ...]:
    """Return all plant names."""
    return PLANTS


def animals() -> tuple[str, ...]:
    """Return all animal names."""
    return ANIMALS


def colors() -> tuple[str, ...]:
    """Return all color names."""
    return COLORS


def categories() -> list[Category]:
    """Return every word category."""
    return [
        Category("plants", PLANTS),
        Category("animals", ANIMALS),
        Category("colors", COLORS),
    ]


def all_words() -> list[str]:
    """Return the words of every category, one category after another."""
    return [word for category in categories() for word in category.words]


def random_choice(words: Sequence[str]) -> str:
    """Pick a word using a cryptographically secure generator."""
    if not words:
        raise ValueError("word list is empty")
    return words[secrets.randbelow(len(words))]


def random_plant() -> str:
    """Return a random plant name."""
    return random_choice(PLANTS)


def random_animal() -> str:
    """Return a random animal name."""
    return random_choice(ANIMALS)


def random_color() -> str:
    """Return a random color name."""
    return random_choice(COLORS)


def random_name(count: int = 2) -> str:
    """Return ``count`` distinct random words from all categories, joined by hyphens.

    ``count`` must lie between 1 and the number of categories.
    """
    max_parts = len(categories())
    if not 1 <= count <= max_parts:
        raise ValueError(f"count must be between 1 and {max_parts}, got {count}")

    words = all_words()
    if not words:
        raise ValueError("no words available")

    parts: list[str] = []
    while len(parts) < count:
        word = random_choice(words)
        if word not in parts:
            parts.append(word)
    return "-".join(parts)