# whimsy

Human-friendly random names built from short words for plants, animals and
colors. Use them to name servers, databases, clusters and other resources
that you would rather not number.

Each word list holds 200 or more entries. Every entry is lowercase a–z and
at most six characters long. The lists are in alphabetical order and have no
duplicates. Words are picked with the `secrets` module.

## Installation

```
pip install whimsy
```

The package has no dependencies outside the standard library.

## Usage

```python
from whimsy.core import (
    random_name,
    random_plant,
    random_animal,
    random_color,
    categories,
)

random_plant()    # e.g. "maple"
random_animal()   # e.g. "otter"
random_color()    # e.g. "teal"

random_name()     # two parts by default, e.g. "fox-oak"
random_name(1)    # e.g. "blue"
random_name(3)    # e.g. "red-wolf-pine"
```

`random_name(count)` joins `count` different words with hyphens. The words
are drawn from all categories together, so one name can mix plants, animals
and colors. `count` must be between 1 and the number of categories (three),
and any other value raises `ValueError`.

`categories()` returns a list of `Category` entries. Each one is a frozen
dataclass with a `name` (`"plants"`, `"animals"` or `"colors"`) and its
`words` as a tuple. `plants()`, `animals()` and `colors()` return those
tuples directly. `all_words()` returns a list with the words of every
category, one category after another. `random_choice(words)` picks one word
from any sequence you give it and raises `ValueError` if the sequence is
empty.

The raw lists are also available as `PLANTS`, `ANIMALS` and `COLORS` in
`whimsy.names`.

## Demo

To print sample names, infrastructure naming examples and statistics about
the word lists, run:

```
whimsy-demo
```

The command takes no options besides `--help`. The same report is available
as a string from `whimsy.demo.render()`.

## Tests

```
pip install -e ".[test]"
pytest
```