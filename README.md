# codegolf

Test-case generators for code golf holes, plus a few helpers for the site
around them: a pager, an SVG pie chart, and loaders for country and language
tables. It has no dependencies beyond the standard library.

## Holes

Every hole generator takes an optional `random.Random` instance and returns a
pair `(args, expected_output)`: the list of arguments handed to a solution,
and the exact text it must print.

```python
import random

from codegolf.holes.poker import poker
from codegolf.holes.roman import arabic_to_roman, roman
from codegolf.holes.sudoku import sudoku

rng = random.Random(42)

print(roman(1994))                    # MCMXCIV
args, out = arabic_to_roman(False, rng)
args, out = sudoku(True, rng)
args, out = poker(rng)
```

Passing a seeded `Random` makes the cases reproducible; without one, a fresh
`Random` is used.

The hole modules in `codegolf.holes` and their generators:

- `roman`: `arabic_to_roman(reverse, rng)`, with `roman(n)` for 0 to 3999.
- `fixed`: `brainfuck`, `emojify`, `united_states`,
  `rock_paper_scissors_spock_lizard`, and `shuffled_pairs(args, outs, rng)`
  for shuffling arguments and answers together.
- `seven_segment`: `seven_segment(rng)`, with `render_digits(digits)`.
- `morse`: `morse(reverse, rng)`, with `encode_morse(text)`.
- `css_colors`: `css_colors(rng)`.
- `spelling`: `spelling_numbers(rng)`, with `wordify(n)` for 0 to 1000.
- `ellipse`: `ellipse_perimeters(rng)`, with `perimeter(a, b)`.
- `lucky_tickets`: `lucky_tickets(rng)`, with
  `count_lucky_tickets(digits, base)`.
- `levenshtein`: `levenshtein_distance(words, rng)`, with `distance(a, b)`
  and `load_words(path)`, which reads one word per line.
- `intersection`: `intersection(rng)`, with `Box`,
  `calculate_intersection(b1, b2)` and `random_box(rng)`.
- `maze`: `maze(rng)`, built from `dig`, `find_exit`, `trace_path` and `draw`.
- `sudoku`: `sudoku(v2, rng)`, with `generate_board`,
  `has_multiple_solutions` and `format_sudoku`.
- `poker`: `poker(rng)`, with `card(number, suit)` and `is_straight(numbers)`.
- `pangram`: `pangram_grep(rng)`, with `is_pangram(text)`.
- `bowling`: `ten_pin_bowling(rng)`, with `randomise_frames(frames, rng)`.

## Site helpers

- `codegolf.pager.new_pager(url)` reads the `page` query parameter and returns
  a `Pager`. Set its `total` and call `calculate()` to fill in `first`,
  `last`, `prev` and `next`. Asking for a page past 1 of an empty result set
  raises `codegolf.pager.PageOutOfRange`.
- `codegolf.pie.Pie(slices).html()` renders a pie chart of `Slice(label,
  quantity)` values as SVG followed by a legend list.
- `codegolf.country.load_countries(path)` reads a TOML file of regions, each
  a list of countries, into a `Countries` with `by_id` and `tree`; each
  country gets its flag emoji from `flag_emoji(country_id)`.
- `codegolf.lang.load_langs(path)` reads a TOML table per language into a
  `Langs` with `by_id` and `ordered` (case-insensitive name order);
  `lang_id(name)` derives the ID.

## What it does not do

This package only generates cases and renders helpers. It does not serve the
site, run or judge submitted solutions, store golfers or scores, or hold the
list of holes with their descriptions. The word list for the Levenshtein hole
and the country and language tables are not included; supply your own files.

## Tests

```
pip install -e .[test]
pytest
```