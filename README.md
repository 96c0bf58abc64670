# arenafight

A small terminal game in which fighters battle in an 80×10 arena until at
most one is left standing. Each fighter is a city picked at random from a
local SQLite store:

- **Health** is `1000 - |25 - temperature| * 100`, so cities near 25 °C are
  toughest.
- **Attack** is `(1000 - ticket price) / 10`, so cheaper cities hit harder.
- **Armour class** starts at 8 for everyone.

Before the fight you choose one fighter to receive the sword (+30 attack)
and one to receive the shield (+100 health). The arena then redraws itself
every turn, showing each living fighter by the first letter of its name,
everyone's stats and the last five lines of the combat log.

The package uses only the standard library.

## Installing

```
pip install .
```

## Playing

```
arenafight
```

Options:

- `--db PATH` – the SQLite file to use (default `store.db` in the current
  directory). It is created if missing and filled with the built-in list of
  cities; names already stored are left as they are.
- `--delay SECONDS` – pause between turns (default `0.4`).
- `--seed N` – seed the random number generator for a repeatable fight.

Once the arena is shown:

1. Type the name of the fighter who gets the sword and press Enter.
2. Type the name of the fighter who gets the shield and press Enter.
   Names are matched ignoring case and surrounding spaces; an unknown name
   blesses nobody.
3. Press Enter to begin.

Ten fighters are drawn from the store. Each turn every living fighter looks
for a random living opponent with less health than itself; if it finds one
it usually steps towards it, otherwise it steps in a random direction (or
stays put). A fighter only moves into an empty cell. Then every living
fighter attacks each living fighter in one of the eight neighbouring cells:
a roll of 0–20 above the defender's armour class deals the attacker's attack
as damage, anything else misses.

When one fighter remains it is announced as champion with its remaining
health; if none remain the fight is a draw. Press Enter to exit. If the
store cannot be read, no fighters are placed and the game ends at once in a
draw.

## Using it as a library

`arenafight.store` holds the data:

- `Location` – a frozen dataclass with `name`, `temp` and `ticket_price`.
- `populate_db(path="store.db")` – creates the `countries` table and inserts
  the built-in cities; returns the number of rows added.
- `random_locations(count, path="store.db")` – up to `count` random
  locations from the store.

`arenafight.game` holds the simulation:

- `Arena` – the grid, with `clear()`, `in_bounds(position)`,
  `is_empty(position)`, `update(fighters)` and `render(fighters)`, which
  returns the framed grid and stats as a string.
- `Fighter` – a dataclass with `name`, `health`, `attack`, `position` and
  `ac`, and the methods `is_alive()`, `move_randomly(arena, rng)`,
  `move_towards(arena, target)`, `increase_attack(amount)`,
  `increase_health(amount)`, `increase_ac(amount)`, `roll_20(rng)` and
  `find_opponent_position(fighters, rng)`.
- `fighter_from_location(location, position)`,
  `place_fighters(arena, locations, rng)` (raises `ValueError` if there are
  more locations than empty cells), `move_fighters(fighters, arena, rng)`,
  `check_for_battles(fighters, rng)` (returns the new combat log lines),
  `format_combat_log(log)`, `count_alive(fighters)`, `get_winner(fighters)`,
  `apply_blessings(fighters, sword_choice, shield_choice)` and
  `main(argv=None)`.

Every function that involves chance takes a `random.Random`, so runs can be
reproduced:

```python
import random

from arenafight.game import Arena, check_for_battles, move_fighters, place_fighters
from arenafight.store import populate_db, random_locations

populate_db("store.db")
rng = random.Random(1)
arena = Arena()
fighters = place_fighters(arena, random_locations(10, "store.db"), rng)
arena.update(fighters)
move_fighters(fighters, arena, rng)
print(check_for_battles(fighters, rng))
print(arena.render(fighters))
```

## Running the tests

```
pip install .[test]
pytest
```