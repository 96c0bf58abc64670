"""The arena simulation and its terminal front end."""

from __future__ import annotations

import argparse
import random
import sqlite3
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .store import DEFAULT_PATH, Location, populate_db, random_locations

ARENA_WIDTH = 80
ARENA_HEIGHT = 10
MOVE_DELAY = 0.4
FIGHTERS_COUNT = 10
SWORD_BONUS = 30
SHIELD_BONUS = 100
COMBAT_LOG_LINES = 5

EMPTY = " "
_CLEAR_SCREEN = "\x1b[2J\x1b[H"

_DIRECTIONS = (
    (0, 1),
    (1, 0),
    (0, -1),
    (-1, 0),
    (1, 1),
    (-1, -1),
    (1, -1),
    (-1, 1),
    (0, 0),
)

Position = tuple[int, int]


class Arena:
    """A grid of cells, each either empty or holding a fighter's initial."""

    def __init__(self, width: int = ARENA_WIDTH, height: int = ARENA_HEIGHT) -> None:
        self.width = width
        self.height = height
        self.grid = [[EMPTY] * width for _ in range(height)]

    def clear(self) -> None:
        """Empty every cell."""
        for row in self.grid:
            row[:] = [EMPTY] * self.width

    def in_bounds(self, position: Position) -> bool:
        x, y = position
        return 0 <= x < self.width and 0 <= y < self.height

    def is_empty(self, position: Position) -> bool:
        x, y = position
        return self.grid[y][x] == EMPTY

    def update(self, fighters: Iterable[Fighter]) -> None:
        """Redraw the grid with the living fighters."""
        self.clear()
        for fighter in fighters:
            if fighter.is_alive():
                x, y = fighter.position
                self.grid[y][x] = fighter.name[0]

    def render(self, fighters: Iterable[Fighter]) -> str:
        """Return the framed grid followed by the fighters' stats."""
        border = "─" * self.width
        lines = [f"┌{border}┐"]
        lines.extend(f"│{''.join(row)}│" for row in self.grid)
        lines.append(f"└{border}┘")
        lines.append("")
        lines.append("Fighter Stats:")
        for fighter in fighters:
            if fighter.is_alive():
                lines.append(
                    f"{fighter.name}: Health: {fighter.health}, Attack: {fighter.attack}"
                )
            else:
                lines.append(f"{fighter.name}  (DEFEATED)")
        return "\n".join(lines)


@dataclass
class Fighter:
    """A combatant. ``ac`` is how hard it is to hit: 0 always hit, 20 never."""

    name: str
    health: int
    attack: int
    position: Position
    ac: int = 8

    def is_alive(self) -> bool:
        return self.health > 0

    def move_randomly(self, arena: Arena, rng: random.Random) -> None:
        """Step one cell in a random direction if it is inside and empty."""
        dx, dy = rng.choice(_DIRECTIONS)
        target = (self.position[0] + dx, self.position[1] + dy)
        if arena.in_bounds(target) and arena.is_empty(target):
            self.position = target

    def move_towards(self, arena: Arena, target: Position) -> None:
        """Step one cell closer to ``target`` if that cell is empty."""
        x, y = self.position
        tx, ty = target
        step = (x + (tx > x) - (tx < x), y + (ty > y) - (ty < y))
        if arena.is_empty(step):
            self.position = step

    def increase_attack(self, amount: int) -> None:
        self.attack += amount

    def increase_health(self, amount: int) -> None:
        self.health += amount

    def increase_ac(self, amount: int) -> None:
        self.ac += amount

    def roll_20(self, rng: random.Random) -> int:
        """Roll a number from 0 to 20 inclusive."""
        return rng.randint(0, 20)

    def find_opponent_position(
        self, fighters: Sequence[Fighter], rng: random.Random
    ) -> Position | None:
        """Position of a random living fighter weaker than this one, if any."""
        candidates = list(fighters)
        rng.shuffle(candidates)
        return next(
            (f.position for f in candidates if 0 < f.health < self.health),
            None,
        )


def fighter_from_location(location: Location, position: Position) -> Fighter:
    """Build a fighter whose stats come from the location's weather and fare."""
    health = int(1000.0 - abs(25.0 - location.temp) * 100.0)
    attack = int((1000.0 - location.ticket_price) / 10.0)
    return Fighter(location.name, health, attack, position)


def place_fighters(
    arena: Arena, locations: Iterable[Location], rng: random.Random
) -> list[Fighter]:
    """Create one fighter per location on distinct random empty cells."""
    locations = list(locations)
    free = sum(row.count(EMPTY) for row in arena.grid)
    if len(locations) > free:
        raise ValueError(f"cannot place {len(locations)} fighters in {free} free cells")

    fighters: list[Fighter] = []
    taken: set[Position] = set()
    for location in locations:
        while True:
            position = (rng.randrange(arena.width), rng.randrange(arena.height))
            if arena.is_empty(position) and position not in taken:
                break
        taken.add(position)
        fighters.append(fighter_from_location(location, position))
    return fighters


def _adjacent(a: Position, b: Position) -> bool:
    return abs(a[0] - b[0]) <= 1 and abs(a[1] - b[1]) <= 1


def check_for_battles(fighters: Sequence[Fighter], rng: random.Random) -> list[str]:
    """Let every living fighter strike each living neighbour; return the log."""
    log: list[str] = []
    for attacker in fighters:
        if not attacker.is_alive():
            continue
        for defender in fighters:
            if not defender.is_alive() or attacker.name == defender.name:
                continue
            if not _adjacent(attacker.position, defender.position):
                continue
            if attacker.roll_20(rng) > defender.ac:
                defender.health -= attacker.attack
                log.append(
                    f"{attacker.name} attacked {defender.name} "
                    f"and dealt {attacker.attack} damage!"
                )
            else:
                log.append(f"{attacker.name} attacked {defender.name} but missed!")
    return log


def move_fighters(
    fighters: Sequence[Fighter], arena: Arena, rng: random.Random
) -> None:
    """Move every living fighter, usually towards a weaker opponent."""
    for fighter in fighters:
        if not fighter.is_alive():
            continue
        target = fighter.find_opponent_position(fighters, rng)
        # Perfect tracking is dull, so chasing only happens some of the time.
        if target is not None and rng.randint(0, 10) < 6:
            fighter.move_towards(arena, target)
        else:
            fighter.move_randomly(arena, rng)


def format_combat_log(log: Sequence[str]) -> str:
    """The combat heading followed by the most recent entries."""
    recent = log[-COMBAT_LOG_LINES:] if log else []
    return "\nCOMBAT:" + "".join(f"\n{entry}" for entry in recent)


def count_alive(fighters: Iterable[Fighter]) -> int:
    return sum(1 for f in fighters if f.is_alive())


def get_winner(fighters: Iterable[Fighter]) -> Fighter | None:
    return next((f for f in fighters if f.is_alive()), None)


def apply_blessings(
    fighters: Iterable[Fighter], sword_choice: str, shield_choice: str
) -> None:
    """Give the sword (+attack) and shield (+health) to the named fighters."""
    sword = sword_choice.lower().strip()
    shield = shield_choice.lower().strip()
    for fighter in fighters:
        name = fighter.name.lower()
        if name == sword:
            fighter.increase_attack(SWORD_BONUS)
        if name == shield:
            fighter.increase_health(SHIELD_BONUS)


def _read_line() -> str:
    try:
        return input()
    except EOFError:
        return ""


def _show(arena: Arena, fighters: Sequence[Fighter]) -> None:
    arena.update(fighters)
    print(_CLEAR_SCREEN + arena.render(fighters), flush=True)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Watch fighters battle in an arena.")
    parser.add_argument("--db", default=DEFAULT_PATH, help="path of the location store")
    parser.add_argument("--delay", type=float, default=MOVE_DELAY, help="seconds per turn")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    print("Arena Fighter Game")

    try:
        populate_db(args.db)
        print("Migration and data insertion complete.")
    except sqlite3.Error:
        pass

    print("Opening the arena...")
    arena = Arena()
    print("Placing fighters!")
    try:
        locations = random_locations(FIGHTERS_COUNT, args.db)
    except sqlite3.Error:
        locations = []
    fighters = place_fighters(arena, locations, rng)
    combat_log: list[str] = []
    _show(arena, fighters)

    print("Who do you bestow with the sword (+attack)?\n")
    sword_choice = _read_line()
    print("...and who do you bless with the shield (+health)?\n")
    shield_choice = _read_line()
    apply_blessings(fighters, sword_choice, shield_choice)
    _show(arena, fighters)

    print("The fighters await your signal. Press ENTER to begin...")
    _read_line()

    while True:
        _show(arena, fighters)
        print(format_combat_log(combat_log))

        if count_alive(fighters) <= 1:
            winner = get_winner(fighters)
            if winner is not None:
                print(
                    f"\nFighter {winner.name} is the champion "
                    f"with {winner.health} health remaining!"
                )
            else:
                print("\nAll fighters have been defeated! It's a draw!")
            break

        move_fighters(fighters, arena, rng)
        combat_log.extend(check_for_battles(fighters, rng))
        time.sleep(args.delay)

    print("\nGame over! Press Enter to exit...")
    _read_line()
    return 0