import sqlite3

import pytest

from arenafight.store import COUNTRIES, Location, populate_db, random_locations


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "store.db")


def _all_rows(path):
    with sqlite3.connect(path) as conn:
        return conn.execute("SELECT name, temp, ticket_price FROM countries").fetchall()


def test_populate_inserts_each_name_once(db_path):
    added = populate_db(db_path)
    unique_names = {name for name, _, _ in COUNTRIES}
    assert added == len(unique_names)
    assert {row[0] for row in _all_rows(db_path)} == unique_names


def test_populate_is_idempotent(db_path):
    populate_db(db_path)
    assert populate_db(db_path) == 0
    assert len(_all_rows(db_path)) == len({name for name, _, _ in COUNTRIES})


def test_first_entry_wins_for_duplicates(db_path):
    populate_db(db_path)
    rows = {name: (temp, price) for name, temp, price in _all_rows(db_path)}
    assert rows["Stockholm"] == (24.5, 170.85)
    assert rows["Barcelona"] == (35.0, 447.89)


def test_random_locations_returns_distinct_stored_locations(db_path):
    populate_db(db_path)
    locations = random_locations(10, db_path)
    assert len(locations) == 10
    assert len({loc.name for loc in locations}) == 10
    stored = {name: Location(name, temp, price) for name, temp, price in _all_rows(db_path)}
    for loc in locations:
        assert stored[loc.name] == loc


def test_random_locations_limited_by_table_size(db_path):
    populate_db(db_path)
    total = len(_all_rows(db_path))
    assert len(random_locations(total + 50, db_path)) == total


def test_random_locations_without_table_raises(db_path):
    with pytest.raises(sqlite3.OperationalError):
        random_locations(3, db_path)