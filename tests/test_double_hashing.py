import io

import pytest

from dstructs.double_hashing import DoubleHashTable, main
from dstructs.errors import KeyNotFoundError, TableFullError


@pytest.fixture
def table():
    return DoubleHashTable()


@pytest.fixture
def colliding(table):
    return table, table.insert(3), table.insert(13)


def test_insert_then_search_finds_same_slot(table):
    index = table.insert(42)
    assert 0 <= index < table.size
    assert table.search(42) == index


def test_search_missing_returns_none(table):
    table.insert(4)
    assert table.search(14) is None


def test_first_key_lands_in_home_slot(table):
    assert table.insert(27) == table.primary_hash(27)


def test_colliding_keys_get_distinct_slots(colliding):
    table, first, second = colliding
    assert first != second
    assert (table.search(3), table.search(13)) == (first, second)


def test_step_is_never_zero_and_bounded_by_prime(table):
    assert all(1 <= table.step(key) <= table.prime for key in range(-30, 60))


def test_delete_leaves_tombstone(table):
    index = table.insert(6)
    assert table.delete(6) == index
    assert table.search(6) is None
    assert f"Index {index}: (Deleted)" in table.render().splitlines()


def test_search_probes_past_tombstone(colliding):
    table, _, second = colliding
    table.delete(3)
    assert table.search(13) == second


def test_insert_reuses_deleted_slot(table):
    first = table.insert(3)
    table.delete(3)
    assert table.insert(13) == first


def test_delete_missing_raises(table):
    with pytest.raises(KeyNotFoundError):
        table.delete(8)


def test_full_table_raises(table):
    for key in range(table.size):
        table.insert(key)
    with pytest.raises(TableFullError):
        table.insert(10)


def test_render_empty_table(table):
    lines = table.render().splitlines()
    assert len(lines) == 10
    assert lines[0] == "Index 0: ~"
    assert all(line.endswith(": ~") for line in lines)


@pytest.mark.parametrize("kwargs", [{"size": 0}, {"prime": 0}])
def test_invalid_sizes_rejected(kwargs):
    with pytest.raises(ValueError):
        DoubleHashTable(**kwargs)


def test_main_session(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n5\n2\n5\n3\n9\n7\n5\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    expected = DoubleHashTable().insert(5)
    for message in (
        f"Key 5 found at index {expected}",
        "Key 9 not found!",
        "Invalid choice! Please try again.",
    ):
        assert message in out