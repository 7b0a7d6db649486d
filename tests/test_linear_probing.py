import io

import pytest

from dstructs.errors import KeyNotFoundError, TableFullError
from dstructs.linear_probing import LinearProbingTable, main


@pytest.fixture
def table():
    return LinearProbingTable()


def test_insert_then_search(table):
    index = table.insert(21)
    assert table.search(21) == index
    assert len(table) == 1


def test_collision_goes_to_next_slot(table):
    first = table.insert(3)
    assert table.insert(13) == (first + 1) % table.size


def test_probe_wraps_around(table):
    table.insert(9)
    assert table.insert(19) == 0
    assert table.search(19) == 0


def test_search_missing_returns_none(table):
    table.insert(1)
    assert table.search(11) is None


@pytest.mark.parametrize("factor", [1, 7])
def test_full_table(table, factor):
    for key in range(table.size):
        table.insert(key * factor)
    assert len(table) == table.size
    assert table.search(100) is None
    with pytest.raises(TableFullError):
        table.insert(99)


def test_delete_empties_slot(table):
    index = table.insert(44)
    assert table.delete(44) == index
    assert table.search(44) is None
    assert len(table) == 0
    assert table.render().splitlines()[index] == f"Index {index}: ~"


def test_delete_missing_raises(table):
    with pytest.raises(KeyNotFoundError):
        table.delete(5)


def test_render_shows_keys(table):
    index = table.insert(57)
    assert f"Index {index}: 57" in table.render().splitlines()


def test_invalid_size_rejected():
    with pytest.raises(ValueError):
        LinearProbingTable(size=0)


def test_main_session(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 12\n3 12\n3 12\n5\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    index = LinearProbingTable().insert(12)
    for message in (
        f"Key 12 inserted at index {index}.",
        f"Key 12 deleted from index {index}.",
        "Key 12 not found in the hash table.",
    ):
        assert message in out