import pytest

from statevec.qubit_ids import QubitIdTable


def test_first_qubit_gets_index_zero():
    table = QubitIdTable()
    assert table.query("qubit0") == 0


def test_indices_follow_order_of_first_use():
    table = QubitIdTable()
    names = ["qubit0", "qubit1", "anc", "q7"]
    assert [table.query(n) for n in names] == list(range(len(names)))


def test_repeated_query_returns_same_index():
    table = QubitIdTable()
    first = table.query("a")
    second = table.query("b")
    assert table.query("a") == first
    assert table.query("b") == second
    assert len(table) == 2


def test_contains_only_after_query():
    table = QubitIdTable()
    assert "x" not in table
    table.query("x")
    assert "x" in table
    assert "y" not in table


def test_len_counts_distinct_names():
    table = QubitIdTable()
    for name in ["a", "b", "a", "c", "b"]:
        table.query(name)
    assert len(table) == 3


@pytest.mark.parametrize("base", [0, 100, 5000])
def test_base_does_not_change_returned_indices(base):
    table = QubitIdTable(base)
    assert [table.query(n) for n in ["p", "q", "p", "r"]] == [0, 1, 0, 2]