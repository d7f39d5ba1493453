import pytest
from letcalc import VariableTable, UndefinedVariable


def test_define_and_get():
    table = VariableTable()
    assert table.define("x", 1.5) == 1.5
    assert table.get("x") == 1.5


def test_get_undefined():
    table = VariableTable()
    with pytest.raises(UndefinedVariable) as e:
        table.get("nope")
    assert e.value.name == "nope"
    assert e.value.location is None
    assert len(table) == 0


def test_define_overwrites_in_place():
    table = VariableTable()
    table.define("a", 1.0)
    table.define("b", 2.0)
    assert table.define("a", 3.0) == 3.0
    assert table.get("a") == 3.0
    assert len(table) == 2
    assert table.names() == ["a", "b"]


def test_names_are_case_sensitive():
    table = VariableTable()
    table.define("v", 1.0)
    assert "v" in table
    assert "V" not in table
    with pytest.raises(UndefinedVariable):
        table.get("V")


def test_insertion_order():
    table = VariableTable()
    for name, value in [("c", 3.0), ("a", 1.0), ("b", 2.0)]:
        table.define(name, value)
    table.define("c", 30.0)
    assert table.items() == [("c", 30.0), ("a", 1.0), ("b", 2.0)]
    assert [var.name for var in table] == ["c", "a", "b"]
