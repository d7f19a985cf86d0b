import pytest

from bytefmt import Bytes

DEFAULT = ["B", "K", "M", "G", "T", "P", "E"]

testdata = [
    (["B", "K", "M", "G", "T", "P", "E"], DEFAULT),
    ([], DEFAULT),
    (["B"], DEFAULT),
    (["B", "K"], DEFAULT),
    (["B", "Kilobyte"], ["B", "Kilobyte", "M", "G", "T", "P", "E"]),
    (
        ["B", "K", "M", "G", "T", "P", "E", "Zettabyte"],
        ["B", "K", "M", "G", "T", "P", "E", "Zettabyte"],
    ),
]


@pytest.mark.parametrize("names, expected", testdata)
def test_initialize(names, expected):
    """Names given to the constructor are backfilled from defaults"""

    assert Bytes(0, *names).names() == expected


@pytest.mark.parametrize("names, expected", testdata)
def test_update(names, expected):
    """Names set later are backfilled from defaults"""

    b = Bytes(0)
    assert b.names(*names) == expected
    assert b.names() == expected


def test_update_keeps_table():
    """Calling names() without arguments does not reset the table"""

    b = Bytes(1124, "B", "Kilobyte")
    b.names()
    assert b.unit == "Kilobyte"
    b.names("b", "k")
    assert b.names() == ["b", "k", "M", "G", "T", "P", "E"]
    assert str(b) == "1.09765625k"


def test_no_validation():
    """Names are used verbatim"""

    b = Bytes(1024, "", "", "")
    assert b.names() == ["", "", "", "G", "T", "P", "E"]
    assert str(b) == "1"


def test_returns_copy():
    """Changing the returned list does not change the table"""

    b = Bytes(1024)
    names = b.names()
    names[1] = "X"
    assert b.unit == "K"


def test_with_names():
    """with_names returns a new value and leaves the original alone"""

    b = Bytes(1124)
    c = b.with_names("B", "Kilobyte")
    assert c is not b
    assert c.value == b.value
    assert c.unit == "Kilobyte"
    assert b.unit == "K"
    assert c == Bytes(1124, "B", "Kilobyte")
    assert c != b


def test_with_names_keeps_table():
    """with_names without arguments keeps the current names"""

    b = Bytes(1124, "B", "Kilobyte")
    c = b.with_names()
    assert c is not b
    assert c.names() == ["B", "Kilobyte", "M", "G", "T", "P", "E"]
    assert c.unit == "Kilobyte"
