import pytest

from bytefmt import Bytes, Directive, DirectiveError, UnsupportedVerbError, Verb

testdata = [
    ("%v", Directive()),
    ("%d", Directive(Verb.INTEGER)),
    ("%+d", Directive("d", plus=True)),
    ("% 2d", Directive("d", space=True, width=2)),
    ("%-011v", Directive("v", minus=True, width=11)),
    ("%06.1f", Directive("f", zero=True, width=6, precision=1)),
    ("%#q", Directive("q", sharp=True)),
    ("%.f", Directive("f", precision=0)),
    ("%+- #010.3s", Directive("s", plus=True, minus=True, sharp=True, space=True, width=10, precision=3)),
]


@pytest.mark.parametrize("text, expected", testdata)
def test_parse(text, expected):
    """Flags, width, precision and verb are read from the text"""

    assert Directive.parse(text) == expected


def test_fields():
    d = Directive.parse("% 010.3f")
    assert d.verb is Verb.FLOAT
    assert d.space
    assert d.zero
    assert not d.plus
    assert d.width == 10
    assert d.precision == 3
    d = Directive.parse("%s")
    assert d.width is None
    assert d.precision is None


def test_minus_clears_zero():
    """Zero padding is only to the left"""

    assert not Directive("d", minus=True, zero=True).zero
    assert not Directive.parse("%0-5d").zero


def test_str():
    assert str(Directive.parse("%-03v")) == "%-3v"
    assert str(Directive("f", plus=True, space=True, width=2, precision=1)) == "%+ 2.1f"
    assert repr(Directive("d")) == "Directive.parse('%d')"


def test_from_spec():
    """Without verb the general verb is used"""

    assert Directive.from_spec("") == Directive()
    assert Directive.from_spec("10") == Directive(width=10)
    assert Directive.from_spec("+.2d") == Directive("d", plus=True, precision=2)


def test_hashable():
    assert len({Directive.parse("%v"), Directive(), Directive("d")}) == 2


@pytest.mark.parametrize("text", ["%x", "%e", "%%", "%5.2g", "%X"])
def test_unsupported_verb(text):
    """Unknown verbs fail"""

    with pytest.raises(UnsupportedVerbError) as e:
        Directive.parse(text)
    assert e.value.verb == text[-1]
    with pytest.raises(UnsupportedVerbError):
        Bytes(1024).format(text)
    with pytest.raises(UnsupportedVerbError):
        format(Bytes(1024), text[1:])


def test_unsupported_verb_object():
    with pytest.raises(UnsupportedVerbError):
        Directive("x")


@pytest.mark.parametrize("text", ["d", "", "%", "%5", "%5.2dx", "%dd", "v%"])
def test_malformed(text):
    """Directive text must be a single complete conversion"""

    with pytest.raises(DirectiveError):
        Directive.parse(text)


def test_negative():
    with pytest.raises(DirectiveError):
        Directive(width=-1)
    with pytest.raises(DirectiveError):
        Directive(precision=-3)


def test_errors_are_value_errors():
    """Directive errors can be caught as ValueError"""

    assert issubclass(DirectiveError, ValueError)
    assert issubclass(UnsupportedVerbError, DirectiveError)
    with pytest.raises(ValueError):
        f"{Bytes(1):y}"
