import pytest

from pwgen.alphabet import Alphabet
from pwgen.generator import generate


def test_size():
    abc = Alphabet("ABCD")
    assert len(abc) == 4
    assert abc.size == 4


def test_symbols_keep_order():
    assert Alphabet("ABCD").symbols == ("A", "B", "C", "D")
    assert list(Alphabet("DCBA")) == ["D", "C", "B", "A"]


def test_duplicates_are_kept():
    abc = Alphabet("AAB")
    assert len(abc) == 3
    assert abc.symbols == ("A", "A", "B")


def test_symbol_at():
    abc = Alphabet("ABCD")
    assert abc.symbol_at(0) == "A"
    assert abc.symbol_at(3) == "D"
    assert abc[1] == "B"


@pytest.mark.parametrize("index", [4, 100, -1])
def test_symbol_at_out_of_bounds(index):
    with pytest.raises(IndexError):
        Alphabet("ABCD").symbol_at(index)


def test_empty_alphabet_can_be_constructed():
    abc = Alphabet("")
    assert len(abc) == 0
    with pytest.raises(IndexError):
        abc.symbol_at(0)


def test_default_alphabet_is_alphanumeric():
    abc = Alphabet()
    assert len(abc) == 62
    assert "a" in abc and "Z" in abc and "7" in abc
    assert "!" not in abc


def test_symbols_are_read_only():
    abc = Alphabet("AB")
    with pytest.raises(AttributeError):
        abc.symbols = ("C",)
    with pytest.raises(AttributeError):
        abc.extra = 1


def test_value_semantics():
    assert Alphabet("AB") == Alphabet(["A", "B"])
    assert Alphabet("AB") != Alphabet("BA")
    assert len({Alphabet("AB"), Alphabet("AB")}) == 1


def test_repr_truncates_long_alphabets():
    assert repr(Alphabet("AB")) == "Alphabet('AB', size=2)"
    assert repr(Alphabet("ABCDEFGHIJKL")) == "Alphabet('ABCDEFGHIJ...', size=12)"


@pytest.mark.parametrize("source", [["AB"], ["", ""], ["A", "BC"], [1, 2]])
def test_symbols_must_be_single_characters(source):
    with pytest.raises(ValueError):
        Alphabet(source)


def test_single_character_symbols_keep_password_length():
    password = generate(2, [Alphabet(["A", "B"]), Alphabet("1")])
    assert len(password) == 2
