import pytest

from minischeme.elements import (
    Boolean,
    Element,
    Pair,
    SchemeError,
    boolean,
    empty,
    equal,
    make_list,
)


class _Atom(Element):
    def __init__(self, value):
        self.value = value

    def copy(self):
        return _Atom(self.value)

    def equals(self, other):
        return isinstance(other, _Atom) and other.value == self.value

    def __str__(self):
        return str(self.value)


def test_booleans_are_singletons():
    assert boolean(True) is Boolean(True)
    assert boolean(False) is Boolean(False)
    assert boolean(True).copy() is boolean(True)
    assert boolean(1).value is True
    assert boolean(0).value is False


def test_boolean_printing():
    assert str(boolean(True)) == "#t"
    assert str(boolean(False)) == "#f"


def test_boolean_equality():
    assert equal(boolean(True), boolean(True))
    assert not equal(boolean(True), boolean(False))
    assert not boolean(True).equals(_Atom(1))


def test_equal_with_none_is_false():
    assert not equal(None, boolean(True))
    assert not equal(boolean(True), None)
    assert not equal(None, None)


def test_empty_list_equals_false():
    assert equal(empty(), boolean(False))
    assert equal(boolean(False), empty())
    assert not equal(empty(), boolean(True))


def test_empty_list_is_unique():
    assert empty() is empty()
    assert empty().is_empty()
    assert empty().copy() is empty()
    assert str(empty()) == "()"
    assert empty().to_list() == []


def test_pair_with_none_members_is_not_empty():
    pair = Pair(None, None)
    assert not pair.is_empty()
    assert not equal(pair, empty())


def test_make_list_round_trip():
    items = [_Atom(1), _Atom(2), _Atom(3)]
    result = make_list(items)
    assert result.is_list()
    values = [item.value for item in result.to_list()]
    assert values == [1, 2, 3]
    assert [item.value for item in result] == [1, 2, 3]


def test_make_list_copies_items():
    atom = _Atom(5)
    result = make_list([atom])
    assert result.first is not atom
    assert equal(result.first, atom)


def test_pair_constructor_copies():
    atom = _Atom(7)
    pair = Pair(atom, empty())
    assert pair.first is not atom
    assert pair.second is empty()


def test_improper_list():
    pair = Pair(_Atom(1), _Atom(2))
    assert not pair.is_list()
    with pytest.raises(SchemeError):
        pair.to_list()


def test_copy_is_independent_and_equal():
    original = make_list([_Atom(1), make_list([_Atom(2)]), boolean(True)])
    duplicate = original.copy()
    assert duplicate is not original
    assert duplicate.first is not original.first
    assert equal(original, duplicate)
    assert str(original) == str(duplicate)


def test_copy_of_long_list():
    original = make_list(_Atom(i) for i in range(5000))
    duplicate = original.copy()
    assert len(duplicate.to_list()) == 5000
    assert equal(original, duplicate)


def test_pair_inequality():
    assert not equal(make_list([_Atom(1)]), make_list([_Atom(2)]))
    assert not equal(make_list([_Atom(1)]), make_list([_Atom(1), _Atom(2)]))
    assert not equal(make_list([_Atom(1)]), _Atom(1))


def test_nested_empty_and_false_equal():
    with_empty = Pair(_Atom(1), empty())
    with_false = Pair(_Atom(1), boolean(False))
    assert equal(with_empty, with_false)
    assert equal(make_list([empty()]), make_list([boolean(False)]))


def test_list_printing():
    assert str(make_list([boolean(True), boolean(False)])) == "(#t #f)"
    assert str(Pair(boolean(True), boolean(False))) == "(#t . #f)"


def test_nested_list_printing_matches_parts():
    inner = make_list([boolean(False)])
    outer = make_list([boolean(True), inner])
    assert str(outer) == "(" + str(boolean(True)) + " " + str(inner) + ")"


def test_iter_raises_on_improper_tail():
    pair = Pair(_Atom(1), Pair(_Atom(2), _Atom(3)))
    seen = []
    with pytest.raises(SchemeError):
        for item in pair:
            seen.append(item.value)
    assert seen == [1, 2]