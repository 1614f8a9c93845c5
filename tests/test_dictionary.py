import numpy as np
import pytest

from linear_dict.core.exceptions import KeyNotFoundError, LengthMismatchError
from linear_dict.dictionary import DictEntry, Dictionary


@pytest.fixture
def abc():
    d = Dictionary()
    d.put("a", 1)
    d.put("b", 2)
    d.put("c", 3)
    return d


def test_empty_dictionary():
    d = Dictionary()
    assert len(d) == 0
    assert d.keys == []
    assert d.values == []
    assert d.get("a") is None
    assert "a" not in d


def test_put_then_get(abc):
    assert abc.get("a") == 1
    assert abc.get("b") == 2
    assert abc.get("c") == 3
    assert abc.get("d") is None


def test_update_existing_key(abc):
    abc.put("a", 4)
    assert abc.get("a") == 4
    # not added as a new key
    assert len(abc) == 3
    assert len(abc.values) == 3
    assert abc.get("b") == 2
    assert abc.get("c") == 3
    assert abc.get("d") is None


def test_add_after_update(abc):
    abc.put("a", 4)
    abc.put("d", 5)
    assert abc.get("a") == 4
    assert abc.get("b") == 2
    assert abc.get("c") == 3
    assert abc.get("d") == 5
    assert abc.get("e") is None
    assert len(abc) == 4


def test_insertion_order_preserved(abc):
    abc.put("b", 20)
    abc.put("z", 26)
    assert abc.keys == ["a", "b", "c", "z"]
    assert abc.values == [1, 20, 3, 26]


def test_repeated_put_keeps_one_entry():
    d = Dictionary()
    for i in range(10):
        d.put("k", i)
    assert len(d) == 1
    assert d.get("k") == 9


def test_last_put_wins_for_every_key():
    pairs = [("x", 1), ("y", 2), ("x", 3), ("z", 4), ("y", 5), ("x", 6)]
    d = Dictionary()
    expected = {}
    for key, value in pairs:
        d.put(key, value)
        expected[key] = value
    for key, value in expected.items():
        assert d.get(key) == value
    assert len(d) == len(expected)
    assert d.get("never") is None


def test_get_default(abc):
    assert abc.get("missing", 0) == 0
    assert abc.get("a", 0) == 1


def test_none_value_is_not_absence():
    d = Dictionary()
    d.put("nothing", None)
    assert d.get("nothing", "fallback") is None
    assert "nothing" in d
    assert d.find_entry("nothing") == DictEntry("nothing", None, 0)
    assert d.find_entry("other") is None


def test_find_entry_reports_index(abc):
    entry = abc.find_entry("c")
    assert entry.key == "c"
    assert entry.value == 3
    assert entry.index == 2


def test_require(abc):
    assert abc.require("b") == 2
    with pytest.raises(KeyNotFoundError):
        abc.require("d")
    with pytest.raises(KeyError):
        abc.require("d")


def test_keys_compared_by_equality():
    d = Dictionary()
    d.put((1, 2), "first")
    d.put((1, 2), "second")
    d.put(1, "int")
    d.put(1.0, "float")
    assert len(d) == 2
    assert d.get((1, 2)) == "second"
    assert d.get(1) == "float"


def test_from_sequences():
    d = Dictionary.from_sequences(["a", "b", "a"], [1, 2, 3])
    assert d.keys == ["a", "b"]
    assert d.get("a") == 3
    assert d.get("b") == 2


def test_from_sequences_length_mismatch():
    with pytest.raises(LengthMismatchError):
        Dictionary.from_sequences(["a", "b"], [1])


def test_repr(abc):
    assert repr(abc) == "Dictionary({'a': 1, 'b': 2, 'c': 3})"
    assert repr(Dictionary()) == "Dictionary({})"

def test_numpy_scalar_keys_match_plain_numbers():
    d = Dictionary()
    d.put(np.int64(1), "one")
    d.put(np.float64(2.0), "two")
    d.put(2, "deux")
    assert len(d) == 2
    assert d.get(1) == "one"
    assert d.get(2.0) == "deux"
