import pytest

from weatherkit.unsortedmap import UnsortedMap


def test_preserves_insertion_order():
    m = UnsortedMap([("b", 1), ("a", 2), ("c", 3)])
    assert list(m) == ["b", "a", "c"]
    assert list(m.values()) == [1, 2, 3]


def test_constructor_keeps_first_duplicate():
    m = UnsortedMap([("k", 1), ("k", 2)])
    assert len(m) == 1
    assert m["k"] == 1


def test_constructor_from_mapping():
    m = UnsortedMap({"x": 10, "y": 20})
    assert list(m.items()) == [("x", 10), ("y", 20)]


def test_insert_does_not_overwrite():
    m = UnsortedMap()
    assert m.insert("a", 1) == 0
    assert m.insert("b", 2) == 1
    assert m.insert("a", 99) == 0
    assert m.at("a") == 1


def test_setitem_overwrites_in_place():
    m = UnsortedMap([("a", 1), ("b", 2)])
    m["a"] = 5
    assert list(m.items()) == [("a", 5), ("b", 2)]
    m["c"] = 7
    assert list(m) == ["a", "b", "c"]


def test_at_missing_raises():
    m = UnsortedMap()
    with pytest.raises(KeyError):
        m.at("missing")
    with pytest.raises(KeyError):
        m["missing"]


def test_find_and_count():
    m = UnsortedMap([("a", 1), ("b", 2)])
    assert m.find("b") == 1
    assert m.find("z") is None
    assert m.count("a") == 1
    assert m.count("z") == 0
    assert "a" in m
    assert "z" not in m


def test_upper_bound():
    m = UnsortedMap([("a", 1), ("b", 2), ("c", 3)])
    assert m.upper_bound("a") == 1
    assert m.upper_bound("c") is None
    assert m.upper_bound("z") is None


def test_erase_and_delitem():
    m = UnsortedMap([("a", 1), ("b", 2)])
    assert m.erase("a") == 1
    assert m.erase("a") == 0
    assert list(m) == ["b"]
    del m["b"]
    assert len(m) == 0
    with pytest.raises(KeyError):
        del m["b"]


def test_unhashable_keys():
    m = UnsortedMap()
    m[[1, 2]] = "list"
    assert m.at([1, 2]) == "list"
    assert m.count([1, 2]) == 1


def test_swap():
    left = UnsortedMap([("a", 1)])
    right = UnsortedMap([("b", 2), ("c", 3)])
    left.swap(right)
    assert list(left.items()) == [("b", 2), ("c", 3)]
    assert list(right.items()) == [("a", 1)]


def test_mutablemapping_helpers():
    m = UnsortedMap([("a", 1)])
    assert m.get("a") == 1
    assert m.get("z", 0) == 0
    assert m.pop("a") == 1
    assert len(m) == 0