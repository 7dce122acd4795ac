import pytest

from wxcipher import catalog
from wxcipher.catalog import CATALOG, Category, Descriptor, descriptor_of, lookup, midpoint_temperature


def test_every_category_has_exactly_one_descriptor():
    assert set(CATALOG) == set(Category)


def test_keywords_are_unique_and_uppercase():
    keywords = [d.keyword for d in CATALOG.values()]
    assert len(set(keywords)) == len(keywords)
    assert all(k == k.upper() for k in keywords)


def test_lookup_accepts_wire_tokens_and_members():
    assert lookup("rain") is Category.RAIN
    assert lookup(Category.SNOW) is Category.SNOW
    assert lookup("fog") is None
    assert lookup("") is None


def test_descriptor_of_unknown_category_is_none():
    assert descriptor_of("fog") is None
    assert descriptor_of("storm").keyword == "ATTENTION"


@pytest.mark.parametrize(
    "token, expected",
    [("sun", 30), ("cloud", 20), ("rain", 15), ("storm", 23), ("snow", 0)],
)
def test_midpoints(token, expected):
    assert midpoint_temperature(token) == expected


def test_midpoint_of_unknown_category_uses_fallback():
    assert midpoint_temperature("fog") == 25
    assert midpoint_temperature("fog", 7) == 7


def test_midpoint_rounds_half_up(monkeypatch):
    monkeypatch.setitem(catalog.CATALOG, Category.SUN, Descriptor(21, 22, "X", "x"))
    monkeypatch.setitem(catalog.CATALOG, Category.SNOW, Descriptor(-3, -2, "Y", "y"))

    assert midpoint_temperature("sun") == 22
    assert midpoint_temperature("snow") == -2
