import math

from weekendtracer.interval import Interval


def test_default_is_degenerate_at_zero():
    assert Interval() == Interval(0.0, 0.0)
    assert Interval().size() == 0.0


def test_size():
    assert Interval(-1.0, 3.0).size() == 4.0


def test_contains_is_inclusive():
    i = Interval(0.0, 1.0)
    assert i.contains(0.0)
    assert i.contains(1.0)
    assert not i.contains(1.5)


def test_surrounds_is_exclusive():
    i = Interval(0.0, 1.0)
    assert not i.surrounds(0.0)
    assert not i.surrounds(1.0)
    assert i.surrounds(0.5)


def test_clamp():
    i = Interval(0.0, 0.999)
    assert i.clamp(-2.0) == 0.0
    assert i.clamp(5.0) == 0.999
    assert i.clamp(0.5) == 0.5


def test_expand_adds_delta_to_size():
    i = Interval(1.0, 2.0).expand(0.5)
    assert math.isclose(i.size(), 1.5)
    assert math.isclose(i.min + i.max, 3.0)


def test_union():
    u = Interval.union(Interval(0.0, 2.0), Interval(1.0, 5.0))
    assert u == Interval(0.0, 5.0)


def test_union_with_empty_is_identity():
    i = Interval(-3.0, 4.0)
    assert Interval.union(Interval.EMPTY, i) == i


def test_empty_and_universe():
    assert not Interval.EMPTY.contains(0.0)
    assert Interval.UNIVERSE.contains(1e300)
    assert Interval.UNIVERSE.size() == math.inf


def test_add_displacement():
    assert Interval(1.0, 2.0) + 3.0 == Interval(4.0, 5.0)
    assert 3.0 + Interval(1.0, 2.0) == Interval(4.0, 5.0)