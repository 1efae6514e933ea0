# -*- coding: utf-8 -*-

from operator import mul
from functools import partial

from ..it import values, map, filter, spread, df, find, some, every
from ..adapters import pairs, ipairs, unpairs, fromiter
from ..funutil import Values
from ..step import KeepReplaced, Drop
from ..misc import CountingStep

def test():
    double = partial(mul, 2)

    assert spread(map(double, values(20, 4, 18, 6))) == (40, 8, 36, 12)

    # values: tuple -> iterator
    it = values(1, 2, 3)
    assert it() == 1
    assert it() == 2
    assert it() == 3
    assert it() is None
    assert it() is None  # and so on, forever

    for T in ((), (1,), (1, 2, 3), ("a", (1, 2), 3.0)):
        assert spread(values(*T)) == T

    # a None in the middle is captured, but reads as exhaustion downstream
    it = values(1, None, 3)
    assert it() == 1
    assert it() is None
    assert it() == 3
    assert spread(values(1, None, 3)) == (1,)

    # a captured Values is several values; a tuple is one value
    assert spread(values(Values(1, 2))) == (1,)
    assert values(Values(1, 2))() == Values(1, 2)
    assert spread(values((1, 2))) == ((1, 2),)

    # map is lazy
    counted = CountingStep(values(1, 2, 3))
    m = map(double, counted)
    assert counted.count == 0
    assert m() == 2
    assert counted.count == 1
    assert m() == 4
    assert counted.count == 2

    # a transform that returns nothing skips the element
    def halve_evens(x):
        if x % 2 == 0:
            return x // 2
    counted = CountingStep(values(1, 3, 4, 5, 7, 8, 9))
    m = map(halve_evens, counted)
    assert m() == 2
    assert counted.count == 3
    assert m() == 4
    assert counted.count == 6
    assert m() is None
    assert counted.count == 8
    assert m() is None  # exhausted; the source is not pulled again
    assert counted.count == 8

    # long runs of skipped elements don't grow the call stack
    assert map(lambda x: None, fromiter(range(100000)))() is None
    assert spread(fromiter(range(100000))) == tuple(range(100000))

    # a result with None in first position also counts as nothing
    assert spread(map(lambda x: Values(None, x), values(1, 2, 3))) == ()

    # multiple values in, multiple values out
    assert unpairs(map(lambda k, v: Values(v, k), *pairs({"a": 1, "b": 2}))) == {1: "a", 2: "b"}

    # a lazy iterator function is itself a valid step
    assert spread(map(double, map(double, values(1, 2, 3)))) == (4, 8, 12)
    assert spread(map(double, filter(lambda x: x % 2, values(1, 2, 3, 4, 5)))) == (2, 6, 10)

    # map as filter over a container
    d = {"foo": 45, "bar": 7, 1: 1, 2: 2}
    def strkeys(k, v):
        if isinstance(k, str):
            return Values(k, v)
    assert unpairs(map(strkeys, *pairs(d))) == {"foo": 45, "bar": 7}

    # filter
    assert unpairs(filter(lambda k, v: isinstance(k, str), *pairs(d))) == {"foo": 45, "bar": 7}

    src = tuple(range(1, 20))
    assert spread(filter(lambda x: x % 3 == 0, values(*src))) == tuple(x for x in src if x % 3 == 0)
    assert spread(filter(lambda x: False, values(*src))) == ()
    assert spread(filter(lambda x: True, values())) == ()

    # the predicate's second value replaces the element
    people = {"Alice": 123, "Bob": 456, "Anna": 789}
    phones = filter(lambda name, phone: Values(name.startswith("A"), phone), *pairs(people))
    assert spread(phones) == (123, 789)
    # ...unless it is None
    assert spread(filter(lambda x: Values(True, None), values(1, 2))) == (1, 2)
    # only one replacement value is honored
    assert spread(filter(lambda x: Values(True, x * 10, "ignored"), values(1, 2))) == (10, 20)
    # a predicate may also return a verdict directly
    assert spread(filter(lambda x: KeepReplaced(x * 10) if x > 1 else Drop, values(1, 2, 3))) == (20, 30)

    # df: drop-first
    dropped = df(*ipairs((10, 20, 30)))
    assert dropped() == 10
    assert dropped() == 20
    assert dropped() == 30
    assert dropped() is None
    assert spread(df(*ipairs((10, 20, 30)))) == (10, 20, 30)

    def triples(seq, i):
        i += 1
        if i < len(seq):
            a, b = seq[i]
            return Values(i, a, b)
    dropped = df(triples, (("a", 1), ("b", 2)), -1)
    assert dropped() == Values("a", 1)
    assert dropped() == Values("b", 2)
    assert dropped() is None

    t = ipairs((1,))
    counted = CountingStep(t.step)
    dropped = df(counted, t.invariant, t.control)
    assert dropped() == 1
    assert dropped() is None
    assert dropped() is None
    assert counted.count == 2

    # find
    assert find(lambda x: x > 2, values(1, 2, 3, 4)) == 3
    assert find(lambda x: x > 10, values(1, 2, 3)) is None
    assert find(lambda x: True, values()) is None
    assert find(lambda k, v: v == 7, *pairs(d)) == Values("bar", 7)
    assert find(lambda k, v: Values(v == 7, k), *pairs(d)) == "bar"

    counted = CountingStep(values(1, 2, 3, 4))
    assert find(lambda x: x == 2, counted) == 2
    assert counted.count == 2

    is_quad = lambda x: x % 4 == 0  # noqa: E731
    assert find(is_quad, values(*src)) == spread(filter(is_quad, values(*src)))[0]

    cards = ({"suit": "Spades", "rank": 1},
             {"suit": "Hearts", "rank": 7},
             {"suit": "Hearts", "rank": 2})
    assert find(lambda card: card["suit"] == "Hearts", df(*ipairs(cards))) is cards[1]

    # some
    assert some(lambda x: x > 2, values(1, 2, 3)) is True
    assert some(lambda x: x > 5, values(1, 2, 3)) is False
    assert some(lambda x: True, values()) is False
    counted = CountingStep(values(1, 2, 3, 4))
    assert some(lambda x: x == 2, counted)
    assert counted.count == 2

    # every
    assert every(lambda x: x > 0, values(1, 2, 3)) is True
    assert every(lambda x: x > 1, values(1, 2, 3)) is False
    assert every(lambda x: False, values()) is True
    counted = CountingStep(values(1, 2, 3, 4))
    assert not every(lambda x: x < 2, counted)
    assert counted.count == 2
    counted = CountingStep(values(1, 2, 3))
    assert every(lambda x: x < 10, counted)
    assert counted.count == 4  # three elements, then the exhaustion check

    # a predicate returning Values is read by its first value
    assert some(lambda x: Values(False), values(1, 2)) is False
    assert some(lambda x: Values(x == 2, "ignored"), values(1, 2)) is True
    assert some(lambda x: Values(), values(1, 2)) is False
    assert every(lambda x: Values(True), values(1, 2)) is True
    assert every(lambda x: Values(False), values(1, 2)) is False
    assert every(lambda x: Values(x < 2, "ignored"), values(1, 2)) is False

    players = ({"name": "A", "seated": True}, {"name": "B", "seated": True})
    assert every(lambda p: p["seated"], df(*ipairs(players)))

    # misuse is caught at the call site, not on first pull
    for combinator in (map, filter, find, some, every):
        try:
            combinator(42, values(1))
        except TypeError:
            pass
        else:
            assert False, combinator
    for combinator in (map, filter, find, some, every):
        try:
            combinator(double, 42)
        except TypeError:
            pass
        else:
            assert False, combinator
    for combinator in (spread, df):
        try:
            combinator("not a function")
        except TypeError:
            pass
        else:
            assert False, combinator

    # errors in user code propagate
    def boom(x):
        raise ValueError("boom")
    m = map(boom, values(1))
    try:
        m()
    except ValueError:
        pass
    else:
        assert False

    print("All tests PASSED")

if __name__ == '__main__':
    test()
