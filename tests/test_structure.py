from lazycons import (
    Applicative, LazyList, EMPTY, from_eager, iterate, repeat, cons
)

import dataclasses as dc
from pytest import raises


def naturals():
    return iterate(lambda x: x + 1, 0)

def test_equality():
    assert from_eager([]) == from_eager([])
    assert not from_eager([1]) == from_eager([])
    assert from_eager([1]) != from_eager([])
    assert from_eager([1, 2]) == from_eager([1, 2])
    assert from_eager([1, 2]) != from_eager([1, 3])
    assert from_eager([1, 2]) != from_eager([1, 2, 3])

    # not equal to other kinds of sequence
    assert from_eager([1]) != [1]

def test_equality_short_circuits():
    # would never finish if either side were forced to the end
    assert naturals() != from_eager([0, 1, 5])
    assert naturals() != from_eager([0, 1, 2])

    ones = repeat(1)
    assert ones == ones

def test_equality_forcing():
    calls = []
    def step(x):
        calls.append(x)
        return x + 1

    assert iterate(step, 0) != from_eager([0, 7, 2, 3])
    assert calls == [0]

def test_ordering():
    assert from_eager([]) < from_eager([1])
    assert not from_eager([1]) < from_eager([])
    assert from_eager([1, 2]) < from_eager([1, 3])
    assert from_eager([1, 2]) < from_eager([1, 2, 0])
    assert from_eager([2]) > from_eager([1, 5])
    assert from_eager([1, 2]) <= from_eager([1, 2])
    assert from_eager([1, 2]) >= from_eager([1, 2])
    assert not from_eager([1, 2]) < from_eager([1, 2])
    assert from_eager([0, 1, 5]) > naturals()

    lists = [from_eager(xs) for xs in ([2], [1, 1], [], [1])]
    assert [xs.to_list() for xs in sorted(lists)] == [[], [1], [1, 1], [2]]

    with raises(TypeError): from_eager([1]) < [1]

def test_hash():
    assert hash(from_eager([1, 2])) == hash(from_eager([1, 2]))
    assert len({from_eager([1, 2]), from_eager([1, 2]), EMPTY}) == 2

def test_foldr():
    xs = from_eager([1, 2, 3])
    assert xs.foldr(lambda x, rest: [x] + rest.force(), []) == [1, 2, 3]
    assert xs.foldr(lambda x, rest: f'({x} {rest.force()})', 'nil') == '(1 (2 (3 nil)))'
    assert EMPTY.foldr(lambda x, rest: 1 / 0, 'init') == 'init'

def test_foldr_short_circuits():
    # rest is only forced when needed, so this works on an infinite list
    assert naturals().foldr(lambda x, rest: x > 5 or rest.force(), False)

    doubled = naturals().foldr(lambda x, rest: cons(x * 2, rest.force), EMPTY)
    assert doubled.take(3).to_list() == [0, 2, 4]

def test_foldl():
    xs = from_eager([1, 2, 3])
    assert xs.foldl(lambda acc, x: acc * 10 + x, 0) == 123
    assert xs.foldl(lambda acc, x: [x] + acc, []) == [3, 2, 1]
    assert EMPTY.foldl(lambda acc, x: 1 / 0, 'init') == 'init'

def test_to_list_and_length():
    assert from_eager([1, 2, 3]).to_list() == [1, 2, 3]
    assert from_eager([1, 2, 3]).length() == 3
    assert EMPTY.length() == 0

def test_is_empty():
    def boom():
        raise AssertionError('tail forced')

    assert EMPTY.is_empty()
    assert from_eager([]).is_empty()
    assert not cons(1, boom).is_empty()
    assert not naturals().is_empty()

def test_str():
    assert str(from_eager([1, 2, 3])) == '[1, 2, 3]'
    assert str(EMPTY) == '[]'
    assert str(from_eager(['a'])) == "['a']"
    assert str(naturals().take(2)) == '[0, 1]'

def test_repr_does_not_force():
    xs = from_eager([1, 2, 3])
    assert repr(xs) == 'LazyList([...])'

    xs.take(2).to_list()
    assert repr(xs) == 'LazyList([1, 2, ...])'

    xs.to_list()
    assert repr(xs) == 'LazyList([1, 2, 3])'
    assert repr(EMPTY) == 'LazyList([])'

def test_repr_cyclic():
    ones = repeat(1)
    ones.force()
    assert repr(ones) == 'LazyList([1, ...])'

def test_repr_failed():
    xs = from_eager([1, 0]).fmap(lambda x: 1 / x)
    with raises(ZeroDivisionError): xs.to_list()
    assert repr(xs) == 'LazyList([1.0, ...])'

def test_failure_memoized_in_list():
    calls = []
    def invert(x):
        calls.append(x)
        return 1 / x

    xs = from_eager([1, 0, 2]).fmap(invert)
    with raises(ZeroDivisionError) as first:
        xs.to_list()
    with raises(ZeroDivisionError) as second:
        xs.to_list()

    assert calls == [1, 0]
    assert first.value is second.value
    # the part before the failure is still usable
    assert xs.head == 1.0


@dc.dataclass
class Logged(Applicative):
    value: object
    log: tuple = ()

    @classmethod
    def pure(cls, value):
        return cls(value)

    def fmap(self, func):
        return Logged(func(self.value), self.log)

    def ap(self, values):
        return Logged(self.value(values.value), self.log + values.log)


def test_traverse():
    def noisy(x):
        return Logged(x * 2, (f'saw {x}',))

    assert from_eager([1, 2, 3]).traverse(noisy, Logged.pure) == Logged(
        [2, 4, 6], ('saw 1', 'saw 2', 'saw 3')
    )
    assert EMPTY.traverse(noisy, Logged.pure) == Logged([])

def test_traverse_is_strict():
    calls = []
    def noisy(x):
        calls.append(x)
        return Logged(x)

    naturals().take(4).traverse(noisy, Logged.pure)
    assert calls == [0, 1, 2, 3]

def test_sequence():
    effects = from_eager([Logged(1, ('a',)), Logged(2, ('b',))])
    assert effects.sequence(Logged.pure) == Logged([1, 2], ('a', 'b'))

def test_sequence_lists():
    # list of choices -> every combination, as eager lists
    choices = from_eager([from_eager([1, 2]), from_eager([3, 4])])
    assert choices.sequence(LazyList.pure).to_list() == [
        [1, 3], [1, 4], [2, 3], [2, 4]
    ]
    with_empty = from_eager([from_eager([1]), EMPTY])
    assert with_empty.sequence(LazyList.pure).to_list() == []
    assert EMPTY.sequence(LazyList.pure).to_list() == [[]]

def test_traverse_long_list():
    n = 2000
    assert from_eager(range(n)).traverse(LazyList.pure, LazyList.pure).to_list() == [
        list(range(n))
    ]
    effects = from_eager([LazyList.pure(i) for i in range(n)])
    assert effects.sequence(LazyList.pure).to_list() == [list(range(n))]

    logged = from_eager(range(n)).traverse(lambda x: Logged(x, (x,)), Logged.pure)
    assert logged == Logged(list(range(n)), tuple(range(n)))

def test_traverse_effect_order():
    # each half's effects stay in element order
    choices = from_eager([from_eager([1, 2]), from_eager([3]), from_eager([4, 5])])
    assert choices.sequence(LazyList.pure).to_list() == [
        [1, 3, 4], [1, 3, 5], [2, 3, 4], [2, 3, 5]
    ]

def test_is_empty_stops_at_first_element():
    calls = []
    def big(x):
        calls.append(x)
        return x > 3

    assert not naturals().filter(big).is_empty()
    # searching for the first element is all the work done
    assert calls == [0, 1, 2, 3, 4]
