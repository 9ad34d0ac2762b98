import functools
import itertools
import operator

from lazycons.suspension import Suspension
from lazycons.capabilities import Monad, Alternative, Monoid, Traversable
from lazycons.errors import EmptyListError


class Nil:
    __slots__ = ()

    def __bool__(self):
        return False

    def __repr__(self):
        return 'Nil()'


NIL = Nil()


class Cons:
    # tail is a LazyList, ie a suspension of the next cell, so matching
    # on a Cons never forces anything
    __slots__ = 'head', 'tail'
    __match_args__ = 'head', 'tail'

    def __init__(self, head, tail):
        self.head = head
        self.tail = tail

    def __bool__(self):
        return True

    def __repr__(self):
        return f'Cons({self.head!r}, {self.tail!r})'



@functools.total_ordering
class LazyList(Suspension, Monad, Alternative, Monoid, Traversable):
    # A suspension of a Nil or Cons cell.  Operations return new, unforced
    # lists; cells are never modified, so lists freely share tails.

    __slots__ = ()

    @classmethod
    def pure(cls, value):
        return cls.ready(Cons(value, EMPTY))

    @classmethod
    def empty(cls):
        return EMPTY

    def uncons(self):
        if node := self.force():
            return node.head, node.tail
        return None

    def first(self, default=None):
        if node := self.force():
            return node.head
        return default

    @property
    def head(self):
        if node := self.force():
            return node.head
        raise EmptyListError.empty(operation='head')

    @property
    def tail(self):
        if node := self.force():
            return node.tail
        raise EmptyListError.empty(operation='tail')

    def take(self, n):
        def compute():
            if n <= 0:
                return NIL
            if node := self.force():
                return Cons(node.head, node.tail.take(n - 1))
            return NIL
        return LazyList(compute)

    def drop(self, n):
        def compute():
            xs = self
            for _ in range(n):
                if not (node := xs.force()):
                    return NIL
                xs = node.tail
            return xs.force()
        return LazyList(compute)

    def take_while(self, pred):
        def compute():
            node = self.force()
            if node and pred(node.head):
                return Cons(node.head, node.tail.take_while(pred))
            return NIL
        return LazyList(compute)

    def drop_while(self, pred):
        def compute():
            node = self.force()
            while node and pred(node.head):
                node = node.tail.force()
            return node
        return LazyList(compute)

    def filter(self, pred):
        def compute():
            node = self.force()
            while node and not pred(node.head):
                node = node.tail.force()
            if node:
                return Cons(node.head, node.tail.filter(pred))
            return NIL
        return LazyList(compute)

    def map_maybe(self, func):
        def compute():
            node = self.force()
            while node:
                if (value := func(node.head)) is not None:
                    return Cons(value, node.tail.map_maybe(func))
                node = node.tail.force()
            return NIL
        return LazyList(compute)

    def fmap(self, func):
        def compute():
            if node := self.force():
                return Cons(func(node.head), node.tail.fmap(func))
            return NIL
        return LazyList(compute)

    map = fmap

    def zip_with(self, func, other):
        def compute():
            if not (a := self.force()):
                return NIL
            if not (b := other.force()):
                return NIL
            return Cons(func(a.head, b.head), a.tail.zip_with(func, b.tail))
        return LazyList(compute)

    def zip(self, other):
        return self.zip_with(lambda a, b: (a, b), other)

    def concat(self, other):
        return _Append(self, deferred(other))

    def or_else(self, other):
        return self.concat(other)

    def bind(self, func):
        def compute():
            node = self.force()
            # Skip over elements whose result is empty without recursing
            while node:
                if inner := func(node.head).force():
                    rest = node.tail.bind(func)
                    return Cons(inner.head, inner.tail.concat(rest))
                node = node.tail.force()
            return NIL
        return LazyList(compute)

    def foldr(self, op, init):
        if node := self.force():
            rest = node.tail
            return op(node.head, Suspension(lambda: rest.foldr(op, init)))
        return init

    def foldl(self, op, init):
        acc = init
        for x in self:
            acc = op(acc, x)
        return acc

    def any(self, pred=bool):
        return any(map(pred, self))

    def all(self, pred=bool):
        return all(map(pred, self))

    # Static so the generator doesn't hold on to the list it started
    # from, otherwise every visited cell would stay reachable until the
    # iteration finished.
    @staticmethod
    def _iter(xs):
        node = xs.force()
        del xs
        while node:
            yield node.head
            node = node.tail.force()

    def __iter__(self):
        return self._iter(self)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return from_iterable(
                itertools.islice(self, index.start, index.stop, index.step)
            )

        index = operator.index(index)
        if index < 0:
            raise IndexError('negative indices are not supported')
        if node := self.drop(index).force():
            return node.head
        raise EmptyListError.out_of_range(index=index)

    def __bool__(self):
        return bool(self.force())

    def __eq__(self, other):
        if not isinstance(other, LazyList):
            return NotImplemented

        a, b = self, other
        while a is not b:
            x, y = a.force(), b.force()
            if not (x and y):
                return not (x or y)
            if x.head != y.head:
                return False
            a, b = x.tail, y.tail
        return True

    def __lt__(self, other):
        if not isinstance(other, LazyList):
            return NotImplemented

        a, b = self, other
        while a is not b:
            x, y = a.force(), b.force()
            if not y:
                return False
            if not x:
                return True
            if x.head != y.head:
                return x.head < y.head
            a, b = x.tail, y.tail
        return False

    def __hash__(self):
        return hash(tuple(self))

    def __str__(self):
        return '[' + ', '.join(map(repr, self)) + ']'

    def __repr__(self):
        # Only shows what has already been evaluated
        parts = []
        seen = set()
        xs = self
        while xs.evaluated and not xs.failed and id(xs) not in seen:
            seen.add(id(xs))
            if not (node := xs.force()):
                return f'LazyList([{", ".join(parts)}])'
            parts.append(repr(node.head))
            xs = node.tail
        parts.append('...')
        return f'LazyList([{", ".join(parts)}])'


EMPTY = LazyList.ready(NIL)


class _Append(LazyList):
    # left ++ right.  Chains built by appending to the end, eg
    # ((a ++ b) ++ c) ++ d, are unwound with a loop when forced rather
    # than forcing each pending append in turn, which would recurse once
    # per level.
    __slots__ = 'left', 'right'

    def __init__(self, left, right):
        super().__init__(self._unwind)
        self.left = left
        self.right = right

    def _unwind(self):
        # Lists still to come, next one on top
        parts = [self.right]
        xs = self.left
        while True:
            while isinstance(xs, _Append) and not xs.evaluated:
                parts.append(xs.right)
                xs = xs.left
            if node := xs.force():
                break
            if not parts:
                return NIL
            xs = parts.pop()

        if not parts:
            return node

        rest = parts[0]
        for part in parts[1:]:
            rest = _Append(part, rest)
        return Cons(node.head, _Append(node.tail, rest))


def deferred(xs):
    # A callable stands in for a list that can only be built on demand,
    # eg one that refers to itself
    if isinstance(xs, LazyList):
        return xs
    if callable(xs):
        return LazyList(lambda: xs().force())
    raise TypeError(f'expected a LazyList or a callable, got {type(xs).__name__}')


def concat(a, b):
    return a.concat(b)


def from_iterable(iterable):
    # Each element is pulled once, when its cell is first forced
    iterator = iter(iterable)

    def pull():
        try:
            head = next(iterator)
        except StopIteration:
            return NIL
        return Cons(head, LazyList(pull))

    return LazyList(pull)
