# Flat capability interfaces: each names a few primitive methods and
# derives the rest from them.

import abc
import operator


def identity(x):
    return x


class Functor(abc.ABC):
    __slots__ = ()

    @abc.abstractmethod
    def fmap(self, func):
        pass


class Applicative(Functor):
    __slots__ = ()

    @classmethod
    @abc.abstractmethod
    def pure(cls, value):
        pass

    # Apply each function held by self to each of values
    @abc.abstractmethod
    def ap(self, values):
        pass

    def lift2(self, func, other):
        return self.fmap(lambda x: lambda y: func(x, y)).ap(other)


class Monad(Applicative):
    __slots__ = ()

    @abc.abstractmethod
    def bind(self, func):
        pass

    def ap(self, values):
        return self.bind(lambda func: values.fmap(func))

    def then(self, other):
        return self.bind(lambda _: other)

    def join(self):
        return self.bind(identity)


class Monoid(abc.ABC):
    __slots__ = ()

    @classmethod
    @abc.abstractmethod
    def empty(cls):
        pass

    @abc.abstractmethod
    def concat(self, other):
        pass

    def __add__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.concat(other)


class Alternative(Applicative):
    __slots__ = ()

    @classmethod
    @abc.abstractmethod
    def empty(cls):
        pass

    @abc.abstractmethod
    def or_else(self, other):
        pass


class Foldable(abc.ABC):
    __slots__ = ()

    # op(x, rest) where rest is a Suspension of the fold of everything
    # after x, op may return without forcing it
    @abc.abstractmethod
    def foldr(self, op, init):
        pass

    @abc.abstractmethod
    def foldl(self, op, init):
        pass

    def to_list(self):
        def push(acc, x):
            acc.append(x)
            return acc
        return self.foldl(push, [])

    def length(self):
        return self.foldl(lambda n, _: n + 1, 0)

    # Never looks past the first element, but producing that element can
    # still cost something, eg a filter searching for its first match.
    def is_empty(self):
        return self.foldr(lambda x, rest: False, True)


class Traversable(Functor, Foldable):
    __slots__ = ()

    # Strict: every func(x) is called, in order, before returning and the
    # values inside the effect are plain lists.  pure is the effect's own
    # constructor, only needed when there is nothing to traverse.
    def traverse(self, func, pure):
        effects = self.fmap(func).to_list()
        if not effects:
            return pure([])

        # Combined as a balanced tree so effects that nest on every lift2
        # (eg LazyList) only nest log(n) deep
        def combine(lo, hi):
            if hi - lo == 1:
                return effects[lo].fmap(lambda v: [v])
            mid = (lo + hi) // 2
            return combine(lo, mid).lift2(operator.add, combine(mid, hi))

        return combine(0, len(effects))

    def sequence(self, pure):
        return self.traverse(identity, pure)
