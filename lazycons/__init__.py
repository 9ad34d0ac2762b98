from .errors import LazyListError, EmptyListError, CyclicForceError
from .suspension import Suspension
from .capabilities import (
    Functor, Applicative, Monad, Alternative, Monoid, Foldable, Traversable
)
from .lazylist import LazyList, Nil, Cons, NIL, EMPTY, concat, deferred, from_iterable
from .construct import (
    from_eager, cons, iterate, unfold, iterate_n, repeat, replicate, cycle
)
