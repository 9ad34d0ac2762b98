from lazycons.lazylist import LazyList, Cons, NIL, EMPTY, deferred, from_iterable


def from_eager(seq):
    # Snapshot, so later changes to a mutable source don't leak in
    return from_iterable(tuple(seq))


def cons(head, tail=EMPTY):
    return LazyList.ready(Cons(head, deferred(tail)))


def iterate(step, seed):
    # seed, step(seed), step(step(seed)), ... until step returns None
    def cell(x):
        return Cons(x, LazyList(lambda: following(x)))

    def following(x):
        if (nxt := step(x)) is None:
            return NIL
        return cell(nxt)

    return LazyList.ready(cell(seed))


def unfold(step, state):
    def compute():
        if (result := step(state)) is None:
            return NIL
        value, following = result
        return Cons(value, unfold(step, following))
    return LazyList(compute)


def iterate_n(n, func, seed):
    # func is not applied past the last element
    def cell(n, x):
        tail = LazyList(lambda: cell(n - 1, func(x))) if n > 1 else EMPTY
        return Cons(x, tail)

    if n <= 0:
        return EMPTY
    return LazyList.ready(cell(n, seed))


def repeat(value):
    xs = LazyList(lambda: Cons(value, xs))
    return xs


def replicate(n, value):
    return repeat(value).take(n)


def cycle(xs):
    def compute():
        if not xs.force():
            return NIL
        return xs.concat(cycled).force()

    cycled = LazyList(compute)
    return cycled
