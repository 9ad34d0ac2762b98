def _message(m):
    @classmethod
    def builder(cls, *args, **format_vars):
        return cls(m.format(**format_vars), *args)
    return builder

class LazyListError(Exception):
    pass


class EmptyListError(LazyListError, IndexError):
    empty = _message('{operation} of empty list')
    out_of_range = _message('list index {index} out of range')

class CyclicForceError(LazyListError, RuntimeError):
    # A suspension whose computation demands its own value, eg a list
    # defined in terms of itself without producing a head first
    reentered = _message('suspension forced while it was being evaluated')
