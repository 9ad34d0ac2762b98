import threading

from lazycons.errors import CyclicForceError


# Sentinel placed in _compute while the computation is running, so that a
# computation forcing its own suspension can be told apart from a
# concurrent forcer waiting on the lock.
_RUNNING = object()


class Suspension:
    # Evaluated at most once.  An Exception from the computation is cached
    # and re-raised by every later force(); KeyboardInterrupt and friends
    # are not, the suspension goes back to pending.  Forcing a pending
    # suspension holds its lock, so racing threads all see one result.

    __slots__ = '_compute', '_value', '_error', '_lock'

    def __init__(self, compute):
        self._compute = compute
        self._value = None
        self._error = None
        self._lock = threading.RLock()

    @classmethod
    def ready(cls, value):
        self = cls.__new__(cls)
        self._compute = None
        self._value = value
        self._error = None
        self._lock = None
        return self

    @property
    def evaluated(self):
        return self._compute is None

    @property
    def failed(self):
        return self._error is not None

    def _result(self):
        if self._error is not None:
            raise self._error
        return self._value

    def force(self):
        if self._compute is None:
            return self._result()

        lock = self._lock
        if lock is None:
            # Published by another thread between the two reads above
            return self._result()

        with lock:
            compute = self._compute
            if compute is None:
                return self._result()
            if compute is _RUNNING:
                raise CyclicForceError.reentered()

            self._compute = _RUNNING
            try:
                self._value = compute()
            except Exception as err:
                self._error = err
                self._compute = None
                raise
            except BaseException:
                self._compute = compute
                raise
            self._compute = None
            self._lock = None

        return self._value

    def __repr__(self):
        if self._compute is None:
            if self._error is not None:
                return f'<{type(self).__name__} failed: {self._error!r}>'
            return f'<{type(self).__name__} {self._value!r}>'
        return f'<{type(self).__name__} ...>'
