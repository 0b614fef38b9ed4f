from typing import Any, Callable

# marks the slot as empty. None is a legitimate computation result.
_EMPTY = object()


class SingleSlotMemoizer:
    """Caches the first result of the computation and nothing else.

    Once the slot is populated, value() returns the stored result whatever
    argument it is given. Use KeyedMemoizer or GenericMemoizer when results
    depend on the argument.
    """

    def __init__(self, computation: Callable[[Any], Any]):
        self.computation = computation
        self._slot = _EMPTY

    @property
    def is_populated(self) -> bool:
        return self._slot is not _EMPTY

    def value(self, arg):
        if self._slot is _EMPTY:
            self._slot = self.computation(arg)
        # the argument is ignored from here on
        return self._slot
