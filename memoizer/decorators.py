# decorator forms of the memoizers.
# note that arguments are passed as is.

from functools import wraps
from typing import Callable, TypeVar

from memoizer.generic import GenericMemoizer
from memoizer.single_slot import SingleSlotMemoizer

V = TypeVar("V")


# keep the result of the first call and return it for every later call,
# whatever the arguments. meant for zero-argument lazy initializers.
def memorizer(f: Callable[..., V]) -> Callable[..., V]:
    slot = SingleSlotMemoizer(lambda args: f(*args))

    @wraps(f)
    def w(*args):
        return slot.value(args)
    w.memoizer = slot  # type: ignore
    return w


# one result per distinct argument tuple. arguments must be hashable.
def memoize_by_argument(f: Callable[..., V]) -> Callable[..., V]:
    cache = GenericMemoizer(lambda args: f(*args))

    @wraps(f)
    def w(*args):
        return cache.value(args)
    w.memoizer = cache  # type: ignore
    return w
