from typing import Callable, Dict, Generic, Hashable, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class GenericMemoizer(Generic[K, V]):
    """Caches one result per distinct key for any computation K -> V.

    Keys are compared by value, so they must be hashable with value equality
    (int, str, bytes, tuples of those). The stored object is handed back as is
    on every hit; return immutable values if callers must not share state.

    Whatever the computation returns is cached, including an Err outcome.
    If the computation raises instead, the exception reaches the caller and
    the key stays unpopulated.
    """

    def __init__(self, computation: Callable[[K], V]):
        self.computation = computation
        self.values: Dict[K, V] = {}

    def value(self, arg: K) -> V:
        if arg in self.values:  # cache hit
            return self.values[arg]
        v = self.computation(arg)
        self.values[arg] = v
        return v

    def __contains__(self, arg: object) -> bool:
        return arg in self.values

    def __len__(self) -> int:
        return len(self.values)
