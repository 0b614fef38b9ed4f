# result-kind values for computations that may fail.
# a memoizer caches Ok and Err alike; deciding what to do with an Err is up to the caller.

from typing import Any, Callable, Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


class UnwrapError(Exception):
    def __init__(self, error):
        super(UnwrapError, self).__init__("called unwrap() on Err(%r)" % (error, ))
        self.error = error


class Ok(Generic[T]):
    __slots__ = ("value", )

    def __init__(self, value: T):
        self.value = value

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or_else(self, fn: Callable[[Any], T]) -> T:
        return self.value

    def __eq__(self, other) -> bool:
        return isinstance(other, Ok) and self.value == other.value

    def __hash__(self) -> int:
        return hash(("Ok", self.value))

    def __repr__(self) -> str:
        return "Ok(%r)" % (self.value, )


class Err(Generic[E]):
    __slots__ = ("error", )

    def __init__(self, error: E):
        self.error = error

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self):
        raise UnwrapError(self.error)

    def unwrap_or_else(self, fn: Callable[[E], Any]):
        return fn(self.error)

    def __eq__(self, other) -> bool:
        return isinstance(other, Err) and self.error == other.error

    def __hash__(self) -> int:
        return hash(("Err", self.error))

    def __repr__(self) -> str:
        return "Err(%r)" % (self.error, )


Outcome = Union[Ok[T], Err[E]]
