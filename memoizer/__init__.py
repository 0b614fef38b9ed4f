from .single_slot import SingleSlotMemoizer
from .keyed import KeyedMemoizer
from .generic import GenericMemoizer
from .outcome import Ok, Err, Outcome, UnwrapError
from .decorators import memorizer, memoize_by_argument

__all__ = [
    "SingleSlotMemoizer",
    "KeyedMemoizer",
    "GenericMemoizer",
    "Ok",
    "Err",
    "Outcome",
    "UnwrapError",
    "memorizer",
    "memoize_by_argument",
]
