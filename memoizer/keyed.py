from typing import Callable, Dict


class KeyedMemoizer:
    """Caches one result per distinct integer argument."""

    def __init__(self, computation: Callable[[int], int]):
        self.computation = computation
        self.values: Dict[int, int] = {}

    def value(self, arg: int) -> int:
        if arg in self.values:  # cache hit
            return self.values[arg]
        v = self.computation(arg)
        self.values[arg] = v
        return v

    def __contains__(self, arg: int) -> bool:
        return arg in self.values

    def __len__(self) -> int:
        return len(self.values)
