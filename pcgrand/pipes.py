from abc import ABC, abstractmethod
from typing import Any, TypeVar, Generic, List

_T_in = TypeVar("_T_in", bound=Any, contravariant=True)

class Sink(ABC, Generic[_T_in]):
    """A pipe that writes items."""

    @abstractmethod
    def write(self, item: _T_in) -> None:
        """Write the item."""
        ...

class NullSink(Sink[Any]):
    """A sink which does nothing with written items."""
    def write(self, item: Any) -> None:
        pass

class ConsoleSink(Sink[Any]):
    """A sink which prints written items to console."""

    def write(self, item: Any) -> None:
        print(item)

class ListSink(Sink[Any]):
    """A sink which appends written items to a list."""

    def __init__(self, items: List[Any] = None) -> None:
        """Instantiate a ListSink.

        Args:
            items: The list we wish to write to.
        """
        self.items = items if items is not None else []

    def write(self, item: Any) -> None:
        self.items.append(item)
