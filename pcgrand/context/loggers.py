import time

from abc import abstractmethod, ABC
from contextlib import contextmanager, nullcontext
from typing import ContextManager, Iterator, Optional

from pcgrand.pipes import Sink, NullSink, ConsoleSink

class Logger(ABC):
    """The interface for a logger."""

    @property
    @abstractmethod
    def sink(self) -> Sink[str]:
        """The sink the logger writes to."""
        ...

    @sink.setter
    @abstractmethod
    def sink(self, sink: Sink[str]):
        ...

    @abstractmethod
    def log(self, message: str) -> 'ContextManager[Logger]':
        """Log a message to the sink.

        Args:
            message: The message that should be logged.

        Returns:
            A ContextManager that reports how the enclosed block ended.
        """
        ...

    @abstractmethod
    def time(self, message: str) -> 'ContextManager[Logger]':
        """Log a timed message to the sink.

        Args:
            message: The message that should be logged.

        Returns:
            A ContextManager that controls when timing stops.
        """
        ...

class NullLogger(Logger):
    """A logger which writes nothing."""

    def __init__(self, sink: Sink[str] = NullSink()) -> None:
        self._sink = sink

    @property
    def sink(self) -> Sink[str]:
        return self._sink

    @sink.setter
    def sink(self, sink: Sink[str]):
        self._sink = sink

    def log(self, message: str) -> 'ContextManager[Logger]':
        return nullcontext(self)

    def time(self, message: str) -> 'ContextManager[Logger]':
        return nullcontext(self)

class BasicLogger(Logger):
    """A Logger which writes one flat line per message.

    Remarks:
        When `log` or `time` is used as a context manager a second line is
        written as the block ends. It repeats the message and is tagged with
        the block's outcome: (completed), (exception) or (interrupt). Lines
        written by `time` also carry the elapsed seconds.
    """

    def __init__(self, sink: Sink[str] = ConsoleSink()):
        """Instantiate a BasicLogger.

        Args:
            sink: The sink to write to (by default console).
        """
        self._sink = sink

    @contextmanager
    def _outcome(self, message: str, start: Optional[float]) -> 'Iterator[Logger]':
        outcome = "(exception)"
        try:
            yield self
            outcome = "(completed)"
        except KeyboardInterrupt:
            outcome = "(interrupt)"
            raise
        finally:
            if start is not None:
                message = f"{message} ({round(time.perf_counter()-start,2)} seconds)"
            self._sink.write(f"{message} {outcome}")

    @property
    def sink(self) -> Sink[str]:
        return self._sink

    @sink.setter
    def sink(self, sink: Sink[str]):
        self._sink = sink

    def log(self, message: str) -> 'ContextManager[Logger]':
        self._sink.write(message)
        return self._outcome(message, None)

    def time(self, message: str) -> 'ContextManager[Logger]':
        self._sink.write(message)
        return self._outcome(message, time.perf_counter())
