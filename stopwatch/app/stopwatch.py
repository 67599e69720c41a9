import logging
from types import TracebackType

from stopwatch.app.clock import Clock, MonotonicClock
from stopwatch.app.stopwatch_types import TimeSpan

log = logging.getLogger(__name__)


class Stopwatch:
    """
    Measures elapsed time as an ordered list of spans. Only the last span may be
    open, and the stopwatch is running exactly when it is.

    [start]...[split]...[split]...[stop]   [start]...[split]
    elapsed = sum of every span, the open one measured up to now
    """

    def __init__(self, clock: Clock | None = None):
        self._clock = clock if clock is not None else MonotonicClock()
        self._spans: list[TimeSpan] = []

    @property
    def spans(self) -> list[TimeSpan]:
        """
        The recorded spans in chronological order. This is the live list, so
        clearing it resets the stopwatch. Measure an open span with
        `span.duration(stopwatch.now())` to stay on this stopwatch's clock.
        """
        return self._spans

    def now(self) -> float:
        return self._clock.now()

    def is_running(self) -> bool:
        return bool(self._spans) and self._spans[-1].is_open

    def start(self) -> TimeSpan | None:
        """
        Open a new span. When already running the current span is closed at the
        same instant and returned, so repeated starts record consecutive splits.
        """
        now = self._clock.now()
        closed = self._close_last(now)
        self._spans.append(TimeSpan(start=now))
        log.debug("Opened span %d at %s", len(self._spans), now)
        return closed

    def stop(self) -> TimeSpan | None:
        """Close the running span and return it. Does nothing when idle."""
        return self._close_last(self._clock.now())

    def split(self) -> float:
        """
        Record a lap and return its duration in seconds. Returns 0.0 without
        recording anything when the stopwatch is not running.
        """
        if not self.is_running():
            return 0.0
        closed = self.start()
        return closed.duration()

    def reset(self) -> None:
        log.debug("Reset after %d spans", len(self._spans))
        self._spans.clear()

    def restart(self) -> None:
        self.reset()
        self.start()

    def elapsed(self) -> float:
        now = self._clock.now()
        return sum((span.duration(now) for span in self._spans), 0.0)

    def laps(self) -> list[float]:
        now = self._clock.now()
        return [span.duration(now) for span in self._spans]

    def current_lap(self) -> float:
        """Seconds since the last split or start, or of the final lap once stopped."""
        if not self._spans:
            return 0.0
        return self._spans[-1].duration(self._clock.now())

    def _close_last(self, now: float) -> TimeSpan | None:
        if not self.is_running():
            return None
        closed = self._spans[-1].closed_at(now)
        self._spans[-1] = closed
        log.debug("Closed span %d after %ss", len(self._spans), closed.duration())
        return closed

    def __enter__(self) -> "Stopwatch":
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.stop()

    def __str__(self) -> str:
        # Nanosecond precision, never exponent notation
        seconds = f"{self.elapsed():.9f}".rstrip("0")
        if seconds.endswith("."):
            seconds += "0"
        return f"{seconds}s"

    def __repr__(self) -> str:
        return (
            f"Stopwatch(running={self.is_running()}, spans={len(self._spans)}, "
            f"elapsed={self.elapsed()})"
        )
