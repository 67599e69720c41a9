from pydantic import BaseModel, ConfigDict, model_validator

from stopwatch.app.clock import MonotonicClock

_default_clock = MonotonicClock()


class TimeSpan(BaseModel):
    """
    One contiguous interval of measured time. A span without a stop instant is
    open and still running.
    """

    model_config = ConfigDict(frozen=True)

    start: float
    stop: float | None = None

    @model_validator(mode="after")
    def _check_order(self) -> "TimeSpan":
        if self.stop is not None and self.stop < self.start:
            raise ValueError(f"stop {self.stop} is before start {self.start}")
        return self

    @property
    def is_open(self) -> bool:
        return self.stop is None

    @property
    def is_closed(self) -> bool:
        return self.stop is not None

    def duration(self, now: float | None = None) -> float:
        """
        Seconds covered by the span. An open span is measured up to `now`, which
        defaults to the current instant of the default monotonic clock, so
        repeated calls on an open span keep growing. Pass `now` explicitly when
        the span was recorded by a stopwatch with a different clock.
        """
        if self.stop is not None:
            return self.stop - self.start
        if now is None:
            now = _default_clock.now()
        return max(0.0, now - self.start)

    def closed_at(self, instant: float) -> "TimeSpan":
        if self.stop is not None:
            return self
        # Clock regressed
        if instant < self.start:
            instant = self.start
        return TimeSpan(start=self.start, stop=instant)
