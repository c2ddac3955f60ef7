import time
from dataclasses import dataclass
from datetime import timedelta

NANOSECONDS_PER_SECOND = 1_000_000_000


def duration_to_nanoseconds(duration: timedelta) -> int:
    """Exact integer conversion of a timedelta to nanoseconds."""
    whole_seconds = duration.days * 86400 + duration.seconds
    return whole_seconds * NANOSECONDS_PER_SECOND + duration.microseconds * 1000


@dataclass(frozen=True, order=True)
class Timestamp:
    """
    Instante monotônico, armazenado em nanossegundos inteiros.

    A subtração de dois Timestamps gera um timedelta (que pode ser negativo);
    somar ou subtrair um timedelta gera um novo Timestamp.
    """

    nanoseconds: int = 0

    @classmethod
    def now(cls) -> "Timestamp":
        return cls(time.monotonic_ns())

    @classmethod
    def from_seconds(cls, seconds: float) -> "Timestamp":
        return cls(int(round(seconds * NANOSECONDS_PER_SECOND)))

    @classmethod
    def from_milliseconds(cls, milliseconds: float) -> "Timestamp":
        return cls(int(round(milliseconds * 1_000_000)))

    def to_seconds(self) -> float:
        return self.nanoseconds / NANOSECONDS_PER_SECOND

    def __add__(self, duration: timedelta) -> "Timestamp":
        if not isinstance(duration, timedelta):
            return NotImplemented
        return Timestamp(self.nanoseconds + duration_to_nanoseconds(duration))

    def __sub__(self, other):
        if isinstance(other, Timestamp):
            # Floored to the microsecond resolution of timedelta
            return timedelta(microseconds=(self.nanoseconds - other.nanoseconds) // 1000)
        if isinstance(other, timedelta):
            return Timestamp(self.nanoseconds - duration_to_nanoseconds(other))
        return NotImplemented
