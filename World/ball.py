from datetime import timedelta
from typing import Optional

from Geometry.geometry import Point, Vector
from Geometry.timestamp import Timestamp
from World.kinematics import (
    TemporalOrderingError,
    duration_to_seconds,
    estimate_position,
    estimate_velocity,
)


class Ball:
    """
    Estado cinemático da bola com previsão de movimento.

    Guarda apenas o estado mais recente (posição, velocidade e o instante da
    última atualização). A igualdade compara posição e velocidade, nunca o
    timestamp.
    """

    def __init__(
        self,
        position: Optional[Point] = None,
        velocity: Optional[Vector] = None,
        timestamp: Optional[Timestamp] = None,
    ):
        self._position = position if position is not None else Point()
        self._velocity = velocity if velocity is not None else Vector()
        self._last_update_timestamp = timestamp if timestamp is not None else Timestamp()

    @property
    def position(self) -> Point:
        return self._position

    @property
    def velocity(self) -> Vector:
        return self._velocity

    @property
    def last_update_timestamp(self) -> Timestamp:
        return self._last_update_timestamp

    def update_state(self, position: Point, velocity: Vector, timestamp: Timestamp):
        """Overwrites the whole state.

        Raises:
            TemporalOrderingError: if timestamp is older than the stored one.
                The stored state is left unchanged.
        """
        self._check_timestamp(timestamp)
        self._position = position
        self._velocity = velocity
        self._last_update_timestamp = timestamp

    def update_state_from(self, other: "Ball"):
        """Overwrites the state with the full state of another ball."""
        self.update_state(other.position, other.velocity, other.last_update_timestamp)

    def update_state_to_predicted_state(self, timestamp: Timestamp):
        """Replaces the stored state with the state predicted at timestamp."""
        self._check_timestamp(timestamp)
        elapsed = timestamp - self._last_update_timestamp
        position = self.estimate_position_at_future_time(elapsed)
        velocity = self.estimate_velocity_at_future_time(elapsed)
        self.update_state(position, velocity, timestamp)

    def estimate_position_at_future_time(self, duration: timedelta) -> Point:
        return estimate_position(
            self._position, self._velocity, duration_to_seconds(duration)
        )

    def estimate_velocity_at_future_time(self, duration: timedelta) -> Vector:
        return estimate_velocity(self._velocity, duration_to_seconds(duration))

    def _check_timestamp(self, timestamp: Timestamp):
        if timestamp < self._last_update_timestamp:
            raise TemporalOrderingError(
                f"Ball update at {timestamp} is older than the last update "
                f"at {self._last_update_timestamp}"
            )

    def __eq__(self, other):
        if not isinstance(other, Ball):
            return NotImplemented
        return self._position == other._position and self._velocity == other._velocity

    __hash__ = None

    def __repr__(self):
        return (
            f"Ball(position={self._position}, velocity={self._velocity}, "
            f"timestamp={self._last_update_timestamp})"
        )
