from datetime import timedelta
from typing import Optional

from Geometry.geometry import Angle, Point, Vector
from Geometry.timestamp import Timestamp
from World.kinematics import (
    TemporalOrderingError,
    duration_to_seconds,
    estimate_position,
    estimate_velocity,
    velocity_decay_factor,
)


class Robot:
    """
    Estado cinemático de um robô (posição, velocidade, orientação e
    velocidade angular) com previsão de movimento.

    Usa o mesmo modelo de decaimento da bola. A orientação é extrapolada
    linearmente a partir da velocidade angular conhecida, que decai com a
    mesma taxa da velocidade linear.
    """

    def __init__(
        self,
        robot_id: int,
        position: Optional[Point] = None,
        velocity: Optional[Vector] = None,
        orientation: Optional[Angle] = None,
        angular_velocity: float = 0.0,
        timestamp: Optional[Timestamp] = None,
    ):
        if robot_id < 0:
            raise ValueError(f"Robot id must be non-negative, got {robot_id}")
        self._id = robot_id
        self._position = position if position is not None else Point()
        self._velocity = velocity if velocity is not None else Vector()
        self._orientation = orientation if orientation is not None else Angle.zero()
        self._angular_velocity = angular_velocity
        self._last_update_timestamp = timestamp if timestamp is not None else Timestamp()

    @property
    def id(self) -> int:
        return self._id

    @property
    def position(self) -> Point:
        return self._position

    @property
    def velocity(self) -> Vector:
        return self._velocity

    @property
    def orientation(self) -> Angle:
        return self._orientation

    @property
    def angular_velocity(self) -> float:
        return self._angular_velocity

    @property
    def last_update_timestamp(self) -> Timestamp:
        return self._last_update_timestamp

    def update_state(
        self,
        position: Point,
        velocity: Vector,
        orientation: Angle,
        angular_velocity: float,
        timestamp: Timestamp,
    ):
        """Overwrites the whole kinematic state.

        Raises:
            TemporalOrderingError: if timestamp is older than the stored one.
        """
        self._check_timestamp(timestamp)
        self._position = position
        self._velocity = velocity
        self._orientation = orientation
        self._angular_velocity = angular_velocity
        self._last_update_timestamp = timestamp

    def update_state_from(self, other: "Robot"):
        if other.id != self._id:
            raise ValueError(
                f"Cannot update robot {self._id} with the state of robot {other.id}"
            )
        self.update_state(
            other.position,
            other.velocity,
            other.orientation,
            other.angular_velocity,
            other.last_update_timestamp,
        )

    def update_state_to_predicted_state(self, timestamp: Timestamp):
        self._check_timestamp(timestamp)
        elapsed = timestamp - self._last_update_timestamp
        self.update_state(
            self.estimate_position_at_future_time(elapsed),
            self.estimate_velocity_at_future_time(elapsed),
            self.estimate_orientation_at_future_time(elapsed),
            self.estimate_angular_velocity_at_future_time(elapsed),
            timestamp,
        )

    def estimate_position_at_future_time(self, duration: timedelta) -> Point:
        return estimate_position(
            self._position, self._velocity, duration_to_seconds(duration)
        )

    def estimate_velocity_at_future_time(self, duration: timedelta) -> Vector:
        return estimate_velocity(self._velocity, duration_to_seconds(duration))

    def estimate_orientation_at_future_time(self, duration: timedelta) -> Angle:
        seconds = duration_to_seconds(duration)
        return self._orientation + Angle.of_radians(self._angular_velocity * seconds)

    def estimate_angular_velocity_at_future_time(self, duration: timedelta) -> float:
        seconds = duration_to_seconds(duration)
        return self._angular_velocity * velocity_decay_factor(seconds)

    def _check_timestamp(self, timestamp: Timestamp):
        if timestamp < self._last_update_timestamp:
            raise TemporalOrderingError(
                f"Robot {self._id} update at {timestamp} is older than the last "
                f"update at {self._last_update_timestamp}"
            )

    def __eq__(self, other):
        if not isinstance(other, Robot):
            return NotImplemented
        return (
            self._id == other._id
            and self._position == other._position
            and self._velocity == other._velocity
            and self._orientation == other._orientation
            and self._angular_velocity == other._angular_velocity
        )

    __hash__ = None

    def __repr__(self):
        return (
            f"Robot(id={self._id}, position={self._position}, "
            f"velocity={self._velocity}, orientation={self._orientation}, "
            f"angular_velocity={self._angular_velocity}, "
            f"timestamp={self._last_update_timestamp})"
        )
