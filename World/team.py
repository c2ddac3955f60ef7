from datetime import timedelta
from typing import Dict, Iterable, List, Optional

from Geometry.timestamp import Timestamp, duration_to_nanoseconds
from World.kinematics import TemporalOrderingError
from World.robot import Robot


class Team:
    """
    Conjunto de robôs indexados pelo ID, com expiração por idade.

    Um robô é considerado ativo em relação a um instante de referência se
    sua última atualização não for mais antiga que o `expiry_buffer`. Robôs
    inativos continuam armazenados, mas ficam fora das consultas de robôs
    ativos.
    """

    def __init__(self, expiry_buffer: timedelta, robots: Iterable[Robot] = ()):
        if expiry_buffer < timedelta(0):
            raise ValueError(f"Expiry buffer must be non-negative, got {expiry_buffer}")
        self._expiry_buffer = expiry_buffer
        self._robots: Dict[int, Robot] = {}
        self.update_robots(robots)

    @property
    def expiry_buffer(self) -> timedelta:
        return self._expiry_buffer

    def update_robot(self, robot: Robot):
        """Inserts the robot, replacing any stored robot with the same id."""
        self._robots[robot.id] = robot

    def update_robots(self, robots: Iterable[Robot]):
        for robot in robots:
            self.update_robot(robot)

    def update_state(self, other: "Team"):
        """Replaces the roster with the robots of another team snapshot."""
        self._robots = {robot.id: robot for robot in other.all_robots()}

    def update_state_to_predicted_state(self, timestamp: Timestamp) -> List[int]:
        """
        Advances the active robots to timestamp. Expired robots keep their
        last known state, so they stay expired.

        Robots already stamped after timestamp are left as they are; their
        ids are returned.
        """
        skipped = []
        for robot in self.active_robots(timestamp):
            try:
                robot.update_state_to_predicted_state(timestamp)
            except TemporalOrderingError:
                skipped.append(robot.id)
        return skipped

    def get_robot(self, robot_id: int) -> Optional[Robot]:
        return self._robots.get(robot_id)

    def is_active(self, robot: Robot, as_of: Timestamp) -> bool:
        age_ns = as_of.nanoseconds - robot.last_update_timestamp.nanoseconds
        return age_ns <= duration_to_nanoseconds(self._expiry_buffer)

    def active_robots(self, as_of: Timestamp) -> List[Robot]:
        """Robots updated within the expiry buffer of as_of, sorted by id."""
        return [robot for robot in self.all_robots() if self.is_active(robot, as_of)]

    def remove_expired_robots(self, as_of: Timestamp) -> List[int]:
        """Deletes inactive robots and returns their ids."""
        expired = [
            robot.id for robot in self.all_robots() if not self.is_active(robot, as_of)
        ]
        for robot_id in expired:
            del self._robots[robot_id]
        return expired

    def all_robots(self) -> List[Robot]:
        return [self._robots[robot_id] for robot_id in sorted(self._robots)]

    def robot_ids(self) -> List[int]:
        return sorted(self._robots)

    def size(self) -> int:
        return len(self._robots)

    def __len__(self):
        return len(self._robots)

    def __eq__(self, other):
        if not isinstance(other, Team):
            return NotImplemented
        return (
            self._expiry_buffer == other._expiry_buffer
            and self._robots == other._robots
        )

    __hash__ = None

    def __repr__(self):
        return f"Team(expiry_buffer={self._expiry_buffer}, robots={self.all_robots()})"
