from Geometry.timestamp import Timestamp
from World.ball import Ball
from World.field import Field
from World.kinematics import TemporalOrderingError
from World.team import Team
from utils.logger import get_logger

logger = get_logger("world")


class World:
    """
    Agregado com o estado conhecido do jogo: campo, bola e os dois times.

    Cada parte é substituída de forma independente pelo seu próprio setter;
    não existe atualização transacional das quatro partes.
    """

    def __init__(self, field: Field, ball: Ball, friendly_team: Team, enemy_team: Team):
        self._field = field
        self._ball = ball
        self._friendly_team = friendly_team
        self._enemy_team = enemy_team
        self._last_update_timestamp = Timestamp()

    @property
    def field(self) -> Field:
        return self._field

    @property
    def ball(self) -> Ball:
        return self._ball

    @property
    def friendly_team(self) -> Team:
        return self._friendly_team

    @property
    def enemy_team(self) -> Team:
        return self._enemy_team

    @property
    def last_update_timestamp(self) -> Timestamp:
        """The instant of the latest prediction (the current control tick)."""
        return self._last_update_timestamp

    def update_field_state(self, field: Field):
        self._field = field

    def update_ball_state(self, ball: Ball):
        self._ball = ball

    def update_friendly_team_state(self, team: Team):
        self._friendly_team = team

    def update_enemy_team_state(self, team: Team):
        self._enemy_team = team

    def update_state_to_predicted_state(self, timestamp: Timestamp):
        """
        Advances the ball and every active robot of both teams to timestamp,
        in place, and makes timestamp the world's reference instant.

        Entities already stamped after timestamp are left as they are, and so
        are expired robots.
        """
        try:
            self._ball.update_state_to_predicted_state(timestamp)
        except TemporalOrderingError as e:
            logger.warning(f"Skipping prediction for ball: {e}")

        for side, team in (("friendly", self._friendly_team), ("enemy", self._enemy_team)):
            skipped = team.update_state_to_predicted_state(timestamp)
            if skipped:
                logger.warning(
                    f"Skipping prediction for {side} robots {skipped}: "
                    f"already updated after {timestamp}"
                )

        self._last_update_timestamp = timestamp

    def __repr__(self):
        return (
            f"World(field={self._field}, ball={self._ball}, "
            f"friendly_team={self._friendly_team}, enemy_team={self._enemy_team})"
        )
