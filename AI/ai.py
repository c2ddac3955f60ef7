from typing import Callable, List, Mapping

from AI.intent import Intent
from Geometry.timestamp import Timestamp
from Primitive.primitive import Primitive
from World.ball import Ball
from World.field import Field
from World.team import Team
from World.world import World
from utils.logger import get_logger

logger = get_logger("ai")

# Recebe o World já previsto e devolve uma Intent por robô amigo ativo
DecisionPolicy = Callable[[World], Mapping[int, Intent]]


class AI:
    """
    Orquestrador do núcleo de decisão.

    Mantém o World durante toda a execução e, a cada tick de controle,
    avança o estado previsto até o instante do tick, consulta a política de
    decisão e converte as intenções em Primitives.
    """

    def __init__(self, world: World, decision_policy: DecisionPolicy):
        self._world = world
        self._decision_policy = decision_policy

    @property
    def world(self) -> World:
        return self._world

    def update_world_field_state(self, field: Field):
        self._world.update_field_state(field)

    def update_world_ball_state(self, ball: Ball):
        self._world.update_ball_state(ball)

    def update_world_friendly_team_state(self, team: Team):
        self._world.update_friendly_team_state(team)

    def update_world_enemy_team_state(self, team: Team):
        self._world.update_enemy_team_state(team)

    def get_primitives(self, timestamp: Timestamp) -> List[Primitive]:
        """
        Returns the Primitives the friendly robots should run at timestamp.

        The World is advanced in place to timestamp first, so the predicted
        state becomes the known state. Primitives follow the order of the
        active friendly robots (sorted by id).
        """
        self._world.update_state_to_predicted_state(timestamp)

        active_robots = self._world.friendly_team.active_robots(timestamp)
        if not active_robots:
            logger.debug("No active friendly robots, no primitives to assign")
            return []

        intents = self._decision_policy(self._world)

        active_ids = {robot.id for robot in active_robots}
        ignored_ids = sorted(set(intents) - active_ids)
        if ignored_ids:
            logger.warning(f"Ignoring intents for inactive or unknown robots {ignored_ids}")

        primitives = []
        for robot in active_robots:
            intent = intents.get(robot.id)
            if intent is None:
                logger.debug(f"No intent for robot {robot.id}")
                continue
            primitives.append(intent.create_primitive(robot.id))

        logger.debug(f"Assigned {len(primitives)} primitives at {timestamp}")
        return primitives
