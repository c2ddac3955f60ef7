"""
Políticas de decisão padrão do AI.

A política recebe o World já avançado para o instante do tick e devolve uma
Intent para cada robô amigo ativo. A política baseada em papéis segue a
mesma divisão usada nas máquinas de estado dos robôs: goleiro, atacante e
apoio.
"""

from typing import Dict, List

import numpy as np

from AI.intent import Intent, chip_intent, dribble_intent, kick_intent, move_intent, stop_intent
from Geometry.geometry import Point
from World.robot import Robot
from World.world import World
from utils.logger import get_logger

logger = get_logger("decision_policy")

# --- Constantes de posicionamento (metros) ---
GOALKEEPER_GOAL_LINE_X_OFFSET = 0.05
GOALKEEPER_POST_MARGIN = 0.05
FIELD_BOUNDARY_MARGIN = 0.05
BALL_APPROACH_OFFSET = 0.15
SUPPORT_DISTANCE_AHEAD = 0.8
SUPPORT_DISTANCE_STEP = 0.15
SUPPORT_SIDE_OFFSET = 0.6
DEFENSIVE_WALL_FRACTION = 0.35

# --- Constantes de posse e chute ---
ATTACKER_BALL_OWNERSHIP_THRESHOLD = 0.12  # raio do robô ~0.09 + raio da bola ~0.0215
MAX_KICK_SPEED = 6.0  # m/s
KICK_SPEED_FACTOR = 0.8
KICK_RANGE = 3.0  # distância máxima ao gol para chutar rasteiro
MAX_CHIP_DISTANCE = 2.0
DRIBBLER_RPM = 10000.0


class RoleBasedPolicy:
    """
    Política padrão baseada em papéis.

    - Goleiro: o robô ativo de menor ID. Acompanha a bola ao longo da linha
      do gol.
    - Atacante: o robô (fora o goleiro) mais próximo da bola. Conduz a bola
      até ficar atrás dela e chuta em direção ao gol adversário.
    - Apoio: os demais. Posicionam-se à frente da bola quando ela está no
      campo adversário, ou entre a bola e o nosso gol caso contrário.
    """

    def __call__(self, world: World) -> Dict[int, Intent]:
        robots = world.friendly_team.active_robots(world.last_update_timestamp)
        if not robots:
            return {}

        goalkeeper = robots[0]
        intents = {goalkeeper.id: self._goalkeeper_intent(world, goalkeeper)}

        field_players = robots[1:]
        if not field_players:
            return intents

        attacker = self._closest_to_ball(world, field_players)
        intents[attacker.id] = self._attacker_intent(world, attacker)

        supporters = [robot for robot in field_players if robot.id != attacker.id]
        for index, robot in enumerate(supporters):
            intents[robot.id] = self._support_intent(world, robot, index)

        logger.debug(
            f"Roles: goalkeeper={goalkeeper.id}, attacker={attacker.id}, "
            f"support={[robot.id for robot in supporters]}"
        )
        return intents

    def _closest_to_ball(self, world: World, robots: List[Robot]) -> Robot:
        """Robô mais próximo da bola; em caso de empate, o de menor ID."""
        ball_position = world.ball.position
        positions = np.array([[robot.position.x, robot.position.y] for robot in robots])
        distances = np.linalg.norm(
            positions - np.array([ball_position.x, ball_position.y]), axis=1
        )
        return robots[int(np.argmin(distances))]

    def _goalkeeper_intent(self, world: World, robot: Robot) -> Intent:
        field = world.field
        ball_position = world.ball.position
        half_goal = max(field.goal_width / 2.0 - GOALKEEPER_POST_MARGIN, 0.0)
        target_y = max(-half_goal, min(half_goal, ball_position.y))
        target = Point(field.friendly_goal().x + GOALKEEPER_GOAL_LINE_X_OFFSET, target_y)
        return move_intent(target, (ball_position - target).orientation())

    def _attacker_intent(self, world: World, robot: Robot) -> Intent:
        ball_position = world.ball.position
        to_goal = world.field.enemy_goal() - ball_position
        shot_direction = to_goal.orientation()

        if robot.position.distance_to(ball_position) < ATTACKER_BALL_OWNERSHIP_THRESHOLD:
            if to_goal.length() <= KICK_RANGE:
                return kick_intent(
                    ball_position, shot_direction, MAX_KICK_SPEED * KICK_SPEED_FACTOR
                )
            chip_distance = min(to_goal.length() / 2.0, MAX_CHIP_DISTANCE)
            return chip_intent(ball_position, shot_direction, chip_distance)

        if to_goal.length() == 0.0:
            approach = ball_position
        else:
            approach = ball_position - to_goal.normalize(BALL_APPROACH_OFFSET)
        approach = world.field.enforce_boundaries(approach, FIELD_BOUNDARY_MARGIN)
        return dribble_intent(approach, shot_direction, DRIBBLER_RPM)

    def _support_intent(self, world: World, robot: Robot, index: int) -> Intent:
        field = world.field
        ball_position = world.ball.position
        side_sign = 1 if index % 2 == 0 else -1

        if ball_position.x >= 0.0:
            to_goal = field.enemy_goal() - ball_position
            direction = to_goal.normalize()
            distance_ahead = SUPPORT_DISTANCE_AHEAD + index * SUPPORT_DISTANCE_STEP
            target = (
                ball_position
                + direction * distance_ahead
                + direction.perpendicular() * (SUPPORT_SIDE_OFFSET * side_sign)
            )
        else:
            to_own_goal = field.friendly_goal() - ball_position
            direction = to_own_goal.normalize()
            target = (
                ball_position
                + to_own_goal * DEFENSIVE_WALL_FRACTION
                + direction.perpendicular() * (SUPPORT_SIDE_OFFSET * side_sign / 2.0)
            )

        target = field.enforce_boundaries(target, FIELD_BOUNDARY_MARGIN)
        return move_intent(target, (ball_position - target).orientation())


class StopPolicy:
    """Para todos os robôs ativos (usada em HALT e para testes de bancada)."""

    def __init__(self, coast: bool = False):
        self.coast = coast

    def __call__(self, world: World) -> Dict[int, Intent]:
        robots = world.friendly_team.active_robots(world.last_update_timestamp)
        return {robot.id: stop_intent(self.coast) for robot in robots}
