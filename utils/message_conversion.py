"""
Conversão entre as mensagens protobuf de entrada e os objetos do World.

Cada mensagem recebida gera um objeto novo, que depois substitui por
inteiro a parte correspondente do World.
"""

from datetime import timedelta

from Geometry.geometry import Angle, Point, Vector
from Geometry.timestamp import Timestamp
from World.ball import Ball
from World.field import Field
from World.robot import Robot
from World.team import Team
from protocols import ai_messages
from utils.logger import get_logger

logger = get_logger("message_conversion")


def create_ball_from_message(ball_msg) -> Ball:
    """
    Constrói uma Ball a partir de uma mensagem `Ball`.

    Args:
        ball_msg: Mensagem com os dados da bola

    Returns:
        Ball com posição, velocidade e timestamp da mensagem
    """
    return Ball(
        Point(ball_msg.position.x, ball_msg.position.y),
        Vector(ball_msg.velocity.x, ball_msg.velocity.y),
        Timestamp(ball_msg.timestamp_ns),
    )


def create_robot_from_message(robot_msg) -> Robot:
    return Robot(
        robot_msg.id,
        Point(robot_msg.position.x, robot_msg.position.y),
        Vector(robot_msg.velocity.x, robot_msg.velocity.y),
        Angle.of_radians(robot_msg.orientation),
        robot_msg.angular_velocity,
        Timestamp(robot_msg.timestamp_ns),
    )


def create_team_from_message(team_msg, expiry_buffer: timedelta) -> Team:
    """
    Constrói um Team a partir de uma mensagem `Team`.

    O buffer de expiração não viaja na mensagem; vem da configuração.
    Se a mensagem tiver IDs repetidos, prevalece a última ocorrência.
    """
    robots = [create_robot_from_message(robot_msg) for robot_msg in team_msg.robots]
    ids = [robot.id for robot in robots]
    if len(ids) != len(set(ids)):
        logger.warning(f"Team message with repeated robot ids: {ids}")
    return Team(expiry_buffer, robots)


def create_field_from_message(field_msg) -> Field:
    return Field(
        length=field_msg.field_length,
        width=field_msg.field_width,
        defense_length=field_msg.defense_length,
        defense_width=field_msg.defense_width,
        goal_width=field_msg.goal_width,
        boundary_width=field_msg.boundary_width,
        center_circle_radius=field_msg.center_circle_radius,
    )


def _fill_point(point_msg, x: float, y: float):
    point_msg.x = x
    point_msg.y = y


def create_ball_message(ball: Ball):
    ball_msg = ai_messages.Ball()
    _fill_point(ball_msg.position, ball.position.x, ball.position.y)
    _fill_point(ball_msg.velocity, ball.velocity.x, ball.velocity.y)
    ball_msg.timestamp_ns = ball.last_update_timestamp.nanoseconds
    return ball_msg


def _fill_robot_message(robot_msg, robot: Robot):
    robot_msg.id = robot.id
    _fill_point(robot_msg.position, robot.position.x, robot.position.y)
    _fill_point(robot_msg.velocity, robot.velocity.x, robot.velocity.y)
    robot_msg.orientation = robot.orientation.to_radians()
    robot_msg.angular_velocity = robot.angular_velocity
    robot_msg.timestamp_ns = robot.last_update_timestamp.nanoseconds


def create_robot_message(robot: Robot):
    robot_msg = ai_messages.Robot()
    _fill_robot_message(robot_msg, robot)
    return robot_msg


def create_team_message(team: Team):
    team_msg = ai_messages.Team()
    for robot in team.all_robots():
        _fill_robot_message(team_msg.robots.add(), robot)
    return team_msg


def create_field_message(field: Field):
    return ai_messages.Field(
        field_length=field.length,
        field_width=field.width,
        defense_length=field.defense_length,
        defense_width=field.defense_width,
        goal_width=field.goal_width,
        boundary_width=field.boundary_width,
        center_circle_radius=field.center_circle_radius,
    )
