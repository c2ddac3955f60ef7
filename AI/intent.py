from dataclasses import dataclass, field
from typing import Any, Dict, Type

from Geometry.geometry import Angle, Point, Vector
from Primitive.primitive import Primitive
from Primitive.primitive_types import (
    ChipPrimitive,
    DirectVelocityPrimitive,
    DribblePrimitive,
    KickPrimitive,
    MovePrimitive,
    PivotPrimitive,
    StopPrimitive,
    is_primitive_type,
)


@dataclass
class Intent:
    """
    Ação escolhida pela política de decisão para um robô.

    Guarda o tipo de Primitive e os argumentos do seu construtor, exceto o
    robot_id, que é preenchido pelo AI na conversão.
    """

    primitive_type: Type[Primitive]
    arguments: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not is_primitive_type(self.primitive_type):
            raise TypeError(f"{self.primitive_type!r} is not a known Primitive type")

    def create_primitive(self, robot_id: int) -> Primitive:
        return self.primitive_type(robot_id=robot_id, **self.arguments)


def move_intent(destination: Point, final_orientation: Angle, final_speed: float = 0.0) -> Intent:
    return Intent(
        MovePrimitive,
        {
            "destination": destination,
            "final_orientation": final_orientation,
            "final_speed": final_speed,
        },
    )


def kick_intent(kick_origin: Point, kick_direction: Angle, kick_speed: float) -> Intent:
    return Intent(
        KickPrimitive,
        {
            "kick_origin": kick_origin,
            "kick_direction": kick_direction,
            "kick_speed": kick_speed,
        },
    )


def chip_intent(chip_origin: Point, chip_direction: Angle, chip_distance: float) -> Intent:
    return Intent(
        ChipPrimitive,
        {
            "chip_origin": chip_origin,
            "chip_direction": chip_direction,
            "chip_distance": chip_distance,
        },
    )


def dribble_intent(
    destination: Point,
    final_orientation: Angle,
    rpm: float,
    small_kick_allowed: bool = False,
) -> Intent:
    return Intent(
        DribblePrimitive,
        {
            "destination": destination,
            "final_orientation": final_orientation,
            "rpm": rpm,
            "small_kick_allowed": small_kick_allowed,
        },
    )


def pivot_intent(pivot_point: Point, final_angle: Angle, robot_orientation: Angle) -> Intent:
    return Intent(
        PivotPrimitive,
        {
            "pivot_point": pivot_point,
            "final_angle": final_angle,
            "robot_orientation": robot_orientation,
        },
    )


def direct_velocity_intent(velocity: Vector, angular_velocity: float) -> Intent:
    return Intent(
        DirectVelocityPrimitive,
        {"velocity": velocity, "angular_velocity": angular_velocity},
    )


def stop_intent(coast: bool = False) -> Intent:
    return Intent(StopPrimitive, {"coast": coast})
