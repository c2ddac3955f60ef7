"""
Conjunto fechado de Primitives suportados e a decodificação por nome.

Para adicionar um tipo novo, declare-o aqui e inclua-o em PRIMITIVE_TYPES;
o nome canônico precisa ser único.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Type

from Geometry.geometry import Angle, Point, Vector
from Primitive.primitive import (
    Primitive,
    PrimitiveDecodeError,
    UnknownPrimitiveError,
)
from protocols import ai_messages
from utils.logger import get_logger

logger = get_logger("primitive")


@dataclass(frozen=True)
class MovePrimitive(Primitive):
    """Move to a destination, ending with the given orientation and speed."""

    CANONICAL_NAME = "Move Primitive"
    PARAMETER_NAMES = ("destination_x", "destination_y", "final_orientation", "final_speed")

    robot_id: int
    destination: Point
    final_orientation: Angle
    final_speed: float = 0.0

    def get_parameters(self) -> List[float]:
        return [
            self.destination.x,
            self.destination.y,
            self.final_orientation.to_radians(),
            self.final_speed,
        ]

    @classmethod
    def _from_wire(cls, robot_id, parameters, flags):
        return cls(
            robot_id,
            Point(parameters[0], parameters[1]),
            Angle.of_radians(parameters[2]),
            parameters[3],
        )


@dataclass(frozen=True)
class KickPrimitive(Primitive):
    """Kick the ball along the ground from kick_origin, in kick_direction."""

    CANONICAL_NAME = "Kick Primitive"
    PARAMETER_NAMES = ("kick_origin_x", "kick_origin_y", "kick_direction", "kick_speed")

    robot_id: int
    kick_origin: Point
    kick_direction: Angle
    kick_speed: float

    def get_parameters(self) -> List[float]:
        return [
            self.kick_origin.x,
            self.kick_origin.y,
            self.kick_direction.to_radians(),
            self.kick_speed,
        ]

    @classmethod
    def _from_wire(cls, robot_id, parameters, flags):
        return cls(
            robot_id,
            Point(parameters[0], parameters[1]),
            Angle.of_radians(parameters[2]),
            parameters[3],
        )


@dataclass(frozen=True)
class ChipPrimitive(Primitive):
    """Chip the ball over chip_distance metres from chip_origin."""

    CANONICAL_NAME = "Chip Primitive"
    PARAMETER_NAMES = ("chip_origin_x", "chip_origin_y", "chip_direction", "chip_distance")

    robot_id: int
    chip_origin: Point
    chip_direction: Angle
    chip_distance: float

    def get_parameters(self) -> List[float]:
        return [
            self.chip_origin.x,
            self.chip_origin.y,
            self.chip_direction.to_radians(),
            self.chip_distance,
        ]

    @classmethod
    def _from_wire(cls, robot_id, parameters, flags):
        return cls(
            robot_id,
            Point(parameters[0], parameters[1]),
            Angle.of_radians(parameters[2]),
            parameters[3],
        )


@dataclass(frozen=True)
class DribblePrimitive(Primitive):
    """
    Move to a destination with the dribbler spinning at rpm.

    Flags: [small_kick_allowed].
    """

    CANONICAL_NAME = "Dribble Primitive"
    PARAMETER_NAMES = ("destination_x", "destination_y", "final_orientation", "rpm")
    FLAG_NAMES = ("small_kick_allowed",)

    robot_id: int
    destination: Point
    final_orientation: Angle
    rpm: float
    small_kick_allowed: bool = False

    def get_parameters(self) -> List[float]:
        return [
            self.destination.x,
            self.destination.y,
            self.final_orientation.to_radians(),
            self.rpm,
        ]

    def get_flags(self) -> List[bool]:
        return [self.small_kick_allowed]

    @classmethod
    def _from_wire(cls, robot_id, parameters, flags):
        return cls(
            robot_id,
            Point(parameters[0], parameters[1]),
            Angle.of_radians(parameters[2]),
            parameters[3],
            bool(flags[0]),
        )


@dataclass(frozen=True)
class PivotPrimitive(Primitive):
    """Orbit pivot_point until reaching final_angle around it."""

    CANONICAL_NAME = "Pivot Primitive"
    PARAMETER_NAMES = ("pivot_x", "pivot_y", "final_angle", "robot_orientation")

    robot_id: int
    pivot_point: Point
    final_angle: Angle
    robot_orientation: Angle

    def get_parameters(self) -> List[float]:
        return [
            self.pivot_point.x,
            self.pivot_point.y,
            self.final_angle.to_radians(),
            self.robot_orientation.to_radians(),
        ]

    @classmethod
    def _from_wire(cls, robot_id, parameters, flags):
        return cls(
            robot_id,
            Point(parameters[0], parameters[1]),
            Angle.of_radians(parameters[2]),
            Angle.of_radians(parameters[3]),
        )


@dataclass(frozen=True)
class DirectVelocityPrimitive(Primitive):
    """Drive with a fixed velocity in the robot frame."""

    CANONICAL_NAME = "Direct Velocity Primitive"
    PARAMETER_NAMES = ("x_velocity", "y_velocity", "angular_velocity")

    robot_id: int
    velocity: Vector
    angular_velocity: float

    def get_parameters(self) -> List[float]:
        return [self.velocity.x, self.velocity.y, self.angular_velocity]

    @classmethod
    def _from_wire(cls, robot_id, parameters, flags):
        return cls(robot_id, Vector(parameters[0], parameters[1]), parameters[2])


@dataclass(frozen=True)
class StopPrimitive(Primitive):
    """
    Stop the robot.

    Flags: [coast]. With coast the wheels spin freely, otherwise the robot
    brakes.
    """

    CANONICAL_NAME = "Stop Primitive"
    FLAG_NAMES = ("coast",)

    robot_id: int
    coast: bool = False

    def get_parameters(self) -> List[float]:
        return []

    def get_flags(self) -> List[bool]:
        return [self.coast]

    @classmethod
    def _from_wire(cls, robot_id, parameters, flags):
        return cls(robot_id, bool(flags[0]))


PRIMITIVE_TYPES = (
    MovePrimitive,
    KickPrimitive,
    ChipPrimitive,
    DribblePrimitive,
    PivotPrimitive,
    DirectVelocityPrimitive,
    StopPrimitive,
)


def index_by_name(primitive_types: Iterable[Type[Primitive]]) -> Dict[str, Type[Primitive]]:
    """Maps each canonical name to its type; names must be unique."""
    by_name = {}
    for primitive_type in primitive_types:
        name = primitive_type.CANONICAL_NAME
        if name in by_name:
            raise ValueError(
                f"Duplicate primitive name '{name}' for {by_name[name].__name__} "
                f"and {primitive_type.__name__}"
            )
        by_name[name] = primitive_type
    return by_name


PRIMITIVE_TYPES_BY_NAME: Dict[str, Type[Primitive]] = index_by_name(PRIMITIVE_TYPES)


def decode_primitive(message) -> Primitive:
    """Decodes a `Primitive` message into the type named by the message."""
    primitive_type = PRIMITIVE_TYPES_BY_NAME.get(message.primitive_name)
    if primitive_type is None:
        raise UnknownPrimitiveError(f"Unknown primitive name '{message.primitive_name}'")
    return primitive_type.from_message(message)


def decode_primitive_array(array_message) -> List[Primitive]:
    """
    Decodes every Primitive of a `PrimitiveArray` message.

    Messages that fail to decode are dropped and logged; the others are
    returned in their original order.
    """
    primitives = []
    for index, message in enumerate(array_message.primitives):
        try:
            primitives.append(decode_primitive(message))
        except PrimitiveDecodeError as e:
            logger.warning(
                f"Dropping primitive {index} for robot {message.robot_id}: {e}"
            )
    return primitives


def create_primitive_array_message(primitives: Iterable[Primitive]):
    array_message = ai_messages.PrimitiveArray()
    for primitive in primitives:
        array_message.primitives.add().CopyFrom(primitive.create_message())
    return array_message


def is_primitive_type(primitive_type) -> bool:
    return primitive_type in PRIMITIVE_TYPES
