from dataclasses import dataclass

from Geometry.geometry import Point

# Dimensões padrão da SSL Entry Level (metros)
FIELD_LENGTH_DEFAULT = 4.5
FIELD_WIDTH_DEFAULT = 3.0
GOAL_WIDTH_DEFAULT = 0.8
DEFENSE_AREA_DEPTH_DEFAULT = 0.5
DEFENSE_AREA_WIDTH_DEFAULT = 1.35
BOUNDARY_WIDTH_DEFAULT = 0.3
CENTER_CIRCLE_RADIUS_DEFAULT = 0.5
PENALTY_SPOT_DISTANCE_FROM_GOAL = 1.0


@dataclass(frozen=True)
class Field:
    """
    Geometria estática do campo. Sempre substituída por inteiro, nunca
    alterada parcialmente.

    O campo é centrado em (0, 0); o gol amigo fica em x negativo.
    """

    length: float = FIELD_LENGTH_DEFAULT
    width: float = FIELD_WIDTH_DEFAULT
    defense_length: float = DEFENSE_AREA_DEPTH_DEFAULT
    defense_width: float = DEFENSE_AREA_WIDTH_DEFAULT
    goal_width: float = GOAL_WIDTH_DEFAULT
    boundary_width: float = BOUNDARY_WIDTH_DEFAULT
    center_circle_radius: float = CENTER_CIRCLE_RADIUS_DEFAULT

    @property
    def half_length(self) -> float:
        return self.length / 2.0

    @property
    def half_width(self) -> float:
        return self.width / 2.0

    def center_point(self) -> Point:
        return Point(0.0, 0.0)

    def friendly_goal(self) -> Point:
        return Point(-self.half_length, 0.0)

    def enemy_goal(self) -> Point:
        return Point(self.half_length, 0.0)

    def friendly_goalpost_pos(self) -> Point:
        return Point(-self.half_length, self.goal_width / 2.0)

    def friendly_goalpost_neg(self) -> Point:
        return Point(-self.half_length, -self.goal_width / 2.0)

    def enemy_goalpost_pos(self) -> Point:
        return Point(self.half_length, self.goal_width / 2.0)

    def enemy_goalpost_neg(self) -> Point:
        return Point(self.half_length, -self.goal_width / 2.0)

    def friendly_penalty_spot(self) -> Point:
        return Point(-self.half_length + PENALTY_SPOT_DISTANCE_FROM_GOAL, 0.0)

    def enemy_penalty_spot(self) -> Point:
        return Point(self.half_length - PENALTY_SPOT_DISTANCE_FROM_GOAL, 0.0)

    def point_in_field(self, point: Point) -> bool:
        """True if the point lies inside the field lines."""
        return (
            abs(point.x) <= self.half_length and abs(point.y) <= self.half_width
        )

    def point_in_friendly_defense_area(self, point: Point) -> bool:
        return (
            -self.half_length <= point.x <= -self.half_length + self.defense_length
            and abs(point.y) <= self.defense_width / 2.0
        )

    def point_in_enemy_defense_area(self, point: Point) -> bool:
        return (
            self.half_length - self.defense_length <= point.x <= self.half_length
            and abs(point.y) <= self.defense_width / 2.0
        )

    def enforce_boundaries(self, point: Point, margin: float = 0.05) -> Point:
        """Clamps the point to lie inside the field lines minus a margin."""
        x = max(-self.half_length + margin, min(self.half_length - margin, point.x))
        y = max(-self.half_width + margin, min(self.half_width - margin, point.y))
        return Point(x, y)
