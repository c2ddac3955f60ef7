# test_decision_policy.py
import unittest
from datetime import timedelta

from AI.decision_policy import (
    DRIBBLER_RPM,
    KICK_SPEED_FACTOR,
    MAX_KICK_SPEED,
    RoleBasedPolicy,
    StopPolicy,
)
from Geometry.geometry import Angle, Point, Vector
from Geometry.timestamp import Timestamp
from Primitive.primitive_types import (
    ChipPrimitive,
    DribblePrimitive,
    KickPrimitive,
    MovePrimitive,
    StopPrimitive,
)
from World.ball import Ball
from World.field import Field
from World.robot import Robot
from World.team import Team
from World.world import World

EPSILON = 1e-9


class PolicyTestCase(unittest.TestCase):
    def setUp(self):
        self.current_time = Timestamp.from_seconds(10000)
        self.buffer = timedelta(seconds=1)

    def make_world(self, ball_position, robot_positions):
        """Cria um World parado com os robôs amigos nas posições dadas (ID -> posição)."""
        robots = [
            Robot(robot_id, position, timestamp=self.current_time)
            for robot_id, position in robot_positions.items()
        ]
        world = World(
            Field(),
            Ball(ball_position, Vector(), self.current_time),
            Team(self.buffer, robots),
            Team(self.buffer),
        )
        world.update_state_to_predicted_state(self.current_time)
        return world


class TestRoleBasedPolicy(PolicyTestCase):
    def setUp(self):
        super().setUp()
        self.policy = RoleBasedPolicy()

    def test_no_robots(self):
        world = self.make_world(Point(), {})
        self.assertEqual({}, self.policy(world))

    def test_goalkeeper_follows_ball_along_goal_line(self):
        world = self.make_world(Point(1.0, 0.2), {0: Point(-2.0, 0.0)})
        intents = self.policy(world)

        self.assertEqual([0], list(intents))
        self.assertIs(MovePrimitive, intents[0].primitive_type)
        destination = intents[0].arguments["destination"]
        self.assertTrue(Point(-2.2, 0.2).is_close(destination, EPSILON))

    def test_goalkeeper_stays_between_posts(self):
        world = self.make_world(Point(0.0, 1.2), {0: Point(-2.0, 0.0)})
        destination = self.policy(world)[0].arguments["destination"]
        self.assertAlmostEqual(0.35, destination.y)

    def test_goalkeeper_faces_the_ball(self):
        world = self.make_world(Point(-1.2, 0.0), {0: Point(-2.0, 0.0)})
        orientation = self.policy(world)[0].arguments["final_orientation"]
        self.assertTrue(Angle.zero().is_close(orientation, EPSILON))

    def test_attacker_kicks_when_close_to_goal(self):
        world = self.make_world(
            Point(1.0, 0.0), {0: Point(-2.0, 0.0), 1: Point(0.95, 0.0)}
        )
        primitive = self.policy(world)[1].create_primitive(1)

        self.assertIsInstance(primitive, KickPrimitive)
        self.assertEqual(Point(1.0, 0.0), primitive.kick_origin)
        self.assertTrue(Angle.zero().is_close(primitive.kick_direction, EPSILON))
        self.assertAlmostEqual(MAX_KICK_SPEED * KICK_SPEED_FACTOR, primitive.kick_speed)

    def test_attacker_chips_when_far_from_goal(self):
        world = self.make_world(
            Point(-1.5, 0.0), {0: Point(-2.0, 0.0), 1: Point(-1.55, 0.0)}
        )
        primitive = self.policy(world)[1].create_primitive(1)

        self.assertIsInstance(primitive, ChipPrimitive)
        self.assertAlmostEqual(1.875, primitive.chip_distance)

    def test_attacker_dribbles_towards_the_ball(self):
        world = self.make_world(
            Point(0.0, 0.0), {0: Point(-2.0, 0.0), 1: Point(-1.0, 1.0)}
        )
        primitive = self.policy(world)[1].create_primitive(1)

        self.assertIsInstance(primitive, DribblePrimitive)
        self.assertTrue(Point(-0.15, 0.0).is_close(primitive.destination, EPSILON))
        self.assertEqual(DRIBBLER_RPM, primitive.rpm)
        self.assertFalse(primitive.small_kick_allowed)

    def test_closest_field_player_becomes_attacker(self):
        world = self.make_world(
            Point(0.0, 0.0),
            {0: Point(-2.0, 0.0), 1: Point(1.0, 1.0), 2: Point(0.2, 0.0)},
        )
        intents = self.policy(world)

        self.assertIs(DribblePrimitive, intents[2].primitive_type)
        self.assertIs(MovePrimitive, intents[1].primitive_type)

    def test_every_active_robot_gets_an_intent(self):
        positions = {robot_id: Point(-1.5 + robot_id * 0.5, 0.3) for robot_id in range(6)}
        world = self.make_world(Point(0.5, -0.5), positions)
        intents = self.policy(world)

        self.assertEqual(set(range(6)), set(intents))
        field = world.field
        for robot_id, intent in intents.items():
            primitive = intent.create_primitive(robot_id)
            if isinstance(primitive, MovePrimitive):
                self.assertTrue(field.point_in_field(primitive.destination))

    def test_supporters_defend_when_ball_is_on_our_side(self):
        world = self.make_world(
            Point(-0.5, 0.0),
            {0: Point(-2.0, 0.0), 1: Point(-0.6, 0.0), 2: Point(1.0, 1.0)},
        )
        destination = self.policy(world)[2].arguments["destination"]
        self.assertLess(destination.x, -0.5)

    def test_supporters_move_ahead_when_ball_is_on_their_side(self):
        world = self.make_world(
            Point(0.5, 0.0),
            {0: Point(-2.0, 0.0), 1: Point(0.6, 0.0), 2: Point(-1.0, 1.0)},
        )
        destination = self.policy(world)[2].arguments["destination"]
        self.assertGreater(destination.x, 0.5)

    def test_expired_robots_get_no_intent(self):
        world = self.make_world(Point(), {0: Point(-2.0, 0.0)})
        world.friendly_team.update_robot(
            Robot(1, Point(), timestamp=self.current_time - timedelta(seconds=5))
        )
        self.assertEqual([0], list(self.policy(world)))


class TestStopPolicy(PolicyTestCase):
    def test_stops_every_active_robot(self):
        world = self.make_world(Point(), {0: Point(), 3: Point(1, 1)})
        intents = StopPolicy(coast=True)(world)

        self.assertEqual({0, 3}, set(intents))
        self.assertEqual(StopPrimitive(3, True), intents[3].create_primitive(3))

    def test_no_robots(self):
        world = self.make_world(Point(), {})
        self.assertEqual({}, StopPolicy()(world))


if __name__ == "__main__":
    unittest.main()
