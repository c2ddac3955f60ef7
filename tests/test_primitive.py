# test_primitive.py
import unittest

from Geometry.geometry import Angle, Point, Vector
from Primitive.primitive import (
    InsufficientPrimitiveDataError,
    PrimitiveDecodeError,
    PrimitiveNameMismatchError,
    UnknownPrimitiveError,
)
from Primitive.primitive_types import (
    PRIMITIVE_TYPES,
    ChipPrimitive,
    DirectVelocityPrimitive,
    DribblePrimitive,
    KickPrimitive,
    MovePrimitive,
    PivotPrimitive,
    StopPrimitive,
    create_primitive_array_message,
    decode_primitive,
    decode_primitive_array,
    index_by_name,
    is_primitive_type,
)
from protocols import ai_messages


def sample_primitives():
    """Uma instância de cada tipo de Primitive."""
    return [
        MovePrimitive(1, Point(1.5, -0.3), Angle.of_radians(0.7), 0.25),
        KickPrimitive(2, Point(0.1, 0.2), Angle.of_radians(-1.2), 4.8),
        ChipPrimitive(3, Point(-1.0, 0.5), Angle.of_radians(3.0), 1.5),
        DribblePrimitive(4, Point(0.4, 0.4), Angle.of_radians(-0.2), 10000.0, True),
        PivotPrimitive(5, Point(0.0, 0.0), Angle.of_radians(1.0), Angle.of_radians(-2.0)),
        DirectVelocityPrimitive(6, Vector(0.5, -0.25), 1.1),
        StopPrimitive(7, True),
    ]


class TestPrimitiveEncoding(unittest.TestCase):
    def test_every_variant_is_listed(self):
        self.assertEqual(
            {type(primitive) for primitive in sample_primitives()}, set(PRIMITIVE_TYPES)
        )

    def test_canonical_names_are_unique(self):
        names = [primitive_type.get_primitive_name() for primitive_type in PRIMITIVE_TYPES]
        self.assertEqual(len(names), len(set(names)))

    def test_encode_uses_canonical_name_and_robot_id(self):
        for primitive in sample_primitives():
            with self.subTest(primitive=primitive):
                message = primitive.create_message()
                self.assertEqual(primitive.CANONICAL_NAME, message.primitive_name)
                self.assertEqual(primitive.get_robot_id(), message.robot_id)
                self.assertEqual(primitive.get_parameters(), list(message.parameters))
                self.assertEqual(primitive.get_flags(), list(message.extra_bits))

    def test_parameter_and_flag_counts(self):
        for primitive in sample_primitives():
            with self.subTest(primitive=primitive):
                self.assertEqual(len(primitive.PARAMETER_NAMES), len(primitive.get_parameters()))
                self.assertEqual(len(primitive.FLAG_NAMES), len(primitive.get_flags()))

    def test_move_parameter_order(self):
        primitive = MovePrimitive(0, Point(1.0, 2.0), Angle.of_radians(0.5), 3.0)
        self.assertEqual([1.0, 2.0, 0.5, 3.0], primitive.get_parameters())

    def test_dribble_flag_position(self):
        primitive = DribblePrimitive(0, Point(1.0, 2.0), Angle.zero(), 500.0, True)
        message = primitive.create_message()
        self.assertEqual([1.0, 2.0, 0.0, 500.0], list(message.parameters))
        self.assertEqual([True], list(message.extra_bits))

    def test_stop_has_only_a_flag(self):
        message = StopPrimitive(3).create_message()
        self.assertEqual([], list(message.parameters))
        self.assertEqual([False], list(message.extra_bits))

    def test_negative_robot_id_is_rejected(self):
        with self.assertRaises(ValueError):
            MovePrimitive(-1, Point(), Angle.zero())

    def test_primitives_are_immutable(self):
        primitive = StopPrimitive(1)
        with self.assertRaises(AttributeError):
            primitive.coast = True

    def test_parameter_count_mismatch_is_rejected_on_encode(self):
        class ExtraParameterStop(StopPrimitive):
            def get_parameters(self):
                return [1.0]

        with self.assertRaises(ValueError):
            ExtraParameterStop(1).create_message()

    def test_flag_count_mismatch_is_rejected_on_encode(self):
        class MissingFlagStop(StopPrimitive):
            def get_flags(self):
                return []

        with self.assertRaises(ValueError):
            MissingFlagStop(1).create_message()

    def test_duplicate_canonical_name_is_rejected(self):
        class OtherStop(StopPrimitive):
            pass

        self.assertIs(StopPrimitive, index_by_name(PRIMITIVE_TYPES)["Stop Primitive"])
        with self.assertRaises(ValueError):
            index_by_name([StopPrimitive, OtherStop])


class TestPrimitiveDecoding(unittest.TestCase):
    def test_round_trip(self):
        for primitive in sample_primitives():
            with self.subTest(primitive=primitive):
                decoded = type(primitive).from_message(primitive.create_message())
                self.assertEqual(primitive, decoded)

    def test_round_trip_through_serialized_bytes(self):
        for primitive in sample_primitives():
            with self.subTest(primitive=primitive):
                payload = primitive.create_message().SerializeToString()
                message = ai_messages.Primitive()
                message.ParseFromString(payload)
                self.assertEqual(primitive, decode_primitive(message))

    def test_name_mismatch(self):
        for primitive in sample_primitives():
            other_type = MovePrimitive if not isinstance(primitive, MovePrimitive) else KickPrimitive
            with self.subTest(primitive=primitive):
                with self.assertRaises(PrimitiveNameMismatchError) as context:
                    other_type.from_message(primitive.create_message())
                self.assertEqual(other_type.CANONICAL_NAME, context.exception.expected)
                self.assertEqual(primitive.CANONICAL_NAME, context.exception.received)

    def test_name_mismatch_is_checked_before_data(self):
        message = ai_messages.Primitive(robot_id=1, primitive_name="Something Else")
        with self.assertRaises(PrimitiveNameMismatchError):
            MovePrimitive.from_message(message)

    def test_insufficient_parameters(self):
        message = ai_messages.Primitive(
            robot_id=1, primitive_name="Move Primitive", parameters=[1.0, 2.0, 0.3]
        )
        with self.assertRaises(InsufficientPrimitiveDataError):
            MovePrimitive.from_message(message)

    def test_insufficient_flags(self):
        message = ai_messages.Primitive(
            robot_id=1,
            primitive_name="Dribble Primitive",
            parameters=[1.0, 2.0, 0.3, 100.0],
        )
        with self.assertRaises(InsufficientPrimitiveDataError):
            DribblePrimitive.from_message(message)

    def test_insufficient_data_is_a_decode_error(self):
        message = ai_messages.Primitive(robot_id=1, primitive_name="Stop Primitive")
        with self.assertRaises(PrimitiveDecodeError):
            StopPrimitive.from_message(message)

    def test_extra_parameters_are_ignored(self):
        message = ai_messages.Primitive(
            robot_id=2,
            primitive_name="Direct Velocity Primitive",
            parameters=[0.1, 0.2, 0.3, 99.0],
            extra_bits=[True],
        )
        self.assertEqual(
            DirectVelocityPrimitive(2, Vector(0.1, 0.2), 0.3),
            DirectVelocityPrimitive.from_message(message),
        )

    def test_dribble_reads_small_kick_flag(self):
        message = ai_messages.Primitive(
            robot_id=4,
            primitive_name="Dribble Primitive",
            parameters=[0.0, 0.0, 0.0, 100.0],
            extra_bits=[True],
        )
        self.assertTrue(DribblePrimitive.from_message(message).small_kick_allowed)

    def test_decode_primitive_dispatches_on_name(self):
        for primitive in sample_primitives():
            with self.subTest(primitive=primitive):
                decoded = decode_primitive(primitive.create_message())
                self.assertIs(type(primitive), type(decoded))

    def test_decode_unknown_primitive(self):
        message = ai_messages.Primitive(robot_id=1, primitive_name="Teleport Primitive")
        with self.assertRaises(UnknownPrimitiveError):
            decode_primitive(message)


class TestPrimitiveArray(unittest.TestCase):
    def test_array_keeps_order(self):
        primitives = sample_primitives()
        array_message = create_primitive_array_message(primitives)
        self.assertEqual(len(primitives), len(array_message.primitives))
        self.assertEqual(primitives, decode_primitive_array(array_message))

    def test_empty_array(self):
        array_message = create_primitive_array_message([])
        self.assertEqual(0, len(array_message.primitives))
        self.assertEqual([], decode_primitive_array(array_message))

    def test_invalid_entries_are_dropped(self):
        array_message = create_primitive_array_message(
            [StopPrimitive(1), KickPrimitive(2, Point(), Angle.zero(), 1.0)]
        )
        array_message.primitives.add(robot_id=9, primitive_name="Teleport Primitive")
        array_message.primitives.add(robot_id=8, primitive_name="Move Primitive")

        with self.assertLogs("primitive", level="WARNING") as logs:
            decoded = decode_primitive_array(array_message)

        self.assertEqual(
            [StopPrimitive(1), KickPrimitive(2, Point(), Angle.zero(), 1.0)], decoded
        )
        self.assertEqual(2, len(logs.output))

    def test_is_primitive_type(self):
        self.assertTrue(is_primitive_type(MovePrimitive))
        self.assertFalse(is_primitive_type(int))


if __name__ == "__main__":
    unittest.main()
