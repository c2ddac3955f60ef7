"""
Mensagens protobuf trocadas pelo núcleo de decisão.

As mensagens são descritas aqui e registradas no pool de descritores do
protobuf em tempo de importação, equivalente ao .proto abaixo:

    syntax = "proto3";
    package ssl_ai;

    message Point2D { double x = 1; double y = 2; }
    message Ball {
        Point2D position = 1; Point2D velocity = 2; int64 timestamp_ns = 3;
    }
    message Robot {
        uint32 id = 1; Point2D position = 2; Point2D velocity = 3;
        double orientation = 4; double angular_velocity = 5;
        int64 timestamp_ns = 6;
    }
    message Team { repeated Robot robots = 1; }
    message Field {
        double field_length = 1; double field_width = 2;
        double defense_length = 3; double defense_width = 4;
        double goal_width = 5; double boundary_width = 6;
        double center_circle_radius = 7;
    }
    message Primitive {
        uint32 robot_id = 1; string primitive_name = 2;
        repeated double parameters = 3; repeated bool extra_bits = 4;
    }
    message PrimitiveArray { repeated Primitive primitives = 1; }
"""

from google.protobuf import descriptor_pb2, message_factory

PACKAGE = "ssl_ai"
PROTO_FILE_NAME = "ssl_ai/ai_messages.proto"

_F = descriptor_pb2.FieldDescriptorProto

OPTIONAL = _F.LABEL_OPTIONAL
REPEATED = _F.LABEL_REPEATED

# message -> [(field name, number, type, label, message type name)]
MESSAGE_DEFINITIONS = {
    "Point2D": [
        ("x", 1, _F.TYPE_DOUBLE, OPTIONAL, None),
        ("y", 2, _F.TYPE_DOUBLE, OPTIONAL, None),
    ],
    "Ball": [
        ("position", 1, _F.TYPE_MESSAGE, OPTIONAL, "Point2D"),
        ("velocity", 2, _F.TYPE_MESSAGE, OPTIONAL, "Point2D"),
        ("timestamp_ns", 3, _F.TYPE_INT64, OPTIONAL, None),
    ],
    "Robot": [
        ("id", 1, _F.TYPE_UINT32, OPTIONAL, None),
        ("position", 2, _F.TYPE_MESSAGE, OPTIONAL, "Point2D"),
        ("velocity", 3, _F.TYPE_MESSAGE, OPTIONAL, "Point2D"),
        ("orientation", 4, _F.TYPE_DOUBLE, OPTIONAL, None),
        ("angular_velocity", 5, _F.TYPE_DOUBLE, OPTIONAL, None),
        ("timestamp_ns", 6, _F.TYPE_INT64, OPTIONAL, None),
    ],
    "Team": [
        ("robots", 1, _F.TYPE_MESSAGE, REPEATED, "Robot"),
    ],
    "Field": [
        ("field_length", 1, _F.TYPE_DOUBLE, OPTIONAL, None),
        ("field_width", 2, _F.TYPE_DOUBLE, OPTIONAL, None),
        ("defense_length", 3, _F.TYPE_DOUBLE, OPTIONAL, None),
        ("defense_width", 4, _F.TYPE_DOUBLE, OPTIONAL, None),
        ("goal_width", 5, _F.TYPE_DOUBLE, OPTIONAL, None),
        ("boundary_width", 6, _F.TYPE_DOUBLE, OPTIONAL, None),
        ("center_circle_radius", 7, _F.TYPE_DOUBLE, OPTIONAL, None),
    ],
    "Primitive": [
        ("robot_id", 1, _F.TYPE_UINT32, OPTIONAL, None),
        ("primitive_name", 2, _F.TYPE_STRING, OPTIONAL, None),
        ("parameters", 3, _F.TYPE_DOUBLE, REPEATED, None),
        ("extra_bits", 4, _F.TYPE_BOOL, REPEATED, None),
    ],
    "PrimitiveArray": [
        ("primitives", 1, _F.TYPE_MESSAGE, REPEATED, "Primitive"),
    ],
}


def build_file_descriptor() -> descriptor_pb2.FileDescriptorProto:
    file_proto = descriptor_pb2.FileDescriptorProto(
        name=PROTO_FILE_NAME, package=PACKAGE, syntax="proto3"
    )
    for message_name, fields in MESSAGE_DEFINITIONS.items():
        message_proto = file_proto.message_type.add(name=message_name)
        for field_name, number, field_type, label, type_name in fields:
            field_proto = message_proto.field.add(
                name=field_name, number=number, type=field_type, label=label
            )
            if type_name:
                field_proto.type_name = f".{PACKAGE}.{type_name}"
    return file_proto


_MESSAGE_CLASSES = message_factory.GetMessages([build_file_descriptor()])

Point2D = _MESSAGE_CLASSES[f"{PACKAGE}.Point2D"]
Ball = _MESSAGE_CLASSES[f"{PACKAGE}.Ball"]
Robot = _MESSAGE_CLASSES[f"{PACKAGE}.Robot"]
Team = _MESSAGE_CLASSES[f"{PACKAGE}.Team"]
Field = _MESSAGE_CLASSES[f"{PACKAGE}.Field"]
Primitive = _MESSAGE_CLASSES[f"{PACKAGE}.Primitive"]
PrimitiveArray = _MESSAGE_CLASSES[f"{PACKAGE}.PrimitiveArray"]
