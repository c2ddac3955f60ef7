"""
Base dos Primitives: comandos de atuação que um robô executa diretamente.

Cada tipo de Primitive tem um nome canônico e listas de parâmetros
(números) e flags (booleanos) de tamanho e ordem fixos, documentados pelo
próprio tipo em PARAMETER_NAMES e FLAG_NAMES. A mesma ordem é usada para
codificar e decodificar a mensagem `Primitive`.
"""

from abc import ABC, abstractmethod
from typing import List, Sequence, Tuple

from protocols import ai_messages


class PrimitiveDecodeError(ValueError):
    """Base for errors that reject a single Primitive message."""


class PrimitiveNameMismatchError(PrimitiveDecodeError):
    def __init__(self, expected: str, received: str):
        super().__init__(
            f"Primitive message name '{received}' does not match '{expected}'"
        )
        self.expected = expected
        self.received = received


class InsufficientPrimitiveDataError(PrimitiveDecodeError):
    pass


class UnknownPrimitiveError(PrimitiveDecodeError):
    pass


class Primitive(ABC):
    """Uniform operations shared by every Primitive type."""

    CANONICAL_NAME: str = ""
    PARAMETER_NAMES: Tuple[str, ...] = ()
    FLAG_NAMES: Tuple[str, ...] = ()

    robot_id: int

    def __post_init__(self):
        if self.robot_id < 0:
            raise ValueError(f"Robot id must be non-negative, got {self.robot_id}")

    @classmethod
    def get_primitive_name(cls) -> str:
        return cls.CANONICAL_NAME

    def get_robot_id(self) -> int:
        return self.robot_id

    @abstractmethod
    def get_parameters(self) -> List[float]:
        """Numeric parameters, in the order given by PARAMETER_NAMES."""

    def get_flags(self) -> List[bool]:
        """Boolean flags, in the order given by FLAG_NAMES."""
        return []

    @classmethod
    @abstractmethod
    def _from_wire(
        cls, robot_id: int, parameters: Sequence[float], flags: Sequence[bool]
    ) -> "Primitive":
        """Builds the Primitive from already validated parameters and flags."""

    def create_message(self):
        """Encodes this Primitive as a `Primitive` protobuf message."""
        parameters = self.get_parameters()
        flags = self.get_flags()
        if len(parameters) != len(self.PARAMETER_NAMES):
            raise ValueError(
                f"{type(self).__name__} produced {len(parameters)} parameters, "
                f"expected {len(self.PARAMETER_NAMES)}"
            )
        if len(flags) != len(self.FLAG_NAMES):
            raise ValueError(
                f"{type(self).__name__} produced {len(flags)} flags, "
                f"expected {len(self.FLAG_NAMES)}"
            )

        message = ai_messages.Primitive()
        message.robot_id = self.robot_id
        message.primitive_name = self.get_primitive_name()
        message.parameters.extend(parameters)
        message.extra_bits.extend(flags)
        return message

    @classmethod
    def from_message(cls, message) -> "Primitive":
        """
        Decodes a `Primitive` message into this Primitive type.

        Raises:
            PrimitiveNameMismatchError: the message names another type.
            InsufficientPrimitiveDataError: fewer parameters or flags than
                this type requires.
        """
        validate_primitive_message(message, cls)
        parameters = list(message.parameters)[: len(cls.PARAMETER_NAMES)]
        flags = list(message.extra_bits)[: len(cls.FLAG_NAMES)]
        return cls._from_wire(message.robot_id, parameters, flags)


def validate_primitive_message(message, primitive_type) -> None:
    name = primitive_type.get_primitive_name()
    if message.primitive_name != name:
        raise PrimitiveNameMismatchError(name, message.primitive_name)

    required_parameters = len(primitive_type.PARAMETER_NAMES)
    if len(message.parameters) < required_parameters:
        raise InsufficientPrimitiveDataError(
            f"{name} needs {required_parameters} parameters, "
            f"got {len(message.parameters)}"
        )

    required_flags = len(primitive_type.FLAG_NAMES)
    if len(message.extra_bits) < required_flags:
        raise InsufficientPrimitiveDataError(
            f"{name} needs {required_flags} flags, got {len(message.extra_bits)}"
        )
