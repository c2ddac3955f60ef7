from abc import ABC, abstractmethod
from queue import Empty, Queue
from typing import Optional

from Primitive.primitive_types import decode_primitive_array
from utils.logger import get_logger

logger = get_logger("control_loop")


class PrimitivePublisher(ABC):
    """Saída do núcleo de decisão: recebe um `PrimitiveArray` por tick."""

    def __init__(self):
        self.published_messages = 0

    @abstractmethod
    def publish(self, primitive_array):
        pass

    @abstractmethod
    def start(self):
        pass

    @abstractmethod
    def stop(self):
        pass


class LoggingPublisher(PrimitivePublisher):
    """Escreve cada Primitive no log; útil sem transporte configurado."""

    def __init__(self):
        super().__init__()

    def start(self):
        logger.info("Starting logging publisher")

    def stop(self):
        logger.info(f"Stopping logging publisher after {self.published_messages} messages")

    def publish(self, primitive_array):
        self.published_messages += 1
        for primitive in decode_primitive_array(primitive_array):
            logger.info(f"robot {primitive.robot_id}: {primitive}")


class QueuePublisher(PrimitivePublisher):
    """Entrega as mensagens numa fila, para consumo no mesmo processo."""

    def __init__(self, maxsize: int = 0):
        super().__init__()
        self.messages = Queue(maxsize=maxsize)

    def start(self):
        pass

    def stop(self):
        pass

    def publish(self, primitive_array):
        self.published_messages += 1
        self.messages.put(primitive_array)

    def get(self, timeout: Optional[float] = None):
        """Next published message, or None if nothing arrives in time."""
        try:
            return self.messages.get(timeout=timeout)
        except Empty:
            return None
