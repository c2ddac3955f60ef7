import queue
import threading
import time
from datetime import timedelta
from typing import Callable, Optional

from AI.ai import AI
from ControlLoop.primitive_publisher import PrimitivePublisher
from Geometry.timestamp import Timestamp
from Primitive.primitive_types import create_primitive_array_message
from utils.logger import get_logger
from utils.message_conversion import (
    create_ball_from_message,
    create_field_from_message,
    create_team_from_message,
)

logger = get_logger("control_loop")


class ControlLoop(threading.Thread):
    """
    Loop de controle do núcleo de decisão.

    Cada iteração:
    1. Aplica, na ordem de chegada, todas as atualizações pendentes do World
       (uma chamada de setter por mensagem)
    2. Pede ao AI os Primitives para o instante atual
    3. Publica um único `PrimitiveArray` (possivelmente vazio)

    Os handlers `on_*_message` podem ser chamados de qualquer thread: eles
    só convertem a mensagem e a colocam na fila. Apenas a thread do loop
    altera o World.
    """

    def __init__(
        self,
        ai: AI,
        publisher: PrimitivePublisher,
        robot_expiry_buffer: timedelta,
        fps: int = 60,
        clock: Callable[[], Timestamp] = Timestamp.now,
    ):
        super().__init__(name="ControlLoop")
        self.daemon = True

        self.ai = ai
        self.publisher = publisher
        self.robot_expiry_buffer = robot_expiry_buffer
        self.clock = clock
        self._fps = fps
        self._updates = queue.Queue()

        self.running = False
        self.tick_count = 0

        logger.info(f"ControlLoop inicializado a {fps} FPS")

    # Handlers de entrada, um por canal
    def on_field_message(self, field_msg):
        field = create_field_from_message(field_msg)
        self._updates.put((self.ai.update_world_field_state, field))

    def on_ball_message(self, ball_msg):
        ball = create_ball_from_message(ball_msg)
        self._updates.put((self.ai.update_world_ball_state, ball))

    def on_friendly_team_message(self, team_msg):
        team = create_team_from_message(team_msg, self.robot_expiry_buffer)
        self._updates.put((self.ai.update_world_friendly_team_state, team))

    def on_enemy_team_message(self, team_msg):
        team = create_team_from_message(team_msg, self.robot_expiry_buffer)
        self._updates.put((self.ai.update_world_enemy_team_state, team))

    def pending_updates(self) -> int:
        return self._updates.qsize()

    def _drain_updates(self) -> int:
        applied = 0
        while True:
            try:
                setter, value = self._updates.get_nowait()
            except queue.Empty:
                return applied
            setter(value)
            applied += 1

    def run_once(self, timestamp: Optional[Timestamp] = None):
        """Runs one control tick and returns the published message."""
        applied = self._drain_updates()
        if applied:
            logger.debug(f"Applied {applied} world updates")

        timestamp = timestamp if timestamp is not None else self.clock()
        primitives = self.ai.get_primitives(timestamp)
        primitive_array = create_primitive_array_message(primitives)
        self.publisher.publish(primitive_array)

        self.tick_count += 1
        return primitive_array

    def run(self):
        self.running = True
        self.publisher.start()
        logger.info("ControlLoop iniciado")

        while self.running:
            loop_start_time = time.perf_counter()
            try:
                self.run_once()
            except Exception:
                logger.exception("Erro no tick de controle")

            tick_duration = time.perf_counter() - loop_start_time
            sleep_time = (1.0 / self._fps) - tick_duration
            if sleep_time > 0:
                time.sleep(sleep_time)

        self.publisher.stop()
        logger.info(f"ControlLoop encerrado após {self.tick_count} ticks")

    def stop(self):
        self.running = False
        if self.is_alive() and threading.current_thread() is not self:
            self.join(timeout=1.0)
