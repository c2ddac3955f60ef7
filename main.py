# main.py
"""
Núcleo de decisão SSL - ponto de entrada
========================================

Monta o World com os valores padrão, o AI com a política baseada em
papéis e o loop de controle, e mantém o loop rodando até receber SIGINT ou
SIGTERM. O transporte das mensagens de entrada e saída fica a cargo de quem
registra os handlers `on_*_message` e o publicador.
"""

import argparse
import signal
import sys
import time
import traceback

from AI.ai import AI
from AI.decision_policy import RoleBasedPolicy
from ControlLoop.control_loop import ControlLoop
from ControlLoop.primitive_publisher import LoggingPublisher
from World.ball import Ball
from World.field import Field
from World.team import Team
from World.world import World
from utils import logger as logging_utils
from utils.utils import get_config, get_robot_expiry_buffer

logger = logging_utils.get_logger("main")


def build_control_loop(config: dict, publisher=None) -> ControlLoop:
    """
    Cria o AI (com seu World) e o loop de controle a partir da configuração.

    O AI é criado uma única vez aqui e passado ao loop; não existe instância
    global.
    """
    expiry_buffer = get_robot_expiry_buffer(config)
    world = World(Field(), Ball(), Team(expiry_buffer), Team(expiry_buffer))
    ai = AI(world, RoleBasedPolicy())
    return ControlLoop(
        ai,
        publisher if publisher is not None else LoggingPublisher(),
        expiry_buffer,
        fps=config["match"]["fps"],
    )


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="SSL AI decision core")
    parser.add_argument("--config", help="Path to config.json", default=None)
    parser.add_argument("--fps", type=int, help="Control loop rate", default=None)
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug logs for every component"
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    config = get_config(args.config)
    if args.fps is not None:
        config["match"]["fps"] = args.fps
    if args.debug:
        config["debug_flags"]["all"] = True
    logging_utils.configure_from_config(config)

    control_loop = build_control_loop(config)

    def signal_handler(sig, frame):
        logger.info("Sinal de interrupção recebido. Encerrando o loop de controle...")
        control_loop.stop()

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    try:
        control_loop.start()
        while control_loop.is_alive():
            time.sleep(0.1)
    except Exception as e:
        logger.error(f"ERRO FATAL em main: {e}")
        traceback.print_exc()
        control_loop.stop()
        sys.exit(1)

    logger.info("Desligamento completo.")


if __name__ == "__main__":
    main()
