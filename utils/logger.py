import logging
import os
import sys
from typing import Dict

# Loggers já configurados, por componente
_loggers: Dict[str, logging.Logger] = {}

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Componentes do núcleo de decisão que têm logger próprio
COMPONENTS = (
    "ai",
    "control_loop",
    "decision_policy",
    "message_conversion",
    "primitive",
    "world",
)


def setup_logger(
    name: str, level: str = "INFO", log_to_file: bool = False, log_dir: str = "logs"
) -> logging.Logger:
    """
    Configura um logger com o nome e nível especificados.

    Se o logger já existir, o nível é ajustado e, com log_to_file, o arquivo
    de log é anexado caso ainda não esteja (os handlers não são duplicados).

    Args:
        name: Nome do componente
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_to_file: Se True, também grava em {log_dir}/{name}.log
        log_dir: Diretório dos arquivos de log

    Returns:
        Logger configurado
    """
    logger = _loggers.get(name)
    if logger is None:
        logger = logging.getLogger(name)
        logger.propagate = False

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(console_handler)

        _loggers[name] = logger

    logger.setLevel(LOG_LEVELS.get(level.upper(), logging.INFO))

    if log_to_file:
        _add_file_handler(logger, os.path.join(log_dir, f"{name}.log"))

    return logger


def _add_file_handler(logger: logging.Logger, log_path: str) -> None:
    """Anexa um FileHandler para log_path, se o logger ainda não tiver um."""
    log_path = os.path.abspath(log_path)
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == log_path:
            return

    os.makedirs(os.path.dirname(log_path), exist_ok=True)
    file_handler = logging.FileHandler(log_path)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Obtém o logger do componente, criando-o com o nível padrão se preciso."""
    if name not in _loggers:
        return setup_logger(name)
    return _loggers[name]


def configure_from_config(config: dict) -> None:
    """
    Ajusta os níveis dos loggers a partir da seção `debug_flags` da
    configuração. `all` coloca todos os componentes em DEBUG.
    """
    debug_flags = config.get("debug_flags", {})
    debug_all = debug_flags.get("all", False)
    log_to_file = config.get("logging", {}).get("log_to_file", False)
    log_dir = config.get("logging", {}).get("log_dir", "logs")

    setup_logger(
        "main",
        level="DEBUG" if debug_all else "INFO",
        log_to_file=log_to_file,
        log_dir=log_dir,
    )

    for component in COMPONENTS:
        is_debug = debug_all or debug_flags.get(component, False)
        setup_logger(
            component,
            level="DEBUG" if is_debug else "INFO",
            log_to_file=log_to_file,
            log_dir=log_dir,
        )
