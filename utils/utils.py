"""
Utilitários de configuração do núcleo de decisão.

A configuração é lida de `config.json` na raiz do projeto; se não existir
ou for inválida, usa `config.default.json` e, em último caso, a
configuração mínima embutida abaixo. Seções ausentes são completadas com os
valores padrão.
"""

import copy
import json
import os
from datetime import timedelta
from typing import Any, Dict, Optional

from utils.logger import get_logger

logger = get_logger("main")

PROJECT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

DEFAULT_CONFIG: Dict[str, Any] = {
    "ai": {
        "robot_expiry_buffer_milliseconds": 1000,
    },
    "match": {
        "fps": 60,
    },
    "debug_flags": {
        "ai": False,
        "control_loop": False,
        "decision_policy": False,
        "message_conversion": False,
        "primitive": False,
        "world": False,
        "all": False,
    },
    "logging": {
        "log_to_file": False,
        "log_dir": "logs",
    },
}


def _merge_with_defaults(config: Dict[str, Any]) -> Dict[str, Any]:
    """Completa as seções e chaves ausentes com os valores padrão."""
    merged = copy.deepcopy(config)
    for section, section_defaults in DEFAULT_CONFIG.items():
        if not isinstance(merged.get(section), dict):
            merged[section] = copy.deepcopy(section_defaults)
            continue
        for key, value in section_defaults.items():
            merged[section].setdefault(key, value)
    return merged


def load_config(
    config_path: str, default_config_path: Optional[str] = None
) -> Dict[str, Any]:
    """
    Carrega configuração de um arquivo JSON.

    Tenta o caminho principal, depois o caminho padrão; se ambos falharem,
    retorna a configuração mínima embutida.

    Args:
        config_path: Caminho para o arquivo de configuração
        default_config_path: Caminho opcional para a configuração padrão

    Returns:
        Dicionário com configurações
    """
    for path in (config_path, default_config_path):
        if not path:
            continue
        try:
            with open(path, "r") as f:
                config = json.load(f)
            logger.info(f"Configuração carregada de {path}")
            return _merge_with_defaults(config)
        except FileNotFoundError:
            logger.warning(f"Arquivo de configuração não encontrado: {path}")
        except json.JSONDecodeError as e:
            logger.warning(f"JSON inválido em {path}: {e}")

    logger.warning("Utilizando configuração mínima padrão")
    return copy.deepcopy(DEFAULT_CONFIG)


def get_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Procura a configuração nos locais padrão do projeto."""
    config_path = config_path or os.path.join(PROJECT_DIR, "config.json")
    default_config_path = os.path.join(PROJECT_DIR, "config.default.json")
    logger.debug(f"Buscando configuração em: {config_path}")
    return load_config(config_path, default_config_path)


def get_robot_expiry_buffer(config: Dict[str, Any]) -> timedelta:
    milliseconds = config["ai"]["robot_expiry_buffer_milliseconds"]
    return timedelta(milliseconds=milliseconds)
