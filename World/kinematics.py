"""
Modelo de movimento usado para prever o estado de bolas e robôs.

A velocidade decai exponencialmente com o tempo (aproximação do atrito de
rolamento), enquanto a posição é extrapolada a partir da velocidade
conhecida no instante da última atualização.
"""

import math
from datetime import timedelta

from Geometry.geometry import Point, Vector

# Taxa de decaimento da velocidade (1/s), ajustada aos dados medidos em campo
VELOCITY_DECAY_RATE = -0.1


class TemporalOrderingError(ValueError):
    """Raised when an update carries a timestamp older than the stored state."""


def duration_to_seconds(duration: timedelta) -> float:
    """Converts a non-negative duration to seconds."""
    if duration < timedelta(0):
        raise ValueError(f"Cannot estimate state at a past time (duration={duration})")
    return duration.total_seconds()


def velocity_decay_factor(seconds: float) -> float:
    return math.exp(VELOCITY_DECAY_RATE * seconds)


def estimate_position(position: Point, velocity: Vector, seconds: float) -> Point:
    return position + velocity * seconds


def estimate_velocity(velocity: Vector, seconds: float) -> Vector:
    return velocity * velocity_decay_factor(seconds)
