"""
Estado de la calculadora como valor único.

La calculadora está siempre en uno de dos estados:
    - EditingState: edición normal (buffer, acumulador, operador pendiente...)
    - ErrorState: error aritmético; solo C / CE salen de él
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from .input_buffer import InputBuffer
from .operations import BinaryOperator


@dataclass
class EditingState:
    """Estado de edición normal. Los valores por defecto son los de encendido."""

    buffer: InputBuffer = field(default_factory=InputBuffer)
    accumulator: Decimal = Decimal(0)
    pending_operator: Optional[BinaryOperator] = None
    reset_on_next_digit: bool = True   # El próximo dígito sobrescribe el buffer
    history: str = ""                  # Solo display, no interviene en cálculos


@dataclass(frozen=True)
class ErrorState:
    """
    Modo error.

    Args:
        message (str): Mensaje mostrado en el display principal
        snapshot (EditingState): Estado de edición en el momento del fallo,
            sin modificar por el comando que falló
    """

    message: str
    snapshot: EditingState
