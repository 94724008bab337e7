"""
Aritmética decimal a precisión de trabajo.

Todas las operaciones usan un decimal.Context (16 dígitos significativos,
redondeo ROUND_HALF_UP por defecto) para acotar el error acumulado en
cadenas de operaciones. La raíz cuadrada se refina con Newton-Raphson
partiendo de una aproximación rápida en coma flotante (numpy).
"""

import logging
from decimal import Context, Decimal, ROUND_HALF_UP

import numpy as np

from .errors import DivideByZeroError, NegativeRootError
from .operations import BinaryOperator

logger = logging.getLogger(__name__)

WORKING_PRECISION = 16
DEFAULT_CONTEXT = Context(prec=WORKING_PRECISION, rounding=ROUND_HALF_UP)
DEFAULT_MAX_SQRT_ITERATIONS = 100

ZERO = Decimal(0)
ONE = Decimal(1)
TWO = Decimal(2)
ONE_HUNDRED = Decimal(100)


def parse_decimal(text):
    """
    Convierte el texto de un buffer en Decimal.

    Reglas:
        - "-" solo vale cero (el usuario está empezando un negativo)
        - Un "." final se trata como ".0" ("5." → 5)
    """
    if text in ("", "-"):
        return ZERO
    if text.endswith("."):
        text += "0"
    return Decimal(text)


def format_decimal(value):
    """
    Formatea un Decimal para el display.

    Quita ceros fraccionarios finales y nunca usa notación exponencial:
    Decimal("3.00") → "3", Decimal("1E+2") → "100". El cero siempre se
    muestra como "0", nunca como "-0".
    """
    if value.is_zero():
        return "0"
    digits = len(value.as_tuple().digits)
    normalized = value.normalize(Context(prec=max(digits, 1)))
    return format(normalized, "f")


def compute_binary(left, right, operator, context=DEFAULT_CONTEXT):
    """
    Aplica un operador binario a precisión de trabajo.

    Args:
        left (Decimal): Operando izquierdo (acumulador)
        right (Decimal): Operando derecho (buffer)
        operator (BinaryOperator): Operador a aplicar
        context (Context): Contexto decimal de trabajo

    Returns:
        Decimal: Resultado redondeado al contexto

    Raises:
        DivideByZeroError: Si se divide entre cero
    """
    if operator is BinaryOperator.ADD:
        return context.add(left, right)
    if operator is BinaryOperator.SUBTRACT:
        return context.subtract(left, right)
    if operator is BinaryOperator.MULTIPLY:
        return context.multiply(left, right)
    if operator is BinaryOperator.DIVIDE:
        if right.is_zero():
            raise DivideByZeroError("division by zero")
        return context.divide(left, right)
    raise ValueError(f"Operador no soportado: {operator!r}")


def reciprocal(value, context=DEFAULT_CONTEXT):
    """
    Recíproco 1 / value a precisión de trabajo.

    Raises:
        DivideByZeroError: Si value es cero
    """
    if value.is_zero():
        raise DivideByZeroError("reciprocal of zero")
    return context.divide(ONE, value)


def percent(value, accumulator=None, context=DEFAULT_CONTEXT):
    """
    Porcentaje del valor actual.

    Sin operación pendiente: value / 100.
    Con operación pendiente: accumulator × value / 100 (porcentaje relativo
    al operando izquierdo de la cadena, ej: 200 + 10% → 20).
    """
    if accumulator is None:
        return context.divide(value, ONE_HUNDRED)
    return context.divide(context.multiply(accumulator, value), ONE_HUNDRED)


def negate(value, context=DEFAULT_CONTEXT):
    """Cambio de signo redondeado al contexto de trabajo."""
    return context.minus(value)


def _initial_guess(value, context):
    """Semilla de Newton: raíz en coma flotante, o potencia de 10 si el float desborda."""
    seed = np.sqrt(float(value))
    if np.isfinite(seed) and seed > 0:
        return context.create_decimal_from_float(float(seed))
    # Exponentes fuera del rango de float64
    return ONE.scaleb(value.adjusted() // 2, context)


def square_root(value, context=DEFAULT_CONTEXT, max_iterations=DEFAULT_MAX_SQRT_ITERATIONS):
    """
    Raíz cuadrada no negativa por Newton-Raphson.

    Itera guess = (guess + value / guess) / 2 hasta que dos estimaciones
    consecutivas son iguales a la precisión de trabajo, con un máximo de
    max_iterations pasos.

    Raises:
        NegativeRootError: Si value < 0
    """
    if value < 0:
        raise NegativeRootError("square root of negative number")
    if value.is_zero():
        return ZERO

    guess = _initial_guess(value, context)
    for _ in range(max_iterations):
        previous = guess
        guess = context.divide(context.add(guess, context.divide(value, guess)), TWO)
        if guess == previous:
            return guess

    logger.warning("Raíz cuadrada de %s sin converger tras %d iteraciones; se usa %s",
                   value, max_iterations, guess)
    return guess
