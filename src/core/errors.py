"""
Excepciones de la calculadora.

Dos familias de errores:
    - InvalidCommandError: uso incorrecto por parte del llamador (un bug del
      llamador, no una condición aritmética). Se lanza inmediatamente.
    - CalculationError: error aritmético (división entre cero, raíz de un
      negativo). La calculadora la captura y entra en modo error.
"""


class CalculatorError(Exception):
    """Base de todos los errores de la calculadora."""


class InvalidCommandError(CalculatorError, ValueError):
    """Comando inválido: dígito fuera de 0-9, operador vacío o desconocido."""


class CalculationError(CalculatorError, ArithmeticError):
    """Error aritmético que deja la calculadora en modo error."""


class DivideByZeroError(CalculationError):
    """División (o recíproco) con divisor cero."""


class NegativeRootError(CalculationError):
    """Raíz cuadrada de un número negativo."""
