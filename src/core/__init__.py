"""
Módulo core con la lógica principal de la calculadora.
Contiene el motor aritmético, sus operaciones y la aritmética decimal.
"""

from .calculator import Calculator
from .errors import CalculationError, CalculatorError, InvalidCommandError
from .operations import BinaryOperator, UnaryOperation

__all__ = ['Calculator', 'BinaryOperator', 'UnaryOperation',
           'CalculatorError', 'CalculationError', 'InvalidCommandError']
