"""
Módulo de configuración de la calculadora.
Contiene la configuración de precisión, límites y mensajes.
"""

from .calculator_config import CalculatorConfig

__all__ = ['CalculatorConfig']
