"""
Módulo de la aplicación principal.
Contiene la clase que integra el teclado con el motor aritmético.
"""

from .keypad_app import KeypadCalculatorApp

__all__ = ['KeypadCalculatorApp']
