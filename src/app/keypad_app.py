"""
Aplicación de consola que integra el teclado con el motor aritmético.

Este módulo contiene la clase KeypadCalculatorApp.
"""

import sys

from config.calculator_config import CalculatorConfig
from core.calculator import Calculator
from core.operations import UnaryOperation

from . import keypad

DISPLAY_WIDTH = 28

OPERATION_NAMES = {
    keypad.ADD: "SUMA",
    keypad.SUBTRACT: "RESTA",
    keypad.MULTIPLY: "MULTIPLICAR",
    keypad.DIVIDE: "DIVIDIR",
}

UNARY_KEYS = {
    keypad.SQUARE_ROOT: (UnaryOperation.SQUARE_ROOT, "RAÍZ"),
    keypad.RECIPROCAL: (UnaryOperation.RECIPROCAL, "RECÍPROCO"),
    keypad.PERCENT: (UnaryOperation.PERCENT, "PORCENTAJE"),
    keypad.NEGATE: (UnaryOperation.NEGATE, "CAMBIO DE SIGNO"),
}

QUIT_COMMANDS = ("q", "salir", "exit")


# ============================================================================
class KeypadCalculatorApp:
    """
    Calculadora de consola manejada por teclas.

    Arquitectura:
        - keypad: Normaliza etiquetas de tecla ("*" → "×", "Enter" → "=")
        - Calculator: Lógica aritmética y estado
        - KeypadCalculatorApp: Coordinador, feedback y bucle principal

    Tras cada línea de teclas se vuelven a leer los dos displays de la
    calculadora (historial y número actual) y se imprimen.
    """

    def __init__(self, config=None):
        """
        Inicializa la aplicación.

        Args:
            config (CalculatorConfig): Configuración (opcional)
        """
        self.config = config if config else CalculatorConfig()
        self.calc = Calculator(self.config)

    def process(self, key):
        """
        Procesa una tecla y actualiza el estado de la calculadora.

        Args:
            key (str): Etiqueta de la tecla (ej: "5", "+", "1/x", "Enter")

        Returns:
            str | None: Mensaje de feedback, None si la tecla no existe

        Feedback:
            - Números: "OK 5"
            - Operaciones: "+ SUMA", "√ RAÍZ", ...
            - Resultado: "= 7"
            - Error aritmético: "Error: <mensaje>"
        """
        canonical = keypad.normalize_key(key)
        if canonical is None:
            return None

        calc = self.calc
        was_error = calc.is_error_state()

        # ====================================================================
        # NÚMEROS (0-9) Y PUNTO DECIMAL
        # ====================================================================
        if canonical in keypad.DIGIT_KEYS:
            digit = int(canonical)
            feedback = f"OK {digit}" if calc.input_digit(digit) else "IGNORADO"

        elif canonical == keypad.DECIMAL_POINT:
            feedback = "OK ." if calc.input_decimal_point() else "IGNORADO"

        # ====================================================================
        # OPERADORES BINARIOS (+ - × ÷)
        # ====================================================================
        elif canonical in keypad.BINARY_KEYS:
            calc.apply_binary_operator(canonical)
            feedback = f"{canonical} {OPERATION_NAMES[canonical]}"

        # ====================================================================
        # IGUAL (=)
        # ====================================================================
        elif canonical == keypad.EQUALS:
            calc.evaluate()
            feedback = f"= {calc.get_display()}"

        # ====================================================================
        # OPERACIONES UNARIAS (√ 1/x % ±)
        # ====================================================================
        elif canonical in UNARY_KEYS:
            operation, name = UNARY_KEYS[canonical]
            calc.apply_unary_operation(operation)
            feedback = f"{canonical} {name}"

        # ====================================================================
        # BORRADO (CE, C, ←)
        # ====================================================================
        elif canonical == keypad.CLEAR_ENTRY:
            calc.clear_entry()
            feedback = "ENTRADA BORRADA"

        elif canonical == keypad.CLEAR_ALL:
            calc.clear_all()
            feedback = "TODO BORRADO"

        else:
            calc.backspace()
            feedback = "← BORRADO"

        if calc.is_error_state():
            # En modo error las teclas se ignoran hasta C / CE
            return "IGNORADO" if was_error else f"Error: {calc.get_display()}"
        return feedback

    def render_display(self):
        """Historial y número actual alineados a la derecha, uno por línea."""
        return (f"{self.calc.get_history():>{DISPLAY_WIDTH}}\n"
                f"{self.calc.get_display():>{DISPLAY_WIDTH}}")

    def process_line(self, line):
        """
        Procesa todas las teclas de una línea.

        Returns:
            list[str]: Teclas desconocidas encontradas en la línea
        """
        unknown = []
        for key in keypad.tokenize_keys(line):
            feedback = self.process(key)
            if feedback is None:
                unknown.append(key)
            elif self.config.show_feedback:
                print(feedback)
        return unknown

    def run(self, stream=None):
        """
        Bucle principal de la aplicación.

        Ciclo de ejecución:
            1. Leer una línea de teclas
            2. Procesar cada tecla
            3. Imprimir historial y número actual
            4. Repetir hasta 'q', 'salir' o fin de entrada

        Args:
            stream: Fuente de líneas (por defecto sys.stdin)
        """
        stream = stream if stream is not None else sys.stdin
        interactive = stream.isatty() if hasattr(stream, "isatty") else False

        print("\n" + "=" * 50)
        print("CALCULADORA - EJECUCIÓN INMEDIATA")
        print("=" * 50)
        print("\nNúmeros: 0-9 y . (varias teclas seguidas: 12.5)")
        print("Operaciones: + - × ÷ (también * x /) y = (o Enter)")
        print("Unarias: √ (sqrt), 1/x, %, +/-")
        print("Borrado: CE, C, ← (o <)")
        print("\nEscribe 'q' o 'salir' para terminar")
        print("=" * 50 + "\n")
        print(self.render_display())

        while True:
            if interactive:
                print("> ", end="", flush=True)
            line = stream.readline()
            if not line:
                break
            line = line.strip()
            if line.lower() in QUIT_COMMANDS:
                break

            for key in self.process_line(line):
                print(f"⚠ Tecla desconocida: {key}")
            print(self.render_display())

        print("\nOK Aplicacion cerrada correctamente")
