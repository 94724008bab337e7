"""
Configuración de la calculadora.

Este módulo centraliza la precisión de trabajo, los límites de entrada y
los mensajes de error mostrados en el display.
"""

from decimal import Context, ROUND_HALF_UP


# ============================================================================
# CLASE: CalculatorConfig
# Propósito: Configuración del motor aritmético y de la app de consola
# Responsabilidades:
#   - Precisión y modo de redondeo de la aritmética decimal
#   - Límites (iteraciones de la raíz cuadrada, dígitos de entrada)
#   - Mensajes de error mostrados al usuario
# ============================================================================
class CalculatorConfig:
    """
    Configuración de la calculadora con valores por defecto.

    Opciones disponibles:
        - Precisión de trabajo (16 dígitos significativos, ROUND_HALF_UP)
        - Límite de iteraciones de Newton para la raíz cuadrada
        - Límite opcional de dígitos en el número actual
        - Mensajes de error del display
    """

    def __init__(self):
        """Inicializa configuración con valores por defecto."""
        # ====================================================================
        # ARITMÉTICA
        # ====================================================================
        self.precision = 16                 # Dígitos significativos
        self.rounding = ROUND_HALF_UP       # Redondeo "de escuela"
        self.max_sqrt_iterations = 100      # Tope de iteraciones de Newton

        # ====================================================================
        # ENTRADA
        # ====================================================================
        self.max_input_digits = None        # None = sin límite

        # ====================================================================
        # MENSAJES DE ERROR
        # ====================================================================
        self.divide_by_zero_message = "No se puede dividir entre cero"
        self.invalid_input_message = "Entrada no válida"
        self.math_error_message = "Error matemático"

        # ====================================================================
        # APLICACIÓN DE CONSOLA
        # ====================================================================
        self.show_feedback = True           # Mostrar confirmación de cada tecla

    def get_context(self):
        """Retorna el decimal.Context de trabajo según la configuración."""
        return Context(prec=self.precision, rounding=self.rounding)

    def accepts_more_digits(self, digit_count):
        """
        Indica si se puede añadir otro dígito al número actual.

        Args:
            digit_count (int): Dígitos que ya contiene el buffer
        """
        return self.max_input_digits is None or digit_count < self.max_input_digits
