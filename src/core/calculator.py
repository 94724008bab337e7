"""
Lógica de calculadora aritmética de ejecución inmediata.

Este módulo contiene la clase Calculator, dueña de todo el estado numérico:
el número que se está escribiendo, el acumulador, el operador pendiente,
el historial y el modo error. El llamador envía comandos discretos y tras
cada uno vuelve a leer los dos textos de display.
"""

import logging

from config import CalculatorConfig

from .decimal_math import (
    compute_binary,
    format_decimal,
    negate,
    percent,
    reciprocal,
    square_root,
)
from .errors import DivideByZeroError, InvalidCommandError, NegativeRootError
from .operations import BinaryOperator, UnaryOperation
from .state import EditingState, ErrorState

logger = logging.getLogger(__name__)


# ============================================================================
# CLASE: Calculator
# Propósito: Motor aritmético con ejecución inmediata
# Responsabilidades:
#   - Edición del número actual (dígitos, punto decimal, backspace)
#   - Encadenar operadores calculando en cuanto llega el segundo operador
#   - Operaciones unarias (√, 1/x, %, ±)
#   - Modo error (división entre cero, raíz de negativo) hasta C / CE
#   - Textos de display: historial y número actual
# ============================================================================
class Calculator:
    """
    Calculadora de ejecución inmediata ("3 + 4 +" calcula 7 al pulsar el segundo +
    y lo muestra en el historial como "7 +").

    Modelo de operación:
        1. Usuario ingresa dígitos → se acumulan en el buffer
        2. Usuario selecciona operación → el buffer pasa al acumulador
           (o se calcula la operación pendiente si la había)
        3. Usuario ingresa el segundo número y repite o pulsa =
        4. Tras = el resultado queda en el display; el siguiente dígito
           empieza un número nuevo

    Variables de estado (ver core.state):
        - EditingState: buffer, acumulador, operador pendiente, flag de
          reinicio e historial
        - ErrorState: mensaje de error y estado en el momento del fallo
    """

    def __init__(self, config=None):
        """
        Inicializa calculadora en estado de encendido.

        Args:
            config (CalculatorConfig): Configuración (opcional)
        """
        self.config = config if config else CalculatorConfig()
        self.context = self.config.get_context()
        self.state = EditingState()

    # ========================================================================
    # CONSULTAS DE DISPLAY
    # ========================================================================
    def is_error_state(self):
        """True si la calculadora está en modo error (solo C / CE salen de él)."""
        return isinstance(self.state, ErrorState)

    def get_display(self):
        """
        Texto del display principal.

        Returns:
            str: Mensaje de error en modo error, si no el número actual
        """
        if self.is_error_state():
            return self.state.message
        return self.state.buffer.text

    def get_history(self):
        """
        Texto del display secundario (historial).

        Returns:
            str: Operación en curso o recién calculada ("12 +", "3 + 4 ="),
                 cadena vacía en modo error
        """
        if self.is_error_state():
            return ""
        return self.state.history

    def get_accumulator(self):
        """Operando izquierdo de la operación pendiente (Decimal)."""
        return self._editing_state().accumulator

    def get_pending_operator(self):
        """
        Operador binario pendiente.

        Returns:
            BinaryOperator | None: None si no hay ninguna cadena de operaciones activa

        En modo error se consulta el estado anterior al fallo.
        """
        return self._editing_state().pending_operator

    # ========================================================================
    # ENTRADA DE NÚMEROS
    # ========================================================================
    def input_digit(self, digit):
        """
        Añade un dígito al número actual.

        Args:
            digit (int): Dígito 0-9 a añadir

        Returns:
            bool: True si se añadió, False en modo error o si se alcanzó
                  el límite de dígitos configurado

        Raises:
            InvalidCommandError: Si digit no es un entero entre 0 y 9
        """
        if isinstance(digit, bool) or not isinstance(digit, int) or not 0 <= digit <= 9:
            raise InvalidCommandError(f"El dígito debe estar entre 0 y 9: {digit!r}")
        if self.is_error_state():
            return False

        state = self.state
        self._start_new_number_if_needed(state)
        buffer = state.buffer

        # "0" se reemplaza en vez de concatenar (sin ceros a la izquierda)
        if buffer.is_zero_literal():
            buffer.overwrite(str(digit))
            return True
        if not self.config.accepts_more_digits(buffer.digit_count()):
            return False
        buffer.append(str(digit))
        return True

    def input_decimal_point(self):
        """
        Añade punto decimal al número actual.

        Returns:
            bool: True si se añadió, False si ya existe punto decimal o en modo error
        """
        if self.is_error_state():
            return False

        state = self.state
        self._start_new_number_if_needed(state)
        if state.buffer.has_decimal_point():
            return False
        state.buffer.append(".")
        return True

    # ========================================================================
    # OPERADORES BINARIOS E IGUAL
    # ========================================================================
    def apply_binary_operator(self, operator):
        """
        Aplica un operador binario con ejecución inmediata.

        Args:
            operator (BinaryOperator | str): Operador (+, -, ×, ÷ o alias *, x, /)

        Comportamiento:
            1. Operador pendiente y sin número nuevo (ej: "5 + ×"):
               sustituye el operador, no calcula nada
            2. Sin operador pendiente: el número actual pasa al acumulador
            3. Con operador pendiente: acumulador = acumulador <op> número
               (ej: "3 + 4 +" → acumulador 7)

        Raises:
            InvalidCommandError: Si el operador está vacío o no se reconoce
                (en modo error el operador se ignora sin validarlo)
        """
        if self.is_error_state():
            return
        operator = BinaryOperator.from_symbol(operator)

        state = self.state
        if state.pending_operator is not None and state.reset_on_next_digit:
            state.pending_operator = operator
            state.history = f"{format_decimal(state.accumulator)} {operator}"
            return

        value = state.buffer.to_decimal()
        if state.pending_operator is None:
            accumulator = value
        else:
            try:
                accumulator = compute_binary(state.accumulator, value,
                                             state.pending_operator, self.context)
            except ArithmeticError as exc:
                self._enter_error(exc)
                return

        state.accumulator = accumulator
        state.pending_operator = operator
        state.history = f"{format_decimal(accumulator)} {operator}"
        state.reset_on_next_digit = True
        logger.debug("Operador %s pendiente, acumulador %s", operator.name, accumulator)

    def evaluate(self):
        """
        Calcula el resultado de la operación pendiente (=).

        Sin operador pendiente solo limpia el historial. Con operador, el
        historial muestra la ecuación completa ("3 + 4 =") y el display el
        resultado, que pasa a ser el nuevo acumulador.
        """
        if self.is_error_state():
            return

        state = self.state
        if state.pending_operator is None:
            state.history = ""
            return

        left = state.accumulator
        right = state.buffer.to_decimal()
        try:
            result = compute_binary(left, right, state.pending_operator, self.context)
        except ArithmeticError as exc:
            self._enter_error(exc)
            return

        state.history = (f"{format_decimal(left)} {state.pending_operator} "
                         f"{format_decimal(right)} =")
        state.buffer.overwrite(format_decimal(result))
        state.accumulator = result
        state.pending_operator = None
        state.reset_on_next_digit = True
        logger.debug("Resultado %s", result)

    # ========================================================================
    # OPERACIONES UNARIAS
    # ========================================================================
    def apply_unary_operation(self, operation):
        """
        Aplica una operación unaria sobre el número actual.

        Args:
            operation (UnaryOperation | str): SQUARE_ROOT, RECIPROCAL, PERCENT o NEGATE

        Errores aritméticos:
            - √ de un negativo → "Entrada no válida"
            - 1/x de cero → "No se puede dividir entre cero"

        Raises:
            InvalidCommandError: Si la operación es None o desconocida
        """
        operation = UnaryOperation.coerce(operation)
        if self.is_error_state():
            return

        state = self.state
        value = state.buffer.to_decimal()
        handler = {
            UnaryOperation.SQUARE_ROOT: self._apply_square_root,
            UnaryOperation.RECIPROCAL: self._apply_reciprocal,
            UnaryOperation.PERCENT: self._apply_percent,
            UnaryOperation.NEGATE: self._apply_negate,
        }[operation]
        try:
            handler(state, value)
        except ArithmeticError as exc:
            self._enter_error(exc)

    def _apply_square_root(self, state, value):
        result = square_root(value, self.context, self.config.max_sqrt_iterations)
        state.history = f"√({format_decimal(value)})"
        state.buffer.overwrite(format_decimal(result))
        state.reset_on_next_digit = True

    def _apply_reciprocal(self, state, value):
        result = reciprocal(value, self.context)
        state.history = f"1/({format_decimal(value)})"
        state.buffer.overwrite(format_decimal(result))
        state.reset_on_next_digit = True

    def _apply_percent(self, state, value):
        # Con operación pendiente el porcentaje es relativo al acumulador
        if state.pending_operator is None:
            result = percent(value, context=self.context)
        else:
            result = percent(value, state.accumulator, self.context)
            state.history = (f"{format_decimal(state.accumulator)} "
                             f"{state.pending_operator} {format_decimal(result)}")
        state.buffer.overwrite(format_decimal(result))
        state.reset_on_next_digit = True

    def _apply_negate(self, state, value):
        # Un "0" sin punto decimal no cambia (evita mostrar "-0")
        if value.is_zero() and not state.buffer.has_decimal_point():
            return
        state.buffer.overwrite(format_decimal(negate(value, self.context)))
        # Negar sigue editando el mismo número
        state.reset_on_next_digit = False

    # ========================================================================
    # BORRADO
    # ========================================================================
    def clear_entry(self):
        """
        Borra solo el número actual (CE).

        En modo error equivale a borrar todo (C).
        """
        if self.is_error_state():
            self.clear_all()
            return
        self.state.buffer.reset()
        self.state.reset_on_next_digit = False

    def clear_all(self):
        """
        Borra TODO el estado de la calculadora (C = Clear).

        Vuelve a los valores de encendido y sale del modo error.
        """
        self.state = EditingState()

    def backspace(self):
        """
        Borra el último carácter del número actual (←).

        Comportamiento:
            - Tras un resultado u operador: empieza un número nuevo ("0")
            - Si quedaría vacío o solo el signo ("-5"): vuelve a "0"
            - En otro caso: borra el último carácter
        """
        if self.is_error_state():
            return

        state = self.state
        if state.reset_on_next_digit:
            state.buffer.reset()
            state.reset_on_next_digit = False
            return
        if len(state.buffer) <= 1 or state.buffer.is_single_signed_digit():
            state.buffer.reset()
        else:
            state.buffer.truncate()

    # ========================================================================
    # AUXILIARES
    # ========================================================================
    def _editing_state(self):
        if self.is_error_state():
            return self.state.snapshot
        return self.state

    def _start_new_number_if_needed(self, state):
        if state.reset_on_next_digit:
            state.buffer.reset()
            state.reset_on_next_digit = False

    def _enter_error(self, exc):
        """Pasa a modo error con el mensaje correspondiente a la excepción."""
        if isinstance(exc, DivideByZeroError):
            message = self.config.divide_by_zero_message
        elif isinstance(exc, NegativeRootError):
            message = self.config.invalid_input_message
        else:
            message = self.config.math_error_message
        logger.info("Calculadora en modo error: %s (%s)", message, exc)
        self.state = ErrorState(message, self.state)
