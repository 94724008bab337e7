"""
Operaciones de la calculadora como enumeraciones cerradas.

Los glifos (+ - × ÷) solo se usan al mostrar el operador en el historial;
internamente la calculadora trabaja siempre con miembros del enum.
"""

from enum import Enum

from .errors import InvalidCommandError


# ============================================================================
# CLASE: BinaryOperator
# Propósito: Operadores binarios con su glifo de display
# ============================================================================
class BinaryOperator(Enum):
    """Operadores binarios soportados. El valor es el glifo mostrado."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"

    @classmethod
    def from_symbol(cls, symbol):
        """
        Convierte un símbolo de operador en un miembro del enum.

        Args:
            symbol (BinaryOperator | str): Miembro del enum, glifo de display
                o alias de teclado ("*", "x", "X", "/")

        Returns:
            BinaryOperator: Operador correspondiente

        Raises:
            InvalidCommandError: Si el símbolo está vacío o no se reconoce
        """
        if isinstance(symbol, cls):
            return symbol
        if symbol is None or not str(symbol).strip():
            raise InvalidCommandError("El operador no puede estar vacío")
        operator = _OPERATOR_ALIASES.get(str(symbol).strip())
        if operator is None:
            raise InvalidCommandError(f"Operador desconocido: {symbol!r}")
        return operator

    def __str__(self):
        return self.value


_OPERATOR_ALIASES = {
    "+": BinaryOperator.ADD,
    "-": BinaryOperator.SUBTRACT,
    "×": BinaryOperator.MULTIPLY,
    "*": BinaryOperator.MULTIPLY,
    "x": BinaryOperator.MULTIPLY,
    "X": BinaryOperator.MULTIPLY,
    "÷": BinaryOperator.DIVIDE,
    "/": BinaryOperator.DIVIDE,
}


# ============================================================================
# CLASE: UnaryOperation
# Propósito: Operaciones de un solo operando sobre el número actual
# ============================================================================
class UnaryOperation(Enum):
    SQUARE_ROOT = "sqrt"
    RECIPROCAL = "reciprocal"
    PERCENT = "percent"
    NEGATE = "negate"

    @classmethod
    def coerce(cls, operation):
        """Acepta un miembro del enum o su valor ("sqrt", "percent", ...)."""
        if isinstance(operation, cls):
            return operation
        if operation is None:
            raise InvalidCommandError("La operación no puede ser None")
        try:
            return cls(operation)
        except ValueError:
            raise InvalidCommandError(f"Operación desconocida: {operation!r}") from None
