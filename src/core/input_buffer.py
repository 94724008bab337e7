"""
Buffer de entrada del número que se está escribiendo.

El buffer es dueño exclusivo de su texto: la calculadora solo lo modifica
a través de append / overwrite / truncate, nunca compartiendo la cadena.
"""

from .decimal_math import parse_decimal


# ============================================================================
# CLASE: InputBuffer
# Propósito: Texto editable del número actual
# Responsabilidades:
#   - Añadir caracteres (dígitos, punto decimal)
#   - Sobrescribir el contenido completo (resultado, reinicio)
#   - Borrar el último carácter (backspace)
#   - Convertirse a Decimal para operar
# Invariante: nunca vacío; "0" es el estado limpio
# ============================================================================
class InputBuffer:
    """
    Representación textual editable del número actual.

    Puede contener un "-" inicial, dígitos y como máximo un ".".
    """

    EMPTY = "0"

    def __init__(self, text=EMPTY):
        self._text = text or self.EMPTY

    @property
    def text(self):
        return self._text

    def __str__(self):
        return self._text

    def __len__(self):
        return len(self._text)

    def __repr__(self):
        return f"InputBuffer({self._text!r})"

    def append(self, char):
        """Añade un carácter al final del buffer."""
        self._text += char

    def overwrite(self, text):
        """
        Reemplaza el contenido completo.

        Args:
            text (str): Nuevo texto; una cadena vacía deja el buffer en "0"
        """
        self._text = text or self.EMPTY

    def truncate(self):
        """Elimina el último carácter. Si el buffer quedaría vacío vuelve a "0"."""
        self._text = self._text[:-1] or self.EMPTY

    def reset(self):
        """Vuelve al estado limpio "0"."""
        self._text = self.EMPTY

    def is_zero_literal(self):
        """True si el buffer es exactamente "0" (el siguiente dígito lo reemplaza)."""
        return self._text == self.EMPTY

    def has_decimal_point(self):
        """True si el número ya tiene punto decimal (solo se admite uno)."""
        return "." in self._text

    def digit_count(self):
        return sum(1 for char in self._text if char.isdigit())

    def is_single_signed_digit(self):
        """True para buffers como "-5": borrar un carácter dejaría solo el signo."""
        return len(self._text) == 2 and self._text.startswith("-")

    def to_decimal(self):
        """Valor numérico del buffer (ver parse_decimal)."""
        return parse_decimal(self._text)
