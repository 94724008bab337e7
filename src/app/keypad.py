"""
Teclado de la calculadora: etiquetas de tecla y su normalización.

Cada tecla del teclado (botón o atajo) se traduce a una etiqueta canónica
que KeypadCalculatorApp convierte en un comando del motor.
"""

import logging

logger = logging.getLogger(__name__)

DIGIT_KEYS = tuple("0123456789")
DECIMAL_POINT = "."
ADD, SUBTRACT, MULTIPLY, DIVIDE = "+", "-", "×", "÷"
EQUALS = "="
PERCENT = "%"
RECIPROCAL = "1/x"
SQUARE_ROOT = "√"
NEGATE = "+/-"
CLEAR_ENTRY = "CE"
CLEAR_ALL = "C"
BACKSPACE = "←"

BINARY_KEYS = (ADD, SUBTRACT, MULTIPLY, DIVIDE)

# Alias de teclado físico → etiqueta canónica
KEY_ALIASES = {
    ",": DECIMAL_POINT,
    "*": MULTIPLY,
    "x": MULTIPLY,
    "X": MULTIPLY,
    "/": DIVIDE,
    "±": NEGATE,
    "<": BACKSPACE,
}

# Teclas con nombre (sin distinguir mayúsculas)
NAMED_KEYS = {
    "enter": EQUALS,
    "sqrt": SQUARE_ROOT,
    "delete": CLEAR_ENTRY,
    "escape": CLEAR_ALL,
    "esc": CLEAR_ALL,
    "backspace": BACKSPACE,
}

CANONICAL_KEYS = frozenset(DIGIT_KEYS + (
    DECIMAL_POINT, ADD, SUBTRACT, MULTIPLY, DIVIDE, EQUALS, PERCENT,
    RECIPROCAL, SQUARE_ROOT, NEGATE, CLEAR_ENTRY, CLEAR_ALL, BACKSPACE,
))


def normalize_key(label):
    """
    Traduce una etiqueta de tecla a su forma canónica.

    Args:
        label (str): Etiqueta del botón o atajo ("×", "*", "Enter", ...)

    Returns:
        str | None: Etiqueta canónica, None si la tecla no existe
    """
    if not label:
        return None
    if label in CANONICAL_KEYS:
        return label
    if label in KEY_ALIASES:
        return KEY_ALIASES[label]
    return NAMED_KEYS.get(label.lower())


def tokenize_keys(text):
    """
    Divide una línea de entrada en teclas.

    Las teclas se separan por espacios. Un bloque sin espacios formado solo
    por teclas de un carácter se expande carácter a carácter
    ("12.5" → 1 2 . 5, "3+4=" → 3 + 4 =). Las teclas de varios caracteres
    ("1/x", "+/-", "CE") deben ir separadas.

    Returns:
        list[str]: Teclas en el orden escrito, sin normalizar
    """
    keys = []
    for token in text.split():
        if normalize_key(token) is None and len(token) > 1 and all(
                normalize_key(char) is not None for char in token):
            keys.extend(token)
        else:
            keys.append(token)
    logger.debug("Teclas: %s", keys)
    return keys
