"""
Punto de entrada de la calculadora de consola.

Uso:
    python main.py               # bucle interactivo
    python main.py 3 + 4 =       # procesa las teclas y muestra el display
"""

import logging
import os
import sys

from app.keypad_app import KeypadCalculatorApp


def configure_logging():
    """Nivel de log desde CALC_LOG_LEVEL (por defecto WARNING)."""
    level = os.environ.get("CALC_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv=None):
    """
    Ejecuta la calculadora.

    Args:
        argv (list[str]): Teclas a procesar; sin teclas abre el bucle interactivo

    Returns:
        int: Código de salida (1 si hubo teclas desconocidas o la
             calculadora terminó en modo error)
    """
    configure_logging()
    argv = sys.argv[1:] if argv is None else argv

    app = KeypadCalculatorApp()
    if not argv:
        app.run()
        return 0

    app.config.show_feedback = False
    unknown = app.process_line(" ".join(argv))
    for key in unknown:
        print(f"⚠ Tecla desconocida: {key}")
    print(app.render_display())
    return 1 if unknown or app.calc.is_error_state() else 0


# ============================================================================
# PUNTO DE ENTRADA PRINCIPAL
# ============================================================================
if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        # Usuario presionó Ctrl+C
        print("\nInterrumpido por el usuario")
