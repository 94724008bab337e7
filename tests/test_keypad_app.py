import io

import pytest

from app.keypad_app import DISPLAY_WIDTH, KeypadCalculatorApp
from main import main


@pytest.fixture
def app():
    return KeypadCalculatorApp()


def test_process_feedback(app):
    assert app.process("5") == "OK 5"
    assert app.process("+") == "+ SUMA"
    assert app.process("3") == "OK 3"
    assert app.process("Enter") == "= 8"
    assert app.calc.get_history() == "5 + 3 ="


def test_process_unknown_key(app):
    assert app.process("foo") is None
    assert app.calc.get_display() == "0"


def test_process_unary_keys(app):
    app.process("9")
    assert app.process("sqrt") == "√ RAÍZ"
    assert app.calc.get_display() == "3"


def test_process_error_and_recovery(app):
    for key in ("5", "/", "0"):
        app.process(key)
    assert app.process("=") == "Error: No se puede dividir entre cero"
    assert app.process("3") == "IGNORADO"
    assert app.process("C") == "TODO BORRADO"
    assert app.calc.get_display() == "0"


def test_process_rejected_decimal_point(app):
    app.process(".")
    assert app.process(".") == "IGNORADO"


def test_render_display_is_right_aligned(app):
    app.process_line("12 +")
    history, current = app.render_display().split("\n")
    assert history == "12 +".rjust(DISPLAY_WIDTH)
    assert current == "12".rjust(DISPLAY_WIDTH)


def test_process_line_reports_unknown_keys(app, capsys):
    assert app.process_line("2 foo * 4 =") == ["foo"]
    assert app.calc.get_display() == "8"
    assert "= 8" in capsys.readouterr().out


def test_run_reads_until_quit(app, capsys):
    app.run(io.StringIO("3 + 4 +\n5 =\nq\n9\n"))
    out = capsys.readouterr().out
    assert "7 +" in out
    assert "7 + 5 =" in out
    assert "OK Aplicacion cerrada correctamente" in out
    # the line after "q" is never processed
    assert app.calc.get_display() == "12"


def test_run_stops_at_end_of_input(app, capsys):
    app.run(io.StringIO("2 bad"))
    out = capsys.readouterr().out
    assert "Tecla desconocida: bad" in out
    assert app.calc.get_display() == "2"


def test_main_processes_arguments(capsys):
    assert main(["2", "×", "3", "="]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[-1].strip() == "6"


def test_main_exit_code_on_error(capsys):
    assert main(["5", "÷", "0", "="]) == 1
    assert "No se puede dividir entre cero" in capsys.readouterr().out


def test_main_exit_code_on_unknown_key(capsys):
    assert main(["7", "foo"]) == 1
    assert "Tecla desconocida: foo" in capsys.readouterr().out
