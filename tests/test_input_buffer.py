from decimal import Decimal

from core.input_buffer import InputBuffer


def test_defaults_to_zero():
    buffer = InputBuffer()
    assert buffer.text == "0"
    assert buffer.is_zero_literal()


def test_append_and_truncate():
    buffer = InputBuffer("1")
    buffer.append("2")
    buffer.append(".")
    assert str(buffer) == "12."
    assert buffer.has_decimal_point()
    buffer.truncate()
    assert buffer.text == "12"


def test_never_empty():
    buffer = InputBuffer("7")
    buffer.truncate()
    assert buffer.text == "0"
    buffer.overwrite("")
    assert buffer.text == "0"


def test_digit_count_ignores_sign_and_point():
    assert InputBuffer("-12.5").digit_count() == 3


def test_single_signed_digit():
    assert InputBuffer("-5").is_single_signed_digit()
    assert not InputBuffer("-55").is_single_signed_digit()
    assert not InputBuffer("55").is_single_signed_digit()


def test_to_decimal():
    assert InputBuffer("-").to_decimal() == 0
    assert InputBuffer("8.").to_decimal() == Decimal(8)
    assert InputBuffer("-0.5").to_decimal() == Decimal("-0.5")
