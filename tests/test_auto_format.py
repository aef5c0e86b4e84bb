import pytest

from helixkit.auto_format import auto_format, auto_formatter
from helixkit.formatter import formatter


def test_documented_double_format():
    assert auto_format("double", 10) == "%*.*l#g"


def test_documented_float_format():
    assert auto_format("float", 10) == "%*.*#g"


def test_size_t_uses_z_modifier():
    assert auto_format("size_t", 10) == "%*.*zu"


def test_suffixed_names_are_accepted():
    assert auto_format("int32_t", 8) == auto_format("int32", 8)
    assert auto_format("uint16_t", 16) == auto_format("uint16", 16)


@pytest.mark.parametrize(
    "type_name, base", [("float", 8), ("uint8", 2), ("bogus", 10), ("double", 2)]
)
def test_unsupported_combinations(type_name, base):
    with pytest.raises(ValueError):
        auto_format(type_name, base)


@pytest.mark.parametrize("value", [0, 5, -5, 2147483647, -2147483648])
def test_signed_decimal_round_trip(value):
    assert int(auto_formatter(value, "int32", 10)) == value


@pytest.mark.parametrize("value", [0, 1, 255, 65535, 4294967295])
def test_unsigned_hex_and_octal_round_trip(value):
    assert int(auto_formatter(value, "uint32", 16), 16) == value
    assert int(auto_formatter(value, "uint32", 8), 8) == value


@pytest.mark.parametrize("value", [0.0, 1.0, -0.1, 3.14159, 1e-300])
def test_hex_float_round_trip(value):
    assert float.fromhex(auto_formatter(value, "double", 16)) == value


def test_width_is_applied():
    assert len(auto_formatter(5, "int32", 10, width=8)) == 8


def test_value_is_narrowed_to_type():
    assert auto_formatter(256 + 7, "uint8", 10) == auto_formatter(7, "uint8", 10)
    assert auto_formatter(-1, "uint8", 10) == auto_formatter(255, "uint8", 10)


def test_float_default_precision_uses_alternate_form():
    assert auto_formatter(3.5, "double", 10) == formatter("%#g", 3.5)


def test_float_precision_round_trip():
    assert float(auto_formatter(2.25, "double", 10, precision=3)) == 2.25