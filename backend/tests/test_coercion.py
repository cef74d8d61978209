import pytest

from schemas.product import ProductForm
from utils.coercion import parse_id, parse_int


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("12", 12),
        (" 7 ", 7),
        ("-3", -3),
        ("12abc", 12),
        ("3.7", 3),
        (5, 5),
        (4.9, 4),
    ],
)
def test_parse_int_reads_leading_digits(raw, expected):
    assert parse_int(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "abc", "  ", "x12", True, float("nan")])
def test_parse_int_returns_none_for_non_numbers(raw):
    assert parse_int(raw) is None


def test_form_uppercases_side_and_parses_numbers():
    form = ProductForm(name="Compass", container="3", side="b", shelf="2", quantity="9")

    assert form.container == 3
    assert form.side == "B"
    assert form.shelf == 2
    assert form.quantity == 9


@pytest.mark.parametrize("quantity", [None, "", "lots"])
def test_form_quantity_defaults_to_zero(quantity):
    form = ProductForm(name="Compass", container=1, side="A", shelf=1, quantity=quantity)
    assert form.quantity == 0


def test_form_quantity_missing_defaults_to_zero():
    assert ProductForm(name="Compass", container=1, side="A", shelf=1).quantity == 0


def test_form_keeps_unparsable_container_as_none():
    form = ProductForm(name="Compass", container="abc", side="A", shelf="x")

    assert form.container is None
    assert form.shelf is None


@pytest.mark.parametrize("raw", ["9223372036854775808", "-9223372036854775809", 2 ** 64, 1e30])
def test_parse_int_rejects_values_outside_64_bits(raw):
    assert parse_int(raw) is None


def test_parse_int_keeps_64_bit_limits():
    assert parse_int("9223372036854775807") == 2 ** 63 - 1
    assert parse_int(str(-(2 ** 63))) == -(2 ** 63)


@pytest.mark.parametrize("raw, expected", [("5", 5), (" 5 ", 5), ("+7", 7), (12, 12)])
def test_parse_id_accepts_whole_integers(raw, expected):
    assert parse_id(raw) == expected


@pytest.mark.parametrize(
    "raw", ["5abc", "1e2", "3.0", "", "abc", "1_000", None, "99999999999999999999"],
)
def test_parse_id_rejects_anything_else(raw):
    assert parse_id(raw) is None
