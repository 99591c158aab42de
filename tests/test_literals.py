"""Test rendering of null, boolean and numeric literals."""

import json
from decimal import Decimal
from fractions import Fraction

import pytest

from jsonscribe.literals import is_scalar, render_literal


class TestIntegers:

    @pytest.mark.parametrize("value, expected", [
        (0, '0'),
        (7, '7'),
        (-42, '-42'),
        (2 ** 100, '1267650600228229401496703205376'),
    ])
    def test_base_ten(self, value, expected):
        assert render_literal(value) == expected

    def test_integers_past_the_str_digit_limit(self):
        """Integers longer than 4300 digits still render in full."""
        assert render_literal(10 ** 5000) == '1' + '0' * 5000
        assert render_literal(-(10 ** 5000) - 7) == '-1' + '0' * 4999 + '7'

    def test_bool_is_not_rendered_as_int(self):
        assert render_literal(True) == 'true'
        assert render_literal(False) == 'false'


class TestFloats:

    @pytest.mark.parametrize("value", [0.0, 1.5, -2.25, 0.1, 1e20, 1e-7, 123456.789])
    def test_finite_round_trips(self, value):
        assert json.loads(render_literal(value)) == value

    @pytest.mark.parametrize("value", [float('nan'), float('inf'), float('-inf')])
    def test_non_finite_is_null(self, value):
        assert render_literal(value) == 'null'

    def test_other_reals(self):
        assert render_literal(Fraction(1, 4)) == '0.25'

    def test_real_too_large_for_a_float_is_null(self):
        assert render_literal(Fraction(10 ** 400, 1)) == 'null'
        assert render_literal(Fraction(-(10 ** 400), 3)) == 'null'


class TestDecimals:

    def test_precision_kept(self):
        assert render_literal(Decimal('1.10')) == '1.10'
        assert render_literal(Decimal('3.141592653589793238462643383279')) == \
            '3.141592653589793238462643383279'

    def test_plain_notation_when_shortest(self):
        assert render_literal(Decimal('12345.6789')) == '12345.6789'
        assert render_literal(Decimal('-0.001')) == '-0.001'

    def test_exponent_form_is_valid_json(self):
        assert json.loads(render_literal(Decimal('1E+3'))) == 1000

    @pytest.mark.parametrize("value", [Decimal('NaN'), Decimal('Infinity'), Decimal('-Infinity')])
    def test_non_finite_is_null(self, value):
        assert render_literal(value) == 'null'


def test_none_is_null():
    assert render_literal(None) == 'null'


def test_unsupported_type():
    with pytest.raises(TypeError, match="not JSON serializable"):
        render_literal(object())
    with pytest.raises(TypeError):
        render_literal(b'bytes')


def test_is_scalar():
    assert is_scalar(None)
    assert is_scalar(1)
    assert is_scalar(Decimal('1'))
    assert not is_scalar('text')
    assert not is_scalar([1])
