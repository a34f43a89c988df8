"""
参数校验测试
"""
import pytest
from decimal import Decimal
from mtg_market.errors import ValidationError
from mtg_market.validation import (
    require_fields, parse_positive_int, parse_optional_positive_int,
    parse_decimal, parse_bool, parse_str, parse_optional_str,
)


class TestRequireFields:

    def test_all_present(self):
        require_fields({'a': 1, 'b': 'x'}, ('a', 'b'), 'faltan')

    @pytest.mark.parametrize('value', [None, '', '   '])
    def test_blank_is_missing(self, value):
        with pytest.raises(ValidationError) as exc:
            require_fields({'a': value, 'b': 'x'}, ('a', 'b'), 'faltan')
        assert exc.value.message == 'faltan'
        assert exc.value.field == 'a'

    def test_zero_counts_as_present(self):
        require_fields({'coste': 0}, ('coste',), 'faltan')


class TestParsers:

    @pytest.mark.parametrize('raw, expected', [(1, 1), ('42', 42), (' 7 ', 7), (3.0, 3)])
    def test_positive_int(self, raw, expected):
        assert parse_positive_int(raw, 'id') == expected

    @pytest.mark.parametrize('raw', [0, -3, 'abc', 2.5, True, None])
    def test_positive_int_invalid(self, raw):
        with pytest.raises(ValidationError):
            parse_positive_int(raw, 'id')

    def test_optional_positive_int(self):
        assert parse_optional_positive_int(None, 'id') is None
        assert parse_optional_positive_int('', 'id') is None
        assert parse_optional_positive_int('5', 'id') == 5

    def test_decimal(self):
        assert parse_decimal('3.999', 'coste') == Decimal('4.00')
        assert parse_decimal(12, 'coste') == Decimal('12.00')

    @pytest.mark.parametrize('raw', ['x', -0.5, 'nan', 'inf', False, '1e30', '100000000.00'])
    def test_decimal_invalid(self, raw):
        with pytest.raises(ValidationError):
            parse_decimal(raw, 'coste')

    def test_decimal_max(self):
        assert parse_decimal('99999999.99', 'coste') == Decimal('99999999.99')

    @pytest.mark.parametrize('raw, expected', [
        (None, False), (True, True), (False, False), ('on', True), ('off', False), ('1', True), ('', False),
    ])
    def test_bool(self, raw, expected):
        assert parse_bool(raw, 'es_carta') is expected

    def test_bool_invalid(self):
        with pytest.raises(ValidationError):
            parse_bool('quizas', 'es_carta')

    def test_str(self):
        assert parse_str('  ana ', 'username') == 'ana'
        assert parse_str(600111222, 'tlf') == '600111222'
        with pytest.raises(ValidationError):
            parse_str({'x': 1}, 'username')
        with pytest.raises(ValidationError):
            parse_str('abcdef', 'username', max_length=3)

    def test_optional_str(self):
        assert parse_optional_str('', 'calle') is None
        assert parse_optional_str(None, 'calle') is None
        assert parse_optional_str(' Mayor 1 ', 'calle') == 'Mayor 1'
