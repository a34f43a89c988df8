"""
请求参数校验
"""
from decimal import Decimal, InvalidOperation

from flask import request

from mtg_market.errors import ValidationError

TRUE_VALUES = {'true', 'on', '1', 'yes'}
FALSE_VALUES = {'false', 'off', '0', 'no', ''}
MAX_COST = Decimal('99999999.99')


def get_payload():
    """读取 JSON 请求体，空请求体视为 {}"""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError('El cuerpo de la petición debe ser un objeto JSON')
    return data


def is_blank(value):
    return value is None or (isinstance(value, str) and not value.strip())


def require_fields(data, fields, message):
    """任一必填字段缺失 (None 或空字符串) 时抛出 ValidationError"""
    missing = [f for f in fields if is_blank(data.get(f))]
    if missing:
        raise ValidationError(message, field=missing[0])


def parse_positive_int(value, field):
    # bool 是 int 的子类，需要单独排除
    if isinstance(value, bool):
        raise ValidationError(f'{field} debe ser un entero positivo', field=field)
    try:
        if isinstance(value, float):
            if not value.is_integer():
                raise ValueError(value)
            out = int(value)
        else:
            out = int(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError(f'{field} debe ser un entero positivo', field=field)
    if out < 1:
        raise ValidationError(f'{field} debe ser un entero positivo', field=field)
    return out


def parse_optional_positive_int(value, field):
    if is_blank(value):
        return None
    return parse_positive_int(value, field)


def parse_decimal(value, field):
    """非负金额，保留两位小数"""
    if isinstance(value, bool):
        raise ValidationError(f'{field} debe ser un número', field=field)
    try:
        out = Decimal(str(value).strip())
        if not out.is_finite() or out < 0:
            raise ValidationError(f'{field} debe ser un número no negativo', field=field)
        out = out.quantize(Decimal('0.01'))
    except (InvalidOperation, ValueError):
        raise ValidationError(f'{field} debe ser un número', field=field)
    # Numeric(10, 2)
    if out > MAX_COST:
        raise ValidationError(f'{field} no puede superar {MAX_COST}', field=field)
    return out


def parse_bool(value, field, default=False):
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    raise ValidationError(f'{field} debe ser booleano', field=field)


def parse_str(value, field, max_length=None):
    """必填文本，数字会被转成字符串"""
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise ValidationError(f'{field} debe ser texto', field=field)
    text = str(value).strip()
    if max_length and len(text) > max_length:
        raise ValidationError(f'{field} supera {max_length} caracteres', field=field)
    return text


def parse_optional_str(value, field, max_length=None):
    if is_blank(value):
        return None
    return parse_str(value, field, max_length)
