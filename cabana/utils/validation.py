"""
Utilidade: Validação dos corpos JSON
Cada função devolve o valor normalizado ou lança ValidationError
"""
import math
from datetime import date
from flask import request
from ..errors import ValidationError


def get_json():
    """Corpo da requisição como dict; corpo ausente vale {}"""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("O corpo da requisição deve ser um objeto JSON")
    return data


def required_str(data, field, max_length=None):
    value = data.get(field)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field} é obrigatório")
    value = value.strip()
    if max_length and len(value) > max_length:
        raise ValidationError(f"{field} deve ter no máximo {max_length} caracteres")
    return value


def optional_str(data, field):
    value = data.get(field)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field} deve ser texto")
    return value.strip() or None


def optional_int(data, field, minimum=0):
    value = data.get(field)
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValidationError(f"{field} deve ser um número inteiro")
    if isinstance(value, str) and value.strip().isdigit():
        value = int(value.strip())
    if not isinstance(value, int):
        raise ValidationError(f"{field} deve ser um número inteiro")
    if value < minimum:
        raise ValidationError(f"{field} deve ser maior ou igual a {minimum}")
    return value


def non_negative_number(data, field, required=True):
    value = data.get(field)
    if value is None or value == "":
        if required:
            raise ValidationError(f"{field} é obrigatório")
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValidationError(f"{field} deve ser um número")
    try:
        if isinstance(value, str):
            value = value.replace(",", ".")
        value = float(value)
    except (ValueError, OverflowError):
        raise ValidationError(f"{field} deve ser um número")
    # NaN e Infinity não cabem no JSON nem no banco
    if not math.isfinite(value):
        raise ValidationError(f"{field} deve ser um número")
    if value < 0:
        raise ValidationError(f"{field} não pode ser negativo")
    return value


def required_date(data, field):
    value = data.get(field)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field} é obrigatório")
    try:
        # Aceita "2025-03-01" e "2025-03-01T00:00:00"
        return date.fromisoformat(value.strip()[:10])
    except ValueError:
        raise ValidationError(f"{field} deve estar no formato AAAA-MM-DD")


def required_bool(data, field):
    value = data.get(field)
    if not isinstance(value, bool):
        raise ValidationError(f"{field} deve ser true ou false")
    return value


def str_list(data, field):
    """Lista de textos; ausente vale []"""
    value = data.get(field)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValidationError(f"{field} deve ser uma lista de textos")
    return value
