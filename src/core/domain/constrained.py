"""
ConstrainedType — Базовые smart-конструкторы для ограниченных значений

Единственное место, где проверяются инварианты примитивов:
- bounded string (обязательная и optional)
- bounded integer
- bounded decimal
- pattern-matched string

Каждая функция тотальна и не имеет side-effects: возвращает либо значение,
либо ConstraintError с тегом. Вызывающий код ветвится по ConstraintError.kind,
а не по тексту сообщения.
"""

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Pattern


# =============================================================================
# ERRORS
# =============================================================================


class ConstraintErrorKind(str, Enum):
    """Тип ошибки создания ограниченного значения"""

    EMPTY = "Empty"
    TOO_LONG = "TooLong"
    TOO_SMALL = "TooSmall"
    TOO_BIG = "TooBig"
    NOT_INTEGER = "NotInteger"
    NOT_DECIMAL = "NotDecimal"
    DOES_NOT_MATCH = "DoesNotMatch"
    UNKNOWN_FORMAT = "UnknownFormat"


@dataclass(frozen=True)
class ConstraintError:
    """Ошибка smart-конструктора."""

    kind: ConstraintErrorKind
    field_name: str
    message: str


# =============================================================================
# HELPERS
# =============================================================================


def _is_empty_string(raw: Any) -> bool:
    return raw is None or raw == ""


def _not_a_string(field_name: str, raw: Any) -> ConstraintError:
    return ConstraintError(
        kind=ConstraintErrorKind.DOES_NOT_MATCH,
        field_name=field_name,
        message=f"{field_name}: {raw!r} must be a string",
    )


def _to_decimal(raw: Any) -> Decimal | None:
    """
    Конверсия сырого числа в Decimal.

    float конвертируется через str(), чтобы 0.05 означало ровно Decimal("0.05").
    bool не считается числом.

    Returns:
        Конечный Decimal или None, если значение не является числом
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, Decimal):
        value = raw
    elif isinstance(raw, (int, float, str)):
        try:
            value = Decimal(str(raw).strip())
        except InvalidOperation:
            return None
    else:
        return None

    if not value.is_finite():
        return None
    return value


# =============================================================================
# STRING CONSTRUCTORS
# =============================================================================


def create_string(field_name: str, max_len: int, raw: str | None) -> str | ConstraintError:
    """
    Создание ограниченной строки.

    Args:
        field_name: Имя поля для сообщения об ошибке
        max_len: Максимальная длина (включительно)
        raw: Сырое значение

    Returns:
        raw без изменений, либо ConstraintError(EMPTY | TOO_LONG),
        DOES_NOT_MATCH для значения, не являющегося строкой
    """
    if _is_empty_string(raw):
        return ConstraintError(
            kind=ConstraintErrorKind.EMPTY,
            field_name=field_name,
            message=f"{field_name} must not be null or empty",
        )
    if not isinstance(raw, str):
        return _not_a_string(field_name, raw)
    if len(raw) > max_len:
        return ConstraintError(
            kind=ConstraintErrorKind.TOO_LONG,
            field_name=field_name,
            message=f"{field_name} must not be more than {max_len} chars",
        )
    return raw


def create_string_option(
    field_name: str, max_len: int, raw: str | None
) -> str | None | ConstraintError:
    """
    Создание optional ограниченной строки.

    Пустой ввод означает отсутствие значения (None), а не ошибку.
    Слишком длинная строка остаётся ошибкой TOO_LONG.
    """
    result = create_string(field_name, max_len, raw)
    if isinstance(result, ConstraintError) and result.kind == ConstraintErrorKind.EMPTY:
        return None
    return result


def create_like(field_name: str, pattern: str | Pattern[str], raw: str | None) -> str | ConstraintError:
    """
    Создание строки, соответствующей regex-шаблону (full match).

    Returns:
        raw без изменений, либо ConstraintError(EMPTY | DOES_NOT_MATCH)
    """
    if _is_empty_string(raw):
        return ConstraintError(
            kind=ConstraintErrorKind.EMPTY,
            field_name=field_name,
            message=f"{field_name} must not be null or empty",
        )
    if not isinstance(raw, str):
        return _not_a_string(field_name, raw)
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
    if compiled.fullmatch(raw) is None:
        return ConstraintError(
            kind=ConstraintErrorKind.DOES_NOT_MATCH,
            field_name=field_name,
            message=f"{field_name}: '{raw}' must match the pattern '{compiled.pattern}'",
        )
    return raw


# =============================================================================
# NUMERIC CONSTRUCTORS
# =============================================================================


def create_int(field_name: str, min_val: int, max_val: int, raw: Any) -> int | ConstraintError:
    """
    Создание ограниченного целого.

    Порядок проверок:
    1. Не число → NOT_INTEGER
    2. raw < min_val → TOO_SMALL
    3. raw > max_val → TOO_BIG
    4. Дробное значение → NOT_INTEGER

    Args:
        field_name: Имя поля для сообщения об ошибке
        min_val: Нижняя граница (включительно)
        max_val: Верхняя граница (включительно)
        raw: Сырое значение (int, float, Decimal или числовая строка)

    Returns:
        int, либо ConstraintError
    """
    value = _to_decimal(raw)
    if value is None:
        return ConstraintError(
            kind=ConstraintErrorKind.NOT_INTEGER,
            field_name=field_name,
            message=f"{field_name}: {raw!r} must be an integer",
        )
    if value < min_val:
        return ConstraintError(
            kind=ConstraintErrorKind.TOO_SMALL,
            field_name=field_name,
            message=f"{field_name}: {raw} must not be less than {min_val}",
        )
    if value > max_val:
        return ConstraintError(
            kind=ConstraintErrorKind.TOO_BIG,
            field_name=field_name,
            message=f"{field_name}: {raw} must not be greater than {max_val}",
        )
    if value != value.to_integral_value():
        return ConstraintError(
            kind=ConstraintErrorKind.NOT_INTEGER,
            field_name=field_name,
            message=f"{field_name}: {raw} must be an integer",
        )
    return int(value)


def create_decimal(
    field_name: str, min_val: Decimal, max_val: Decimal, raw: Any
) -> Decimal | ConstraintError:
    """
    Создание ограниченного decimal.

    Returns:
        Decimal, либо ConstraintError(NOT_DECIMAL | TOO_SMALL | TOO_BIG)
    """
    value = _to_decimal(raw)
    if value is None:
        return ConstraintError(
            kind=ConstraintErrorKind.NOT_DECIMAL,
            field_name=field_name,
            message=f"{field_name}: {raw!r} must be a decimal",
        )
    if value < min_val:
        return ConstraintError(
            kind=ConstraintErrorKind.TOO_SMALL,
            field_name=field_name,
            message=f"{field_name}: {raw} must not be less than {min_val}",
        )
    if value > max_val:
        return ConstraintError(
            kind=ConstraintErrorKind.TOO_BIG,
            field_name=field_name,
            message=f"{field_name}: {raw} must not be greater than {max_val}",
        )
    return value
