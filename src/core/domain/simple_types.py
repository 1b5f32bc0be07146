"""
Simple types — Ограниченные строковые типы домена OrderTaking

Immutable Pydantic модели-обёртки над примитивами:
- String50: непустая строка до 50 символов
- EmailAddress: строка вида "local@domain"
- ZipCode: ровно 5 цифр
- OrderId / OrderLineId: непустые идентификаторы до 50 символов

Создание только через classmethod create(field_name, raw), который возвращает
значение или ConstraintError. Поля моделей несут те же ограничения, поэтому
прямой вызов конструктора с невалидными данными поднимает ValidationError.
"""

from typing import Final

from pydantic import BaseModel, Field

from .constrained import ConstraintError, create_like, create_string, create_string_option


# =============================================================================
# CONSTANTS
# =============================================================================

STRING50_MAX_LEN: Final[int] = 50
ORDER_ID_MAX_LEN: Final[int] = 50
ORDER_LINE_ID_MAX_LEN: Final[int] = 50

EMAIL_ADDRESS_PATTERN: Final[str] = r"[^@\s]+@[^@\s]+"
ZIP_CODE_PATTERN: Final[str] = r"[0-9]{5}"


# =============================================================================
# STRING50
# =============================================================================


class String50(BaseModel):
    """Непустая строка длиной не более 50 символов"""

    value: str = Field(..., min_length=1, max_length=STRING50_MAX_LEN)

    model_config = {"frozen": True}

    @classmethod
    def create(cls, field_name: str, raw: str | None) -> "String50 | ConstraintError":
        result = create_string(field_name, STRING50_MAX_LEN, raw)
        if isinstance(result, ConstraintError):
            return result
        return cls(value=result)

    @classmethod
    def create_option(
        cls, field_name: str, raw: str | None
    ) -> "String50 | None | ConstraintError":
        """
        Optional вариант: пустой ввод → None.

        Используется для необязательных строк адреса.
        """
        result = create_string_option(field_name, STRING50_MAX_LEN, raw)
        if result is None or isinstance(result, ConstraintError):
            return result
        return cls(value=result)


# =============================================================================
# EMAIL / ZIP
# =============================================================================


class EmailAddress(BaseModel):
    """Email адрес (должен содержать '@' и непустые части по обе стороны)"""

    value: str = Field(..., pattern=rf"^{EMAIL_ADDRESS_PATTERN}$")

    model_config = {"frozen": True}

    @classmethod
    def create(cls, field_name: str, raw: str | None) -> "EmailAddress | ConstraintError":
        result = create_like(field_name, EMAIL_ADDRESS_PATTERN, raw)
        if isinstance(result, ConstraintError):
            return result
        return cls(value=result)


class ZipCode(BaseModel):
    """Почтовый индекс: ровно 5 цифр"""

    value: str = Field(..., pattern=rf"^{ZIP_CODE_PATTERN}$")

    model_config = {"frozen": True}

    @classmethod
    def create(cls, field_name: str, raw: str | None) -> "ZipCode | ConstraintError":
        result = create_like(field_name, ZIP_CODE_PATTERN, raw)
        if isinstance(result, ConstraintError):
            return result
        return cls(value=result)


# =============================================================================
# IDENTIFIERS
# =============================================================================


class OrderId(BaseModel):
    """Идентификатор заказа"""

    value: str = Field(..., min_length=1, max_length=ORDER_ID_MAX_LEN)

    model_config = {"frozen": True}

    @classmethod
    def create(cls, field_name: str, raw: str | None) -> "OrderId | ConstraintError":
        result = create_string(field_name, ORDER_ID_MAX_LEN, raw)
        if isinstance(result, ConstraintError):
            return result
        return cls(value=result)


class OrderLineId(BaseModel):
    """Идентификатор строки заказа"""

    value: str = Field(..., min_length=1, max_length=ORDER_LINE_ID_MAX_LEN)

    model_config = {"frozen": True}

    @classmethod
    def create(cls, field_name: str, raw: str | None) -> "OrderLineId | ConstraintError":
        result = create_string(field_name, ORDER_LINE_ID_MAX_LEN, raw)
        if isinstance(result, ConstraintError):
            return result
        return cls(value=result)
