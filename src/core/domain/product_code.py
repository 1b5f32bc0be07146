"""
ProductCode — Код продукта (tagged union WidgetCode | GizmoCode)

Тег product_type определяет:
- шаблон кода: widget = "W" + 4 цифры, gizmo = "G" + 3 цифры
- допустимый вариант OrderQuantity (см. order_quantity.py)

create_product_code диспетчеризует по первому символу. Любой другой префикс
даёт UNKNOWN_FORMAT, отличный от DOES_NOT_MATCH.
"""

from typing import Annotated, Final, Literal, Union

from pydantic import BaseModel, Field

from .constrained import ConstraintError, ConstraintErrorKind, create_like


# =============================================================================
# CONSTANTS
# =============================================================================

WIDGET_CODE_PATTERN: Final[str] = r"W[0-9]{4}"
GIZMO_CODE_PATTERN: Final[str] = r"G[0-9]{3}"


# =============================================================================
# VARIANTS
# =============================================================================


class WidgetCode(BaseModel):
    """Код виджета: "W" + 4 цифры (например, 'W1234')"""

    product_type: Literal["widget"] = "widget"
    code: str = Field(..., pattern=rf"^{WIDGET_CODE_PATTERN}$")

    model_config = {"frozen": True}

    @property
    def value(self) -> str:
        return self.code

    @classmethod
    def create(cls, field_name: str, raw: str | None) -> "WidgetCode | ConstraintError":
        result = create_like(field_name, WIDGET_CODE_PATTERN, raw)
        if isinstance(result, ConstraintError):
            return result
        return cls(code=result)


class GizmoCode(BaseModel):
    """Код gizmo: "G" + 3 цифры (например, 'G123')"""

    product_type: Literal["gizmo"] = "gizmo"
    code: str = Field(..., pattern=rf"^{GIZMO_CODE_PATTERN}$")

    model_config = {"frozen": True}

    @property
    def value(self) -> str:
        return self.code

    @classmethod
    def create(cls, field_name: str, raw: str | None) -> "GizmoCode | ConstraintError":
        result = create_like(field_name, GIZMO_CODE_PATTERN, raw)
        if isinstance(result, ConstraintError):
            return result
        return cls(code=result)


ProductCode = Annotated[Union[WidgetCode, GizmoCode], Field(discriminator="product_type")]


# =============================================================================
# CONSTRUCTOR
# =============================================================================


def create_product_code(field_name: str, raw: str | None) -> WidgetCode | GizmoCode | ConstraintError:
    """
    Создание ProductCode по префиксу.

    Args:
        field_name: Имя поля для сообщения об ошибке
        raw: Сырой код продукта

    Returns:
        WidgetCode для 'W...', GizmoCode для 'G...',
        ConstraintError(EMPTY | DOES_NOT_MATCH | UNKNOWN_FORMAT) иначе
    """
    if raw is None or raw == "":
        return ConstraintError(
            kind=ConstraintErrorKind.EMPTY,
            field_name=field_name,
            message=f"{field_name} must not be null or empty",
        )
    if not isinstance(raw, str):
        return ConstraintError(
            kind=ConstraintErrorKind.DOES_NOT_MATCH,
            field_name=field_name,
            message=f"{field_name}: {raw!r} must be a string",
        )
    if raw.startswith("W"):
        return WidgetCode.create(field_name, raw)
    if raw.startswith("G"):
        return GizmoCode.create(field_name, raw)
    return ConstraintError(
        kind=ConstraintErrorKind.UNKNOWN_FORMAT,
        field_name=field_name,
        message=f"{field_name}: Format not recognized '{raw}'",
    )


def product_code_value(product_code: WidgetCode | GizmoCode) -> str:
    """Сырой код продукта"""
    return product_code.code
