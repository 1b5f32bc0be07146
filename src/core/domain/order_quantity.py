"""
OrderQuantity — Количество в строке заказа (tagged union)

- UnitQuantity: целое в [1, 1000] (для виджетов)
- KilogramQuantity: decimal в [0.05, 100.00] (для gizmo)

Вариант выбирается тегом ProductCode, а не вызывающим кодом: единственный
конструктор create_order_quantity принимает уже валидированный код продукта.
"""

from decimal import Decimal
from typing import Annotated, Any, Final, Literal, Union

from pydantic import BaseModel, Field

from .constrained import ConstraintError, create_decimal, create_int
from .product_code import GizmoCode, WidgetCode


# =============================================================================
# CONSTANTS
# =============================================================================

UNIT_QUANTITY_MIN: Final[int] = 1
UNIT_QUANTITY_MAX: Final[int] = 1000

KILOGRAM_QUANTITY_MIN: Final[Decimal] = Decimal("0.05")
KILOGRAM_QUANTITY_MAX: Final[Decimal] = Decimal("100.00")


# =============================================================================
# VARIANTS
# =============================================================================


class UnitQuantity(BaseModel):
    """Количество в штуках"""

    quantity_type: Literal["unit"] = "unit"
    quantity: int = Field(..., ge=UNIT_QUANTITY_MIN, le=UNIT_QUANTITY_MAX, strict=True)

    model_config = {"frozen": True}

    @property
    def value(self) -> int:
        return self.quantity

    def as_decimal(self) -> Decimal:
        return Decimal(self.quantity)

    @classmethod
    def _create(cls, field_name: str, raw: Any) -> "UnitQuantity | ConstraintError":
        result = create_int(field_name, UNIT_QUANTITY_MIN, UNIT_QUANTITY_MAX, raw)
        if isinstance(result, ConstraintError):
            return result
        return cls(quantity=result)


class KilogramQuantity(BaseModel):
    """Вес в килограммах"""

    quantity_type: Literal["kilogram"] = "kilogram"
    quantity: Decimal = Field(..., ge=KILOGRAM_QUANTITY_MIN, le=KILOGRAM_QUANTITY_MAX)

    model_config = {"frozen": True}

    @property
    def value(self) -> Decimal:
        return self.quantity

    def as_decimal(self) -> Decimal:
        return self.quantity

    @classmethod
    def _create(cls, field_name: str, raw: Any) -> "KilogramQuantity | ConstraintError":
        result = create_decimal(field_name, KILOGRAM_QUANTITY_MIN, KILOGRAM_QUANTITY_MAX, raw)
        if isinstance(result, ConstraintError):
            return result
        return cls(quantity=result)


OrderQuantity = Annotated[Union[UnitQuantity, KilogramQuantity], Field(discriminator="quantity_type")]


# =============================================================================
# CONSTRUCTOR
# =============================================================================


def create_order_quantity(
    field_name: str, product_code: WidgetCode | GizmoCode, raw: Any
) -> UnitQuantity | KilogramQuantity | ConstraintError:
    """
    Создание OrderQuantity, согласованного с типом продукта.

    Args:
        field_name: Имя поля для сообщения об ошибке
        product_code: Валидированный код продукта (определяет вариант)
        raw: Сырое количество

    Returns:
        UnitQuantity для WidgetCode, KilogramQuantity для GizmoCode,
        либо ConstraintError
    """
    if isinstance(product_code, WidgetCode):
        return UnitQuantity._create(field_name, raw)
    if isinstance(product_code, GizmoCode):
        return KilogramQuantity._create(field_name, raw)
    raise TypeError(f"Unsupported product code: {product_code!r}")


def order_quantity_value(quantity: UnitQuantity | KilogramQuantity) -> int | Decimal:
    """Сырое количество"""
    return quantity.quantity
