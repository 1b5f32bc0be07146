"""
Money — Цена и сумма к оплате

- Price: decimal в [0.00, 1000.00]
- BillingAmount: decimal в [0.00, 10000.00]

Арифметика (Price.multiply, BillingAmount.sum_prices) повторно прогоняет
результат через bounded-decimal проверку: математически корректное
произведение или сумма, вышедшие за границу, дают ту же ConstraintError,
что и невалидный сырой ввод.
"""

from decimal import Decimal
from typing import Any, Final, Iterable

from pydantic import BaseModel, Field

from .constrained import ConstraintError, create_decimal
from .order_quantity import KilogramQuantity, UnitQuantity


# =============================================================================
# CONSTANTS
# =============================================================================

PRICE_MIN: Final[Decimal] = Decimal("0.00")
PRICE_MAX: Final[Decimal] = Decimal("1000.00")

BILLING_AMOUNT_MIN: Final[Decimal] = Decimal("0.00")
BILLING_AMOUNT_MAX: Final[Decimal] = Decimal("10000.00")


# =============================================================================
# PRICE
# =============================================================================


class Price(BaseModel):
    """Цена (за единицу или за строку заказа)"""

    value: Decimal = Field(..., ge=PRICE_MIN, le=PRICE_MAX)

    model_config = {"frozen": True}

    @classmethod
    def create(cls, raw: Any) -> "Price | ConstraintError":
        result = create_decimal("Price", PRICE_MIN, PRICE_MAX, raw)
        if isinstance(result, ConstraintError):
            return result
        return cls(value=result)

    @classmethod
    def unsafe_create(cls, raw: Any) -> "Price":
        """
        Создание цены из доверенного источника (например, прайс-лист).

        Raises:
            ValueError: Если значение вне [0, 1000]
        """
        result = cls.create(raw)
        if isinstance(result, ConstraintError):
            raise ValueError(f"Not expecting Price to be out of bounds: {result.message}")
        return result

    @classmethod
    def multiply(
        cls, quantity: UnitQuantity | KilogramQuantity, price: "Price"
    ) -> "Price | ConstraintError":
        """
        Цена строки = количество × цена за единицу.

        Returns:
            Price, либо ConstraintError(TOO_BIG), если произведение > 1000
        """
        return cls.create(quantity.as_decimal() * price.value)


# =============================================================================
# BILLING AMOUNT
# =============================================================================


class BillingAmount(BaseModel):
    """Итоговая сумма к оплате"""

    value: Decimal = Field(..., ge=BILLING_AMOUNT_MIN, le=BILLING_AMOUNT_MAX)

    model_config = {"frozen": True}

    @classmethod
    def create(cls, raw: Any) -> "BillingAmount | ConstraintError":
        result = create_decimal("BillingAmount", BILLING_AMOUNT_MIN, BILLING_AMOUNT_MAX, raw)
        if isinstance(result, ConstraintError):
            return result
        return cls(value=result)

    @classmethod
    def sum_prices(cls, prices: Iterable[Price]) -> "BillingAmount | ConstraintError":
        """Сумма цен строк; сумма > 10000 даёт ConstraintError(TOO_BIG)"""
        total = sum((price.value for price in prices), Decimal("0"))
        return cls.create(total)
