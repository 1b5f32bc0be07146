"""
PriceOrder — шаг расчёта цен workflow PlaceOrder

ValidatedOrder → PricedOrder | PricingError

Синхронный и чистый: для одного и того же заказа и одной и той же
GetProductPrice результат всегда одинаков.

1. Для каждой строки: unit price = GetProductPrice(code),
   line price = quantity × unit price (bound [0, 1000])
2. Первая ошибка строки прерывает расчёт всего заказа
3. amount_to_bill = сумма line prices (bound [0, 10000])
"""

from src.core.domain import BillingAmount, ConstraintError, Price

from .ports import GetProductPrice
from .public_types import (
    PricedOrder,
    PricedOrderLine,
    PricingError,
    ValidatedOrder,
    ValidatedOrderLine,
)


def to_priced_order_line(
    get_product_price: GetProductPrice,
    line: ValidatedOrderLine,
) -> PricedOrderLine | PricingError:
    """Расчёт цены одной строки заказа."""
    unit_price = get_product_price(line.product_code)
    line_price = Price.multiply(line.quantity, unit_price)
    if isinstance(line_price, ConstraintError):
        return PricingError(message=line_price.message)

    return PricedOrderLine(
        order_line_id=line.order_line_id,
        product_code=line.product_code,
        quantity=line.quantity,
        line_price=line_price,
    )


def price_order(
    get_product_price: GetProductPrice,
    validated_order: ValidatedOrder,
) -> PricedOrder | PricingError:
    """
    Расчёт цен заказа.

    Args:
        get_product_price: поиск цены за единицу (тотальная функция)
        validated_order: валидированный заказ

    Returns:
        PricedOrder, либо первая PricingError
        (в том числе если сумма строк превышает границу BillingAmount)
    """
    line_results = [
        to_priced_order_line(get_product_price, line) for line in validated_order.lines
    ]
    for result in line_results:
        if isinstance(result, PricingError):
            return result

    amount_to_bill = BillingAmount.sum_prices(line.line_price for line in line_results)
    if isinstance(amount_to_bill, ConstraintError):
        return PricingError(message=amount_to_bill.message)

    return PricedOrder(
        order_id=validated_order.order_id,
        customer_info=validated_order.customer_info,
        shipping_address=validated_order.shipping_address,
        billing_address=validated_order.billing_address,
        amount_to_bill=amount_to_bill,
        lines=tuple(line_results),
    )
