"""
CreateEvents — сборка выходных событий workflow PlaceOrder

Порядок фиксирован:
1. OrderAcknowledgmentSent (если подтверждение отправлено)
2. OrderPlaced (всегда)
3. BillableOrderPlaced (только если amount_to_bill > 0)
"""

from decimal import Decimal

from .public_types import (
    BillableOrderPlaced,
    OrderAcknowledgmentSent,
    OrderPlaced,
    PlaceOrderEvent,
    PricedOrder,
)


def create_billing_event(priced_order: PricedOrder) -> BillableOrderPlaced | None:
    """Событие для billing context; None при нулевой сумме."""
    if priced_order.amount_to_bill.value > Decimal("0"):
        return BillableOrderPlaced(
            order_id=priced_order.order_id,
            billing_address=priced_order.billing_address,
            amount_to_bill=priced_order.amount_to_bill,
        )
    return None


def create_events(
    priced_order: PricedOrder,
    acknowledgment_event: OrderAcknowledgmentSent | None,
) -> list[PlaceOrderEvent]:
    """
    Сборка списка событий.

    Args:
        priced_order: заказ с ценами
        acknowledgment_event: результат шага AcknowledgeOrder

    Returns:
        Непустой упорядоченный список событий
    """
    events: list[PlaceOrderEvent] = []
    if acknowledgment_event is not None:
        events.append(acknowledgment_event)

    events.append(OrderPlaced(priced_order=priced_order))

    billing_event = create_billing_event(priced_order)
    if billing_event is not None:
        events.append(billing_event)

    return events
