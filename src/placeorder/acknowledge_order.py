"""
AcknowledgeOrder — шаг отправки подтверждения workflow PlaceOrder

PricedOrder → OrderAcknowledgmentSent | None

Best-effort шаг: письмо всегда формируется и всегда отправляется, но
результат отправки (Sent / NotSent) не является ошибкой workflow.
NotSent → события нет, workflow продолжается.
"""

import html
import logging

from .ports import (
    CreateOrderAcknowledgmentLetter,
    OrderAcknowledgment,
    SendOrderAcknowledgment,
    SendResult,
)
from .public_types import OrderAcknowledgmentSent, PricedOrder

logger = logging.getLogger(__name__)


def format_acknowledgment_letter(priced_order: PricedOrder) -> str:
    """
    Письмо-подтверждение по умолчанию (HTML).

    Содержит номер заказа, строки с ценами и итоговую сумму.
    """
    name = priced_order.customer_info.name
    rows = "".join(
        "<tr><td>{}</td><td>{}</td><td>{}</td><td>{}</td></tr>".format(
            html.escape(line.order_line_id.value),
            html.escape(line.product_code.code),
            line.quantity.value,
            line.line_price.value,
        )
        for line in priced_order.lines
    )
    return (
        f"<p>Dear {html.escape(name.first_name.value)} {html.escape(name.last_name.value)},</p>"
        f"<p>Thank you for your order {html.escape(priced_order.order_id.value)}.</p>"
        f"<table>{rows}</table>"
        f"<p>Amount to bill: {priced_order.amount_to_bill.value}</p>"
    )


def acknowledge_order(
    create_acknowledgment_letter: CreateOrderAcknowledgmentLetter,
    send_acknowledgment: SendOrderAcknowledgment,
    priced_order: PricedOrder,
) -> OrderAcknowledgmentSent | None:
    """
    Формирование и отправка подтверждения.

    Returns:
        OrderAcknowledgmentSent при SendResult.SENT, иначе None
    """
    letter = create_acknowledgment_letter(priced_order)
    acknowledgment = OrderAcknowledgment(
        email_address=priced_order.customer_info.email_address,
        letter=letter,
    )

    send_result = send_acknowledgment(acknowledgment)
    if send_result == SendResult.SENT:
        return OrderAcknowledgmentSent(
            order_id=priced_order.order_id,
            email_address=priced_order.customer_info.email_address,
        )

    logger.warning(
        "Acknowledgment for order %s was not sent", priced_order.order_id.value
    )
    return None
