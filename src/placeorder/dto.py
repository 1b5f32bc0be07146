"""
PlaceOrder DTO — преобразование между JSON-данными и типами workflow

Входная граница: dict → UnvalidatedOrder (после проверки JSON Schema контракта).
Выходная граница: PlaceOrderEvent / PlaceOrderError → dict (JSON-ready).

Decimal значения сериализуются строками без экспоненты, чтобы не терять точность.
"""

from decimal import Decimal
from typing import Any, Dict

from src.core.contracts import validate_unvalidated_order
from src.core.domain import Address, CustomerInfo

from .public_types import (
    BillableOrderPlaced,
    OrderAcknowledgmentSent,
    OrderPlaced,
    PlaceOrderError,
    PlaceOrderEvent,
    PricedOrderLine,
    RemoteServiceError,
    UnvalidatedAddress,
    UnvalidatedCustomerInfo,
    UnvalidatedOrder,
    UnvalidatedOrderLine,
)


# =============================================================================
# INPUT
# =============================================================================


def _to_unvalidated_address(data: Dict[str, Any]) -> UnvalidatedAddress:
    return UnvalidatedAddress(
        address_line1=data["address_line1"],
        address_line2=data.get("address_line2") or "",
        address_line3=data.get("address_line3") or "",
        address_line4=data.get("address_line4") or "",
        city=data["city"],
        zip_code=data["zip_code"],
        state=data.get("state") or "",
        country=data.get("country") or "",
    )


def _to_quantity(raw: Any) -> Any:
    # JSON float → Decimal через str, чтобы 2.5 не превращалось в 2.4999...
    if isinstance(raw, float):
        return Decimal(str(raw))
    return raw


def unvalidated_order_from_dict(data: Dict[str, Any]) -> UnvalidatedOrder:
    """
    Сборка UnvalidatedOrder из сырых JSON-данных.

    Args:
        data: Распарсенный JSON заказа

    Returns:
        UnvalidatedOrder (доменные ограничения ещё не проверены)

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют контракту
            unvalidated_order
    """
    validate_unvalidated_order(data)

    customer = data["customer_info"]
    return UnvalidatedOrder(
        order_id=data["order_id"],
        customer_info=UnvalidatedCustomerInfo(
            first_name=customer["first_name"],
            last_name=customer["last_name"],
            email_address=customer["email_address"],
            vip_status=customer.get("vip_status") or "",
        ),
        shipping_address=_to_unvalidated_address(data["shipping_address"]),
        billing_address=_to_unvalidated_address(data["billing_address"]),
        lines=tuple(
            UnvalidatedOrderLine(
                order_line_id=line["order_line_id"],
                product_code=line["product_code"],
                quantity=_to_quantity(line["quantity"]),
            )
            for line in data["lines"]
        ),
    )


# =============================================================================
# OUTPUT
# =============================================================================


def _decimal_to_str(value: Decimal | int) -> str:
    return format(Decimal(value), "f")


def address_to_dict(address: Address) -> Dict[str, Any]:
    return {
        "address_line1": address.address_line1.value,
        "address_line2": address.address_line2.value if address.address_line2 else None,
        "address_line3": address.address_line3.value if address.address_line3 else None,
        "address_line4": address.address_line4.value if address.address_line4 else None,
        "city": address.city.value,
        "zip_code": address.zip_code.value,
    }


def customer_info_to_dict(customer_info: CustomerInfo) -> Dict[str, Any]:
    return {
        "first_name": customer_info.name.first_name.value,
        "last_name": customer_info.name.last_name.value,
        "email_address": customer_info.email_address.value,
    }


def priced_order_line_to_dict(line: PricedOrderLine) -> Dict[str, Any]:
    return {
        "order_line_id": line.order_line_id.value,
        "product_code": line.product_code.code,
        "product_type": line.product_code.product_type,
        "quantity": _decimal_to_str(line.quantity.value),
        "quantity_type": line.quantity.quantity_type,
        "line_price": _decimal_to_str(line.line_price.value),
    }


def place_order_event_to_dict(event: PlaceOrderEvent) -> Dict[str, Any]:
    """
    Сериализация события в JSON-ready dict (контракт place_order_event).

    Raises:
        TypeError: Если передан объект, не являющийся событием PlaceOrder
    """
    if isinstance(event, OrderAcknowledgmentSent):
        return {
            "event_type": event.event_type,
            "order_id": event.order_id.value,
            "email_address": event.email_address.value,
        }

    if isinstance(event, OrderPlaced):
        order = event.priced_order
        return {
            "event_type": event.event_type,
            "order_id": order.order_id.value,
            "customer_info": customer_info_to_dict(order.customer_info),
            "shipping_address": address_to_dict(order.shipping_address),
            "billing_address": address_to_dict(order.billing_address),
            "amount_to_bill": _decimal_to_str(order.amount_to_bill.value),
            "lines": [priced_order_line_to_dict(line) for line in order.lines],
        }

    if isinstance(event, BillableOrderPlaced):
        return {
            "event_type": event.event_type,
            "order_id": event.order_id.value,
            "billing_address": address_to_dict(event.billing_address),
            "amount_to_bill": _decimal_to_str(event.amount_to_bill.value),
        }

    raise TypeError(f"Unknown PlaceOrder event: {event!r}")


def place_order_error_to_dict(error: PlaceOrderError) -> Dict[str, Any]:
    """Сериализация ошибки в JSON-ready dict (контракт place_order_error)."""
    data: Dict[str, Any] = {
        "error_type": error.error_type.value,
        "message": error.message,
    }
    if isinstance(error, RemoteServiceError):
        data["service"] = {
            "name": error.service.name,
            "endpoint": error.service.endpoint,
        }
    return data
