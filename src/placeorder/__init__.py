"""PlaceOrder — workflow приёма заказа.

Шаги: ValidateOrder → PriceOrder → AcknowledgeOrder → CreateEvents.
Точка входа: PlaceOrderWorkflow.place_order.
"""

from .acknowledge_order import acknowledge_order, format_acknowledgment_letter
from .create_events import create_events
from .dto import (
    place_order_error_to_dict,
    place_order_event_to_dict,
    unvalidated_order_from_dict,
)
from .ports import (
    AddressValidationError,
    CheckedAddress,
    OrderAcknowledgment,
    SendResult,
)
from .price_order import price_order
from .public_types import (
    BillableOrderPlaced,
    OrderAcknowledgmentSent,
    OrderPlaced,
    PlaceOrderError,
    PlaceOrderErrorType,
    PlaceOrderEvent,
    PricedOrder,
    PricedOrderLine,
    PricingError,
    RemoteServiceError,
    ServiceInfo,
    UnvalidatedAddress,
    UnvalidatedCustomerInfo,
    UnvalidatedOrder,
    UnvalidatedOrderLine,
    ValidatedOrder,
    ValidatedOrderLine,
    ValidationError,
)
from .validate_order import validate_order
from .workflow import PlaceOrderConfig, PlaceOrderWorkflow

__all__ = [
    # Workflow
    "PlaceOrderWorkflow",
    "PlaceOrderConfig",
    # Steps
    "validate_order",
    "price_order",
    "acknowledge_order",
    "format_acknowledgment_letter",
    "create_events",
    # Inputs
    "UnvalidatedOrder",
    "UnvalidatedCustomerInfo",
    "UnvalidatedAddress",
    "UnvalidatedOrderLine",
    # Internal states
    "ValidatedOrder",
    "ValidatedOrderLine",
    "PricedOrder",
    "PricedOrderLine",
    # Events
    "PlaceOrderEvent",
    "OrderPlaced",
    "BillableOrderPlaced",
    "OrderAcknowledgmentSent",
    # Errors
    "PlaceOrderError",
    "PlaceOrderErrorType",
    "ValidationError",
    "PricingError",
    "RemoteServiceError",
    "ServiceInfo",
    # Ports
    "AddressValidationError",
    "CheckedAddress",
    "OrderAcknowledgment",
    "SendResult",
    # DTO
    "unvalidated_order_from_dict",
    "place_order_event_to_dict",
    "place_order_error_to_dict",
]
