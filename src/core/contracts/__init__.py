"""
Contract Validation Module

Модуль для валидации JSON контрактов на границе workflow PlaceOrder.
"""

from .validators import (
    ContractValidator,
    PlaceOrderErrorValidator,
    PlaceOrderEventValidator,
    SchemaLoader,
    UnvalidatedOrderValidator,
    validate_place_order_error,
    validate_place_order_event,
    validate_unvalidated_order,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "UnvalidatedOrderValidator",
    "PlaceOrderEventValidator",
    "PlaceOrderErrorValidator",
    # Functions
    "validate_unvalidated_order",
    "validate_place_order_event",
    "validate_place_order_error",
]
