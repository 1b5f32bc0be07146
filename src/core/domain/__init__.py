"""
Domain models and value objects.

Constrained value types of the OrderTaking domain: smart constructors,
simple wrapper types, product codes, quantities, money and compound records.
"""

from src.core.domain.compound_types import Address, CustomerInfo, PersonalName
from src.core.domain.constrained import (
    ConstraintError,
    ConstraintErrorKind,
    create_decimal,
    create_int,
    create_like,
    create_string,
    create_string_option,
)
from src.core.domain.money import (
    BILLING_AMOUNT_MAX,
    BILLING_AMOUNT_MIN,
    PRICE_MAX,
    PRICE_MIN,
    BillingAmount,
    Price,
)
from src.core.domain.order_quantity import (
    KILOGRAM_QUANTITY_MAX,
    KILOGRAM_QUANTITY_MIN,
    UNIT_QUANTITY_MAX,
    UNIT_QUANTITY_MIN,
    KilogramQuantity,
    OrderQuantity,
    UnitQuantity,
    create_order_quantity,
    order_quantity_value,
)
from src.core.domain.product_code import (
    GizmoCode,
    ProductCode,
    WidgetCode,
    create_product_code,
    product_code_value,
)
from src.core.domain.simple_types import (
    EmailAddress,
    OrderId,
    OrderLineId,
    String50,
    ZipCode,
)

__all__ = [
    # Constrained primitives
    "ConstraintError",
    "ConstraintErrorKind",
    "create_string",
    "create_string_option",
    "create_int",
    "create_decimal",
    "create_like",
    # Simple types
    "String50",
    "EmailAddress",
    "ZipCode",
    "OrderId",
    "OrderLineId",
    # Product code
    "ProductCode",
    "WidgetCode",
    "GizmoCode",
    "create_product_code",
    "product_code_value",
    # Order quantity
    "UNIT_QUANTITY_MIN",
    "UNIT_QUANTITY_MAX",
    "KILOGRAM_QUANTITY_MIN",
    "KILOGRAM_QUANTITY_MAX",
    "OrderQuantity",
    "UnitQuantity",
    "KilogramQuantity",
    "create_order_quantity",
    "order_quantity_value",
    # Money
    "PRICE_MIN",
    "PRICE_MAX",
    "BILLING_AMOUNT_MIN",
    "BILLING_AMOUNT_MAX",
    "Price",
    "BillingAmount",
    # Compound records
    "PersonalName",
    "CustomerInfo",
    "Address",
]
