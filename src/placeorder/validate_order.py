"""
ValidateOrder — шаг валидации workflow PlaceOrder

UnvalidatedOrder → ValidatedOrder | ValidationError

Порядок шагов (каждый прерывает валидацию при первой ошибке):
1. OrderId
2. CustomerInfo (first name, last name, email)
3. Shipping address, затем billing address:
   внешняя проверка CheckAddressExists → ограниченные поля адреса
4. Строки заказа: OrderLineId → ProductCode → проверка в каталоге →
   OrderQuantity, согласованное с кодом продукта

Строки валидируются все, но возвращается только первая собранная ошибка.
Частично валидированный заказ никогда не возвращается.
"""

import logging

from src.core.domain import (
    Address,
    ConstraintError,
    CustomerInfo,
    EmailAddress,
    OrderId,
    OrderLineId,
    PersonalName,
    String50,
    ZipCode,
    create_order_quantity,
    create_product_code,
)

from .ports import (
    AddressValidationError,
    CheckAddressExists,
    CheckedAddress,
    CheckProductCodeExists,
)
from .public_types import (
    UnvalidatedAddress,
    UnvalidatedCustomerInfo,
    UnvalidatedOrder,
    UnvalidatedOrderLine,
    ValidatedOrder,
    ValidatedOrderLine,
    ValidationError,
)

logger = logging.getLogger(__name__)


def _validation_error(error: ConstraintError) -> ValidationError:
    return ValidationError(message=error.message)


# =============================================================================
# CUSTOMER / ADDRESS
# =============================================================================


def to_customer_info(customer: UnvalidatedCustomerInfo) -> CustomerInfo | ValidationError:
    """Сборка CustomerInfo из сырых данных."""
    first_name = String50.create("FirstName", customer.first_name)
    if isinstance(first_name, ConstraintError):
        return _validation_error(first_name)

    last_name = String50.create("LastName", customer.last_name)
    if isinstance(last_name, ConstraintError):
        return _validation_error(last_name)

    email_address = EmailAddress.create("EmailAddress", customer.email_address)
    if isinstance(email_address, ConstraintError):
        return _validation_error(email_address)

    return CustomerInfo(
        name=PersonalName(first_name=first_name, last_name=last_name),
        email_address=email_address,
    )


def to_address(checked_address: CheckedAddress) -> Address | ValidationError:
    """
    Сборка Address из подтверждённого адреса.

    Строки 2-4 необязательны: пустое значение → None.
    """
    address_line1 = String50.create("AddressLine1", checked_address.address_line1)
    if isinstance(address_line1, ConstraintError):
        return _validation_error(address_line1)

    optional_lines = []
    for field_name, raw in (
        ("AddressLine2", checked_address.address_line2),
        ("AddressLine3", checked_address.address_line3),
        ("AddressLine4", checked_address.address_line4),
    ):
        line = String50.create_option(field_name, raw)
        if isinstance(line, ConstraintError):
            return _validation_error(line)
        optional_lines.append(line)

    city = String50.create("City", checked_address.city)
    if isinstance(city, ConstraintError):
        return _validation_error(city)

    zip_code = ZipCode.create("ZipCode", checked_address.zip_code)
    if isinstance(zip_code, ConstraintError):
        return _validation_error(zip_code)

    address_line2, address_line3, address_line4 = optional_lines
    return Address(
        address_line1=address_line1,
        address_line2=address_line2,
        address_line3=address_line3,
        address_line4=address_line4,
        city=city,
        zip_code=zip_code,
    )


async def to_checked_address(
    check_address_exists: CheckAddressExists,
    address_name: str,
    address: UnvalidatedAddress,
) -> CheckedAddress | ValidationError:
    """
    Внешняя проверка адреса.

    InvalidFormat и AddressNotFound (enum или его строковое значение)
    одинаково превращаются в ValidationError, как и любой другой результат,
    не являющийся CheckedAddress.
    """
    result = await check_address_exists(address)

    if result == AddressValidationError.INVALID_FORMAT:
        return ValidationError(message=f"{address_name}: Address has bad format")
    if result == AddressValidationError.ADDRESS_NOT_FOUND:
        return ValidationError(message=f"{address_name}: Address not found")
    if not isinstance(result, CheckedAddress):
        return ValidationError(
            message=f"{address_name}: Address check returned {result!r}"
        )
    return result


async def _validate_address(
    check_address_exists: CheckAddressExists,
    address_name: str,
    address: UnvalidatedAddress,
) -> Address | ValidationError:
    checked = await to_checked_address(check_address_exists, address_name, address)
    if isinstance(checked, ValidationError):
        return checked
    return to_address(checked)


# =============================================================================
# ORDER LINES
# =============================================================================


def to_validated_order_line(
    check_product_code_exists: CheckProductCodeExists,
    line: UnvalidatedOrderLine,
) -> ValidatedOrderLine | ValidationError:
    """
    Валидация одной строки заказа.

    Код в распознанном формате, но отсутствующий в каталоге, даёт ошибку валидации.
    """
    order_line_id = OrderLineId.create("OrderLineId", line.order_line_id)
    if isinstance(order_line_id, ConstraintError):
        return _validation_error(order_line_id)

    product_code = create_product_code("ProductCode", line.product_code)
    if isinstance(product_code, ConstraintError):
        return _validation_error(product_code)

    if not check_product_code_exists(product_code):
        return ValidationError(
            message=f"ProductCode: '{product_code.code}' is not in the product catalog"
        )

    quantity = create_order_quantity("Quantity", product_code, line.quantity)
    if isinstance(quantity, ConstraintError):
        return _validation_error(quantity)

    return ValidatedOrderLine(
        order_line_id=order_line_id,
        product_code=product_code,
        quantity=quantity,
    )


# =============================================================================
# VALIDATE ORDER
# =============================================================================


async def validate_order(
    check_product_code_exists: CheckProductCodeExists,
    check_address_exists: CheckAddressExists,
    unvalidated_order: UnvalidatedOrder,
) -> ValidatedOrder | ValidationError:
    """
    Валидация заказа.

    Адреса проверяются последовательно (shipping, затем billing).

    Args:
        check_product_code_exists: проверка кода продукта в каталоге
        check_address_exists: асинхронная проверка адреса
        unvalidated_order: сырой заказ

    Returns:
        ValidatedOrder, либо первая ValidationError
    """
    order_id = OrderId.create("OrderId", unvalidated_order.order_id)
    if isinstance(order_id, ConstraintError):
        return _validation_error(order_id)

    customer_info = to_customer_info(unvalidated_order.customer_info)
    if isinstance(customer_info, ValidationError):
        return customer_info

    shipping_address = await _validate_address(
        check_address_exists, "ShippingAddress", unvalidated_order.shipping_address
    )
    if isinstance(shipping_address, ValidationError):
        return shipping_address

    billing_address = await _validate_address(
        check_address_exists, "BillingAddress", unvalidated_order.billing_address
    )
    if isinstance(billing_address, ValidationError):
        return billing_address

    line_results = [
        to_validated_order_line(check_product_code_exists, line)
        for line in unvalidated_order.lines
    ]
    line_errors = [result for result in line_results if isinstance(result, ValidationError)]
    if line_errors:
        logger.debug(
            "Order %s: %d invalid line(s), reporting the first",
            order_id.value,
            len(line_errors),
        )
        return line_errors[0]

    return ValidatedOrder(
        order_id=order_id,
        customer_info=customer_info,
        shipping_address=shipping_address,
        billing_address=billing_address,
        lines=tuple(line_results),
    )
