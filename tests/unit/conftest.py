"""Общие fixtures для тестов PlaceOrder: сырые заказы и фейковые capabilities."""

from decimal import Decimal

import pytest

from src.core.domain import (
    Address,
    CustomerInfo,
    EmailAddress,
    OrderId,
    OrderLineId,
    PersonalName,
    Price,
    String50,
    ZipCode,
    create_order_quantity,
    create_product_code,
)
from src.placeorder import (
    CheckedAddress,
    SendResult,
    UnvalidatedAddress,
    UnvalidatedCustomerInfo,
    UnvalidatedOrder,
    UnvalidatedOrderLine,
    ValidatedOrder,
    ValidatedOrderLine,
)


# =============================================================================
# RAW INPUT
# =============================================================================


def make_address(**overrides) -> UnvalidatedAddress:
    data = dict(
        address_line1="1 Main Street",
        address_line2="Apt 2",
        city="Springfield",
        zip_code="12345",
    )
    data.update(overrides)
    return UnvalidatedAddress(**data)


def make_order(lines=None, **overrides) -> UnvalidatedOrder:
    data = dict(
        order_id="ORD-001",
        customer_info=UnvalidatedCustomerInfo(
            first_name="Jane",
            last_name="Doe",
            email_address="jane@example.com",
        ),
        shipping_address=make_address(),
        billing_address=make_address(address_line1="2 Billing Road", address_line2=""),
        lines=tuple(
            lines
            if lines is not None
            else [UnvalidatedOrderLine(order_line_id="L1", product_code="W1234", quantity=10)]
        ),
    )
    data.update(overrides)
    return UnvalidatedOrder(**data)


@pytest.fixture
def unvalidated_order() -> UnvalidatedOrder:
    """Валидный заказ: одна строка виджета W1234 × 10"""
    return make_order()


# =============================================================================
# FAKE CAPABILITIES
# =============================================================================


class FakeAddressChecker:
    """Асинхронная проверка адреса с записью вызовов."""

    def __init__(self, failures=None):
        # address_line1 → AddressValidationError
        self.failures = failures or {}
        self.calls: list[UnvalidatedAddress] = []

    async def __call__(self, address: UnvalidatedAddress):
        self.calls.append(address)
        if address.address_line1 in self.failures:
            return self.failures[address.address_line1]
        return CheckedAddress.from_unvalidated(address)


class FakeCatalog:
    """Каталог продуктов: наличие и цена за единицу."""

    def __init__(self, prices=None):
        self.prices = prices or {"W1234": Decimal("5.00"), "G123": Decimal("2.00")}
        self.price_lookups: list[str] = []

    def exists(self, product_code) -> bool:
        return product_code.code in self.prices

    def price(self, product_code) -> Price:
        self.price_lookups.append(product_code.code)
        return Price.unsafe_create(self.prices[product_code.code])


class FakeSender:
    """Отправка подтверждений с фиксированным результатом."""

    def __init__(self, result: SendResult = SendResult.SENT):
        self.result = result
        self.sent = []

    def __call__(self, acknowledgment):
        self.sent.append(acknowledgment)
        return self.result


@pytest.fixture
def address_checker() -> FakeAddressChecker:
    return FakeAddressChecker()


@pytest.fixture
def catalog() -> FakeCatalog:
    return FakeCatalog()


@pytest.fixture
def sender() -> FakeSender:
    return FakeSender()


@pytest.fixture
def order_factory():
    """Фабрика сырых заказов с переопределением полей"""
    return make_order


@pytest.fixture
def address_factory():
    """Фабрика сырых адресов с переопределением полей"""
    return make_address


@pytest.fixture
def address_checker_factory():
    """Фабрика проверок адреса с заданными отказами"""
    return FakeAddressChecker


@pytest.fixture
def catalog_factory():
    """Фабрика каталогов с заданным прайс-листом"""
    return FakeCatalog


@pytest.fixture
def sender_factory():
    """Фабрика отправителей с заданным SendResult"""
    return FakeSender


# =============================================================================
# VALIDATED ORDERS
# =============================================================================


def make_validated_order(lines) -> ValidatedOrder:
    """ValidatedOrder из списка (line_id, product_code, quantity)."""
    validated_lines = []
    for line_id, raw_code, raw_quantity in lines:
        product_code = create_product_code("ProductCode", raw_code)
        validated_lines.append(
            ValidatedOrderLine(
                order_line_id=OrderLineId(value=line_id),
                product_code=product_code,
                quantity=create_order_quantity("Quantity", product_code, raw_quantity),
            )
        )

    address = Address(
        address_line1=String50(value="1 Main Street"),
        city=String50(value="Springfield"),
        zip_code=ZipCode(value="12345"),
    )
    return ValidatedOrder(
        order_id=OrderId(value="ORD-001"),
        customer_info=CustomerInfo(
            name=PersonalName(first_name=String50(value="Jane"), last_name=String50(value="Doe")),
            email_address=EmailAddress(value="jane@example.com"),
        ),
        shipping_address=address,
        billing_address=address,
        lines=tuple(validated_lines),
    )


@pytest.fixture
def validated_order_factory():
    """Фабрика ValidatedOrder из (line_id, product_code, quantity)"""
    return make_validated_order
