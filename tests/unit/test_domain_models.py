"""
Тесты для доменных типов: String50, EmailAddress, ZipCode, ProductCode,
OrderQuantity, Price, BillingAmount, составные записи

Проверяет:
1. Smart-конструкторы create(...) возвращают значение или ConstraintError
2. Диспетчеризацию ProductCode по префиксу
3. Выбор варианта OrderQuantity по типу продукта
4. Повторную проверку границ в арифметике Price / BillingAmount
5. Immutability (frozen=True) и невозможность обойти инвариант конструктором
"""

from decimal import Decimal

import pytest
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from src.core.domain import (
    Address,
    BillingAmount,
    ConstraintError,
    ConstraintErrorKind,
    EmailAddress,
    GizmoCode,
    KilogramQuantity,
    OrderId,
    OrderLineId,
    OrderQuantity,
    Price,
    ProductCode,
    String50,
    UnitQuantity,
    WidgetCode,
    ZipCode,
    create_order_quantity,
    create_product_code,
    order_quantity_value,
    product_code_value,
)


# =============================================================================
# SIMPLE TYPES
# =============================================================================


class TestString50:
    """Тесты для String50"""

    def test_create_valid(self) -> None:
        result = String50.create("FirstName", "Jane")
        assert isinstance(result, String50)
        assert result.value == "Jane"

    def test_create_too_long(self) -> None:
        result = String50.create("FirstName", "x" * 51)
        assert isinstance(result, ConstraintError)
        assert result.kind == ConstraintErrorKind.TOO_LONG

    def test_create_empty(self) -> None:
        result = String50.create("FirstName", "")
        assert isinstance(result, ConstraintError)
        assert result.kind == ConstraintErrorKind.EMPTY

    def test_create_option_empty_is_none(self) -> None:
        assert String50.create_option("AddressLine2", "") is None

    def test_create_option_valid(self) -> None:
        result = String50.create_option("AddressLine2", "Apt 2")
        assert isinstance(result, String50)
        assert result.value == "Apt 2"

    def test_direct_construction_cannot_bypass_invariant(self) -> None:
        with pytest.raises(PydanticValidationError):
            String50(value="x" * 51)

    def test_immutable(self) -> None:
        value = String50.create("FirstName", "Jane")
        with pytest.raises(PydanticValidationError):
            value.value = "John"  # type: ignore


class TestIdentifiers:
    """Тесты для OrderId и OrderLineId"""

    def test_order_id_valid(self) -> None:
        result = OrderId.create("OrderId", "ORD-001")
        assert isinstance(result, OrderId)
        assert result.value == "ORD-001"

    def test_order_id_empty(self) -> None:
        result = OrderId.create("OrderId", "")
        assert isinstance(result, ConstraintError)
        assert result.kind == ConstraintErrorKind.EMPTY

    def test_order_line_id_too_long(self) -> None:
        result = OrderLineId.create("OrderLineId", "L" * 51)
        assert isinstance(result, ConstraintError)
        assert result.kind == ConstraintErrorKind.TOO_LONG


class TestEmailAndZip:
    """Тесты для EmailAddress и ZipCode"""

    @pytest.mark.parametrize("raw", ["jane@example.com", "a@b"])
    def test_email_valid(self, raw) -> None:
        result = EmailAddress.create("EmailAddress", raw)
        assert isinstance(result, EmailAddress)
        assert result.value == raw

    @pytest.mark.parametrize("raw", ["jane.example.com", "@example.com", "jane@", "ja ne@x.com"])
    def test_email_does_not_match(self, raw) -> None:
        result = EmailAddress.create("EmailAddress", raw)
        assert isinstance(result, ConstraintError)
        assert result.kind == ConstraintErrorKind.DOES_NOT_MATCH

    def test_zip_valid(self) -> None:
        result = ZipCode.create("ZipCode", "90210")
        assert isinstance(result, ZipCode)
        assert result.value == "90210"

    @pytest.mark.parametrize(
        "raw",
        [
            "1234",
            "123456",
            "abcde",
            "d1234",
            "\u0661\u0662\u0663\u0664\u0665",  # arabic-indic
            "\uff11\uff12\uff13\uff14\uff15",  # full-width
        ],
    )
    def test_zip_does_not_match(self, raw) -> None:
        result = ZipCode.create("ZipCode", raw)
        assert isinstance(result, ConstraintError)
        assert result.kind == ConstraintErrorKind.DOES_NOT_MATCH

    def test_zip_direct_construction_rejects_non_ascii_digits(self) -> None:
        with pytest.raises(PydanticValidationError):
            ZipCode(value="\u0661\u0662\u0663\u0664\u0665")


# =============================================================================
# PRODUCT CODE
# =============================================================================


class TestProductCode:
    """Тесты для create_product_code"""

    def test_widget_code(self) -> None:
        result = create_product_code("ProductCode", "W1234")
        assert isinstance(result, WidgetCode)
        assert result.product_type == "widget"
        assert product_code_value(result) == "W1234"

    def test_gizmo_code(self) -> None:
        result = create_product_code("ProductCode", "G123")
        assert isinstance(result, GizmoCode)
        assert result.product_type == "gizmo"
        assert result.value == "G123"

    def test_unknown_format(self) -> None:
        result = create_product_code("ProductCode", "X1")
        assert isinstance(result, ConstraintError)
        assert result.kind == ConstraintErrorKind.UNKNOWN_FORMAT

    @pytest.mark.parametrize(
        "raw",
        ["W12", "W12345", "G1234", "G12", "Wabcd", "W\uff11\uff12\uff13\uff14", "G\u0661\u0662\u0663"],
    )
    def test_wrong_digit_count_does_not_match(self, raw) -> None:
        result = create_product_code("ProductCode", raw)
        assert isinstance(result, ConstraintError)
        assert result.kind == ConstraintErrorKind.DOES_NOT_MATCH

    def test_empty(self) -> None:
        result = create_product_code("ProductCode", "")
        assert isinstance(result, ConstraintError)
        assert result.kind == ConstraintErrorKind.EMPTY

    @pytest.mark.parametrize("raw", [1234, 12.5])
    def test_non_string_does_not_match(self, raw) -> None:
        result = create_product_code("ProductCode", raw)
        assert isinstance(result, ConstraintError)
        assert result.kind == ConstraintErrorKind.DOES_NOT_MATCH

    def test_direct_construction_rejects_non_ascii_digits(self) -> None:
        with pytest.raises(PydanticValidationError):
            WidgetCode(code="W\uff11\uff12\uff13\uff14")

    def test_discriminated_union_roundtrip(self) -> None:
        adapter = TypeAdapter(ProductCode)
        restored = adapter.validate_python({"product_type": "gizmo", "code": "G123"})
        assert isinstance(restored, GizmoCode)

    def test_tag_cannot_be_mismatched(self) -> None:
        with pytest.raises(PydanticValidationError):
            WidgetCode(code="G123")


# =============================================================================
# ORDER QUANTITY
# =============================================================================


class TestOrderQuantity:
    """Тесты для create_order_quantity: вариант выбирается кодом продукта"""

    @pytest.fixture
    def widget(self) -> WidgetCode:
        return WidgetCode(code="W1234")

    @pytest.fixture
    def gizmo(self) -> GizmoCode:
        return GizmoCode(code="G123")

    def test_widget_unit_quantity(self, widget) -> None:
        result = create_order_quantity("Quantity", widget, 500)
        assert isinstance(result, UnitQuantity)
        assert order_quantity_value(result) == 500

    def test_widget_quantity_too_big(self, widget) -> None:
        result = create_order_quantity("Quantity", widget, 1500)
        assert isinstance(result, ConstraintError)
        assert result.kind == ConstraintErrorKind.TOO_BIG

    def test_widget_fractional_quantity_not_integer(self, widget) -> None:
        result = create_order_quantity("Quantity", widget, 2.5)
        assert isinstance(result, ConstraintError)
        assert result.kind == ConstraintErrorKind.NOT_INTEGER

    def test_gizmo_kilogram_quantity(self, gizmo) -> None:
        result = create_order_quantity("Quantity", gizmo, 2.5)
        assert isinstance(result, KilogramQuantity)
        assert result.value == Decimal("2.5")

    def test_gizmo_quantity_too_small(self, gizmo) -> None:
        result = create_order_quantity("Quantity", gizmo, 0.01)
        assert isinstance(result, ConstraintError)
        assert result.kind == ConstraintErrorKind.TOO_SMALL

    def test_gizmo_quantity_too_big(self, gizmo) -> None:
        result = create_order_quantity("Quantity", gizmo, 100.5)
        assert isinstance(result, ConstraintError)
        assert result.kind == ConstraintErrorKind.TOO_BIG

    def test_discriminated_union_roundtrip(self) -> None:
        adapter = TypeAdapter(OrderQuantity)
        restored = adapter.validate_python({"quantity_type": "kilogram", "quantity": "2.5"})
        assert isinstance(restored, KilogramQuantity)
        assert restored.quantity == Decimal("2.5")


# =============================================================================
# MONEY
# =============================================================================


class TestPrice:
    """Тесты для Price"""

    @pytest.mark.parametrize("raw", [0, "0.00", 1000, Decimal("999.99")])
    def test_create_within_bounds(self, raw) -> None:
        result = Price.create(raw)
        assert isinstance(result, Price)
        assert result.value == Decimal(str(raw))

    def test_create_negative_too_small(self) -> None:
        result = Price.create(-1)
        assert isinstance(result, ConstraintError)
        assert result.kind == ConstraintErrorKind.TOO_SMALL

    def test_create_too_big(self) -> None:
        result = Price.create(Decimal("1000.01"))
        assert isinstance(result, ConstraintError)
        assert result.kind == ConstraintErrorKind.TOO_BIG

    def test_unsafe_create_raises(self) -> None:
        with pytest.raises(ValueError, match="Price"):
            Price.unsafe_create(5000)

    def test_multiply_unit_quantity(self) -> None:
        result = Price.multiply(UnitQuantity(quantity=10), Price.unsafe_create("5.00"))
        assert isinstance(result, Price)
        assert result.value == Decimal("50.00")

    def test_multiply_kilogram_quantity(self) -> None:
        result = Price.multiply(
            KilogramQuantity(quantity=Decimal("2.5")), Price.unsafe_create("2.00")
        )
        assert isinstance(result, Price)
        assert result.value == Decimal("5.000")

    def test_multiply_overflow_is_constraint_error(self) -> None:
        """Произведение валидных значений > 1000 → TOO_BIG"""
        result = Price.multiply(UnitQuantity(quantity=1000), Price.unsafe_create("1.01"))
        assert isinstance(result, ConstraintError)
        assert result.kind == ConstraintErrorKind.TOO_BIG


class TestBillingAmount:
    """Тесты для BillingAmount"""

    def test_sum_prices(self) -> None:
        prices = [Price.unsafe_create("10.50"), Price.unsafe_create("20.25")]
        result = BillingAmount.sum_prices(prices)
        assert isinstance(result, BillingAmount)
        assert result.value == Decimal("30.75")

    def test_sum_of_nothing_is_zero(self) -> None:
        result = BillingAmount.sum_prices([])
        assert isinstance(result, BillingAmount)
        assert result.value == Decimal("0")

    def test_sum_overflow_is_constraint_error(self) -> None:
        """11 строк по 1000 → 11000 > 10000, хотя каждая цена валидна"""
        prices = [Price.unsafe_create(1000)] * 11
        result = BillingAmount.sum_prices(prices)
        assert isinstance(result, ConstraintError)
        assert result.kind == ConstraintErrorKind.TOO_BIG

    def test_sum_at_bound_is_valid(self) -> None:
        prices = [Price.unsafe_create(1000)] * 10
        result = BillingAmount.sum_prices(prices)
        assert isinstance(result, BillingAmount)
        assert result.value == Decimal("10000")


# =============================================================================
# COMPOUND RECORDS
# =============================================================================


class TestAddress:
    """Тесты для составной записи Address"""

    def test_optional_lines_default_to_none(self) -> None:
        address = Address(
            address_line1=String50(value="1 Main Street"),
            city=String50(value="Springfield"),
            zip_code=ZipCode(value="12345"),
        )
        assert address.address_line2 is None
        assert address.address_line3 is None
        assert address.address_line4 is None

    def test_json_roundtrip(self) -> None:
        address = Address(
            address_line1=String50(value="1 Main Street"),
            address_line2=String50(value="Apt 2"),
            city=String50(value="Springfield"),
            zip_code=ZipCode(value="12345"),
        )
        restored = Address.model_validate_json(address.model_dump_json())
        assert restored == address
