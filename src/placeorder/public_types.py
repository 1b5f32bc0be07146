"""
PlaceOrder public types — входы, выходы и ошибки workflow

Входы (unvalidated): сырые строки/числа без инвариантов.
Выходы (success): список событий PlaceOrderEvent.
Выходы (failure): одна из ошибок PlaceOrderError.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from src.core.domain import (
    Address,
    BillingAmount,
    CustomerInfo,
    EmailAddress,
    OrderId,
    OrderLineId,
    OrderQuantity,
    Price,
    ProductCode,
)


# =============================================================================
# INPUTS
# =============================================================================


@dataclass(frozen=True)
class UnvalidatedCustomerInfo:
    """Сырые данные клиента."""

    first_name: str
    last_name: str
    email_address: str
    vip_status: str = ""


@dataclass(frozen=True)
class UnvalidatedAddress:
    """Сырой адрес (строки 2-4, state и country могут быть пустыми)."""

    address_line1: str
    city: str
    zip_code: str
    address_line2: str = ""
    address_line3: str = ""
    address_line4: str = ""
    state: str = ""
    country: str = ""


@dataclass(frozen=True)
class UnvalidatedOrderLine:
    """Сырая строка заказа."""

    order_line_id: str
    product_code: str
    quantity: int | float | Decimal


@dataclass(frozen=True)
class UnvalidatedOrder:
    """Сырой заказ, как он пришёл от внешнего entry point."""

    order_id: str
    customer_info: UnvalidatedCustomerInfo
    shipping_address: UnvalidatedAddress
    billing_address: UnvalidatedAddress
    lines: tuple[UnvalidatedOrderLine, ...] = field(default_factory=tuple)


# =============================================================================
# INTERNAL STATES
# =============================================================================


class ValidatedOrderLine(BaseModel):
    """Строка заказа после валидации"""

    order_line_id: OrderLineId
    product_code: ProductCode
    quantity: OrderQuantity

    model_config = {"frozen": True}


class ValidatedOrder(BaseModel):
    """
    Заказ после валидации.

    Все поля являются ограниченными типами; адреса подтверждены внешним сервисом,
    коды продуктов подтверждены каталогом.
    """

    order_id: OrderId
    customer_info: CustomerInfo
    shipping_address: Address
    billing_address: Address
    lines: tuple[ValidatedOrderLine, ...]

    model_config = {"frozen": True}


class PricedOrderLine(BaseModel):
    """Строка заказа с рассчитанной ценой"""

    order_line_id: OrderLineId
    product_code: ProductCode
    quantity: OrderQuantity
    line_price: Price

    model_config = {"frozen": True}


class PricedOrder(BaseModel):
    """Заказ с ценами строк и итоговой суммой"""

    order_id: OrderId
    customer_info: CustomerInfo
    shipping_address: Address
    billing_address: Address
    amount_to_bill: BillingAmount
    lines: tuple[PricedOrderLine, ...]

    model_config = {"frozen": True}


# =============================================================================
# EVENTS
# =============================================================================


class OrderPlaced(BaseModel):
    """Событие для shipping context: полный priced order"""

    event_type: Literal["OrderPlaced"] = "OrderPlaced"
    priced_order: PricedOrder

    model_config = {"frozen": True}


class BillableOrderPlaced(BaseModel):
    """
    Событие для billing context.

    Создаётся только если amount_to_bill > 0.
    """

    event_type: Literal["BillableOrderPlaced"] = "BillableOrderPlaced"
    order_id: OrderId
    billing_address: Address
    amount_to_bill: BillingAmount

    model_config = {"frozen": True}


class OrderAcknowledgmentSent(BaseModel):
    """Событие создаётся только если подтверждение реально отправлено"""

    event_type: Literal["OrderAcknowledgmentSent"] = "OrderAcknowledgmentSent"
    order_id: OrderId
    email_address: EmailAddress

    model_config = {"frozen": True}


PlaceOrderEvent = Annotated[
    Union[OrderPlaced, BillableOrderPlaced, OrderAcknowledgmentSent],
    Field(discriminator="event_type"),
]


# =============================================================================
# ERRORS
# =============================================================================


class PlaceOrderErrorType(str, Enum):
    """Тип ошибки workflow"""

    VALIDATION = "Validation"
    PRICING = "Pricing"
    REMOTE_SERVICE = "RemoteService"


@dataclass(frozen=True)
class ValidationError:
    """Невалидный ввод или несовпадение при проверке адреса/каталога."""

    message: str
    error_type: PlaceOrderErrorType = field(default=PlaceOrderErrorType.VALIDATION, init=False)


@dataclass(frozen=True)
class PricingError:
    """Нарушение границ при расчёте цен."""

    message: str
    error_type: PlaceOrderErrorType = field(default=PlaceOrderErrorType.PRICING, init=False)


@dataclass(frozen=True)
class ServiceInfo:
    """Описание внешнего сервиса."""

    name: str
    endpoint: str


@dataclass(frozen=True)
class RemoteServiceError:
    """Внешний сервис сам завершился неожиданной ошибкой."""

    service: ServiceInfo
    exception: BaseException
    error_type: PlaceOrderErrorType = field(
        default=PlaceOrderErrorType.REMOTE_SERVICE, init=False
    )

    @property
    def message(self) -> str:
        return f"{self.service.name} failed: {self.exception}"


PlaceOrderError = Union[ValidationError, PricingError, RemoteServiceError]
