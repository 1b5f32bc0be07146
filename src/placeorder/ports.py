"""
PlaceOrder ports — внешние capabilities, которые потребляет workflow

Конкретные реализации предоставляет вызывающий код:
- CheckProductCodeExists: синхронная проверка наличия в каталоге
- CheckAddressExists: асинхронная проверка адреса
- GetProductPrice: синхронный (тотальный) поиск цены
- CreateOrderAcknowledgmentLetter: форматирование письма
- SendOrderAcknowledgment: отправка письма (Sent / NotSent)
"""

from enum import Enum
from typing import Protocol

from pydantic import BaseModel

from src.core.domain import EmailAddress, GizmoCode, Price, WidgetCode

from .public_types import PricedOrder, UnvalidatedAddress


# =============================================================================
# ADDRESS CHECK
# =============================================================================


class AddressValidationError(str, Enum):
    """Результат отказа внешней проверки адреса"""

    INVALID_FORMAT = "InvalidFormat"
    ADDRESS_NOT_FOUND = "AddressNotFound"


class CheckedAddress(BaseModel):
    """
    Адрес, подтверждённый внешним сервисом.

    Поля остаются сырыми: ограниченные типы строятся после проверки.
    state и country сохраняются как есть и в доменный Address не входят.
    """

    address_line1: str
    address_line2: str = ""
    address_line3: str = ""
    address_line4: str = ""
    city: str
    zip_code: str
    state: str = ""
    country: str = ""

    model_config = {"frozen": True}

    @classmethod
    def from_unvalidated(cls, address: UnvalidatedAddress) -> "CheckedAddress":
        return cls(
            address_line1=address.address_line1,
            address_line2=address.address_line2,
            address_line3=address.address_line3,
            address_line4=address.address_line4,
            city=address.city,
            zip_code=address.zip_code,
            state=address.state,
            country=address.country,
        )


# =============================================================================
# ACKNOWLEDGMENT
# =============================================================================


class SendResult(str, Enum):
    """Результат отправки подтверждения (не ошибка workflow)"""

    SENT = "Sent"
    NOT_SENT = "NotSent"


class OrderAcknowledgment(BaseModel):
    """Письмо-подтверждение и адрес получателя"""

    email_address: EmailAddress
    letter: str

    model_config = {"frozen": True}


# =============================================================================
# CAPABILITIES
# =============================================================================


class CheckProductCodeExists(Protocol):
    def __call__(self, product_code: WidgetCode | GizmoCode) -> bool: ...


class CheckAddressExists(Protocol):
    async def __call__(
        self, address: UnvalidatedAddress
    ) -> CheckedAddress | AddressValidationError: ...


class GetProductPrice(Protocol):
    def __call__(self, product_code: WidgetCode | GizmoCode) -> Price: ...


class CreateOrderAcknowledgmentLetter(Protocol):
    def __call__(self, priced_order: PricedOrder) -> str: ...


class SendOrderAcknowledgment(Protocol):
    def __call__(self, acknowledgment: OrderAcknowledgment) -> SendResult: ...
