"""
PlaceOrder Workflow — оркестратор шагов

UnvalidatedOrder → list[PlaceOrderEvent] | PlaceOrderError

Шаги:
1. ValidateOrder (может завершиться ValidationError)
2. PriceOrder (может завершиться PricingError)
3. AcknowledgeOrder (никогда не завершается ошибкой, optional событие)
4. CreateEvents (всегда успешно)

Ошибка шага 1 или 2 сразу прерывает workflow. Исключение, поднятое внешней
capability (адрес, каталог, цены), превращается в RemoteServiceError.
Ни одна классифицированная ошибка не пересекает границу workflow как exception.
"""

import logging
from dataclasses import dataclass, field
from functools import wraps
from typing import Callable

from src.core.contracts import validate_place_order_event

from .acknowledge_order import acknowledge_order, format_acknowledgment_letter
from .create_events import create_events
from .dto import place_order_event_to_dict
from .ports import (
    CheckAddressExists,
    CheckProductCodeExists,
    CreateOrderAcknowledgmentLetter,
    GetProductPrice,
    SendOrderAcknowledgment,
)
from .price_order import price_order
from .public_types import (
    OrderAcknowledgmentSent,
    PlaceOrderError,
    PlaceOrderEvent,
    PricedOrder,
    PricingError,
    RemoteServiceError,
    ServiceInfo,
    UnvalidatedOrder,
    ValidationError,
)
from .validate_order import validate_order

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class PlaceOrderConfig:
    """Конфигурация workflow PlaceOrder.

    Описания внешних сервисов используются в RemoteServiceError.
    """

    address_service: ServiceInfo = field(
        default_factory=lambda: ServiceInfo(
            name="AddressCheckingService", endpoint="https://addresses.internal/check"
        )
    )
    product_catalog_service: ServiceInfo = field(
        default_factory=lambda: ServiceInfo(
            name="ProductCatalogService", endpoint="https://catalog.internal/products"
        )
    )
    pricing_service: ServiceInfo = field(
        default_factory=lambda: ServiceInfo(
            name="PricingService", endpoint="https://pricing.internal/prices"
        )
    )
    acknowledgment_service: ServiceInfo = field(
        default_factory=lambda: ServiceInfo(
            name="AcknowledgmentService", endpoint="smtp://mail.internal"
        )
    )

    # Проверять каждое событие по JSON Schema контракту перед возвратом
    validate_event_contracts: bool = False


# =============================================================================
# REMOTE SERVICE GUARDS
# =============================================================================


class RemoteServiceFailure(Exception):
    """Исключение внешней capability, помеченное описанием сервиса."""

    def __init__(self, service: ServiceInfo, cause: Exception):
        super().__init__(f"{service.name} failed: {cause}")
        self.service = service
        self.cause = cause


def _guard(service: ServiceInfo, capability: Callable) -> Callable:
    @wraps(capability)
    def guarded(*args, **kwargs):
        try:
            return capability(*args, **kwargs)
        except Exception as exc:
            raise RemoteServiceFailure(service, exc) from exc

    return guarded


def _guard_async(service: ServiceInfo, capability: Callable) -> Callable:
    @wraps(capability)
    async def guarded(*args, **kwargs):
        try:
            return await capability(*args, **kwargs)
        except Exception as exc:
            raise RemoteServiceFailure(service, exc) from exc

    return guarded


# =============================================================================
# WORKFLOW
# =============================================================================


class PlaceOrderWorkflow:
    """Workflow PlaceOrder с внедрёнными внешними capabilities.

    Stateless между вызовами: каждый вызов place_order работает только
    со своими значениями, параллельные вызовы независимы.
    """

    def __init__(
        self,
        check_product_code_exists: CheckProductCodeExists,
        check_address_exists: CheckAddressExists,
        get_product_price: GetProductPrice,
        send_acknowledgment: SendOrderAcknowledgment,
        create_acknowledgment_letter: CreateOrderAcknowledgmentLetter = format_acknowledgment_letter,
        config: PlaceOrderConfig | None = None,
    ):
        """
        Args:
            check_product_code_exists: проверка наличия кода в каталоге
            check_address_exists: асинхронная проверка адреса
            get_product_price: цена за единицу продукта
            send_acknowledgment: отправка письма-подтверждения
            create_acknowledgment_letter: форматирование письма (HTML по умолчанию)
            config: конфигурация workflow
        """
        self.config = config or PlaceOrderConfig()

        self._check_product_code_exists = _guard(
            self.config.product_catalog_service, check_product_code_exists
        )
        self._check_address_exists = _guard_async(
            self.config.address_service, check_address_exists
        )
        self._get_product_price = _guard(self.config.pricing_service, get_product_price)
        self._send_acknowledgment = send_acknowledgment
        self._create_acknowledgment_letter = create_acknowledgment_letter

    async def place_order(
        self, unvalidated_order: UnvalidatedOrder
    ) -> list[PlaceOrderEvent] | PlaceOrderError:
        """Выполнение workflow для одного заказа.

        Args:
            unvalidated_order: сырой заказ

        Returns:
            Непустой список событий, либо ValidationError / PricingError /
            RemoteServiceError
        """
        try:
            validated_order = await validate_order(
                self._check_product_code_exists,
                self._check_address_exists,
                unvalidated_order,
            )
            if isinstance(validated_order, ValidationError):
                return self._failed(unvalidated_order, validated_order)
            logger.debug(
                "Order %s validated: %d line(s)",
                validated_order.order_id.value,
                len(validated_order.lines),
            )

            priced_order = price_order(self._get_product_price, validated_order)
            if isinstance(priced_order, PricingError):
                return self._failed(unvalidated_order, priced_order)
        except RemoteServiceFailure as failure:
            error = RemoteServiceError(service=failure.service, exception=failure.cause)
            return self._failed(unvalidated_order, error)

        acknowledgment_event = self._acknowledge(priced_order)
        events = create_events(priced_order, acknowledgment_event)

        if self.config.validate_event_contracts:
            for event in events:
                validate_place_order_event(place_order_event_to_dict(event))

        logger.info(
            "Order %s placed: %d event(s), amount to bill %s",
            priced_order.order_id.value,
            len(events),
            priced_order.amount_to_bill.value,
        )
        return events

    def _acknowledge(self, priced_order: PricedOrder) -> OrderAcknowledgmentSent | None:
        """Best-effort подтверждение: любой сбой отправки равен NotSent."""
        try:
            return acknowledge_order(
                self._create_acknowledgment_letter,
                self._send_acknowledgment,
                priced_order,
            )
        except Exception:
            logger.exception(
                "Acknowledgment for order %s failed, continuing without it (%s)",
                priced_order.order_id.value,
                self.config.acknowledgment_service.name,
            )
            return None

    def _failed(
        self, unvalidated_order: UnvalidatedOrder, error: PlaceOrderError
    ) -> PlaceOrderError:
        logger.warning(
            "Order %r rejected (%s): %s",
            unvalidated_order.order_id,
            error.error_type.value,
            error.message,
        )
        return error
