"""
Orders lifecycle endpoints.

DomainError is translated to HTTP by the handler registered in api.main.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, status

from api.dependencies import get_create_order_use_case, get_order_domain_service
from core.application.dtos.order_dto import CreateOrderRequest, OrderCreatedDTO, OrderDTO
from core.application.use_cases.create_order import CreateOrderUseCase
from core.domain.services.order_domain_service import OrderDomainService


logger = logging.getLogger(__name__)
router = APIRouter()


# =============================================================================
# CREATE
# =============================================================================

@router.post(
    "",
    response_model=OrderCreatedDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create an order",
)
async def create_order(
    request: CreateOrderRequest,
    use_case: CreateOrderUseCase = Depends(get_create_order_use_case),
) -> OrderCreatedDTO:
    """
    Create a PENDING order and return the OrderCreated event.

    **Body:**
    - `customerId`: customer identifier
    - `items`: list of `{productId, quantity, unitPrice}` (at least one)
    """
    event = await use_case.execute(request)
    return OrderCreatedDTO.from_event(event)


# =============================================================================
# QUERIES
# =============================================================================

@router.get(
    "/customer/{customer_id}",
    response_model=List[OrderDTO],
    summary="List orders of a customer",
)
async def get_customer_orders(
    customer_id: str,
    service: OrderDomainService = Depends(get_order_domain_service),
) -> List[OrderDTO]:
    orders = await service.get_customer_orders(customer_id)
    return [OrderDTO.from_domain(order) for order in orders]


@router.get(
    "/{order_id}",
    response_model=OrderDTO,
    summary="Get order by ID",
)
async def get_order(
    order_id: str,
    service: OrderDomainService = Depends(get_order_domain_service),
) -> OrderDTO:
    order = await service.get_order(order_id)
    return OrderDTO.from_domain(order)


# =============================================================================
# TRANSITIONS
# =============================================================================

@router.post("/{order_id}/confirm", response_model=OrderDTO, summary="Confirm an order")
async def confirm_order(
    order_id: str,
    service: OrderDomainService = Depends(get_order_domain_service),
) -> OrderDTO:
    order = await service.confirm_order(order_id)
    return OrderDTO.from_domain(order)


@router.post("/{order_id}/cancel", response_model=OrderDTO, summary="Cancel an order")
async def cancel_order(
    order_id: str,
    service: OrderDomainService = Depends(get_order_domain_service),
) -> OrderDTO:
    order = await service.cancel_order(order_id)
    return OrderDTO.from_domain(order)


@router.post("/{order_id}/deliver", response_model=OrderDTO, summary="Mark an order as delivered")
async def deliver_order(
    order_id: str,
    service: OrderDomainService = Depends(get_order_domain_service),
) -> OrderDTO:
    order = await service.deliver_order(order_id)
    return OrderDTO.from_domain(order)
