"""
Order API endpoints
"""
from fastapi import APIRouter, Depends, status

from flower_orders.api.deps import Caller, get_caller, get_order_service
from flower_orders.schemas.common import StatusUpdate
from flower_orders.schemas.order import OrderCreate, OrderListResponse, OrderResponse
from flower_orders.services.access import require_admin, require_owner_or_admin
from flower_orders.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


@router.get("", response_model=OrderListResponse, summary="Get all orders")
def get_orders(
    caller: Caller = Depends(get_caller),
    service: OrderService = Depends(get_order_service)
):
    """
    Retrieve every order, in creation order (admin only)
    """
    require_admin(caller.role, "list all orders")
    orders = service.list_all()
    return OrderListResponse(orders=orders, total=len(orders))


@router.get("/{order_id}", response_model=OrderResponse, summary="Get order by ID")
def get_order(
    order_id: int,
    caller: Caller = Depends(get_caller),
    service: OrderService = Depends(get_order_service)
):
    """
    Retrieve a specific order by ID

    - **order_id**: Order ID
    """
    order = service.get(order_id)
    require_owner_or_admin(caller.user_id, caller.role, order.user_id)
    return order


@router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED, summary="Place order")
async def create_order(
    order_data: OrderCreate,
    caller: Caller = Depends(get_caller),
    service: OrderService = Depends(get_order_service)
):
    """
    Place a stock order for the calling user

    - **productId**: Catalog product ID (required)
    - **quantity**: Quantity to order (required, must be positive)
    - **description**: Note for the shop (optional)
    """
    return await service.create(order_data, caller.user_id)


@router.put("/{order_id}/status", response_model=OrderResponse, summary="Update order status")
def update_order_status(
    order_id: int,
    status_data: StatusUpdate,
    caller: Caller = Depends(get_caller),
    service: OrderService = Depends(get_order_service)
):
    """
    Move an order through its lifecycle (admin only)

    - **order_id**: Order ID
    - **status**: CONFIRMED, COMPLETED or CANCELLED
    """
    return service.transition(order_id, caller.role, status_data.status)


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete order")
def delete_order(
    order_id: int,
    caller: Caller = Depends(get_caller),
    service: OrderService = Depends(get_order_service)
):
    """
    Delete a completed or cancelled order (admin only)
    """
    service.delete(order_id, caller.role)
    return None
