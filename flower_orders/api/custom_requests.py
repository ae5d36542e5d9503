"""
Custom request API endpoints
"""
from fastapi import APIRouter, Depends, status

from flower_orders.api.deps import Caller, get_caller, get_custom_request_service
from flower_orders.schemas.common import StatusUpdate
from flower_orders.schemas.custom_request import (
    CustomRequestCreate,
    CustomRequestListResponse,
    CustomRequestResponse
)
from flower_orders.services.access import require_admin, require_owner_or_admin
from flower_orders.services.custom_request_service import CustomRequestService

router = APIRouter(prefix="/custom-requests", tags=["custom-requests"])


@router.get("", response_model=CustomRequestListResponse, summary="Get all custom requests")
def get_custom_requests(
    caller: Caller = Depends(get_caller),
    service: CustomRequestService = Depends(get_custom_request_service)
):
    require_admin(caller.role, "list all custom requests")
    custom_requests = service.list_all()
    return CustomRequestListResponse(custom_requests=custom_requests, total=len(custom_requests))


@router.get("/{request_id}", response_model=CustomRequestResponse, summary="Get custom request by ID")
def get_custom_request(
    request_id: int,
    caller: Caller = Depends(get_caller),
    service: CustomRequestService = Depends(get_custom_request_service)
):
    custom_request = service.get(request_id)
    require_owner_or_admin(caller.user_id, caller.role, custom_request.user_id)
    return custom_request


@router.post(
    "",
    response_model=CustomRequestResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Place custom request"
)
def create_custom_request(
    request_data: CustomRequestCreate,
    caller: Caller = Depends(get_caller),
    service: CustomRequestService = Depends(get_custom_request_service)
):
    """
    Place a free-form request for the calling user

    - **description**: What is wanted (required)
    - **requestedDate** / **requestedTime**: Desired slot (informational)
    - **contactName** / **contactPhone**: Contact for this request; phone must be 10 digits
    - **images**: One or more reference photos (required)
    """
    return service.create(request_data, caller.user_id)


@router.put("/{request_id}/status", response_model=CustomRequestResponse, summary="Update custom request status")
def update_custom_request_status(
    request_id: int,
    status_data: StatusUpdate,
    caller: Caller = Depends(get_caller),
    service: CustomRequestService = Depends(get_custom_request_service)
):
    return service.transition(request_id, caller.role, status_data.status)


@router.delete("/{request_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete custom request")
def delete_custom_request(
    request_id: int,
    caller: Caller = Depends(get_caller),
    service: CustomRequestService = Depends(get_custom_request_service)
):
    service.delete(request_id, caller.role)
    return None
