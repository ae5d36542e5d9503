"""
Admin settings endpoints
"""
from fastapi import APIRouter, Depends

from flower_orders.api.deps import Caller, get_caller, get_settings_service
from flower_orders.schemas.settings import ContactResponse, ContactUpdate
from flower_orders.services.settings_service import SettingsService

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("/contact", response_model=ContactResponse, summary="Shop contact number")
def get_contact(
    caller: Caller = Depends(get_caller),
    service: SettingsService = Depends(get_settings_service)
):
    return ContactResponse(phone=service.get_contact())


@router.put("/contact", response_model=ContactResponse, summary="Change shop contact number")
def update_contact(
    contact: ContactUpdate,
    caller: Caller = Depends(get_caller),
    service: SettingsService = Depends(get_settings_service)
):
    """
    Change the number customers are told to call (admin only)

    - **phone**: Exactly 10 digits
    """
    return ContactResponse(phone=service.set_contact(contact.phone, caller.role))
