"""
Settings Service - admin contact number
"""
import logging
import re
from typing import Callable

from sqlalchemy.orm import Session

from flower_orders.clock import utcnow
from flower_orders.config import settings
from flower_orders.lifecycle import Role
from flower_orders.repositories.settings_repository import SettingsRepository
from flower_orders.services.access import require_admin
from flower_orders.services.exceptions import ValidationError

logger = logging.getLogger(__name__)

CONTACT_PHONE_KEY = "contact_phone"
_PHONE_RE = re.compile(r"[0-9]{10}")


def validate_phone(phone) -> str:
    if not isinstance(phone, str) or not _PHONE_RE.fullmatch(phone):
        raise ValidationError("Please enter a valid 10-digit phone number")
    return phone


class SettingsService:
    """Service layer for the shop contact setting"""

    def __init__(self, db: Session, clock: Callable = utcnow):
        self.repository = SettingsRepository(db)
        self.clock = clock

    def get_contact(self) -> str:
        return self.repository.get(CONTACT_PHONE_KEY) or settings.DEFAULT_CONTACT_PHONE

    def set_contact(self, phone: str, actor_role: Role) -> str:
        require_admin(actor_role, "change the contact number")
        validate_phone(phone)
        self.repository.put(CONTACT_PHONE_KEY, phone, self.clock())
        logger.info("Contact number updated")
        return phone
