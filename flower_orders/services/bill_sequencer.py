"""
Bill Sequencer - day-scoped sequential billing identifiers
"""
from datetime import datetime
from zoneinfo import ZoneInfo

from sqlalchemy.orm import Session

from flower_orders.config import settings
from flower_orders.repositories.bill_counter_repository import BillCounterRepository


class BillSequencer:
    """
    Issues ``<PREFIX>-<YYYYMMDD>-<seq>`` identifiers

    ``seq`` starts at 1 on each store-local calendar day and is gapless as
    long as every issuing transaction either commits or rolls back.
    """

    def __init__(self, db: Session, prefix: str = None, timezone: str = None):
        self.repository = BillCounterRepository(db)
        self.prefix = prefix or settings.BILL_PREFIX
        self.tz = ZoneInfo(timezone or settings.STORE_TIMEZONE)

    def day_key(self, at: datetime) -> str:
        """Store-local calendar day of ``at`` as YYYYMMDD"""
        return at.astimezone(self.tz).strftime("%Y%m%d")

    def next_bill_id(self, at: datetime) -> str:
        day = self.day_key(at)
        seq = self.repository.increment(day)
        return format_bill_id(self.prefix, day, seq)

    def issued_on(self, at: datetime) -> int:
        """How many bill numbers the store-local day of ``at`` has used"""
        return self.repository.get_last_seq(self.day_key(at)) or 0


def format_bill_id(prefix: str, day_key: str, seq: int) -> str:
    return f"{prefix}-{day_key}-{seq:03d}"
