"""
SQLAlchemy BillCounter model
"""
from sqlalchemy import Column, Integer, String

from flower_orders.database import Base


class BillCounter(Base):
    """Last issued bill sequence number per store-local calendar day"""

    __tablename__ = "bill_counters"

    day_key = Column(String(8), primary_key=True)
    last_seq = Column(Integer, nullable=False, default=0)

    def __repr__(self):
        return f"<BillCounter(day_key='{self.day_key}', last_seq={self.last_seq})>"
