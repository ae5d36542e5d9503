"""
SQLAlchemy AppSetting model
"""
from sqlalchemy import Column, String

from flower_orders.database import Base, UTCDateTime


class AppSetting(Base):
    """Admin-editable key/value setting"""

    __tablename__ = "app_settings"

    key = Column(String(64), primary_key=True)
    value = Column(String(255), nullable=False)
    updated_at = Column(UTCDateTime, nullable=False)

    def __repr__(self):
        return f"<AppSetting(key='{self.key}', value='{self.value}')>"
