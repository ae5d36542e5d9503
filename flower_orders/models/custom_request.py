"""
SQLAlchemy CustomRequest model
"""
from sqlalchemy import Column, Integer, String, Text, Date, Time, JSON, CheckConstraint

from flower_orders.database import Base, UTCDateTime


class CustomRequest(Base):
    """Free-form custom request database model"""

    __tablename__ = "custom_requests"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    user_id = Column(String(64), nullable=False, index=True)
    description = Column(Text, nullable=False)
    requested_date = Column(Date, nullable=False)
    requested_time = Column(Time, nullable=False)
    # Point-in-time contact details, independent of the user profile
    contact_name = Column(String(255), nullable=False)
    contact_phone = Column(String(10), nullable=False)
    images = Column(JSON, nullable=False)
    status = Column(String(20), nullable=False, default='PENDING', index=True)
    created_at = Column(UTCDateTime, nullable=False)
    updated_at = Column(UTCDateTime, nullable=False)
    deadline_at = Column(UTCDateTime, nullable=True, index=True)

    __table_args__ = (
        CheckConstraint(
            "status IN ('PENDING', 'CONFIRMED', 'COMPLETED', 'CANCELLED')",
            name='check_custom_request_status_valid'
        ),
        {"sqlite_autoincrement": True},
    )

    def __repr__(self):
        return f"<CustomRequest(id={self.id}, user_id={self.user_id}, status='{self.status}')>"
