"""
SQLAlchemy Order model
"""
from sqlalchemy import Column, Integer, String, Float, Text, CheckConstraint

from flower_orders.database import Base, UTCDateTime


class Order(Base):
    """Stock order database model"""

    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    bill_id = Column(String(40), nullable=True, unique=True)
    user_id = Column(String(64), nullable=False, index=True)
    product_id = Column(String(64), nullable=False, index=True)
    # Snapshots taken from the catalog when the order is placed
    product_title = Column(String(255), nullable=False)
    product_image = Column(Text, nullable=True)
    unit_price = Column(Float, nullable=False)
    duration_hours = Column(Float, nullable=False)
    quantity = Column(Integer, nullable=False)
    total_price = Column(Float, nullable=False)
    description = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default='PENDING', index=True)
    created_at = Column(UTCDateTime, nullable=False)
    updated_at = Column(UTCDateTime, nullable=False)
    expected_delivery_at = Column(UTCDateTime, nullable=True, index=True)

    # Constraints
    __table_args__ = (
        CheckConstraint('quantity > 0', name='check_quantity_positive'),
        CheckConstraint(
            "status IN ('PENDING', 'CONFIRMED', 'COMPLETED', 'CANCELLED')",
            name='check_order_status_valid'
        ),
        # ids are never reused after deletion
        {"sqlite_autoincrement": True},
    )

    def __repr__(self):
        return f"<Order(id={self.id}, bill_id={self.bill_id}, product_id={self.product_id}, status='{self.status}')>"
