"""
Ledger Repository - shared data access for orders and custom requests
"""
from typing import List, Optional

from sqlalchemy import asc, desc, update
from sqlalchemy.orm import Session

from flower_orders.lifecycle import OrderStatus, TERMINAL_STATUSES


class LedgerRepository:
    """
    Repository base for one ledger table

    Subclasses set ``model`` and ``deadline_column``.
    """

    model = None
    deadline_column = None

    def __init__(self, db: Session):
        self.db = db

    def _creation_order(self):
        return (asc(self.model.created_at), asc(self.model.id))

    def get_all(self) -> List:
        """Get all records in creation order"""
        return self.db.query(self.model).order_by(*self._creation_order()).all()

    def get_by_id(self, record_id: int) -> Optional[object]:
        """Get record by ID"""
        return self.db.query(self.model).filter(self.model.id == record_id).first()

    def get_by_user(self, user_id: str) -> List:
        """Get records owned by a user, in creation order"""
        return self.db.query(self.model).filter(
            self.model.user_id == user_id
        ).order_by(*self._creation_order()).all()

    def get_by_status(self, status: OrderStatus) -> List:
        """Get records with a status, in creation order"""
        return self.db.query(self.model).filter(
            self.model.status == OrderStatus(status).value
        ).order_by(*self._creation_order()).all()

    def get_active(self) -> List:
        """CONFIRMED records, most urgent deadline first"""
        deadline = getattr(self.model, self.deadline_column)
        return self.db.query(self.model).filter(
            self.model.status == OrderStatus.CONFIRMED.value
        ).order_by(asc(deadline), *self._creation_order()).all()

    def get_history(self, limit: int) -> List:
        """Terminal records, most recently closed first"""
        return self.db.query(self.model).filter(
            self.model.status.in_([s.value for s in TERMINAL_STATUSES])
        ).order_by(desc(self.model.updated_at), desc(self.model.id)).limit(limit).all()

    def count_by_status(self, status: OrderStatus) -> int:
        """Get count of records by status"""
        return self.db.query(self.model).filter(
            self.model.status == OrderStatus(status).value
        ).count()

    def create(self, data: dict):
        """
        Insert a new record

        Args:
            data: Dictionary with column values

        Returns:
            Created record
        """
        record = self.model(**data)
        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)
        return record

    def compare_and_set_status(self, record_id: int, expected: OrderStatus, values: dict) -> bool:
        """
        Apply ``values`` only if the record is still in ``expected`` status

        Does not commit; the caller owns the transaction.

        Returns:
            True if exactly one row was updated
        """
        result = self.db.execute(
            update(self.model)
            .where(self.model.id == record_id, self.model.status == OrderStatus(expected).value)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1

    def delete(self, record) -> None:
        """Hard-delete a record"""
        self.db.delete(record)
        self.db.commit()
