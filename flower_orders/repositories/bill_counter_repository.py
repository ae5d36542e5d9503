"""
Bill Counter Repository - keyed atomic counter
"""
from typing import Optional

from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.orm import Session

from flower_orders.models.bill_counter import BillCounter

_UPSERT_INSERTS = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}


class BillCounterRepository:
    """Repository for per-day bill sequence counters"""

    def __init__(self, db: Session):
        self.db = db

    def increment(self, day_key: str) -> int:
        """
        Atomically bump the counter for ``day_key`` and return the new value

        A single INSERT ... ON CONFLICT DO UPDATE ... RETURNING statement, so
        two racing callers always get distinct consecutive values. Does not
        commit: the increment belongs to the caller's transaction and is
        undone if that transaction rolls back.
        """
        dialect = self.db.get_bind().dialect.name
        insert = _UPSERT_INSERTS.get(dialect)
        if insert is None:
            raise RuntimeError(f"Bill counters are not supported on {dialect}")

        stmt = insert(BillCounter).values(day_key=day_key, last_seq=1)
        stmt = stmt.on_conflict_do_update(
            index_elements=[BillCounter.day_key],
            set_={"last_seq": BillCounter.last_seq + 1},
        ).returning(BillCounter.last_seq)
        return self.db.execute(stmt).scalar_one()

    def get_last_seq(self, day_key: str) -> Optional[int]:
        """Last issued sequence number for a day, None if nothing issued"""
        counter = self.db.query(BillCounter).filter(BillCounter.day_key == day_key).first()
        return counter.last_seq if counter else None
