"""
Deadline Calculator
"""
from datetime import datetime, timedelta


def compute_deadline(base: datetime, duration_hours: float) -> datetime:
    """Expected completion instant: base + duration_hours hours"""
    if duration_hours < 0:
        raise ValueError(f"duration_hours must be non-negative, got {duration_hours}")
    return base + timedelta(hours=duration_hours)


def time_remaining_label(deadline: datetime, now: datetime) -> str:
    """
    Human label for the time left until a deadline

    Derived on every read from the stored deadline; never persisted.
    """
    remaining = deadline - now
    if remaining <= timedelta(0):
        return "Overdue!"
    total_minutes = int(remaining.total_seconds() // 60)
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours}h {minutes}m left"
