"""
Domain errors raised by the ledgers, the query facade and settings

All of them are expected, recoverable conditions. The API layer maps them
to HTTP responses; nothing here is retried.
"""


class OrderDeskError(Exception):
    """Base exception for lifecycle errors"""
    status_code = 400


class ValidationError(OrderDeskError):
    """Missing or malformed input"""
    status_code = 422


class NotFoundError(OrderDeskError):
    """Unknown record, product or user"""
    status_code = 404


class InvalidTransitionError(OrderDeskError):
    """Requested status is not reachable from the current one"""
    status_code = 409

    def __init__(self, entity: str, record_id, current, requested):
        self.entity = entity
        self.record_id = record_id
        self.current = current
        self.requested = requested
        super().__init__(
            f"{entity} {record_id} cannot move from {_value(current)} to {_value(requested)}"
        )


class InvalidStateError(OrderDeskError):
    """Operation not permitted in the record's current status"""
    status_code = 409


class AuthorizationError(OrderDeskError):
    """Caller's role does not allow the operation"""
    status_code = 403


def _value(status) -> str:
    return getattr(status, "value", status)
