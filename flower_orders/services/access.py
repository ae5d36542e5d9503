"""
Role checks at the service boundary
"""
from flower_orders.lifecycle import Role
from flower_orders.services.exceptions import AuthorizationError


def require_admin(role: Role, action: str) -> None:
    if Role(role) != Role.ADMIN:
        raise AuthorizationError(f"Only the admin may {action}")


def require_owner_or_admin(caller_id: str, role: Role, owner_id: str) -> None:
    if Role(role) != Role.ADMIN and caller_id != owner_id:
        raise AuthorizationError("You can only view your own orders")
