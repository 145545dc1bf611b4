"""Capability checks for mutating operations.

The caller's capabilities are resolved once at the HTTP boundary and passed
explicitly; nothing here reads request state.
"""

import hmac
from dataclasses import dataclass


class PermissionDenied(Exception):
    """The caller lacks the capability required for the operation."""

    def __init__(self, messages):
        self.messages = messages
        super().__init__(messages)


@dataclass(frozen=True)
class Actor:
    is_admin: bool = False


GUEST = Actor(is_admin=False)
ADMIN = Actor(is_admin=True)


def actor_from_token(presented: str | None, admin_token: str | None) -> Actor:
    """Resolve an actor from the ``X-Admin-Token`` header value."""
    if not presented or not admin_token:
        return GUEST
    if hmac.compare_digest(presented.encode(), admin_token.encode()):
        return ADMIN
    return GUEST


def require_admin(actor: Actor) -> None:
    if not actor.is_admin:
        raise PermissionDenied({"_entity": ["Administrator access is required"]})
