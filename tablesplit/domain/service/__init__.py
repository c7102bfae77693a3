"""Domain services."""

from .base import Service
from .invite_service import InviteService, IssuedInvite
from .jwt_service import JWTService
from .membership import GroupMembershipApplier, MembershipApplier
from .notification import NotificationDispatcher, NotificationError
from .token_codec import TokenCodec

__all__ = [
    "GroupMembershipApplier",
    "InviteService",
    "IssuedInvite",
    "JWTService",
    "MembershipApplier",
    "NotificationDispatcher",
    "NotificationError",
    "Service",
    "TokenCodec",
]
