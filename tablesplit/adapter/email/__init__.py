"""Invite email adapter."""

from .dispatcher import (
    HttpEmailNotificationDispatcher,
    InviteEmail,
    MockNotificationDispatcher,
    build_join_link,
    render_invite_email,
)

__all__ = [
    "HttpEmailNotificationDispatcher",
    "InviteEmail",
    "MockNotificationDispatcher",
    "build_join_link",
    "render_invite_email",
]
