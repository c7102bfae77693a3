"""Domain model entities for TableSplit invitations."""

from tablesplit.domain.model.audit import InviteAuditEntry
from tablesplit.domain.model.group import Group
from tablesplit.domain.model.invite import INVITE_VALIDITY, Invite
from tablesplit.domain.model.user import User

__all__ = [
    "Group",
    "INVITE_VALIDITY",
    "Invite",
    "InviteAuditEntry",
    "User",
]
