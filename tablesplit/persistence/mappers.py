"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
instead of through an ORM.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from tablesplit.domain.model import Group, Invite, InviteAuditEntry, User
from tablesplit.domain.value import (
    AuditAction,
    AuditEntryId,
    EmailAddress,
    ExpenseId,
    GroupId,
    InviteId,
    InviteStatus,
    TokenFingerprint,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> Optional[UUID]:
    return _uuid(value) if value is not None else None


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(_uuid(row["id"])),
        email=EmailAddress(row["email"]),
        name=row["name"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return {
        "id": user.id,
        "email": user.email.root,
        "name": user.name,
        "created_at": user.created_at,
    }


def row_to_group(row: Dict[str, Any]) -> Group:
    """Convert database row to Group domain model."""
    return Group(
        id=GroupId(_uuid(row["id"])),
        name=row["name"],
        created_by=UserId(_uuid(row["created_by"])),
        created_at=row["created_at"],
    )


def group_to_dict(group: Group) -> Dict[str, Any]:
    """Convert Group domain model to database dict."""
    return group.model_dump()


def row_to_invite(row: Dict[str, Any]) -> Invite:
    """Convert database row to Invite domain model.

    Args:
        row: Database row as dict

    Returns:
        Invite domain model
    """
    expense_id = _optional_uuid(row.get("expense_id"))
    accepted_by = _optional_uuid(row.get("accepted_by"))
    return Invite(
        id=InviteId(_uuid(row["id"])),
        email=EmailAddress(row["email"]),
        invited_by=UserId(_uuid(row["invited_by"])),
        group_id=GroupId(_uuid(row["group_id"])),
        expense_id=ExpenseId(expense_id) if expense_id else None,
        token_fingerprint=TokenFingerprint(row["token_fingerprint"]),
        status=InviteStatus(row["status"]),
        created_at=row["created_at"],
        expires_at=row["expires_at"],
        accepted_at=row.get("accepted_at"),
        accepted_by=UserId(accepted_by) if accepted_by else None,
    )


def invite_to_dict(invite: Invite) -> Dict[str, Any]:
    """Convert Invite domain model to database dict.

    Args:
        invite: Invite domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": invite.id,
        "email": invite.email.root,
        "invited_by": invite.invited_by,
        "group_id": invite.group_id,
        "expense_id": invite.expense_id,
        "token_fingerprint": invite.token_fingerprint.root,
        "status": invite.status.value,
        "created_at": invite.created_at,
        "expires_at": invite.expires_at,
        "accepted_at": invite.accepted_at,
        "accepted_by": invite.accepted_by,
    }


def row_to_audit_entry(row: Dict[str, Any]) -> InviteAuditEntry:
    """Convert database row to InviteAuditEntry domain model."""
    performed_by = _optional_uuid(row.get("performed_by"))
    return InviteAuditEntry(
        id=AuditEntryId(_uuid(row["id"])),
        invite_id=InviteId(_uuid(row["invite_id"])),
        action=AuditAction(row["action"]),
        performed_by=UserId(performed_by) if performed_by else None,
        metadata=row.get("metadata") or {},
        created_at=row["created_at"],
    )


def audit_entry_to_dict(entry: InviteAuditEntry) -> Dict[str, Any]:
    """Convert InviteAuditEntry domain model to database dict."""
    return {
        "id": entry.id,
        "invite_id": entry.invite_id,
        "action": entry.action.value,
        "performed_by": entry.performed_by,
        "metadata": entry.metadata,
        "created_at": entry.created_at,
    }
