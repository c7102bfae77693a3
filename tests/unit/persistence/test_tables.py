"""Unit tests for the invite table definitions."""

from sqlalchemy import CheckConstraint

from tablesplit.persistence.tables import invite_audit_log_table, invites_table


def _ondelete(table, column: str) -> str | None:
    (fk,) = table.c[column].foreign_keys
    return fk.ondelete


class TestInvitesTable:
    """Invite rows outlive the users and groups they reference."""

    def test_foreign_keys_never_delete_or_null_invites(self):
        for column in ("invited_by", "group_id", "accepted_by"):
            assert _ondelete(invites_table, column) == "RESTRICT", column

    def test_audit_rows_are_retained_with_their_invite(self):
        assert _ondelete(invite_audit_log_table, "invite_id") == "RESTRICT"

    def test_accepted_check_covers_both_fields(self):
        checks = {
            c.name: str(c.sqltext)
            for c in invites_table.constraints
            if isinstance(c, CheckConstraint)
        }

        sql = checks["ck_invites_accepted_fields"]
        assert "accepted_at IS NOT NULL" in sql
        assert "accepted_by IS NOT NULL" in sql
