"""Unit tests for the invitation consume statement."""

from datetime import datetime, timezone

from sqlalchemy.dialects import postgresql

from gate.domain.value import InvitationCode
from gate.persistence.repository.invitation import mark_used_statement

NOW = datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def compile_statement():
    stmt = mark_used_statement(InvitationCode("abc123"), "a@x.com", NOW)
    return stmt.compile(dialect=postgresql.dialect())


class TestMarkUsedStatement:
    """Tests for the single conditional UPDATE behind mark_used."""

    def test_is_single_update_returning_id(self):
        sql = str(compile_statement())

        assert sql.startswith("UPDATE invitation_codes SET used=")
        assert sql.rstrip().endswith("RETURNING invitation_codes.id")

    def test_where_clause_rechecks_every_condition(self):
        sql = str(compile_statement())
        where = sql.split(" WHERE ", 1)[1]

        assert "invitation_codes.code = " in where
        assert "invitation_codes.email = " in where
        assert "invitation_codes.used IS false" in where
        assert "invitation_codes.expires_at > " in where

    def test_binds_code_email_and_instant(self):
        params = compile_statement().params

        assert params["used"] is True
        values = list(params.values())
        assert "abc123" in values
        assert "a@x.com" in values
        assert NOW in values
