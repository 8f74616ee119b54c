"""Tests for PostgreSQL error message extraction."""

import psycopg2

from cipher_sql.execution.infrastructure.postgres_executor import error_message


class TestErrorMessage:
    def test_client_side_error_uses_its_text(self) -> None:
        exc = psycopg2.OperationalError("could not connect to server\n")

        assert error_message(exc) == "could not connect to server"

    def test_error_without_server_diagnostics(self) -> None:
        exc = psycopg2.InterfaceError("connection already closed")

        assert error_message(exc) == "connection already closed"
