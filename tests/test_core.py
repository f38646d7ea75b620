"""
Tests for settings, database URL handling and the app shell.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from core import db, schema, settings
from main import app


class TestSettings:
    def test_env_int_falls_back_on_garbage(self, monkeypatch):
        monkeypatch.setenv("BIRDBOOK_TEST_INT", "many")
        assert settings.env_int("BIRDBOOK_TEST_INT", 7) == 7

    def test_env_bool(self, monkeypatch):
        monkeypatch.setenv("BIRDBOOK_TEST_BOOL", "off")
        assert settings.env_bool("BIRDBOOK_TEST_BOOL", True) is False
        monkeypatch.setenv("BIRDBOOK_TEST_BOOL", "maybe")
        assert settings.env_bool("BIRDBOOK_TEST_BOOL", True) is True

    def test_env_list(self, monkeypatch):
        monkeypatch.setenv("BIRDBOOK_TEST_LIST", "http://a, ,http://b")
        assert settings.env_list("BIRDBOOK_TEST_LIST", []) == ["http://a", "http://b"]


class TestDatabaseUrl:
    def test_strips_sslmode(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db:5432/birdbook?sslmode=require&application_name=bb")
        assert db.database_url() == "postgresql://u:p@db:5432/birdbook?application_name=bb"

    def test_missing_url(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        with pytest.raises(RuntimeError, match="DATABASE_URL"):
            db.database_url()

    def test_pool_required(self):
        with pytest.raises(RuntimeError, match="not initialized"):
            db.pool()

    @pytest.mark.asyncio
    async def test_transaction_wraps_one_connection(self, monkeypatch):
        conn = MagicMock()
        fake_pool = MagicMock()
        fake_pool.acquire.return_value.__aenter__.return_value = conn
        monkeypatch.setattr(db, "_pool", fake_pool)

        async with db.transaction() as acquired:
            assert acquired is conn

        conn.transaction.assert_called_once_with()
        conn.transaction.return_value.__aexit__.assert_awaited_once()
        fake_pool.acquire.return_value.__aexit__.assert_awaited_once()


class TestSchema:
    @pytest.mark.asyncio
    async def test_runs_every_statement(self):
        with patch("core.db.execute", new=AsyncMock()) as execute:
            await schema.ensure_schema()

        assert execute.await_count == len(schema.SCHEMA_STATEMENTS)
        ddl = " ".join(call.args[0] for call in execute.await_args_list)
        assert "REFERENCES posts(id) ON DELETE CASCADE" in ddl


class TestAppShell:
    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}

    def test_unhandled_error_is_500(self, current_user):
        client = TestClient(app, raise_server_exceptions=False)
        with patch("posts.repository.list_posts", new=AsyncMock(side_effect=RuntimeError("db down"))):
            response = client.get("/api/main/feed")

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}
