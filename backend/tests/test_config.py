"""Tests for Settings validation and the engine options derived from it."""

import pytest
from pydantic import ValidationError
from sqlalchemy.pool import StaticPool

from bookstore.config import DEFAULT_JWT_SECRET, Settings
from bookstore.database import _engine_options


class TestSettings:

    def test_log_level_is_normalised(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD")

    def test_asymmetric_algorithm_rejected(self):
        with pytest.raises(ValidationError):
            Settings(jwt_algorithm="RS256")

    def test_cors_origins_split(self):
        settings = Settings(cors_origins="http://a.test, http://b.test,,")

        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]

    @pytest.mark.parametrize("secret", [DEFAULT_JWT_SECRET, "", "short"])
    def test_weak_jwt_secret_reported(self, secret):
        with pytest.raises(ValueError, match="JWT_SECRET"):
            Settings(jwt_secret=secret).validate_required_for_production()

    def test_strong_jwt_secret_passes(self):
        Settings(jwt_secret="x" * 32).validate_required_for_production()


class TestEngineOptions:

    def test_in_memory_sqlite_uses_static_pool(self):
        options = _engine_options("sqlite+aiosqlite://")

        assert options["poolclass"] is StaticPool
        assert "pool_size" not in options

    def test_file_sqlite_skips_pool_sizing(self):
        options = _engine_options("sqlite+aiosqlite:///./bookstore.db")

        assert "pool_size" not in options
        assert "poolclass" not in options

    def test_postgres_gets_pool_sizing(self):
        options = _engine_options("postgresql+asyncpg://u:p@db:5432/bookstore")

        assert options["pool_size"] >= 5
        assert options["pool_pre_ping"] is True
