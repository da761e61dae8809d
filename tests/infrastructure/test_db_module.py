"""Tests for the infrastructure.db module."""

from unittest.mock import MagicMock

import pytest

from src.infrastructure import db as db_module


def test_get_env_var_reads_environment(monkeypatch):
    """_get_env_var should load .env and return the requested value."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("STORE_DB_URL", "postgresql://example")

    assert db_module._get_env_var("STORE_DB_URL") == "postgresql://example"


def test_get_env_var_raises_when_missing(monkeypatch):
    """Missing env vars should raise a RuntimeError."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.delenv("STORE_DB_URL", raising=False)

    with pytest.raises(RuntimeError, match="STORE_DB_URL"):
        db_module._get_env_var("STORE_DB_URL")


@pytest.mark.parametrize(
    ("overrides", "pool_size", "max_overflow"),
    [({}, 5, 5), ({"pool_size": 2, "max_overflow": 0}, 2, 0)],
)
def test_create_engine_configures_checked_pool(
    monkeypatch,
    overrides,
    pool_size,
    max_overflow,
):
    """Engines use a QueuePool that pings connections before use."""
    calls = []
    monkeypatch.setattr(
        db_module,
        "create_engine",
        lambda url, **kwargs: calls.append((url, kwargs)) or "engine",
    )

    assert db_module._create_engine("postgresql://store", **overrides) == (
        "engine"
    )
    assert calls == [
        (
            "postgresql://store",
            {
                "poolclass": db_module.QueuePool,
                "pool_size": pool_size,
                "max_overflow": max_overflow,
                "pool_pre_ping": True,
                "future": True,
            },
        )
    ]


def test_get_store_engine_caches_engine(monkeypatch):
    """get_store_engine should memoize the created engine."""
    monkeypatch.setattr(db_module, "_store_engine", None)
    created = []

    def fake_create_engine(url):
        created.append(url)
        return f"engine:{url}"

    monkeypatch.setattr(db_module, "_create_engine", fake_create_engine)
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("STORE_DB_URL", "postgresql://store")

    engine_one = db_module.get_store_engine()
    engine_two = db_module.get_store_engine()

    assert engine_one is engine_two
    assert engine_one == "engine:postgresql://store"
    assert created == ["postgresql://store"]


def test_adapter_returns_underlying_engine(monkeypatch):
    """SqlAlchemyDatabaseEngineAdapter should proxy the global helper."""
    monkeypatch.setattr(db_module, "get_store_engine", lambda: "store_engine")

    adapter = db_module.SqlAlchemyDatabaseEngineAdapter()

    assert adapter.get_store_engine() == "store_engine"


def test_dispose_store_engine_closes_pool(monkeypatch):
    """dispose_store_engine should dispose and drop the cached engine."""
    engine = MagicMock()
    monkeypatch.setattr(db_module, "_store_engine", engine)

    db_module.dispose_store_engine()

    engine.dispose.assert_called_once_with()
    assert db_module._store_engine is None


def test_dispose_store_engine_without_engine_is_noop(monkeypatch):
    """Disposing before first use should do nothing."""
    monkeypatch.setattr(db_module, "_store_engine", None)

    db_module.dispose_store_engine()

    assert db_module._store_engine is None
