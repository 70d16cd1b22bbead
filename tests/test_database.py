import string

import pytest

from nutrix.database import (
    DEFAULT_TIMEOUT,
    DEV_TIMEOUT,
    Config,
    DatabaseConfig,
    connect,
    new_object_id,
)


def test_mongo_uri_uses_first_database():
    config = Config(
        databases=[
            DatabaseConfig(host="db.local", port=27018, database="pos"),
            DatabaseConfig(host="other", port=1, database="x"),
        ]
    )
    assert config.mongo_uri() == "mongodb://db.local:27018"


def test_timeout_depends_on_env():
    assert Config(env="dev").timeout() == DEV_TIMEOUT
    assert Config(env="prod").timeout() == DEFAULT_TIMEOUT
    assert DEV_TIMEOUT == 1000.0
    assert DEFAULT_TIMEOUT == 5.0


def test_missing_database_raises():
    with pytest.raises(ValueError):
        Config().mongo_uri()


def test_new_object_id_is_hex_and_unique():
    first = new_object_id()
    second = new_object_id()
    assert len(first) == 24
    assert set(first) <= set(string.hexdigits)
    assert first != second


def test_connect_returns_named_database():
    config = Config(databases=[DatabaseConfig(database="pos")])
    db = connect(config)
    try:
        assert db.name == "pos"
    finally:
        db.client.close()