"""Database configuration and connection helpers."""

from __future__ import annotations

from dataclasses import dataclass, field

from bson import ObjectId
from pymongo import MongoClient
from pymongo.database import Database

DEFAULT_TIMEOUT = 5.0
DEV_TIMEOUT = 1000.0


@dataclass
class DatabaseConfig:
    """Location of one MongoDB database."""

    host: str = "localhost"
    port: int = 27017
    database: str = "nutrix"


@dataclass
class Config:
    """Application configuration relevant to persistence."""

    databases: list[DatabaseConfig] = field(default_factory=list)
    env: str = ""

    @property
    def primary(self) -> DatabaseConfig:
        """The database every service works against."""
        if not self.databases:
            raise ValueError("no database configured")
        return self.databases[0]

    def mongo_uri(self) -> str:
        """Connection URI of the primary database server."""
        db = self.primary
        return f"mongodb://{db.host}:{db.port}"

    def timeout(self) -> float:
        """Operation deadline in seconds; generous in development."""
        return DEV_TIMEOUT if self.env == "dev" else DEFAULT_TIMEOUT


def connect(config: Config) -> Database:
    """Return a handle on the configured database; connects lazily."""
    client: MongoClient = MongoClient(
        config.mongo_uri(),
        serverSelectionTimeoutMS=int(config.timeout() * 1000),
        connect=False,
    )
    return client[config.primary.database]


def new_object_id() -> str:
    """A fresh ObjectId as a 24-character hex string."""
    return str(ObjectId())