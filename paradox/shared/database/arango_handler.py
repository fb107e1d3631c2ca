"""
ArangoDB Connection Handler

Centralised python-arango client management.
Reads credentials from settings or environment variables and exposes the
driver database object shared by the toolbox (queries, transactions, pods).
"""

import os
import logging

from arango import ArangoClient
from arango.database import StandardDatabase
from arango.exceptions import ArangoError
from dotenv import load_dotenv

from paradox.shared.config import ParadoxSettings
from paradox.shared.exceptions import DatabaseConnectionError

load_dotenv()

logger = logging.getLogger("paradox.arango_handler")


class ArangoHandler:
    """
    Manages a single python-arango client and database handle.

    Usage
    -----
    handler = ArangoHandler()          # reads from .env
    handler.connect()
    rows = list(handler.db.aql.execute("FOR d IN users RETURN d"))
    handler.close()

    The handler can also be used as a context-manager:

        with ArangoHandler() as handler:
            handler.db.aql.execute(...)
    """

    def __init__(
        self,
        hosts: str | None = None,
        username: str | None = None,
        password: str | None = None,
        database: str | None = None,
    ):
        self._hosts = hosts or os.getenv("ARANGO_HOSTS")
        self._username = username or os.getenv("ARANGO_USERNAME", "root")
        self._password = password if password is not None else os.getenv("ARANGO_PASSWORD", "")
        self._database = database or os.getenv("ARANGO_DATABASE", "_system")
        self._client: ArangoClient | None = None
        self._db: StandardDatabase | None = None

        if not self._hosts:
            raise ValueError("ARANGO_HOSTS is not set (env or argument)")

    @classmethod
    def from_settings(cls, settings: ParadoxSettings) -> "ArangoHandler":
        """Build a handler from a ParadoxSettings instance."""
        return cls(
            hosts=settings.arango_hosts,
            username=settings.arango_username,
            password=settings.arango_password,
            database=settings.arango_database,
        )

    # ─── Lifecycle ──────────────────────────────────────────

    def connect(self) -> "ArangoHandler":
        """Create the client, select the database and verify connectivity.

        Returns:
            Self for method chaining.

        Raises:
            DatabaseConnectionError: If the server cannot be reached or the
                credentials are rejected.
        """
        if self._db is not None:
            return self

        self._client = ArangoClient(hosts=self._hosts)
        try:
            self._db = self._client.db(
                self._database,
                username=self._username,
                password=self._password,
                verify=True,
            )
            logger.info("Connected to ArangoDB at %s (db=%s)", self._hosts, self._database)
        except ArangoError as exc:
            logger.error("Failed to connect to ArangoDB at %s", self._hosts)
            self._client.close()
            self._client = None
            raise DatabaseConnectionError(str(exc)) from exc
        return self

    def close(self) -> None:
        """Close the underlying HTTP session."""
        if self._client:
            self._client.close()
            self._client = None
            self._db = None
            logger.info("ArangoDB connection closed")

    def __enter__(self) -> "ArangoHandler":
        return self.connect()

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # ─── Properties ─────────────────────────────────────────

    @property
    def db(self) -> StandardDatabase:
        """Return the driver database object.

        Raises:
            RuntimeError: If handler is not connected (call connect() first).
        """
        if self._db is None:
            raise RuntimeError("ArangoHandler is not connected, call connect() first")
        return self._db

    @property
    def database(self) -> str:
        """Return the configured database name."""
        return self._database

    @property
    def hosts(self) -> str:
        """Return the configured ArangoDB host(s)."""
        return self._hosts

    @property
    def username(self) -> str:
        """Return the configured ArangoDB username."""
        return self._username
