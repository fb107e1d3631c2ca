"""
Toolbox — the object every Paradox helper is built around.

Holds the driver database and lazily creates the query helper, the
transaction manager and the pod manager so they share one connection
and one transaction state.
"""

import logging
from typing import Any

from arango.database import StandardDatabase
from arango.exceptions import ArangoClientError, ArangoServerError

from paradox.pods.pod_manager import PodManager
from paradox.shared.config import ParadoxSettings
from paradox.shared.database import ArangoHandler
from paradox.toolbox.query import Query
from paradox.toolbox.transaction_manager import TransactionManager

logger = logging.getLogger("paradox.toolbox")


class Toolbox:
    """Entry point to queries, transactions and pods over one database."""

    def __init__(
        self,
        connection: StandardDatabase,
        settings: ParadoxSettings | None = None,
        handler: ArangoHandler | None = None,
    ):
        self._connection = connection
        self._settings = settings or ParadoxSettings()
        self._handler = handler
        self._query: Query | None = None
        self._transaction_manager: TransactionManager | None = None
        self._pod_manager: PodManager | None = None

    @classmethod
    def from_settings(cls, settings: ParadoxSettings | None = None) -> "Toolbox":
        """Connect with the given (or environment) settings and build a toolbox."""
        settings = settings or ParadoxSettings()
        handler = ArangoHandler.from_settings(settings).connect()
        return cls(handler.db, settings=settings, handler=handler)

    def close(self) -> None:
        """Close the connection if this toolbox opened it."""
        if self._handler is not None:
            self._handler.close()

    def __enter__(self) -> "Toolbox":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # ─── Collaborators ──────────────────────────────────────

    @property
    def connection(self) -> StandardDatabase:
        return self._connection

    @property
    def settings(self) -> ParadoxSettings:
        return self._settings

    @property
    def query(self) -> Query:
        if self._query is None:
            self._query = Query(self)
        return self._query

    @property
    def transaction_manager(self) -> TransactionManager:
        if self._transaction_manager is None:
            self._transaction_manager = TransactionManager(self)
        return self._transaction_manager

    @property
    def pod_manager(self) -> PodManager:
        if self._pod_manager is None:
            self._pod_manager = PodManager(self)
        return self._pod_manager

    # ─── Errors ─────────────────────────────────────────────

    def normalise_driver_exception(self, exc: Exception) -> dict[str, Any]:
        """Reduce any driver exception to a message and a numeric code.

        Server errors keep ArangoDB's own ``errorMessage`` and ``errorNum``
        rather than the driver's decorated message.

        Returns:
            Dict with 'message' (str) and 'code' (int).
        """
        if isinstance(exc, ArangoServerError):
            message = exc.error_message or exc.message
            code = exc.error_code if exc.error_code is not None else exc.http_code
            return {"message": message, "code": code or 0}

        if isinstance(exc, ArangoClientError):
            return {"message": exc.message, "code": 0}

        code = getattr(exc, "code", 0)
        return {"message": str(exc), "code": code if isinstance(code, int) else 0}
