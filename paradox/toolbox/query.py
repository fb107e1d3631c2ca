"""
Query helper

Sends AQL queries to the server and returns the response. When the
toolbox has an active transaction, queries are queued as server-side
JavaScript on the transaction manager instead of running immediately.
"""

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, NoReturn

from arango.cursor import Cursor

from paradox.pods.model import Model
from paradox.shared.exceptions import QueryError
from paradox.shared.models.aql import AQLStatement

if TYPE_CHECKING:
    from paradox.toolbox.toolbox import Toolbox

logger = logging.getLogger("paradox.query")

_GET_ALL_COMMAND = "db._createStatement({statement}).execute().toArray();"
_GET_ONE_COMMAND = (
    "function(){{var elements = db._createStatement({statement}).execute().toArray(); "
    "return elements[0] ? elements[0] : null}}();"
)


class Query:
    """Runs AQL through the toolbox's connection or its active transaction."""

    def __init__(self, toolbox: "Toolbox"):
        self._toolbox = toolbox

    # ─── Core helpers ─────────────────────────────────────

    def _in_transaction(self) -> bool:
        return self._toolbox.transaction_manager.has_transaction()

    def _queue(self, template: str, action: str, statement: AQLStatement) -> str:
        command = template.format(statement=statement.to_json())
        return self._toolbox.transaction_manager.add_command(command, action)

    def _raise_query_error(self, exc: Exception, query: str) -> NoReturn:
        normalised = self._toolbox.normalise_driver_exception(exc)
        logger.error("AQL query failed (%s): %s | query=%s",
                     normalised["code"], normalised["message"], query)
        raise QueryError(normalised["message"], normalised["code"]) from exc

    def _execute(self, statement: AQLStatement) -> Cursor:
        try:
            return self._toolbox.connection.aql.execute(
                statement.query,
                bind_vars=statement.bind_vars,
                batch_size=self._toolbox.settings.query_batch_size,
            )
        except Exception as exc:
            self._raise_query_error(exc, statement.query)

    def _fetch(self, statement: AQLStatement, read: Callable[[Cursor], Any]) -> Any:
        """Read rows from a fresh cursor, then release it on the server."""
        cursor = self._execute(statement)
        try:
            return read(cursor)
        except Exception as exc:
            self._raise_query_error(exc, statement.query)
        finally:
            cursor.close(ignore_missing=True)

    # ─── Public API ───────────────────────────────────────

    def get_all(self, query: str, parameters: dict[str, Any] | None = None) -> list[Any] | str:
        """Execute an AQL query and return all results.

        Args:
            query: The AQL query to run.
            parameters: Optional values to bind to the query.

        Returns:
            All rows, or an empty list if nothing is found. Inside a
            transaction, the id of the queued command instead; the rows are
            returned by ``TransactionManager.commit()`` under that id.

        Raises:
            QueryError: If the driver fails to run the query.
        """
        statement = AQLStatement(query=query, bind_vars=parameters or {})

        if self._in_transaction():
            return self._queue(_GET_ALL_COMMAND, "Query:getAll", statement)

        return self._fetch(statement, list)

    def get_one(self, query: str, parameters: dict[str, Any] | None = None) -> Any:
        """Execute an AQL query and return the first result.

        Args:
            query: The AQL query to run.
            parameters: Optional values to bind to the query.

        Returns:
            The first row, or None if nothing is found. Inside a
            transaction, the id of the queued command instead.

        Raises:
            QueryError: If the driver fails to run the query.
        """
        statement = AQLStatement(query=query, bind_vars=parameters or {})

        if self._in_transaction():
            return self._queue(_GET_ONE_COMMAND, "Query:getOne", statement)

        return self._fetch(statement, lambda cursor: next(iter(cursor), None))

    def explain(self, query: str, parameters: dict[str, Any] | None = None) -> Any:
        """Return the execution plan for a query. The query is not executed.

        Raises:
            QueryError: If the server rejects the query.
        """
        statement = AQLStatement(query=query, bind_vars=parameters or {})
        try:
            return self._toolbox.connection.aql.explain(
                statement.query, bind_vars=statement.bind_vars
            )
        except Exception as exc:
            self._raise_query_error(exc, query)

    def convert_to_pods(self, type: str, data: list[Any]) -> list[Model]:
        """Convert query results to models whose pods are marked as saved."""
        converted = self._toolbox.pod_manager.convert_to_pods(type, data)

        for model in converted:
            model.get_pod().set_saved()

        return converted
