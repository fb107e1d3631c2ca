"""
Transaction Manager

Collects server-side JavaScript commands while a transaction is open and
runs them as one ArangoDB JavaScript transaction on commit. Each queued
command gets an id; commit() returns every command's result under its id.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from paradox.shared.exceptions import TransactionError

if TYPE_CHECKING:
    from paradox.toolbox.toolbox import Toolbox

logger = logging.getLogger("paradox.transaction_manager")


@dataclass
class TransactionCommand:
    """A JavaScript snippet queued on the active transaction."""

    id: str
    command: str
    action: str


class TransactionManager:
    """Buffers commands for one transaction at a time."""

    def __init__(self, toolbox: "Toolbox"):
        self._toolbox = toolbox
        self._active = False
        self._commands: list[TransactionCommand] = []
        self._read_collections: list[str] = []
        self._write_collections: list[str] = []

    # ─── Lifecycle ──────────────────────────────────────────

    def begin(self) -> None:
        """Start a transaction.

        Raises:
            TransactionError: If a transaction is already active.
        """
        if self._active:
            raise TransactionError("A transaction has already been started")
        self._reset()
        self._active = True
        logger.debug("Transaction started")

    def has_transaction(self) -> bool:
        return self._active

    def cancel(self) -> None:
        """Discard the active transaction and its queued commands."""
        if not self._active:
            raise TransactionError("There is no transaction to cancel")
        logger.debug("Transaction cancelled with %d queued command(s)", len(self._commands))
        self._reset()

    def _reset(self) -> None:
        self._active = False
        self._commands = []
        self._read_collections = []
        self._write_collections = []

    # ─── Building ───────────────────────────────────────────

    def add_read_collection(self, name: str) -> None:
        self._require_transaction()
        if name not in self._read_collections:
            self._read_collections.append(name)

    def add_write_collection(self, name: str) -> None:
        self._require_transaction()
        if name not in self._write_collections:
            self._write_collections.append(name)

    def add_command(self, command: str, action: str) -> str:
        """Queue a JavaScript snippet on the active transaction.

        Args:
            command: A JavaScript expression, evaluated inside the
                transaction with ``db`` bound to the current database.
            action: Label of the operation that queued the command.

        Returns:
            The id under which commit() reports the command's result.

        Raises:
            TransactionError: If no transaction is active.
        """
        self._require_transaction()
        command_id = str(len(self._commands))
        self._commands.append(TransactionCommand(command_id, command, action))
        logger.debug("Queued %s as command %s", action, command_id)
        return command_id

    @property
    def commands(self) -> list[TransactionCommand]:
        return list(self._commands)

    @property
    def read_collections(self) -> list[str]:
        return list(self._read_collections)

    @property
    def write_collections(self) -> list[str]:
        return list(self._write_collections)

    def build_script(self) -> str:
        """Return the JavaScript function that runs every queued command."""
        lines = ["function(){var db = require('internal').db; var result = {};"]
        for queued in self._commands:
            command = queued.command.rstrip()
            if not command.endswith(";"):
                command += ";"
            lines.append(f"result['{queued.id}'] = {command}")
        lines.append("return result;}")
        return "\n".join(lines)

    def _require_transaction(self) -> None:
        if not self._active:
            raise TransactionError("There is no active transaction")

    # ─── Commit ─────────────────────────────────────────────

    def commit(self) -> dict[str, Any]:
        """Run all queued commands as one server-side transaction.

        The transaction ends whether or not the commit succeeds.

        Returns:
            Dict mapping each command id to its result.

        Raises:
            TransactionError: If there is no active transaction, nothing
                was queued, or the server aborts the transaction.
        """
        if not self._active:
            raise TransactionError("There is no transaction to commit")
        if not self._commands:
            self._reset()
            raise TransactionError("There are no commands in the transaction to commit")

        settings = self._toolbox.settings
        script = self.build_script()
        commands = self._commands
        read, write = self._read_collections, self._write_collections
        self._reset()

        try:
            result = self._toolbox.connection.execute_transaction(
                command=script,
                read=read or None,
                write=write or None,
                sync=settings.transaction_wait_for_sync,
                timeout=settings.transaction_lock_timeout,
            )
        except Exception as exc:
            normalised = self._toolbox.normalise_driver_exception(exc)
            logger.error("Transaction failed (%s): %s", normalised["code"], normalised["message"])
            raise TransactionError(normalised["message"], normalised["code"]) from exc

        logger.info("Committed transaction with %d command(s)", len(commands))
        result = result or {}
        return {queued.id: result.get(queued.id) for queued in commands}
