"""
Unit tests for the TransactionManager.

The python-arango database is mocked; no server is needed.
"""

import pytest
from unittest.mock import MagicMock

from arango.exceptions import TransactionExecuteError

from paradox.shared.config import ParadoxSettings
from paradox.shared.exceptions import TransactionError
from paradox.toolbox import Toolbox


@pytest.fixture
def db():
    return MagicMock()


@pytest.fixture
def manager(db):
    settings = ParadoxSettings(transaction_wait_for_sync=True, transaction_lock_timeout=5)
    return Toolbox(db, settings=settings).transaction_manager


class TestLifecycle:

    def test_begin_and_cancel(self, manager):
        assert manager.has_transaction() is False

        manager.begin()
        assert manager.has_transaction() is True

        manager.add_command("1 + 1;", "Test:add")
        manager.cancel()
        assert manager.has_transaction() is False
        assert manager.commands == []

    def test_begin_twice_raises(self, manager):
        manager.begin()

        with pytest.raises(TransactionError, match="already been started"):
            manager.begin()

    def test_cancel_without_transaction_raises(self, manager):
        with pytest.raises(TransactionError):
            manager.cancel()

    def test_add_command_without_transaction_raises(self, manager):
        with pytest.raises(TransactionError, match="no active transaction"):
            manager.add_command("1;", "Test:add")

    def test_command_ids_are_unique(self, manager):
        manager.begin()

        ids = [manager.add_command(f"{i};", "Test:add") for i in range(3)]

        assert ids == ["0", "1", "2"]

    def test_collections_are_deduplicated(self, manager):
        manager.begin()
        manager.add_read_collection("users")
        manager.add_read_collection("users")
        manager.add_write_collection("orders")
        manager.add_write_collection("users")

        assert manager.read_collections == ["users"]
        assert manager.write_collections == ["orders", "users"]


class TestBuildScript:

    def test_script_assigns_each_command(self, manager):
        manager.begin()
        manager.add_command("db.users.count();", "Test:count")
        manager.add_command("db.orders.count()", "Test:count")

        script = manager.build_script()

        assert script == (
            "function(){var db = require('internal').db; var result = {};\n"
            "result['0'] = db.users.count();\n"
            "result['1'] = db.orders.count();\n"
            "return result;}"
        )


class TestCommit:

    def test_commit_runs_one_transaction(self, manager, db):
        manager.begin()
        manager.add_read_collection("users")
        manager.add_write_collection("orders")
        first = manager.add_command("db.users.count();", "Test:count")
        second = manager.add_command("db.orders.count();", "Test:count")
        db.execute_transaction.return_value = {first: 3, second: 7}

        results = manager.commit()

        assert results == {first: 3, second: 7}
        db.execute_transaction.assert_called_once()
        kwargs = db.execute_transaction.call_args.kwargs
        assert "result['0'] = db.users.count();" in kwargs["command"]
        assert "result['1'] = db.orders.count();" in kwargs["command"]
        assert kwargs["read"] == ["users"]
        assert kwargs["write"] == ["orders"]
        assert kwargs["sync"] is True
        assert kwargs["timeout"] == 5
        assert manager.has_transaction() is False

    def test_missing_results_are_none(self, manager, db):
        manager.begin()
        command_id = manager.add_command("undefined;", "Test:undefined")
        db.execute_transaction.return_value = {}

        assert manager.commit() == {command_id: None}

    def test_no_collections_passes_none(self, manager, db):
        manager.begin()
        manager.add_command("1;", "Test:one")
        db.execute_transaction.return_value = {"0": 1}

        manager.commit()

        kwargs = db.execute_transaction.call_args.kwargs
        assert kwargs["read"] is None
        assert kwargs["write"] is None

    def test_commit_without_transaction_raises(self, manager, db):
        with pytest.raises(TransactionError, match="no transaction to commit"):
            manager.commit()
        db.execute_transaction.assert_not_called()

    def test_commit_without_commands_raises_and_ends(self, manager, db):
        manager.begin()

        with pytest.raises(TransactionError, match="no commands"):
            manager.commit()

        assert manager.has_transaction() is False
        db.execute_transaction.assert_not_called()

    def test_driver_failure_becomes_transaction_error(self, manager, db):
        resp = MagicMock()
        resp.error_message = "unique constraint violated"
        resp.error_code = 1210
        resp.status_code = 409
        db.execute_transaction.side_effect = TransactionExecuteError(resp, MagicMock())
        manager.begin()
        manager.add_command("db.users.save({_key: 'a'});", "Test:save")

        with pytest.raises(TransactionError) as excinfo:
            manager.commit()

        assert excinfo.value.message == "unique constraint violated"
        assert excinfo.value.code == 1210
        assert manager.has_transaction() is False
        assert manager.commands == []
