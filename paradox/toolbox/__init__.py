"""Toolbox — queries, transactions and pods over one ArangoDB connection."""

from paradox.toolbox.query import Query
from paradox.toolbox.toolbox import Toolbox
from paradox.toolbox.transaction_manager import TransactionManager

__all__ = [
    "Query",
    "Toolbox",
    "TransactionManager",
]
