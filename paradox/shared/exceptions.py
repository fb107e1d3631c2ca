"""
Custom exception hierarchy for the ODM.

All Paradox errors inherit from ParadoxError so they can be caught
uniformly by application code, whichever component raised them.
"""


class ParadoxError(Exception):
    """Base exception for all Paradox errors."""

    def __init__(self, message: str, code: int = 0, component: str = "unknown"):
        self.message = message
        self.code = code
        self.component = component
        super().__init__(f"[{component}] {message}")


class QueryError(ParadoxError):
    """Errors raised while running or explaining an AQL query."""

    def __init__(self, message: str, code: int = 0):
        super().__init__(message, code, component="query")


class TransactionError(ParadoxError):
    """Errors raised by the transaction manager."""

    def __init__(self, message: str, code: int = 0):
        super().__init__(message, code, component="transaction")


class PodError(ParadoxError):
    """Errors raised while loading or converting pods."""

    def __init__(self, message: str, code: int = 0):
        super().__init__(message, code, component="pod")


class DatabaseConnectionError(ParadoxError):
    """Failed to connect to ArangoDB."""

    def __init__(self, message: str, code: int = 0):
        super().__init__(message, code, component="database")
