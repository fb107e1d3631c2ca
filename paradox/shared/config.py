"""
Base configuration for Paradox.

Uses Pydantic Settings for environment-based configuration.
Values are read from the environment or a local .env file.
"""

from pydantic_settings import BaseSettings


class ParadoxSettings(BaseSettings):
    """Connection and behaviour settings for a Paradox toolbox."""

    # ArangoDB connection
    arango_hosts: str = "http://127.0.0.1:8529"
    arango_username: str = "root"
    arango_password: str = ""
    arango_database: str = "_system"

    # Queries
    query_batch_size: int = 1000

    # Transactions
    transaction_wait_for_sync: bool = False
    transaction_lock_timeout: int | None = None

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"
