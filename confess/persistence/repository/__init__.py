"""PostgreSQL repository implementations."""

from confess.persistence.repository.confession import PostgresConfessionRepository

__all__ = [
    "PostgresConfessionRepository",
]
