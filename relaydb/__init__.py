"""SQLite data access layer for relay close counters, with retention sweeping and buffer utilities."""

__version__ = "0.1.0"

__all__ = [
    "buffers",
    "dal",
    "deleter",
    "dsn",
    "errors",
    "options",
    "pool",
    "reconnect",
    "relay_count",
    "schema",
    "unpack",
]