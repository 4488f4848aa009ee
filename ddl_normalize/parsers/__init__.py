"""SQL readers producing Table values."""

from ddl_normalize.parsers.mysql import MySQLParser

__all__ = ["MySQLParser"]
