"""ddl-normalize: Canonicalize MySQL table schemas for structural comparison."""

from ddl_normalize.charset import default_collation
from ddl_normalize.models import (
    Column,
    ColumnType,
    Index,
    IndexColumn,
    IndexKind,
    IndexType,
    NullState,
    TableOption,
)
from ddl_normalize.table import Table

__version__ = "0.1.0"
__all__ = [
    "Column",
    "ColumnType",
    "Index",
    "IndexColumn",
    "IndexKind",
    "IndexType",
    "NullState",
    "Table",
    "TableOption",
    "default_collation",
]
