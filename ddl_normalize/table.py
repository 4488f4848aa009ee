"""Table aggregate and its normalization into a comparable canonical form."""

import logging
import threading

from ddl_normalize.charset import default_collation
from ddl_normalize.models import (
    Column,
    Index,
    IndexColumn,
    IndexKind,
    IndexType,
    TableOption,
)

logger = logging.getLogger(__name__)


class Table:
    """Database table definition.

    Every read and mutation goes through a per-table re-entrant lock, so a
    table may be shared between threads. ``normalize`` holds the lock for its
    whole run.
    """

    def __init__(self, name: str):
        self._name = name
        self._columns: list[Column] = []
        self._column_positions: dict[str, int] = {}
        self._indexes: list[Index] = []
        self._options: list[TableOption] = []
        self._if_not_exists = False
        self._temporary = False
        self._like_table: str | None = None
        self._lock = threading.RLock()

    def __repr__(self) -> str:
        return f"Table(name={self._name!r}, columns={len(self._columns)}, indexes={len(self._indexes)})"

    @property
    def id(self) -> str:
        return "table#" + self._name

    @property
    def name(self) -> str:
        return self._name

    @property
    def if_not_exists(self) -> bool:
        return self._if_not_exists

    @property
    def temporary(self) -> bool:
        return self._temporary

    @property
    def like_table(self) -> str | None:
        return self._like_table

    @property
    def has_like_table(self) -> bool:
        return self._like_table is not None

    def set_if_not_exists(self, value: bool) -> "Table":
        self._if_not_exists = value
        return self

    def set_temporary(self, value: bool) -> "Table":
        self._temporary = value
        return self

    def set_like_table(self, name: str) -> "Table":
        self._like_table = name
        return self

    def columns(self) -> tuple[Column, ...]:
        """Snapshot of the columns in declaration order."""
        with self._lock:
            return tuple(self._columns)

    def indexes(self) -> tuple[Index, ...]:
        with self._lock:
            return tuple(self._indexes)

    def options(self) -> tuple[TableOption, ...]:
        with self._lock:
            return tuple(self._options)

    def lookup_column(self, name: str) -> Column | None:
        with self._lock:
            pos = self._column_positions.get(name)
            if pos is None:
                return None
            return self._columns[pos]

    def lookup_column_order(self, name: str) -> int | None:
        with self._lock:
            return self._column_positions.get(name)

    def lookup_column_before(self, name: str) -> Column | None:
        """Return the column declared right before ``name``.

        Returns None when ``name`` is unknown or is the first column.
        """
        with self._lock:
            pos = self._column_positions.get(name)
            if not pos:
                return None
            return self._columns[pos - 1]

    def lookup_index(self, index_id: str) -> Index | None:
        for index in self.indexes():
            if index.id == index_id:
                return index
        return None

    def add_column(self, column: Column) -> "Table":
        with self._lock:
            # a column owned by another table is copied, never shared
            if column.table_id:
                column = column.clone()
            column.table_id = self.id
            self._columns.append(column)
            self._column_positions[column.name] = len(self._columns) - 1
        return self

    def add_index(self, index: Index) -> "Table":
        with self._lock:
            self._indexes.append(index)
        return self

    def add_option(self, option: TableOption) -> "Table":
        with self._lock:
            self._options.append(option)
        return self

    def normalize(self) -> tuple["Table", bool]:
        """Return the canonical form of the table and whether it differs.

        Inline PRIMARY KEY and UNIQUE column constraints become indexes that
        sort before the declared ones, and text columns inherit the table's
        default character set and collation where they declare none. When
        nothing changes the table itself is returned; otherwise the result
        shares no mutable state with it.
        """
        with self._lock:
            return self._normalize()

    def _normalize(self) -> tuple["Table", bool]:
        changed = False
        additional_indexes: list[Index] = []
        columns: list[Column] = []
        default_character_set = ""
        default_collation_name = ""

        for opt in self._options:
            key = opt.key.upper()
            if key == "DEFAULT CHARACTER SET":
                default_character_set = opt.value
            elif key == "DEFAULT COLLATE":
                default_collation_name = opt.value

        for col in self._columns:
            ncol, modified = col.normalize()
            if modified:
                changed = True

            if ncol.primary:
                index = Index(kind=IndexKind.PRIMARY_KEY, table_id=self.id, type=IndexType.NONE)
                index.add_columns(IndexColumn(ncol.name))
                additional_indexes.append(index)
                ncol = ncol.clone()
                ncol.primary = False
                modified = changed = True
                logger.debug("%s: moved PRIMARY KEY of column %s to an index", self._name, ncol.name)
            elif ncol.unique:
                # an unnamed index is named after its first column
                index = Index(kind=IndexKind.UNIQUE, table_id=self.id, name=ncol.name, type=IndexType.NONE)
                index.add_columns(IndexColumn(ncol.name))
                additional_indexes.append(index)
                ncol = ncol.clone()
                ncol.unique = False
                modified = changed = True
                logger.debug("%s: moved UNIQUE of column %s to an index", self._name, ncol.name)

            if ncol.is_text:
                character_set, collation = _resolve_text_defaults(
                    ncol, default_character_set, default_collation_name
                )
                if (character_set, collation) != (ncol.character_set, ncol.collation):
                    if not modified:
                        ncol = ncol.clone()
                    ncol.character_set = character_set
                    ncol.collation = collation
                    changed = True

            columns.append(ncol)

        indexes: list[Index] = []
        seen: set[str | None] = set()
        for idx in self._indexes:
            nidx, modified = idx.normalize()
            if modified:
                changed = True
            indexes.append(nidx)
            seen.add(nidx.name)

        if not changed:
            return self, False

        tbl = Table(self._name)
        tbl.set_if_not_exists(self._if_not_exists)
        tbl.set_temporary(self._temporary)
        if self._like_table is not None:
            tbl.set_like_table(self._like_table)

        for index in additional_indexes:
            tbl.add_index(index)

        for col in columns:
            tbl.add_column(col)

        for idx in indexes:
            tbl.add_index(idx.clone())

        for opt in self._options:
            tbl.add_option(opt)

        logger.debug(
            "%s: normalized with %d extracted index(es)", self._name, len(additional_indexes)
        )
        return tbl, True


def _resolve_text_defaults(
    column: Column,
    default_character_set: str,
    default_collation_name: str,
) -> tuple[str | None, str | None]:
    """Fill a text column's missing character set and collation from table defaults."""
    character_set = column.character_set
    collation = column.collation

    if not character_set and default_character_set:
        character_set = default_character_set

    if not collation:
        if character_set:
            if character_set == default_character_set and default_collation_name:
                collation = default_collation_name
            elif known := default_collation(character_set):
                collation = known
        elif default_collation_name:
            collation = default_collation_name

    return character_set, collation
