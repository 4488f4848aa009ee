"""Column, index and table option entities of a MySQL table schema."""

from dataclasses import dataclass, field, replace
from enum import Enum


class ColumnType(Enum):
    """MySQL column data types."""
    BIT = "BIT"
    TINYINT = "TINYINT"
    SMALLINT = "SMALLINT"
    MEDIUMINT = "MEDIUMINT"
    INT = "INT"
    INTEGER = "INTEGER"
    BIGINT = "BIGINT"
    REAL = "REAL"
    DOUBLE = "DOUBLE"
    FLOAT = "FLOAT"
    DECIMAL = "DECIMAL"
    NUMERIC = "NUMERIC"
    BOOL = "BOOL"
    BOOLEAN = "BOOLEAN"
    DATE = "DATE"
    TIME = "TIME"
    TIMESTAMP = "TIMESTAMP"
    DATETIME = "DATETIME"
    YEAR = "YEAR"
    CHAR = "CHAR"
    VARCHAR = "VARCHAR"
    BINARY = "BINARY"
    VARBINARY = "VARBINARY"
    TINYBLOB = "TINYBLOB"
    BLOB = "BLOB"
    MEDIUMBLOB = "MEDIUMBLOB"
    LONGBLOB = "LONGBLOB"
    TINYTEXT = "TINYTEXT"
    TEXT = "TEXT"
    MEDIUMTEXT = "MEDIUMTEXT"
    LONGTEXT = "LONGTEXT"
    ENUM = "ENUM"
    SET = "SET"
    JSON = "JSON"


TEXT_TYPES = frozenset({
    ColumnType.CHAR,
    ColumnType.VARCHAR,
    ColumnType.TINYTEXT,
    ColumnType.TEXT,
    ColumnType.MEDIUMTEXT,
    ColumnType.LONGTEXT,
})

# synonym -> (canonical type, forced length)
_TYPE_SYNONYMS: dict[ColumnType, tuple[ColumnType, str | None]] = {
    ColumnType.INTEGER: (ColumnType.INT, None),
    ColumnType.BOOL: (ColumnType.TINYINT, "1"),
    ColumnType.BOOLEAN: (ColumnType.TINYINT, "1"),
    ColumnType.NUMERIC: (ColumnType.DECIMAL, None),
    ColumnType.REAL: (ColumnType.DOUBLE, None),
}

# type -> (signed length, unsigned length)
_DEFAULT_LENGTHS: dict[ColumnType, tuple[str, str]] = {
    ColumnType.TINYINT: ("4", "3"),
    ColumnType.SMALLINT: ("6", "5"),
    ColumnType.MEDIUMINT: ("9", "8"),
    ColumnType.INT: ("11", "10"),
    ColumnType.BIGINT: ("20", "20"),
    ColumnType.DECIMAL: ("10,0", "10,0"),
    ColumnType.BIT: ("1", "1"),
    ColumnType.CHAR: ("1", "1"),
    ColumnType.BINARY: ("1", "1"),
    ColumnType.YEAR: ("4", "4"),
}


class NullState(Enum):
    """Declared nullability of a column."""
    NONE = "NONE"
    NULL = "NULL"
    NOT_NULL = "NOT NULL"


class IndexKind(Enum):
    """Kind of a table index."""
    PRIMARY_KEY = "PRIMARY KEY"
    UNIQUE = "UNIQUE"
    NORMAL = "INDEX"
    FULLTEXT = "FULLTEXT"
    SPATIAL = "SPATIAL"


class IndexType(Enum):
    """Index storage type given with USING."""
    NONE = ""
    BTREE = "BTREE"
    HASH = "HASH"


@dataclass
class Column:
    """Column definition.

    ``table_id`` tags the table that owns the column. A tagged column is
    copied before it is attached to another table.
    """
    name: str
    type: ColumnType
    length: str | None = None
    unsigned: bool = False
    null_state: NullState = NullState.NONE
    default: str | None = None
    auto_increment: bool = False
    primary: bool = False
    unique: bool = False
    character_set: str | None = None
    collation: str | None = None
    comment: str | None = None
    table_id: str = field(default="", compare=False, repr=False)

    @property
    def id(self) -> str:
        return "tablecol#" + self.name

    @property
    def has_character_set(self) -> bool:
        return bool(self.character_set)

    @property
    def has_collation(self) -> bool:
        return bool(self.collation)

    @property
    def is_text(self) -> bool:
        return self.type in TEXT_TYPES

    def clone(self) -> "Column":
        """Return an unowned copy of the column."""
        return replace(self, table_id="")

    def normalize(self) -> tuple["Column", bool]:
        """Return the canonical form of the column and whether it differs.

        The column itself is never modified; a changed result is a clone.
        """
        col_type, length = self.type, self.length
        if col_type in _TYPE_SYNONYMS:
            col_type, forced = _TYPE_SYNONYMS[col_type]
            if forced is not None:
                length = forced

        if length is None and col_type in _DEFAULT_LENGTHS:
            signed, unsigned = _DEFAULT_LENGTHS[col_type]
            length = unsigned if self.unsigned else signed

        null_state = self.null_state
        if null_state is NullState.NONE:
            null_state = NullState.NOT_NULL if self.primary else NullState.NULL

        if (col_type, length, null_state) == (self.type, self.length, self.null_state):
            return self, False

        ncol = self.clone()
        ncol.type = col_type
        ncol.length = length
        ncol.null_state = null_state
        return ncol, True


@dataclass
class IndexColumn:
    """Column reference inside an index."""
    name: str
    length: str | None = None
    sort: str | None = None


@dataclass
class Index:
    """Table index or key constraint."""
    kind: IndexKind
    table_id: str = field(default="", compare=False, repr=False)
    name: str | None = None
    type: IndexType = IndexType.NONE
    symbol: str | None = None
    columns: list[IndexColumn] = field(default_factory=list)

    @property
    def id(self) -> str:
        if self.name:
            return "index#" + self.name
        return f"index#{self.kind.value}#{','.join(c.name for c in self.columns)}"

    def add_columns(self, *columns: IndexColumn) -> "Index":
        self.columns.extend(columns)
        return self

    def clone(self) -> "Index":
        return replace(self, columns=[replace(c) for c in self.columns])

    def normalize(self) -> tuple["Index", bool]:
        """Return the canonical form of the index and whether it differs."""
        name = self.name
        if self.kind is IndexKind.PRIMARY_KEY:
            # MySQL always names the primary key PRIMARY
            name = None
        elif not name and self.columns:
            # an unnamed index takes the name of its first column
            name = self.columns[0].name

        explicit_asc = [c.sort is not None and c.sort.upper() == "ASC" for c in self.columns]
        if name == self.name and not any(explicit_asc):
            return self, False

        columns = [
            replace(col, sort=None) if asc else replace(col)
            for col, asc in zip(self.columns, explicit_asc)
        ]
        return replace(self, name=name, columns=columns), True


@dataclass(frozen=True)
class TableOption:
    """Table option such as ENGINE or DEFAULT CHARACTER SET."""
    key: str
    value: str
    need_quotes: bool = False

    @property
    def id(self) -> str:
        return "tableopt#" + self.key
