"""MySQL DDL reader using sqlglot."""

import logging

import sqlglot
from sqlglot import exp
from sqlglot.errors import ParseError as SqlglotParseError

from ddl_normalize.exceptions import ParseError, UnsupportedTypeError
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

logger = logging.getLogger(__name__)

# sqlglot type names that differ from the MySQL ones
_TYPE_ALIASES: dict[str, tuple[ColumnType, bool]] = {
    "UTINYINT": (ColumnType.TINYINT, True),
    "USMALLINT": (ColumnType.SMALLINT, True),
    "UMEDIUMINT": (ColumnType.MEDIUMINT, True),
    "UINT": (ColumnType.INT, True),
    "UBIGINT": (ColumnType.BIGINT, True),
    "UDECIMAL": (ColumnType.DECIMAL, True),
    "UDOUBLE": (ColumnType.DOUBLE, True),
    "TIMESTAMPTZ": (ColumnType.TIMESTAMP, False),
    "TIMESTAMPLTZ": (ColumnType.TIMESTAMP, False),
}

_INDEX_KINDS = {
    "UNIQUE": IndexKind.UNIQUE,
    "FULLTEXT": IndexKind.FULLTEXT,
    "SPATIAL": IndexKind.SPATIAL,
}


class MySQLParser:
    """Reader for MySQL CREATE TABLE and CREATE INDEX statements."""

    def parse(self, sql: str) -> list[Table]:
        """Parse SQL DDL and return the tables it creates."""
        try:
            statements = sqlglot.parse(sql, dialect="mysql")
        except SqlglotParseError as e:
            raise ParseError(str(e)) from e

        tables: list[Table] = []
        index_statements: list[exp.Create] = []

        for stmt in statements:
            if stmt is None:
                continue
            if isinstance(stmt, exp.Create):
                kind = (stmt.kind or "").upper()
                if kind == "TABLE":
                    tables.append(self._parse_create_table(stmt))
                elif kind == "INDEX":
                    index_statements.append(stmt)
            else:
                logger.debug("Skipping %s statement", type(stmt).__name__)

        for index_stmt in index_statements:
            self._attach_index(tables, index_stmt)

        return tables

    def _parse_create_table(self, stmt: exp.Create) -> Table:
        """Parse a CREATE TABLE statement."""
        # stmt.this is a Schema (name + definitions), or a bare Table for LIKE
        schema_obj = stmt.this
        table_expr = schema_obj.this if isinstance(schema_obj, exp.Schema) else schema_obj
        table = Table(table_expr.name if table_expr else "unknown")
        table.set_if_not_exists(bool(stmt.args.get("exists")))

        properties = stmt.args.get("properties")
        for prop in properties.expressions if properties else []:
            self._apply_property(table, prop)

        if isinstance(schema_obj, exp.Schema):
            for expression in schema_obj.expressions or []:
                if isinstance(expression, exp.ColumnDef):
                    table.add_column(self._parse_column(expression))
                else:
                    for index in self._parse_constraint(table, expression):
                        table.add_index(index)

            # Mark primary key columns
            for index in table.indexes():
                if index.kind is not IndexKind.PRIMARY_KEY:
                    continue
                for index_col in index.columns:
                    column = table.lookup_column(index_col.name)
                    if column is not None and column.null_state is NullState.NONE:
                        column.null_state = NullState.NOT_NULL

        logger.debug("Parsed %r", table)
        return table

    def _apply_property(self, table: Table, prop: exp.Expression) -> None:
        """Record a table property as a flag or a TableOption."""
        if isinstance(prop, exp.TemporaryProperty):
            table.set_temporary(True)
        elif isinstance(prop, exp.LikeProperty):
            table.set_like_table(prop.this.name)
        elif isinstance(prop, exp.CharacterSetProperty):
            table.add_option(TableOption("DEFAULT CHARACTER SET", prop.name))
        elif isinstance(prop, exp.CollateProperty):
            table.add_option(TableOption("DEFAULT COLLATE", prop.name))
        elif isinstance(prop, exp.EngineProperty):
            table.add_option(TableOption("ENGINE", prop.name))
        elif isinstance(prop, exp.AutoIncrementProperty):
            table.add_option(TableOption("AUTO_INCREMENT", prop.name))
        elif isinstance(prop, exp.SchemaCommentProperty):
            table.add_option(TableOption("COMMENT", prop.name, need_quotes=True))
        else:
            key, _, value = prop.sql(dialect="mysql").partition("=")
            table.add_option(TableOption(key.strip().upper(), value.strip()))

    def _parse_column(self, col_def: exp.ColumnDef) -> Column:
        """Parse a column definition."""
        name = col_def.name
        col_type, length, unsigned = self._parse_type(name, col_def.args.get("kind"))
        column = Column(name=name, type=col_type, length=length, unsigned=unsigned)

        for constraint in col_def.constraints or []:
            kind = constraint.kind

            if isinstance(kind, exp.NotNullColumnConstraint):
                column.null_state = NullState.NULL if kind.args.get("allow_null") else NullState.NOT_NULL
            elif isinstance(kind, exp.PrimaryKeyColumnConstraint):
                column.primary = True
            elif isinstance(kind, exp.UniqueColumnConstraint):
                column.unique = True
            elif isinstance(kind, exp.DefaultColumnConstraint):
                column.default = self._expr_to_string(kind.this)
            elif isinstance(kind, exp.AutoIncrementColumnConstraint):
                column.auto_increment = True
            elif isinstance(kind, exp.CharacterSetColumnConstraint):
                column.character_set = kind.name
            elif isinstance(kind, exp.CollateColumnConstraint):
                column.collation = kind.name or kind.this.sql(dialect="mysql")
            elif isinstance(kind, exp.CommentColumnConstraint):
                column.comment = kind.name
            else:
                logger.debug("Ignoring constraint %s on column %s", type(kind).__name__, name)

        return column

    def _parse_type(
        self, column: str, data_type: exp.DataType | None
    ) -> tuple[ColumnType, str | None, bool]:
        """Map a sqlglot data type to (type, length, unsigned)."""
        if not isinstance(data_type, exp.DataType):
            raise UnsupportedTypeError(column, "UNKNOWN")

        type_name = data_type.this.name
        if type_name in _TYPE_ALIASES:
            col_type, unsigned = _TYPE_ALIASES[type_name]
        else:
            try:
                col_type, unsigned = ColumnType[type_name], False
            except KeyError:
                raise UnsupportedTypeError(column, type_name) from None

        # Get type parameters (e.g., VARCHAR(255), DECIMAL(10,2), ENUM('a','b'))
        params = [expr.sql(dialect="mysql") for expr in data_type.expressions or []]
        length = ",".join(params) if params else None

        return col_type, length, unsigned

    def _parse_constraint(self, table: Table, expression: exp.Expression) -> list[Index]:
        """Parse a table-level key or index definition."""
        if isinstance(expression, exp.Constraint):
            # CONSTRAINT symbol PRIMARY KEY (...) / UNIQUE (...)
            indexes = []
            for inner in expression.expressions:
                for index in self._parse_constraint(table, inner):
                    index.symbol = expression.name or None
                    indexes.append(index)
            return indexes

        if isinstance(expression, exp.PrimaryKey):
            index = Index(kind=IndexKind.PRIMARY_KEY, table_id=table.id)
            return [index.add_columns(*self._index_columns(expression.expressions))]

        if isinstance(expression, exp.UniqueColumnConstraint):
            # expression.this is a Schema holding the optional name and the columns
            unique_schema = expression.this
            index = Index(kind=IndexKind.UNIQUE, table_id=table.id)
            if isinstance(unique_schema, exp.Schema):
                index.name = unique_schema.this.name if unique_schema.this else None
                index.add_columns(*self._index_columns(unique_schema.expressions))
            index.type = self._index_type(expression)
            return [index]

        if isinstance(expression, exp.IndexColumnConstraint):
            kind = str(expression.args.get("kind") or "").upper()
            index = Index(
                kind=_INDEX_KINDS.get(kind, IndexKind.NORMAL),
                table_id=table.id,
                name=expression.name or None,
                type=self._index_type(expression),
            )
            return [index.add_columns(*self._index_columns(expression.expressions))]

        logger.debug("Skipping %s in table %s", type(expression).__name__, table.name)
        return []

    def _index_columns(self, expressions: list[exp.Expression]) -> list[IndexColumn]:
        columns = []
        for expr in expressions or []:
            sort = None
            if isinstance(expr, exp.Ordered):
                sort = "DESC" if expr.args.get("desc") else None
                expr = expr.this
            if isinstance(expr, exp.Anonymous):
                # b(5) reads as a call to "b"
                name = expr.name
            else:
                identifier = expr if isinstance(expr, exp.Identifier) else expr.find(exp.Identifier)
                if identifier is None:
                    continue
                name = identifier.name
            prefix = expr.find(exp.Literal)
            length = prefix.name if prefix is not None and prefix.is_number else None
            columns.append(IndexColumn(name, length=length, sort=sort))
        return columns

    def _index_type(self, expression: exp.Expression) -> IndexType:
        """Read USING BTREE/HASH given before or after the column list."""
        # sqlglot stores False when no USING precedes the columns
        index_type = expression.args.get("index_type")
        if not index_type:
            for option in expression.args.get("options") or []:
                if isinstance(option, exp.IndexConstraintOption) and option.args.get("using"):
                    index_type = option.args["using"]
        if not index_type:
            return IndexType.NONE
        name = index_type if isinstance(index_type, str) else index_type.name
        try:
            return IndexType[name.upper()]
        except KeyError:
            return IndexType.NONE

    def _expr_to_string(self, expr: exp.Expression | None) -> str:
        """Convert an expression to string."""
        if expr is None:
            return ""

        if isinstance(expr, exp.Literal):
            if expr.is_string:
                return f"'{expr.this}'"
            return str(expr.this)

        if isinstance(expr, exp.Boolean):
            return "TRUE" if expr.this else "FALSE"

        if isinstance(expr, exp.Null):
            return "NULL"

        return expr.sql(dialect="mysql")

    def _attach_index(self, tables: list[Table], index_stmt: exp.Create) -> None:
        """Attach a CREATE INDEX statement to its table."""
        index_expr = index_stmt.this
        if not isinstance(index_expr, exp.Index):
            return

        table_expr = index_expr.args.get("table")
        if table_expr is None:
            return
        table_name = table_expr.name

        # newer sqlglot keeps the columns under IndexParameters
        params = index_expr.args.get("params")
        column_exprs = index_expr.expressions or (params.args.get("columns") if params else None) or []

        kind = IndexKind.UNIQUE if index_stmt.args.get("unique") else IndexKind.NORMAL
        for table in tables:
            if table.name == table_name:
                index = Index(kind=kind, table_id=table.id, name=index_expr.name or None)
                table.add_index(index.add_columns(*self._index_columns(column_exprs)))
                break
        else:
            logger.debug("Index %s refers to unknown table %s", index_expr.name, table_name)
