"""Tests for schema models."""

import pytest
from ddl_normalize.models import (
    Column,
    ColumnType,
    Index,
    IndexColumn,
    IndexKind,
    NullState,
    TableOption,
)


class TestColumnNormalize:
    """Tests for Column.normalize."""

    def test_canonical_column_is_returned_as_is(self):
        col = Column(name="id", type=ColumnType.INT, length="11", null_state=NullState.NOT_NULL)
        ncol, changed = col.normalize()
        assert changed is False
        assert ncol is col

    def test_integer_becomes_int_with_default_length(self):
        col = Column(name="id", type=ColumnType.INTEGER)
        ncol, changed = col.normalize()
        assert changed is True
        assert ncol.type is ColumnType.INT
        assert ncol.length == "11"

    def test_unsigned_int_uses_unsigned_default_length(self):
        ncol, _ = Column(name="id", type=ColumnType.INT, unsigned=True).normalize()
        assert ncol.length == "10"

    def test_boolean_becomes_tinyint_1(self):
        ncol, _ = Column(name="flag", type=ColumnType.BOOLEAN).normalize()
        assert ncol.type is ColumnType.TINYINT
        assert ncol.length == "1"

    def test_explicit_length_is_kept(self):
        ncol, _ = Column(name="n", type=ColumnType.DECIMAL, length="12,2").normalize()
        assert ncol.length == "12,2"

    def test_primary_column_defaults_to_not_null(self):
        ncol, _ = Column(name="id", type=ColumnType.INT, primary=True).normalize()
        assert ncol.null_state is NullState.NOT_NULL

    def test_plain_column_defaults_to_null(self):
        ncol, _ = Column(name="note", type=ColumnType.TEXT).normalize()
        assert ncol.null_state is NullState.NULL

    def test_normalize_does_not_modify_the_column(self):
        col = Column(name="id", type=ColumnType.INTEGER)
        col.normalize()
        assert col.type is ColumnType.INTEGER
        assert col.length is None
        assert col.null_state is NullState.NONE


class TestColumn:
    """Tests for Column helpers."""

    def test_id(self):
        assert Column(name="email", type=ColumnType.VARCHAR).id == "tablecol#email"

    def test_clone_is_independent_and_unowned(self):
        col = Column(name="email", type=ColumnType.VARCHAR, table_id="table#users")
        copy = col.clone()
        copy.comment = "changed"
        assert copy is not col
        assert copy.table_id == ""
        assert col.comment is None

    def test_character_set_flags(self):
        col = Column(name="email", type=ColumnType.VARCHAR)
        assert not col.has_character_set
        assert not col.has_collation
        col.character_set = "utf8"
        assert col.has_character_set

    @pytest.mark.parametrize("col_type", [ColumnType.CHAR, ColumnType.LONGTEXT])
    def test_text_types(self, col_type):
        assert Column(name="c", type=col_type).is_text

    def test_blob_is_not_text(self):
        assert not Column(name="c", type=ColumnType.BLOB).is_text


class TestIndex:
    """Tests for Index."""

    def test_add_columns_chains(self):
        index = Index(kind=IndexKind.NORMAL, name="idx").add_columns(IndexColumn("a"), IndexColumn("b"))
        assert [c.name for c in index.columns] == ["a", "b"]

    def test_id_uses_name_when_present(self):
        assert Index(kind=IndexKind.UNIQUE, name="uk_email").id == "index#uk_email"

    def test_id_of_unnamed_index(self):
        index = Index(kind=IndexKind.PRIMARY_KEY).add_columns(IndexColumn("a"), IndexColumn("b"))
        assert index.id == "index#PRIMARY KEY#a,b"

    def test_unnamed_index_takes_first_column_name(self):
        index = Index(kind=IndexKind.NORMAL).add_columns(IndexColumn("a"), IndexColumn("b"))
        nidx, changed = index.normalize()
        assert changed is True
        assert nidx.name == "a"
        assert index.name is None

    def test_primary_key_name_is_dropped(self):
        index = Index(kind=IndexKind.PRIMARY_KEY, name="pk").add_columns(IndexColumn("id"))
        nidx, changed = index.normalize()
        assert changed is True
        assert nidx.name is None

    def test_explicit_asc_is_dropped(self):
        index = Index(kind=IndexKind.NORMAL, name="idx").add_columns(
            IndexColumn("a", sort="ASC"), IndexColumn("b", sort="DESC")
        )
        nidx, changed = index.normalize()
        assert changed is True
        assert [c.sort for c in nidx.columns] == [None, "DESC"]
        assert index.columns[0].sort == "ASC"

    def test_canonical_index_is_returned_as_is(self):
        index = Index(kind=IndexKind.UNIQUE, name="uk").add_columns(IndexColumn("a"))
        nidx, changed = index.normalize()
        assert changed is False
        assert nidx is index
        assert nidx.columns[0] is index.columns[0]

    def test_clone_copies_columns(self):
        index = Index(kind=IndexKind.NORMAL, name="idx").add_columns(IndexColumn("a"))
        copy = index.clone()
        copy.add_columns(IndexColumn("b"))
        copy.columns[0].name = "z"
        assert [c.name for c in index.columns] == ["a"]


class TestTableOption:
    """Tests for TableOption."""

    def test_accessors(self):
        opt = TableOption("ENGINE", "InnoDB")
        assert opt.id == "tableopt#ENGINE"
        assert opt.key == "ENGINE"
        assert opt.value == "InnoDB"
        assert opt.need_quotes is False

    def test_is_immutable(self):
        opt = TableOption("COMMENT", "users", need_quotes=True)
        with pytest.raises(AttributeError):
            opt.value = "other"
