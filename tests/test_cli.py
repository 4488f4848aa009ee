"""Tests for the command-line interface."""

import pytest
from click.testing import CliRunner

from ddl_normalize.cli import main


@pytest.fixture
def runner():
    return CliRunner()


class TestCli:
    """Tests for the ddl-normalize command."""

    def test_prints_normalized_summary(self, runner, tmp_path):
        schema = tmp_path / "schema.sql"
        schema.write_text(
            "CREATE TABLE t (id INT PRIMARY KEY, name VARCHAR(10)) DEFAULT CHARSET=latin1;"
        )

        result = runner.invoke(main, [str(schema)])

        assert result.exit_code == 0, result.output
        assert "Found 1 tables" in result.output
        assert "t: normalized, 2 columns, 1 indexes" in result.output
        assert "PRIMARY KEY (id)" in result.output
        assert "name VARCHAR(10) CHARACTER SET latin1 COLLATE latin1_swedish_ci NULL" in result.output

    def test_reports_unsupported_types(self, runner, tmp_path):
        schema = tmp_path / "schema.sql"
        schema.write_text("CREATE TABLE t (shape GEOMETRY);")

        result = runner.invoke(main, [str(schema)])

        assert result.exit_code == 1
        assert "Invalid schema" in result.output

    def test_missing_file_is_rejected(self, runner, tmp_path):
        result = runner.invoke(main, [str(tmp_path / "missing.sql")])
        assert result.exit_code == 2

    def test_prints_prefix_lengths_and_index_types(self, runner, tmp_path):
        schema = tmp_path / "schema.sql"
        schema.write_text("CREATE TABLE t (a INT, b VARCHAR(20), KEY ix (b(5)) USING BTREE);")

        result = runner.invoke(main, [str(schema)])

        assert result.exit_code == 0, result.output
        assert "INDEX ix (b(5)) USING BTREE" in result.output
