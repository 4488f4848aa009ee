"""Command-line interface for ddl-normalize."""

import logging
from pathlib import Path

import click

from ddl_normalize.exceptions import DDLNormalizeError
from ddl_normalize.logger import get_logger
from ddl_normalize.models import Column, Index
from ddl_normalize.parsers import MySQLParser


def _describe_column(column: Column) -> str:
    parts = [column.name, column.type.value + (f"({column.length})" if column.length else "")]
    if column.unsigned:
        parts.append("UNSIGNED")
    if column.character_set:
        parts.append(f"CHARACTER SET {column.character_set}")
    if column.collation:
        parts.append(f"COLLATE {column.collation}")
    parts.append(column.null_state.value)
    return " ".join(parts)


def _describe_index(index: Index) -> str:
    columns = ", ".join(
        c.name + (f"({c.length})" if c.length else "") + (f" {c.sort}" if c.sort else "")
        for c in index.columns
    )
    name = f" {index.name}" if index.name else ""
    using = f" USING {index.type.value}" if index.type.value else ""
    return f"{index.kind.value}{name} ({columns}){using}"


@click.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    envvar="DDL_NORMALIZE_LOG_LEVEL",
    help="Logging level (or set DDL_NORMALIZE_LOG_LEVEL env var)",
)
@click.version_option(version="0.1.0")
def main(input_file: Path, log_level: str) -> None:
    """Normalize MySQL CREATE TABLE statements for comparison.

    INPUT_FILE is the path to a SQL file containing CREATE TABLE statements.

    \b
    Examples:
      ddl-normalize schema.sql
      ddl-normalize schema.sql --log-level debug
    """
    get_logger("ddl_normalize", getattr(logging, log_level.upper()))

    try:
        sql = input_file.read_text()

        click.echo("Parsing mysql SQL...")
        tables = MySQLParser().parse(sql)
        click.echo(f"Found {len(tables)} tables")

        click.echo("\nSummary:")
        for table in tables:
            normalized, changed = table.normalize()
            state = "normalized" if changed else "unchanged"
            click.echo(
                f"  - {normalized.name}: {state}, "
                f"{len(normalized.columns())} columns, {len(normalized.indexes())} indexes"
            )
            if normalized.has_like_table:
                click.echo(f"      LIKE {normalized.like_table}")
            for column in normalized.columns():
                click.echo(f"      {_describe_column(column)}")
            for index in normalized.indexes():
                click.echo(f"      {_describe_index(index)}")
            for option in normalized.options():
                value = f"'{option.value}'" if option.need_quotes else option.value
                click.echo(f"      {option.key} = {value}")

    except click.ClickException:
        raise
    except DDLNormalizeError as e:
        raise click.ClickException(f"Invalid schema: {e}")
    except Exception as e:
        raise click.ClickException(str(e))


if __name__ == "__main__":
    main()
