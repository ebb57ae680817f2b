"""Export game data from the database into TOML asset files."""

from __future__ import annotations

import argparse
import sqlite3
import sys
from contextlib import closing
from pathlib import Path

import tomli_w

from exodus.datatypes import Data, DataType, serialize
from exodus.errors import DataError
from exodus.sqlrows import data_from_row

DEFAULT_DATABASE = "./data/database.sqlite3"
DEFAULT_ASSETS = "./assets/data"
_TYPE_PREFIX = "type_"


def _strip_type_prefix(table: str) -> str:
    while table.startswith(_TYPE_PREFIX):
        table = table[len(_TYPE_PREFIX):]
    return table


def _quote_identifier(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


def type_tables(conn: sqlite3.Connection) -> list[str]:
    """Return the names of the tables that hold game data types."""
    cursor = conn.execute(
        "SELECT name FROM sqlite_master WHERE type = 'table' AND name LIKE 'type_%'"
    )
    return [name for (name,) in cursor]


def objects(table: str, conn: sqlite3.Connection) -> list[Data]:
    """Read every row of a type table as game data."""
    data_type = DataType.parse(_strip_type_prefix(table))
    cursor = conn.cursor()
    cursor.row_factory = sqlite3.Row
    cursor.execute(f"SELECT * FROM {_quote_identifier(table)};")
    return [data_from_row(data_type, row) for row in cursor]


def sync(database: str | Path, assets_dir: str | Path) -> list[Path]:
    """Write the database's game data into assets_dir and prune stale files.

    Returns the paths of the data files that now exist.
    """
    assets_dir = Path(assets_dir)
    kept: list[Path] = []

    with closing(sqlite3.connect(database)) as conn:
        for table in type_tables(conn):
            directory = assets_dir / _strip_type_prefix(table)
            found = objects(table, conn)
            if found:
                directory.mkdir(parents=True, exist_ok=True)

            for item in found:
                text = tomli_w.dumps(serialize(item))
                path = directory / f"{item.name.lower()}.toml"
                try:
                    current = path.read_text(encoding="utf-8")
                except OSError:
                    current = None
                if current != text:
                    path.write_text(text, encoding="utf-8")
                kept.append(path)

    keep = {path.resolve() for path in kept}
    if assets_dir.is_dir():
        stale = [
            entry
            for entry in assets_dir.rglob("*")
            if entry.is_file() and entry.resolve() not in keep
        ]
        for entry in stale:
            entry.unlink()

    return kept


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Export game data from the database into TOML asset files."
    )
    parser.add_argument("--database", default=DEFAULT_DATABASE)
    parser.add_argument("--assets", default=DEFAULT_ASSETS)
    args = parser.parse_args(argv)

    try:
        sync(args.database, args.assets)
    except (DataError, sqlite3.Error, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())