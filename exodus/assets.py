"""Loading game data from TOML asset files."""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Iterable
from pathlib import Path

from exodus.datatypes import DataType, Plant
from exodus.errors import DataError

log = logging.getLogger(__name__)


class DataLoadError(Exception):
    """The data assets could not be set up."""


def find_data_files(directory: str | Path) -> list[Path]:
    """Return every TOML file below a directory, in sorted order.

    A missing or unreadable directory is logged and yields no files.
    """
    directory = Path(directory)
    if not directory.is_dir():
        log.error("failed to load data: %s is not a directory", directory)
        return []
    return sorted(path for path in directory.rglob("*.toml") if path.is_file())


def _read_toml(path: Path) -> dict:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise DataLoadError(f"data assets failed to load: {path}: {exc}") from exc


def load_plants(paths: Iterable[str | Path]) -> set[Plant]:
    """Read plant data from TOML files; raise DataLoadError on any problem."""
    plants: set[Plant] = set()
    for path in paths:
        value = _read_toml(Path(path))

        raw_type = value.get("type")
        if not isinstance(raw_type, str):
            raise DataLoadError("missing type field")
        try:
            data_type = DataType.parse(raw_type)
        except DataError as exc:
            raise DataLoadError(f"invalid type value: {exc}") from None

        match data_type:
            case DataType.PLANT:
                try:
                    plants.add(Plant.from_dict(value))
                except DataError as exc:
                    raise DataLoadError(f"invalid plant data: {exc}") from None
    return plants