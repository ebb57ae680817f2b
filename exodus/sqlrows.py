"""Building game data from database rows."""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from typing import Any

from exodus.datatypes import Data, DataType, Habit, Plant
from exodus.errors import DataError
from exodus.properties import MaxHeight, Name


def _column(row: Mapping[str, Any], name: str) -> Any:
    try:
        return row[name]
    except (KeyError, IndexError):
        raise DataError(f"missing column: {name}") from None


def _text_column(row: Mapping[str, Any], name: str) -> str:
    value = _column(row, name)
    if not isinstance(value, str):
        raise DataError(f"column {name} is not text")
    return value


def parse_id(text: str) -> uuid.UUID:
    """Parse a random (version 4) UUID."""
    try:
        value = uuid.UUID(text)
    except (ValueError, AttributeError, TypeError) as exc:
        raise DataError(f"invalid uuid: {exc}") from None
    if value.version != 4:
        raise DataError("non-random (v4) uuid")
    return value


def _max_height(row: Mapping[str, Any]) -> MaxHeight:
    cm = _column(row, "max_height_cm")
    if isinstance(cm, bool) or not isinstance(cm, int):
        raise DataError("column max_height_cm is not an integer")
    if cm == 0:
        raise DataError("zero max height")
    try:
        return MaxHeight(cm)
    except ValueError as exc:
        raise DataError(str(exc)) from None


def plant_from_row(row: Mapping[str, Any]) -> Plant:
    """Build a plant from a row of a plant table."""
    plant_id = parse_id(_text_column(row, "id"))
    name = Name(_text_column(row, "name"))
    habit = Habit.parse(_text_column(row, "habit"))
    max_height = _max_height(row)
    return Plant(id=plant_id, name=name, habit=habit, max_height=max_height)


def data_from_row(data_type: DataType, row: Mapping[str, Any]) -> Data:
    """Build the game data of the given type from a row."""
    match data_type:
        case DataType.PLANT:
            return plant_from_row(row)
    raise DataError(f"unsupported data type: {data_type!r}")