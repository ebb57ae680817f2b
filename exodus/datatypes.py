"""Game data types and their tagged serialised form."""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from exodus.errors import DataError, PlantError
from exodus.properties import MaxHeight, Name


class DataType(Enum):
    """The kinds of game data."""

    PLANT = "plant"

    @classmethod
    def parse(cls, text: str) -> DataType:
        if text in ("plant", "plants"):
            return cls.PLANT
        raise DataError("invalid data type")


class Habit(Enum):
    """The growth habit of a plant."""

    TREE = "tree"
    SHRUB = "shrub"
    GRASS = "grass"
    VINE = "vine"
    HERB = "herb"

    @classmethod
    def parse(cls, text: str) -> Habit:
        try:
            return cls(text)
        except ValueError:
            raise PlantError("invalid habit") from None


@dataclass(frozen=True)
class Plant:
    """A plant species."""

    id: uuid.UUID
    name: Name
    habit: Habit
    max_height: MaxHeight

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "name": str(self.name),
            "habit": self.habit.value,
            "max_height": self.max_height.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Plant:
        try:
            raw_id = data["id"]
            raw_name = data["name"]
            raw_habit = data["habit"]
            raw_height = data["max_height"]
        except KeyError as exc:
            raise DataError(f"missing field `{exc.args[0]}`") from None

        if not isinstance(raw_id, str):
            raise DataError("invalid id: expected a string")
        try:
            plant_id = uuid.UUID(raw_id)
        except ValueError as exc:
            raise DataError(f"invalid id: {exc}") from None

        if not isinstance(raw_name, str):
            raise DataError("invalid name: expected a string")
        if not isinstance(raw_habit, str):
            raise PlantError("invalid habit")
        if not isinstance(raw_height, Mapping):
            raise DataError("invalid max_height: expected a table")
        try:
            max_height = MaxHeight.from_dict(raw_height)
        except (TypeError, ValueError) as exc:
            raise DataError(f"invalid max_height: {exc}") from None

        return cls(
            id=plant_id,
            name=Name(raw_name),
            habit=Habit.parse(raw_habit),
            max_height=max_height,
        )


Data = Plant

_TAGS: dict[type, str] = {Plant: "plant"}
_VARIANTS: dict[str, type[Plant]] = {tag: kind for kind, tag in _TAGS.items()}


def serialize(data: Data) -> dict[str, Any]:
    """Return the tagged mapping form of a piece of game data."""
    try:
        tag = _TAGS[type(data)]
    except KeyError:
        raise DataError(f"cannot serialise {type(data).__name__}") from None
    return {"type": tag, **data.to_dict()}


def deserialize(mapping: Mapping[str, Any]) -> Data:
    """Build a piece of game data from its tagged mapping form."""
    if "type" not in mapping:
        raise DataError("missing field `type`")
    tag = mapping["type"]
    kind = _VARIANTS.get(tag) if isinstance(tag, str) else None
    if kind is None:
        raise DataError(f"unknown variant `{tag}`")
    fields = {key: value for key, value in mapping.items() if key != "type"}
    return kind.from_dict(fields)