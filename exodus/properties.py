"""Properties shared between game data types."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

_U16_MAX = 0xFFFF


@dataclass(frozen=True)
class MaxHeight:
    """The maximum height of something, in whole centimetres (1 to 65535)."""

    cm: int

    def __post_init__(self) -> None:
        if isinstance(self.cm, bool) or not isinstance(self.cm, int):
            raise TypeError(f"max height must be an integer, got {self.cm!r}")
        if not 0 < self.cm <= _U16_MAX:
            raise ValueError(
                f"max height must be between 1 and {_U16_MAX} cm, got {self.cm}"
            )

    def to_dict(self) -> dict[str, Any]:
        return {"cm": self.cm}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MaxHeight:
        try:
            cm = data["cm"]
        except KeyError:
            raise ValueError("missing field `cm`") from None
        return cls(cm)


class Name(str):
    """The name of a piece of game data."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Name({str(self)!r})"