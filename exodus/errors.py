"""Errors raised while handling game data."""


class DataError(Exception):
    """A problem with game data that is not tied to one data type."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class PlantError(DataError):
    """A problem with plant data."""