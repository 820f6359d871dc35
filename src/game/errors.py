"""
Exceptions raised by the minefield engine.
"""


class MinefieldError(Exception):
    """Base class for all engine errors."""


class InvalidConfiguration(MinefieldError, ValueError):
    """Board dimensions or mine layout cannot produce a playable grid."""


class OutOfBounds(MinefieldError, IndexError):
    """Coordinates fall outside the grid."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(
            f"Position ({x}, {y}) is outside the {width}x{height} grid"
        )
        self.x = x
        self.y = y
