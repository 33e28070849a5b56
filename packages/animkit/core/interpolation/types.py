"""Composite value types with built-in interpolators.

All models are immutable (frozen=True) so they can be used as animation
endpoints and compared/hashed by value.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Point(BaseModel):
    """A 2D offset.

    Example:
        >>> Point(x=1.0, y=2.0).x
        1.0
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    x: float
    y: float


class Size(BaseModel):
    """A 2D extent. Negative sizes are allowed as interpolation intermediates."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    width: float
    height: float


class Color(BaseModel):
    """An 8-bit-per-channel RGBA colour.

    Attributes:
        red: Red channel [0, 255].
        green: Green channel [0, 255].
        blue: Blue channel [0, 255].
        alpha: Alpha channel [0, 255] (default: opaque).

    Example:
        >>> Color.from_hex("#FF8000").green
        128
        >>> Color(red=255, green=0, blue=0).to_hex()
        '#FFFF0000'
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    red: int = Field(..., ge=0, le=255)
    green: int = Field(..., ge=0, le=255)
    blue: int = Field(..., ge=0, le=255)
    alpha: int = Field(default=255, ge=0, le=255)

    @classmethod
    def from_hex(cls, value: str) -> Color:
        """Parse ``#RRGGBB`` or ``#AARRGGBB`` (leading ``#`` optional).

        Raises:
            ValueError: If the string is not 6 or 8 hex digits.
        """
        digits = value.removeprefix("#")
        if len(digits) not in (6, 8):
            raise ValueError(f"Expected #RRGGBB or #AARRGGBB, got {value!r}")
        try:
            channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
        except ValueError as exc:
            raise ValueError(f"Invalid hex colour {value!r}") from exc

        if len(channels) == 3:
            channels.insert(0, 255)
        alpha, red, green, blue = channels
        return cls(red=red, green=green, blue=blue, alpha=alpha)

    def to_hex(self) -> str:
        """Format as ``#AARRGGBB``."""
        return f"#{self.alpha:02X}{self.red:02X}{self.green:02X}{self.blue:02X}"
