"""Color model for LED control."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Color(BaseModel):
    """Standard 8-bit RGB color model.

    Colors are stored at full intensity. Brightness is applied only when a
    frame is written to the strip, so category and lightning logic always
    compare true color values.

    The model is frozen so colors can be shared between buffers, used as
    dict keys and compared by value.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255, description="Red (0-255)")
    g: int = Field(ge=0, le=255, description="Green (0-255)")
    b: int = Field(ge=0, le=255, description="Blue (0-255)")

    @field_validator("r", "g", "b")
    @classmethod
    def validate_rgb(cls, v: int) -> int:
        """Ensure RGB values are in valid range."""
        if not 0 <= v <= 255:
            raise ValueError("RGB values must be between 0 and 255")
        return v

    @classmethod
    def off(cls) -> "Color":
        """Create off (black) color."""
        return cls(r=0, g=0, b=0)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        """Create a color from positional channel values."""
        return cls(r=r, g=g, b=b)

    @property
    def is_off(self) -> bool:
        """True when every channel is zero."""
        return self.r == 0 and self.g == 0 and self.b == 0

    def scaled(self, brightness: int) -> "Color":
        """Scale every channel by ``brightness / 255``.

        Uses round-to-nearest integer arithmetic. Since 255 is odd, an exact
        half never occurs, so ``(v * b + 127) // 255`` equals
        ``round(v * b / 255)``.

        Args:
            brightness: Brightness level (0-255)

        Returns:
            Color: A new scaled color; brightness 255 returns equal channels

        Example:
            >>> Color(r=255, g=128, b=1).scaled(128)
            Color(r=128, g=64, b=1)
        """
        return Color(
            r=_scale_channel(self.r, brightness),
            g=_scale_channel(self.g, brightness),
            b=_scale_channel(self.b, brightness),
        )

    def to_rgb_tuple(self) -> tuple[int, int, int]:
        """Convert to RGB tuple."""
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        """Convert to CSS hex color string (e.g., '#FF0000').

        Returns:
            str: Hex color string in format '#RRGGBB'

        Example:
            >>> color = Color(r=255, g=0, b=0)
            >>> color.to_hex()
            '#FF0000'
        """
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"


def _scale_channel(value: int, brightness: int) -> int:
    return (value * brightness + 127) // 255
