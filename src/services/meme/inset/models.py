import re
from enum import Enum
from typing import Any, Literal, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

# Slack for float rounding when checking that an inset stays on the canvas
_CANVAS_TOLERANCE = 1e-9

_HEX_COLOR = re.compile(r"#?([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})")


class TemplateFamily(str, Enum):
    POSITION = "position"
    BACKGROUND = "background"


class RGBAColor(BaseModel):
    """An sRGB color with an alpha channel in [0, 1]."""

    model_config = ConfigDict(frozen=True)

    red: int = Field(ge=0, le=255)
    green: int = Field(ge=0, le=255)
    blue: int = Field(ge=0, le=255)
    alpha: float = Field(default=1.0, ge=0.0, le=1.0)

    @classmethod
    def from_hex(cls, value: str) -> "RGBAColor":
        """
        Parse `#RGB`, `#RRGGBB` or `#RRGGBBAA` (leading `#` optional).

        Raises:
            ValueError: If the string is not a hex color.
        """
        match = _HEX_COLOR.fullmatch(value)
        if match is None:
            raise ValueError(f"Not a hex color: {value!r}")

        digits = match.group(1)
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]

        alpha = channels[3] / 255 if len(channels) == 4 else 1.0
        return cls(red=channels[0], green=channels[1], blue=channels[2], alpha=alpha)

    @property
    def is_opaque(self) -> bool:
        return self.alpha >= 1.0

    def to_hex(self) -> str:
        """`#RRGGBB` for opaque colors, `#RRGGBBAA` otherwise."""
        rgb = f"#{self.red:02X}{self.green:02X}{self.blue:02X}"
        if self.is_opaque:
            return rgb
        return f"{rgb}{round(self.alpha * 255):02X}"

    def to_rgba(self) -> tuple[float, float, float, float]:
        """Float RGBA tuple as accepted by matplotlib color arguments."""
        return (self.red / 255, self.green / 255, self.blue / 255, self.alpha)


class RelativeLength(BaseModel):
    """A length relative to the smaller canvas dimension (grid's `snpc` unit)."""

    model_config = ConfigDict(frozen=True)

    value: float = Field(ge=0.0)
    unit: Literal["snpc"] = "snpc"

    def to_absolute(self, width: float, height: float) -> float:
        """Resolve against a canvas of the given size, in the same units."""
        return self.value * min(width, height)


class LayoutRecord(BaseModel):
    """
    Inset rectangle in the canvas unit square.

    `(x, y)` is the center of a `w` by `h` rectangle; `(0, 0)` is the
    bottom-left corner of the canvas and `(1, 1)` the top-right. Values are
    not clamped, so a record built from oversized inputs may leave the canvas.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    w: float
    h: float
    x: float
    y: float

    def to_bounds(self) -> tuple[float, float, float, float]:
        """`(left, bottom, width, height)` as taken by `Figure.add_axes`."""
        return (self.x - self.w / 2, self.y - self.h / 2, self.w, self.h)

    def is_within_canvas(self) -> bool:
        left, bottom, width, height = self.to_bounds()
        return (
            left >= -_CANVAS_TOLERANCE
            and bottom >= -_CANVAS_TOLERANCE
            and left + width <= 1 + _CANVAS_TOLERANCE
            and bottom + height <= 1 + _CANVAS_TOLERANCE
        )


class BackgroundStyle(BaseModel):
    """Panel drawn behind an inset plot. A `None` color draws nothing."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    fill: Optional[RGBAColor] = None
    border_color: Optional[RGBAColor] = Field(
        default=None, validation_alias=AliasChoices("border_color", "col")
    )
    corner_radius: RelativeLength = Field(
        default=RelativeLength(value=0.0),
        validation_alias=AliasChoices("corner_radius", "r"),
    )

    @field_validator("fill", "border_color", mode="before")
    @classmethod
    def parse_hex_color(cls, v: Any) -> Any:
        if isinstance(v, str):
            return RGBAColor.from_hex(v)
        return v

    @field_validator("corner_radius", mode="before")
    @classmethod
    def parse_bare_radius(cls, v: Any) -> Any:
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return {"value": v}
        return v

    @property
    def is_blank(self) -> bool:
        return self.fill is None and self.border_color is None

    def to_patch_kwargs(
        self, canvas_width: float = 1.0, canvas_height: float = 1.0
    ) -> dict[str, Any]:
        """
        Keyword arguments for a `matplotlib.patches.FancyBboxPatch` panel.

        The corner radius is resolved against `canvas_width` and
        `canvas_height`, which must be in the coordinate units the patch is
        drawn in.
        """
        radius = self.corner_radius.to_absolute(canvas_width, canvas_height)
        if radius > 0:
            boxstyle = f"round,pad=0,rounding_size={radius}"
        else:
            boxstyle = "square,pad=0"

        return {
            "boxstyle": boxstyle,
            "facecolor": self.fill.to_rgba() if self.fill is not None else "none",
            "edgecolor": self.border_color.to_rgba() if self.border_color is not None else "none",
            "visible": not self.is_blank,
        }


class InsetSpec(BaseModel):
    """Resolved position and background for one inset plot."""

    model_config = ConfigDict(frozen=True)

    position: LayoutRecord
    background: BackgroundStyle
