from loguru import logger as log

from src.services.meme.inset.models import (
    BackgroundStyle,
    RelativeLength,
    RGBAColor,
    TemplateFamily,
)
from src.services.meme.inset.templates import ensure_template

OPAQUE_WHITE = RGBAColor(red=255, green=255, blue=255, alpha=1.0)
TRANSLUCENT_WHITE = RGBAColor(red=255, green=255, blue=255, alpha=0.5)

ROUNDED_CORNERS = RelativeLength(value=0.025)
SQUARE_CORNERS = RelativeLength(value=0.0)

# All variants derive from "default": "op" is opaque, "sq" has square corners
_BACKGROUND_STYLES: dict[str, BackgroundStyle] = {
    "default": BackgroundStyle(fill=TRANSLUCENT_WHITE, corner_radius=ROUNDED_CORNERS),
    "op": BackgroundStyle(fill=OPAQUE_WHITE, corner_radius=ROUNDED_CORNERS),
    "sq": BackgroundStyle(fill=TRANSLUCENT_WHITE, corner_radius=SQUARE_CORNERS),
    "opsq": BackgroundStyle(fill=OPAQUE_WHITE, corner_radius=SQUARE_CORNERS),
    "blank": BackgroundStyle(fill=None, corner_radius=SQUARE_CORNERS),
}


def resolve_background(type: str = "default") -> BackgroundStyle:
    """
    Resolve a background template to the panel style drawn behind an inset.

    Raises:
        InvalidTemplateError: If `type` is not a background template.
    """
    ensure_template(TemplateFamily.BACKGROUND, type)
    style = _BACKGROUND_STYLES[type].model_copy()
    log.debug(f"Resolved inset background '{type}' -> {style}")
    return style
