"""
Meme inset templates.

Position and background presets for the optional plot drawn on top of a meme
image. Use `list_templates` to discover the names, `resolve_position` and
`resolve_background` to turn them into values, or `resolve_inset` to accept
either a template name or explicit values for each half.
"""

from .background import resolve_background
from .errors import (
    InsetTemplateError,
    InvalidArgumentShapeError,
    InvalidFamilyError,
    InvalidInsetOverrideError,
    InvalidTemplateError,
)
from .models import (
    BackgroundStyle,
    InsetSpec,
    LayoutRecord,
    RelativeLength,
    RGBAColor,
    TemplateFamily,
)
from .overrides import coerce_background, coerce_position, resolve_inset
from .position import as_pair, resolve_position
from .templates import BACKGROUND_TEMPLATES, POSITION_TEMPLATES, list_templates

__all__ = [
    # Registry
    "list_templates",
    "POSITION_TEMPLATES",
    "BACKGROUND_TEMPLATES",
    "TemplateFamily",
    # Resolvers
    "resolve_position",
    "resolve_background",
    "as_pair",
    # Overrides
    "coerce_position",
    "coerce_background",
    "resolve_inset",
    # Values
    "LayoutRecord",
    "BackgroundStyle",
    "InsetSpec",
    "RGBAColor",
    "RelativeLength",
    # Errors
    "InsetTemplateError",
    "InvalidFamilyError",
    "InvalidTemplateError",
    "InvalidArgumentShapeError",
    "InvalidInsetOverrideError",
]
