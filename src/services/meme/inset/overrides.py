"""
Free-form inset overrides.

A meme inset can be described by a template name or by explicit values.
These helpers accept either and always hand back validated records, so a
compositor never has to care which form the caller used.
"""

from typing import Any, Mapping, Optional, Union

from loguru import logger as log
from pydantic import ValidationError

from common import global_config
from src.services.meme.inset.background import resolve_background
from src.services.meme.inset.errors import InvalidInsetOverrideError
from src.services.meme.inset.models import BackgroundStyle, InsetSpec, LayoutRecord
from src.services.meme.inset.position import PairInput, resolve_position

PositionInput = Union[str, LayoutRecord, Mapping[str, Any]]
BackgroundInput = Union[str, BackgroundStyle, Mapping[str, Any]]


def _validation_detail(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(loc) for loc in item['loc']) or 'value'}: {item['msg']}"
        for item in error.errors()
    )


def coerce_position(
    value: PositionInput,
    size: Optional[PairInput] = None,
    margin: Optional[PairInput] = None,
) -> LayoutRecord:
    """
    Turn a template name, a LayoutRecord or a `{w, h, x, y}` mapping into a LayoutRecord.

    `size` and `margin` only apply to template names; when omitted they come
    from the `inset` section of the global config.

    Raises:
        InvalidTemplateError: For an unknown template name.
        InvalidInsetOverrideError: For a mapping that is not a complete layout.
    """
    if isinstance(value, LayoutRecord):
        return value
    if isinstance(value, str):
        return resolve_position(
            value,
            size=global_config.inset.default_size if size is None else size,
            margin=global_config.inset.default_margin if margin is None else margin,
        )
    if isinstance(value, Mapping):
        try:
            record = LayoutRecord.model_validate(dict(value))
        except ValidationError as e:
            raise InvalidInsetOverrideError("position", _validation_detail(e)) from e
        log.debug(f"Using custom inset position {record}")
        return record
    raise InvalidInsetOverrideError(
        "position",
        f"expected a template name, LayoutRecord or mapping, got {type(value).__name__}",
    )


def coerce_background(value: BackgroundInput) -> BackgroundStyle:
    """
    Turn a template name, a BackgroundStyle or a mapping into a BackgroundStyle.

    Mappings take `fill`, `border_color` (or `col`) and `corner_radius` (or
    `r`). Colors may be hex strings or None, and a bare number for the radius
    is read as a fraction of the smaller canvas dimension.

    Raises:
        InvalidTemplateError: For an unknown template name.
        InvalidInsetOverrideError: For a mapping that does not validate.
    """
    if isinstance(value, BackgroundStyle):
        return value
    if isinstance(value, str):
        return resolve_background(value)
    if isinstance(value, Mapping):
        try:
            style = BackgroundStyle.model_validate(dict(value))
        except ValidationError as e:
            raise InvalidInsetOverrideError("background", _validation_detail(e)) from e
        log.debug(f"Using custom inset background {style}")
        return style
    raise InvalidInsetOverrideError(
        "background",
        f"expected a template name, BackgroundStyle or mapping, got {type(value).__name__}",
    )


def resolve_inset(
    position: Optional[PositionInput] = None,
    background: Optional[BackgroundInput] = None,
    size: Optional[PairInput] = None,
    margin: Optional[PairInput] = None,
) -> InsetSpec:
    """Resolve both halves of an inset, falling back to the configured default templates."""
    inset_config = global_config.inset
    return InsetSpec(
        position=coerce_position(
            inset_config.default_position if position is None else position,
            size=size,
            margin=margin,
        ),
        background=coerce_background(
            inset_config.default_background if background is None else background
        ),
    )
