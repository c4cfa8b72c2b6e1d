"""
Inset position templates.

Every template resolves to a LayoutRecord in the canvas unit square. Corner
templates (`tl`, `tr`, `br`, `bl`) place a `size` thumbnail `margin` away from
the two nearest edges. Appending `q` gives a quadrant inset whose size is
derived from the margin so that four of them tile the canvas. `center` uses
`size` only, and `default` is a fixed wide panel along the bottom edge.
"""

from functools import partial
from numbers import Real
from typing import Callable, Sequence, Union

from loguru import logger as log

from common import global_config
from src.services.meme.inset.errors import InvalidArgumentShapeError
from src.services.meme.inset.models import LayoutRecord, TemplateFamily
from src.services.meme.inset.templates import ensure_template

Pair = tuple[float, float]
PairInput = Union[float, Sequence[float]]

DEFAULT_LAYOUT = LayoutRecord(w=0.95, h=0.6, x=0.5, y=0.325)

# (x side, y side) per corner; True means the far (right/top) edge
_CORNER_SIDES: dict[str, tuple[bool, bool]] = {
    "tl": (False, True),
    "tr": (True, True),
    "br": (True, False),
    "bl": (False, False),
}


def _is_number(item: object) -> bool:
    return isinstance(item, Real) and not isinstance(item, bool)


def as_pair(value: PairInput, argument: str) -> Pair:
    """
    Normalize a scalar or a one/two element sequence to an (x, y) pair.

    Raises:
        InvalidArgumentShapeError: If `value` is a string or bool, has any other
            length, or holds items that are not numbers.
    """
    if isinstance(value, Real) and not isinstance(value, bool):
        return (float(value), float(value))
    if isinstance(value, (str, bytes)):
        raise InvalidArgumentShapeError(argument, value)

    try:
        items = list(value)
    except TypeError:
        raise InvalidArgumentShapeError(argument, value) from None

    if len(items) == 1:
        items = items * 2
    if len(items) != 2 or not all(_is_number(item) for item in items):
        raise InvalidArgumentShapeError(argument, value)
    return (float(items[0]), float(items[1]))


def _fixed_default(size: Pair, margin: Pair) -> LayoutRecord:
    return DEFAULT_LAYOUT.model_copy()


def _corner(corner: str, size: Pair, margin: Pair) -> LayoutRecord:
    lower = (size[0] / 2 + margin[0], size[1] / 2 + margin[1])
    upper = (1 - lower[0], 1 - lower[1])
    far_x, far_y = _CORNER_SIDES[corner]
    return LayoutRecord(
        w=size[0],
        h=size[1],
        x=upper[0] if far_x else lower[0],
        y=upper[1] if far_y else lower[1],
    )


def _quadrant(corner: str, size: Pair, margin: Pair) -> LayoutRecord:
    # Size is ignored: a quadrant is half the canvas minus a margin on each side
    quadrant_size = (0.5 - 2 * margin[0], 0.5 - 2 * margin[1])
    return _corner(corner, quadrant_size, margin)


def _centered(size: Pair, margin: Pair) -> LayoutRecord:
    return LayoutRecord(w=size[0], h=size[1], x=0.5, y=0.5)


_POSITION_BUILDERS: dict[str, Callable[[Pair, Pair], LayoutRecord]] = {
    "default": _fixed_default,
    **{corner: partial(_corner, corner) for corner in _CORNER_SIDES},
    **{f"{corner}q": partial(_quadrant, corner) for corner in _CORNER_SIDES},
    "center": _centered,
}


def resolve_position(
    type: str = "default",
    size: PairInput = 0.2,
    margin: PairInput = 0.025,
) -> LayoutRecord:
    """
    Resolve a position template to an inset rectangle.

    Args:
        type: Name of a position template, see `list_templates("position")`.
        size: Inset width, or (width, height). Used by corner and center templates.
        margin: Distance from the edges, or (x margin, y margin). Used by
            corner and quadrant templates.

    Returns:
        A new LayoutRecord. Out-of-range size or margin values are passed
        through, so the rectangle may extend beyond the canvas.

    Raises:
        InvalidTemplateError: If `type` is not a position template.
        InvalidArgumentShapeError: If size or margin is not one or two numbers.
    """
    ensure_template(TemplateFamily.POSITION, type)
    size_pair = as_pair(size, "size")
    margin_pair = as_pair(margin, "margin")

    record = _POSITION_BUILDERS[type](size_pair, margin_pair)
    log.debug(f"Resolved inset position '{type}' -> {record}")

    if global_config.inset.warn_out_of_bounds and not record.is_within_canvas():
        log.warning(
            f"Inset position '{type}' with size={size_pair} margin={margin_pair} "
            f"extends beyond the canvas: {record.to_bounds()}"
        )
    return record
