"""Registry of the named inset templates for each template family."""

from typing import Any

from src.services.meme.inset.errors import InvalidFamilyError, InvalidTemplateError
from src.services.meme.inset.models import TemplateFamily

POSITION_TEMPLATES: tuple[str, ...] = (
    "default",
    "tl",
    "tr",
    "br",
    "bl",
    "tlq",
    "trq",
    "brq",
    "blq",
    "center",
)

BACKGROUND_TEMPLATES: tuple[str, ...] = ("default", "op", "sq", "opsq", "blank")

_TEMPLATES_BY_FAMILY: dict[TemplateFamily, tuple[str, ...]] = {
    TemplateFamily.POSITION: POSITION_TEMPLATES,
    TemplateFamily.BACKGROUND: BACKGROUND_TEMPLATES,
}


def list_templates(family: str | TemplateFamily) -> tuple[str, ...]:
    """
    Return the template names available for a family, in display order.

    Args:
        family: "position" or "background".

    Raises:
        InvalidFamilyError: For any other family.
    """
    try:
        key = TemplateFamily(family)
    except ValueError:
        raise InvalidFamilyError(family, [f.value for f in TemplateFamily]) from None
    return _TEMPLATES_BY_FAMILY[key]


def ensure_template(family: str | TemplateFamily, template: Any) -> str:
    """Return `template` unchanged if it belongs to `family`, else raise InvalidTemplateError."""
    valid = list_templates(family)
    if not isinstance(template, str) or template not in valid:
        raise InvalidTemplateError(TemplateFamily(family).value, template, valid)
    return template
