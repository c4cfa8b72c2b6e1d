from typing import Any, Sequence


class InsetTemplateError(ValueError):
    """Base exception for invalid inset template requests."""

    pass


class InvalidFamilyError(InsetTemplateError):
    """Raised when a template family other than position/background is requested."""

    def __init__(self, family: Any, valid: Sequence[str]):
        self.family = family
        self.valid = tuple(valid)
        super().__init__(
            f"Invalid inset template family: {family!r}. "
            f"Expected one of: {', '.join(self.valid)}"
        )


class InvalidTemplateError(InsetTemplateError):
    """Raised when a template name is not part of its family."""

    def __init__(self, family: str, template: Any, valid: Sequence[str]):
        self.family = family
        self.template = template
        self.valid = tuple(valid)
        super().__init__(
            f"Invalid inset {family} template: {template!r}. "
            f"Available templates: {', '.join(self.valid)}"
        )


class InvalidArgumentShapeError(InsetTemplateError):
    """Raised when size or margin is neither a scalar nor a pair."""

    def __init__(self, argument: str, value: Any):
        self.argument = argument
        self.value = value
        super().__init__(
            f"`{argument}` must be a number or a sequence of one or two numbers, "
            f"got {value!r}"
        )


class InvalidInsetOverrideError(InsetTemplateError):
    """Raised when a free-form position or background override does not validate."""

    def __init__(self, kind: str, detail: str):
        self.kind = kind
        self.detail = detail
        super().__init__(f"Invalid inset {kind} override: {detail}")
