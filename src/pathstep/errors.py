"""pathstep exception hierarchy.

Every construction failure is a ``TemplateError``; catch that to treat
them as one kind, or catch a subclass to tell them apart.
"""

from dataclasses import dataclass


class PathStepError(Exception):
    """Base for all pathstep-specific errors."""


class ConfigurationError(PathStepError):
    """Raised when a ``StepConfig`` is invalid."""


@dataclass(frozen=True, slots=True)
class TemplateError(PathStepError):
    """A template string was rejected while compiling a Step.

    ``position`` is the offset into ``template`` where the problem was
    found, when there is one.
    """

    template: str
    detail: str = "Invalid syntax"
    position: int | None = None

    def __str__(self) -> str:
        message = f"{self.detail} in template {self.template!r}"
        if self.position is not None:
            return f"{message} at offset {self.position}"
        return message


class MalformedTemplate(TemplateError):  # noqa: N818
    """Unbalanced braces, an empty placeholder, or adjacent placeholders."""


class IllegalIdentifier(TemplateError):  # noqa: N818
    """A placeholder body is not a valid identifier."""

    def __init__(self, template: str, name: str, position: int | None = None) -> None:
        super().__init__(
            template=template,
            detail=f"Illegal placeholder name {name!r}",
            position=position,
        )
        object.__setattr__(self, "name", name)


class DuplicatePlaceholder(TemplateError):  # noqa: N818
    """The same placeholder name appears twice in one template."""

    def __init__(self, template: str, name: str, position: int | None = None) -> None:
        super().__init__(
            template=template,
            detail=f"Duplicate placeholder {{{name}}}",
            position=position,
        )
        object.__setattr__(self, "name", name)
