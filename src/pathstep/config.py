"""Step compilation settings.

StepConfig is a frozen dataclass, validated once on creation and shared
freely afterwards.
"""

import re
from dataclasses import dataclass

from pathstep.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class StepConfig:
    """How templates are turned into matchers. Immutable after creation.

    The defaults match literal text literally and let each placeholder
    capture one or more of any character::

        config = StepConfig(capture_pattern=r"[^/]+")
    """

    # Escape literal parts before embedding them in the matcher. With
    # False, literal text such as ``.`` or ``(a|b)`` is pattern syntax.
    escape_literals: bool = True

    # Sub-pattern substituted for every placeholder
    capture_pattern: str = ".+"

    def __post_init__(self) -> None:
        try:
            compiled = re.compile(self.capture_pattern, re.DOTALL)
        except re.error as exc:
            msg = f"capture_pattern {self.capture_pattern!r} does not compile: {exc}"
            raise ConfigurationError(msg) from exc

        if compiled.groups:
            msg = (
                f"capture_pattern {self.capture_pattern!r} must not contain "
                "capturing groups; use (?:...) instead."
            )
            raise ConfigurationError(msg)

        if compiled.fullmatch("") is not None:
            msg = (
                f"capture_pattern {self.capture_pattern!r} matches the empty "
                "string; placeholders must capture at least one character."
            )
            raise ConfigurationError(msg)


DEFAULT_CONFIG = StepConfig()
