"""Compiled path-segment templates.

A Step is built once from a template string and then matched against
any number of concrete segments::

    step = compile_step("start{a}middle{b}end")
    step.match("startAmiddleBend")   -> ("A", "B")
    step.match("elsewhere")          -> None

Steps are frozen. Two compilations of the same template compare equal
even though each holds its own compiled pattern.
"""

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field

from pathstep.config import DEFAULT_CONFIG, StepConfig
from pathstep.errors import MalformedTemplate
from pathstep.parsing import ParsedTemplate, parse_template

logger = logging.getLogger("pathstep.step")


@dataclass(frozen=True, slots=True)
class Step:
    """A validated template with its compiled matcher.

    ``literal_parts`` always holds one more entry than ``names``; the
    template is ``literal_parts[0] {names[0]} literal_parts[1] ...``.
    """

    raw: str
    generalized: str
    literal_parts: tuple[str, ...]
    names: tuple[str, ...]
    matcher: re.Pattern[str] = field(compare=False, repr=False)

    @classmethod
    def compile(cls, raw: str, config: StepConfig | None = None) -> "Step":
        """Alias for :func:`compile_step`."""
        return compile_step(raw, config)

    @property
    def is_static(self) -> bool:
        """True when the template has no placeholders."""
        return not self.names

    def match(self, segment: str) -> tuple[str, ...] | None:
        """Match a whole segment, returning captures in ``names`` order.

        Returns ``None`` when the segment does not fit the template.
        """
        m = self.matcher.fullmatch(segment)
        if m is None:
            return None
        return tuple(m.group(name) for name in self.names)

    def match_params(self, segment: str) -> dict[str, str] | None:
        """Like :meth:`match`, but keyed by placeholder name."""
        values = self.match(segment)
        if values is None:
            return None
        return dict(zip(self.names, values, strict=True))

    def expand(self, values: Mapping[str, str]) -> str:
        """Fill the placeholders with *values* to build a concrete segment.

        Raises ``KeyError`` for a missing name and ``ValueError`` for an
        empty value, which no placeholder could have captured.
        """
        pieces = [self.literal_parts[0]]
        for name, literal in zip(self.names, self.literal_parts[1:], strict=True):
            value = str(values[name])
            if not value:
                msg = f"Placeholder {{{name}}} needs a non-empty value."
                raise ValueError(msg)
            pieces.append(value)
            pieces.append(literal)
        return "".join(pieces)

    def __str__(self) -> str:
        return self.raw


def build_pattern(parsed: ParsedTemplate, config: StepConfig = DEFAULT_CONFIG) -> str:
    """Build the matcher source for a parsed template.

    Each placeholder becomes ``(?P<name>capture_pattern)``; literal parts
    are escaped unless ``config.escape_literals`` is off.
    """
    quote = re.escape if config.escape_literals else str
    pieces = [quote(parsed.literal_parts[0])]
    for name, literal in zip(parsed.names, parsed.literal_parts[1:], strict=True):
        pieces.append(f"(?P<{name}>{config.capture_pattern})")
        pieces.append(quote(literal))
    return "".join(pieces)


def compile_step(raw: str, config: StepConfig | None = None) -> Step:
    """Parse, validate and compile *raw* into a Step.

    Raises a ``TemplateError`` subclass when the template is rejected;
    nothing is returned in that case.
    """
    config = config or DEFAULT_CONFIG
    parsed = parse_template(raw)
    source = build_pattern(parsed, config)

    try:
        matcher = re.compile(source, re.DOTALL)
    except re.error as exc:
        # Only reachable with unescaped literals
        raise MalformedTemplate(
            template=raw,
            detail=f"Literal text is not a valid pattern ({exc.msg})",
        ) from exc

    logger.debug("Compiled step %r as %r", raw, source)
    return Step(
        raw=parsed.raw,
        generalized=parsed.generalized,
        literal_parts=parsed.literal_parts,
        names=parsed.names,
        matcher=matcher,
    )
