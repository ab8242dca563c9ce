"""Template parsing and placeholder validation.

Splits a template such as ``"v{major}.{minor}"`` into its literal parts
and placeholder names, rejecting anything that could not be compiled
into an unambiguous matcher::

    parse_template("v{major}.{minor}")
    -> ParsedTemplate(
           raw="v{major}.{minor}",
           generalized="v{}.{}",
           literal_parts=("v", ".", ""),
           names=("major", "minor"),
       )
"""

import re
from dataclasses import dataclass

from pathstep.errors import DuplicatePlaceholder, IllegalIdentifier, MalformedTemplate

# Stands in for every placeholder in the generalized form
MARKER = "{}"

# A ``{...}`` span whose body holds no further braces
PLACEHOLDER = re.compile(r"\{([^{}]*)\}")

_IDENTIFIER = re.compile(r"[^\W\d]\w*")


def is_identifier(name: str) -> bool:
    """Return True if *name* can be used as a placeholder name.

    A letter or underscore followed by letters, digits or underscores.
    """
    return _IDENTIFIER.fullmatch(name) is not None and name.isidentifier()


@dataclass(frozen=True, slots=True)
class ParsedTemplate:
    """Structure of a validated template, before matcher compilation."""

    raw: str
    generalized: str
    literal_parts: tuple[str, ...]
    names: tuple[str, ...]


def _literal(raw: str, start: int, end: int) -> str:
    """Slice a literal part out of *raw*, rejecting leftover braces."""
    text = raw[start:end]
    for offset, char in enumerate(text):
        if char == "{":
            raise MalformedTemplate(
                template=raw,
                detail="Unterminated placeholder",
                position=start + offset,
            )
        if char == "}":
            raise MalformedTemplate(
                template=raw,
                detail="Unmatched '}'",
                position=start + offset,
            )
    return text


def parse_template(raw: str) -> ParsedTemplate:
    """Parse and validate a template string.

    Raises ``MalformedTemplate`` for unbalanced braces, empty or
    adjacent placeholders, ``IllegalIdentifier`` for a bad name and
    ``DuplicatePlaceholder`` when a name is reused.
    """
    parts: list[str] = []
    spans: list[tuple[str, int]] = []
    cursor = 0

    for m in PLACEHOLDER.finditer(raw):
        parts.append(_literal(raw, cursor, m.start()))
        spans.append((m.group(1), m.start()))
        cursor = m.end()
    parts.append(_literal(raw, cursor, len(raw)))

    # Two greedy captures need a literal between them to be told apart
    for index in range(1, len(parts) - 1):
        if not parts[index]:
            first, _ = spans[index - 1]
            second, position = spans[index]
            raise MalformedTemplate(
                template=raw,
                detail=f"Consecutive placeholders {{{first}}}{{{second}}}",
                position=position,
            )

    seen: set[str] = set()
    for name, position in spans:
        if not name:
            raise MalformedTemplate(
                template=raw,
                detail="Empty placeholder",
                position=position,
            )
        if not is_identifier(name):
            raise IllegalIdentifier(raw, name, position)
        if name in seen:
            raise DuplicatePlaceholder(raw, name, position)
        seen.add(name)

    return ParsedTemplate(
        raw=raw,
        generalized=MARKER.join(parts),
        literal_parts=tuple(parts),
        names=tuple(name for name, _ in spans),
    )
