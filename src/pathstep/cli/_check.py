"""``pathstep check`` — compile a template and report how segments match.

Prints the template's structure, then one line per segment with its
bindings. Exits 1 if the template is rejected or any segment misses.
"""

import argparse
import logging
import sys

from pathstep.config import StepConfig
from pathstep.errors import ConfigurationError, TemplateError
from pathstep.step import Step, compile_step

logger = logging.getLogger("pathstep.cli")


def _build_config(args: argparse.Namespace) -> StepConfig:
    overrides: dict[str, object] = {}
    if args.no_escape:
        overrides["escape_literals"] = False
    if args.capture is not None:
        overrides["capture_pattern"] = args.capture
    return StepConfig(**overrides)


def _describe(step: Step) -> None:
    print(f"template:     {step.raw}")
    print(f"generalized:  {step.generalized}")
    print(f"literals:     {list(step.literal_parts)!r}")
    print(f"placeholders: {list(step.names)!r}")


def run_check(args: argparse.Namespace) -> None:
    """Compile ``args.template`` and match each of ``args.segments``."""
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        config = _build_config(args)
        step = compile_step(args.template, config)
    except (ConfigurationError, TemplateError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    _describe(step)
    if not args.segments:
        return

    print()
    misses = 0
    width = max(len(segment) for segment in args.segments)
    for segment in args.segments:
        params = step.match_params(segment)
        if params is None:
            misses += 1
            print(f"{segment:<{width}}  no match")
            continue
        bindings = " ".join(f"{name}={value}" for name, value in params.items())
        print(f"{segment:<{width}}  {bindings or 'match'}")

    logger.debug("%d of %d segments matched", len(args.segments) - misses, len(args.segments))
    if misses:
        raise SystemExit(1)
