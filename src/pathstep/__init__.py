"""pathstep — compile ``{name}`` path-segment templates into matchers.

Basic usage::

    from pathstep import compile_step

    step = compile_step("v{major}.{minor}")
    step.match("v3.12")         # ("3", "12")
    step.match_params("v3.12")  # {"major": "3", "minor": "12"}
    step.match("latest")        # None

Rejected templates raise a ``TemplateError`` subclass::

    compile_step("{a}{b}")      # MalformedTemplate: consecutive placeholders
"""

import importlib

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "DuplicatePlaceholder",
    "IllegalIdentifier",
    "MalformedTemplate",
    "PathStepError",
    "Step",
    "StepConfig",
    "TemplateError",
    "compile_step",
    "is_identifier",
    "parse_template",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "Step": "pathstep.step",
    "compile_step": "pathstep.step",
    "StepConfig": "pathstep.config",
    "is_identifier": "pathstep.parsing",
    "parse_template": "pathstep.parsing",
    "ConfigurationError": "pathstep.errors",
    "DuplicatePlaceholder": "pathstep.errors",
    "IllegalIdentifier": "pathstep.errors",
    "MalformedTemplate": "pathstep.errors",
    "PathStepError": "pathstep.errors",
    "TemplateError": "pathstep.errors",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import pathstep`` fast while providing a flat top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(importlib.import_module(module_name), name)
