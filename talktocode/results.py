"""Result values returned by the interpreter.

A command resolves either to a plain Python value (whatever the context
holds, or whatever a called function returned) or to an ErrorResult. Errors
are values, not exceptions: nothing raised inside the pipeline crosses the
Interpreter.process boundary.
"""

from dataclasses import dataclass, field
from enum import Enum


class ErrorKind(Enum):
    UNRESOLVED_PATH = "unresolved_path"
    MISSING_CONTAINER = "missing_container"
    RESOLUTION_FAULT = "resolution_fault"
    FUNCTION_NOT_FOUND = "function_not_found"
    INVOCATION_FAULT = "invocation_fault"
    UNIMPLEMENTED = "unimplemented"
    UNAVAILABLE = "unavailable"
    INVALID_SELECTOR = "invalid_selector"
    INTERNAL = "internal"


@dataclass
class ErrorResult:
    kind: ErrorKind
    message: str
    suggestions: list = field(default_factory=list)
    path: str = None
    args: list = None

    def to_dict(self):
        """Plain-dict form: {error, suggestions[, path][, args]}."""
        d = {"error": self.message, "suggestions": list(self.suggestions)}
        if self.path is not None:
            d["path"] = self.path
        if self.args is not None:
            d["args"] = list(self.args)
        return d

    def __str__(self):
        return self.message


def is_error(result):
    """True if result is an ErrorResult rather than a resolved value."""
    return isinstance(result, ErrorResult)
