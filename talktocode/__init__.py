"""TalkToCode: ask a running program about itself in plain English.

    >>> from talktocode import Interpreter
    >>> tt = Interpreter({"counter": 42, "sum": lambda a, b: a + b}, log_path=None)
    >>> tt.process("what is the counter?")
    42
    >>> tt.process("call sum with 5, 7")
    12

The module-level talk/set_context/add_to_context functions drive one shared
interpreter that prints to the console.
"""

from talktocode.arguments import ArgumentKind, ParsedArgument, coerce_arguments, parse_arguments
from talktocode.display import ConsolePresenter, NullPresenter, Presenter
from talktocode.dom import DomQuery
from talktocode.intents.router import Interpreter
from talktocode.results import ErrorKind, ErrorResult, is_error

__version__ = "0.1.0"

_default = None


def default_interpreter():
    """The shared interpreter behind talk(), created on first use."""
    global _default
    if _default is None:
        _default = Interpreter(presenter=ConsolePresenter())
    return _default


def talk(command, source="[text]"):
    return default_interpreter().process(command, source=source)


def set_context(context):
    return default_interpreter().set_context(context)


def add_to_context(additional):
    return default_interpreter().add_to_context(additional)


def get_context():
    return default_interpreter().context


__all__ = [
    "Interpreter", "talk", "set_context", "add_to_context", "get_context",
    "default_interpreter", "ErrorResult", "ErrorKind", "is_error",
    "Presenter", "ConsolePresenter", "NullPresenter", "DomQuery",
    "ArgumentKind", "ParsedArgument", "coerce_arguments", "parse_arguments",
]
