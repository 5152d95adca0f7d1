"""Call intents: invoke a function found in the context.

Handles:
    "call sum with 5, 7"
    "run the greet using Alice"
    "execute math.pow with 2, 10"
    "call greeting"
    "run my reset"

Two intents share the trigger verbs. WITH_ARGS must be registered ahead of
NO_ARGS: the no-args template would otherwise capture "sum with 5, 7" as the
function name.
"""

from talktocode.arguments import parse_arguments
from talktocode.intents.parse import Intent
from talktocode.intents.template import TemplatePattern
from talktocode.invoke import invoke
from talktocode.resolve import resolve
from talktocode.results import ErrorKind, ErrorResult
from talktocode.suggest import suggest_functions

_WITH_ARGS_PATTERNS = (
    TemplatePattern("call {the|my|our} $name [with|using] $args"),
    TemplatePattern("run {the|my|our} $name [with|using] $args"),
    TemplatePattern("execute {the|my|our} $name [with|using] $args"),
)

_NO_ARGS_PATTERNS = (
    TemplatePattern("call {the|my|our} $name"),
    TemplatePattern("run {the|my|our} $name"),
    TemplatePattern("execute {the|my|our} $name"),
)


def find_function(name, context):
    """Resolve name to a callable, or an ErrorResult with suggestions."""
    fn = resolve(name, context)
    if not callable(fn):
        return ErrorResult(
            kind=ErrorKind.FUNCTION_NOT_FOUND,
            message=f'Could not find function "{name}"',
            suggestions=suggest_functions(name, context),
            path=name)
    return fn


def handle_with_args(fields, context, dom=None):
    fn = find_function(fields["name"], context)
    if not callable(fn):
        return fn
    return invoke(fn, parse_arguments(fields["args"]))


def handle_no_args(fields, context, dom=None):
    fn = find_function(fields["name"], context)
    if not callable(fn):
        return fn
    return invoke(fn, [])


WITH_ARGS = Intent(name="call", patterns=_WITH_ARGS_PATTERNS, handler=handle_with_args)
NO_ARGS = Intent(name="call_no_args", patterns=_NO_ARGS_PATTERNS, handler=handle_no_args)
