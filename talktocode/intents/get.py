"""Get intent: read a value out of the context.

Handles:
    "what is counter"
    "what's the user.name?"
    "show me user.profile"
    "display my settings.theme"
    "log the items.0"
"""

from talktocode.intents.parse import Intent
from talktocode.intents.template import TemplatePattern
from talktocode.resolve import resolve

_PATTERNS = (
    TemplatePattern("[what's|whats|what is] {in|the|my|our} $path", optional_suffix="?"),
    TemplatePattern("show {me} {the|my|our} $path", optional_suffix="?"),
    TemplatePattern("display {the|my|our} $path", optional_suffix="?"),
    TemplatePattern("log {the|my|our} $path", optional_suffix="?"),
)


def handle(fields, context, dom=None):
    return resolve(fields["path"], context)


INTENT = Intent(name="get", patterns=_PATTERNS, handler=handle)
