"""Find intent: locate elements in a document, or entries in the context.

Handles:
    "find all elements with class button"
    "find dom nodes having id main"
    "search for elements that has class item"
    "search for users with age 30"     (context search, not implemented)
"""

from talktocode.intents.parse import Intent
from talktocode.intents.template import TemplatePattern
from talktocode.results import ErrorKind, ErrorResult

_PATTERNS = (
    TemplatePattern("find {all} $target [with|that has|having] $condition"),
    TemplatePattern("search {for} $target [with|that has|having] $condition"),
)


def handle(fields, context, dom=None):
    target = fields["target"].lower()
    condition = fields["condition"]
    if "dom" in target or "element" in target:
        if dom is None:
            return ErrorResult(kind=ErrorKind.UNAVAILABLE, message="DOM not available")
        return dom.query(condition)
    return find_in_context(target, condition, context)


def find_in_context(target, condition, context):
    # TODO: match condition ("age 30", "name John") against entries under target.
    return ErrorResult(kind=ErrorKind.UNIMPLEMENTED,
                       message="Advanced context searching not implemented yet")


INTENT = Intent(name="find", patterns=_PATTERNS, handler=handle)
