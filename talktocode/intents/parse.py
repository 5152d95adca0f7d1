"""Intent and Parse records for the intent system.

An Intent is a name, an ordered tuple of TemplatePatterns and a handler.
Intent.parse(text) returns a Parse (or None); the router runs the handler of
the first Intent that parses the command.
"""

from dataclasses import dataclass, field

from talktocode.intents.template import match_first


@dataclass
class Parse:
    intent: str           # e.g. "get", "call", "call_no_args", "find"
    fields: dict = field(default_factory=dict)
    template: str = None  # the template that matched


@dataclass(frozen=True)
class Intent:
    name: str
    patterns: tuple
    handler: object       # handler(fields, context, dom) -> value or ErrorResult

    def parse(self, text):
        """First of this intent's patterns to match text, as a Parse, or None."""
        hit = match_first(self.patterns, text)
        if hit is None:
            return None
        pattern, fields = hit
        return Parse(intent=self.name, fields=fields, template=pattern.template)
