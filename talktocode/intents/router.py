"""Command router: classifies a command against the intent registry and runs it.

Intents are tried in ALL_INTENTS order and, within an intent, pattern by
pattern. The first pattern that matches the whole command wins; nothing
after it is tried, even if it would also match.

Each Interpreter owns its context. Two interpreters never share state.
"""

import os
from collections.abc import Mapping
from datetime import datetime

from talktocode.display import Presenter
from talktocode.dom import DomQuery
from talktocode.intents import ALL_INTENTS
from talktocode.resolve import container_keys, is_container, lookup
from talktocode.results import ErrorKind, ErrorResult, is_error

# Log file: lives next to the talktocode package directory
_LOG_PATH = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "talktocode.log")


class Interpreter:
    """Interprets natural-language commands against a context it owns."""

    def __init__(self, context=None, presenter=None, log_path=_LOG_PATH, document=None,
                 intents=ALL_INTENTS):
        self.context = {} if context is None else context
        self.presenter = presenter or Presenter()
        self.log_path = log_path
        self.dom = DomQuery(document)
        self.intents = tuple(intents)

    # --- Context ---

    def set_context(self, context):
        """Replace the context wholesale. Returns False (and changes nothing)
        if context is not a mapping or object."""
        if not is_container(context):
            self.presenter.notice("Context must be a mapping or object", level="error")
            return False
        self.context = context
        self.presenter.notice(f"Context set with {len(container_keys(context))} items")
        return True

    def add_to_context(self, additional):
        """Shallow-merge additional's top-level keys into the context; on a
        clash, additional wins."""
        if not is_container(additional):
            self.presenter.notice("Additional context must be a mapping or object", level="error")
            return False
        merged = dict(_items(self.context))
        merged.update(_items(additional))
        self.context = merged
        self.presenter.notice(f"Added {len(container_keys(additional))} items to context")
        return True

    # --- Commands ---

    def classify(self, command):
        """Return (parse, intent) for the first intent pattern matching command, or None."""
        for intent in self.intents:
            p = intent.parse(command)
            if p is not None:
                return p, intent
        return None

    def process(self, command, source="[text]"):
        """Run one command. Returns its value, an ErrorResult, or None if the
        command was empty or not recognized.

        Args:
            command: Command text, e.g. "call sum with 5, 7".
            source: Source tag for the request log, e.g. "[voice]" or "[repl]".
        """
        if not isinstance(command, str) or not command.strip():
            self.presenter.notice("Please provide a valid command string", level="error")
            return None

        hit = self.classify(command)
        if hit is None:
            self._log_request(command, None, None, source)
            self.presenter.present(None, None, command)
            return None

        p, intent = hit
        try:
            result = intent.handler(p.fields, self.context, self.dom)
        except Exception as e:
            result = ErrorResult(kind=ErrorKind.INTERNAL, message=str(e) or type(e).__name__)

        self._log_request(command, p, result, source)
        self.presenter.present(result, p.intent, command)
        return result

    def _log_request(self, text, parse, result, source):
        """Append a compact 2-line entry to the log file."""
        if self.log_path is None:
            return
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        if parse is None:
            parse_line = "  -> none"
        else:
            parts = [parse.intent]
            for k, v in parse.fields.items():
                parts.append(f"{k}={v!r}")
            if is_error(result):
                parts.append(f"error={result.kind.value}")
            parse_line = f"  -> {', '.join(parts)}"
        try:
            with open(self.log_path, "a") as f:
                f.write(f"{ts} {source}  {text}\n{parse_line}\n")
        except OSError:
            pass


def _items(obj):
    """Top-level (key, value) pairs of a mapping or object. Attributes whose
    lookup raises are left out."""
    if isinstance(obj, Mapping):
        return list(obj.items())
    items = []
    for key in container_keys(obj):
        try:
            found, value = lookup(obj, key)
        except Exception:
            continue
        if found:
            items.append((key, value))
    return items
