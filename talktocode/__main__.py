"""Entry point for `python -m talktocode`.

Usage:
    python -m talktocode                     # interactive prompt with a demo context
    python -m talktocode -parse call sum with 5, 7
"""

import sys

from talktocode.display import ConsolePresenter
from talktocode.intents.router import Interpreter


def log(msg):
    print(msg, flush=True)


def demo_context():
    """A small context to try commands against."""
    return {
        "counter": 42,
        "user": {
            "name": "John",
            "age": 30,
            "profile": {"city": "Lisbon", "languages": ["en", "pt"]},
        },
        "greet": lambda name: f"Hello {name}!",
        "sum": lambda a, b: a + b,
        "items": [{"id": 1, "label": "apple"}, {"id": 2, "label": "pear"}],
    }


def _parse_cmd(text):
    """Classify a single input and print the result in test_cases.txt format."""
    print(f"> {text}")
    hit = Interpreter(log_path=None).classify(text)
    if hit is None:
        print("intent: none")
        return
    p, _ = hit
    print(f"intent: {p.intent}")
    for key, val in p.fields.items():
        print(f"{key}: {val}")


def main():
    interpreter = Interpreter(presenter=ConsolePresenter())
    interpreter.set_context(demo_context())
    log('Type a command, e.g. "what is user.name" or "call sum with 3, 4". Ctrl-D to quit.\n')
    while True:
        try:
            text = input("talk> ")
        except (EOFError, KeyboardInterrupt):
            log("")
            break
        if text.strip().lower() in ("quit", "exit"):
            break
        if text.strip():
            interpreter.process(text, source="[repl]")


if __name__ == "__main__":
    if len(sys.argv) >= 3 and sys.argv[1] == "-parse":
        _parse_cmd(" ".join(sys.argv[2:]))
    else:
        main()
