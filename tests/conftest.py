import pytest

from talktocode.display import Presenter
from talktocode.intents.router import Interpreter


class RecordingPresenter(Presenter):
    """Collects what the interpreter sends to the sink."""

    def __init__(self):
        self.presented = []   # (result, intent_name, command)
        self.notices = []     # (message, level)

    def present(self, result, intent_name, command):
        self.presented.append((result, intent_name, command))

    def notice(self, message, level="info"):
        self.notices.append((message, level))


def sample_context():
    def fail():
        raise ValueError("something broke")

    return {
        "testVar": "test value",
        "counter": 42,
        "user": {"name": "John", "profile": {"age": 30}},
        "greeting": lambda: "Hello!",
        "greetUser": lambda name: f"Hello, {name}!",
        "sum": lambda a, b: a + b,
        "fail": fail,
    }


@pytest.fixture
def presenter():
    return RecordingPresenter()


@pytest.fixture
def interpreter(presenter):
    tt = Interpreter(presenter=presenter, log_path=None)
    tt.set_context(sample_context())
    presenter.notices.clear()
    return tt
