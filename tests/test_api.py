"""Tests for the module-level helpers and the command-line entry point."""

import pytest

import talktocode
from talktocode import __main__ as cli
from talktocode.intents.router import Interpreter


@pytest.fixture
def default(monkeypatch, presenter):
    tt = Interpreter(presenter=presenter, log_path=None)
    monkeypatch.setattr(talktocode, "_default", tt)
    return tt


def test_module_level_helpers(default):
    assert talktocode.set_context({"counter": 42, "sum": lambda a, b: a + b})
    assert talktocode.add_to_context({"extra": 1})
    assert talktocode.talk("what is counter") == 42
    assert talktocode.talk("call sum with 3, 4") == 7
    assert talktocode.get_context()["extra"] == 1
    assert talktocode.default_interpreter() is default


def test_module_level_rejection(default):
    assert talktocode.set_context("nope") is False
    assert talktocode.talk(None) is None


def test_parse_mode_output(capsys):
    cli._parse_cmd("call sum with 5, 7")
    assert capsys.readouterr().out.splitlines() == [
        "> call sum with 5, 7",
        "intent: call",
        "name: sum",
        "args: 5, 7",
    ]


def test_parse_mode_no_match(capsys):
    cli._parse_cmd("hello there")
    assert capsys.readouterr().out.splitlines() == ["> hello there", "intent: none"]


def test_demo_context_answers():
    tt = Interpreter(cli.demo_context(), log_path=None)
    assert tt.process("what is user.profile.city") == "Lisbon"
    assert tt.process("call greet with World") == "Hello World!"
    assert tt.process("what is items.1.label") == "pear"
