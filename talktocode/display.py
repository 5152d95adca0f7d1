"""Presentation sink: renders interpreter results for a human.

The interpreter calls present() exactly once per processed command and
notice() for context changes and rejected input. It never looks at what
either returns.
"""

from collections.abc import Mapping

from rich.console import Console
from rich.markup import escape
from rich.pretty import Pretty
from rich.table import Table
from rich.text import Text

from talktocode.resolve import is_container
from talktocode.results import is_error

USAGE_HINT = 'Try phrases like: "what is myVariable" or "call myFunction with param1"'

_NOTICE_STYLES = {"info": "cyan", "warning": "yellow", "error": "bold red"}


class Presenter:
    """Sink interface. The base class renders nothing."""

    def present(self, result, intent_name, command):
        """Render one processed command. intent_name is None if nothing matched."""

    def notice(self, message, level="info"):
        """Render a one-line message outside of any command."""


NullPresenter = Presenter


class ConsolePresenter(Presenter):
    """Renders results to a terminal with rich."""

    def __init__(self, console=None, max_depth=3):
        self.console = console or Console()
        self.max_depth = max_depth

    def present(self, result, intent_name, command):
        self.console.rule(f"🗣️ {escape(command)}", align="left")

        if intent_name is None:
            self.console.print(f"[yellow]🤔 I'm not sure how to process: \"{escape(command)}\"[/yellow]")
            self.console.print(escape(USAGE_HINT), style="dim")
            return

        if is_error(result):
            self.console.print(f"[bold red]❌ {escape(result.message)}[/bold red]")
            if result.suggestions:
                self.console.print("💡 Did you mean one of these?")
                for s in result.suggestions:
                    self.console.print(f"   • {escape(s)}")
        elif isinstance(result, (list, tuple)):
            self.console.print(f"📊 Found {len(result)} results:")
            if result:
                self.console.print(_table(result))
        elif isinstance(result, Mapping) or is_container(result):
            self.console.print("📦 Result:")
            self.console.print(Pretty(result, max_depth=self.max_depth))
        else:
            self.console.print("✅ Result:", Text(str(result)))

    def notice(self, message, level="info"):
        style = _NOTICE_STYLES.get(level, "")
        self.console.print(Text(f"🗣️ {message}", style=style))


def _table(rows):
    """Tabulate a sequence: one column per key if every row is a mapping,
    otherwise index and value columns."""
    table = Table(show_header=True, header_style="bold")
    if all(isinstance(r, Mapping) for r in rows):
        columns = []
        for r in rows:
            for key in r:
                if key not in columns:
                    columns.append(key)
        table.add_column("#", justify="right", style="dim")
        for col in columns:
            table.add_column(str(col))
        for i, r in enumerate(rows):
            table.add_row(str(i), *(Text(str(r.get(c, ""))) for c in columns))
    else:
        table.add_column("#", justify="right", style="dim")
        table.add_column("value")
        for i, r in enumerate(rows):
            table.add_row(str(i), Text(str(r)))
    return table
