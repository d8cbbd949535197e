"""Console reporter for runner output using Rich."""

from __future__ import annotations

from typing import TextIO

from rich.console import Console

from tdd.reports.base import Reporter


def _make_console(file: TextIO | None = None) -> Console:
    # Markup and highlighting off so terminal output keeps brackets and colons.
    force_terminal = file.isatty() if file is not None else None
    return Console(
        file=file,
        force_terminal=force_terminal,
        markup=False,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )


class ConsoleReporter(Reporter):
    """Reporter that writes status lines to a Rich console.

    Colors are applied only when the console is attached to a terminal.
    Otherwise text is written to the console's file unchanged, keeping tabs
    and carriage returns in reasons.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or _make_console()

    @classmethod
    def for_stream(cls, stream: TextIO) -> ConsoleReporter:
        return cls(_make_console(stream))

    def emit(self, text: str, style: str | None = None) -> None:
        if self.console.is_terminal:
            self.console.print(text, style=style)
            return
        file = self.console.file
        file.write(f"{text}\n")
        file.flush()


_default_reporter: Reporter | None = None


def get_reporter() -> Reporter:
    """Get the process-wide reporter, writing to stdout by default."""
    global _default_reporter
    if _default_reporter is None:
        _default_reporter = ConsoleReporter()
    return _default_reporter


def set_reporter(reporter: Reporter | None) -> None:
    """Replace the process-wide reporter; ``None`` restores stdout."""
    global _default_reporter
    _default_reporter = reporter


def set_out_stream(stream: TextIO) -> None:
    """Send runner output to ``stream`` for subsequent runs."""
    set_reporter(ConsoleReporter.for_stream(stream))
