"""Command-line entry point: import test modules, run them, exit with the failure count."""

from __future__ import annotations

import importlib
import importlib.util
import logging
import sys
from contextlib import nullcontext
from pathlib import Path
from types import ModuleType
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from tdd.config import RunnerSettings
from tdd.reports import ConsoleReporter, get_reporter
from tdd.testing import RunReport, Runner
from tdd.tracing import init_tracing

logger = logging.getLogger(__name__)

MAX_EXIT_STATUS = 255


def load_target(target: str) -> ModuleType:
    """Import a dotted module name or a ``.py`` file so its tests register."""
    path = Path(target)
    if path.suffix != ".py":
        return importlib.import_module(target)

    spec = importlib.util.spec_from_file_location(path.stem, path)
    if spec is None or spec.loader is None:
        msg = f"Cannot load module from {path}"
        raise ImportError(msg)
    module = importlib.util.module_from_spec(spec)
    sys.modules[path.stem] = module
    spec.loader.exec_module(module)
    return module


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.command()
@click.argument("targets", nargs=-1)
@click.option("--output",
              type=click.Path(dir_okay=False, path_type=Path),
              help="Write the report to this file instead of stdout")
@click.option("--log-level",
              type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
              help="Framework log level (default: TDD_LOG_LEVEL or WARNING)")
@click.option("--trace/--no-trace",
              default=None,
              help="Record an OpenTelemetry span per test")
@click.option("--trace-output",
              type=click.Path(dir_okay=False, path_type=Path),
              help="JSONL file for recorded spans")
@click.option("--report",
              type=click.Path(dir_okay=False, path_type=Path),
              help="Also write a JSON report to this file")
def main(targets: tuple[str, ...],
         output: Optional[Path],
         log_level: Optional[str],
         trace: Optional[bool],
         trace_output: Optional[Path],
         report: Optional[Path]) -> None:
    """
    Run the tests registered by TARGETS.

    Each target is a dotted module name or a path to a .py file. Importing it
    registers its tests; nothing else is searched.

    \b
    # Run two test modules
    tdd-run tests.math_tests tests/setup_tests.py

    The exit status is the number of failures.
    """
    overrides = {
        "output": output,
        "log_level": log_level.upper() if log_level else None,
        "trace": trace,
        "trace_output": trace_output,
    }
    settings = RunnerSettings(**{k: v for k, v in overrides.items() if v is not None})
    configure_logging(settings.log_level)

    for target in targets:
        try:
            load_target(target)
        except (ImportError, OSError) as e:
            raise click.ClickException(f"Cannot import {target}: {e}") from e
        logger.debug("Loaded %s", target)

    if settings.trace:
        init_tracing(output_path=settings.trace_output)

    stream_context = settings.output.open("w", encoding="utf-8") if settings.output else nullcontext()
    with stream_context as stream:
        reporter = ConsoleReporter.for_stream(stream) if stream is not None else get_reporter()
        result = Runner(reporter, enable_tracing=settings.trace).run()

    if report:
        report.write_text(RunReport.from_run(result).model_dump_json(indent=2), encoding="utf-8")
        logger.info("Report written to %s", report)

    sys.exit(min(result.failed, MAX_EXIT_STATUS))


if __name__ == "__main__":
    main()
