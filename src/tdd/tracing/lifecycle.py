"""OpenTelemetry setup for test runs.

Without :func:`init_tracing` the global no-op tracer provider is used and
spans cost nothing.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.trace import Span, StatusCode

from tdd.tracing.exporters import StreamingFileSpanExporter


if TYPE_CHECKING:
    from tdd.testing.models import RecordBase, TestResult


_exporter: StreamingFileSpanExporter | None = None
_provider: TracerProvider | None = None


def init_tracing(*, service_name: str = "tdd", output_path: Path | str = "traces.jsonl") -> None:
    """Stream spans to ``output_path``; later calls only move the output file."""
    global _exporter, _provider

    if _exporter is not None:
        _exporter.output_path = Path(output_path)
        _exporter.output_path.parent.mkdir(parents=True, exist_ok=True)
        _exporter.output_path.write_text("")
        return

    _exporter = StreamingFileSpanExporter(output_path)
    _provider = TracerProvider(resource=Resource.create({"service.name": service_name}))
    _provider.add_span_processor(SimpleSpanProcessor(_exporter))
    trace.set_tracer_provider(_provider)


def get_tracer(name: str = "tdd") -> trace.Tracer:
    """Get a tracer from the installed provider, or the global one."""
    if _provider is not None:
        return _provider.get_tracer(name)
    return trace.get_tracer(name)


def clear_traces() -> None:
    """Truncate the trace file."""
    if _exporter is not None:
        _exporter.output_path.write_text("")


@contextmanager
def record_span(record: RecordBase, phase: str) -> Iterator[Span]:
    """Open a span around one test body or lifecycle call."""
    with get_tracer().start_as_current_span(f"{phase}.{record.full_name}") as span:
        span.set_attribute("test.name", record.name)
        span.set_attribute("test.suite", record.suite_name)
        span.set_attribute("test.phase", phase)
        yield span


def record_result(span: Span, result: TestResult, error: BaseException | None = None) -> None:
    """Copy the verdict of ``result`` onto ``span``."""
    span.set_attribute("test.status", result.status.value)
    span.set_attribute("test.duration_ms", result.duration_ms)
    if result.record.confirm_line is not None:
        span.set_attribute("test.confirm_line", result.record.confirm_line)
    if result.status.is_failure:
        span.set_status(StatusCode.ERROR, result.reason)
    if error is not None:
        span.record_exception(error)
