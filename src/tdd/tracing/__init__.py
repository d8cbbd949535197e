from tdd.tracing.lifecycle import (
    clear_traces,
    get_tracer,
    init_tracing,
    record_result,
    record_span,
)

__all__ = [
    "clear_traces",
    "get_tracer",
    "init_tracing",
    "record_result",
    "record_span",
]
