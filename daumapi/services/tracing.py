"""Per-call diagnostic trace lines and the wrapper that prints them."""

from __future__ import annotations

import sys
from typing import Callable, Protocol, TextIO

TRACE_PREFIX = "INFO: "


class TraceBuffer:
    """Collects human-readable trace lines for a single search call.

    Lines carry the raw Authorization header and are only written by
    :meth:`flush`.
    """

    def __init__(self, prefix: str = TRACE_PREFIX) -> None:
        self._prefix = prefix
        self._lines: list[str] = []

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    def record(self, message: str) -> None:
        self._lines.append(f"{self._prefix}{message}")

    def flush(self, stream: TextIO | None = None) -> None:
        stream = stream if stream is not None else sys.stdout
        for line in self._lines:
            stream.write(f"{line}\n")
        stream.flush()
        self._lines.clear()

    def __len__(self) -> int:
        return len(self._lines)


class TracedOperation(Protocol):
    def __call__(self, appkey: str, keyword: str, *, trace: TraceBuffer | None = None) -> str: ...


def record(trace: TraceBuffer | None, message: str) -> None:
    """Record on ``trace`` when one is attached to the call."""

    if trace is not None:
        trace.record(message)


def run_with_trace(
    operation: TracedOperation | Callable[..., str],
    appkey: str,
    keyword: str,
    *,
    stream: TextIO | None = None,
) -> str:
    """Run a search operation and print every trace line it produced.

    The result is returned untouched. Lines are written even when the
    operation raises, and the exception propagates.
    """

    trace = TraceBuffer()
    trace.record(f"Tracing {getattr(operation, '__name__', 'operation')} call.")
    try:
        return operation(appkey, keyword, trace=trace)
    finally:
        trace.flush(stream)


__all__ = ["TRACE_PREFIX", "TraceBuffer", "TracedOperation", "record", "run_with_trace"]
