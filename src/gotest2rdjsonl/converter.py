"""Translate `go test -json` events into reviewdog diagnostics.

The translation keeps a small window of the most recent output lines. When a
test fails or is skipped, the window is turned into one diagnostic whose
location is recovered from the buffered lines, and the window is emptied.
"""

from __future__ import annotations

import json
import logging
from typing import IO, Iterable, Iterator

from .config import DEFAULT_BUF_LINES
from .errors import EventDecodeError
from .location import parse_location
from .models import Diagnostic, Severity, TestEvent
from .window import OutputWindow

logger = logging.getLogger(__name__)

# Actions that turn the window into a diagnostic
TERMINATING_SEVERITIES: dict[str, Severity] = {
    "fail": Severity.ERROR,
    "skip": Severity.INFO,
}


class DiagnosticBuilder:
    """Per-run state machine over test events.

    The only state is the output window, so separate builders can run
    side by side without sharing anything.
    """

    def __init__(self, buf_lines: int = DEFAULT_BUF_LINES):
        self.window = OutputWindow(buf_lines)
        self.emitted = 0

    def process(self, event: TestEvent) -> Diagnostic | None:
        """Feed one event; return a diagnostic when one is produced."""
        action = event.action
        if action == "output":
            self.window.push(event)
            return None
        if action in TERMINATING_SEVERITIES:
            diag = self._synthesize(TERMINATING_SEVERITIES[action], self.window.drain_and_clear())
            if diag is None:
                logger.warning(f"event found but cannot determine the location: action={action}")
                return None
            logger.info(f"found diagnostic: {diag}")
            self.emitted += 1
            return diag
        if action == "run":
            return None
        # pass, start, cont, pause, bench, ...
        self.window.drain_and_clear()
        return None

    @staticmethod
    def _synthesize(severity: Severity, events: list[TestEvent]) -> Diagnostic | None:
        diag = Diagnostic(severity=severity)
        for ev in events:
            diag.message += ev.output
            loc = parse_location(ev.output)
            if loc is not None:
                # Later lines are closer to the failure; the last match wins
                diag.location = loc
        if diag.location is None:
            return None
        return diag


def read_events(stream: Iterable[str]) -> Iterator[TestEvent]:
    """Decode one event per non-blank line.

    Raises EventDecodeError on the first record that is not a JSON object,
    or when the stream itself cannot be decoded as text.
    """
    lines = iter(stream)
    lineno = 0
    while True:
        try:
            line = next(lines)
        except StopIteration:
            return
        except UnicodeDecodeError as e:
            raise EventDecodeError(lineno + 1, f"invalid UTF-8 input: {e.reason}") from e
        lineno += 1
        if not line.strip():
            continue
        try:
            data = json.loads(line)
        except json.JSONDecodeError as e:
            raise EventDecodeError(lineno, e.msg) from e
        if not isinstance(data, dict):
            raise EventDecodeError(lineno, f"expected a JSON object, got {type(data).__name__}")
        try:
            event = TestEvent.from_dict(data)
        except (TypeError, ValueError) as e:
            raise EventDecodeError(lineno, str(e)) from e
        logger.debug(
            f"parsed event: action={event.action} test={event.test} "
            f"package={event.package} output={event.output!r}"
        )
        yield event


def write_diagnostic(diag: Diagnostic, sink: IO[str]) -> None:
    """Write one rdjsonl record and flush it."""
    sink.write(json.dumps(diag.to_dict(), ensure_ascii=False, separators=(",", ":")) + "\n")
    sink.flush()


def convert_stream(source: Iterable[str], sink: IO[str], buf_lines: int = DEFAULT_BUF_LINES) -> int:
    """Convert a whole event stream, writing diagnostics as they are found.

    Returns the number of diagnostics written. EventDecodeError propagates;
    diagnostics already written stay written.
    """
    builder = DiagnosticBuilder(buf_lines)
    for event in read_events(source):
        diag = builder.process(event)
        if diag is not None:
            write_diagnostic(diag, sink)
    logger.info(f"found diagnostics: count={builder.emitted}")
    return builder.emitted
