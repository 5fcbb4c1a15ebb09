"""gotest2rdjsonl - turn `go test -json` output into reviewdog diagnostics."""

from .converter import DiagnosticBuilder, convert_stream, read_events, write_diagnostic
from .errors import ConfigError, EventDecodeError, Gotest2RdjsonlError
from .location import parse_location
from .models import Diagnostic, Location, Position, Range, Severity, TestEvent
from .window import OutputWindow

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "Diagnostic",
    "DiagnosticBuilder",
    "EventDecodeError",
    "Gotest2RdjsonlError",
    "Location",
    "OutputWindow",
    "Position",
    "Range",
    "Severity",
    "TestEvent",
    "convert_stream",
    "parse_location",
    "read_events",
    "write_diagnostic",
]
