"""Data models for test events and reviewdog diagnostics.

Diagnostics follow the Reviewdog Diagnostic Format (RDF):
https://github.com/reviewdog/reviewdog/blob/master/proto/rdf/jsonschema/Diagnostic.jsonschema
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


@dataclass
class TestEvent:
    """A single record emitted by `go test -json`."""

    __test__ = False  # keep pytest from collecting this as a test class

    action: str = ""
    package: str = ""
    test: str = ""
    output: str = ""
    elapsed: float = 0.0
    time: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> TestEvent:
        """Create a TestEvent from a decoded JSON object.

        Keys are matched case-insensitively and unknown keys are ignored,
        so both `Action` (as written by go test) and `action` are accepted.
        """
        fields = {str(k).lower(): v for k, v in data.items()}
        for name in ("action", "package", "test", "output", "time"):
            value = fields.get(name)
            if value is not None and not isinstance(value, str):
                raise TypeError(f"field {name!r} must be a string, got {type(value).__name__}")
        elapsed = fields.get("elapsed")
        if elapsed is not None and (isinstance(elapsed, bool) or not isinstance(elapsed, (int, float))):
            raise TypeError(f"field 'elapsed' must be a number, got {type(elapsed).__name__}")
        return cls(
            action=fields.get("action") or "",
            package=fields.get("package") or "",
            test=fields.get("test") or "",
            output=fields.get("output") or "",
            elapsed=float(elapsed or 0.0),
            time=fields.get("time") or "",
        )


class Severity(IntEnum):
    UNKNOWN = 0
    ERROR = 1
    WARNING = 2
    INFO = 3


@dataclass
class Position:
    """A line/column position; zero means unset."""

    line: int = 0
    column: int = 0

    def to_dict(self) -> dict:
        data = {}
        if self.line:
            data["line"] = self.line
        if self.column:
            data["column"] = self.column
        return data

    def __str__(self) -> str:
        s = ""
        if self.line > 0:
            s += f" line:{self.line}"
        if self.column > 0:
            s += f" column:{self.column}"
        return s


@dataclass
class Range:
    start: Position = field(default_factory=Position)
    end: Position = field(default_factory=Position)

    def to_dict(self) -> dict:
        return {"start": self.start.to_dict(), "end": self.end.to_dict()}


@dataclass
class Location:
    """A file path with an optional range inside it."""

    path: str
    range: Range | None = None

    def to_dict(self) -> dict:
        return {
            "path": self.path,
            "range": self.range.to_dict() if self.range is not None else None,
        }

    def __str__(self) -> str:
        s = f'path:"{self.path}"'
        if self.range is not None:
            s += f" start:{self.range.start} end:{self.range.end}"
        return s


@dataclass
class Diagnostic:
    """A single rdjsonl record."""

    message: str = ""
    severity: Severity = Severity.UNKNOWN
    location: Location | None = None

    def to_dict(self) -> dict:
        """Convert to the RDF JSON shape."""
        return {
            "message": self.message,
            "severity": int(self.severity),
            "location": self.location.to_dict() if self.location is not None else None,
        }

    def __str__(self) -> str:
        return f"severity:{self.severity.name} location:{{{self.location}}} message:{self.message!r}"
